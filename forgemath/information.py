# forgemath/information.py
"""Information-theoretic quantities in bits (log base 2).

Note the loss functions in `losses` use the natural log.
"""
from typing import Sequence

import numpy as np

from .errors import DimensionMismatchError, check_same_length


def entropy(probabilities: Sequence[float]) -> float:
    """Shannon entropy; zero-probability terms contribute nothing."""
    p = np.asarray(probabilities, dtype=np.float64)
    p = p[p > 0]
    return float(-np.sum(p * np.log2(p)))

def joint_entropy(joint_prob) -> float:
    return entropy(np.asarray(joint_prob, dtype=np.float64).ravel())

def mutual_information(joint_prob, marginal_x: Sequence[float], marginal_y: Sequence[float]) -> float:
    pxy = np.asarray(joint_prob, dtype=np.float64)
    if pxy.shape != (len(marginal_x), len(marginal_y)):
        raise DimensionMismatchError(
            f"joint distribution shape {pxy.shape} does not match marginals "
            f"({len(marginal_x)}, {len(marginal_y)})")
    outer = np.outer(np.asarray(marginal_x, dtype=np.float64), np.asarray(marginal_y, dtype=np.float64))
    mask = pxy > 0
    return float(np.sum(pxy[mask] * np.log2(pxy[mask] / outer[mask])))

def cross_entropy(p: Sequence[float], q: Sequence[float]) -> float:
    check_same_length(p, q, "p and q")
    p = np.asarray(p, dtype=np.float64)
    q = np.asarray(q, dtype=np.float64)
    mask = p > 0
    return float(-np.sum(p[mask] * np.log2(q[mask])))

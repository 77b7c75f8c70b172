# forgemath/regularization.py
from typing import NamedTuple

import numpy as np

from .matrix import Matrix
from .rng import RngLike, get_rng


class DropoutResult(NamedTuple):
    output: Matrix
    mask: Matrix


def l1(weights: Matrix, lam: float) -> float:
    return float(lam * np.sum(np.abs(weights.data)))

def l1_gradient(weights: Matrix, lam: float) -> Matrix:
    return Matrix(lam * np.sign(weights.data))

def l2(weights: Matrix, lam: float) -> float:
    return float(lam / 2 * np.sum(weights.data**2))

def l2_gradient(weights: Matrix, lam: float) -> Matrix:
    return weights.scale(lam)

def elastic_net(weights: Matrix, l1_ratio: float, lam: float) -> float:
    return l1_ratio * l1(weights, lam) + (1 - l1_ratio) * l2(weights, lam)

def dropout(matrix: Matrix, rate: float, rng: RngLike = None) -> DropoutResult:
    """Inverted dropout: kept units are scaled by 1/(1-rate) so the expectation is unchanged."""
    if not 0.0 <= rate < 1.0:
        raise ValueError(f"dropout rate must be in [0, 1), got {rate}")
    keep = get_rng(rng).random(matrix.shape) > rate
    mask = Matrix(np.where(keep, 1.0 / (1.0 - rate), 0.0))
    return DropoutResult(matrix.hadamard(mask), mask)

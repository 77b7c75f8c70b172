# forgemath/statistics.py
"""Descriptive statistics and normalisation over flat sequences.

Variance and covariance are population statistics (divide by N).
"""
import math
from typing import List, Sequence

import numpy as np

from .errors import check_same_length

NORM_EPSILON = 1e-5


def _arr(values) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)


def mean(values: Sequence[float]) -> float:
    return float(np.sum(_arr(values)) / len(values))

def variance(values: Sequence[float]) -> float:
    v = _arr(values)
    return float(np.sum((v - mean(v))**2) / len(v))

def std(values: Sequence[float]) -> float:
    return math.sqrt(variance(values))

def covariance(x: Sequence[float], y: Sequence[float]) -> float:
    check_same_length(x, y, "x and y")
    x, y = _arr(x), _arr(y)
    return float(np.sum((x - mean(x)) * (y - mean(y))) / len(x))

def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation coefficient; nan when either series is constant."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(covariance(x, y)) / (std(x) * std(y)))

def percentile(values: Sequence[float], p: float) -> float:
    """p in [0, 100]; linear interpolation between the floor and ceil ranks."""
    s = np.sort(_arr(values))
    index = (p / 100) * (len(s) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return float(s[lower])
    return float(s[lower] * (upper - index) + s[upper] * (index - lower))

def z_score(values: Sequence[float]) -> List[float]:
    v = _arr(values)
    return ((v - mean(v)) / std(v)).tolist()

def min_max_norm(values: Sequence[float]) -> List[float]:
    v = _arr(values)
    lo, hi = float(v.min()), float(v.max())
    span = (hi - lo) or 1.0
    return ((v - lo) / span).tolist()

def _normalize(values, gamma: float, beta: float, epsilon: float) -> List[float]:
    v = _arr(values)
    return (gamma * (v - mean(v)) / np.sqrt(variance(v) + epsilon) + beta).tolist()

def batch_norm(values: Sequence[float], gamma: float = 1.0, beta: float = 0.0,
               epsilon: float = NORM_EPSILON) -> List[float]:
    return _normalize(values, gamma, beta, epsilon)

def layer_norm(values: Sequence[float], gamma: float = 1.0, beta: float = 0.0,
               epsilon: float = NORM_EPSILON) -> List[float]:
    # same formula as batch_norm over a single flat vector; kept separate for callers
    return _normalize(values, gamma, beta, epsilon)

# forgemath/losses.py
"""Loss functions over parallel predicted/actual sequences (natural log)."""
import numpy as np

from .errors import check_same_length

EPSILON = 1e-15


def _pair(predicted, actual):
    check_same_length(predicted, actual, "predicted and actual")
    return np.asarray(predicted, dtype=np.float64), np.asarray(actual, dtype=np.float64)


def mse(predicted, actual) -> float:
    p, a = _pair(predicted, actual)
    return float(np.mean((p - a)**2))

def mse_gradient(predicted, actual) -> np.ndarray:
    p, a = _pair(predicted, actual)
    return (2.0 / len(p)) * (p - a)

def mae(predicted, actual) -> float:
    p, a = _pair(predicted, actual)
    return float(np.mean(np.abs(p - a)))

def cross_entropy(predicted, actual) -> float:
    """Binary cross-entropy; probabilities clipped to [eps, 1 - eps]."""
    p, a = _pair(predicted, actual)
    p = np.clip(p, EPSILON, 1.0 - EPSILON)
    return float(-np.sum(a * np.log(p) + (1.0 - a) * np.log(1.0 - p)) / len(p))

def categorical_cross_entropy(predicted, actual) -> float:
    p, a = _pair(predicted, actual)
    return float(-np.sum(a * np.log(np.maximum(EPSILON, p))))

def huber(predicted, actual, delta: float = 1.0) -> float:
    p, a = _pair(predicted, actual)
    err = np.abs(p - a)
    per = np.where(err <= delta, 0.5 * err * err, delta * (err - 0.5 * delta))
    return float(np.mean(per))

def kl_divergence(p, q) -> float:
    p, q = _pair(p, q)
    mask = p > EPSILON
    return float(np.sum(p[mask] * np.log(p[mask] / np.maximum(EPSILON, q[mask]))))

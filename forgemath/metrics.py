# forgemath/metrics.py
"""Classification and regression metrics."""
from typing import Sequence

import numpy as np

from .errors import check_same_length
from .logger import get_logger
from .statistics import mean

log = get_logger(__name__)


def accuracy(predictions: Sequence, labels: Sequence) -> float:
    check_same_length(predictions, labels, "predictions and labels")
    correct = sum(1 for p, l in zip(predictions, labels) if p == l)
    # empty input gives nan
    with np.errstate(invalid="ignore"):
        return float(np.float64(correct) / len(predictions))

def _counts(predictions, labels, positive_class):
    check_same_length(predictions, labels, "predictions and labels")
    tp = fp = fn = 0
    for p, l in zip(predictions, labels):
        if p == positive_class and l == positive_class:
            tp += 1
        elif p == positive_class:
            fp += 1
        elif l == positive_class:
            fn += 1
    return tp, fp, fn

def precision(predictions: Sequence, labels: Sequence, positive_class=1) -> float:
    tp, fp, _ = _counts(predictions, labels, positive_class)
    return tp / (tp + fp) if tp + fp else 0.0

def recall(predictions: Sequence, labels: Sequence, positive_class=1) -> float:
    tp, _, fn = _counts(predictions, labels, positive_class)
    return tp / (tp + fn) if tp + fn else 0.0

def f1_score(predictions: Sequence, labels: Sequence, positive_class=1) -> float:
    prec = precision(predictions, labels, positive_class)
    rec = recall(predictions, labels, positive_class)
    return 2 * prec * rec / (prec + rec) if prec + rec else 0.0

def confusion_matrix(predictions: Sequence[int], labels: Sequence[int], num_classes: int) -> np.ndarray:
    """counts[label][prediction]."""
    check_same_length(predictions, labels, "predictions and labels")
    counts = np.zeros((num_classes, num_classes), dtype=np.int64)
    for p, l in zip(predictions, labels):
        counts[l, p] += 1
    return counts

def auc(scores: Sequence[float], labels: Sequence[int]) -> float:
    """ROC AUC via the Mann-Whitney rank statistic (ties get average ranks)."""
    check_same_length(scores, labels, "scores and labels")
    s = np.asarray(scores, dtype=np.float64)
    pos = np.asarray(labels) == 1
    positives = int(pos.sum())
    negatives = len(s) - positives
    if positives == 0 or negatives == 0:
        log.warning("auc undefined with %d positives and %d negatives; returning 0.0", positives, negatives)
        return 0.0
    # ascending ranks, 1-based, ties averaged
    order = np.argsort(s, kind="mergesort")
    ranks = np.empty(len(s), dtype=np.float64)
    sorted_s = s[order]
    i = 0
    while i < len(s):
        j = i
        while j + 1 < len(s) and sorted_s[j + 1] == sorted_s[i]:
            j += 1
        ranks[order[i:j + 1]] = (i + j) / 2.0 + 1.0
        i = j + 1
    sum_ranks = float(ranks[pos].sum())
    return (sum_ranks - positives * (positives + 1) / 2) / (positives * negatives)

def mape(predictions: Sequence[float], actuals: Sequence[float]) -> float:
    """Mean absolute percentage error in percent; zero actuals are skipped."""
    check_same_length(predictions, actuals, "predictions and actuals")
    p = np.asarray(predictions, dtype=np.float64)
    a = np.asarray(actuals, dtype=np.float64)
    nz = a != 0
    if not nz.any():
        return float("nan")
    return float(np.mean(np.abs((a[nz] - p[nz]) / a[nz])) * 100)

def r2_score(predictions: Sequence[float], actuals: Sequence[float]) -> float:
    check_same_length(predictions, actuals, "predictions and actuals")
    p = np.asarray(predictions, dtype=np.float64)
    a = np.asarray(actuals, dtype=np.float64)
    ss_res = np.sum((a - p)**2)
    ss_tot = np.sum((a - mean(a))**2)
    # constant actuals: -inf, or nan on a perfect fit
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(1 - ss_res / ss_tot)

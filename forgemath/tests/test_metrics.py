import math
import numpy as np
import pytest
from forgemath import metrics as M
from forgemath import schedulers as LR
from forgemath.matrix import Matrix
from forgemath.regularization import dropout, elastic_net, l1, l1_gradient, l2, l2_gradient

PRED = [1, 0, 1, 1, 0, 1]
LABELS = [1, 0, 0, 1, 1, 1]

def test_classification_metrics():
    assert M.accuracy(PRED, LABELS) == pytest.approx(4 / 6)
    assert M.precision(PRED, LABELS) == pytest.approx(3 / 4)
    assert M.recall(PRED, LABELS) == pytest.approx(3 / 4)
    assert M.f1_score(PRED, LABELS) == pytest.approx(3 / 4)

def test_undefined_metrics_are_zero():
    assert M.precision([0, 0], [1, 1]) == 0.0
    assert M.recall([1, 1], [0, 0]) == 0.0
    assert M.f1_score([0, 0], [0, 0]) == 0.0

def test_confusion_matrix_is_label_by_prediction():
    cm = M.confusion_matrix(PRED, LABELS, 2)
    assert cm.tolist() == [[1, 1], [1, 3]]

def test_auc():
    assert M.auc([0.9, 0.8, 0.3, 0.1], [1, 1, 0, 0]) == 1.0
    assert M.auc([0.1, 0.2, 0.8, 0.9], [1, 1, 0, 0]) == 0.0
    assert M.auc([0.5, 0.5], [1, 0]) == 0.5
    assert M.auc([0.4, 0.6], [1, 1]) == 0.0

def test_regression_metrics():
    assert M.mape([110.0, 90.0, 5.0], [100.0, 100.0, 0.0]) == pytest.approx(10.0)
    assert M.r2_score([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == 1.0
    assert M.r2_score([2.0, 2.0, 2.0], [1.0, 2.0, 3.0]) == pytest.approx(0.0)

def test_degenerate_inputs_give_nan_or_inf():
    assert M.r2_score([1.0, 2.0, 3.0], [2.0, 2.0, 2.0]) == -math.inf
    assert math.isnan(M.r2_score([2.0, 2.0], [2.0, 2.0]))
    assert math.isnan(M.accuracy([], []))

def test_regularizers():
    w = Matrix([[1.0, -2.0], [0.0, 3.0]])
    assert l1(w, 0.5) == 3.0
    assert l2(w, 0.5) == 3.5
    assert elastic_net(w, 0.25, 0.5) == pytest.approx(0.25 * 3.0 + 0.75 * 3.5)
    assert l1_gradient(w, 0.5).tolist() == [[0.5, -0.5], [0.0, 0.5]]
    assert l2_gradient(w, 2.0) == w.scale(2.0)

def test_dropout_mask():
    x = Matrix.ones(20, 20)
    out, mask = dropout(x, 0.25, rng=np.random.default_rng(3))
    kept = set(np.unique(mask.data).tolist())
    assert kept <= {0.0, 1 / 0.75}
    assert out == x.hadamard(mask)
    assert 0.5 < np.mean(mask.data > 0) < 0.95
    with pytest.raises(ValueError):
        dropout(x, 1.0)

def test_schedulers():
    assert LR.constant(0.1)(500) == 0.1
    assert LR.step_decay(1.0, 0.5, 10)(25) == 0.25
    assert LR.exponential_decay(1.0, 0.1)(10) == pytest.approx(np.exp(-1))
    cos = LR.cosine_annealing(1.0, 0.0, 100)
    assert cos(0) == 1.0 and cos(100) == pytest.approx(0.0) and cos(50) == pytest.approx(0.5)
    warm = LR.warmup_cosine(1.0, 10, 110)
    assert warm(5) == 0.5 and warm(10) == 1.0 and warm(60) == pytest.approx(0.5)
    cyc = LR.cyclic_lr(0.1, 1.0, 10)
    assert cyc(0) == pytest.approx(0.1) and cyc(10) == pytest.approx(1.0) and cyc(20) == pytest.approx(0.1)
    one = LR.one_cycle_lr(1.0, 100)
    assert one(0) == pytest.approx(0.04)
    assert one(30) == pytest.approx(1.0)
    assert one(100) == pytest.approx(0.04 / 100)

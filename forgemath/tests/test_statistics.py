import math
import numpy as np
import pytest
from forgemath import information as info
from forgemath import statistics as st
from forgemath.errors import DimensionMismatchError

DATA = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]

def test_population_moments():
    assert st.mean(DATA) == 5.0
    assert st.variance(DATA) == 4.0
    assert st.std(DATA) == 2.0

def test_covariance_and_correlation():
    x = [1.0, 2.0, 3.0, 4.0]
    y = [2.0, 4.0, 6.0, 8.0]
    assert st.covariance(x, y) == pytest.approx(2.5)
    assert st.correlation(x, y) == pytest.approx(1.0)
    assert st.correlation(x, y[::-1]) == pytest.approx(-1.0)
    with pytest.raises(DimensionMismatchError):
        st.covariance(x, y[:2])

def test_correlation_of_constant_series_is_nan():
    assert math.isnan(st.correlation([1.0, 1.0, 1.0], [1.0, 2.0, 3.0]))

def test_percentile_interpolates():
    v = [10.0, 1.0, 4.0, 7.0]     # sorted: 1 4 7 10
    assert st.percentile(v, 0) == 1.0
    assert st.percentile(v, 100) == 10.0
    assert st.percentile(v, 50) == pytest.approx(5.5)
    assert st.percentile(v, 25) == pytest.approx(3.25)

def test_z_score_and_min_max():
    z = st.z_score(DATA)
    assert np.mean(z) == pytest.approx(0.0, abs=1e-12)
    assert np.std(z) == pytest.approx(1.0)
    assert st.min_max_norm([3.0, 5.0, 4.0]) == [0.0, 1.0, 0.5]
    # constant input: range treated as 1
    assert st.min_max_norm([2.0, 2.0]) == [0.0, 0.0]

def test_batch_and_layer_norm():
    out = st.batch_norm(DATA, gamma=2.0, beta=1.0)
    expect = [2.0 * (x - 5.0) / math.sqrt(4.0 + 1e-5) + 1.0 for x in DATA]
    assert out == pytest.approx(expect)
    assert st.layer_norm(DATA) == pytest.approx(st.batch_norm(DATA))
    # zero variance stays finite thanks to epsilon
    assert st.batch_norm([3.0, 3.0]) == [0.0, 0.0]

def test_entropy_bits():
    assert info.entropy([1.0]) == 0
    assert info.entropy([0.5, 0.5]) == pytest.approx(1.0)
    assert info.entropy([0.25] * 4) == pytest.approx(2.0)
    assert info.entropy([0.5, 0.5, 0.0]) == pytest.approx(1.0)

def test_joint_and_mutual_information():
    independent = [[0.25, 0.25], [0.25, 0.25]]
    assert info.joint_entropy(independent) == pytest.approx(2.0)
    assert info.mutual_information(independent, [0.5, 0.5], [0.5, 0.5]) == pytest.approx(0.0)
    copy = [[0.5, 0.0], [0.0, 0.5]]
    assert info.mutual_information(copy, [0.5, 0.5], [0.5, 0.5]) == pytest.approx(1.0)
    with pytest.raises(DimensionMismatchError):
        info.mutual_information(copy, [1.0], [0.5, 0.5])

def test_cross_entropy_is_base_two():
    assert info.cross_entropy([0.5, 0.5], [0.5, 0.5]) == pytest.approx(1.0)
    assert info.cross_entropy([1.0, 0.0], [0.25, 0.75]) == pytest.approx(2.0)

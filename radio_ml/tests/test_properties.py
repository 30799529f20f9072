import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from radio_ml.dtw import DynamicTimeWarping
from radio_ml.metrics import metric_from_name

values = st.floats(min_value=-100, max_value=100, allow_nan=False, allow_infinity=False)


def sequences(min_size=1, max_size=12):
    return st.lists(values, min_size=min_size, max_size=max_size).map(np.array)


@given(sequences(), sequences())
def test_swapping_inputs_with_symmetric_metric(x, y):
    dtw = DynamicTimeWarping(metric_from_name("manhattan"), numba=False)
    assert dtw.one_to_one(x, y) == pytest.approx(dtw.one_to_one(y, x))


@settings(deadline=None)
@given(st.integers(min_value=1, max_value=10).flatmap(lambda n: st.tuples(sequences(n, n), sequences(n, n))))
def test_swapping_equal_length_inputs(pair):
    x, y = pair
    dtw = DynamicTimeWarping(metric_from_name("euclideansq"))
    assert dtw.one_to_one(x, y) == pytest.approx(dtw.one_to_one(y, x))


@given(sequences())
def test_identity(s):
    dtw = DynamicTimeWarping(metric_from_name("euclidean"), numba=False)
    assert dtw.one_to_one(s, s.copy()) == 0.0


@given(sequences(), sequences())
def test_non_negative(x, y):
    dtw = DynamicTimeWarping(metric_from_name("euclidean"), numba=False)
    assert dtw.one_to_one(x, y) >= 0.0


@given(sequences(), sequences(), values)
def test_padding_never_increases_cost(x, y, pad):
    dtw = DynamicTimeWarping(metric_from_name("manhattan"), numba=False)
    base = dtw.one_to_one(x, y)
    padded = dtw.one_to_one(np.append(x, pad), np.append(y, pad))
    twice = dtw.one_to_one(np.append(x, [pad, pad]), np.append(y, [pad, pad]))
    assert padded <= base + 1e-9
    assert twice == pytest.approx(padded)


small_values = st.one_of(
    st.lists(st.integers(min_value=0, max_value=3), min_size=1, max_size=8).map(np.array),
    st.lists(st.floats(min_value=0, max_value=3, allow_nan=False), min_size=1, max_size=8).map(np.array),
)


@pytest.mark.parametrize("dtype", [np.uint8, np.int32, np.float32, np.float64])
@pytest.mark.parametrize("name", ["euclidean", "euclideansq", "manhattan", "hamming"])
@settings(deadline=None)
@given(x=small_values, y=small_values)
def test_compiled_and_python_paths_agree_exactly(name, dtype, x, y):
    compiled = DynamicTimeWarping(metric_from_name(name, dtype=dtype), numba=True)
    python = DynamicTimeWarping(metric_from_name(name, dtype=dtype), numba=False)
    expected = python.one_to_one(x, y)
    result = compiled.one_to_one(x, y)
    assert result == expected
    assert type(result) is type(expected) is np.dtype(dtype).type


@given(sequences(), sequences())
def test_cost_matrix_corner_is_distance(x, y):
    dtw = DynamicTimeWarping(metric_from_name("chebyshev"), numba=False)
    matrix = dtw.cost_matrix(x, y)
    assert matrix.shape == (len(y), len(x))
    assert matrix[-1, -1] == pytest.approx(dtw.one_to_one(x, y))

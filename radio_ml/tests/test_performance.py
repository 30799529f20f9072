"""Performance benchmarks using pytest-benchmark.

Run with: pytest radio_ml/tests/test_performance.py --benchmark-only
"""

import numpy as np
import pytest
from tslearn.metrics import dtw

from radio_ml.dtw import DynamicTimeWarping
from radio_ml.metrics import metric_from_name


@pytest.fixture
def walk_pair():
    rng = np.random.default_rng(42)
    return np.cumsum(rng.standard_normal(128)), np.cumsum(rng.standard_normal(96))


def test_benchmark_dtw_numba(benchmark, walk_pair):
    x, y = walk_pair
    engine = DynamicTimeWarping(metric_from_name("euclideansq"), numba=True)
    result = benchmark(engine.one_to_one, x, y)
    assert result >= 0
    assert result == pytest.approx(dtw(x, y) ** 2)


def test_benchmark_dtw_python(benchmark, walk_pair):
    x, y = walk_pair
    engine = DynamicTimeWarping(metric_from_name("euclideansq"), numba=False)
    result = benchmark(engine.one_to_one, x, y)
    assert result == pytest.approx(dtw(x, y) ** 2)


def test_benchmark_tslearn_reference(benchmark, walk_pair):
    x, y = walk_pair
    result = benchmark(dtw, x, y)
    assert isinstance(result, float) and result >= 0

import numpy as np
import pandas as pd
import pytest

from radio_ml.io import load_series_from_csv, rolling_windows, sample_indices, subsample


def test_sample_indices_reproducible_and_sorted():
    a = sample_indices(4096, 100)
    b = sample_indices(4096, 100)
    np.testing.assert_array_equal(a, b)
    assert len(np.unique(a)) == 100
    assert np.all(np.diff(a) > 0)
    assert a.min() >= 0 and a.max() < 4096


def test_sample_indices_seed_changes_selection():
    assert not np.array_equal(sample_indices(4096, 50, seed=1), sample_indices(4096, 50, seed=2))


def test_sample_indices_too_many():
    with pytest.raises(ValueError):
        sample_indices(10, 11)


def test_subsample_rows():
    iq = np.arange(5 * 4 * 2).reshape(5, 4, 2)
    picked = subsample(iq, [0, 3])
    assert picked.shape == (2, 4, 2)
    np.testing.assert_array_equal(picked[1], iq[3])


def test_load_series_from_csv(tmp_path):
    path = tmp_path / "series.csv"
    pd.DataFrame({"label": ["a", "b", "c"], "Close": [1.0, 2.5, 3.0]}).to_csv(path, index=False)
    np.testing.assert_array_equal(load_series_from_csv(path), [1.0, 2.5, 3.0])
    np.testing.assert_array_equal(load_series_from_csv(path, "close"), [1.0, 2.5, 3.0])
    with pytest.raises(ValueError):
        load_series_from_csv(path, "volume")


def test_rolling_windows():
    windows = list(rolling_windows(np.arange(10), window=4, stride=3))
    assert len(windows) == 3
    np.testing.assert_array_equal(windows[-1], [6, 7, 8, 9])
    assert list(rolling_windows(np.arange(3), window=4, stride=1)) == []

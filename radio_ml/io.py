"""Data loading utilities feeding sequences to the DTW engine."""

from __future__ import annotations

import pathlib
from typing import Iterable, Optional, Sequence

import numpy as np
import pandas as pd

DEFAULT_SEED = 42


def sample_indices(population: int, num_samples: int, seed: int = DEFAULT_SEED) -> np.ndarray:
    """Return a sorted, reproducible subset of ``range(population)``.

    The same ``seed`` always selects the same indices, so every category of a
    dataset can be subsampled at the same positions.
    """

    if num_samples < 0:
        raise ValueError("num_samples must be non-negative")
    if num_samples > population:
        raise ValueError(f"Cannot draw {num_samples} samples from a population of {population}")
    rng = np.random.default_rng(seed)
    indices = rng.choice(population, size=num_samples, replace=False)
    return np.sort(indices)


def subsample(array: np.ndarray, indices: Sequence[int]) -> np.ndarray:
    """Select ``indices`` along the first axis of ``array``."""

    arr = np.asarray(array)
    return np.take(arr, np.asarray(indices, dtype=np.intp), axis=0)


def load_series_from_csv(path: str | pathlib.Path, column: Optional[str] = None) -> np.ndarray:
    """Load a numeric sequence from a CSV file.

    Column lookup is case-insensitive. Without ``column`` the first numeric
    column is used.
    """

    df = pd.read_csv(path)
    if column is None:
        numeric = df.select_dtypes(include="number").columns
        if len(numeric) == 0:
            raise ValueError(f"No numeric column in {path} (available: {list(df.columns)})")
        col = numeric[0]
    else:
        col = column
        if col not in df.columns:
            lowered = {str(c).lower(): c for c in df.columns}
            alt = lowered.get(column.lower())
            if alt is None:
                raise ValueError(f"Column '{column}' not present in CSV (available: {list(df.columns)})")
            col = alt
    return df[col].to_numpy(dtype=float)


def rolling_windows(series: np.ndarray, window: int, stride: int) -> Iterable[np.ndarray]:
    """Yield rolling windows from the series."""

    n = len(series)
    if window > n:
        return
    for start in range(0, n - window + 1, stride):
        yield series[start : start + window]


__all__ = [
    "DEFAULT_SEED",
    "sample_indices",
    "subsample",
    "load_series_from_csv",
    "rolling_windows",
]

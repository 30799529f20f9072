"""Dynamic time warping distance over a pluggable pointwise metric."""

from __future__ import annotations

from typing import Any, List, Tuple

import numpy as np
from numba import njit

from .metrics import KERNEL_ABS, KERNEL_SQUARED, Metric, metric_from_name, register_metric


class EmptyInputError(ValueError):
    """Raised when either sequence handed to the DTW engine is empty."""


@njit(cache=True)
def _dtw_kernel(x, y, kernel):
    n_cols = x.shape[0]
    n_rows = y.shape[0]
    prev = np.empty(n_cols, dtype=np.float64)
    curr = np.empty(n_cols, dtype=np.float64)
    for r in range(n_rows):
        for c in range(n_cols):
            diff = x[c] - y[r]
            if kernel == KERNEL_ABS:
                dist = abs(diff)
            elif kernel == KERNEL_SQUARED:
                dist = diff * diff
            else:
                dist = 1.0 if diff != 0.0 else 0.0

            if r == 0 and c == 0:
                best = 0.0
            elif r == 0:
                best = curr[c - 1]
            elif c == 0:
                best = prev[c]
            else:
                best = min(prev[c], curr[c - 1], prev[c - 1])
            curr[c] = dist + best
        prev, curr = curr, prev
    return prev[n_cols - 1]


def _is_real(dtype: np.dtype) -> bool:
    return np.issubdtype(dtype, np.floating) or np.issubdtype(dtype, np.integer)


def _min_neighbor(prev: List[Any] | None, curr: List[Any], c: int) -> Any:
    # Neighbours that fall outside the matrix are left out of the minimum.
    candidates = []
    if prev is not None:
        candidates.append(prev[c])  # top
    if c > 0:
        candidates.append(curr[c - 1])  # left
        if prev is not None:
            candidates.append(prev[c - 1])  # top-left
    return min(candidates) if candidates else None


@register_metric
class DynamicTimeWarping(Metric):
    """Elastic alignment distance between two sequences.

    Cell ``(r, c)`` of the cost matrix holds ``child.distance(x[c], y[r])``
    plus the cheapest of its already computed top, left and top-left
    neighbours; the distance is the bottom-right cell. Sequences may have
    different lengths and their elements may be scalars or fixed-size tuples
    (e.g. I/Q pairs).

    Parameters
    ----------
    child_metric:
        Pointwise metric used as unit cost, or its registry name.
    numba:
        Run the recurrence in a compiled kernel when the child metric has a
        scalar kernel, the result type is float64 and both inputs are 1-D
        real arrays.
    """

    NAME = "dtw"

    def __init__(self, child_metric: Metric | str, numba: bool = True, **kwargs: Any) -> None:
        if isinstance(child_metric, str):
            child_metric = metric_from_name(child_metric, **kwargs)
        elif kwargs:
            raise TypeError(f"Unexpected arguments for an already built child metric: {sorted(kwargs)}")
        super().__init__(dtype=child_metric.dtype, is_expensive=True)
        self.child_metric = child_metric
        self.use_numba = bool(numba)

    def is_expensive(self) -> bool:
        return True

    def _prepare(self, x: Any, y: Any) -> Tuple[np.ndarray, np.ndarray]:
        a = np.asarray(x)
        b = np.asarray(y)
        if a.ndim == 0 or b.ndim == 0:
            raise ValueError("DynamicTimeWarping expects sequences, not scalars")
        if a.shape[0] == 0 or b.shape[0] == 0:
            raise EmptyInputError(
                f"DynamicTimeWarping requires non-empty sequences (got lengths {a.shape[0]} and {b.shape[0]})"
            )
        if a.ndim > 2 or b.ndim > 2:
            raise ValueError("DynamicTimeWarping expects 1D sequences or sequences of fixed-size tuples")
        if a.shape[1:] != b.shape[1:]:
            raise ValueError(f"Element shapes differ: {a.shape[1:]} vs {b.shape[1:]}")
        return a, b

    def _compiled(self, a: np.ndarray, b: np.ndarray) -> bool:
        # The kernel accumulates in float64, so other result types stay on the
        # Python path where every cell is stored in the result type.
        return (
            self.use_numba
            and self.child_metric.kernel is not None
            and self.dtype == np.float64
            and a.ndim == 1
            and _is_real(a.dtype)
            and _is_real(b.dtype)
        )

    def one_to_one(self, x: Any, y: Any) -> Any:
        """Return the minimum warping cost between ``x`` and ``y``."""

        a, b = self._prepare(x, y)
        if self._compiled(a, b):
            cost = _dtw_kernel(
                a.astype(np.float64), b.astype(np.float64), self.child_metric.kernel
            )
            return self.dtype.type(cost)

        distance = self.child_metric.distance
        cast = self.dtype.type
        prev: List[Any] | None = None
        for r in range(b.shape[0]):
            curr: List[Any] = []
            for c in range(a.shape[0]):
                dist = cast(distance(a[c], b[r]))
                best = _min_neighbor(prev, curr, c)
                curr.append(dist if best is None else cast(dist + best))
            prev = curr
        return prev[-1]

    def cost_matrix(self, x: Any, y: Any) -> np.ndarray:
        """Return the full accumulated cost matrix of shape ``(len(y), len(x))``."""

        a, b = self._prepare(x, y)
        n_rows, n_cols = b.shape[0], a.shape[0]
        matrix = np.empty((n_rows, n_cols), dtype=self.dtype)
        distance = self.child_metric.distance
        for r in range(n_rows):
            for c in range(n_cols):
                dist = self.dtype.type(distance(a[c], b[r]))
                candidates = []
                if r > 0:
                    candidates.append(matrix[r - 1, c])
                if c > 0:
                    candidates.append(matrix[r, c - 1])
                if r > 0 and c > 0:
                    candidates.append(matrix[r - 1, c - 1])
                matrix[r, c] = dist + min(candidates) if candidates else dist
        return matrix

    def warping_path(self, x: Any, y: Any, matrix: np.ndarray | None = None) -> List[Tuple[int, int]]:
        """Backtrack the optimal warping path as ``(x_index, y_index)`` pairs.

        The path runs from ``(0, 0)`` to ``(len(x) - 1, len(y) - 1)``. On ties
        the diagonal step is preferred. A ``matrix`` already returned by
        :meth:`cost_matrix` for the same pair is reused instead of rebuilt.
        """

        if matrix is None:
            matrix = self.cost_matrix(x, y)
        r, c = matrix.shape[0] - 1, matrix.shape[1] - 1
        path = [(c, r)]
        while r > 0 or c > 0:
            if r == 0:
                c -= 1
            elif c == 0:
                r -= 1
            else:
                moves = [
                    (matrix[r - 1, c - 1], r - 1, c - 1),
                    (matrix[r - 1, c], r - 1, c),
                    (matrix[r, c - 1], r, c - 1),
                ]
                _, r, c = min(moves, key=lambda m: m[0])
            path.append((c, r))
        path.reverse()
        return path

    def __repr__(self) -> str:
        return f"DynamicTimeWarping(child_metric={self.child_metric!r}, numba={self.use_numba})"


__all__ = ["DynamicTimeWarping", "EmptyInputError"]

"""Pointwise metrics and the shared metric capability.

Every metric, pointwise or elastic, exposes the same small surface
(``name``, ``is_expensive``, ``one_to_one``) so that an outer framework can
register and swap them by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Type

import numpy as np

# Scalar kernels understood by the compiled DTW path.
KERNEL_ABS = 0
KERNEL_SQUARED = 1
KERNEL_MISMATCH = 2


def _item(value: Any) -> Any:
    """Return a plain Python number so unsigned inputs never wrap around."""

    return value.item() if isinstance(value, np.generic) else value


def _as_vectors(x: Any, y: Any) -> tuple[np.ndarray, np.ndarray]:
    a = np.asarray(x, dtype=np.float64).ravel()
    b = np.asarray(y, dtype=np.float64).ravel()
    if a.shape != b.shape:
        raise ValueError(f"Metric expects equal-length vectors (got {a.shape[0]} and {b.shape[0]})")
    return a, b


class Metric(ABC):
    """Base class for distance functions.

    Parameters
    ----------
    dtype:
        Result type. Every distance is cast to ``dtype.type`` before it is
        returned.
    is_expensive:
        Informational flag for cost-aware schedulers.
    """

    NAME = ""
    kernel: int | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # A subclass may override the pointwise distance, so a kernel is only
        # trusted when the class declares it itself.
        if "kernel" not in cls.__dict__:
            cls.kernel = None

    def __init__(self, dtype: Any = np.float64, is_expensive: bool = False) -> None:
        self.dtype = np.dtype(dtype)
        self._expensive = bool(is_expensive)

    def name(self) -> str:
        return self.NAME

    def is_expensive(self) -> bool:
        return self._expensive

    @abstractmethod
    def one_to_one(self, x: Any, y: Any) -> Any:
        """Distance between two vectors."""

    def distance(self, a: Any, b: Any) -> Any:
        """Distance between two single elements (scalars or short tuples)."""

        if np.ndim(a) == 0 and np.ndim(b) == 0:
            return self.dtype.type(self._scalar(_item(a), _item(b)))
        return self.one_to_one(a, b)

    def _scalar(self, a: Any, b: Any) -> Any:
        return self.one_to_one((a,), (b,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dtype={self.dtype.name}, is_expensive={self._expensive})"


METRICS: Dict[str, Type[Metric]] = {}


def register_metric(cls: Type[Metric]) -> Type[Metric]:
    """Class decorator adding ``cls`` to :data:`METRICS` under ``cls.NAME``."""

    if not cls.NAME:
        raise ValueError(f"{cls.__name__} has no NAME to register under")
    METRICS[cls.NAME] = cls
    return cls


def metric_from_name(name: str, is_expensive: bool = False, **kwargs: Any) -> Metric:
    """Build a registered metric by name."""

    try:
        cls = METRICS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown metric '{name}' (available: {sorted(METRICS)})") from None
    return cls(is_expensive=is_expensive, **kwargs)


@register_metric
class Euclidean(Metric):
    NAME = "euclidean"
    kernel = KERNEL_ABS

    def one_to_one(self, x: Any, y: Any) -> Any:
        a, b = _as_vectors(x, y)
        return self.dtype.type(np.sqrt(np.sum((a - b) ** 2)))

    def _scalar(self, a: Any, b: Any) -> Any:
        return abs(a - b)


@register_metric
class EuclideanSq(Metric):
    NAME = "euclideansq"
    kernel = KERNEL_SQUARED

    def one_to_one(self, x: Any, y: Any) -> Any:
        a, b = _as_vectors(x, y)
        return self.dtype.type(np.sum((a - b) ** 2))

    def _scalar(self, a: Any, b: Any) -> Any:
        diff = a - b
        return diff * diff


@register_metric
class Manhattan(Metric):
    NAME = "manhattan"
    kernel = KERNEL_ABS

    def one_to_one(self, x: Any, y: Any) -> Any:
        a, b = _as_vectors(x, y)
        return self.dtype.type(np.sum(np.abs(a - b)))

    def _scalar(self, a: Any, b: Any) -> Any:
        return abs(a - b)


@register_metric
class Chebyshev(Metric):
    NAME = "chebyshev"
    kernel = KERNEL_ABS

    def one_to_one(self, x: Any, y: Any) -> Any:
        a, b = _as_vectors(x, y)
        if a.size == 0:
            return self.dtype.type(0)
        return self.dtype.type(np.max(np.abs(a - b)))

    def _scalar(self, a: Any, b: Any) -> Any:
        return abs(a - b)


@register_metric
class Hamming(Metric):
    NAME = "hamming"
    kernel = KERNEL_MISMATCH

    def one_to_one(self, x: Any, y: Any) -> Any:
        a, b = _as_vectors(x, y)
        return self.dtype.type(np.count_nonzero(a != b))

    def _scalar(self, a: Any, b: Any) -> Any:
        return int(a != b)


@register_metric
class Cosine(Metric):
    """Cosine distance ``1 - <x, y> / (|x| |y|)``; undefined for zero vectors."""

    NAME = "cosine"

    def one_to_one(self, x: Any, y: Any) -> Any:
        a, b = _as_vectors(x, y)
        norms = float(np.linalg.norm(a)) * float(np.linalg.norm(b))
        if norms == 0.0:
            raise ValueError("Cosine distance is undefined for zero-norm vectors")
        return self.dtype.type(max(0.0, 1.0 - float(np.dot(a, b)) / norms))


class FunctionMetric(Metric):
    """Wrap a plain ``f(a, b)`` callable as a named pointwise metric."""

    def __init__(
        self,
        func: Callable[[Any, Any], Any],
        name: str | None = None,
        dtype: Any = np.float64,
        is_expensive: bool = False,
    ) -> None:
        super().__init__(dtype=dtype, is_expensive=is_expensive)
        self.func = func
        self._name = name or getattr(func, "__name__", "custom")

    def name(self) -> str:
        return self._name

    def one_to_one(self, x: Any, y: Any) -> Any:
        return self.dtype.type(self.func(x, y))

    def distance(self, a: Any, b: Any) -> Any:
        return self.dtype.type(self.func(a, b))


__all__ = [
    "Metric",
    "FunctionMetric",
    "Euclidean",
    "EuclideanSq",
    "Manhattan",
    "Chebyshev",
    "Hamming",
    "Cosine",
    "METRICS",
    "register_metric",
    "metric_from_name",
    "KERNEL_ABS",
    "KERNEL_SQUARED",
    "KERNEL_MISMATCH",
]

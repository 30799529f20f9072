"""Dynamic time warping distance over pluggable pointwise metrics.

The package exposes a single-pair elastic alignment distance meant to be
dispatched by an outer nearest-neighbour or clustering framework, together
with the pointwise metrics it builds on and a CLI.
"""

from .dtw import DynamicTimeWarping, EmptyInputError
from .metrics import FunctionMetric, METRICS, Metric, metric_from_name, register_metric

__all__ = [
    "DynamicTimeWarping",
    "EmptyInputError",
    "Metric",
    "FunctionMetric",
    "METRICS",
    "metric_from_name",
    "register_metric",
]

"""Runtime benchmarks for the DTW engine."""

from .run_benchmarks import run_benchmark

__all__ = ["run_benchmark"]

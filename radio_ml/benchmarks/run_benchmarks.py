"""Benchmark runner timing the DTW engine against tslearn."""

from __future__ import annotations

import argparse
import json
import pathlib
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

import numpy as np
import pandas as pd
import yaml
from tslearn.metrics import dtw as tslearn_dtw

from ..dtw import DynamicTimeWarping
from ..metrics import metric_from_name
from ..viz import plot_benchmarks

DEFAULT_CONFIG = pathlib.Path(__file__).with_name("config.yaml")


@dataclass
class BenchmarkRecord:
    pair_id: int
    len_x: int
    len_y: int
    method: str
    distance: float
    runtime_ms: float

    def to_dict(self) -> Dict[str, object]:
        return self.__dict__


def _random_walk(rng: np.random.Generator, n: int) -> np.ndarray:
    return np.cumsum(rng.standard_normal(n))


def _timed(func: Callable[[], float], repeats: int) -> Tuple[float, float]:
    result = 0.0
    start = time.perf_counter()
    for _ in range(repeats):
        result = float(func())
    runtime = (time.perf_counter() - start) * 1000 / repeats
    return result, runtime


def run_benchmark(
    config_path: str | pathlib.Path = DEFAULT_CONFIG,
    out_dir: str | pathlib.Path = "bench",
    *,
    numba: bool = True,
) -> Dict[str, object]:
    out_dir = pathlib.Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    with open(config_path, "r", encoding="utf8") as fh:
        config = yaml.safe_load(fh) or {}

    seed = int(config.get("seed", 42))
    repeats = max(1, int(config.get("repeats", 1)))
    metric_name = str(config.get("metric", "euclideansq"))
    lengths = config.get("lengths", [[32, 32]])

    rng = np.random.default_rng(seed)
    engines = {"dtw_python": DynamicTimeWarping(metric_from_name(metric_name), numba=False)}
    if numba:
        engines["dtw_numba"] = DynamicTimeWarping(metric_from_name(metric_name), numba=True)

    records: List[BenchmarkRecord] = []
    errors: List[float] = []
    for pair_id, (len_x, len_y) in enumerate(lengths):
        x = _random_walk(rng, int(len_x))
        y = _random_walk(rng, int(len_y))
        print(f"Pair {pair_id}: lengths ({len_x}, {len_y})")
        engine_dist = None
        for method, engine in engines.items():
            dist, runtime = _timed(lambda: engine.one_to_one(x, y), repeats)
            records.append(BenchmarkRecord(pair_id, int(len_x), int(len_y), method, dist, runtime))
            engine_dist = dist

        if metric_name == "euclideansq":
            # tslearn reports the square root of the squared-euclidean warping cost
            dist, runtime = _timed(lambda: tslearn_dtw(x, y) ** 2, repeats)
            records.append(BenchmarkRecord(pair_id, int(len_x), int(len_y), "tslearn", dist, runtime))
            errors.append(abs(dist - engine_dist))

    df = pd.DataFrame([r.to_dict() for r in records])
    metrics_path = out_dir / "metrics.csv"
    df.to_csv(metrics_path, index=False)

    summary = {
        "records": len(records),
        "methods": sorted({r.method for r in records}),
        "mean_runtime_ms": (
            {k: float(v) for k, v in df.groupby("method")["runtime_ms"].mean().items()} if not df.empty else {}
        ),
        "max_abs_error_vs_tslearn": max(errors) if errors else None,
    }
    summary_path = out_dir / "summary.json"
    with open(summary_path, "w", encoding="utf8") as fh:
        json.dump(summary, fh, indent=2)

    manifest = {"config": config, "numba": numba, "summary": summary}
    manifest_path = out_dir / "manifest.json"
    with open(manifest_path, "w", encoding="utf8") as fh:
        json.dump(manifest, fh, indent=2)

    if not df.empty:
        plot_benchmarks(df, out_dir / "plots")

    return {"metrics": str(metrics_path), "summary": str(summary_path), "manifest": str(manifest_path)}


def main() -> None:  # pragma: no cover - CLI entry
    parser = argparse.ArgumentParser(description="Run DTW benchmarks")
    parser.add_argument("--config", default=str(DEFAULT_CONFIG), help="Path to benchmark YAML")
    parser.add_argument("--out", required=True, help="Output directory")
    parser.add_argument("--no-numba", action="store_true")
    args = parser.parse_args()
    result = run_benchmark(args.config, args.out, numba=not args.no_numba)
    print(f"Benchmark results written to {result['summary']}")


if __name__ == "__main__":  # pragma: no cover
    main()

"""Command line interface for radio_ml."""

from __future__ import annotations

import argparse
import json
import pathlib

import numpy as np

from .benchmarks.run_benchmarks import DEFAULT_CONFIG, run_benchmark
from .dtw import DynamicTimeWarping
from .io import load_series_from_csv
from .metrics import METRICS, metric_from_name
from .viz import plot_alignment


def _engine(args: argparse.Namespace) -> DynamicTimeWarping:
    return DynamicTimeWarping(metric_from_name(args.metric), numba=not args.no_numba)


def _load_pair(args: argparse.Namespace) -> tuple[np.ndarray, np.ndarray]:
    return load_series_from_csv(args.fileA, args.column), load_series_from_csv(args.fileB, args.column)


def cmd_distance(args: argparse.Namespace) -> None:
    x, y = _load_pair(args)
    dist = _engine(args).one_to_one(x, y)
    print(f"DTW distance ({args.metric}): {float(dist):.6f}")


def cmd_align(args: argparse.Namespace) -> None:
    x, y = _load_pair(args)
    engine = _engine(args)
    matrix = engine.cost_matrix(x, y)
    path = engine.warping_path(x, y, matrix)
    detail = {
        "distance": float(matrix[-1, -1]),
        "metric": args.metric,
        "len_x": int(len(x)),
        "len_y": int(len(y)),
        "warp_path": [[int(i), int(j)] for i, j in path],
    }
    out_path = pathlib.Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf8") as fh:
        json.dump(detail, fh, indent=2)
    plot_alignment(x, y, matrix, path, out_path)
    print(f"Alignment written to {out_path}")


def cmd_bench(args: argparse.Namespace) -> None:
    result = run_benchmark(args.config, args.out, numba=not args.no_numba)
    print(f"Benchmark results written to {result['summary']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="radio-ml", description="Dynamic time warping distance")
    sub = parser.add_subparsers(dest="command", required=True)
    pointwise = sorted(name for name in METRICS if name != DynamicTimeWarping.NAME)

    for name, helptext, func in (
        ("distance", "Compute the DTW distance between two CSV files", cmd_distance),
        ("align", "Align two CSV files and save a report", cmd_align),
    ):
        p = sub.add_parser(name, help=helptext)
        p.add_argument("--fileA", required=True)
        p.add_argument("--fileB", required=True)
        p.add_argument("--column", default=None, help="CSV column (default: first numeric)")
        p.add_argument("--metric", choices=pointwise, default="manhattan")
        p.add_argument("--no-numba", action="store_true")
        if name == "align":
            p.add_argument("--out", required=True)
        p.set_defaults(func=func)

    p_bench = sub.add_parser("bench", help="Run benchmark suite")
    p_bench.add_argument("--config", default=str(DEFAULT_CONFIG))
    p_bench.add_argument("--out", required=True)
    p_bench.add_argument("--no-numba", action="store_true")
    p_bench.set_defaults(func=cmd_bench)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":  # pragma: no cover
    main()

"""Visualization utilities for DTW alignments."""

from __future__ import annotations

import pathlib
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

plt.rcParams.update({"figure.autolayout": True})


def _ensure_parent(path: pathlib.Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def plot_alignment(
    X: np.ndarray,
    Y: np.ndarray,
    matrix: np.ndarray,
    path: Sequence[Tuple[int, int]],
    outpath: str | pathlib.Path,
) -> Dict[str, str]:
    """Create a sequence overlay and a cost-matrix heatmap with the warping path."""

    outpath = pathlib.Path(outpath)
    _ensure_parent(outpath)
    base = outpath.stem
    overlay_path = outpath.with_name(f"{base}_overlay.png")
    matrix_path = outpath.with_name(f"{base}_cost_matrix.png")

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(X, label="X", color="C0")
    ax.plot(Y, label="Y", color="C1", alpha=0.7)
    for i, j in path:
        ax.plot([i, j], [X[i], Y[j]], color="0.7", linewidth=0.5)
    ax.set_title("DTW alignment")
    ax.legend()
    fig.savefig(overlay_path)
    plt.close(fig)

    fig, ax = plt.subplots(figsize=(6, 5))
    cax = ax.imshow(matrix, origin="lower", aspect="auto", cmap="magma")
    fig.colorbar(cax, ax=ax)
    if path:
        px, py = zip(*path)
        ax.plot(px, py, color="cyan", linewidth=1.0)
    ax.set_xlabel("X index")
    ax.set_ylabel("Y index")
    ax.set_title("Accumulated cost matrix")
    fig.savefig(matrix_path)
    plt.close(fig)

    return {"overlay": str(overlay_path), "cost_matrix": str(matrix_path)}


def plot_benchmarks(summary: pd.DataFrame, out_dir: str | pathlib.Path) -> List[str]:
    out_dir = pathlib.Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    paths: List[str] = []
    if {"method", "runtime_ms"} <= set(summary.columns):
        fig, ax = plt.subplots(figsize=(8, 4))
        summary.groupby("method")["runtime_ms"].mean().plot.bar(ax=ax)
        ax.set_ylabel("Mean runtime (ms)")
        fig.savefig(out_dir / "runtime_bar.png")
        plt.close(fig)
        paths.append(str(out_dir / "runtime_bar.png"))
    return paths


__all__ = ["plot_alignment", "plot_benchmarks"]

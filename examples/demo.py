"""
DTW Demo Script
===============

This script shows how to compute the dynamic time warping distance between
two sequences of different lengths.

It covers:
1. Building the engine around a pointwise metric.
2. Comparing a sequence against a time-stretched copy of itself.
3. Using I/Q pairs (fixed-size tuples) as sequence elements.
4. Inspecting the cost matrix and warping path.
"""

import numpy as np

from radio_ml import DynamicTimeWarping, metric_from_name
from radio_ml.io import sample_indices


def main():
    # 1. One engine, one pointwise metric
    dtw = DynamicTimeWarping(metric_from_name("manhattan"))

    # 2. A sine wave and a slower copy of it
    t = np.linspace(0, 2 * np.pi, 60)
    slow = np.sin(np.linspace(0, 2 * np.pi, 90))
    print(f"DTW distance (stretched): {dtw.one_to_one(np.sin(t), slow):.4f}")
    print("-" * 40)

    # 3. I/Q samples: each element is an (I, Q) pair
    rng = np.random.default_rng(42)
    frames = rng.standard_normal((16, 128, 2))
    picked = frames[sample_indices(len(frames), 2)]
    iq_dtw = DynamicTimeWarping(metric_from_name("euclidean"))
    print(f"I/Q DTW distance: {iq_dtw.one_to_one(picked[0], picked[1]):.4f}")
    print("-" * 40)

    # 4. Full matrix and path
    x = [1.0, 3.0, 9.0, 2.0, 1.0]
    y = [2.0, 0.0, 0.0, 8.0, 7.0, 2.0]
    print(dtw.cost_matrix(x, y))
    print(f"Warping path: {dtw.warping_path(x, y)}")


if __name__ == "__main__":
    main()

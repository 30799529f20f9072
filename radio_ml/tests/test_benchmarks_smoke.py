import json
import pathlib

from radio_ml.benchmarks.run_benchmarks import DEFAULT_CONFIG, run_benchmark


def test_benchmark_smoke(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("seed: 7\nmetric: euclideansq\nrepeats: 1\nlengths:\n  - [12, 9]\n  - [5, 5]\n", encoding="utf8")
    result = run_benchmark(config, tmp_path / "bench")
    for key in ("metrics", "summary", "manifest"):
        assert pathlib.Path(result[key]).exists()
    summary = json.loads(pathlib.Path(result["summary"]).read_text(encoding="utf8"))
    assert summary["methods"] == ["dtw_numba", "dtw_python", "tslearn"]
    assert summary["max_abs_error_vs_tslearn"] < 1e-6


def test_default_config_ships():
    assert DEFAULT_CONFIG.exists()

# tests/test_suite.py
import numpy as np
import pytest

from bench.bench_suite import BENCHMARKS, TOLERANCES, headline, matrix_runners, validate
from bench.reference import (
    csv_benchmark_split,
    csv_split,
    fft_stats_reference,
    integration_loop,
    json_benchmark_scan,
    json_scan,
    matrix_checksum_loop,
    optimizer_loop,
    simpson_loop,
    trapezoidal_loop,
)
from data.records import CSV_HEADER, csv_row, generate_csv_data, generate_json_data
from linalg.matmul import run_matrix_checksum
from optim.rosenbrock import Lcg, run_optimizer
from pipeline.fft_bench import run_transform_with_stats
from quad.integration import run_integration, simpson, trapezoidal
from textfmt.csv_bench import run_csv_benchmark
from textfmt.json_bench import run_json_benchmark

# --- references agree with the numpy kernels ---

@pytest.mark.parametrize("n", [8, 256, 1024])
def test_fft_reference_stats(n):
    ours = run_transform_with_stats(n)
    ref = fft_stats_reference(n)
    assert ours[:3] == pytest.approx(ref[:3], rel=1e-9)
    assert fft_stats_reference(0) is None

def test_matrix_loop_matches_numpy_checksum():
    ours = run_matrix_checksum(12, np.random.default_rng(5))
    ref = matrix_checksum_loop(12, np.random.default_rng(5))
    assert ref == pytest.approx(ours, rel=1e-10)
    assert matrix_checksum_loop(0) is None

def test_matrix_runners_share_matrices():
    fn, ref = matrix_runners(7)
    assert fn(10) == fn(10)
    assert ref(10) == pytest.approx(fn(10), rel=1e-10)

@pytest.mark.parametrize("n", [1, 2, 7, 100, 1000])
def test_integration_loop_matches(n):
    assert trapezoidal_loop(0.0, 1.0, n) == pytest.approx(trapezoidal(0.0, 1.0, n), rel=1e-10)
    m = n if n % 2 == 0 else n - 1
    assert simpson_loop(0.0, 1.0, m) == pytest.approx(simpson(0.0, 1.0, m), rel=1e-10, abs=1e-15)

    ours = run_integration(n)
    ref = integration_loop(n)
    for key in ("trapezoidal", "simpson", "analytical"):
        assert ref[key] == pytest.approx(ours[key], rel=1e-10, abs=1e-15)
    assert integration_loop(0) is None

@pytest.mark.parametrize("params,iters", [(2, 50), (10, 100), (30, 200)])
def test_optimizer_loop_matches(params, iters):
    ours = run_optimizer(params, iters, Lcg(99))
    ref = optimizer_loop(params, iters, Lcg(99))
    assert ref["final_cost"] == pytest.approx(ours["final_cost"], rel=1e-9)
    assert ref["avg_param"] == pytest.approx(ours["avg_param"], rel=1e-9, abs=1e-12)
    assert np.allclose(ref["params"], ours["params"], rtol=1e-9, atol=1e-12)
    assert optimizer_loop(1, 10) is None
    assert optimizer_loop(10, 0) is None

def test_csv_split_matches_parser():
    good = csv_row(0)
    text = "\n".join([CSV_HEADER, good, "", "2,Record_2,1.0", "0" + good[1:], csv_row(4)]) + "\n"
    count, total = csv_split(text)
    assert count == 2
    assert total == pytest.approx(1.5 + 7.5)

    count, total = csv_split(generate_csv_data(40))
    assert count == 40
    assert total == pytest.approx(1.5 * 40 * 41 / 2)

def test_json_scan_matches_parser():
    count, total = json_scan(generate_json_data(25))
    assert count == 25
    assert total == pytest.approx(3.14159 * 25 * 26 / 2, rel=1e-12)
    assert json_scan("[]") == (0, 0.0)

def test_text_references_match_benchmarks():
    for ours, ref in ((run_csv_benchmark, csv_benchmark_split), (run_json_benchmark, json_benchmark_scan)):
        a = ours(0.01)
        b = ref(0.01)
        assert a["record_count"] == b["record_count"]
        assert a["byte_size"] == b["byte_size"]
        assert a["avg_value"] == pytest.approx(b["avg_value"], rel=1e-12)
        assert ref(0) is None

# --- validation ---

def test_tolerances():
    assert TOLERANCES == {
        "fft": 0.01,
        "matrix": 1e-6,
        "integration": 0.01,
        "optimizer": 0.15,
        "record_count": 0.1,
        "avg_value": 0.01,
    }

@pytest.mark.parametrize("name", ["fft", "integration", "csv", "json"])
def test_validate_passes_on_small_presets(name):
    _, _, sizes, fn, ref = BENCHMARKS[name]
    ok, bad = validate(name, fn(sizes["small"]), ref(sizes["small"]))
    assert ok
    assert bad == []

def test_validate_optimizer_and_matrix():
    _, _, sizes, fn, ref = BENCHMARKS["optimizer"]
    assert validate("optimizer", fn(sizes["small"]), ref(sizes["small"])) == (True, [])

    fn, ref = matrix_runners(0)
    assert validate("matrix", fn(20), ref(20)) == (True, [])

def test_validate_flags_mismatches():
    ok, bad = validate("matrix", 1.0, 1.0 + 1e-5)
    assert not ok
    assert len(bad) == 1

    good = {"record_count": 100, "avg_value": 10.0}
    ok, bad = validate("csv", good, {"record_count": 100, "avg_value": 10.5})
    assert not ok
    assert bad[0].startswith("avg_value index 0")

    # record counts within 10 % still pass
    assert validate("json", good, {"record_count": 95, "avg_value": 10.0}) == (True, [])
    ok, bad = validate("json", good, {"record_count": 80, "avg_value": 10.0})
    assert not ok
    assert bad[0].startswith("record_count")

    ok, bad = validate("optimizer", {"final_cost": 1.0, "convergence_rate": 0.5, "avg_param": 0.9},
                       {"final_cost": 1.2, "convergence_rate": 0.5, "avg_param": 0.9})
    assert not ok

def test_validate_missing_result():
    ok, bad = validate("fft", None, fft_stats_reference(8))
    assert not ok
    assert len(bad) == 1

# --- headline ---

def test_headline_optimizer_reports_distance_to_optimum():
    line = headline("optimizer", {"final_cost": 0.25, "convergence_rate": 0.8, "avg_param": 0.75})
    assert "gap to minimum 0.250000" in line
    assert "off optimum by 0.2500" in line

def test_headline_other_benchmarks():
    assert headline("fft", None) == "no result"
    assert "bin 3" in headline("fft", run_transform_with_stats(8))
    assert headline("matrix", 2.5) == "checksum 2.500000e+00"
    assert headline("csv", {"record_count": 3, "byte_size": 10, "avg_value": 1.0}).startswith("3 records")

def test_optimizer_presets_are_params_then_iterations():
    _, _, sizes, fn, _ = BENCHMARKS["optimizer"]
    assert sizes == {"small": (10, 100), "medium": (100, 1000), "large": (1000, 10000)}
    assert fn(sizes["small"])["params"].shape == (10,)

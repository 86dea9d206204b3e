import argparse
import csv
from pathlib import Path
from datetime import datetime

import numpy as np

from bench.reference import (
    csv_benchmark_split,
    fft_stats_reference,
    integration_loop,
    json_benchmark_scan,
    matrix_checksum_loop,
    optimizer_loop,
)
from bench.timing import compare_results, time_runs, summarize
from linalg.matmul import run_matrix_checksum
from optim.rosenbrock import THEORETICAL_MINIMUM, THEORETICAL_OPTIMAL_PARAM, run_optimizer
from pipeline.fft_bench import run_transform_with_stats
from quad.integration import run_integration
from textfmt.csv_bench import run_csv_benchmark
from textfmt.json_bench import run_json_benchmark

# name -> (label, iterations, {preset: size}, runner, reference)
BENCHMARKS = {
    "fft": (
        "FFT (Fast Fourier Transform)", 5,
        {"small": 256, "medium": 1024, "large": 4096},
        run_transform_with_stats,
        fft_stats_reference,
    ),
    "matrix": (
        "Matrix Multiplication", 1,
        {"small": 50, "medium": 500},
        None,  # both sides need the seeded generator, bound in matrix_runners()
        None,
    ),
    "integration": (
        "Numeric Integration", 3,
        {"small": 1000, "medium": 10000, "large": 100000},
        run_integration,
        integration_loop,
    ),
    "optimizer": (
        "Gradient Descent", 3,
        {"small": (10, 100), "medium": (100, 1000), "large": (1000, 10000)},
        lambda cfg: run_optimizer(*cfg),
        lambda cfg: optimizer_loop(*cfg),
    ),
    "csv": (
        "CSV Parser", 2,
        {"small": 1, "medium": 5, "large": 20},
        run_csv_benchmark,
        csv_benchmark_split,
    ),
    "json": (
        "JSON Parser", 2,
        {"small": 1, "medium": 5, "large": 20},
        run_json_benchmark,
        json_benchmark_scan,
    ),
}

# relative tolerance per benchmark; text formats check record count and mean separately
TOLERANCES = {
    "fft": 0.01,
    "matrix": 1e-6,
    "integration": 0.01,
    "optimizer": 0.15,
    "record_count": 0.1,
    "avg_value": 0.01,
}

def matrix_runners(seed: int):
    # a fresh generator per call, so every run and both sides see the same matrices
    return (
        lambda n: run_matrix_checksum(n, np.random.default_rng(seed)),
        lambda n: matrix_checksum_loop(n, np.random.default_rng(seed)),
    )

def validate(name: str, result, expected):
    """
    Compare a benchmark result against its plain-loop reference.
    returns: (ok, discrepancies)
    """
    if result is None or expected is None:
        return compare_results(None, None)
    if name == "fft":
        return compare_results(result[:3], expected[:3], TOLERANCES["fft"])
    if name == "matrix":
        return compare_results([result], [expected], TOLERANCES["matrix"])
    if name == "integration":
        keys = ("trapezoidal", "simpson")
        return compare_results([result[k] for k in keys], [expected[k] for k in keys], TOLERANCES["integration"])
    if name == "optimizer":
        keys = ("final_cost", "convergence_rate", "avg_param")
        return compare_results([result[k] for k in keys], [expected[k] for k in keys], TOLERANCES["optimizer"])

    ok = True
    bad = []
    for key in ("record_count", "avg_value"):
        key_ok, key_bad = compare_results([result[key]], [expected[key]], TOLERANCES[key])
        ok = ok and key_ok
        bad.extend(f"{key} {msg}" for msg in key_bad)
    return ok, bad

def headline(name: str, result) -> str:
    if result is None:
        return "no result"
    if name == "fft":
        return f"peak {result.peak_magnitude:.3f} @ bin {result.peak_bin}, energy {result.total_energy:.3f}"
    if name == "matrix":
        return f"checksum {result:.6e}"
    if name == "integration":
        return f"trap {result['trapezoidal']:.8f} simpson {result['simpson']:.8f} exact {result['analytical']:.8f}"
    if name == "optimizer":
        gap = result["final_cost"] - THEORETICAL_MINIMUM
        drift = abs(result["avg_param"] - THEORETICAL_OPTIMAL_PARAM)
        return (
            f"cost {result['final_cost']:.6f} (gap to minimum {gap:.6f}) conv {result['convergence_rate']:.4f} "
            f"avg {result['avg_param']:.4f} (off optimum by {drift:.4f})"
        )
    return f"{result['record_count']} records, {result['byte_size']} bytes, avg {result['avg_value']:.3f}"

def main():
    ap = argparse.ArgumentParser(
        description="Run every micro-benchmark at a size preset, time it against a plain-loop reference and validate.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    ap.add_argument("--only", type=str, nargs="*", default=list(BENCHMARKS), choices=list(BENCHMARKS),
                    help="Benchmarks to run")
    ap.add_argument("--size", type=str, default="small", choices=["small", "medium", "large"],
                    help="Size preset")
    ap.add_argument("--iters", type=int, default=0, help="Override iterations per benchmark (0 = preset)")
    ap.add_argument("--seed", type=int, default=0, help="Random seed for the matrix benchmark")
    ap.add_argument("--no-reference", action="store_true", help="Skip the plain-loop references and validation")
    ap.add_argument("--csv", type=str, default="suite_results.csv", help="Filename to store results")
    args = ap.parse_args()

    script_dir = Path(__file__).parent.absolute()
    results_dir = script_dir / "results"
    results_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M")
    results_file = results_dir / f"{Path(args.csv).stem}_{ts}.csv"

    rows = []
    failed = []
    for name in args.only:
        label, iters, sizes, fn, ref = BENCHMARKS[name]
        if args.size not in sizes:
            print(f"{label}: no '{args.size}' preset, skipped")
            continue
        if name == "matrix":
            fn, ref = matrix_runners(args.seed)
        iters = args.iters if args.iters > 0 else iters
        size = sizes[args.size]

        print(f"Running {label} ({args.size}={size}) - {iters} iterations")
        times, result = time_runs(fn, size, iters)
        st = summarize(times)

        print(
            f"  mean {st['mean']:9.3f} ms | median {st['median']:9.3f} ms | "
            f"min {st['min']:9.3f} | max {st['max']:9.3f} | std {st['std']:7.3f}"
        )
        print(f"  {headline(name, result)}")

        ref_mean = ref_median = speedup = ""
        valid = ""
        if not args.no_reference:
            ref_times, expected = time_runs(ref, size, iters)
            ref_st = summarize(ref_times)
            ref_mean, ref_median = ref_st["mean"], ref_st["median"]
            speedup = ref_mean / st["mean"] if st["mean"] > 0 else float("inf")

            ok, bad = validate(name, result, expected)
            valid = int(ok)
            print(f"  reference mean {ref_mean:9.3f} ms | speedup {speedup:8.2f}x | {'PASS' if ok else 'FAIL'}")
            for msg in bad:
                print(f"    {msg}")
            if not ok:
                failed.append(name)

        rows.append((name, args.size, str(size), iters,
                     st["min"], st["max"], st["mean"], st["median"], st["std"], st["p95"], st["p99"],
                     ref_mean, ref_median, speedup, valid))

    with open(results_file, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow([
            "benchmark", "preset", "size", "iters",
            "min_ms", "max_ms", "mean_ms", "median_ms", "std_ms", "p95_ms", "p99_ms",
            "ref_mean_ms", "ref_median_ms", "speedup", "valid"
        ])
        w.writerows(rows)

    print(f"\n" + "="*50)
    print(f"SUITE COMPLETE")
    print("-"*50)
    if not args.no_reference:
        print(f"Validation failures: {', '.join(failed) if failed else 'none'}")
    print(f"Results:\nfile://{results_file.resolve()}")
    print("="*50)

if __name__ == "__main__":
    main()

import argparse
import csv
from pathlib import Path
from datetime import datetime

import numpy as np

from bench.timing import bench_one, peak_mem_one, compare_results
from data.synthetic import generate_signal
from spectral.fft import compute_transform, is_power_of_two
from spectral.stats import analyze

def radix2(x: np.ndarray) -> np.ndarray:
    return compute_transform(x)

def reference(x: np.ndarray) -> np.ndarray:
    return np.fft.fft(x)

def spectrum_error(ours: np.ndarray, ref: np.ndarray) -> float:
    """max |ours - ref| relative to the largest reference bin"""
    scale = max(float(np.max(np.abs(ref))), 1e-12)
    return float(np.max(np.abs(ours - ref))) / scale

def main():
    ap = argparse.ArgumentParser(
        description="Benchmark the radix-2 FFT against numpy.fft on the three-tone test signal.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    sizes = ap.add_argument_group("Transform Sizes")
    sizes.add_argument("--nmin", type=int, default=256, help="Smallest transform size (power of two)")
    sizes.add_argument("--nmax", type=int, default=65536, help="Largest transform size (power of two)")

    timing = ap.add_argument_group("Benchmarking Settings")
    timing.add_argument("--warmup", type=int, default=3, help="Warmup iterations per size")
    timing.add_argument("--iters", type=int, default=10, help="Benchmark iterations to average per run")
    timing.add_argument("--tolerance", type=float, default=0.01, help="Relative tolerance for statistics validation")

    output = ap.add_argument_group("Output")
    output.add_argument("--csv", type=str, default="fft_results.csv", help="Filename to store results")

    args = ap.parse_args()

    if not (is_power_of_two(args.nmin) and is_power_of_two(args.nmax)) or args.nmin > args.nmax:
        print(f"Error: --nmin/--nmax must be powers of two with nmin <= nmax (got {args.nmin}, {args.nmax})")
        return

    # --- Directory & Path Handling ---
    script_dir = Path(__file__).parent.absolute()
    results_dir = script_dir / "results"
    results_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M")
    results_file = results_dir / f"{Path(args.csv).stem}_{ts}.csv"

    # --- Execution Logic ---
    rows = []
    failures = 0
    n = args.nmin
    while n <= args.nmax:
        x = generate_signal(n)

        ours_ms = bench_one(radix2, x, args.warmup, args.iters)
        ref_ms = bench_one(reference, x, args.warmup, args.iters)

        ours_peak = peak_mem_one(radix2, x, max(1, args.warmup // 2), max(3, args.iters // 3))
        ref_peak = peak_mem_one(reference, x, max(1, args.warmup // 2), max(3, args.iters // 3))

        ours = radix2(x)
        ref = reference(x)
        err = spectrum_error(ours, ref)
        s_ours = analyze(ours)
        s_ref = analyze(ref)
        # peak_bin is left out: mirrored bins of a real signal tie up to rounding
        ok, discrepancies = compare_results(s_ours[:3], s_ref[:3], args.tolerance)
        if not ok:
            failures += 1

        rows.append((n, ours_ms, ref_ms, ours_peak, ref_peak, err, int(ok),
                     s_ours.peak_magnitude, s_ours.total_energy, s_ours.average_energy, s_ours.peak_bin))
        print(
            f"n={n:7d} | radix2 {ours_ms:9.3f} ms | numpy {ref_ms:8.3f} ms | "
            f"ratio {ours_ms / max(ref_ms, 1e-9):7.1f}x | "
            f"peak radix2 {ours_peak/1e6:7.2f} MB | peak numpy {ref_peak/1e6:7.2f} MB | "
            f"err {err:.2e} | {'ok' if ok else 'MISMATCH'}"
        )
        for d in discrepancies:
            print(f"    {d}")

        n *= 2

    # --- Save File ---
    with open(results_file, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow([
            "n",
            "radix2_ms", "numpy_ms",
            "radix2_peak_bytes", "numpy_peak_bytes",
            "max_rel_error", "valid",
            "peak_magnitude", "total_energy", "average_energy", "peak_bin"
        ])
        w.writerows(rows)

    # --- Summary Printout ---
    print(f"\n" + "="*50)
    print(f"BENCHMARK COMPLETE")
    print("-"*50)
    print(f"Sizes: {len(rows)} | validation failures: {failures}")
    print(f"Results:\nfile://{results_file.resolve()}")
    print("="*50)

if __name__ == "__main__":
    main()

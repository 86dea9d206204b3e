import argparse

import numpy as np

from pipeline.fft_bench import release, run_transform, run_transform_with_stats
from spectral.fft import is_power_of_two
from spectral.stats import magnitudes

def main():
    ap = argparse.ArgumentParser(
        description="Transform the three-tone test signal once and print its spectral statistics.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    ap.add_argument("--n", type=int, default=1024, help="Transform size (power of two)")
    ap.add_argument("--top", type=int, default=0, help="Also list the N strongest bins")
    args = ap.parse_args()

    if not is_power_of_two(args.n):
        print(f"Error: n must be a positive power of two, got {args.n}")
        return

    stats = run_transform_with_stats(args.n)
    if stats is None:
        print(f"Error: transform of size {args.n} failed")
        return

    print(f"n              {args.n}")
    print(f"peak_magnitude {stats.peak_magnitude:.12g}")
    print(f"total_energy   {stats.total_energy:.12g}")
    print(f"average_energy {stats.average_energy:.12g}")
    print(f"peak_bin       {stats.peak_bin}")

    if args.top > 0:
        spectrum = run_transform(args.n)
        mag = magnitudes(spectrum)
        # stable sort keeps the lower bin first on ties
        order = np.argsort(-mag, kind="stable")[: args.top]
        print("\nbin  magnitude")
        for k in order:
            print(f"{int(k):4d} {mag[k]:.6f}")
        release(spectrum)

if __name__ == "__main__":
    main()

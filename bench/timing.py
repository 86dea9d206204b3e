import math
import time
import tracemalloc

def bench_one(fn, x, warmup: int, iters: int) -> float:
    # warmup (caches, numpy dispatch, FFT planning in the reference)
    for _ in range(warmup):
        fn(x)

    t0 = time.perf_counter()
    for _ in range(iters):
        fn(x)
    dt = time.perf_counter() - t0
    return (dt / iters) * 1000.0  # ms/op

def time_runs(fn, x, iters: int):
    """Wall time of each call in ms, plus the result of the first call."""
    times = []
    first = None
    for i in range(iters):
        t0 = time.perf_counter()
        out = fn(x)
        times.append((time.perf_counter() - t0) * 1000.0)
        if i == 0:
            first = out
    return times, first

def peak_mem_one(fn, x, warmup: int, iters: int) -> int:
    # tracemalloc sees Python allocations only; numpy buffers are tracked via
    # its allocator hooks, good enough to compare trends on one machine.
    tracemalloc.start()

    for _ in range(warmup):
        fn(x)
    for _ in range(iters):
        fn(x)

    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak  # bytes

def summarize(times) -> dict:
    """min, max, mean, median, std (population), p95, p99 of a list of samples."""
    if not times:
        return None
    n = len(times)
    mean = sum(times) / n
    std = math.sqrt(sum((t - mean) ** 2 for t in times) / n)
    s = sorted(times)
    return {
        "min": s[0],
        "max": s[-1],
        "mean": mean,
        "median": s[n // 2],
        "std": std,
        "p95": s[int(n * 0.95)],
        "p99": s[int(n * 0.99)],
    }

def compare_results(a, b, tolerance: float = 0.01, limit: int = 3):
    """
    Element-wise relative comparison of two numeric sequences.

    diff = |a - b| / max(|a|, |b|, 1e-10), flagged when > tolerance.
    returns: (ok, discrepancies[:limit])
    """
    if a is None or b is None:
        return False, ["one or both results are missing"]
    a = list(a)
    b = list(b)
    if len(a) != len(b):
        return False, [f"length mismatch: {len(a)} vs {len(b)}"]

    bad = []
    for i, (x, y) in enumerate(zip(a, b)):
        x = float(x)
        y = float(y)
        if math.isnan(x) or math.isnan(y):
            bad.append(f"index {i}: NaN ({x}, {y})")
            continue
        denom = max(abs(x), abs(y), 1e-10)
        diff = abs(x - y) / denom
        if diff > tolerance:
            bad.append(f"index {i}: {x:.6f} vs {y:.6f} ({diff * 100:.2f}%)")
    return not bad, bad[:limit]

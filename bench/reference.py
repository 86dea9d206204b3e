"""
Plain-loop counterparts of the benchmarked kernels.

Each function returns the same shape of result as the numpy version it shadows,
so the suite can time both and check one against the other. Inputs come from
the same generators (same Lcg seed, same matrix generator seed, same synthetic
text), only the arithmetic is done one element at a time.
"""

import math
import re
import time

import numpy as np

from data.records import CSV_COLUMNS, generate_test_csv, generate_test_json
from data.synthetic import generate_signal
from linalg.matmul import create_random_matrix
from optim.rosenbrock import Lcg
from quad.integration import analytical, integrand
from spectral.stats import analyze

# --- fft ---

def fft_stats_reference(n: int):
    """Spectrum statistics of the synthetic signal, via numpy.fft."""
    signal = generate_signal(n)
    if signal is None:
        return None
    return analyze(np.fft.fft(signal))

# --- matrix multiply ---

def matrix_checksum_loop(size: int, rng: np.random.Generator = None):
    if size <= 0:
        return None
    if rng is None:
        rng = np.random.default_rng()

    A = create_random_matrix(size, rng).tolist()
    B = create_random_matrix(size, rng).tolist()

    total = 0.0
    for i in range(size):
        row = A[i]
        for j in range(size):
            s = 0.0
            for k in range(size):
                s += row[k] * B[k][j]
            total += s
    return total

# --- integration ---

def trapezoidal_loop(a: float, b: float, n: int) -> float:
    if n <= 0:
        return 0.0
    h = (b - a) / n
    s = 0.5 * (integrand(a) + integrand(b))
    for i in range(1, n):
        s += integrand(a + i * h)
    return s * h

def simpson_loop(a: float, b: float, n: int) -> float:
    if n <= 0 or n % 2 != 0:
        return 0.0
    h = (b - a) / n
    s = integrand(a) + integrand(b)
    for i in range(1, n):
        s += (4.0 if i % 2 else 2.0) * integrand(a + i * h)
    return s * h / 3.0

def integration_loop(n: int):
    if n <= 0:
        return None
    a, b = 0.0, 1.0

    trap = trapezoidal_loop(a, b, n)
    simp = simpson_loop(a, b, n if n % 2 == 0 else n - 1)
    exact = analytical(a, b)
    return {
        "trapezoidal": trap,
        "simpson": simp,
        "analytical": exact,
        "trapezoidal_error": abs(trap - exact),
        "simpson_error": abs(simp - exact),
    }

# --- gradient descent ---

def optimizer_loop(param_count: int, iterations: int, rng: Lcg = None):
    if param_count <= 1 or iterations <= 0:
        return None
    if rng is None:
        rng = Lcg()

    n = param_count
    lr = 0.001 / math.sqrt(n)
    x = [(rng.random() - 0.5) * 2.0 for _ in range(n)]

    for _ in range(iterations):
        grad = [0.0] * n
        for i in range(n - 1):
            d = x[i + 1] - x[i] * x[i]
            grad[i] += -400.0 * x[i] * d - 2.0 * (1.0 - x[i])
            grad[i + 1] += 200.0 * d
        for i in range(n):
            x[i] -= lr * grad[i]

    cost = 0.0
    for i in range(n - 1):
        d = x[i + 1] - x[i] * x[i]
        cost += 100.0 * d * d + (1.0 - x[i]) * (1.0 - x[i])

    return {
        "final_cost": cost,
        "convergence_rate": 1.0 / (1.0 + cost),
        "avg_param": sum(x) / n,
        "params": x,
    }

# --- text formats ---

VALUE_RE = re.compile(r'"value":\s*(-?[0-9][0-9.eE+-]*)')

def _summary(records: int, total: float, text: str, parse_ms: float) -> dict:
    return {
        "record_count": records,
        "byte_size": len(text),
        "avg_value": total / records if records else 0.0,
        "parse_time_ms": parse_ms,
    }

def csv_split(text: str):
    """record count and value1 total, splitting on newlines and commas"""
    count = 0
    total = 0.0
    for line in text.split("\n")[1:]:
        fields = line.split(",")
        if len(fields) < CSV_COLUMNS:
            continue
        try:
            rid = int(fields[0].strip())
            value = float(fields[2].strip())
        except ValueError:
            continue
        if rid <= 0:
            continue
        count += 1
        total += value
    return count, total

def csv_benchmark_split(size_mb: float):
    if size_mb <= 0:
        return None
    text = generate_test_csv(size_mb)
    if text is None:
        return None

    t0 = time.perf_counter()
    count, total = csv_split(text)
    parse_ms = (time.perf_counter() - t0) * 1000.0
    return _summary(count, total, text, parse_ms)

def json_scan(text: str):
    """record count and value total, scanning for "id" and "value" keys"""
    count = text.count('"id":')
    total = 0.0
    for m in VALUE_RE.finditer(text):
        total += float(m.group(1))
    return count, total

def json_benchmark_scan(size_mb: float):
    if size_mb <= 0:
        return None
    text = generate_test_json(size_mb)
    if text is None:
        return None

    t0 = time.perf_counter()
    count, total = json_scan(text)
    parse_ms = (time.perf_counter() - t0) * 1000.0
    return _summary(count, total, text, parse_ms)

"""
Trapezoidal and Simpson quadrature of f(x) = (x + 1)^2 on [0, 1].
The exact value is 7/3.
"""

import numpy as np

def integrand(x):
    return x * x + 2.0 * x + 1.0

def analytical(a: float, b: float) -> float:
    return ((b + 1.0) ** 3 - (a + 1.0) ** 3) / 3.0

def trapezoidal(a: float, b: float, n: int) -> float:
    if n <= 0:
        return 0.0
    h = (b - a) / n
    x = a + np.arange(1, n) * h
    s = 0.5 * (integrand(a) + integrand(b)) + float(np.sum(integrand(x)))
    return s * h

def simpson(a: float, b: float, n: int) -> float:
    # n must be even
    if n <= 0 or n % 2 != 0:
        return 0.0
    h = (b - a) / n
    odd = a + np.arange(1, n, 2) * h
    even = a + np.arange(2, n, 2) * h
    s = (
        integrand(a) + integrand(b)
        + 4.0 * float(np.sum(integrand(odd)))
        + 2.0 * float(np.sum(integrand(even)))
    )
    return s * h / 3.0

def run_integration(n: int):
    if n <= 0:
        return None
    a, b = 0.0, 1.0

    trap = trapezoidal(a, b, n)
    simp = simpson(a, b, n if n % 2 == 0 else n - 1)
    exact = analytical(a, b)
    return {
        "trapezoidal": trap,
        "simpson": simp,
        "analytical": exact,
        "trapezoidal_error": abs(trap - exact),
        "simpson_error": abs(simp - exact),
    }

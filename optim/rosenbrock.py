"""
Gradient descent on the n-dimensional Rosenbrock function.

f(x) = sum_i 100*(x[i+1] - x[i]^2)^2 + (1 - x[i])^2
Global minimum f = 0 at x = (1, ..., 1).
"""

import numpy as np

THEORETICAL_MINIMUM = 0.0
THEORETICAL_OPTIMAL_PARAM = 1.0

class Lcg:
    """
    Seedable linear congruential generator using the classic rand() constants.
    Passed around explicitly; there is no global state.
    """
    def __init__(self, seed: int = 12345):
        self.seed = seed

    def random(self) -> float:
        self.seed = (self.seed * 1103515245 + 12345) & 0x7FFFFFFF
        return self.seed / 0x7FFFFFFF

def rosenbrock(x: np.ndarray) -> float:
    term1 = x[1:] - x[:-1] * x[:-1]
    term2 = 1.0 - x[:-1]
    return float(np.sum(100.0 * term1 * term1 + term2 * term2))

def rosenbrock_grad(x: np.ndarray) -> np.ndarray:
    xi = x[:-1]
    xi1 = x[1:]
    grad = np.zeros_like(x)
    grad[:-1] += -400.0 * xi * (xi1 - xi * xi) - 2.0 * (1.0 - xi)
    grad[1:] += 200.0 * (xi1 - xi * xi)
    return grad

def init_params(n: int, rng: Lcg) -> np.ndarray:
    # uniform in [-1, 1]
    return np.array([(rng.random() - 0.5) * 2.0 for _ in range(n)], dtype=np.float64)

def sgd_step(params: dict, grads: dict, lr: float) -> None:
    for k, g in grads.items():
        params[k] -= lr * g

def gradient_descent(n_params: int, n_iterations: int, lr: float, rng: Lcg = None):
    if n_params <= 1 or n_iterations <= 0:
        return None
    if rng is None:
        rng = Lcg()

    params = {"x": init_params(n_params, rng)}
    for _ in range(n_iterations):
        grads = {"x": rosenbrock_grad(params["x"])}
        sgd_step(params, grads, lr)
    return params["x"]

def run_optimizer(param_count: int, iterations: int, rng: Lcg = None):
    """
    returns: {"final_cost", "convergence_rate", "avg_param", "params"} or None
    convergence_rate = 1 / (1 + final_cost), 1.0 at the optimum.
    """
    if param_count <= 1 or iterations <= 0:
        return None

    lr = 0.001 / np.sqrt(param_count)
    x = gradient_descent(param_count, iterations, lr, rng)
    if x is None:
        return None

    final_cost = rosenbrock(x)
    return {
        "final_cost": final_cost,
        "convergence_rate": 1.0 / (1.0 + final_cost),
        "avg_param": float(np.mean(x)),
        "params": x,
    }

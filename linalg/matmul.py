import numpy as np

def create_random_matrix(n: int, rng: np.random.Generator) -> np.ndarray:
    # entries uniform in [0, 100)
    return rng.random((n, n)) * 100.0

def multiply_matrices(A: np.ndarray, B: np.ndarray):
    if A is None or B is None or A.shape[1] != B.shape[0]:
        return None
    return A @ B

def run_matrix_multiply(size: int, rng: np.random.Generator = None):
    """
    C = A @ B for two random (size, size) matrices.
    rng: explicit generator; seed it for reproducible runs
    """
    if size <= 0:
        return None
    if rng is None:
        rng = np.random.default_rng()

    try:
        A = create_random_matrix(size, rng)
        B = create_random_matrix(size, rng)
    except MemoryError:
        return None
    return multiply_matrices(A, B)

def run_matrix_checksum(size: int, rng: np.random.Generator = None):
    C = run_matrix_multiply(size, rng)
    if C is None:
        return None
    return float(np.sum(C))

"""Dense matrix primitives shared by simulation and stationary search.

Matrices are 2-D float64 numpy arrays; distributions are 1 x n row vectors.
Shape mismatches are programming errors and raise MatrixDimensionError.
"""

import numpy as np


class MatrixDimensionError(ValueError):
    """Raised when matrix shapes are incompatible for an operation."""


def _as_matrix(a: np.ndarray, name: str) -> np.ndarray:
    a = np.asarray(a, dtype=np.float64)
    if a.ndim != 2:
        raise MatrixDimensionError(f"{name} must be 2-D, got shape {a.shape}")
    return a


def multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Matrix product a @ b.

    Raises:
        MatrixDimensionError: If a.cols != b.rows.
    """
    a = _as_matrix(a, "a")
    b = _as_matrix(b, "b")
    if a.shape[1] != b.shape[0]:
        raise MatrixDimensionError(
            f"Dimension mismatch: a is {a.shape[0]}x{a.shape[1]}, "
            f"b is {b.shape[0]}x{b.shape[1]}"
        )
    return a @ b


def l1_difference(a: np.ndarray, b: np.ndarray) -> float:
    """Sum of absolute element-wise differences between two same-shape matrices."""
    a = _as_matrix(a, "a")
    b = _as_matrix(b, "b")
    if a.shape != b.shape:
        raise MatrixDimensionError(
            f"Cannot diff matrices of shapes {a.shape} and {b.shape}"
        )
    return float(np.abs(a - b).sum())


def identity(n: int) -> np.ndarray:
    return np.identity(n, dtype=np.float64)


def initial_distribution(n: int, state: int) -> np.ndarray:
    """1 x n point mass on a 1-based state.

    A state outside [1, n] gives the all-zero vector.
    """
    pi = np.zeros((1, n), dtype=np.float64)
    if 1 <= state <= n:
        pi[0, state - 1] = 1.0
    return pi


def uniform_distribution(n: int, states: tuple[int, ...] | list[int]) -> np.ndarray:
    """1 x n distribution spreading mass 1/len(states) over the given states.

    States outside [1, n] keep their share of the mass out of the vector,
    so the result can sum to less than 1.
    """
    pi = np.zeros((1, n), dtype=np.float64)
    if not states:
        return pi
    prob = 1.0 / len(states)
    for state in states:
        if 1 <= state <= n:
            pi[0, state - 1] = prob
    return pi

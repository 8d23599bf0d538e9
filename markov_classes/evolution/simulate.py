"""Step-wise evolution of a distribution under the full transition matrix."""

from collections.abc import Iterable, Iterator

import numpy as np

from markov_classes.matrix.ops import MatrixDimensionError, multiply


def simulate_steps(
    initial: np.ndarray, matrix: np.ndarray, steps: int
) -> Iterator[np.ndarray]:
    """Yield pi*M, pi*M^2, ..., pi*M^steps.

    Each distribution is computed from the previous one, so the sequence is
    lazy and can only be consumed once.

    Args:
        initial: 1 x n starting distribution.
        matrix: n x n transition matrix.
        steps: Number of distributions to produce.

    Yields:
        1 x n float64 arrays, one per step.

    Raises:
        MatrixDimensionError: If initial is not a single row.
    """
    current = np.asarray(initial, dtype=np.float64)
    if current.ndim != 2 or current.shape[0] != 1:
        raise MatrixDimensionError(
            f"initial distribution must be 1 x n, got shape {current.shape}"
        )
    for _ in range(steps):
        current = multiply(current, matrix)
        yield current


def distribution_at(initial: np.ndarray, matrix: np.ndarray, step: int) -> np.ndarray:
    """Distribution after exactly `step` steps, computed via a matrix power."""
    return multiply(initial, np.linalg.matrix_power(matrix, step))


def collect_trajectory(distributions: Iterable[np.ndarray], n: int) -> np.ndarray:
    """Stack 1 x n distributions into a (steps, n) array."""
    rows = [np.asarray(d, dtype=np.float64).reshape(-1) for d in distributions]
    if not rows:
        return np.zeros((0, n), dtype=np.float64)
    return np.vstack(rows)

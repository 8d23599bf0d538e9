"""Plain-text matrix formatting for logs and reports."""

import numpy as np


def format_matrix(matrix: np.ndarray, precision: int = 4) -> str:
    """One line per row, entries fixed-point and space-separated."""
    matrix = np.atleast_2d(np.asarray(matrix, dtype=np.float64))
    return "\n".join(
        " ".join(f"{value:.{precision}f}" for value in row) for row in matrix
    )

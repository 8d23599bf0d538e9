"""Full transition matrix and per-class principal submatrices."""

import numpy as np

from markov_classes.classes.types import CommunicatingClass
from markov_classes.graph.types import Graph
from markov_classes.matrix.ops import MatrixDimensionError


def build_transition_matrix(graph: Graph) -> np.ndarray:
    """Build the dense n x n transition matrix of a graph.

    M[i, j] is the weight of the edge from vertex i+1 to vertex j+1, or 0.
    With duplicate edges the one listed first in the input wins.

    Args:
        graph: Markov graph over vertices 1..n.

    Returns:
        Float64 array of shape (n, n).
    """
    M = np.zeros((graph.n, graph.n), dtype=np.float64)
    for source in graph.vertices():
        # first-listed duplicate is written last
        for destination, weight in reversed(graph.neighbors(source)):
            M[source - 1, destination - 1] = weight
    return M


def extract_submatrix(matrix: np.ndarray, cls: CommunicatingClass) -> np.ndarray:
    """Restrict a matrix to the rows and columns of one class.

    Entry [a, b] is matrix[v_a - 1, v_b - 1] for the class's ordered
    vertices v_1..v_k.

    Raises:
        MatrixDimensionError: If a class vertex lies outside the matrix.
    """
    n_rows, n_cols = matrix.shape
    idx = np.array(cls.vertices, dtype=np.int64) - 1
    if idx.size == 0 or idx.min() < 0 or idx.max() >= min(n_rows, n_cols):
        raise MatrixDimensionError(
            f"Class {cls.name} vertices {list(cls.vertices)} do not fit a "
            f"{n_rows}x{n_cols} matrix"
        )
    return matrix[np.ix_(idx, idx)].copy()

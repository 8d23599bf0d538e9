"""Transition matrices, class submatrices, and dense matrix primitives."""

from markov_classes.matrix.ops import (
    MatrixDimensionError,
    identity,
    initial_distribution,
    l1_difference,
    multiply,
    uniform_distribution,
)
from markov_classes.matrix.transition import (
    build_transition_matrix,
    extract_submatrix,
)

__all__ = [
    "MatrixDimensionError",
    "build_transition_matrix",
    "extract_submatrix",
    "identity",
    "initial_distribution",
    "l1_difference",
    "multiply",
    "uniform_distribution",
]

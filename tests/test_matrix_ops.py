"""Tests for transition matrices, submatrices, and matrix primitives."""

import numpy as np
import pytest

from markov_classes.classes import CommunicatingClass, find_communicating_classes
from markov_classes.graph import Graph, parse_graph
from markov_classes.matrix import (
    MatrixDimensionError,
    build_transition_matrix,
    extract_submatrix,
    identity,
    initial_distribution,
    l1_difference,
    multiply,
    uniform_distribution,
)


class TestPrimitives:
    """multiply / l1_difference / distributions."""

    def test_multiply_identity(self):
        rng = np.random.default_rng(0)
        A = rng.random((5, 5))
        np.testing.assert_allclose(multiply(A, identity(5)), A)
        np.testing.assert_allclose(multiply(identity(5), A), A)

    def test_multiply_rectangular(self):
        row = np.array([[1.0, 2.0, 3.0]])
        M = np.arange(6, dtype=np.float64).reshape(3, 2)
        np.testing.assert_allclose(multiply(row, M), [[16.0, 22.0]])

    def test_multiply_dimension_mismatch(self):
        with pytest.raises(MatrixDimensionError, match="Dimension mismatch"):
            multiply(np.zeros((2, 3)), np.zeros((2, 3)))

    def test_multiply_rejects_vectors(self):
        with pytest.raises(MatrixDimensionError, match="2-D"):
            multiply(np.zeros(3), np.zeros((3, 3)))

    def test_dimension_error_is_value_error(self):
        assert issubclass(MatrixDimensionError, ValueError)

    def test_diff_self_is_zero(self):
        A = np.random.default_rng(1).random((4, 3))
        assert l1_difference(A, A) == 0.0

    def test_diff_sums_absolute_values(self):
        A = np.array([[1.0, 0.0], [0.0, 1.0]])
        B = np.array([[0.0, 1.0], [0.5, 1.0]])
        assert l1_difference(A, B) == pytest.approx(2.5)

    def test_diff_shape_mismatch(self):
        with pytest.raises(MatrixDimensionError):
            l1_difference(np.zeros((2, 2)), np.zeros((2, 3)))

    def test_initial_distribution(self):
        np.testing.assert_array_equal(initial_distribution(4, 2), [[0, 1, 0, 0]])

    def test_initial_distribution_out_of_range_is_zero(self):
        np.testing.assert_array_equal(initial_distribution(3, 7), [[0, 0, 0]])
        np.testing.assert_array_equal(initial_distribution(3, 0), [[0, 0, 0]])

    def test_uniform_distribution(self):
        pi = uniform_distribution(4, (1, 3))
        np.testing.assert_allclose(pi, [[0.5, 0.0, 0.5, 0.0]])
        assert pi.shape == (1, 4)

    def test_uniform_distribution_empty(self):
        np.testing.assert_array_equal(uniform_distribution(2, ()), [[0, 0]])


class TestTransitionMatrix:
    """Full matrix construction from the graph."""

    def test_entries_match_edges(self, reducible10):
        M = build_transition_matrix(reducible10)
        assert M.shape == (10, 10)
        for e in reducible10.edges():
            assert M[e.source - 1, e.destination - 1] == e.weight
        assert M.sum() == pytest.approx(10.0)

    def test_rows_are_stochastic(self, reducible10):
        M = build_transition_matrix(reducible10)
        np.testing.assert_allclose(M.sum(axis=1), np.ones(10))

    def test_missing_edges_are_zero(self, cycle3):
        M = build_transition_matrix(cycle3)
        np.testing.assert_array_equal(
            M, [[0, 1, 0], [0, 0, 1], [1, 0, 0]]
        )

    def test_duplicate_edge_first_wins(self):
        g = Graph.from_edges(2, [(1, 2, 0.3), (1, 2, 0.7), (2, 2, 1.0)])
        M = build_transition_matrix(g)
        assert M[0, 1] == 0.3

    def test_duplicate_edge_from_file_first_wins(self):
        g = parse_graph("2\n1 2 0.3\n1 1 0.7\n1 2 0.7\n2 2 1\n")
        M = build_transition_matrix(g)
        assert M[0, 1] == 0.3
        assert M[0, 0] == 0.7


class TestSubmatrix:
    """Principal submatrix in class vertex order."""

    def test_follows_class_vertex_order(self):
        M = np.arange(16, dtype=np.float64).reshape(4, 4)
        sub = extract_submatrix(M, CommunicatingClass(0, (3, 1)))
        np.testing.assert_array_equal(sub, [[M[2, 2], M[2, 0]], [M[0, 2], M[0, 0]]])

    def test_cycle_submatrix(self, cycle3):
        partition = find_communicating_classes(cycle3)
        M = build_transition_matrix(cycle3)
        cls = partition[0]
        sub = extract_submatrix(M, cls)
        for a, va in enumerate(cls.vertices):
            for b, vb in enumerate(cls.vertices):
                assert sub[a, b] == M[va - 1, vb - 1]

    def test_absorbing_submatrix(self, absorbing_pair):
        partition = find_communicating_classes(absorbing_pair)
        M = build_transition_matrix(absorbing_pair)
        sub = extract_submatrix(M, partition[partition.class_of(2)])
        np.testing.assert_array_equal(sub, [[1.0]])

    def test_is_a_copy(self):
        M = np.eye(3)
        sub = extract_submatrix(M, CommunicatingClass(0, (1, 2)))
        sub[0, 0] = 5.0
        assert M[0, 0] == 1.0

    def test_out_of_bounds_vertex(self):
        with pytest.raises(MatrixDimensionError, match="do not fit"):
            extract_submatrix(np.eye(2), CommunicatingClass(0, (1, 3)))
        with pytest.raises(MatrixDimensionError):
            extract_submatrix(np.eye(2), CommunicatingClass(0, (0,)))

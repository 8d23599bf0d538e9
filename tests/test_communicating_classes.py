"""Tests for Tarjan partitioning, class classification, and Hasse links."""

import numpy as np
import pytest
import scipy.sparse
from scipy.sparse.csgraph import connected_components

from markov_classes.classes import (
    ClassLabel,
    CommunicatingClass,
    Link,
    Partition,
    class_reachability,
    classify_classes,
    condensation_edges,
    find_communicating_classes,
    hasse_links,
    is_irreducible,
)
from markov_classes.graph import Graph


def _random_graph(n: int, density: float, seed: int) -> Graph:
    rng = np.random.default_rng(seed)
    mask = rng.random((n, n)) < density
    edges = [
        (i + 1, j + 1, 1.0) for i, j in zip(*np.nonzero(mask))
    ]
    return Graph.from_edges(n, edges)


def _csr(graph: Graph) -> scipy.sparse.csr_matrix:
    dense = np.zeros((graph.n, graph.n))
    for e in graph.edges():
        dense[e.source - 1, e.destination - 1] = 1.0
    return scipy.sparse.csr_matrix(dense)


def _vertex_sets(partition: Partition) -> set[frozenset[int]]:
    return {frozenset(cls.vertices) for cls in partition}


class TestTarjan:
    """Strongly connected components as communicating classes."""

    def test_cycle_is_one_class(self, cycle3):
        partition = find_communicating_classes(cycle3)
        assert len(partition) == 1
        assert sorted(partition[0].vertices) == [1, 2, 3]

    def test_absorbing_pair_two_classes(self, absorbing_pair):
        partition = find_communicating_classes(absorbing_pair)
        assert _vertex_sets(partition) == {frozenset({1}), frozenset({2})}

    def test_reducible_classes(self, reducible10):
        partition = find_communicating_classes(reducible10)
        assert _vertex_sets(partition) == {
            frozenset({1, 2}),
            frozenset({3}),
            frozenset({4, 6}),
            frozenset({5}),
            frozenset({7, 8}),
            frozenset({9, 10}),
        }

    def test_class_names_follow_finish_order(self, reducible10):
        partition = find_communicating_classes(reducible10)
        assert [cls.name for cls in partition] == [
            f"C{i + 1}" for i in range(len(partition))
        ]
        assert [cls.index for cls in partition] == list(range(len(partition)))

    def test_class_vertex_order_is_pop_order(self, cycle3):
        # Traversal 1 -> 2 -> 3 pushes 1, 2, 3; the root 1 is popped last.
        partition = find_communicating_classes(cycle3)
        assert partition[0].vertices == (3, 2, 1)

    def test_isolated_vertices(self):
        partition = find_communicating_classes(Graph(4))
        assert len(partition) == 4
        assert _vertex_sets(partition) == {frozenset({v}) for v in range(1, 5)}

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_partition_covers_every_vertex_once(self, seed: int):
        graph = _random_graph(40, 0.05, seed)
        partition = find_communicating_classes(graph)
        seen = [v for cls in partition for v in cls.vertices]
        assert sorted(seen) == list(range(1, graph.n + 1))

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_matches_scipy_strong_components(self, seed: int):
        graph = _random_graph(60, 0.04, seed)
        partition = find_communicating_classes(graph)
        n_components, labels = connected_components(
            _csr(graph), directed=True, connection="strong"
        )
        assert len(partition) == n_components
        expected = {
            frozenset(int(v) + 1 for v in np.nonzero(labels == c)[0])
            for c in range(n_components)
        }
        assert _vertex_sets(partition) == expected

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_cross_class_edges_point_to_earlier_classes(self, seed: int):
        graph = _random_graph(50, 0.05, seed)
        partition = find_communicating_classes(graph)
        for e in graph.edges():
            a = partition.class_of(e.source)
            b = partition.class_of(e.destination)
            if a != b:
                assert a > b

    def test_long_path_does_not_recurse(self):
        n = 20_000
        graph = Graph.from_edges(n, [(v, v + 1, 1.0) for v in range(1, n)])
        partition = find_communicating_classes(graph)
        assert len(partition) == n

    def test_long_cycle_single_class(self):
        n = 20_000
        edges = [(v, v % n + 1, 1.0) for v in range(1, n + 1)]
        partition = find_communicating_classes(Graph.from_edges(n, edges))
        assert len(partition) == 1
        assert len(partition[0]) == n


class TestPartition:
    """Partition invariants."""

    def test_rejects_overlap(self):
        with pytest.raises(ValueError, match="appears in both"):
            Partition(
                classes=(
                    CommunicatingClass(0, (1, 2)),
                    CommunicatingClass(1, (2,)),
                ),
                n=2,
            )

    def test_rejects_missing_vertex(self):
        with pytest.raises(ValueError, match="not covered"):
            Partition(classes=(CommunicatingClass(0, (1,)),), n=2)

    def test_class_of(self, reducible10):
        partition = find_communicating_classes(reducible10)
        assert partition.class_of(9) == partition.class_of(10)
        assert partition.class_of(1) != partition.class_of(3)


class TestClassification:
    """Transient / persistent / absorbing labels."""

    def test_cycle_is_persistent(self, cycle3):
        partition = classify_classes(cycle3, find_communicating_classes(cycle3))
        assert partition[0].label is ClassLabel.PERSISTENT
        assert is_irreducible(partition)

    def test_absorbing_pair(self, absorbing_pair):
        partition = classify_classes(
            absorbing_pair, find_communicating_classes(absorbing_pair)
        )
        labels = {cls.vertices: cls.label for cls in partition}
        assert labels[(1,)] is ClassLabel.TRANSIENT
        assert labels[(2,)] is ClassLabel.ABSORBING
        assert labels[(2,)].is_persistent
        assert not is_irreducible(partition)

    def test_reducible_labels(self, reducible10):
        partition = classify_classes(
            reducible10, find_communicating_classes(reducible10)
        )
        labels = {frozenset(cls.vertices): cls.label for cls in partition}
        assert labels[frozenset({1, 2})] is ClassLabel.TRANSIENT
        assert labels[frozenset({3})] is ClassLabel.TRANSIENT
        assert labels[frozenset({5})] is ClassLabel.TRANSIENT
        assert labels[frozenset({7, 8})] is ClassLabel.TRANSIENT
        assert labels[frozenset({4, 6})] is ClassLabel.PERSISTENT
        assert labels[frozenset({9, 10})] is ClassLabel.PERSISTENT
        assert {frozenset(c.vertices) for c in partition.persistent_classes()} == {
            frozenset({4, 6}),
            frozenset({9, 10}),
        }

    def test_zero_weight_edge_still_leaves_class(self):
        g = Graph.from_edges(2, [(1, 1, 1.0), (1, 2, 0.0), (2, 2, 1.0)])
        partition = classify_classes(g, find_communicating_classes(g))
        labels = {cls.vertices: cls.label for cls in partition}
        assert labels[(1,)] is ClassLabel.TRANSIENT

    def test_state_without_transitions_is_absorbing(self):
        g = Graph.from_edges(2, [(1, 2, 1.0)])
        partition = classify_classes(g, find_communicating_classes(g))
        labels = {cls.vertices: cls.label for cls in partition}
        assert labels[(2,)] is ClassLabel.ABSORBING

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_persistent_iff_closed(self, seed: int):
        graph = _random_graph(30, 0.06, seed)
        partition = classify_classes(graph, find_communicating_classes(graph))
        for cls in partition:
            members = set(cls.vertices)
            closed = all(
                d in members for v in cls.vertices for d, _ in graph.neighbors(v)
            )
            assert cls.is_persistent == closed
            assert (cls.label is ClassLabel.ABSORBING) == (closed and len(cls) == 1)

    def test_labels_do_not_change_partition(self, reducible10):
        raw = find_communicating_classes(reducible10)
        labeled = classify_classes(reducible10, raw)
        assert [c.vertices for c in raw] == [c.vertices for c in labeled]
        assert all(c.label is None for c in raw)


class TestHasseLinks:
    """Transitive reduction of the class graph."""

    def test_single_class_has_no_links(self, cycle3):
        partition = find_communicating_classes(cycle3)
        assert hasse_links(cycle3, partition) == []

    def test_shortcut_edge_removed(self):
        g = Graph.from_edges(
            3, [(1, 2, 0.5), (1, 3, 0.5), (2, 3, 1.0), (3, 3, 1.0)]
        )
        partition = find_communicating_classes(g)
        c1, c2, c3 = (partition.class_of(v) for v in (1, 2, 3))
        assert condensation_edges(g, partition) == {(c1, c2), (c1, c3), (c2, c3)}
        assert set(hasse_links(g, partition)) == {Link(c1, c2), Link(c2, c3)}

    def test_reducible_links(self, reducible10):
        partition = find_communicating_classes(reducible10)
        c = partition.class_of
        links = {(l.source, l.destination) for l in hasse_links(reducible10, partition)}
        assert links == {
            (c(1), c(3)),
            (c(1), c(4)),
            (c(3), c(5)),
            (c(5), c(7)),
            (c(7), c(9)),
        }

    def test_links_sorted(self, reducible10):
        partition = find_communicating_classes(reducible10)
        links = hasse_links(reducible10, partition)
        assert links == sorted(links)

    def test_reachability_excludes_self(self):
        reach = class_reachability(3, {(2, 1), (1, 0)})
        assert reach == [set(), {0}, {0, 1}]

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_links_are_cover_relation(self, seed: int):
        graph = _random_graph(40, 0.05, seed)
        partition = find_communicating_classes(graph)
        edges = condensation_edges(graph, partition)
        reach = class_reachability(len(partition), edges)
        links = hasse_links(graph, partition)

        for link in links:
            assert link.source != link.destination
            assert (link.source, link.destination) in edges
            # No alternate multi-hop path.
            assert not any(
                link.destination in reach[c]
                for c in reach[link.source]
                if c != link.destination
            )
            # Acyclic: destination never reaches back to source.
            assert link.source not in reach[link.destination]

        # The links generate the same reachability as the full class graph.
        link_reach = class_reachability(
            len(partition), {(l.source, l.destination) for l in links}
        )
        assert link_reach == reach

"""Class-level condensation graph and its Hasse (covering) links.

Class A links to class B when some state of A has a transition into B.
The condensation is acyclic because Tarjan finishes classes in reverse
topological order. A direct link A -> B is redundant, and dropped, when
A reaches B through some third class.
"""

import logging

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import breadth_first_order

from markov_classes.classes.types import Link, Partition
from markov_classes.graph.types import Graph

log = logging.getLogger(__name__)


def condensation_edges(graph: Graph, partition: Partition) -> set[tuple[int, int]]:
    """Distinct (source_class, destination_class) pairs with source != destination."""
    edges: set[tuple[int, int]] = set()
    for edge in graph.edges():
        a = partition.class_of(edge.source)
        b = partition.class_of(edge.destination)
        if a != b:
            edges.add((a, b))
    return edges


def condensation_matrix(
    n_classes: int, edges: set[tuple[int, int]]
) -> scipy.sparse.csr_matrix:
    """Sparse 0/1 adjacency matrix of the class graph."""
    pairs = np.array(sorted(edges), dtype=np.int64).reshape(-1, 2)
    return scipy.sparse.csr_matrix(
        (np.ones(len(pairs)), (pairs[:, 0], pairs[:, 1])),
        shape=(n_classes, n_classes),
    )


def class_reachability(
    n_classes: int, edges: set[tuple[int, int]]
) -> list[set[int]]:
    """Classes reachable from each class in one or more hops.

    Uses breadth-first search over the condensation. Since the condensation
    is acyclic, a class never reaches itself.
    """
    adj = condensation_matrix(n_classes, edges)
    reach: list[set[int]] = []
    for a in range(n_classes):
        order = breadth_first_order(
            adj, a, directed=True, return_predecessors=False
        )
        reach.append({int(c) for c in order if c != a})
    return reach


def hasse_links(graph: Graph, partition: Partition) -> list[Link]:
    """Transitive reduction of the class graph.

    Args:
        graph: Markov graph.
        partition: Its communicating classes.

    Returns:
        Links sorted by (source, destination) class index.
    """
    n_classes = len(partition)
    edges = condensation_edges(graph, partition)
    reach = class_reachability(n_classes, edges)

    links: list[Link] = []
    for a, b in sorted(edges):
        redundant = any(b in reach[c] for c in reach[a] if c != b)
        if redundant:
            log.debug("Dropping implied link C%d -> C%d", a + 1, b + 1)
            continue
        links.append(Link(source=a, destination=b))

    log.info(
        "Condensation: %d class edges reduced to %d Hasse links",
        len(edges),
        len(links),
    )
    return links

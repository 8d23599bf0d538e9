"""Graph data structures for weighted directed Markov graphs."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Edge:
    """A single weighted transition between two 1-based vertex IDs."""

    source: int
    destination: int
    weight: float  # transition probability in [0, 1]


class Graph:
    """Weighted directed graph over vertices 1..n stored as adjacency lists.

    Built once (by the loader or from_edges) and treated as read-only by
    everything downstream. Each adjacency list keeps insertion order, and
    duplicate (source, destination) edges are kept as separate entries.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"graph needs at least one vertex, got n={n}")
        self.n = n
        self._adjacency: list[list[tuple[int, float]]] = [[] for _ in range(n)]

    @classmethod
    def from_edges(
        cls, n: int, edges: Iterable[tuple[int, int, float]]
    ) -> "Graph":
        """Build a graph from (source, destination, weight) triples."""
        graph = cls(n)
        for source, destination, weight in edges:
            graph.add_edge(source, destination, weight)
        return graph

    def _check_vertex(self, vertex: int) -> None:
        if not 1 <= vertex <= self.n:
            raise ValueError(f"vertex {vertex} outside [1, {self.n}]")

    def add_edge(self, source: int, destination: int, weight: float) -> None:
        """Append (destination, weight) to the source vertex's adjacency list."""
        self._check_vertex(source)
        self._check_vertex(destination)
        self._adjacency[source - 1].append((destination, float(weight)))

    def neighbors(self, vertex: int) -> tuple[tuple[int, float], ...]:
        """Outgoing (destination, weight) pairs of a vertex in insertion order."""
        self._check_vertex(vertex)
        return tuple(self._adjacency[vertex - 1])

    def vertices(self) -> range:
        return range(1, self.n + 1)

    def edges(self) -> Iterator[Edge]:
        """Iterate every edge, source-major, in adjacency order."""
        for source in self.vertices():
            for destination, weight in self._adjacency[source - 1]:
                yield Edge(source, destination, weight)

    @property
    def n_edges(self) -> int:
        return sum(len(adj) for adj in self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(n={self.n}, edges={self.n_edges})"

"""Communicating classes via Tarjan's strongly connected components algorithm.

The depth-first traversal runs on an explicit work stack of
(vertex, neighbor iterator) frames instead of recursion, so a long simple
path cannot exhaust the interpreter's recursion limit. Discovery indices,
low-links and the component stack behave exactly as in the recursive
formulation.
"""

import logging
from collections.abc import Iterator

from markov_classes.classes.types import CommunicatingClass, Partition
from markov_classes.graph.types import Graph

log = logging.getLogger(__name__)

_UNVISITED = -1


class _TarjanState:
    """Mutable traversal state for one run, indexed by 1-based vertex ID."""

    def __init__(self, n: int) -> None:
        self.index = [_UNVISITED] * (n + 1)
        self.lowlink = [_UNVISITED] * (n + 1)
        self.on_stack = [False] * (n + 1)
        self.counter = 0
        self.stack: list[int] = []
        self.components: list[tuple[int, ...]] = []

    def discover(self, vertex: int) -> None:
        self.index[vertex] = self.counter
        self.lowlink[vertex] = self.counter
        self.counter += 1
        self.stack.append(vertex)
        self.on_stack[vertex] = True

    def close_component(self, root: int) -> None:
        """Pop the stack down to and including root as one component."""
        members: list[int] = []
        while True:
            vertex = self.stack.pop()
            self.on_stack[vertex] = False
            members.append(vertex)
            if vertex == root:
                break
        self.components.append(tuple(members))


def _neighbor_ids(graph: Graph, vertex: int) -> Iterator[int]:
    return (destination for destination, _ in graph.neighbors(vertex))


def _strongconnect(graph: Graph, root: int, state: _TarjanState) -> None:
    """Run one depth-first traversal from an unvisited root."""
    state.discover(root)
    frames: list[tuple[int, Iterator[int]]] = [(root, _neighbor_ids(graph, root))]

    while frames:
        vertex, pending = frames[-1]

        descended = False
        for neighbor in pending:
            if state.index[neighbor] == _UNVISITED:
                state.discover(neighbor)
                frames.append((neighbor, _neighbor_ids(graph, neighbor)))
                descended = True
                break
            if state.on_stack[neighbor]:
                state.lowlink[vertex] = min(
                    state.lowlink[vertex], state.index[neighbor]
                )
        if descended:
            continue

        # All edges of vertex processed: this is the "return" of the call.
        frames.pop()
        if state.lowlink[vertex] == state.index[vertex]:
            state.close_component(vertex)
        if frames:
            parent = frames[-1][0]
            state.lowlink[parent] = min(state.lowlink[parent], state.lowlink[vertex])


def find_communicating_classes(graph: Graph) -> Partition:
    """Partition the vertices of a graph into communicating classes.

    Classes are numbered in the order their traversal finished. Every edge
    between two different classes goes from a higher class index to a lower
    one, so the class graph is acyclic.

    Args:
        graph: Markov graph over vertices 1..n.

    Returns:
        Unlabeled Partition covering every vertex exactly once.
    """
    state = _TarjanState(graph.n)
    for vertex in graph.vertices():
        if state.index[vertex] == _UNVISITED:
            _strongconnect(graph, vertex, state)

    classes = tuple(
        CommunicatingClass(index=i, vertices=members)
        for i, members in enumerate(state.components)
    )
    log.debug(
        "Tarjan: %d vertices visited, %d classes found", state.counter, len(classes)
    )
    return Partition(classes=classes, n=graph.n)

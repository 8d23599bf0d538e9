"""Text graph loader.

The input format is whitespace separated: the first token is the vertex
count N, followed by "start end weight" triples (1-based vertex IDs, float
weight) repeated until end of input. Line breaks carry no meaning.
"""

import logging
from pathlib import Path

from markov_classes.graph.types import Graph

log = logging.getLogger(__name__)


class GraphLoadError(Exception):
    """Raised when a graph description is missing or cannot be parsed."""


def parse_graph(text: str, source: str = "<string>") -> Graph:
    """Parse a graph description into a Graph.

    Args:
        text: Full contents of a graph description.
        source: Name used in error messages.

    Returns:
        Graph with one adjacency entry per triple, in file order.

    Raises:
        GraphLoadError: If the vertex count or any triple is malformed, or a
            triple references a vertex outside [1, N].
    """
    tokens = text.split()
    if not tokens:
        raise GraphLoadError(f"{source}: empty graph description")

    try:
        n = int(tokens[0])
    except ValueError:
        raise GraphLoadError(
            f"{source}: could not read number of vertices from {tokens[0]!r}"
        ) from None
    if n < 1:
        raise GraphLoadError(f"{source}: number of vertices must be >= 1, got {n}")

    graph = Graph(n)
    body = tokens[1:]
    n_complete = len(body) // 3 * 3
    if n_complete != len(body):
        log.warning(
            "%s: ignoring %d trailing token(s) that do not form a full triple",
            source,
            len(body) - n_complete,
        )

    for offset in range(0, n_complete, 3):
        triple = body[offset : offset + 3]
        edge_number = offset // 3 + 1
        try:
            start, end, weight = int(triple[0]), int(triple[1]), float(triple[2])
        except ValueError:
            raise GraphLoadError(
                f"{source}: malformed edge #{edge_number}: {' '.join(triple)}"
            ) from None
        if not (1 <= start <= n and 1 <= end <= n):
            raise GraphLoadError(
                f"{source}: edge #{edge_number} ({start} -> {end}) references a "
                f"vertex outside [1, {n}]"
            )
        graph.add_edge(start, end, weight)

    log.debug("Parsed %s: n=%d, edges=%d", source, graph.n, graph.n_edges)
    return graph


def load_graph(path: str | Path) -> Graph:
    """Read and parse a graph description file.

    Raises:
        GraphLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise GraphLoadError(f"could not open {path} for reading: {e}") from e

    graph = parse_graph(text, source=str(path))
    log.info("Graph loaded from %s (n=%d, edges=%d)", path, graph.n, graph.n_edges)
    return graph

"""Best-effort Markov validity checks for a loaded graph.

A Markov graph has, for every vertex, outgoing weights that are
probabilities and sum to 1. Problems are reported, not repaired.
"""

import logging

import numpy as np

from markov_classes.graph.types import Graph

log = logging.getLogger(__name__)


class GraphValidationError(Exception):
    """Raised in strict mode when a graph is not a valid Markov graph."""


def validate_markov_graph(graph: Graph, tolerance: float = 0.01) -> list[str]:
    """Validate a graph against Markov transition constraints.

    Checks:
    1. Every weight lies in [0, 1]
    2. Every vertex has at least one outgoing transition
    3. Outgoing weights of each vertex sum to 1 within tolerance

    Args:
        graph: Graph to check.
        tolerance: Allowed absolute deviation of each outgoing sum from 1.

    Returns:
        List of error strings (empty = valid Markov graph).
    """
    errors: list[str] = []

    for edge in graph.edges():
        if not 0.0 <= edge.weight <= 1.0:
            errors.append(
                f"Edge {edge.source} -> {edge.destination} has weight "
                f"{edge.weight:.4f} outside [0, 1]"
            )

    for vertex in graph.vertices():
        weights = np.array([w for _, w in graph.neighbors(vertex)], dtype=np.float64)
        if weights.size == 0:
            errors.append(f"Vertex {vertex} has no transitions")
            continue
        total = weights.sum()
        if abs(total - 1.0) > tolerance:
            errors.append(
                f"Outgoing probabilities of vertex {vertex} sum to {total:.2f}"
            )

    if errors:
        log.debug("Markov validation found %d problem(s)", len(errors))
    return errors


def check_markov_graph(
    graph: Graph, tolerance: float = 0.01, strict: bool = False
) -> list[str]:
    """Run validate_markov_graph and log or raise on problems.

    Raises:
        GraphValidationError: If strict and any problem was found.
    """
    errors = validate_markov_graph(graph, tolerance)
    if errors and strict:
        raise GraphValidationError(
            "The graph is not a Markov graph: " + "; ".join(errors)
        )
    for error in errors:
        log.warning("%s", error)
    if errors:
        log.warning("The graph is not a Markov graph (%d problems)", len(errors))
    else:
        log.info("The graph is a Markov graph")
    return errors

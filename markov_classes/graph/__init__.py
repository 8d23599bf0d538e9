"""Markov graph model: adjacency-list storage, text loading, and validity checks."""

from markov_classes.graph.loader import GraphLoadError, load_graph, parse_graph
from markov_classes.graph.types import Edge, Graph
from markov_classes.graph.validation import (
    GraphValidationError,
    check_markov_graph,
    validate_markov_graph,
)

__all__ = [
    "Edge",
    "Graph",
    "GraphLoadError",
    "GraphValidationError",
    "check_markov_graph",
    "load_graph",
    "parse_graph",
    "validate_markov_graph",
]

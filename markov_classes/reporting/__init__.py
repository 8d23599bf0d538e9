"""Derived artifacts: Mermaid diagrams, CSV trajectories, and the text report."""

from markov_classes.reporting.console import format_matrix
from markov_classes.reporting.export import export_trajectory_csv
from markov_classes.reporting.mermaid import (
    graph_to_mermaid,
    hasse_to_mermaid,
    vertex_label,
    write_mermaid,
)
from markov_classes.reporting.summary import (
    build_report_context,
    generate_text_report,
    render_text_report,
)

__all__ = [
    "build_report_context",
    "export_trajectory_csv",
    "format_matrix",
    "generate_text_report",
    "graph_to_mermaid",
    "hasse_to_mermaid",
    "render_text_report",
    "vertex_label",
    "write_mermaid",
]

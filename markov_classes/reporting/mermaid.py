"""Mermaid flowchart rendering of the chain and of its class diagram."""

from pathlib import Path

from markov_classes.classes.types import Link, Partition
from markov_classes.graph.types import Graph

_FRONT_MATTER = (
    "---\n"
    "config:\n"
    "   layout: elk\n"
    "   theme: neo\n"
    "   look: neo\n"
    "---\n"
    "\n"
    "flowchart LR\n"
)


def vertex_label(vertex: int) -> str:
    """Spreadsheet-style node ID: 1 -> A, 26 -> Z, 27 -> AA, 28 -> AB."""
    if vertex < 1:
        raise ValueError(f"vertex IDs are 1-based, got {vertex}")
    letters = []
    i = vertex - 1
    while i >= 0:
        letters.append(chr(ord("A") + i % 26))
        i = i // 26 - 1
    return "".join(reversed(letters))


def graph_to_mermaid(graph: Graph) -> str:
    """Render every vertex as a circle node and every edge with its weight."""
    lines = [f"{vertex_label(v)}(({v}))" for v in graph.vertices()]
    lines.append("")
    lines.extend(
        f"{vertex_label(e.source)} -->|{e.weight:.2f}|{vertex_label(e.destination)}"
        for e in graph.edges()
    )
    return _FRONT_MATTER + "\n".join(lines) + "\n"


def hasse_to_mermaid(partition: Partition, links: list[Link]) -> str:
    """Render classes as nodes (name, states, label) and Hasse links as edges.

    Persistent classes get the "persistent" style, transient ones "transient".
    """
    lines = [
        "classDef transient fill:#f4f4f4,stroke:#888888",
        "classDef persistent fill:#b6f263,stroke:#2f6b00,stroke-width:2px",
    ]
    for cls in partition:
        states = ",".join(str(v) for v in sorted(cls.vertices))
        label = f"<br/>{cls.label}" if cls.label is not None else ""
        style = "persistent" if cls.is_persistent else "transient"
        lines.append(f'{cls.name}["{cls.name} {{{states}}}{label}"]:::{style}')
    lines.append("")
    lines.extend(
        f"{partition[link.source].name} --> {partition[link.destination].name}"
        for link in links
    )
    return _FRONT_MATTER + "\n".join(lines) + "\n"


def write_mermaid(text: str, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path

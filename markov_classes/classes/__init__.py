"""Communicating classes: Tarjan partition, classification, and Hasse links."""

from markov_classes.classes.classify import (
    classify_class,
    classify_classes,
    is_irreducible,
)
from markov_classes.classes.hasse import (
    class_reachability,
    condensation_edges,
    hasse_links,
)
from markov_classes.classes.tarjan import find_communicating_classes
from markov_classes.classes.types import (
    ClassLabel,
    CommunicatingClass,
    Link,
    Partition,
)

__all__ = [
    "ClassLabel",
    "CommunicatingClass",
    "Link",
    "Partition",
    "class_reachability",
    "classify_class",
    "classify_classes",
    "condensation_edges",
    "find_communicating_classes",
    "hasse_links",
    "is_irreducible",
]

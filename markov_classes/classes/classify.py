"""Transient / persistent / absorbing classification of communicating classes."""

import logging
from dataclasses import replace

from markov_classes.classes.types import ClassLabel, CommunicatingClass, Partition
from markov_classes.graph.types import Graph

log = logging.getLogger(__name__)


def _leaves_class(graph: Graph, partition: Partition, cls: CommunicatingClass) -> bool:
    for vertex in cls.vertices:
        for destination, _ in graph.neighbors(vertex):
            if partition.class_of(destination) != cls.index:
                return True
    return False


def classify_class(
    graph: Graph, partition: Partition, cls: CommunicatingClass
) -> ClassLabel:
    """Label one class.

    Any edge (including a zero-weight one) leaving the class makes it
    transient; otherwise it is persistent, and absorbing if it has a
    single state.
    """
    if _leaves_class(graph, partition, cls):
        return ClassLabel.TRANSIENT
    if len(cls) == 1:
        return ClassLabel.ABSORBING
    return ClassLabel.PERSISTENT


def classify_classes(graph: Graph, partition: Partition) -> Partition:
    """Return a copy of the partition with every class labeled."""
    labeled = []
    for cls in partition:
        label = classify_class(graph, partition, cls)
        log.info("Class %s %s is %s", cls.name, list(cls.vertices), label)
        labeled.append(replace(cls, label=label))
    return Partition(classes=tuple(labeled), n=partition.n)


def is_irreducible(partition: Partition) -> bool:
    """A chain is irreducible when all of its states communicate."""
    return len(partition) == 1

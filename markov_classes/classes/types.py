"""Communicating class, partition, and Hasse link data structures."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class ClassLabel(StrEnum):
    """Classification of a communicating class.

    TRANSIENT: Some transition leaves the class.
    PERSISTENT: The class is closed under transition.
    ABSORBING: A persistent class with a single state.
    """

    TRANSIENT = "transient"
    PERSISTENT = "persistent"
    ABSORBING = "absorbing"

    @property
    def is_persistent(self) -> bool:
        return self is not ClassLabel.TRANSIENT


@dataclass(frozen=True, slots=True)
class CommunicatingClass:
    """One strongly connected component of the chain.

    The vertex order is the order vertices were popped off the traversal
    stack. It fixes the row/column order of the class submatrix.
    """

    index: int  # 0-based position in the partition (finish order)
    vertices: tuple[int, ...]  # 1-based vertex IDs
    label: ClassLabel | None = None  # None until classified

    @property
    def name(self) -> str:
        return f"C{self.index + 1}"

    @property
    def is_persistent(self) -> bool:
        return self.label is not None and self.label.is_persistent

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True)
class Partition:
    """All communicating classes of a graph, in finish order.

    Every vertex 1..n belongs to exactly one class; the constructor rejects
    anything else.
    """

    classes: tuple[CommunicatingClass, ...]
    n: int  # number of vertices covered
    _vertex_class: dict[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        vertex_class: dict[int, int] = {}
        for cls in self.classes:
            for vertex in cls.vertices:
                if vertex in vertex_class:
                    raise ValueError(
                        f"vertex {vertex} appears in both "
                        f"C{vertex_class[vertex] + 1} and {cls.name}"
                    )
                vertex_class[vertex] = cls.index
        missing = set(range(1, self.n + 1)) - vertex_class.keys()
        if missing:
            raise ValueError(f"vertices not covered by any class: {sorted(missing)}")
        object.__setattr__(self, "_vertex_class", vertex_class)

    def class_of(self, vertex: int) -> int:
        """Index of the class containing a vertex."""
        return self._vertex_class[vertex]

    def persistent_classes(self) -> list[CommunicatingClass]:
        return [cls for cls in self.classes if cls.is_persistent]

    def __len__(self) -> int:
        return len(self.classes)

    def __iter__(self) -> Iterator[CommunicatingClass]:
        return iter(self.classes)

    def __getitem__(self, index: int) -> CommunicatingClass:
        return self.classes[index]


@dataclass(frozen=True, slots=True, order=True)
class Link:
    """Covering edge of the class reachability order (source reaches destination)."""

    source: int  # class index
    destination: int  # class index

"""
Bounded, order-preserving stack of vertex indices.

VertexSet is the unit of exchange between the search routines: the clique
engine pushes and pops the clique under construction, and every solver
returns its answer as a VertexSet. It is deliberately minimal; it does not
deduplicate and does not check vertex bounds.
"""

from typing import Iterable, Iterator, List, Optional

from .exceptions import CapacityExceededError


class VertexSet:
    """
    Stack of vertex indices with a capacity fixed at creation.

    Pushing onto a full set raises CapacityExceededError. Popping an empty
    set is a no-op.
    """

    __slots__ = ("_vertices", "capacity")

    def __init__(self, capacity: int, vertices: Optional[Iterable[int]] = None):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._vertices: List[int] = []
        if vertices is not None:
            for v in vertices:
                self.push(v)

    @classmethod
    def of(cls, vertices: Iterable[int]) -> "VertexSet":
        """Set holding exactly `vertices`, sized to fit them."""
        items = list(vertices)
        return cls(len(items), items)

    @property
    def size(self) -> int:
        return len(self._vertices)

    def push(self, vertex: int) -> None:
        if len(self._vertices) >= self.capacity:
            raise CapacityExceededError(
                f"cannot push vertex {vertex}: set is full (capacity {self.capacity})"
            )
        self._vertices.append(int(vertex))

    def pop(self) -> Optional[int]:
        """Remove and return the last vertex, or None if the set is empty."""
        if not self._vertices:
            return None
        return self._vertices.pop()

    def clear(self) -> None:
        self._vertices.clear()

    def copy(self, capacity: Optional[int] = None) -> "VertexSet":
        """Independent copy; `capacity` defaults to the current size."""
        return VertexSet(self.size if capacity is None else capacity, self._vertices)

    def to_list(self) -> List[int]:
        return list(self._vertices)

    def to_frozenset(self) -> frozenset:
        return frozenset(self._vertices)

    def __len__(self):
        return len(self._vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self._vertices)

    def __contains__(self, vertex) -> bool:
        # Linear scan, matching the container's list semantics.
        return vertex in self._vertices

    def __getitem__(self, index):
        return self._vertices[index]

    def __bool__(self):
        return bool(self._vertices)

    def __eq__(self, other):
        if isinstance(other, VertexSet):
            return self._vertices == other._vertices
        return NotImplemented

    def __repr__(self):
        return f"VertexSet({self._vertices}, capacity={self.capacity})"

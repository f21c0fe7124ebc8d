"""Domain models shared by the graph core and its collaborators.

The enums select how a Graph behaves; PathResult is the immutable value
returned by shortest-path queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Iterator, Union

if TYPE_CHECKING:
    from ..graph.vertex import Vertex


class Weighting(Enum):
    """Whether arc weights carry meaning for the graph."""

    WEIGHTED = auto()
    UNWEIGHTED = auto()


class Direction(Enum):
    """Whether a single edge insertion creates one arc or two."""

    DIRECTED = auto()
    UNDIRECTED = auto()


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        vertices: Ordered tuple of vertices from source to target (inclusive)
        total_weight: Sum of the arc weights along the path
    """

    vertices: tuple[Vertex[Any], ...]
    total_weight: Union[int, float] = 0

    @property
    def payloads(self) -> tuple[Any, ...]:
        """Return the payload held by each vertex on the path."""
        return tuple(vertex.get() for vertex in self.vertices)

    @property
    def num_stops(self) -> int:
        """Return the number of vertices on the path."""
        return len(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex[Any]]:
        return iter(self.vertices)

"""Graph vertices and their outgoing arcs.

A Vertex holds a payload and an ordered adjacency list of arcs. Vertices
compare by their handle, a process-unique integer assigned at
construction, so two vertices wrapping equal payloads stay distinct and
handle order doubles as creation order.

The adjacency methods on Vertex know nothing about the graph that owns
the vertex. Arcs created, deleted or cleared directly on a graph-owned
vertex bypass the graph's edge count; structural changes to a graph go
through Graph.
"""

from __future__ import annotations

import io
import itertools
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Generic, List, TextIO, Tuple, TypeVar

from ..domain.errors import EdgeNotFoundError, InvalidWeightError

T = TypeVar("T")

_handles = itertools.count()


@dataclass(frozen=True, slots=True)
class Arc:
    """A directed, weighted connection to another vertex.

    Attributes:
        target: The vertex the arc points to
        weight: Cost of travelling the arc
        counted: Whether the owning graph counted this arc in its edge count
    """

    target: Vertex[Any]
    weight: int = 1
    counted: bool = False


@total_ordering
class Vertex(Generic[T]):
    """Node in a graph: a payload plus its outgoing arcs."""

    __slots__ = ("_data", "_arcs", "_handle")

    def __init__(self, data: T) -> None:
        self._data = data
        self._arcs: List[Arc] = []
        self._handle = next(_handles)

    @property
    def handle(self) -> int:
        """Stable identifier of this vertex."""
        return self._handle

    @property
    def data(self) -> T:
        """The payload, as an attribute alternative to get() and set()."""
        return self._data

    @data.setter
    def data(self, value: T) -> None:
        self._data = value

    def get(self) -> T:
        """Return the payload."""
        return self._data

    def set(self, data: T) -> None:
        """Replace the payload."""
        self._data = data

    def create_neighbor(self, neighbor: Vertex[Any], weight: int = 1) -> Arc:
        """Append an arc to ``neighbor``.

        Parallel arcs are allowed; repeated calls with the same neighbor
        accumulate. The arc is never counted as a graph edge: use
        Graph.insert_edge on graph-owned vertices.

        Args:
            neighbor: Destination of the new arc.
            weight: Non-negative integer arc weight.

        Returns:
            The arc that was appended.

        Raises:
            InvalidWeightError: If the weight is not a non-negative integer.
        """
        return self._attach(neighbor, weight, counted=False)

    def _attach(self, neighbor: Vertex[Any], weight: int, *, counted: bool) -> Arc:
        # Graph calls this directly to mark the arcs it counts.
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidWeightError(
                f"Weight must be an integer: {weight!r}",
                weight=weight,
            )
        if weight < 0:
            raise InvalidWeightError(
                f"Negative weight not supported: {weight}",
                weight=weight,
            )
        arc = Arc(target=neighbor, weight=weight, counted=counted)
        self._arcs.append(arc)
        return arc

    def delete_neighbor(self, neighbor: Vertex[Any]) -> List[Arc]:
        """Remove every arc to ``neighbor``.

        Called on a graph-owned vertex this leaves the graph's edge count
        untouched; use Graph.delete_edge instead.

        Returns:
            The removed arcs, in adjacency order (empty if there were none).
        """
        removed = [arc for arc in self._arcs if arc.target == neighbor]
        if removed:
            self._arcs = [arc for arc in self._arcs if arc.target != neighbor]
        return removed

    def clear_neighbors(self) -> List[Arc]:
        """Remove every outgoing arc and return them."""
        removed, self._arcs = self._arcs, []
        return removed

    def has_neighbor(self, other: Vertex[Any]) -> bool:
        return any(arc.target == other for arc in self._arcs)

    def get_weight(self, other: Vertex[Any]) -> int:
        """Return the weight of the first arc to ``other``.

        Raises:
            EdgeNotFoundError: If no arc to ``other`` exists.
        """
        for arc in self._arcs:
            if arc.target == other:
                return arc.weight
        raise EdgeNotFoundError(
            f"No edge from {self._data} to {other.get()}",
            source=str(self._data),
            target=str(other.get()),
        )

    def arcs(self) -> List[Arc]:
        """Snapshot of the adjacency list."""
        return list(self._arcs)

    def neighborhood(self) -> List[Tuple[Vertex[Any], int]]:
        """Snapshot of the adjacency list as ``(neighbor, weight)`` pairs."""
        return [(arc.target, arc.weight) for arc in self._arcs]

    def neighbors(self) -> List[Vertex[Any]]:
        """Snapshot of the neighbors, one entry per arc."""
        return [arc.target for arc in self._arcs]

    def copy(self) -> Vertex[T]:
        """Return a new vertex with the same payload and a copy of the arcs."""
        twin: Vertex[T] = Vertex(self._data)
        twin._arcs = list(self._arcs)
        return twin

    def dump(self, out: TextIO) -> TextIO:
        """Write ``payload( -> neighbor:weight)*`` to ``out``."""
        out.write(str(self._data))
        for arc in self._arcs:
            out.write(f" -> {arc.target.get()}:{arc.weight}")
        return out

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.dump(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Vertex({self._data!r}, handle={self._handle})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._handle == other._handle

    def __lt__(self, other: Vertex[Any]) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._handle < other._handle

    def __hash__(self) -> int:
        return hash(self._handle)

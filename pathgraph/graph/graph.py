"""Graph container owning its vertices.

The Graph is the single entry point for structural changes: it allocates
every vertex it holds, routes all edge insertions and deletions so that
the direction mode and the edge count stay consistent, and rejects
vertices it does not own with InvalidVertexError.

Vertices are kept in insertion order, which fixes the iteration order of
searches, of the text dump and of Dijkstra's tie-breaking.

Edge counting: ``insert_edge`` counts one edge (the mirror arc of an
undirected edge is not counted) and ``insert_bidirectional_edge`` counts
two. Each arc remembers whether it was counted, and every removal
subtracts exactly the counted arcs it takes away. The count is kept for
changes made through Graph only: arcs edited directly on a vertex with
Vertex.create_neighbor, delete_neighbor or clear_neighbors are invisible
to it.
"""

from __future__ import annotations

import copy
import io
import logging
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    TextIO,
    TypeVar,
    Union,
)

from ..domain.errors import (
    ConfigurationError,
    EdgeNotFoundError,
    InvalidVertexError,
    VertexNotFoundError,
)
from ..domain.models import Direction, PathResult, Weighting
from .dijkstra import shortest_path as _dijkstra
from .vertex import Arc, Vertex

T = TypeVar("T")

# Search predicates: over a whole vertex, or over its payload only.
VertexPredicate = Callable[[Vertex[Any]], bool]
PayloadPredicate = Callable[[Any], bool]

logger = logging.getLogger(__name__)


def _describe(predicate: Callable[..., bool]) -> str:
    return getattr(predicate, "__name__", repr(predicate))


class Graph(Generic[T]):
    """Weighted or unweighted, directed or undirected graph.

    Modes may be given in either order, each at most once::

        Graph(Direction.DIRECTED, Weighting.WEIGHTED)
        Graph(Weighting.WEIGHTED, Direction.DIRECTED)
        Graph(Direction.DIRECTED)
        Graph()  # unweighted, undirected
    """

    def __init__(self, *modes: Union[Weighting, Direction]) -> None:
        weighting = None
        direction = None
        for mode in modes:
            if isinstance(mode, Weighting):
                if weighting is not None:
                    raise ConfigurationError(
                        "Weighting given more than once",
                        setting_name="weighting",
                        expected_type="Weighting",
                    )
                weighting = mode
            elif isinstance(mode, Direction):
                if direction is not None:
                    raise ConfigurationError(
                        "Direction given more than once",
                        setting_name="direction",
                        expected_type="Direction",
                    )
                direction = mode
            else:
                raise ConfigurationError(
                    f"Unknown graph mode: {mode!r}",
                    setting_name="mode",
                    expected_type="Weighting or Direction",
                )

        self._weighting: Weighting = weighting or Weighting.UNWEIGHTED
        self._direction: Direction = direction or Direction.UNDIRECTED
        self._vertices: Dict[int, Vertex[T]] = {}
        self._edge_count = 0

    # --- Modes ---------------------------------------------------------------

    @property
    def weighting(self) -> Weighting:
        return self._weighting

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def is_weighted(self) -> bool:
        return self._weighting is Weighting.WEIGHTED

    @property
    def is_directed(self) -> bool:
        return self._direction is Direction.DIRECTED

    # --- Counts --------------------------------------------------------------

    def edge_count(self) -> int:
        return self._edge_count

    def vertex_count(self) -> int:
        return len(self._vertices)

    def is_empty(self) -> bool:
        return not self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    # --- Ownership -----------------------------------------------------------

    def owns(self, vertex: object) -> bool:
        """Check whether ``vertex`` is one of this graph's own vertices."""
        if not isinstance(vertex, Vertex):
            return False
        return self._vertices.get(vertex.handle) is vertex

    def _require(self, vertex: Vertex[Any]) -> None:
        if not self.owns(vertex):
            raise InvalidVertexError(
                f"Vertex not owned by this graph: {vertex!r}",
                vertex=str(vertex.get()) if isinstance(vertex, Vertex) else repr(vertex),
            )

    def __contains__(self, vertex: object) -> bool:
        return self.owns(vertex)

    def __iter__(self) -> Iterator[Vertex[T]]:
        return iter(list(self._vertices.values()))

    def vertices(self) -> List[Vertex[T]]:
        """Snapshot of the vertices in insertion order."""
        return list(self._vertices.values())

    # --- Vertices ------------------------------------------------------------

    def insert_vertex(self, vertex: Vertex[T]) -> Vertex[T]:
        """Insert an owned copy of ``vertex`` and return it.

        Only the payload is copied: arcs must be created through the graph.
        Inserting a vertex this graph already owns returns it unchanged.
        """
        if self.owns(vertex):
            return vertex
        owned: Vertex[T] = Vertex(vertex.get())
        self._vertices[owned.handle] = owned
        logger.debug(
            "Vertex inserted",
            extra={"vertex": str(owned.get()), "vertices": len(self._vertices)},
        )
        return owned

    def insert_new_vertex(self, data: T) -> Vertex[T]:
        """Wrap ``data`` in a new vertex, insert it and return the owned copy."""
        return self.insert_vertex(Vertex(data))

    def delete_vertex(self, vertex: Vertex[T]) -> None:
        """Remove ``vertex`` together with every arc into or out of it.

        Raises:
            InvalidVertexError: If the vertex is not owned by this graph.
        """
        self._require(vertex)
        removed: List[Arc] = vertex.clear_neighbors()
        del self._vertices[vertex.handle]
        for other in self._vertices.values():
            removed.extend(other.delete_neighbor(vertex))
        dropped = sum(1 for arc in removed if arc.counted)
        self._edge_count -= dropped
        logger.debug(
            "Vertex deleted",
            extra={
                "vertex": str(vertex.get()),
                "arcs_removed": len(removed),
                "edges": self._edge_count,
            },
        )

    def destroy(self) -> None:
        """Delete all vertices and edges."""
        for vertex in self._vertices.values():
            vertex.clear_neighbors()
        self._vertices.clear()
        self._edge_count = 0
        logger.debug("Graph destroyed")

    clear = destroy

    # --- Edges ---------------------------------------------------------------

    def insert_edge(self, vertex_a: Vertex[T], vertex_b: Vertex[T], weight: int = 1) -> None:
        """Insert an edge from ``vertex_a`` to ``vertex_b``.

        An undirected graph also gets the arc back from ``vertex_b``. Either
        way the edge count grows by one.

        Raises:
            InvalidVertexError: If either vertex is not owned by this graph.
            InvalidWeightError: If the weight is not a non-negative integer.
        """
        self._require(vertex_a)
        self._require(vertex_b)
        vertex_a._attach(vertex_b, weight, counted=True)
        if self._direction is Direction.UNDIRECTED:
            vertex_b._attach(vertex_a, weight, counted=False)
        self._edge_count += 1
        logger.debug(
            "Edge inserted",
            extra={
                "source": str(vertex_a.get()),
                "target": str(vertex_b.get()),
                "weight": weight,
            },
        )

    def insert_bidirectional_edge(
        self, vertex_a: Vertex[T], vertex_b: Vertex[T], weight: int = 1
    ) -> None:
        """Insert arcs both ways regardless of direction; counts two edges.

        Raises:
            InvalidVertexError: If either vertex is not owned by this graph.
            InvalidWeightError: If the weight is not a non-negative integer.
        """
        self._require(vertex_a)
        self._require(vertex_b)
        vertex_a._attach(vertex_b, weight, counted=True)
        vertex_b._attach(vertex_a, weight, counted=True)
        self._edge_count += 2
        logger.debug(
            "Bidirectional edge inserted",
            extra={
                "source": str(vertex_a.get()),
                "target": str(vertex_b.get()),
                "weight": weight,
            },
        )

    def delete_edge(self, vertex_a: Vertex[T], vertex_b: Vertex[T]) -> None:
        """Remove the arcs from ``vertex_a`` to ``vertex_b``.

        Parallel arcs are all removed. An undirected graph also loses the
        arcs back from ``vertex_b``.

        Raises:
            InvalidVertexError: If either vertex is not owned by this graph.
            EdgeNotFoundError: If there is no arc from ``vertex_a`` to ``vertex_b``.
        """
        self._require(vertex_a)
        self._require(vertex_b)
        if not vertex_a.has_neighbor(vertex_b):
            raise EdgeNotFoundError(
                f"No edge from {vertex_a.get()} to {vertex_b.get()}",
                source=str(vertex_a.get()),
                target=str(vertex_b.get()),
            )
        removed = vertex_a.delete_neighbor(vertex_b)
        if self._direction is Direction.UNDIRECTED:
            removed.extend(vertex_b.delete_neighbor(vertex_a))
        self._edge_count -= sum(1 for arc in removed if arc.counted)
        logger.debug(
            "Edge deleted",
            extra={
                "source": str(vertex_a.get()),
                "target": str(vertex_b.get()),
                "arcs_removed": len(removed),
            },
        )

    def get_weight(self, vertex_a: Vertex[T], vertex_b: Vertex[T]) -> int:
        """Weight of the arc from ``vertex_a`` to ``vertex_b``.

        Raises:
            InvalidVertexError: If either vertex is not owned by this graph.
            EdgeNotFoundError: If there is no such arc.
        """
        self._require(vertex_a)
        self._require(vertex_b)
        return vertex_a.get_weight(vertex_b)

    # --- Search --------------------------------------------------------------

    def find_all(self, predicate: VertexPredicate) -> List[Vertex[T]]:
        """Return every vertex matching ``predicate``, in insertion order."""
        return [vertex for vertex in self._vertices.values() if predicate(vertex)]

    def find_vertex(self, predicate: VertexPredicate) -> Vertex[T]:
        """Return the first vertex matching ``predicate``.

        Raises:
            VertexNotFoundError: If no vertex matches.
        """
        for vertex in self._vertices.values():
            if predicate(vertex):
                return vertex
        raise VertexNotFoundError(
            f"No vertex matches {_describe(predicate)}",
            query=_describe(predicate),
        )

    def find(self, predicate: PayloadPredicate) -> Vertex[T]:
        """Return the first vertex whose payload matches ``predicate``.

        Raises:
            VertexNotFoundError: If no payload matches.
        """
        for vertex in self._vertices.values():
            if predicate(vertex.get()):
                return vertex
        raise VertexNotFoundError(
            f"No vertex payload matches {_describe(predicate)}",
            query=_describe(predicate),
        )

    # --- Shortest path -------------------------------------------------------

    def shortest_path(self, source: Vertex[T], target: Vertex[T]) -> PathResult:
        """Dijkstra's shortest path from ``source`` to ``target``.

        Raises:
            InvalidVertexError: If either vertex is not owned by this graph.
            NoPathError: If ``target`` is unreachable from ``source``.
        """
        self._require(source)
        self._require(target)
        return _dijkstra(self, source, target)

    # --- Output --------------------------------------------------------------

    def dump(self, out: TextIO) -> TextIO:
        """Write the vertex and edge counts, then one line per vertex."""
        out.write("Dumping graph:\n")
        out.write(
            f"\tNumber of Vertices: {self.vertex_count()}"
            f"\tNumber of Edges: {self.edge_count()}\n"
        )
        for vertex in self._vertices.values():
            vertex.dump(out)
            out.write("\n")
        return out

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.dump(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return (
            f"Graph({self._weighting.name}, {self._direction.name}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )

    # --- Copying -------------------------------------------------------------

    def _replicate(self, copy_payload: Callable[[Any], Any]) -> Graph[T]:
        twin: Graph[T] = Graph(self._weighting, self._direction)
        mapping: Dict[int, Vertex[T]] = {}
        for vertex in self._vertices.values():
            mapping[vertex.handle] = twin.insert_new_vertex(copy_payload(vertex.get()))
        for vertex in self._vertices.values():
            source = mapping[vertex.handle]
            for arc in vertex.arcs():
                target = mapping.get(arc.target.handle)
                if target is None:
                    raise InvalidVertexError(
                        f"Arc from {vertex.get()} leaves the graph",
                        vertex=str(arc.target.get()),
                    )
                source._attach(target, arc.weight, counted=arc.counted)
        twin._edge_count = self._edge_count
        return twin

    def copy(self) -> Graph[T]:
        """Return an independent graph with fresh vertices and the same arcs."""
        return self._replicate(lambda payload: payload)

    def __copy__(self) -> Graph[T]:
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> Graph[T]:
        return self._replicate(lambda payload: copy.deepcopy(payload, memo))

"""Graph ports - Abstractions for map loading and routing.

These protocols define the contracts the route service relies on:
something that provides a populated graph of cities, and something that
computes the shortest path between two of its vertices.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.graph import Graph
    from ..graph.vertex import Vertex


class MapRepositoryPort(Protocol):
    """Port for obtaining a populated map.

    Implementation: adapters/graph/sample_map.py

    The repository is responsible for building and caching the graph
    whose vertex payloads are city names.
    """

    def load(self) -> Graph[str]:
        """Load the map.

        Returns:
            The graph of cities.
        """
        ...

    def clear_cache(self) -> None:
        """Forget the cached graph so the next load rebuilds it."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py

    The solver computes the cheapest path between two vertices.
    """

    def solve(
        self,
        graph: Graph[str],
        source: Vertex[str],
        target: Vertex[str],
    ) -> PathResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The graph owning both vertices.
            source: Start vertex.
            target: End vertex.

        Returns:
            PathResult with the vertices along the path and its weight.
        """
        ...

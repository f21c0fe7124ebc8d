"""Dijkstra Route Solver adapter.

This adapter wraps Graph.shortest_path and adds:
- Logging of every query and its outcome
- A non-raising variant for callers that prefer an optional result
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.errors import InvalidVertexError, NoPathError
from ...domain.models import PathResult
from ...graph.graph import Graph
from ...graph.vertex import Vertex


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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

        Raises:
            InvalidVertexError: If either vertex is not owned by the graph.
            NoPathError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": str(source.get()), "target": str(target.get())},
        )

        try:
            result = graph.shortest_path(source, target)
        except NoPathError:
            self._logger.warning(
                "No route found",
                extra={"source": str(source.get()), "target": str(target.get())},
            )
            raise

        self._logger.info(
            "Route found",
            extra={
                "source": str(source.get()),
                "target": str(target.get()),
                "stops": result.num_stops,
                "total_weight": result.total_weight,
            },
        )
        return result

    def solve_safe(
        self,
        graph: Graph[str],
        source: Vertex[str],
        target: Vertex[str],
    ) -> Optional[PathResult]:
        """Find the shortest path, returning None on failure.

        Like solve(), but returns None instead of raising when the target
        is unreachable or a vertex does not belong to the graph.

        Args:
            graph: The graph owning both vertices.
            source: Start vertex.
            target: End vertex.

        Returns:
            PathResult, or None if no path could be computed.
        """
        try:
            return self.solve(graph, source, target)
        except (NoPathError, InvalidVertexError):
            return None

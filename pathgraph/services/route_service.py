"""Route service - Resolves city names to a shortest path.

This service ties the map repository and the route solver together:
it looks the two cities up by name, asks the solver for the path and
formats the result for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..config import AppConfig, get_config
from ..domain.errors import GraphError, NoPathError, VertexNotFoundError
from ..domain.models import PathResult
from ..graph.graph import Graph
from ..graph.vertex import Vertex
from ..ports.graph import MapRepositoryPort, RouteSolverPort


@dataclass
class RouteService:
    """Main service for answering "from A to B" queries.

    This service orchestrates:
    1. Map loading
    2. City lookup by exact (case-sensitive) name
    3. Route computation

    Attributes:
        map_repository: Provides the graph of cities
        route_solver: Computes shortest paths
    """

    map_repository: MapRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> RouteService:
        """Create a service over the sample map and the Dijkstra solver.

        Args:
            config: Optional configuration override.

        Returns:
            A ready-to-use RouteService.
        """
        from ..adapters.graph import DijkstraRouteSolver, SampleMapRepository

        config = config or get_config()
        return cls(
            map_repository=SampleMapRepository(config.map),
            route_solver=DijkstraRouteSolver(),
        )

    @property
    def graph(self) -> Graph[str]:
        return self.map_repository.load()

    def find_city(self, name: str) -> Vertex[str]:
        """Return the vertex holding the city ``name``.

        Raises:
            VertexNotFoundError: If no city has that exact name.
        """
        try:
            return self.graph.find(lambda payload: payload == name)
        except VertexNotFoundError as e:
            raise VertexNotFoundError(
                f"City not found: {name}",
                query=name,
                cause=e,
            )

    def resolve(self, source_name: str, target_name: str) -> PathResult:
        """Compute the shortest path between two cities.

        Args:
            source_name: Name of the departure city.
            target_name: Name of the arrival city.

        Returns:
            PathResult with the computed route.

        Raises:
            VertexNotFoundError: If either city is unknown.
            NoPathError: If no path exists between the cities.
        """
        self._logger.info(
            "Resolving route",
            extra={"source": source_name, "target": target_name},
        )

        source = self.find_city(source_name)
        target = self.find_city(target_name)
        return self.route_solver.solve(self.graph, source, target)

    def resolve_safe(
        self, source_name: str, target_name: str
    ) -> tuple[Optional[PathResult], Optional[str]]:
        """Resolve a route, returning an error message instead of raising.

        Args:
            source_name: Name of the departure city.
            target_name: Name of the arrival city.

        Returns:
            Tuple of (PathResult or None, error message or None).
        """
        try:
            return self.resolve(source_name, target_name), None
        except VertexNotFoundError as e:
            return None, f"Unknown city: {e.query}"
        except NoPathError as e:
            return None, f"No path found between {e.source} and {e.target}"
        except GraphError as e:
            self._logger.exception("Unexpected graph error in route resolution")
            return None, f"Error: {e}"

    def format_result(
        self,
        result: PathResult,
        separator: str = " -> ",
        show_distance: bool = False,
    ) -> str:
        """Format a path as human-readable text.

        Args:
            result: The computed route.
            separator: Text placed between consecutive cities.
            show_distance: Append the total weight on a second line.

        Returns:
            Formatted result string.
        """
        text = separator.join(str(payload) for payload in result.payloads)
        if show_distance:
            text += f"\nTotal distance: {result.total_weight}"
        return text

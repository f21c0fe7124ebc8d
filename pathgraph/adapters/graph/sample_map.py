"""Built-in sample map repository adapter.

This adapter builds a small map of US cities with road distances in
miles. Some roads are one-way, the rest are two-way. The graph is
built on first load and cached until clear_cache() is called.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ...config import MapConfig, get_config
from ...graph.graph import Graph
from ...graph.vertex import Vertex

CITIES: Tuple[str, ...] = (
    "Fargo",
    "Minneapolis",
    "Chicago",
    "Detroit",
    "New York",
    "Miami",
    "Houston",
    "St. Louis",
    "Denver",
    "Seattle",
    "Los Angeles",
    "Phoenix",
)

# (from, to, miles, two_way)
ROADS: Tuple[Tuple[str, str, int, bool], ...] = (
    ("Seattle", "Chicago", 2072, False),
    ("Los Angeles", "Seattle", 1151, False),
    ("Los Angeles", "Denver", 1023, True),
    ("Los Angeles", "Phoenix", 381, True),
    ("Los Angeles", "New York", 2824, True),
    ("Phoenix", "Houston", 1186, True),
    ("Denver", "Minneapolis", 920, True),
    ("Fargo", "Minneapolis", 240, True),
    ("Minneapolis", "Chicago", 409, True),
    ("Houston", "St. Louis", 780, False),
    ("Houston", "Miami", 1190, True),
    ("St. Louis", "Denver", 861, False),
    ("St. Louis", "Detroit", 547, True),
    ("Chicago", "Detroit", 286, True),
    ("Chicago", "New York", 821, True),
    ("Detroit", "New York", 640, False),
    ("Miami", "New York", 1281, True),
)


@dataclass
class SampleMapRepository:
    """Map repository serving the built-in city map.

    This adapter implements MapRepositoryPort.

    Attributes:
        config: Map configuration (direction and weighting modes)
    """

    config: MapConfig = field(default_factory=lambda: get_config().map)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph[str]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph[str]:
        """Build (once) and return the city map.

        Returns:
            The graph whose vertex payloads are city names.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Building sample map",
            extra={
                "direction": self.config.direction,
                "weighting": self.config.weighting,
            },
        )

        graph: Graph[str] = Graph(self.config.direction_mode, self.config.weighting_mode)
        cities: Dict[str, Vertex[str]] = {
            name: graph.insert_new_vertex(name) for name in CITIES
        }

        for source, target, miles, two_way in ROADS:
            if two_way:
                graph.insert_bidirectional_edge(cities[source], cities[target], miles)
            else:
                graph.insert_edge(cities[source], cities[target], miles)

        self._graph = graph
        self._logger.info(
            "Sample map built",
            extra={"vertices": graph.vertex_count(), "edges": graph.edge_count()},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Sample map cache cleared")

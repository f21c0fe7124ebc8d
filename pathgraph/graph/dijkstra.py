"""Shortest-path computation using Dijkstra's algorithm.

This module computes the cheapest path between two vertices of a Graph.
The search stops as soon as the target is the closest unvisited vertex.
The closest vertex is picked by a linear scan over the unvisited
vertices in graph order, so on equal distances the vertex inserted first
wins and results are reproducible.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from ..domain.errors import InvalidVertexError, NoPathError
from ..domain.models import PathResult
from .vertex import Vertex

if TYPE_CHECKING:
    from .graph import Graph

Distance = Union[int, float]


def shortest_path(
    graph: Graph[Any], source: Vertex[Any], target: Vertex[Any]
) -> PathResult:
    """Compute the shortest path between two vertices using Dijkstra.

    Parameters
    ----------
    graph:
        Graph owning both vertices. Arc weights must be non-negative.
    source:
        Vertex the path starts from.
    target:
        Vertex the path ends at.

    Returns
    -------
    PathResult
        The vertices from ``source`` to ``target`` (inclusive) and the
        total weight. When ``source`` is ``target`` the path is that single
        vertex with weight 0.

    Raises
    ------
    NoPathError
        If ``target`` cannot be reached from ``source``.
    InvalidVertexError
        If ``source`` or ``target`` is not owned by ``graph``, or an arc
        leads to a vertex the graph does not own.
    """
    for endpoint in (source, target):
        if not graph.owns(endpoint):
            raise InvalidVertexError(
                f"Vertex not owned by this graph: {endpoint!r}",
                vertex=str(endpoint.get()),
            )

    if source == target:
        return PathResult(vertices=(source,), total_weight=0)

    unvisited: List[Vertex[Any]] = graph.vertices()
    distances: Dict[Vertex[Any], Distance] = {vertex: math.inf for vertex in unvisited}
    parents: Dict[Vertex[Any], Optional[Vertex[Any]]] = {
        vertex: None for vertex in unvisited
    }
    distances[source] = 0

    while unvisited:
        # min() keeps the first of equal candidates: insertion order.
        current = min(unvisited, key=distances.__getitem__)
        if current == target or math.isinf(distances[current]):
            break

        unvisited.remove(current)

        for arc in current.arcs():
            neighbor = arc.target
            if neighbor not in distances:
                raise InvalidVertexError(
                    f"Arc from {current.get()} leads outside the graph",
                    vertex=str(neighbor.get()),
                )
            candidate = distances[current] + arc.weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                parents[neighbor] = current

    if math.isinf(distances[target]):
        raise NoPathError(
            f"No path from {source.get()} to {target.get()}",
            source=str(source.get()),
            target=str(target.get()),
        )

    path: List[Vertex[Any]] = []
    node: Optional[Vertex[Any]] = target
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()

    return PathResult(vertices=tuple(path), total_weight=distances[target])

"""Top-level package for pathgraph.

A generic graph abstract data type (weighted or unweighted, directed or
undirected) with vertex and edge management, predicate search, a text
dump and Dijkstra's single-pair shortest path, plus a small interactive
shell answering shortest-route queries over a sample city map.
"""

from .domain import (
    ConfigurationError,
    Direction,
    EdgeNotFoundError,
    GraphError,
    InvalidVertexError,
    InvalidWeightError,
    NoPathError,
    NotFoundError,
    PathResult,
    VertexNotFoundError,
    Weighting,
)
from .graph import Arc, Graph, Vertex, shortest_path

__all__ = [
    "Arc",
    "Direction",
    "Graph",
    "PathResult",
    "Vertex",
    "Weighting",
    "shortest_path",
    "GraphError",
    "NotFoundError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "NoPathError",
    "InvalidVertexError",
    "InvalidWeightError",
    "ConfigurationError",
]

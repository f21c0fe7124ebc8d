"""Graph data structure and path-finding.

This subpackage contains the vertex and graph types and Dijkstra's
shortest-path algorithm that runs on top of them.
"""

from .dijkstra import shortest_path
from .graph import Graph, PayloadPredicate, VertexPredicate
from .vertex import Arc, Vertex

__all__ = [
    "Arc",
    "Graph",
    "PayloadPredicate",
    "Vertex",
    "VertexPredicate",
    "shortest_path",
]

"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- SampleMapRepository: Serves the built-in city map
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .sample_map import SampleMapRepository

__all__ = ["DijkstraRouteSolver", "SampleMapRepository"]

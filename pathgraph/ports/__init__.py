"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the route service and the adapters
that supply maps and compute paths. They enable dependency injection
and make the service testable with stand-ins.
"""

from .graph import MapRepositoryPort, RouteSolverPort

__all__ = [
    "MapRepositoryPort",
    "RouteSolverPort",
]

"""Services layer - Application orchestration.

Available services:
- RouteService: Resolves city names to a shortest path
"""

from .route_service import RouteService

__all__ = ["RouteService"]

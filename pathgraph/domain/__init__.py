"""Domain layer - Graph modes, result models and errors.

This module contains the enums, immutable result models and typed
errors used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphError,
    InvalidVertexError,
    InvalidWeightError,
    NoPathError,
    NotFoundError,
    VertexNotFoundError,
)
from .models import Direction, PathResult, Weighting

__all__ = [
    # Models
    "Direction",
    "PathResult",
    "Weighting",
    # Errors
    "GraphError",
    "NotFoundError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "NoPathError",
    "InvalidVertexError",
    "InvalidWeightError",
    "ConfigurationError",
]

"""Typed domain errors for pathgraph.

Every failure a graph operation can detect is raised as one of these
types instead of returning a sentinel or leaving the graph in a
half-updated state. Operations validate their arguments before they
mutate anything, so a raised error never leaves partial changes behind.

All errors inherit from GraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class GraphError(Exception):
    """Base error for the graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NotFoundError(GraphError):
    """A lookup matched nothing."""


@dataclass
class VertexNotFoundError(NotFoundError):
    """No vertex satisfied a search predicate.

    Attributes:
        query: Description of what was searched for
    """

    query: str = ""


@dataclass
class EdgeNotFoundError(NotFoundError):
    """No arc exists between the requested pair of vertices.

    Attributes:
        source: Payload of the arc's origin
        target: Payload of the arc's destination
    """

    source: str = ""
    target: str = ""


@dataclass
class NoPathError(GraphError):
    """The target cannot be reached from the source.

    Attributes:
        source: Payload of the start vertex
        target: Payload of the unreachable vertex
    """

    source: str = ""
    target: str = ""


@dataclass
class InvalidVertexError(GraphError):
    """A vertex handed to a graph is not owned by it.

    Raised for vertices that belong to another graph, that were built
    outside any graph, or that were deleted from this one.

    Attributes:
        vertex: Payload of the offending vertex
    """

    vertex: str = ""


@dataclass
class InvalidWeightError(GraphError):
    """An arc weight outside the supported range (negative).

    Attributes:
        weight: The rejected weight
    """

    weight: Any = None


@dataclass
class ConfigurationError(GraphError):
    """Invalid graph construction arguments.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None

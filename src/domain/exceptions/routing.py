from __future__ import annotations

from typing import Sequence


class RoutingError(Exception):
    """Base exception for route calculation failures."""


class InvalidRequest(RoutingError):
    """Raised when the request references data it does not declare."""


class MissingNodes(InvalidRequest):
    """Raised when required stops or the destination are not declared nodes."""

    def __init__(self, nodes: Sequence[str]) -> None:
        self.nodes = tuple(nodes)
        super().__init__(f"Missing required nodes: {', '.join(self.nodes)}")


class InvalidEdgeNodes(InvalidRequest):
    """Raised when an edge endpoint is not a declared node.

    ``nodes`` keeps one entry per offending endpoint, so duplicates are possible.
    """

    def __init__(self, nodes: Sequence[str]) -> None:
        self.nodes = tuple(nodes)
        super().__init__(f"Invalid edge nodes: {', '.join(self.nodes)}")


class InvalidEdgeCost(InvalidRequest):
    """Raised when an edge cost is negative or not a finite number."""

    def __init__(self, edges: Sequence[str]) -> None:
        self.edges = tuple(edges)
        super().__init__(f"Invalid edge costs: {', '.join(self.edges)}")


class NoPathFound(RoutingError):
    """Raised when no feasible path exists for the given request."""

    def __init__(
        self, message: str | None = None, *, required_stops: Sequence[str] = ()
    ) -> None:
        self.required_stops = tuple(required_stops)
        if message is None:
            message = (
                "No valid path found that satisfies all constraints of "
                f"{','.join(self.required_stops)}"
            )
        super().__init__(message)

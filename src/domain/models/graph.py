from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Edge:
    """Undirected, costed connection between two nodes.

    ``source``/``target`` mirror the ``from``/``to`` of the request payload;
    the graph treats both directions alike.
    """

    source: str
    target: str
    cost: float


@dataclass(frozen=True, slots=True)
class Constraints:
    blocked_nodes: tuple[str, ...] = ()
    required_stops: tuple[str, ...] = ()  # visited in this order, never reordered


@dataclass(frozen=True, slots=True)
class PathRequest:
    start: str
    end: str
    nodes: tuple[str, ...]
    edges: tuple[Edge, ...] = ()
    constraints: Constraints = field(default_factory=Constraints)

    @property
    def must_exist_nodes(self) -> tuple[str, ...]:
        # Start is not required to be a declared node.
        return (*self.constraints.required_stops, self.end)


@dataclass(frozen=True, slots=True)
class SegmentPath:
    """Shortest path between two consecutive waypoints."""

    path: tuple[str, ...]
    cost: float


@dataclass(frozen=True, slots=True)
class PathResult:
    path: tuple[str, ...]
    total_cost: float

from __future__ import annotations

from dataclasses import dataclass

from src.domain.algorithms.graph_builder import build_graph
from src.domain.algorithms.segments import find_path_with_required_stops
from src.domain.exceptions import NoPathFound
from src.domain.models import PathRequest, PathResult
from src.domain.validation import validate_edge_costs, validate_node_references


@dataclass(slots=True)
class PathFinderService:
    """Application service (use case) for constrained path finding.

    Validate -> build graph -> stitch segments. Every call works on its own
    graph, so one instance can serve concurrent requests.
    """

    def find_optimal_path(self, request: PathRequest) -> PathResult:
        constraints = request.constraints

        validate_node_references(
            request.nodes, request.edges, request.must_exist_nodes
        )
        validate_edge_costs(request.edges)

        graph = build_graph(request.edges, constraints.blocked_nodes)

        # A blocked waypoint can never be on the path, even a zero-length one.
        waypoints = {request.start, *request.must_exist_nodes}
        if waypoints.intersection(constraints.blocked_nodes):
            raise NoPathFound(required_stops=constraints.required_stops)

        result = find_path_with_required_stops(
            graph, request.start, request.end, constraints.required_stops
        )
        if result is None:
            raise NoPathFound(required_stops=constraints.required_stops)
        return result

from __future__ import annotations

from typing import Sequence

import networkx as nx

from src.domain.algorithms.dijkstra import shortest_path
from src.domain.models import PathResult


def segment_pairs(
    start: str, end: str, required_stops: Sequence[str] = ()
) -> list[tuple[str, str]]:
    waypoints = [start, *required_stops, end]
    return list(zip(waypoints, waypoints[1:]))


def find_path_with_required_stops(
    graph: nx.Graph, start: str, end: str, required_stops: Sequence[str] = ()
) -> PathResult | None:
    """Chain shortest paths through the required stops, in the given order.

    Each segment is optimal on its own; the stop order is not optimised, so the
    total is not necessarily the cheapest walk visiting every stop. Returns
    None as soon as one segment has no path.
    """

    path: list[str] = []
    total_cost = 0.0

    for i, (segment_start, segment_end) in enumerate(
        segment_pairs(start, end, required_stops)
    ):
        segment = shortest_path(graph, segment_start, segment_end)
        if segment is None:
            return None

        # Each segment starts where the previous one ended.
        path.extend(segment.path if i == 0 else segment.path[1:])
        total_cost += segment.cost

    return PathResult(path=tuple(path), total_cost=total_cost)

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field

import networkx as nx

from src.domain.algorithms.graph_builder import COST
from src.domain.models import SegmentPath


@dataclass(slots=True)
class SearchState:
    """Working state of one single-pair search. Never shared between calls."""

    distances: dict[str, float]
    previous: dict[str, str] = field(default_factory=dict)
    unsettled: set[str] = field(default_factory=set)
    frontier: list[tuple[float, str]] = field(default_factory=list)


def initialize_search(graph: nx.Graph, start: str) -> SearchState:
    distances = {node: math.inf for node in graph.nodes}
    distances[start] = 0.0
    return SearchState(
        distances=distances,
        unsettled=set(graph.nodes),
        frontier=[(0.0, start)],
    )


def next_unsettled(state: SearchState) -> str | None:
    """Pop the unsettled node with the smallest tentative distance.

    Heap entries are never updated in place; stale ones (already settled or
    superseded by a shorter distance) are skipped. Returns None once no
    reachable node is left.
    """

    while state.frontier:
        dist, node = heapq.heappop(state.frontier)
        if node not in state.unsettled or dist > state.distances[node]:
            continue
        return node
    return None


def relax_neighbors(graph: nx.Graph, current: str, state: SearchState) -> None:
    """Settle ``current`` and improve the distances of its unsettled neighbours."""

    state.unsettled.discard(current)
    base = state.distances[current]

    for neighbor, data in graph.adj[current].items():
        if neighbor not in state.unsettled:
            continue
        candidate = base + float(data[COST])
        if candidate < state.distances[neighbor]:
            state.distances[neighbor] = candidate
            state.previous[neighbor] = current
            heapq.heappush(state.frontier, (candidate, neighbor))


def reconstruct_path(
    previous: dict[str, str], start: str, end: str
) -> tuple[str, ...] | None:
    """Walk predecessors back from ``end``; None if the chain never hits ``start``."""

    path = [end]
    current = end
    while current != start:
        prev = previous.get(current)
        if prev is None:
            return None
        path.append(prev)
        current = prev

    path.reverse()
    return tuple(path)


def shortest_path(graph: nx.Graph, start: str, end: str) -> SegmentPath | None:
    """Minimum-cost path between two nodes using Dijkstra's algorithm.

    Assumes non-negative costs. Returns None when ``end`` cannot be reached,
    including when either endpoint is not part of the graph.
    """

    if start == end:
        return SegmentPath(path=(start,), cost=0.0)
    if start not in graph or end not in graph:
        return None

    state = initialize_search(graph, start)
    while True:
        current = next_unsettled(state)
        if current is None or current == end:
            break
        relax_neighbors(graph, current, state)

    path = reconstruct_path(state.previous, start, end)
    if path is None:
        return None
    return SegmentPath(path=path, cost=state.distances[end])

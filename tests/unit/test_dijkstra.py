from __future__ import annotations

import math
import random

import networkx as nx
import pytest

from src.domain.algorithms.dijkstra import (
    initialize_search,
    next_unsettled,
    reconstruct_path,
    relax_neighbors,
    shortest_path,
)
from src.domain.algorithms.graph_builder import build_graph
from src.domain.models import Edge


def _triangle() -> nx.Graph:
    return build_graph([Edge("A", "B", 1), Edge("A", "C", 4), Edge("B", "C", 2)])


def test_shortest_path_prefers_cheaper_detour() -> None:
    result = shortest_path(_triangle(), "A", "C")

    assert result is not None
    assert result.path == ("A", "B", "C")
    assert result.cost == 3.0


def test_shortest_path_returns_none_for_isolated_target() -> None:
    graph = build_graph([Edge("A", "B", 1)])
    graph.add_node("C")

    assert shortest_path(graph, "A", "C") is None


def test_shortest_path_returns_none_when_endpoint_absent() -> None:
    graph = build_graph([Edge("A", "B", 1)])

    assert shortest_path(graph, "A", "Z") is None
    assert shortest_path(graph, "Z", "A") is None


def test_shortest_path_start_equals_end() -> None:
    result = shortest_path(build_graph([Edge("A", "B", 1)]), "A", "A")

    assert result is not None
    assert result.path == ("A",)
    assert result.cost == 0.0


def test_shortest_path_start_equals_end_without_edges() -> None:
    result = shortest_path(nx.Graph(), "A", "A")

    assert result is not None
    assert result.path == ("A",)


def test_shortest_path_zero_cost_edges() -> None:
    graph = build_graph([Edge("A", "B", 0), Edge("B", "C", 0), Edge("A", "C", 1)])
    result = shortest_path(graph, "A", "C")

    assert result is not None
    assert result.cost == 0.0
    assert result.path == ("A", "B", "C")


def test_relax_neighbors_updates_distances_and_predecessors() -> None:
    graph = _triangle()
    state = initialize_search(graph, "A")

    relax_neighbors(graph, "A", state)

    assert state.distances["B"] == 1.0
    assert state.distances["C"] == 4.0
    assert state.previous == {"B": "A", "C": "A"}
    assert "A" not in state.unsettled


def test_relax_neighbors_skips_settled_neighbors() -> None:
    graph = build_graph([Edge("A", "B", 1)])
    state = initialize_search(graph, "A")
    state.unsettled.discard("B")

    relax_neighbors(graph, "A", state)

    assert state.distances["B"] == math.inf
    assert "B" not in state.previous


def test_next_unsettled_picks_minimum_and_skips_stale_entries() -> None:
    graph = _triangle()
    state = initialize_search(graph, "A")

    assert next_unsettled(state) == "A"
    relax_neighbors(graph, "A", state)
    assert next_unsettled(state) == "B"
    relax_neighbors(graph, "B", state)

    # C was pushed at 4 and again at 3; only the shorter entry is live.
    assert next_unsettled(state) == "C"
    relax_neighbors(graph, "C", state)
    assert next_unsettled(state) is None


def test_next_unsettled_returns_none_when_nothing_reachable() -> None:
    graph = build_graph([Edge("B", "C", 1)])
    state = initialize_search(graph, "A")

    # A is not part of the graph, so it is never settled.
    assert next_unsettled(state) is None


def test_reconstruct_path() -> None:
    assert reconstruct_path({"B": "A", "C": "B"}, "A", "C") == ("A", "B", "C")
    assert reconstruct_path({}, "A", "C") is None
    assert reconstruct_path({}, "A", "A") == ("A",)


def test_search_state_is_not_shared_between_calls() -> None:
    graph = _triangle()

    first = initialize_search(graph, "A")
    relax_neighbors(graph, "A", first)
    second = initialize_search(graph, "A")

    assert second.previous == {}
    assert second.distances["B"] == math.inf


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_shortest_path_cost_matches_networkx(seed: int) -> None:
    rng = random.Random(seed)
    names = [f"N{i}" for i in range(25)]
    edges = [
        Edge(rng.choice(names), rng.choice(names), float(rng.randint(0, 20)))
        for _ in range(70)
    ]
    edges = [e for e in edges if e.source != e.target]
    graph = build_graph(edges)

    for target in graph.nodes:
        expected = (
            nx.dijkstra_path_length(graph, "N0", target, weight="cost")
            if "N0" in graph and nx.has_path(graph, "N0", target)
            else None
        )
        result = shortest_path(graph, "N0", target)

        if expected is None:
            assert result is None
        else:
            assert result is not None
            assert result.cost == pytest.approx(expected)
            assert result.path[0] == "N0"
            assert result.path[-1] == target

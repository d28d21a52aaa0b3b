from __future__ import annotations

from typing import Iterable

import networkx as nx

from src.domain.models import Edge

COST = "cost"  # edge attribute holding the traversal cost


def build_graph(edges: Iterable[Edge], blocked_nodes: Iterable[str] = ()) -> nx.Graph:
    """Build the undirected adjacency structure for one request.

    Edges touching a blocked node are dropped without adding either endpoint,
    so nodes only appear when at least one surviving edge reaches them.
    A repeated pair keeps the cost of the last edge seen.
    """

    blocked = set(blocked_nodes)
    graph = nx.Graph()

    for edge in edges:
        if edge.source in blocked or edge.target in blocked:
            continue
        graph.add_edge(edge.source, edge.target, cost=float(edge.cost))

    return graph


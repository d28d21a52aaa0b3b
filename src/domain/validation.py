from __future__ import annotations

import math
from typing import Iterable, Sequence

from src.domain.exceptions import InvalidEdgeCost, InvalidEdgeNodes, MissingNodes
from src.domain.models import Edge


def validate_node_references(
    nodes: Iterable[str], edges: Sequence[Edge], must_exist: Sequence[str]
) -> None:
    """Check that every referenced node is declared.

    Raises MissingNodes for undeclared ``must_exist`` entries, then
    InvalidEdgeNodes for undeclared edge endpoints. Offenders are reported in
    input order; endpoints are listed once per occurrence.
    """

    declared = set(nodes)

    missing = [node for node in must_exist if node not in declared]
    if missing:
        raise MissingNodes(missing)

    endpoints = [node for edge in edges for node in (edge.source, edge.target)]
    invalid = [node for node in endpoints if node not in declared]
    if invalid:
        raise InvalidEdgeNodes(invalid)


def validate_edge_costs(edges: Sequence[Edge]) -> None:
    """Reject negative or non-finite costs; the search assumes costs >= 0."""

    bad = [
        f"{edge.source}-{edge.target} ({edge.cost})"
        for edge in edges
        if not math.isfinite(edge.cost) or edge.cost < 0
    ]
    if bad:
        raise InvalidEdgeCost(bad)

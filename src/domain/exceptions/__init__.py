from .routing import (
    InvalidEdgeCost,
    InvalidEdgeNodes,
    InvalidRequest,
    MissingNodes,
    NoPathFound,
    RoutingError,
)

__all__ = [
    "InvalidEdgeCost",
    "InvalidEdgeNodes",
    "InvalidRequest",
    "MissingNodes",
    "NoPathFound",
    "RoutingError",
]

from .graph import Constraints, Edge, PathRequest, PathResult, SegmentPath

__all__ = [
    "Constraints",
    "Edge",
    "PathRequest",
    "PathResult",
    "SegmentPath",
]

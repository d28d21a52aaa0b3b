from __future__ import annotations

import anyio
import anyio.to_thread
from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_path_finder_service, get_search_timeout_s
from src.adapters.api.schemas.graph import PathRequestSchema, PathResponseSchema
from src.app.services.path_finder_service import PathFinderService
from src.domain.models import Constraints, Edge, PathRequest

router = APIRouter(prefix="/graph", tags=["graph"])


def _request_from_schema(req: PathRequestSchema) -> PathRequest:
    return PathRequest(
        start=req.start,
        end=req.end,
        nodes=tuple(req.nodes),
        edges=tuple(
            Edge(source=e.source, target=e.target, cost=e.cost) for e in req.edges
        ),
        constraints=Constraints(
            blocked_nodes=tuple(req.constraints.blocked_nodes),
            required_stops=tuple(req.constraints.required_stops),
        ),
    )


@router.post(
    "/find-path",
    response_model=PathResponseSchema,
    status_code=201,
    summary="Find optimal path between two nodes",
    responses={
        400: {"description": "Invalid input data or no valid path found"},
        504: {"description": "Path search exceeded the configured deadline"},
    },
)
async def find_path(
    req: PathRequestSchema,
    service: PathFinderService = Depends(get_path_finder_service),
    timeout_s: float | None = Depends(get_search_timeout_s),
) -> PathResponseSchema:
    request = _request_from_schema(req)

    # The search itself is synchronous; run it off the event loop.
    try:
        with anyio.fail_after(timeout_s):
            result = await anyio.to_thread.run_sync(
                service.find_optimal_path, request, abandon_on_cancel=True
            )
    except TimeoutError:
        raise HTTPException(status_code=504, detail="Path search timed out") from None

    return PathResponseSchema(path=list(result.path), total_cost=result.total_cost)

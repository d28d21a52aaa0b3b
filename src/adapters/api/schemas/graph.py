from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EdgeSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(..., alias="from", examples=["A"])
    target: str = Field(..., alias="to", examples=["B"])
    cost: float = Field(..., allow_inf_nan=False, examples=[2])


class ConstraintsSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    blocked_nodes: list[str] = Field(
        default_factory=list, alias="blockedNodes", examples=[["G", "D"]]
    )
    required_stops: list[str] = Field(
        default_factory=list, alias="requiredStops", examples=[["E", "H"]]
    )


class PathRequestSchema(BaseModel):
    start: str = Field(..., examples=["A"])
    end: str = Field(..., examples=["L"])
    nodes: list[str] = Field(
        ...,
        min_length=2,
        examples=[["A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K", "L"]],
    )
    edges: list[EdgeSchema] = []
    constraints: ConstraintsSchema


class PathResponseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: list[str] = Field(..., examples=[["A", "B", "C", "E", "F"]])
    total_cost: float = Field(..., alias="totalCost", examples=[9])

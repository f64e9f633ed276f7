"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HullRequest(BaseModel):
    points: list[list[float]] = Field(..., description="Point set as [x, y] (or [x, y, z]) rows")
    capacity: int | None = Field(
        default=None,
        ge=0,
        description="Size of the output buffer; the hull must fit or the request fails",
    )


class PolygonCheckRequest(BaseModel):
    vertices: list[list[float]] = Field(..., description="Polygon ring, implicitly closed")


class ShadowRequest(BaseModel):
    vertices: list[list[float]] = Field(..., description="Obstacle outline in world coordinates")
    viewer: list[float] = Field(..., min_length=2, description="Viewer position [x, y]")
    projection_scale: float | None = Field(
        default=None,
        description="Far-copy scale factor (defaults to the configured value)",
    )


class ShadowStreamRequest(BaseModel):
    obstacles: dict[str, list[list[float]]] = Field(
        ..., description="Obstacle outlines keyed by name"
    )
    viewer_path: list[list[float]] = Field(..., description="One viewer position per tick")

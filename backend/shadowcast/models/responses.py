"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    projection_scale: float = 50.0


class HullResponse(BaseModel):
    hull: list[list[float]] = Field(default_factory=list)
    hull_size: int = 0
    triangles: list[list[int]] = Field(default_factory=list)
    area: float = 0.0


class PolygonCheckResponse(BaseModel):
    simple: bool
    convex: bool
    signed_area: float = 0.0


class ShadowResponse(BaseModel):
    active: bool = True
    hull: list[list[float]] = Field(default_factory=list)
    hull_size: int = 0
    triangles: list[list[int]] = Field(default_factory=list)
    update_order: str = ""
    processing_time_ms: float = 0.0
    error: str = ""

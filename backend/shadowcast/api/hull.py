"""POST /api/hull, /api/polygon/check — direct access to the geometry kernel."""

from __future__ import annotations

import numpy as np
from fastapi import APIRouter, HTTPException

from shadowcast.models.requests import HullRequest, PolygonCheckRequest
from shadowcast.models.responses import HullResponse, PolygonCheckResponse
from shadowcast.utils.geometry import (
    convex_hull,
    is_convex_polygon,
    is_simple_polygon,
    polygon_area,
    signed_area,
    triangle_fan,
)

router = APIRouter()


@router.post("/hull", response_model=HullResponse)
async def hull(req: HullRequest) -> HullResponse:
    out = np.empty((req.capacity, 2)) if req.capacity is not None else None
    try:
        h = convex_hull(req.points, out=out)
    except ValueError as e:  # GeometryError, or a malformed point array
        raise HTTPException(status_code=422, detail=str(e)) from e

    return HullResponse(
        hull=h.tolist(),
        hull_size=len(h),
        triangles=triangle_fan(len(h)).tolist(),
        area=round(polygon_area(h), 6),
    )


@router.post("/polygon/check", response_model=PolygonCheckResponse)
async def polygon_check(req: PolygonCheckRequest) -> PolygonCheckResponse:
    try:
        simple = is_simple_polygon(req.vertices)
        convex = is_convex_polygon(req.vertices)
    except ValueError as e:  # GeometryError, or a malformed point array
        raise HTTPException(status_code=422, detail=str(e)) from e

    return PolygonCheckResponse(
        simple=simple,
        convex=convex,
        signed_area=round(signed_area(req.vertices), 6),
    )

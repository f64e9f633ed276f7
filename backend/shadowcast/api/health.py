"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shadowcast.dependencies import get_shadow_config
from shadowcast.engine.config import ShadowConfig
from shadowcast.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(config: ShadowConfig = Depends(get_shadow_config)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        projection_scale=config.projection_scale,
    )

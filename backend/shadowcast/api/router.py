"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from shadowcast.api import health, hull, shadow

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(hull.router)
api_router.include_router(shadow.router)

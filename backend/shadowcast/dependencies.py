"""FastAPI dependency injection."""

from __future__ import annotations

from shadowcast.config import settings
from shadowcast.engine.config import ShadowConfig


def get_shadow_config() -> ShadowConfig:
    return ShadowConfig.from_settings(settings)

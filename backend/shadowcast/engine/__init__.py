"""ShadowCast per-frame shadow engine."""

from shadowcast.engine.config import ShadowConfig
from shadowcast.engine.context import ShadowFrame, UpdateOrder
from shadowcast.engine.projector import ProjectorState, ShadowProjector
from shadowcast.engine.scene import ShadowScene, create_scene
from shadowcast.engine.sink import MeshBuffer, plan_update_order

__all__ = [
    "ShadowConfig",
    "ShadowFrame",
    "UpdateOrder",
    "ProjectorState",
    "ShadowProjector",
    "ShadowScene",
    "create_scene",
    "MeshBuffer",
    "plan_update_order",
]

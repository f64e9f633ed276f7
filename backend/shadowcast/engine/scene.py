"""Scene orchestrator — ticks every obstacle's projector against one viewer position.

Projectors share no mutable state, so the order they run in within a tick is
irrelevant; they are run sequentially in registration order.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Generator, Iterable, Mapping
from typing import Any

from numpy.typing import ArrayLike

from shadowcast.engine.config import ShadowConfig
from shadowcast.engine.context import ShadowFrame
from shadowcast.engine.projector import ShadowProjector

logger = logging.getLogger(__name__)


class ShadowScene:
    """Owns a set of independent ShadowProjectors, keyed by name."""

    def __init__(self, projectors: Iterable[ShadowProjector] = ()) -> None:
        self.projectors: dict[str, ShadowProjector] = {}
        for p in projectors:
            self.add(p)

    def add(self, projector: ShadowProjector) -> None:
        if projector.name in self.projectors:
            raise ValueError(f"Duplicate obstacle name: {projector.name}")
        self.projectors[projector.name] = projector

    @property
    def active_count(self) -> int:
        return sum(1 for p in self.projectors.values() if p.is_active)

    @property
    def errors(self) -> dict[str, str]:
        return {name: p.last_error for name, p in self.projectors.items() if not p.is_active}

    def run_tick(self, viewer_position: ArrayLike) -> dict[str, ShadowFrame]:
        """Compute one tick for every active obstacle. Disabled ones are left out."""
        start = time.perf_counter()
        frames: dict[str, ShadowFrame] = {}

        for name, projector in self.projectors.items():
            if not projector.is_active:
                continue
            t0 = time.perf_counter()
            frame = projector.compute_shadow(viewer_position)
            elapsed = (time.perf_counter() - t0) * 1000
            if frame is None:
                status = "skipped" if projector.is_active else "disabled"
                logger.debug("  %s %s after %.2fms", name, status, elapsed)
                continue
            frames[name] = frame
            logger.debug("  %s: %d hull points in %.2fms", name, frame.hull_size, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Tick complete: %d/%d shadows in %.1fms",
            len(frames),
            len(self.projectors),
            total,
        )
        return frames

    def run_streaming(
        self, viewer_path: Iterable[ArrayLike]
    ) -> Generator[dict[str, Any], None, None]:
        """Run one tick per viewer position, yielding a progress dict after each.

        Projectors keep their state, so after the generator is exhausted any
        obstacle that failed along the way stays disabled (same as ``run_tick``).
        """
        for i, viewer in enumerate(viewer_path):
            t0 = time.perf_counter()
            frames = self.run_tick(viewer)
            elapsed_ms = round((time.perf_counter() - t0) * 1000, 2)
            yield {
                "index": i,
                "viewer": [float(v) for v in list(viewer)[:2]],
                "elapsed_ms": elapsed_ms,
                "active": self.active_count,
                "frames": {name: f.to_dict() for name, f in frames.items()},
                "errors": self.errors,
            }


def create_scene(
    obstacles: Mapping[str, ArrayLike],
    config: ShadowConfig | None = None,
) -> ShadowScene:
    """Factory: one projector per named outline, all sharing one config."""
    config = config or ShadowConfig()
    return ShadowScene(
        ShadowProjector(verts, config=config, name=name) for name, verts in obstacles.items()
    )

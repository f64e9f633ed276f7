"""ShadowProjector — per-obstacle shadow silhouette, recomputed every tick.

Each tick the obstacle's base vertices are doubled: the originals, plus a copy pushed
away from the viewer by ``projection_scale``. The convex hull of that set is the
shadow polygon, and a fan from hull vertex 0 triangulates it.

Whether an obstacle can cast a shadow at all is decided from its outline alone, on
the first tick: fewer than 3 distinct points or a collinear outline disables the
projector for good, wherever the viewer stands. Any later geometry failure also
disables it. A shadow hull without area on a single tick is logged and skipped.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from shadowcast.engine.config import ShadowConfig
from shadowcast.engine.context import ShadowFrame
from shadowcast.engine.sink import plan_update_order
from shadowcast.errors import DegenerateHullError, GeometryError, InsufficientPointsError
from shadowcast.utils.geometry import as_points, convex_hull, polygon_area, triangle_fan

logger = logging.getLogger(__name__)

ViewerSource = Callable[[], ArrayLike]


class ProjectorState(enum.Enum):
    ACTIVE = "active"
    DISABLED = "disabled"  # terminal


class ShadowProjector:
    """Owns one obstacle's base vertices and its working/hull buffers exclusively."""

    def __init__(
        self,
        base_vertices: ArrayLike,
        viewer: ViewerSource | None = None,
        config: ShadowConfig | None = None,
        name: str = "",
    ) -> None:
        self.config = config or ShadowConfig()
        self.name = name or "obstacle"
        self.viewer = viewer

        # Caller has already moved the outline into the shared (world) frame
        self.base_vertices: NDArray[np.float64] = as_points(base_vertices).copy()
        count = len(self.base_vertices)
        self._work = np.empty((2 * count, 2), dtype=np.float64)
        self._hull_buffer = np.empty(
            (self.config.hull_capacity_factor * count, 2), dtype=np.float64
        )

        self.state = ProjectorState.ACTIVE
        self.last_error = ""
        self.ticks = 0
        self.skipped_ticks = 0
        self._previous_size = 0

    @property
    def vertex_count(self) -> int:
        return len(self.base_vertices)

    @property
    def is_active(self) -> bool:
        return self.state is ProjectorState.ACTIVE

    def tick(self, dt: float) -> ShadowFrame | None:
        """Frame hook: compute against the injected viewer source.

        ``dt`` is accepted for the frame-hook signature and ignored; the shadow
        depends only on where the viewer is, not on elapsed time.
        """
        return self.compute_shadow()

    def compute_shadow(
        self,
        viewer_position: ArrayLike | None = None,
        projection_scale: float | None = None,
    ) -> ShadowFrame | None:
        """Compute this tick's shadow.

        Returns None once the projector is disabled, and for a tick whose shadow
        hull came out without area.
        """
        if not self.is_active:
            return None

        viewer = self._resolve_viewer(viewer_position)
        scale = self.config.projection_scale if projection_scale is None else projection_scale
        self.ticks += 1

        try:
            if self.ticks == 1:
                self.check_outline()
            count = self.vertex_count
            work = self._work
            work[:count] = self.base_vertices
            np.subtract(self.base_vertices, viewer, out=work[count:])
            work[count:] *= scale
            hull = convex_hull(work, out=self._hull_buffer)
        except GeometryError as e:
            self._disable(e)
            return None

        n = len(hull)
        if n < 3 or polygon_area(hull) <= self.config.degenerate_area:
            # The outline has area, so this comes from the viewer position alone
            self.skipped_ticks += 1
            logger.warning(
                "%s: tick %d skipped: shadow hull of %d points has no area (viewer %s)",
                self.name,
                self.ticks,
                n,
                viewer.tolist(),
            )
            return None

        frame = ShadowFrame(
            hull=hull.copy(),
            triangles=triangle_fan(n),
            tick=self.ticks,
            update_order=plan_update_order(self._previous_size, n),
        )
        self._previous_size = n
        return frame

    def check_outline(self) -> None:
        """Raise if the base outline cannot cast a shadow from any viewer position."""
        distinct = np.unique(self.base_vertices, axis=0)
        if len(distinct) < 3:
            raise InsufficientPointsError(
                f"Too few points in outline: {len(distinct)} distinct (need 3)"
            )

        extent = np.ptp(distinct, axis=0)
        threshold = max(
            self.config.degenerate_area,
            self.config.collinear_tolerance * float(extent @ extent),
        )
        area = polygon_area(convex_hull(distinct))
        if area <= threshold:
            raise DegenerateHullError(
                f"Outline of {len(distinct)} points is collinear and casts no area"
            )

    def _resolve_viewer(self, viewer_position: ArrayLike | None) -> NDArray[np.float64]:
        if viewer_position is None:
            if self.viewer is None:
                raise ValueError(
                    f"{self.name}: no viewer position given and no viewer source injected"
                )
            viewer_position = self.viewer()
        viewer = np.asarray(viewer_position, dtype=np.float64).reshape(-1)
        if len(viewer) < 2:
            raise ValueError(f"{self.name}: viewer position needs x and y, got {viewer.tolist()}")
        return viewer[:2]

    def _disable(self, error: GeometryError) -> None:
        self.state = ProjectorState.DISABLED
        self.last_error = str(error)
        logger.warning("%s: shadow disabled: %s", self.name, error)

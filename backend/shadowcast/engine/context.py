"""ShadowFrame — the per-tick result handed from a projector to the renderer sink.

Frames have no identity across ticks: each one is rebuilt from scratch.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray


class UpdateOrder(enum.Enum):
    # Shrinking: old indices would point past the new vertex count
    INDICES_FIRST = "indices_first"
    # Growing (or same size): new indices need the new vertices in place
    VERTICES_FIRST = "vertices_first"


@dataclass
class ShadowFrame:
    """Hull vertices plus the triangle fan that covers them."""

    # Ordered hull: nx2, clockwise, starting at the min-(x, y) point
    hull: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    # Fan indices into hull: (n-2)x3
    triangles: NDArray[np.int32] = field(
        default_factory=lambda: np.empty((0, 3), dtype=np.int32)
    )
    # Tick counter of the projector that produced this frame
    tick: int = 0
    # Which buffer the renderer must replace first (set by the sink planner)
    update_order: UpdateOrder = UpdateOrder.VERTICES_FIRST

    @property
    def hull_size(self) -> int:
        return len(self.hull)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    @property
    def flat_indices(self) -> list[int]:
        """Triangles as one flat index list, the layout mesh APIs expect."""
        return self.triangles.reshape(-1).tolist()

    def to_dict(self) -> dict[str, Any]:
        return {
            "hull": self.hull.tolist(),
            "triangles": self.triangles.tolist(),
            "hull_size": self.hull_size,
            "tick": self.tick,
            "update_order": self.update_order.value,
        }

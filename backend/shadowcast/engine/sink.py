"""Renderer sink contract — vertex/index buffer update ordering.

A renderer holds a vertex buffer and a triangle index buffer and replaces them with
two separate calls. Between those calls the index buffer must never reference a
vertex that does not exist:

    shrinking  → replace indices first, then vertices
    growing    → replace vertices first, then indices
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from shadowcast.engine.context import ShadowFrame, UpdateOrder
from shadowcast.errors import IndexRangeError

logger = logging.getLogger(__name__)


def plan_update_order(previous_vertex_count: int, new_vertex_count: int) -> UpdateOrder:
    if new_vertex_count < previous_vertex_count:
        return UpdateOrder.INDICES_FIRST
    return UpdateOrder.VERTICES_FIRST


class MeshBuffer:
    """In-memory stand-in for a renderer mesh that enforces the index-range invariant."""

    def __init__(self) -> None:
        self.vertices: NDArray[np.float64] = np.empty((0, 2))
        self.triangles: NDArray[np.int32] = np.empty((0, 3), dtype=np.int32)
        self.updates = 0

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def set_vertices(self, vertices: NDArray[np.float64]) -> None:
        self._check(self.triangles, len(vertices))
        self.vertices = np.array(vertices, dtype=np.float64, copy=True)

    def set_triangles(self, triangles: NDArray[np.int32]) -> None:
        self._check(triangles, self.vertex_count)
        self.triangles = np.array(triangles, dtype=np.int32, copy=True)

    def apply(self, frame: ShadowFrame) -> None:
        """Upload a frame in the order its size change requires."""
        order = plan_update_order(self.vertex_count, frame.hull_size)
        if order is UpdateOrder.INDICES_FIRST:
            self.set_triangles(frame.triangles)
            self.set_vertices(frame.hull)
        else:
            self.set_vertices(frame.hull)
            self.set_triangles(frame.triangles)
        self.updates += 1
        logger.debug(
            "Mesh update %d: %d vertices, %d triangles (%s)",
            self.updates,
            self.vertex_count,
            len(self.triangles),
            order.value,
        )

    @staticmethod
    def _check(triangles: NDArray[np.int32], vertex_count: int) -> None:
        if len(triangles) == 0:
            return
        top = int(np.max(triangles))
        if top >= vertex_count:
            raise IndexRangeError(
                f"Triangle index {top} out of range for {vertex_count} vertices"
            )

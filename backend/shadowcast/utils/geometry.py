"""Leaf-node geometry kernel. No engine imports.

Sign convention everywhere: positive = left turn (CCW), negative = right turn (CW),
zero = collinear.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from shadowcast.errors import (
    InsufficientPointsError,
    OutputTooSmallError,
    TooFewVerticesError,
)

Point2 = tuple[float, float]


def as_points(values: ArrayLike) -> NDArray[np.float64]:
    """Coerce a point list to an Nx2 float64 array. Extra columns (z) are dropped."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2 or arr.shape[1] < 2:
        raise ValueError(f"Expected an Nx2 or Nx3 point array, got shape {arr.shape}")
    return arr[:, :2]


def turn(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> float:
    """Cross product of edge (b - a) and edge (c - b)."""
    v1x, v1y = b[0] - a[0], b[1] - a[1]
    v2x, v2y = c[0] - b[0], c[1] - b[1]
    return float(v1x * v2y - v2x * v1y)


def turn_normalized(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> float:
    """Same as `turn`, with both edges scaled to unit length first.

    Magnitude is the sine of the turning angle, so it is comparable across
    edges of different length. A zero-length edge yields 0.0.
    """
    v1 = np.array([b[0] - a[0], b[1] - a[1]], dtype=np.float64)
    v2 = np.array([c[0] - b[0], c[1] - b[1]], dtype=np.float64)
    n1 = float(np.hypot(*v1))
    n2 = float(np.hypot(*v2))
    if n1 == 0.0 or n2 == 0.0:
        return 0.0
    v1 /= n1
    v2 /= n2
    return float(v1[0] * v2[1] - v2[0] * v1[1])


def convex_hull(
    points: ArrayLike,
    out: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """Monotone chain (Andrew) convex hull.

    Points are sorted by (x, y); two passes (left→right, then right→left) share one
    stack and pop while the last two stack points and the candidate make a left
    turn. The result is therefore wound clockwise, starting at the min-(x, y) point.
    Collinear boundary points are kept. Degenerate input (all collinear, heavy
    duplication) can legally return fewer than 3 points.

    If ``out`` is given, the hull is written to ``out[:n]`` and that view is returned.
    """
    pts = as_points(points)
    if len(pts) < 3:
        raise InsufficientPointsError(f"Too few points for a hull: {len(pts)} (need 3)")

    # np.unique on rows sorts lexicographically by (x, y) and drops exact duplicates
    ordered = [tuple(p) for p in np.unique(pts, axis=0).tolist()]

    stack: list[Point2] = []
    for sweep in (ordered, reversed(ordered)):
        for p in sweep:
            while len(stack) >= 2 and turn(stack[-2], stack[-1], p) > 0.0:
                stack.pop()
            stack.append(p)

    # Chains meet at both extreme points; keep first occurrence only
    hull = list(dict.fromkeys(stack))
    n = len(hull)

    if out is not None:
        if len(out) < n:
            raise OutputTooSmallError(
                f"Hull has {n} points but the output buffer holds {len(out)}"
            )
        if n:
            out[:n] = hull
        return out[:n]

    return np.array(hull, dtype=np.float64).reshape(n, 2)


def segments_intersect(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    d: Sequence[float],
) -> bool:
    """True if segment ab touches or crosses segment cd."""
    ab = np.sign(turn(a, b, c)) * np.sign(turn(a, b, d))
    cd = np.sign(turn(c, d, a)) * np.sign(turn(c, d, b))

    if ab == 0 and cd == 0:
        # Collinear: 1-D overlap on (x, y)-ordered endpoints
        p, q = sorted([(a[0], a[1]), (b[0], b[1])])
        r, s = sorted([(c[0], c[1]), (d[0], d[1])])
        return r <= q and p <= s

    return bool(ab <= 0 and cd <= 0)


def is_simple_polygon(vertices: ArrayLike) -> bool:
    """True if no two non-adjacent edges of the closed ring intersect. O(n²)."""
    pts = as_points(vertices)
    n = len(pts)
    if n < 3:
        raise TooFewVerticesError(f"A polygon needs at least 3 vertices, got {n}")

    for i in range(n):
        a, b = pts[i], pts[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue  # shares vertex 0
            c, d = pts[j], pts[(j + 1) % n]
            if segments_intersect(a, b, c, d):
                return False
    return True


def is_convex_polygon(vertices: ArrayLike) -> bool:
    """True if every cyclic vertex triple turns the same way as the first one."""
    pts = as_points(vertices)
    n = len(pts)
    if n < 3:
        raise TooFewVerticesError(f"A polygon needs at least 3 vertices, got {n}")

    reference = np.sign(turn(pts[0], pts[1], pts[2]))
    for i in range(n):
        s = np.sign(turn(pts[i], pts[(i + 1) % n], pts[(i + 2) % n]))
        if s != reference:
            return False
    return True


def signed_area(points: ArrayLike) -> float:
    """Shoelace formula over the implicitly closed ring. Positive = CCW, Negative = CW."""
    pts = as_points(points)
    if len(pts) < 3:
        return 0.0
    x = pts[:, 0]
    y = pts[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def polygon_area(points: ArrayLike) -> float:
    return abs(signed_area(points))


def triangle_fan(n: int) -> NDArray[np.int32]:
    """Index triples (0, i+1, i+2) covering an n-gon whose vertices are in winding order."""
    if n < 3:
        return np.empty((0, 3), dtype=np.int32)
    i = np.arange(n - 2, dtype=np.int32)
    return np.column_stack([np.zeros_like(i), i + 1, i + 2])

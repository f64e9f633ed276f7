"""Geometry failure kinds. All are deterministic input-validation errors, never transient."""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for every error raised by the geometry kernel."""


class InsufficientPointsError(GeometryError):
    """Fewer than 3 points were handed to the convex hull."""


class OutputTooSmallError(GeometryError):
    """The caller-provided hull buffer cannot hold the result."""


class TooFewVerticesError(GeometryError):
    """A polygon test got fewer than 3 vertices."""


class DegenerateHullError(GeometryError):
    """Hull collapsed to a point, a segment, or a zero-area ring."""


class IndexRangeError(ValueError):
    """A triangle index list references a vertex the mesh does not have."""

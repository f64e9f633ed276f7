"""Shadow engine configuration — controls projection and degeneracy handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shadowcast.config import Settings


@dataclass
class ShadowConfig:
    """Per-projector knobs. One instance may be shared; projectors never mutate it."""

    # Far copies are (vertex - viewer) * scale; large enough to sit "at infinity"
    projection_scale: float = 50.0

    # Hulls with |area| at or below this are treated as degenerate
    degenerate_area: float = 0.0

    # Outline area below this fraction of its squared bounding-box diagonal counts
    # as collinear (absorbs float rounding on slanted lines)
    collinear_tolerance: float = 1e-9

    # Hull buffer rows per base vertex (original + projected copy); at least 2
    hull_capacity_factor: int = 2

    def __post_init__(self) -> None:
        if self.hull_capacity_factor < 2:
            raise ValueError(
                f"hull_capacity_factor must be at least 2, got {self.hull_capacity_factor}"
            )
        if self.collinear_tolerance < 0:
            raise ValueError(
                f"collinear_tolerance must be non-negative, got {self.collinear_tolerance}"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> ShadowConfig:
        return cls(
            projection_scale=settings.projection_scale,
            degenerate_area=settings.degenerate_area,
        )

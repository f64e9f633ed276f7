"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest


# Sample outlines (y-up, counter-clockwise unless noted)

UNIT_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]

SQUARE_WITH_CENTER = UNIT_SQUARE + [(0.5, 0.5)]

# Self-intersecting quadrilateral: edges 0 and 2 cross at (0.5, 0.5)
BOWTIE = [(0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (0.0, 1.0)]

# Concave "arrow": vertex (1, 1) points inward
ARROW = [(0.0, 0.0), (2.0, 0.0), (1.0, 1.0), (2.0, 2.0), (0.0, 2.0)]

# Obstacle one unit away from the origin viewer
OBSTACLE_SQUARE = [(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 2.0)]

# Hull of OBSTACLE_SQUARE + its 50x projection from (0, 0), clockwise from min-(x, y)
OBSTACLE_SQUARE_SHADOW = [
    [1.0, 1.0],
    [1.0, 2.0],
    [50.0, 100.0],
    [100.0, 100.0],
    [100.0, 50.0],
    [2.0, 1.0],
]


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def random_points(rng: np.random.Generator) -> np.ndarray:
    """Points in general position (no three collinear with probability 1)."""
    return rng.uniform(-10.0, 10.0, size=(60, 2))


@pytest.fixture
def unit_square() -> list[tuple[float, float]]:
    return list(UNIT_SQUARE)


@pytest.fixture
def obstacle_square() -> list[tuple[float, float]]:
    return list(OBSTACLE_SQUARE)

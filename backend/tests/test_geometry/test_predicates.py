"""Tests for orientation, segment intersection and polygon classification."""

from __future__ import annotations

import pytest

from shadowcast.errors import TooFewVerticesError
from shadowcast.utils.geometry import (
    as_points,
    is_convex_polygon,
    is_simple_polygon,
    segments_intersect,
    signed_area,
    turn,
    turn_normalized,
)
from tests.conftest import ARROW, BOWTIE, UNIT_SQUARE


class TestTurn:
    def test_left_turn_is_positive(self):
        assert turn((0, 0), (1, 0), (1, 1)) == 1.0

    def test_right_turn_is_negative(self):
        assert turn((0, 0), (1, 0), (1, -1)) == -1.0

    def test_collinear_is_zero(self):
        assert turn((0, 0), (1, 1), (3, 3)) == 0.0

    def test_magnitude_scales_with_edge_length(self):
        assert turn((0, 0), (10, 0), (10, 5)) == 50.0

    def test_normalized_ignores_edge_length(self):
        assert turn_normalized((0, 0), (10, 0), (10, 5)) == pytest.approx(1.0)
        assert turn_normalized((0, 0), (1, 0), (1, -100)) == pytest.approx(-1.0)

    def test_normalized_keeps_sign(self):
        a, b, c = (0.0, 0.0), (3.0, 1.0), (4.0, 5.0)
        assert (turn_normalized(a, b, c) > 0) == (turn(a, b, c) > 0)

    def test_normalized_zero_length_edge(self):
        assert turn_normalized((1, 1), (1, 1), (2, 3)) == 0.0


class TestSegmentsIntersect:
    def test_crossing_at_interior_point(self):
        assert segments_intersect((0, 0), (2, 2), (0, 2), (2, 0))

    def test_parallel_disjoint(self):
        assert not segments_intersect((0, 0), (1, 0), (0, 1), (1, 1))

    def test_collinear_touching(self):
        assert segments_intersect((0, 0), (1, 0), (1, 0), (2, 0))

    def test_collinear_overlapping_reversed_endpoints(self):
        assert segments_intersect((1, 0), (0, 0), (0.5, 0), (3, 0))

    def test_collinear_disjoint(self):
        assert not segments_intersect((0, 0), (1, 0), (2, 0), (3, 0))

    def test_t_junction_touch(self):
        assert segments_intersect((0, 0), (2, 0), (1, 0), (1, 1))

    def test_non_touching_skew(self):
        assert not segments_intersect((0, 0), (1, 0), (2, -1), (2, 1))


class TestPolygonTests:
    def test_bowtie_is_not_simple(self):
        assert not is_simple_polygon(BOWTIE)

    def test_convex_quad_is_simple(self):
        assert is_simple_polygon(UNIT_SQUARE)

    def test_concave_but_simple(self):
        assert is_simple_polygon(ARROW)
        assert not is_convex_polygon(ARROW)

    def test_square_is_convex_either_winding(self):
        assert is_convex_polygon(UNIT_SQUARE)
        assert is_convex_polygon(UNIT_SQUARE[::-1])

    def test_bowtie_is_not_convex(self):
        assert not is_convex_polygon(BOWTIE)

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_too_few_vertices(self, n):
        with pytest.raises(TooFewVerticesError):
            is_convex_polygon(UNIT_SQUARE[:n])
        with pytest.raises(TooFewVerticesError):
            is_simple_polygon(UNIT_SQUARE[:n])

    def test_signed_area_follows_winding(self):
        assert signed_area(UNIT_SQUARE) == pytest.approx(1.0)
        assert signed_area(UNIT_SQUARE[::-1]) == pytest.approx(-1.0)


class TestAsPoints:
    def test_rejects_flat_array(self):
        with pytest.raises(ValueError):
            as_points([1.0, 2.0, 3.0])

    def test_drops_z(self):
        assert as_points([(1, 2, 3)]).tolist() == [[1.0, 2.0]]

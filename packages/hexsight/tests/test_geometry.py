"""
Test suite for hex coordinate geometry.

Tests cover:
- Hex distance (symmetry, identity, known values)
- Axial to cartesian projection
- Corner offsets
- Angle unwrapping and normalisation
- Angular bounds, including cells straddling the +-pi cut
"""

import math
import random

import pytest
from hexsight import (
    HexCell,
    angular_bounds,
    axial_distance,
    center_angle,
    corner_offsets,
    hex_corners,
    hex_distance,
    neighbors,
    normalize_angle,
    to_cartesian,
    unwrap,
)


def cell(q, r, index=0):
    return HexCell(index=index, q=q, r=r)


class TestHexDistance:
    """Test the cube-coordinate distance metric."""

    def test_identity_is_zero(self):
        assert hex_distance(cell(3, -2), cell(3, -2)) == 0

    def test_neighbors_are_distance_one(self):
        origin = cell(0, 0)
        for q, r in neighbors(0, 0):
            assert hex_distance(origin, cell(q, r)) == 1

    def test_known_values(self):
        assert hex_distance(cell(0, 0), cell(2, 0)) == 2
        assert hex_distance(cell(0, 1), cell(2, 0)) == 2
        assert hex_distance(cell(0, 0), cell(3, -3)) == 3
        assert hex_distance(cell(-2, 1), cell(2, -1)) == 4

    def test_symmetry_random_pairs(self):
        rng = random.Random(7)
        for _ in range(200):
            a = cell(rng.randint(-10, 10), rng.randint(-10, 10))
            b = cell(rng.randint(-10, 10), rng.randint(-10, 10))
            assert hex_distance(a, b) == hex_distance(b, a)

    def test_axial_distance_matches_cell_distance(self):
        rng = random.Random(11)
        for _ in range(100):
            a = cell(rng.randint(-6, 6), rng.randint(-6, 6))
            b = cell(rng.randint(-6, 6), rng.randint(-6, 6))
            assert axial_distance(b.q - a.q, b.r - a.r) == hex_distance(a, b)


class TestProjection:
    """Test pointy-top axial to cartesian projection."""

    def test_origin(self):
        assert to_cartesian(0, 0) == (0.0, 0.0)

    def test_q_axis(self):
        x, y = to_cartesian(1, 0)
        assert x == pytest.approx(math.sqrt(3))
        assert y == pytest.approx(0.0)

    def test_r_axis(self):
        x, y = to_cartesian(0, 1)
        assert x == pytest.approx(math.sqrt(3) / 2)
        assert y == pytest.approx(1.5)

    def test_size_scales_linearly(self):
        x1, y1 = to_cartesian(2, -1, 1.0)
        x3, y3 = to_cartesian(2, -1, 3.0)
        assert x3 == pytest.approx(3 * x1)
        assert y3 == pytest.approx(3 * y1)

    def test_neighbor_centers_are_equidistant(self):
        for q, r in neighbors(0, 0):
            x, y = to_cartesian(q, r)
            assert math.hypot(x, y) == pytest.approx(math.sqrt(3))


class TestCorners:
    """Test pointy-top corner offsets."""

    def test_six_corners_on_unit_circle(self):
        offsets = corner_offsets(1.0)
        assert len(offsets) == 6
        for dx, dy in offsets:
            assert math.hypot(dx, dy) == pytest.approx(1.0)

    def test_first_corner_at_minus_thirty_degrees(self):
        dx, dy = corner_offsets(1.0)[0]
        assert math.degrees(math.atan2(dy, dx)) == pytest.approx(-30.0)

    def test_corners_follow_sixty_degree_steps(self):
        offsets = corner_offsets(2.0)
        for i, (dx, dy) in enumerate(offsets):
            expected = math.radians(60 * i - 30)
            assert dx == pytest.approx(2.0 * math.cos(expected))
            assert dy == pytest.approx(2.0 * math.sin(expected))

    def test_hex_corners_offset_by_center(self):
        cx, cy = to_cartesian(1, 1)
        for (x, y), (dx, dy) in zip(hex_corners(1, 1), corner_offsets(1.0)):
            assert x == pytest.approx(cx + dx)
            assert y == pytest.approx(cy + dy)

    def test_adjacent_hexes_share_two_corners(self):
        a = hex_corners(0, 0)
        b = hex_corners(1, 0)
        shared = [
            p for p in a
            if any(math.isclose(p[0], o[0], abs_tol=1e-9) and math.isclose(p[1], o[1], abs_tol=1e-9) for o in b)
        ]
        assert len(shared) == 2


class TestAngles:
    """Test unwrap / normalize helpers."""

    def test_normalize_into_range(self):
        assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
        assert normalize_angle(5 * math.pi) == pytest.approx(math.pi)
        assert 0.0 <= normalize_angle(-1e-18) < 2 * math.pi

    def test_unwrap_across_branch_cut(self):
        # 179 degrees seen from -179 degrees is 2 degrees behind, not 358 ahead.
        delta = unwrap(math.radians(179), math.radians(-179))
        assert delta == pytest.approx(math.radians(-2))

    def test_unwrap_small_difference(self):
        assert unwrap(0.3, 0.1) == pytest.approx(0.2)

    def test_center_angle(self):
        origin = cell(0, 0)
        assert center_angle(origin, cell(1, 0)) == pytest.approx(0.0)
        assert center_angle(origin, cell(-1, 0)) == pytest.approx(math.pi)
        assert center_angle(origin, cell(0, 1)) == pytest.approx(math.pi / 3)


class TestAngularBounds:
    """Test the arc covering a cell's corners."""

    def test_adjacent_cell_spans_sixty_degrees(self):
        lo, hi = angular_bounds(cell(0, 0), cell(1, 0))
        assert hi - lo == pytest.approx(math.radians(60))
        assert lo == pytest.approx(math.radians(330))
        assert hi == pytest.approx(math.radians(390))

    def test_far_cell_is_narrower(self):
        lo1, hi1 = angular_bounds(cell(0, 0), cell(1, 0))
        lo2, hi2 = angular_bounds(cell(0, 0), cell(3, 0))
        assert hi2 - lo2 < hi1 - lo1

    def test_cell_behind_branch_cut(self):
        # (-1, 0) sits at angle pi; its corners straddle +-pi.
        lo, hi = angular_bounds(cell(0, 0), cell(-1, 0))
        assert lo == pytest.approx(math.radians(150))
        assert hi == pytest.approx(math.radians(210))

    def test_bounds_contain_center_angle(self):
        source = cell(0, 0)
        for q, r in [(2, -1), (-2, 1), (0, -3), (1, 2), (-3, 0)]:
            lo, hi = angular_bounds(source, cell(q, r))
            mid = normalize_angle(center_angle(source, cell(q, r)))
            assert lo <= mid <= hi or lo <= mid + 2 * math.pi <= hi

    def test_lo_normalised_hi_not_less(self):
        rng = random.Random(3)
        source = cell(0, 0)
        for _ in range(100):
            q, r = rng.randint(-5, 5), rng.randint(-5, 5)
            if (q, r) == (0, 0):
                continue
            lo, hi = angular_bounds(source, cell(q, r))
            assert 0.0 <= lo < 2 * math.pi
            assert lo <= hi < lo + math.pi

"""
Test suite for map building helpers.

Tests cover:
- Hexagon-shaped map sizes and index density
- Coordinate bounds
- Neighbor wiring and custom costs
- Coordinate lookup and height changes
"""

import pytest
from hexsight import (
    build_hex_map,
    cell_at,
    hex_distance,
    link_neighbors,
    set_height,
)


class TestBuildHexMap:
    """Test hexagon-shaped map construction."""

    @pytest.mark.parametrize("radius", [0, 1, 2, 3, 5])
    def test_cell_count(self, radius):
        cells = build_hex_map(radius)
        assert len(cells) == 3 * radius * (radius + 1) + 1

    def test_radius_two_has_nineteen_cells(self):
        assert len(build_hex_map(2)) == 19

    def test_indices_are_dense(self):
        cells = build_hex_map(3)
        assert [c.index for c in cells] == list(range(len(cells)))

    def test_all_within_radius(self):
        cells = build_hex_map(3)
        origin = cell_at(cells, 0, 0)
        assert origin is not None
        assert all(hex_distance(origin, c) <= 3 for c in cells)

    def test_coordinates_unique(self):
        cells = build_hex_map(4)
        assert len({c.coord for c in cells}) == len(cells)

    def test_default_height(self):
        assert all(c.height == 1 for c in build_hex_map(2))
        assert all(c.height == 4 for c in build_hex_map(2, height=4))

    def test_q_major_order(self):
        cells = build_hex_map(1)
        assert cells[0].coord == (-1, 0)
        assert cells[-1].coord == (1, 0)

    def test_negative_radius_rejected(self):
        with pytest.raises(ValueError):
            build_hex_map(-1)


class TestLinkNeighbors:
    """Test adjacency wiring."""

    def test_center_has_six_neighbors(self):
        cells = link_neighbors(build_hex_map(2))
        center = cell_at(cells, 0, 0)
        assert len(center.connections) == 6
        assert all(w == 1.0 for w in center.connections.values())

    def test_corner_has_three_neighbors(self):
        cells = link_neighbors(build_hex_map(2))
        corner = cell_at(cells, 2, 0)
        assert len(corner.connections) == 3

    def test_links_are_symmetric(self):
        cells = link_neighbors(build_hex_map(2))
        for cell in cells:
            for other in cell.connections:
                assert cell.index in cells[other].connections

    def test_links_only_adjacent_cells(self):
        cells = link_neighbors(build_hex_map(3))
        for cell in cells:
            for other in cell.connections:
                assert hex_distance(cell, cells[other]) == 1

    def test_custom_cost(self):
        cells = build_hex_map(1)
        link_neighbors(cells, cost=lambda a, b: float(b.height + 1))
        center = cell_at(cells, 0, 0)
        assert set(center.connections.values()) == {2.0}

    def test_negative_cost_rejected(self):
        with pytest.raises(ValueError):
            link_neighbors(build_hex_map(1), cost=lambda a, b: -1.0)


class TestLookup:
    """Test coordinate lookup and height updates."""

    def test_cell_at_missing(self):
        assert cell_at(build_hex_map(1), 5, 5) is None

    def test_set_height(self):
        cells = build_hex_map(2)
        assert set_height(cells, 1, 0, 3)
        assert cell_at(cells, 1, 0).height == 3

    def test_set_height_missing(self):
        assert not set_height(build_hex_map(1), 4, 0, 3)

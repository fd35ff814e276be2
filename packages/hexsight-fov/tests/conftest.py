import random

import pytest
from hexsight import build_hex_map, cell_at


@pytest.fixture
def grid():
    """Flat hexagon-shaped map of radius 2 (19 cells)."""
    return build_hex_map(2)


@pytest.fixture
def origin(grid):
    return cell_at(grid, 0, 0)


@pytest.fixture
def random_terrain():
    """Factory: radius-N map with seeded random heights."""

    def make(seed, radius=5, low=0, high=3):
        rng = random.Random(seed)
        cells = build_hex_map(radius)
        for cell in cells:
            cell.height = rng.randint(low, high)
        return cells

    return make

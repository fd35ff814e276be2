"""Layout, color, and rendering constants."""
from __future__ import annotations

import math

# Defaults (overridden by CLI flags)
DEFAULT_MAP_RADIUS = 6
DEFAULT_VIEW_RADIUS = 4
DEFAULT_HEX_PX = 28

STATUS_H = 56
FPS = 30

COLOR_BG = (20, 20, 30)
COLOR_OUTLINE = (10, 10, 14)
COLOR_SOURCE = (230, 200, 40)
COLOR_HIDDEN = (55, 55, 65)
COLOR_PATH = (240, 120, 60)
COLOR_PATH_END = (255, 255, 255)
COLOR_HOVER = (255, 255, 255)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DARK = (20, 20, 20)

# Visible cells shade from light to dark green with height.
VISIBLE_BY_HEIGHT: list[tuple[int, int, int]] = [
    (150, 220, 140),
    (100, 190, 90),
    (60, 150, 60),
    (40, 115, 45),
    (30, 85, 35),
]


def visible_color(height: int) -> tuple[int, int, int]:
    return VISIBLE_BY_HEIGHT[min(max(height, 0), len(VISIBLE_BY_HEIGHT) - 1)]


def compute_layout(map_radius: int, hex_px: int) -> dict[str, int]:
    """Window size that fits a hexagon-shaped map of ``map_radius``."""
    span = 2 * map_radius + 1
    grid_w = int(math.sqrt(3) * hex_px * span) + hex_px
    grid_h = int(1.5 * hex_px * (span - 1) + 2 * hex_px) + hex_px
    return {
        "grid_w": grid_w,
        "grid_h": grid_h,
        "screen_w": grid_w,
        "screen_h": grid_h + STATUS_H,
        "origin_x": grid_w // 2,
        "origin_y": grid_h // 2,
    }

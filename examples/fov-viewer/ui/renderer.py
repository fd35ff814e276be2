"""Hex map rendering - source / visible / hidden cells and the current path."""
from __future__ import annotations

import math

import pygame

from hexsight import HexCell, hex_corners, to_cartesian
from hexsight.geometry import SQRT3

from game.session import Session
from ui.constants import (
    COLOR_HIDDEN,
    COLOR_HOVER,
    COLOR_OUTLINE,
    COLOR_PATH,
    COLOR_PATH_END,
    COLOR_SOURCE,
    COLOR_TEXT_DARK,
    visible_color,
)


def cell_center(cell: HexCell, hex_px: int, origin: tuple[int, int]) -> tuple[float, float]:
    x, y = to_cartesian(cell.q, cell.r, hex_px)
    return origin[0] + x, origin[1] + y


def pixel_to_axial(px: float, py: float, hex_px: int, origin: tuple[int, int]) -> tuple[int, int]:
    """Screen position to the axial coordinate of the hex under it."""
    x = (px - origin[0]) / hex_px
    y = (py - origin[1]) / hex_px
    fq = SQRT3 / 3.0 * x - y / 3.0
    fr = 2.0 / 3.0 * y
    fs = -fq - fr

    q, r, s = round(fq), round(fr), round(fs)
    dq, dr, ds = abs(q - fq), abs(r - fr), abs(s - fs)
    if dq > dr and dq > ds:
        q = -r - s
    elif dr > ds:
        r = -q - s
    return q, r


def _polygon(cell: HexCell, hex_px: int, origin: tuple[int, int]) -> list[tuple[float, float]]:
    return [(origin[0] + x, origin[1] + y) for x, y in hex_corners(cell.q, cell.r, hex_px)]


def draw_map(
    surface: pygame.Surface,
    session: Session,
    hex_px: int,
    origin: tuple[int, int],
    font: pygame.font.Font,
) -> None:
    """Fill each hex by visibility and label it with its height."""
    for cell in session.cells:
        if cell.index == session.source.index:
            color = COLOR_SOURCE
        elif cell.index in session.visible:
            color = visible_color(cell.height)
        else:
            color = COLOR_HIDDEN
        points = _polygon(cell, hex_px, origin)
        pygame.draw.polygon(surface, color, points)
        pygame.draw.polygon(surface, COLOR_OUTLINE, points, 1)

        label = font.render(str(cell.height), True, COLOR_TEXT_DARK)
        cx, cy = cell_center(cell, hex_px, origin)
        surface.blit(label, label.get_rect(center=(int(cx), int(cy))))


def draw_path(
    surface: pygame.Surface,
    session: Session,
    hex_px: int,
    origin: tuple[int, int],
) -> None:
    """Draw the route as a polyline with ringed endpoints."""
    radius = max(3, hex_px // 4)
    for endpoint in (session.path_start, session.path_goal):
        if endpoint is not None:
            cx, cy = cell_center(endpoint, hex_px, origin)
            pygame.draw.circle(surface, COLOR_PATH_END, (int(cx), int(cy)), radius, 2)

    if session.path is None or session.path.path is None:
        return
    by_index = {cell.index: cell for cell in session.cells}
    points = [cell_center(by_index[i], hex_px, origin) for i in session.path.path]
    if len(points) >= 2:
        pygame.draw.lines(surface, COLOR_PATH, False, points, 3)


def draw_hover(
    surface: pygame.Surface,
    cell: HexCell | None,
    hex_px: int,
    origin: tuple[int, int],
) -> None:
    if cell is None:
        return
    pygame.draw.polygon(surface, COLOR_HOVER, _polygon(cell, hex_px, origin), 2)


def label_font(hex_px: int) -> pygame.font.Font:
    return pygame.font.SysFont("monospace", max(10, math.floor(hex_px * 0.6)), bold=True)

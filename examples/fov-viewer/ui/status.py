"""Bottom status bar."""
from __future__ import annotations

import math

import pygame

from game.session import Session
from ui.constants import COLOR_TEXT, STATUS_H


class StatusBar:
    """Shows the session settings and the latest message."""

    def __init__(self) -> None:
        self._message = ""
        self._color = COLOR_TEXT
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def set(self, message: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface, session: Session, top: int) -> None:
        width = surface.get_width()
        pygame.draw.rect(surface, (30, 30, 40), pygame.Rect(0, top, width, STATUS_H))

        font = self._get_font()
        mode = "A*" if session.use_heuristic else "Dijkstra"
        summary = (
            f"source {session.source}  view r={session.view_radius}  "
            f"fov={session.algorithm.value}  path={mode}  "
            f"visible={len(session.visible)}/{len(session.cells)}"
        )
        if session.path is not None:
            if session.path.found:
                summary += f"  cost={session.path.cost:g}"
            elif math.isinf(session.path.cost):
                summary += "  no path"
        surface.blit(font.render(summary, True, COLOR_TEXT), (8, top + 8))
        if self._message:
            surface.blit(font.render(self._message, True, self._color), (8, top + 30))

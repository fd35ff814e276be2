"""FOV Viewer - interactive field of view and pathfinding on a hex map.

Controls:
  Left-click    Move the viewer (source) to the hex
  Right-click   Pick path start, then goal (a third pick starts over)
  Wheel up/down Raise / lower the hovered hex
  Up / Down     View radius +1 / -1
  A             Switch FOV algorithm (shadowcast / raycast)
  H             Switch path search (A* / Dijkstra)
  C             Clear the path
  Escape        Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from hexsight import cell_at
from hexsight_fov import FovAlgorithm

from game.session import Session
from ui.constants import (
    COLOR_BG,
    DEFAULT_HEX_PX,
    DEFAULT_MAP_RADIUS,
    DEFAULT_VIEW_RADIUS,
    FPS,
    compute_layout,
)
from ui.renderer import draw_hover, draw_map, draw_path, label_font, pixel_to_axial
from ui.status import StatusBar


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="FOV Viewer - hexsight visual demo")
    p.add_argument("--map-radius", type=int, default=DEFAULT_MAP_RADIUS,
                   help=f"Hex map radius (1-12, default: {DEFAULT_MAP_RADIUS})")
    p.add_argument("--view-radius", type=int, default=DEFAULT_VIEW_RADIUS,
                   help=f"Initial view radius (default: {DEFAULT_VIEW_RADIUS})")
    p.add_argument("--hex-px", type=int, default=DEFAULT_HEX_PX,
                   help=f"Hex corner radius in pixels (default: {DEFAULT_HEX_PX})")
    p.add_argument("--algorithm", choices=[a.value for a in FovAlgorithm],
                   default=FovAlgorithm.SHADOWCAST.value, help="FOV algorithm")
    p.add_argument("--log-level", default="WARNING",
                   help="Logging level for engine diagnostics (default: WARNING)")
    args = p.parse_args()
    args.map_radius = max(1, min(12, args.map_radius))
    args.view_radius = max(0, args.view_radius)
    args.hex_px = max(10, min(48, args.hex_px))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    layout = compute_layout(args.map_radius, args.hex_px)
    origin = (layout["origin_x"], layout["origin_y"])
    hex_px = args.hex_px

    pygame.init()
    screen = pygame.display.set_mode((layout["screen_w"], layout["screen_h"]))
    pygame.display.set_caption("FOV Viewer")
    clock = pygame.time.Clock()

    session = Session(args.map_radius, args.view_radius, FovAlgorithm(args.algorithm))
    status = StatusBar()
    font = label_font(hex_px)

    running = True
    while running:
        clock.tick(FPS)
        mouse_q, mouse_r = pixel_to_axial(*pygame.mouse.get_pos(), hex_px, origin)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_UP:
                    session.set_view_radius(session.view_radius + 1)
                    status.set(f"View radius {session.view_radius}")
                elif event.key == pygame.K_DOWN:
                    if session.set_view_radius(session.view_radius - 1):
                        status.set(f"View radius {session.view_radius}")
                    else:
                        status.set("View radius must be >= 0", (255, 80, 80))
                elif event.key == pygame.K_a:
                    algorithm = session.toggle_algorithm()
                    status.set(f"FOV algorithm: {algorithm.value}")
                elif event.key == pygame.K_h:
                    mode = "A*" if session.toggle_heuristic() else "Dijkstra"
                    status.set(f"Path search: {mode}")
                elif event.key == pygame.K_c:
                    session.clear_path()
                    status.set("Path cleared")

            elif event.type == pygame.MOUSEBUTTONDOWN:
                q, r = pixel_to_axial(*event.pos, hex_px, origin)
                if event.button == 1:
                    if session.move_source(q, r):
                        status.set(f"Source moved to ({q},{r})", (230, 200, 40))
                elif event.button == 3:
                    if session.pick_path_endpoint(q, r):
                        which = "goal" if session.path_goal is not None else "start"
                        status.set(f"Path {which} at ({q},{r})", (240, 120, 60))
                elif event.button in (4, 5):
                    delta = 1 if event.button == 4 else -1
                    if session.change_height(q, r, delta):
                        status.set(f"Height of ({q},{r}) set to {cell_at(session.cells, q, r).height}")

        # --- Render ---
        screen.fill(COLOR_BG)
        draw_map(screen, session, hex_px, origin, font)
        draw_path(screen, session, hex_px, origin)
        draw_hover(screen, cell_at(session.cells, mouse_q, mouse_r), hex_px, origin)
        status.draw(screen, session, layout["grid_h"])
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()

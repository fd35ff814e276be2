"""Viewer session - the mutable map plus cached engine results."""
from __future__ import annotations

import logging

from hexsight import HexCell, PathResult, build_hex_map, cell_at, link_neighbors
from hexsight_fov import FovAlgorithm, FovConfig, compute_fov_with, visible_indices
from hexsight_path import find_path

log = logging.getLogger(__name__)

CLIMB_COST = 2.0


def step_cost(a: HexCell, b: HexCell) -> float:
    """Flat moves cost 1; climbing costs extra per level."""
    return 1.0 + max(0, b.height - a.height) * CLIMB_COST


class Session:
    """Owns the grid snapshot and the operator's settings.

    Engines are pure, so results are recomputed from scratch whenever the
    map or a setting changes.
    """

    def __init__(self, map_radius: int, view_radius: int, algorithm: FovAlgorithm) -> None:
        self.map_radius = map_radius
        self.cells = build_hex_map(map_radius)
        self.source = cell_at(self.cells, 0, 0)
        self.view_radius = view_radius
        self.algorithm = algorithm
        self.use_heuristic = True
        self.path_start: HexCell | None = None
        self.path_goal: HexCell | None = None
        self.visible: frozenset[int] = frozenset()
        self.path: PathResult | None = None
        self.refresh()

    # --- Commands ---

    def move_source(self, q: int, r: int) -> bool:
        cell = cell_at(self.cells, q, r)
        if cell is None:
            return False
        self.source = cell
        self.refresh()
        return True

    def change_height(self, q: int, r: int, delta: int) -> bool:
        cell = cell_at(self.cells, q, r)
        if cell is None:
            return False
        cell.height = max(0, cell.height + delta)
        self.refresh()
        return True

    def set_view_radius(self, radius: int) -> bool:
        if radius < 0:
            return False
        self.view_radius = radius
        self.refresh()
        return True

    def toggle_algorithm(self) -> FovAlgorithm:
        if self.algorithm is FovAlgorithm.SHADOWCAST:
            self.algorithm = FovAlgorithm.RAYCAST
        else:
            self.algorithm = FovAlgorithm.SHADOWCAST
        self.refresh()
        return self.algorithm

    def toggle_heuristic(self) -> bool:
        self.use_heuristic = not self.use_heuristic
        self.refresh()
        return self.use_heuristic

    def pick_path_endpoint(self, q: int, r: int) -> bool:
        """First pick sets the start, second the goal, third starts over."""
        cell = cell_at(self.cells, q, r)
        if cell is None:
            return False
        if self.path_start is None or self.path_goal is not None:
            self.path_start, self.path_goal = cell, None
        else:
            self.path_goal = cell
        self.refresh()
        return True

    def clear_path(self) -> None:
        self.path_start = self.path_goal = None
        self.refresh()

    # --- Engine calls ---

    def refresh(self) -> None:
        config = FovConfig(radius=self.view_radius, algorithm=self.algorithm)
        self.visible = visible_indices(compute_fov_with(self.cells, self.source, config))

        self.path = None
        if self.path_start is not None and self.path_goal is not None:
            link_neighbors(self.cells, cost=step_cost)
            self.path = find_path(
                self.cells, self.path_start.index, self.path_goal.index, self.use_heuristic,
            )
        log.debug(
            "refresh: source=%s visible=%d path=%s",
            self.source, len(self.visible), self.path,
        )

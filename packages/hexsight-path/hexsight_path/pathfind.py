"""Best-first shortest path over per-cell adjacency (Dijkstra / A*)."""
from __future__ import annotations

import heapq
import logging
import math
from typing import Sequence

from hexsight import HexCell, PathResult, UnknownCellError, hex_distance

log = logging.getLogger(__name__)


def path_cost(cells: Sequence[HexCell], path: Sequence[int]) -> float:
    """Sum of the edge weights along ``path``, read from the adjacency maps."""
    by_index = {cell.index: cell for cell in cells}
    total = 0.0
    for a, b in zip(path, path[1:]):
        cell = by_index.get(a)
        if cell is None:
            raise UnknownCellError(a)
        if b not in cell.connections:
            raise KeyError(f"No edge {a}->{b} in snapshot")
        total += cell.connections[b]
    return total


def find_path(
    cells: Sequence[HexCell],
    start_index: int,
    goal_index: int,
    use_heuristic: bool = True,
) -> PathResult:
    """Cheapest route from ``start_index`` to ``goal_index``.

    With ``use_heuristic`` the frontier is keyed by cost-so-far plus hex
    distance to the goal (A*); without it the key is the cost alone
    (Dijkstra). A* is optimal only when every edge costs at least the hex
    distance between its endpoints.
    """
    by_index = {cell.index: cell for cell in cells}
    if start_index not in by_index:
        raise UnknownCellError(start_index)
    if goal_index not in by_index:
        raise UnknownCellError(goal_index)
    goal = by_index[goal_index]

    def heuristic(index: int) -> float:
        if not use_heuristic:
            return 0.0
        return float(hex_distance(by_index[index], goal))

    g_score: dict[int, float] = {start_index: 0.0}
    f_score: dict[int, float] = {start_index: heuristic(start_index)}
    came_from: dict[int, int] = {}
    open_set: list[tuple[float, int, int]] = [(f_score[start_index], 0, start_index)]
    counter = 1
    expanded = 0

    while open_set:
        priority, _, current = heapq.heappop(open_set)
        # Superseded entry; a cheaper one for this cell was pushed later.
        if priority > f_score[current]:
            continue
        expanded += 1
        if current == goal_index:
            path: list[int] = [current]
            while current in came_from:
                current = came_from[current]
                path.append(current)
            path.reverse()
            cost = path_cost(cells, path)
            log.debug(
                "path %d->%d found: %d steps, cost %s, %d expansions",
                start_index, goal_index, len(path) - 1, cost, expanded,
            )
            return PathResult(tuple(path), cost)

        for neighbor, weight in by_index[current].connections.items():
            if neighbor not in by_index:
                raise UnknownCellError(neighbor)
            tentative = g_score[current] + weight
            if tentative < g_score.get(neighbor, math.inf):
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score[neighbor] = tentative + heuristic(neighbor)
                heapq.heappush(open_set, (f_score[neighbor], counter, neighbor))
                counter += 1

    log.debug(
        "path %d->%d unreachable after %d expansions",
        start_index, goal_index, expanded,
    )
    return PathResult.unreachable()

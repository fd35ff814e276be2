"""Map building helpers - hexagon-shaped lattices and adjacency wiring."""
from __future__ import annotations

from typing import Callable

from hexsight.geometry import neighbors
from hexsight.types import HexCell


def build_hex_map(radius: int, height: int = 1) -> list[HexCell]:
    """Every cell within ``radius`` steps of (0, 0), indexed densely from 0.

    Cells are created q-major, then r, so index order is stable for a given
    radius.
    """
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")
    cells: list[HexCell] = []
    for q in range(-radius, radius + 1):
        for r in range(-radius, radius + 1):
            if abs(-q - r) <= radius:
                cells.append(HexCell(index=len(cells), q=q, r=r, height=height))
    return cells


def link_neighbors(
    cells: list[HexCell],
    cost: Callable[[HexCell, HexCell], float] | None = None,
) -> list[HexCell]:
    """Connect each cell to its hex-adjacent cells present in ``cells``.

    ``cost(from_cell, to_cell)`` prices each directed edge; defaults to 1.0.
    Existing connections are replaced.
    """
    by_coord = {cell.coord: cell for cell in cells}
    for cell in cells:
        links: dict[int, float] = {}
        for coord in neighbors(cell.q, cell.r):
            other = by_coord.get(coord)
            if other is None:
                continue
            weight = cost(cell, other) if cost is not None else 1.0
            if weight < 0:
                raise ValueError(
                    f"edge cost must be >= 0, got {weight} for {cell} -> {other}"
                )
            links[other.index] = weight
        cell.connections = links
    return cells


def cell_at(cells: list[HexCell], q: int, r: int) -> HexCell | None:
    for cell in cells:
        if cell.q == q and cell.r == r:
            return cell
    return None


def set_height(cells: list[HexCell], q: int, r: int, height: int) -> bool:
    """Set the height of the cell at (q, r). Returns False if there is none."""
    cell = cell_at(cells, q, r)
    if cell is None:
        return False
    cell.height = height
    return True

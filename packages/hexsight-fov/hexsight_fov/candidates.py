"""Candidate selection shared by both visibility algorithms."""
from __future__ import annotations

from typing import Iterable

from hexsight import HexCell, center_angle, hex_distance


def candidates(
    cells: Iterable[HexCell],
    source: HexCell,
    radius: int,
    hex_size: float = 1.0,
) -> list[HexCell]:
    """Cells within ``radius`` of ``source`` (source excluded), nearest first.

    Ties on distance are broken by the angle of the cell center seen from the
    source, so nearer cells can occlude before farther ones are tested.
    """
    if radius < 0:
        return []
    ranked: list[tuple[int, float, HexCell]] = []
    for cell in cells:
        if cell.index == source.index:
            continue
        dist = hex_distance(source, cell)
        if dist > radius:
            continue
        ranked.append((dist, center_angle(source, cell, hex_size), cell))
    ranked.sort(key=lambda item: (item[0], item[1]))
    return [cell for _, _, cell in ranked]

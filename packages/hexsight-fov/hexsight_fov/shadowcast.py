"""Angular shadowcasting field of view."""
from __future__ import annotations

import logging
from typing import Iterable

from hexsight import HexCell, angular_bounds

from hexsight_fov.candidates import candidates
from hexsight_fov.shadows import ShadowSet

log = logging.getLogger(__name__)


def shadowcast(
    cells: Iterable[HexCell],
    source: HexCell,
    radius: int,
    hex_size: float = 1.0,
) -> list[HexCell]:
    """Cells visible from ``source``, source first, then nearest first.

    Candidates are walked outward. A cell is hidden when its angular bounds
    fall inside one accumulated shadow arc; a visible cell taller than the
    source adds its own bounds to the shadows.
    """
    visible = [source]
    seen = {source.index}
    shadows = ShadowSet()
    ranked = candidates(cells, source, radius, hex_size)

    for cell in ranked:
        lo, hi = angular_bounds(source, cell, hex_size)
        if shadows.covers(lo, hi):
            continue
        if cell.index not in seen:
            seen.add(cell.index)
            visible.append(cell)
        if cell.height > source.height:
            shadows.add(lo, hi)

    log.debug(
        "shadowcast from %s r=%d: %d/%d candidates visible, %d shadow arcs",
        source, radius, len(visible) - 1, len(ranked), len(shadows),
    )
    return visible

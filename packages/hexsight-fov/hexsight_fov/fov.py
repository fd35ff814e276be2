"""Field-of-view entry points - one contract over both algorithms."""
from __future__ import annotations

from typing import Callable, Iterable, Sequence

from hexsight import HexCell

from hexsight_fov.config import FovAlgorithm, FovConfig
from hexsight_fov.raycast import raycast
from hexsight_fov.shadowcast import shadowcast

FovFunc = Callable[[Sequence[HexCell], HexCell, int, float], list[HexCell]]

_ALGORITHMS: dict[FovAlgorithm, FovFunc] = {
    FovAlgorithm.SHADOWCAST: shadowcast,
    FovAlgorithm.RAYCAST: raycast,
}


def compute_fov(
    cells: Sequence[HexCell],
    source: HexCell,
    radius: int,
    hex_size: float = 1.0,
    algorithm: FovAlgorithm | str = FovAlgorithm.SHADOWCAST,
) -> list[HexCell]:
    """Cells visible from ``source`` within ``radius``.

    The result always starts with ``source`` and lists the remaining visible
    cells nearest first. ``cells`` is read, never modified.
    """
    config = FovConfig(radius=radius, hex_size=hex_size, algorithm=algorithm)
    return compute_fov_with(cells, source, config)


def compute_fov_with(
    cells: Sequence[HexCell],
    source: HexCell,
    config: FovConfig,
) -> list[HexCell]:
    func = _ALGORITHMS[config.algorithm]
    return func(cells, source, config.radius, config.hex_size)


def visible_indices(cells: Iterable[HexCell]) -> frozenset[int]:
    return frozenset(cell.index for cell in cells)

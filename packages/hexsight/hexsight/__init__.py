"""hexsight - hex grid data model and coordinate geometry."""
from __future__ import annotations

from hexsight.types import CellIndex, Coord, HexCell, PathResult, UnknownCellError
from hexsight.geometry import (
    HEX_DIRECTIONS,
    angular_bounds,
    axial_distance,
    center_angle,
    corner_offsets,
    hex_corners,
    hex_distance,
    neighbors,
    normalize_angle,
    to_cartesian,
    unwrap,
)
from hexsight.mapgen import build_hex_map, cell_at, link_neighbors, set_height

__all__ = [
    "CellIndex",
    "Coord",
    "HexCell",
    "PathResult",
    "UnknownCellError",
    "HEX_DIRECTIONS",
    "angular_bounds",
    "axial_distance",
    "center_angle",
    "corner_offsets",
    "hex_corners",
    "hex_distance",
    "neighbors",
    "normalize_angle",
    "to_cartesian",
    "unwrap",
    "build_hex_map",
    "cell_at",
    "link_neighbors",
    "set_height",
]

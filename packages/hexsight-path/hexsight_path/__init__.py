"""hexsight-path - weighted shortest paths over hex cell adjacency."""
from __future__ import annotations

from hexsight_path.pathfind import find_path, path_cost

__all__ = [
    "find_path",
    "path_cost",
]

"""Grid snapshot types shared by the visibility and pathfinding engines."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

CellIndex = int
Coord = tuple[int, int]


@dataclass(eq=False)
class HexCell:
    """A vertex of the hex grid.

    Attributes:
        index: Unique non-negative identity within a snapshot.
        q: Axial column.
        r: Axial row. The implied cube coordinate is ``s = -q - r``.
        height: Elevation, used only for occlusion.
        connections: Directed edges, neighbor index -> transition cost (>= 0).
    """

    index: CellIndex
    q: int
    r: int
    height: int = 1
    connections: dict[CellIndex, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"index must be >= 0, got {self.index}")
        for neighbor, cost in self.connections.items():
            if cost < 0:
                raise ValueError(
                    f"connection {self.index}->{neighbor} has negative cost {cost}"
                )

    @property
    def s(self) -> int:
        return -self.q - self.r

    @property
    def coord(self) -> Coord:
        return (self.q, self.r)

    def __str__(self) -> str:
        return f"#{self.index} ({self.q},{self.r}) H={self.height}"


@dataclass(frozen=True)
class PathResult:
    """Outcome of a pathfinding call.

    ``path`` runs from start to goal inclusive, or is None when the goal is
    unreachable, in which case ``cost`` is positive infinity.
    """

    path: tuple[CellIndex, ...] | None
    cost: float

    @property
    def found(self) -> bool:
        return self.path is not None

    @classmethod
    def unreachable(cls) -> PathResult:
        return cls(None, math.inf)


class UnknownCellError(KeyError):
    """Raised when an index does not name a cell in the snapshot."""

    def __init__(self, index: int, message: str | None = None) -> None:
        self.index = index
        super().__init__(message or f"No cell with index {index} in snapshot")

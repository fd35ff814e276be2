"""Hex coordinate geometry - pointy-top axial layout.

All functions are pure. Cartesian positions exist only to derive angles and
segments; cell identity always stays with ``HexCell.index``.
"""
from __future__ import annotations

import math
from functools import lru_cache
from typing import Protocol

TWO_PI = 2.0 * math.pi
SQRT3 = math.sqrt(3.0)

Point = tuple[float, float]

HEX_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1),
)


class Axial(Protocol):
    q: int
    r: int


def axial_distance(dq: int, dr: int) -> int:
    return max(abs(dq), abs(dr), abs(dq + dr))


def hex_distance(a: Axial, b: Axial) -> int:
    """Cube-coordinate Chebyshev distance between two cells."""
    ax, az = a.q, a.r
    bx, bz = b.q, b.r
    ay, by = -ax - az, -bx - bz
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))


def neighbors(q: int, r: int) -> list[tuple[int, int]]:
    return [(q + dq, r + dr) for dq, dr in HEX_DIRECTIONS]


def to_cartesian(q: int, r: int, size: float = 1.0) -> Point:
    x = size * SQRT3 * (q + r / 2.0)
    y = size * 1.5 * r
    return x, y


@lru_cache(maxsize=None)
def corner_offsets(size: float = 1.0) -> tuple[Point, ...]:
    """Corner offsets of a pointy-top hex; corner i sits at 60*i - 30 degrees."""
    offsets = []
    for i in range(6):
        angle = math.radians(60 * i - 30)
        offsets.append((size * math.cos(angle), size * math.sin(angle)))
    return tuple(offsets)


def hex_corners(q: int, r: int, size: float = 1.0) -> list[Point]:
    cx, cy = to_cartesian(q, r, size)
    return [(cx + dx, cy + dy) for dx, dy in corner_offsets(size)]


def normalize_angle(angle: float) -> float:
    """Map an angle into [0, 2*pi)."""
    angle = math.fmod(angle, TWO_PI)
    if angle < 0.0:
        angle += TWO_PI
    if angle >= TWO_PI:
        angle -= TWO_PI
    return angle


def unwrap(angle: float, reference: float) -> float:
    """Express ``angle`` relative to ``reference``, normalised into (-pi, pi]."""
    delta = math.fmod(angle - reference, TWO_PI)
    if delta > math.pi:
        delta -= TWO_PI
    elif delta <= -math.pi:
        delta += TWO_PI
    return delta


def center_angle(source: Axial, cell: Axial, size: float = 1.0) -> float:
    sx, sy = to_cartesian(source.q, source.r, size)
    cx, cy = to_cartesian(cell.q, cell.r, size)
    return math.atan2(cy - sy, cx - sx)


def angular_bounds(source: Axial, cell: Axial, size: float = 1.0) -> tuple[float, float]:
    """Smallest arc, seen from ``source``, covering all six corners of ``cell``.

    Corner angles are unwrapped around the cell's center angle so the min/max
    never straddles the +-pi cut. The returned ``lo`` is in [0, 2*pi) and
    ``hi >= lo``; ``hi`` may exceed 2*pi.
    """
    sx, sy = to_cartesian(source.q, source.r, size)
    mid = center_angle(source, cell, size)
    local = [
        unwrap(math.atan2(y - sy, x - sx), mid)
        for x, y in hex_corners(cell.q, cell.r, size)
    ]
    lo = mid + min(local)
    hi = mid + max(local)
    if hi < lo:
        hi += TWO_PI
    span = hi - lo
    lo = normalize_angle(lo)
    return lo, lo + span

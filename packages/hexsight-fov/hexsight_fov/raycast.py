"""Segment-intersection field of view.

Reference variant of :func:`hexsight_fov.shadowcast.shadowcast`: a target is
visible unless the segment between the two cell centers touches the boundary
of a nearer cell that is taller than the source. Slower, but each decision
is independent, which makes it a useful cross-check.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from hexsight import HexCell, hex_corners, hex_distance, to_cartesian
from hexsight.geometry import Point

from hexsight_fov.candidates import candidates
from hexsight_fov.config import SEGMENT_EPSILON

log = logging.getLogger(__name__)


def orientation(a: Point, b: Point, c: Point, eps: float = SEGMENT_EPSILON) -> int:
    """Sign of the turn a -> b -> c; 0 when the points are within eps of collinear."""
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if cross > eps:
        return 1
    if cross < -eps:
        return -1
    return 0


def on_segment(a: Point, b: Point, c: Point, eps: float = SEGMENT_EPSILON) -> bool:
    """True if ``c`` lies on segment ``ab`` (within eps)."""
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if abs(cross) > eps:
        return False
    return (
        min(a[0], b[0]) - eps <= c[0] <= max(a[0], b[0]) + eps
        and min(a[1], b[1]) - eps <= c[1] <= max(a[1], b[1]) + eps
    )


def segments_intersect(
    p1: Point, p2: Point, p3: Point, p4: Point, eps: float = SEGMENT_EPSILON
) -> bool:
    """Whether segments p1p2 and p3p4 cross, touch, or overlap."""
    o1 = orientation(p1, p2, p3, eps)
    o2 = orientation(p1, p2, p4, eps)
    o3 = orientation(p3, p4, p1, eps)
    o4 = orientation(p3, p4, p2, eps)

    if o1 != o2 and o3 != o4:
        return True

    # Touching and collinear cases.
    if o1 == 0 and on_segment(p1, p2, p3, eps):
        return True
    if o2 == 0 and on_segment(p1, p2, p4, eps):
        return True
    if o3 == 0 and on_segment(p3, p4, p1, eps):
        return True
    if o4 == 0 and on_segment(p3, p4, p2, eps):
        return True
    return False


def segment_hits_hex(
    p1: Point,
    p2: Point,
    q: int,
    r: int,
    size: float = 1.0,
    eps: float = SEGMENT_EPSILON,
) -> bool:
    """Whether segment p1p2 meets the boundary of hex (q, r).

    ``eps`` is measured at unit hex size and scaled with ``size``: lengths
    by ``size``, cross products by ``size ** 2``. The same cells therefore
    touch at every scale.
    """
    corners = hex_corners(q, r, size)
    pad = eps * size
    cross_eps = eps * size * size

    xs = [x for x, _ in corners]
    ys = [y for _, y in corners]
    if (
        max(p1[0], p2[0]) + pad < min(xs)
        or min(p1[0], p2[0]) - pad > max(xs)
        or max(p1[1], p2[1]) + pad < min(ys)
        or min(p1[1], p2[1]) - pad > max(ys)
    ):
        return False

    for i in range(6):
        if segments_intersect(p1, p2, corners[i], corners[(i + 1) % 6], cross_eps):
            return True
    return False


def has_line_of_sight(
    source: HexCell,
    target: HexCell,
    cells: Iterable[HexCell],
    hex_size: float = 1.0,
) -> bool:
    start = to_cartesian(source.q, source.r, hex_size)
    end = to_cartesian(target.q, target.r, hex_size)
    reach = hex_distance(source, target)

    for other in cells:
        if other.index == source.index or other.index == target.index:
            continue
        # Only cells taller than the source and strictly nearer than the target block.
        if other.height <= source.height:
            continue
        if hex_distance(source, other) >= reach:
            continue
        if segment_hits_hex(start, end, other.q, other.r, hex_size):
            return False
    return True


def raycast(
    cells: Sequence[HexCell],
    source: HexCell,
    radius: int,
    hex_size: float = 1.0,
) -> list[HexCell]:
    """Cells visible from ``source``, source first, then nearest first."""
    ranked = candidates(cells, source, radius, hex_size)
    blockers = [
        c for c in cells
        if c.height > source.height and c.index != source.index
    ]

    visible = [source]
    seen = {source.index}
    for target in ranked:
        if target.index in seen:
            continue
        if has_line_of_sight(source, target, blockers, hex_size):
            seen.add(target.index)
            visible.append(target)

    log.debug(
        "raycast from %s r=%d: %d/%d candidates visible, %d potential blockers",
        source, radius, len(visible) - 1, len(ranked), len(blockers),
    )
    return visible

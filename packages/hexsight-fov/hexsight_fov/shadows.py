"""ShadowSet - merged angular intervals that are fully occluded."""
from __future__ import annotations

from typing import Iterator

from hexsight.geometry import TWO_PI

from hexsight_fov.config import SHADOW_EPSILON

Arc = tuple[float, float]


class ShadowSet:
    """Non-overlapping ``[lo, hi]`` arcs sorted by ``lo``.

    Each ``lo`` lies in [0, 2*pi); ``hi`` may run past 2*pi when an arc
    crosses the branch cut. Adding an arc re-merges the set so it stays
    minimal.
    """

    def __init__(self, eps: float = SHADOW_EPSILON) -> None:
        self._eps = eps
        self._arcs: list[Arc] = []

    @property
    def intervals(self) -> tuple[Arc, ...]:
        return tuple(self._arcs)

    def __len__(self) -> int:
        return len(self._arcs)

    def __iter__(self) -> Iterator[Arc]:
        return iter(self._arcs)

    def covers(self, lo: float, hi: float) -> bool:
        """True if ``[lo, hi]`` lies wholly inside a single stored arc.

        Touching a shadow edge counts as inside. An arc spanning the whole
        circle covers everything.
        """
        eps = self._eps
        for s_lo, s_hi in self._arcs:
            if s_hi - s_lo >= TWO_PI - eps:
                return True
            for shift in (-TWO_PI, 0.0, TWO_PI):
                if s_lo + shift - eps <= lo and hi <= s_hi + shift + eps:
                    return True
        return False

    def add(self, lo: float, hi: float) -> None:
        eps = self._eps
        arcs = sorted([*self._arcs, (lo, hi)])
        merged: list[Arc] = []
        for a_lo, a_hi in arcs:
            if merged and a_lo <= merged[-1][1] + eps:
                prev_lo, prev_hi = merged[-1]
                merged[-1] = (prev_lo, max(prev_hi, a_hi))
            else:
                merged.append((a_lo, a_hi))

        # Fold the head into the tail when the tail wraps past 2*pi onto it.
        while len(merged) > 1 and merged[-1][1] > TWO_PI:
            first_lo, first_hi = merged[0]
            last_lo, last_hi = merged[-1]
            if last_hi - TWO_PI + eps < first_lo:
                break
            merged.pop(0)
            merged[-1] = (last_lo, max(last_hi, first_hi + TWO_PI))

        # Closed ring: nothing is left unshadowed, so drop the seam.
        if any(a_hi - a_lo >= TWO_PI - eps for a_lo, a_hi in merged):
            merged = [(0.0, TWO_PI)]
        self._arcs = merged

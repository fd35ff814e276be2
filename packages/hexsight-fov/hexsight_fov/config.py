"""Visibility configuration and tolerances."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Containment tolerance for shadow arcs, in radians.
SHADOW_EPSILON = 1e-9
# Orientation/on-segment tolerance for the raycast variant, at unit hex size.
SEGMENT_EPSILON = 1e-6


class FovAlgorithm(Enum):
    """Which visibility algorithm computes the field of view."""

    SHADOWCAST = "shadowcast"
    RAYCAST = "raycast"


@dataclass(frozen=True)
class FovConfig:
    """Immutable parameters for a field-of-view computation.

    Attributes:
        radius: View radius in hex steps. Negative means only the source.
        hex_size: Corner radius used for the internal geometry (> 0).
        algorithm: FovAlgorithm member or its string value.
    """

    radius: int
    hex_size: float = 1.0
    algorithm: FovAlgorithm = FovAlgorithm.SHADOWCAST

    def __post_init__(self) -> None:
        if self.hex_size <= 0:
            raise ValueError(f"hex_size must be > 0, got {self.hex_size}")
        if not isinstance(self.algorithm, FovAlgorithm):
            try:
                algorithm = FovAlgorithm(self.algorithm)
            except ValueError:
                choices = ", ".join(a.value for a in FovAlgorithm)
                raise ValueError(
                    f"Unknown FOV algorithm {self.algorithm!r} (expected one of: {choices})"
                ) from None
            object.__setattr__(self, "algorithm", algorithm)

"""hexsight-fov - height-occluded field of view on hex grids."""
from __future__ import annotations

from hexsight_fov.config import SEGMENT_EPSILON, SHADOW_EPSILON, FovAlgorithm, FovConfig
from hexsight_fov.candidates import candidates
from hexsight_fov.shadows import ShadowSet
from hexsight_fov.shadowcast import shadowcast
from hexsight_fov.raycast import (
    has_line_of_sight,
    on_segment,
    orientation,
    raycast,
    segment_hits_hex,
    segments_intersect,
)
from hexsight_fov.fov import compute_fov, compute_fov_with, visible_indices

__all__ = [
    "SEGMENT_EPSILON",
    "SHADOW_EPSILON",
    "FovAlgorithm",
    "FovConfig",
    "candidates",
    "ShadowSet",
    "shadowcast",
    "has_line_of_sight",
    "on_segment",
    "orientation",
    "raycast",
    "segment_hits_hex",
    "segments_intersect",
    "compute_fov",
    "compute_fov_with",
    "visible_indices",
]

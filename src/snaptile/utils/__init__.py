"""Utility functions for SnapTile."""

from snaptile.utils.geometry import clamp_position
from snaptile.utils.placement import (
    PlacementPolicy,
    RandomPlacement,
    fixed_placement,
)
from snaptile.utils.profiling import (
    PerformanceProfiler,
    timed,
    profile_block,
    profiler,
)

__all__ = [
    # Geometry
    "clamp_position",
    # Placement
    "PlacementPolicy",
    "RandomPlacement",
    "fixed_placement",
    # Profiling
    "PerformanceProfiler",
    "timed",
    "profile_block",
    "profiler",
]

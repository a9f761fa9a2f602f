"""Geometry helpers for drag handling."""

import numpy as np

from snaptile.models.geometry import Point, Rect, Size


def clamp_position(candidate: Point, size: Size, bounds: Rect) -> Point:
    """
    Clamp a window's top-left corner so the window stays inside ``bounds``.

    A window larger than the bounds on some axis is pinned to the bounds'
    origin on that axis.
    """
    lower = np.array([bounds.x, bounds.y])
    upper = np.maximum(lower, [bounds.right - size.width, bounds.bottom - size.height])
    x, y = np.clip([candidate.x, candidate.y], lower, upper)
    return Point(float(x), float(y))

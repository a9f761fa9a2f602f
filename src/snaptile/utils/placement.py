"""Floating placement policies for new and moved-out windows."""

from typing import Callable, Optional
import numpy as np

from snaptile.models.geometry import Point, Size


# (viewport, window size) -> top-left corner
PlacementPolicy = Callable[[Size, Size], Point]


class RandomPlacement:
    """
    Place windows at a random position fully inside the viewport.

    A strip of ``bottom_margin`` units is kept free at the bottom of the
    viewport. When the window does not fit on an axis it is pinned to 0.
    """

    def __init__(self, seed: Optional[int] = None, bottom_margin: float = 50):
        self.rng = np.random.default_rng(seed)
        self.bottom_margin = bottom_margin

    def __call__(self, viewport: Size, size: Size) -> Point:
        max_x = viewport.width - size.width
        max_y = viewport.height - size.height - self.bottom_margin
        x = float(np.floor(self.rng.uniform(0, max_x))) if max_x > 0 else 0.0
        y = float(np.floor(self.rng.uniform(0, max_y))) if max_y > 0 else 0.0
        return Point(x, y)


def fixed_placement(position: Point) -> PlacementPolicy:
    """Policy that always returns ``position``."""
    def _place(viewport: Size, size: Size) -> Point:
        return position
    return _place

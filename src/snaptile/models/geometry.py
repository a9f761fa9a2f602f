"""Geometry value types shared by the tree, the detector and the windows."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import numpy as np


class Edge(Enum):
    """Side of a rectangle a window can snap to."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def is_vertical_split(self) -> bool:
        """Left/right halve the width, top/bottom halve the height."""
        return self in (Edge.LEFT, Edge.RIGHT)


# Order in which edges are tested when several margins are satisfied
EDGE_PRIORITY: Tuple[Edge, ...] = (Edge.LEFT, Edge.RIGHT, Edge.TOP, Edge.BOTTOM)


@dataclass(frozen=True)
class Point:
    """A position in logical viewport units."""
    x: float = 0.0
    y: float = 0.0

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Size:
    """Width and height in logical viewport units."""
    width: float = 0.0
    height: float = 0.0

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle anchored at its top-left corner.

    Attributes:
        x: Left coordinate
        y: Top coordinate
        width: Horizontal extent
        height: Vertical extent
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, size: Size) -> "Rect":
        """Rectangle of the given size anchored at the origin."""
        return cls(0.0, 0.0, size.width, size.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def is_wide(self) -> bool:
        return self.width > self.height

    @property
    def is_tall(self) -> bool:
        return self.height > self.width

    def contains(self, point: Point) -> bool:
        """Half-open containment, so adjacent halves never both match."""
        return (self.x <= point.x < self.right and
                self.y <= point.y < self.bottom)

    def contains_closed(self, point: Point) -> bool:
        """Containment including the right and bottom borders."""
        return (self.x <= point.x <= self.right and
                self.y <= point.y <= self.bottom)

    def split(self, edge: Edge) -> Tuple["Rect", "Rect"]:
        """
        Halve the rectangle along the axis implied by ``edge``.

        Returns:
            (first, second) ordered left/right or top/bottom
        """
        if edge.is_vertical_split:
            half = self.width / 2
            return (Rect(self.x, self.y, half, self.height),
                    Rect(self.x + half, self.y, half, self.height))
        half = self.height / 2
        return (Rect(self.x, self.y, self.width, half),
                Rect(self.x, self.y + half, self.width, half))

    def half(self, edge: Edge) -> "Rect":
        """The half of the rectangle lying on ``edge``."""
        first, second = self.split(edge)
        return first if edge in (Edge.LEFT, Edge.TOP) else second

    def envelope(self, other: "Rect") -> "Rect":
        """Smallest rectangle containing both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        return Rect(x, y,
                    max(self.right, other.right) - x,
                    max(self.bottom, other.bottom) - y)

    def intersects(self, other: "Rect") -> bool:
        """True if the interiors overlap."""
        return (self.x < other.right and other.x < self.right and
                self.y < other.bottom and other.y < self.bottom)

    def isclose(self, other: "Rect", tol: float = 1e-9) -> bool:
        """Compare within floating-point tolerance."""
        return bool(np.allclose(self.as_array(), other.as_array(), rtol=0.0, atol=tol))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.width, self.height], dtype=float)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

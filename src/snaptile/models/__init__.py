"""Data models for the tiler."""

from snaptile.models.geometry import Edge, EDGE_PRIORITY, Point, Size, Rect
from snaptile.models.region import Region, ROOT_ID, new_region_id
from snaptile.models.window import Window, DockState

__all__ = [
    "Edge",
    "EDGE_PRIORITY",
    "Point",
    "Size",
    "Rect",
    "Region",
    "ROOT_ID",
    "new_region_id",
    "Window",
    "DockState",
]

"""Core tiling logic: partition tree, snap detection, drag handling."""

from snaptile.core.partition import PartitionTree
from snaptile.core.registry import WindowRegistry
from snaptile.core.snap import SnapIndicator, detect_snap
from snaptile.core.state import Dragging, Idle, Snapshot, TilerState, WindowView
from snaptile.core.drag import DragController
from snaptile.core.viewport import resize_viewport
from snaptile.core.engine import (
    CloseWindow,
    CreateWindow,
    MoveWindowOut,
    PointerDown,
    PointerMove,
    PointerUp,
    TilerEngine,
    ViewportResize,
    event_from_dict,
    reduce,
)

__all__ = [
    "PartitionTree",
    "WindowRegistry",
    "SnapIndicator",
    "detect_snap",
    "Dragging",
    "Idle",
    "Snapshot",
    "TilerState",
    "WindowView",
    "DragController",
    "resize_viewport",
    "CloseWindow",
    "CreateWindow",
    "MoveWindowOut",
    "PointerDown",
    "PointerMove",
    "PointerUp",
    "TilerEngine",
    "ViewportResize",
    "event_from_dict",
    "reduce",
]

"""Engine state and the snapshot handed to renderers."""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from snaptile.models import DockState, Edge, Point, Size, Window
from snaptile.core.partition import PartitionTree
from snaptile.core.registry import WindowRegistry
from snaptile.core.snap import SnapIndicator


@dataclass(frozen=True)
class Idle:
    """No drag in progress."""


@dataclass(frozen=True)
class Dragging:
    """
    A drag in progress.

    Attributes:
        window_id: Window being dragged
        offset: Pointer position minus window position at drag start
    """
    window_id: str
    offset: Point


DragState = Union[Idle, Dragging]


@dataclass(frozen=True)
class WindowView:
    """Resolved window geometry as seen by a renderer."""
    window_id: str
    position: Point
    size: Size
    dock_state: DockState
    snapped: Optional[Edge] = None

    @classmethod
    def from_window(cls, window: Window) -> "WindowView":
        return cls(window.window_id, window.position, window.size,
                   window.dock_state, window.snapped)

    def to_dict(self) -> dict:
        return {
            "window_id": self.window_id,
            "position": self.position.to_dict(),
            "size": self.size.to_dict(),
            "dock_state": self.dock_state.value,
            "snapped": self.snapped.value if self.snapped else None,
        }


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs; never exposes tree internals."""
    viewport: Size
    windows: Tuple[WindowView, ...]
    indicator: Optional[SnapIndicator] = None
    dragging_id: Optional[str] = None

    def window(self, window_id: str) -> Optional[WindowView]:
        return next((w for w in self.windows if w.window_id == window_id), None)

    def to_dict(self) -> dict:
        return {
            "viewport": self.viewport.to_dict(),
            "windows": [w.to_dict() for w in self.windows],
            "indicator": self.indicator.to_dict() if self.indicator else None,
            "dragging_id": self.dragging_id,
        }


@dataclass(frozen=True)
class TilerState:
    """
    Complete engine state.

    Replaced as a whole on every event; never mutated in place.
    """
    viewport: Size
    tree: PartitionTree
    registry: WindowRegistry = field(default_factory=WindowRegistry)
    drag: DragState = Idle()
    indicator: Optional[SnapIndicator] = None

    @classmethod
    def initial(cls, viewport: Size) -> "TilerState":
        return cls(viewport=viewport, tree=PartitionTree.for_viewport(viewport))

    def evolve(self, **changes) -> "TilerState":
        return replace(self, **changes)

    def snapshot(self) -> Snapshot:
        dragging_id = self.drag.window_id if isinstance(self.drag, Dragging) else None
        return Snapshot(
            viewport=self.viewport,
            windows=tuple(WindowView.from_window(w) for w in self.registry),
            indicator=self.indicator,
            dragging_id=dragging_id,
        )

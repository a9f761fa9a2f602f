"""Window model - a draggable, dockable surface."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
import uuid

from snaptile.config import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH
from snaptile.models.geometry import Edge, Point, Rect, Size


class DockState(Enum):
    """Whether a window floats or fills a leaf of the partition tree."""
    FREE = "free"
    DOCKED = "docked"


@dataclass(frozen=True)
class Window:
    """
    A window managed by the tiler.

    Attributes:
        window_id: Unique identifier, generated when left blank
        position: Top-left corner
        size: Current width and height
        dock_state: FREE or DOCKED
        region_id: Occupied leaf while DOCKED, None otherwise
        snapped: Edge the window last snapped to, None while floating.
                 A screen-edge snap outside the tree keeps the window FREE
                 but records the edge here.
    """
    window_id: str = ""
    position: Point = Point()
    size: Size = Size(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
    dock_state: DockState = DockState.FREE
    region_id: Optional[str] = None
    snapped: Optional[Edge] = None

    def __post_init__(self):
        if not self.window_id:
            object.__setattr__(self, "window_id", str(uuid.uuid4())[:8])

    @property
    def is_docked(self) -> bool:
        return self.dock_state is DockState.DOCKED

    @property
    def rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.width, self.size.height)

    def moved_to(self, position: Point) -> "Window":
        return replace(self, position=position)

    def docked_in(self, region_id: str, rect: Rect, edge: Optional[Edge] = None) -> "Window":
        """Fill ``rect`` as occupant of leaf ``region_id``."""
        return replace(
            self,
            position=rect.origin,
            size=rect.size,
            dock_state=DockState.DOCKED,
            region_id=region_id,
            snapped=edge if edge is not None else self.snapped,
        )

    def floating(self, position: Point, size: Size, snapped: Optional[Edge] = None) -> "Window":
        """Detach from the tree with the given geometry."""
        return replace(
            self,
            position=position,
            size=size,
            dock_state=DockState.FREE,
            region_id=None,
            snapped=snapped,
        )

    def to_dict(self) -> dict:
        return {
            "window_id": self.window_id,
            "position": self.position.to_dict(),
            "size": self.size.to_dict(),
            "dock_state": self.dock_state.value,
            "region_id": self.region_id,
            "snapped": self.snapped.value if self.snapped else None,
        }

"""Region model - a node of the partition tree."""

from dataclasses import dataclass, replace
from typing import Optional, Tuple
import uuid

from snaptile.models.geometry import Rect


ROOT_ID = "root"


def new_region_id() -> str:
    return str(uuid.uuid4())[:8]


@dataclass(frozen=True)
class Region:
    """
    A rectangular node of the partition tree.

    A region is either a leaf, which may hold a single occupant window,
    or an internal node with exactly two ordered children and no occupant.
    Any other shape is rejected at construction time.

    Attributes:
        region_id: Unique identifier
        rect: Area covered by the region
        parent_id: Parent region id, None only for the root
        occupant_id: Window filling the region (leaves only)
        children: Ordered (first, second) child ids (internal regions only)
    """
    region_id: str
    rect: Rect
    parent_id: Optional[str] = None
    occupant_id: Optional[str] = None
    children: Optional[Tuple[str, str]] = None

    def __post_init__(self):
        if self.children is None:
            return
        if len(self.children) != 2:
            raise ValueError(
                f"Region {self.region_id} must have exactly two children, "
                f"got {len(self.children)}"
            )
        if self.occupant_id is not None:
            raise ValueError(f"Internal region {self.region_id} cannot hold an occupant")
        # Normalize lists passed by callers
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_empty(self) -> bool:
        """A leaf without occupant - a normal state, e.g. an unfilled split half."""
        return self.is_leaf and self.occupant_id is None

    def with_rect(self, rect: Rect) -> "Region":
        return replace(self, rect=rect)

    def with_occupant(self, occupant_id: Optional[str]) -> "Region":
        return replace(self, occupant_id=occupant_id)

    def as_leaf(self, rect: Rect, occupant_id: Optional[str]) -> "Region":
        return replace(self, rect=rect, occupant_id=occupant_id, children=None)

    def as_internal(self, children: Tuple[str, str]) -> "Region":
        return replace(self, occupant_id=None, children=children)

    def to_dict(self) -> dict:
        return {
            "region_id": self.region_id,
            "rect": self.rect.to_dict(),
            "parent_id": self.parent_id,
            "occupant_id": self.occupant_id,
            "children": list(self.children) if self.children else None,
        }

"""
Snap-zone detection.

Maps a pointer position and the dragged window's context to the edge it
would snap to, if any. Pure functions of their arguments: the viewport
size and the tree are always passed in.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from snaptile.config import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, SNAP_THRESHOLD
from snaptile.models import Edge, EDGE_PRIORITY, Point, Rect, Region, Size
from snaptile.core.partition import PartitionTree


@dataclass(frozen=True)
class SnapIndicator:
    """
    Transient hint of the pending dock during a drag.

    Attributes:
        edge: Edge the window would snap to
        rect: Area that would be highlighted (and filled on drop)
        region_id: Hovered leaf for in-tree snaps, None for screen-edge snaps
        screen_edge: True for half-viewport docking at the screen border
    """
    edge: Edge
    rect: Rect
    region_id: Optional[str] = None
    screen_edge: bool = False

    def to_dict(self) -> dict:
        return {
            "edge": self.edge.value,
            "rect": self.rect.to_dict(),
            "region_id": self.region_id,
            "screen_edge": self.screen_edge,
        }


def screen_edge_rect(edge: Edge, viewport: Size) -> Rect:
    """Canonical half-viewport rectangle for a screen-edge snap."""
    return Rect.from_size(viewport).half(edge)


def screen_edge_candidate(top_left: Point,
                          viewport: Size,
                          window_size: Size,
                          threshold: float = SNAP_THRESHOLD) -> Optional[Edge]:
    """
    Screen edge a floating window at ``top_left`` is close enough to.

    The window is measured with ``window_size`` against a margin of
    ``threshold`` from each viewport border, left first, then right,
    top and bottom.
    """
    if top_left.x < threshold:
        return Edge.LEFT
    if top_left.x + window_size.width > viewport.width - threshold:
        return Edge.RIGHT
    if top_left.y < threshold:
        return Edge.TOP
    if top_left.y + window_size.height > viewport.height - threshold:
        return Edge.BOTTOM
    return None


def eligible_edges(region: Region) -> Tuple[Edge, ...]:
    """
    Edges a region may be split on, in priority order.

    The root accepts all four. Other regions only split across their
    longer side; square regions accept all four.
    """
    if region.is_root:
        return EDGE_PRIORITY
    if region.rect.is_wide:
        return (Edge.LEFT, Edge.RIGHT)
    if region.rect.is_tall:
        return (Edge.TOP, Edge.BOTTOM)
    return EDGE_PRIORITY


def region_edge(pointer: Point, region: Region,
                threshold: float = SNAP_THRESHOLD) -> Optional[Edge]:
    """Eligible edge of ``region`` within ``threshold`` of the pointer."""
    rect = region.rect
    local_x = pointer.x - rect.x
    local_y = pointer.y - rect.y
    hits = {
        Edge.LEFT: local_x < threshold,
        Edge.RIGHT: local_x > rect.width - threshold,
        Edge.TOP: local_y < threshold,
        Edge.BOTTOM: local_y > rect.height - threshold,
    }
    for edge in eligible_edges(region):
        if hits[edge]:
            return edge
    return None


def docking_bounds(tree: PartitionTree, region_id: Optional[str]) -> Optional[Rect]:
    """
    Rectangle a docked window is confined to while dragged.

    This is the parent of the window's leaf. None when the window is not
    docked or fills the root.
    """
    parent = tree.parent_of(region_id) if region_id else None
    return parent.rect if parent else None


def detect_snap(pointer: Point,
                tree: PartitionTree,
                viewport: Size,
                *,
                top_left: Optional[Point] = None,
                docked_region_id: Optional[str] = None,
                window_size: Size = Size(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT),
                threshold: float = SNAP_THRESHOLD) -> Optional[SnapIndicator]:
    """
    Compute the snap indicator for a drag.

    Args:
        pointer: Current pointer position
        tree: Current partition tree
        viewport: Current viewport size
        top_left: Prospective top-left corner of an undocked window; enables
                  screen-edge snapping
        docked_region_id: Leaf the dragged window occupies, if docked
        window_size: Size used for the right/bottom screen-edge margins
        threshold: Snap margin

    Returns:
        The indicator, or None when no edge is in reach
    """
    docked = docked_region_id is not None and docked_region_id in tree

    if not docked and top_left is not None:
        edge = screen_edge_candidate(top_left, viewport, window_size, threshold)
        if edge is not None:
            return SnapIndicator(edge, screen_edge_rect(edge, viewport), screen_edge=True)

    if docked:
        bounds = docking_bounds(tree, docked_region_id)
        if bounds is not None and not bounds.contains_closed(pointer):
            return None

    target = tree.locate(pointer)
    if target is None:
        return None

    edge = region_edge(pointer, target, threshold)
    if edge is None:
        return None
    return SnapIndicator(edge, target.rect.half(edge), region_id=target.region_id)

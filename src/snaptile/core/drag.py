"""Drag lifecycle: start, clamp and preview on move, commit on release."""

import logging
from typing import Optional

from snaptile.config import TilerSettings
from snaptile.models import Edge, Point, Rect, ROOT_ID, Window
from snaptile.core.partition import PartitionTree
from snaptile.core.snap import (
    SnapIndicator,
    detect_snap,
    docking_bounds,
    screen_edge_candidate,
    screen_edge_rect,
)
from snaptile.core.state import Dragging, Idle, TilerState
from snaptile.utils.geometry import clamp_position

logger = logging.getLogger("snaptile.drag")


class DragController:
    """
    Drives a window through Idle -> Dragging -> Idle.

    Moves only update the dragged window's position and the snap
    indicator; the tree and dock state change on release.
    """

    def __init__(self, settings: Optional[TilerSettings] = None):
        self.settings = settings or TilerSettings()

    def start(self, state: TilerState, pointer: Point, window_id: str) -> TilerState:
        """Begin dragging ``window_id``; ignored for unknown windows or mid-drag."""
        if isinstance(state.drag, Dragging):
            logger.debug(f"drag start ignored: already dragging {state.drag.window_id}")
            return state
        window = state.registry.get(window_id)
        if window is None:
            logger.debug(f"drag start ignored: unknown window {window_id}")
            return state
        return state.evolve(drag=Dragging(window_id, pointer - window.position),
                            indicator=None)

    def update(self, state: TilerState, pointer: Point) -> TilerState:
        """Move the dragged window under the pointer and refresh the indicator."""
        drag = state.drag
        if not isinstance(drag, Dragging):
            return state
        window = state.registry.get(drag.window_id)
        if window is None:
            return state.evolve(drag=Idle(), indicator=None)

        position = self._clamped(state, window, pointer - drag.offset)
        indicator = self._detect(state, window, pointer, position)
        return state.evolve(
            registry=state.registry.replace(window.moved_to(position)),
            indicator=indicator,
        )

    def end(self, state: TilerState, pointer: Point) -> TilerState:
        """
        Finish the drag, committing the pending snap if there is one.

        Without an indicator, or without a leaf to drop on, the window
        stays where it was dragged (docked windows return to their leaf).
        """
        drag = state.drag
        if not isinstance(drag, Dragging):
            return state
        idle = state.evolve(drag=Idle(), indicator=None)
        window = state.registry.get(drag.window_id)
        if window is None:
            return idle

        indicator = state.indicator
        if indicator is None:
            return self._settle(idle, window)

        position = self._clamped(state, window, pointer - drag.offset)
        if not window.is_docked and screen_edge_candidate(
                position, state.viewport, self.settings.default_window_size,
                self.settings.snap_threshold) is not None:
            return self._dock_to_screen_edge(idle, window, indicator.edge)

        return self._dock_into_tree(idle, window, indicator, pointer)

    def _clamped(self, state: TilerState, window: Window, candidate: Point) -> Point:
        bounds = None
        if window.is_docked:
            bounds = docking_bounds(state.tree, window.region_id)
        if bounds is None:
            bounds = Rect.from_size(state.viewport)
        return clamp_position(candidate, window.size, bounds)

    def _detect(self, state: TilerState, window: Window,
                pointer: Point, position: Point) -> Optional[SnapIndicator]:
        docked = window.is_docked
        return detect_snap(
            pointer,
            state.tree,
            state.viewport,
            top_left=None if docked else position,
            docked_region_id=window.region_id if docked else None,
            window_size=self.settings.default_window_size,
            threshold=self.settings.snap_threshold,
        )

    def _settle(self, state: TilerState, window: Window) -> TilerState:
        """
        Leave a floating window in place; put a docked one back in its leaf.

        A docked window always fills its leaf exactly, so a release with no
        target restores the leaf rectangle instead of the dragged position.
        """
        if not window.is_docked:
            return state
        leaf = state.tree.get(window.region_id)
        if leaf is None:
            return state
        return state.evolve(registry=state.registry.replace(
            window.docked_in(leaf.region_id, leaf.rect)))

    def _dock_to_screen_edge(self, state: TilerState, window: Window,
                             edge: Edge) -> TilerState:
        """
        Fill the half of the viewport on ``edge``.

        While the root is unsplit the dock goes through the tree, so the
        other half becomes a region windows can be dropped into. Otherwise
        the window keeps floating with half-viewport geometry.
        """
        if state.tree.root.is_leaf:
            tree = state.tree.split(ROOT_ID, edge, window.window_id)
            return self._commit(state, tree, window.window_id, edge)

        rect = screen_edge_rect(edge, state.viewport)
        logger.debug(f"window {window.window_id} snapped to screen {edge.value}")
        return state.evolve(registry=state.registry.replace(
            window.floating(rect.origin, rect.size, snapped=edge)))

    def _dock_into_tree(self, state: TilerState, window: Window,
                        indicator: SnapIndicator, pointer: Point) -> TilerState:
        tree = state.tree
        if window.is_docked:
            bounds = docking_bounds(tree, window.region_id)
            if bounds is not None and not bounds.contains_closed(pointer):
                logger.debug(f"drop ignored: pointer left bounds of {window.window_id}")
                return self._settle(state, window)

        target = tree.locate(pointer)
        if target is None:
            logger.debug(f"drop ignored: no region under {pointer}")
            return self._settle(state, window)

        # Vacate the old leaf so the window never occupies two leaves
        if window.is_docked and window.region_id in tree:
            tree = tree.with_occupant(window.region_id, None)
        tree = tree.split(target.region_id, indicator.edge, window.window_id)
        return self._commit(state, tree, window.window_id, indicator.edge)

    def _commit(self, state: TilerState, tree: PartitionTree,
                window_id: str, edge: Edge) -> TilerState:
        registry = state.registry.sync(tree)
        leaf = tree.leaf_of(window_id)
        if leaf is not None:
            window = registry.get(window_id).docked_in(leaf.region_id, leaf.rect, edge)
            registry = registry.replace(window)
            logger.debug(f"window {window_id} docked in {leaf.region_id} ({edge.value})")
        return state.evolve(tree=tree, registry=registry)

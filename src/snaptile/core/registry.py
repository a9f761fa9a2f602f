"""Window registry - owns windows and their dock/float state."""

import logging
from typing import Dict, Iterator, Mapping, Optional, Tuple

from snaptile.config import TilerSettings
from snaptile.models import Size, Window
from snaptile.core.partition import PartitionTree
from snaptile.utils.placement import PlacementPolicy

logger = logging.getLogger("snaptile.registry")


class WindowRegistry:
    """
    Immutable, insertion-ordered collection of windows.

    Creation order doubles as stacking order for renderers. Operations
    that touch docked windows take the current tree and return the
    updated tree alongside the new registry.
    """

    def __init__(self, windows: Optional[Mapping[str, Window]] = None):
        self._windows: Dict[str, Window] = dict(windows or {})

    def get(self, window_id: str) -> Optional[Window]:
        return self._windows.get(window_id)

    def __contains__(self, window_id: str) -> bool:
        return window_id in self._windows

    def __iter__(self) -> Iterator[Window]:
        return iter(self._windows.values())

    def __len__(self) -> int:
        return len(self._windows)

    def replace(self, window: Window) -> "WindowRegistry":
        """Store ``window`` under its id, keeping its stacking slot."""
        windows = dict(self._windows)
        windows[window.window_id] = window
        return WindowRegistry(windows)

    def create(self,
               viewport: Size,
               placement: PlacementPolicy,
               settings: TilerSettings,
               window_id: str = "") -> Tuple["WindowRegistry", Window]:
        """
        Add a floating window of default size.

        Returns:
            (registry, window). An already used ``window_id`` leaves the
            registry unchanged and returns the existing window.
        """
        existing = self.get(window_id) if window_id else None
        if existing is not None:
            logger.debug(f"create ignored: {window_id} already exists")
            return self, existing

        size = settings.default_window_size
        window = Window(window_id=window_id, position=placement(viewport, size), size=size)
        logger.debug(f"created window {window.window_id} at {window.position}")
        return self.replace(window), window

    def close(self, window_id: str,
              tree: PartitionTree) -> Tuple["WindowRegistry", PartitionTree]:
        """
        Remove a window, merging its leaf away if it was docked.

        The sibling's occupant is re-homed to the merged leaf.
        """
        if window_id not in self._windows:
            logger.debug(f"close ignored: unknown window {window_id}")
            return self, tree

        registry, tree = self._undock(window_id, tree)
        windows = dict(registry._windows)
        del windows[window_id]
        logger.debug(f"closed window {window_id}")
        return WindowRegistry(windows), tree

    def move_out(self, window_id: str,
                 tree: PartitionTree,
                 viewport: Size,
                 placement: PlacementPolicy,
                 settings: TilerSettings) -> Tuple["WindowRegistry", PartitionTree]:
        """
        Undock a window in place, giving it fresh floating geometry.

        Floating and unknown windows are left alone.
        """
        window = self.get(window_id)
        if window is None or not window.is_docked:
            logger.debug(f"move_out ignored: {window_id} is not docked")
            return self, tree

        registry, tree = self._undock(window_id, tree)
        size = settings.default_window_size
        floating = window.floating(placement(viewport, size), size)
        logger.debug(f"moved window {window_id} out to {floating.position}")
        return registry.replace(floating), tree

    def _undock(self, window_id: str,
                tree: PartitionTree) -> Tuple["WindowRegistry", PartitionTree]:
        leaf = tree.leaf_of(window_id)
        if leaf is None:
            return self, tree
        if leaf.is_root:
            tree = tree.with_occupant(leaf.region_id, None)
        else:
            tree = tree.merge(leaf.region_id)
        return self.sync(tree, skip=window_id), tree

    def sync(self, tree: PartitionTree, skip: Optional[str] = None) -> "WindowRegistry":
        """
        Re-home docked windows to the leaves that list them.

        Windows whose leaf no longer lists them become floating at their
        current geometry. ``skip`` is left untouched.
        """
        occupants = tree.occupants()
        windows = {}
        for window_id, window in self._windows.items():
            leaf = occupants.get(window_id)
            if window_id == skip:
                pass
            elif leaf is not None:
                window = window.docked_in(leaf.region_id, leaf.rect)
            elif window.is_docked:
                window = window.floating(window.position, window.size)
            windows[window_id] = window
        return WindowRegistry(windows)

    def to_dict(self) -> dict:
        return {"windows": [w.to_dict() for w in self._windows.values()]}

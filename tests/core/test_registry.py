"""Tests for the window registry."""

import pytest

from snaptile.core import PartitionTree, WindowRegistry
from snaptile.models import DockState, Edge, Point, Rect, Size, ROOT_ID


@pytest.fixture
def docked_pair(viewport, registry):
    """Window A docked left, window B docked right."""
    tree = PartitionTree.for_viewport(viewport).split(ROOT_ID, Edge.LEFT, "A")
    tree = tree.with_occupant(tree.root.children[1], "B")
    return registry.sync(tree), tree


class TestCreate:
    """Tests for window creation."""

    def test_create_floating(self, viewport, placement, settings):
        registry, window = WindowRegistry().create(viewport, placement, settings)
        assert len(registry) == 1
        assert window.window_id in registry
        assert window.dock_state is DockState.FREE
        assert window.position == Point(400, 300)
        assert window.size == Size(300, 200)

    def test_create_uses_settings_size(self, viewport, placement, settings):
        settings.default_window_width = 320
        settings.default_window_height = 240
        _, window = WindowRegistry().create(viewport, placement, settings)
        assert window.size == Size(320, 240)

    def test_create_is_copy_on_write(self, viewport, placement, settings):
        empty = WindowRegistry()
        empty.create(viewport, placement, settings)
        assert len(empty) == 0

    def test_duplicate_id_is_noop(self, registry, viewport, placement, settings):
        same, window = registry.create(viewport, placement, settings, window_id="A")
        assert same is registry
        assert window is registry.get("A")

    def test_creation_order(self, registry):
        assert [w.window_id for w in registry] == ["A", "B"]


class TestClose:
    """Tests for closing windows."""

    def test_close_unknown(self, registry, empty_tree):
        same, tree = registry.close("missing", empty_tree)
        assert same is registry
        assert tree is empty_tree

    def test_close_floating(self, registry, empty_tree):
        after, tree = registry.close("A", empty_tree)
        assert "A" not in after
        assert tree is empty_tree

    def test_close_docked_rehomes_sibling(self, docked_pair):
        registry, tree = docked_pair
        after, merged = registry.close("A", tree)
        assert "A" not in after
        assert merged.root.is_leaf
        assert merged.root.occupant_id == "B"
        b = after.get("B")
        assert b.is_docked
        assert b.region_id == ROOT_ID
        assert b.rect == Rect(0, 0, 1200, 800)

    def test_close_docked_with_empty_sibling(self, registry, halved_tree):
        registry = registry.sync(halved_tree)
        after, merged = registry.close("A", halved_tree)
        assert merged.root.is_empty
        assert merged.root.rect == Rect(0, 0, 1200, 800)
        assert len(merged) == 1
        assert not after.get("B").is_docked

    def test_close_window_filling_root(self, registry, empty_tree):
        tree = empty_tree.with_occupant(ROOT_ID, "A")
        registry = registry.sync(tree)
        after, cleared = registry.close("A", tree)
        assert cleared.root.is_empty
        assert "A" not in after


class TestMoveOut:
    """Tests for undocking windows in place."""

    def test_move_out_floating_is_noop(self, registry, empty_tree, viewport, placement, settings):
        same, tree = registry.move_out("A", empty_tree, viewport, placement, settings)
        assert same is registry
        assert tree is empty_tree

    def test_move_out_unknown_is_noop(self, registry, empty_tree, viewport, placement, settings):
        same, tree = registry.move_out("missing", empty_tree, viewport, placement, settings)
        assert same is registry
        assert tree is empty_tree

    def test_move_out_docked(self, docked_pair, viewport, placement, settings):
        registry, tree = docked_pair
        after, merged = registry.move_out("A", tree, viewport, placement, settings)

        a = after.get("A")
        assert a.dock_state is DockState.FREE
        assert a.region_id is None
        assert a.snapped is None
        assert a.position == Point(400, 300)
        assert a.size == Size(300, 200)

        b = after.get("B")
        assert b.region_id == ROOT_ID
        assert b.rect == Rect(0, 0, 1200, 800)
        assert merged.leaf_of("A") is None

    def test_move_out_keeps_stacking_slot(self, docked_pair, viewport, placement, settings):
        registry, tree = docked_pair
        after, _ = registry.move_out("A", tree, viewport, placement, settings)
        assert [w.window_id for w in after] == ["A", "B"]


class TestSync:
    """Tests for re-homing windows against a tree."""

    def test_sync_docks_occupants(self, docked_pair):
        registry, tree = docked_pair
        a = registry.get("A")
        assert a.is_docked
        assert a.region_id == tree.root.children[0]
        assert a.rect == Rect(0, 0, 600, 800)

    def test_sync_frees_orphans(self, docked_pair, viewport):
        registry, _ = docked_pair
        synced = registry.sync(PartitionTree.for_viewport(viewport))
        a = synced.get("A")
        assert not a.is_docked
        assert a.rect == Rect(0, 0, 600, 800)

    def test_sync_skip(self, docked_pair, viewport):
        registry, _ = docked_pair
        synced = registry.sync(PartitionTree.for_viewport(viewport), skip="A")
        assert synced.get("A").is_docked
        assert not synced.get("B").is_docked

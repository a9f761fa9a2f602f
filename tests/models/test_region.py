"""Tests for Region and Window models."""

import pytest

from snaptile.config import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, TilerSettings
from snaptile.models import (
    DockState, Edge, Point, Rect, Region, Size, Window, ROOT_ID, new_region_id,
)


class TestRegionShape:
    """Regions are leaves or have exactly two children."""

    def test_leaf_defaults(self):
        region = Region(region_id=ROOT_ID, rect=Rect(0, 0, 100, 100))
        assert region.is_leaf
        assert region.is_root
        assert region.is_empty
        assert region.children is None

    def test_occupied_leaf(self):
        region = Region("r1", Rect(0, 0, 10, 10), parent_id=ROOT_ID, occupant_id="A")
        assert region.is_leaf
        assert not region.is_empty
        assert not region.is_root

    def test_internal(self):
        region = Region("r1", Rect(0, 0, 10, 10), children=("a", "b"))
        assert not region.is_leaf
        assert not region.is_empty

    def test_children_normalized_to_tuple(self):
        region = Region("r1", Rect(0, 0, 10, 10), children=["a", "b"])
        assert region.children == ("a", "b")

    @pytest.mark.parametrize("children", [("a",), ("a", "b", "c"), ()])
    def test_rejects_wrong_child_count(self, children):
        with pytest.raises(ValueError, match="exactly two children"):
            Region("r1", Rect(0, 0, 10, 10), children=children)

    def test_rejects_internal_occupant(self):
        with pytest.raises(ValueError, match="cannot hold an occupant"):
            Region("r1", Rect(0, 0, 10, 10), occupant_id="A", children=("a", "b"))

    def test_as_internal_clears_occupant(self):
        region = Region("r1", Rect(0, 0, 10, 10), occupant_id="A")
        internal = region.as_internal(("a", "b"))
        assert internal.occupant_id is None
        assert internal.children == ("a", "b")
        assert region.occupant_id == "A"  # original untouched

    def test_as_leaf(self):
        region = Region("r1", Rect(0, 0, 10, 10), children=("a", "b"))
        leaf = region.as_leaf(Rect(0, 0, 20, 20), "B")
        assert leaf.is_leaf
        assert leaf.occupant_id == "B"
        assert leaf.rect == Rect(0, 0, 20, 20)

    def test_new_region_ids_unique(self):
        ids = {new_region_id() for _ in range(100)}
        assert len(ids) == 100

    def test_to_dict(self):
        region = Region("r1", Rect(0, 0, 10, 10), children=("a", "b"))
        data = region.to_dict()
        assert data["children"] == ["a", "b"]
        assert data["occupant_id"] is None


class TestWindow:
    """Tests for Window."""

    def test_defaults(self):
        window = Window()
        assert len(window.window_id) == 8
        assert window.size == Size(300, 200)
        assert window.dock_state is DockState.FREE
        assert window.region_id is None
        assert window.snapped is None
        assert not window.is_docked

    def test_default_size_matches_settings(self):
        assert Window().size == Size(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
        assert Window().size == TilerSettings().default_window_size

    def test_explicit_id(self):
        assert Window(window_id="A").window_id == "A"

    def test_auto_ids_unique(self):
        assert Window().window_id != Window().window_id

    def test_docked_in(self):
        window = Window(window_id="A", position=Point(400, 300))
        docked = window.docked_in("r1", Rect(0, 0, 600, 800), Edge.LEFT)
        assert docked.is_docked
        assert docked.region_id == "r1"
        assert docked.position == Point(0, 0)
        assert docked.size == Size(600, 800)
        assert docked.snapped is Edge.LEFT

    def test_docked_in_keeps_snapped_edge(self):
        window = Window(window_id="A", snapped=Edge.TOP)
        assert window.docked_in("r1", Rect(0, 0, 1, 1)).snapped is Edge.TOP

    def test_floating(self):
        docked = Window(window_id="A").docked_in("r1", Rect(0, 0, 600, 800), Edge.LEFT)
        free = docked.floating(Point(5, 6), Size(300, 200))
        assert free.dock_state is DockState.FREE
        assert free.region_id is None
        assert free.snapped is None
        assert free.rect == Rect(5, 6, 300, 200)

    def test_moved_to_keeps_dock_state(self):
        docked = Window(window_id="A").docked_in("r1", Rect(0, 0, 600, 800))
        moved = docked.moved_to(Point(10, 10))
        assert moved.is_docked
        assert moved.size == Size(600, 800)

    def test_to_dict(self):
        data = Window(window_id="A", snapped=Edge.RIGHT).to_dict()
        assert data["dock_state"] == "free"
        assert data["snapped"] == "right"
        assert data["size"] == {"width": 300, "height": 200}

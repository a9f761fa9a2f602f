"""Pytest fixtures for SnapTile tests."""

import pytest

from snaptile.config import TilerSettings
from snaptile.core import PartitionTree, TilerEngine, WindowRegistry
from snaptile.models import Edge, Point, Size, ROOT_ID
from snaptile.utils.placement import fixed_placement


# ============================================================================
# Geometry Fixtures
# ============================================================================

@pytest.fixture
def viewport():
    """Standard 1200x800 viewport."""
    return Size(1200, 800)


@pytest.fixture
def wide_viewport():
    """Viewport whose halves are wider than tall."""
    return Size(2000, 800)


@pytest.fixture
def settings():
    """Default settings."""
    return TilerSettings()


@pytest.fixture
def placement():
    """Placement policy that always floats windows at (400, 300)."""
    return fixed_placement(Point(400, 300))


# ============================================================================
# Tree Fixtures
# ============================================================================

@pytest.fixture
def empty_tree(viewport):
    """Tree with a single empty root leaf."""
    return PartitionTree.for_viewport(viewport)


@pytest.fixture
def halved_tree(empty_tree):
    """Root split left/right with "A" on the left and an empty right leaf."""
    return empty_tree.split(ROOT_ID, Edge.LEFT, "A")


@pytest.fixture
def nested_tree(halved_tree):
    """
    Right half split top/bottom with "B" on top.

        +---------+---------+
        |         |    B    |
        |    A    +---------+
        |         | (empty) |
        +---------+---------+
    """
    right_id = halved_tree.root.children[1]
    return halved_tree.split(right_id, Edge.TOP, "B")


@pytest.fixture
def registry(settings, viewport, placement):
    """Registry with floating windows "A" and "B"."""
    registry = WindowRegistry()
    registry, _ = registry.create(viewport, placement, settings, window_id="A")
    registry, _ = registry.create(viewport, placement, settings, window_id="B")
    return registry


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def engine(viewport, settings, placement):
    """Engine on a 1200x800 viewport with fixed placement."""
    return TilerEngine(viewport, settings, placement)


@pytest.fixture
def wide_engine(wide_viewport, settings, placement):
    """Engine on a 2000x800 viewport with fixed placement."""
    return TilerEngine(wide_viewport, settings, placement)

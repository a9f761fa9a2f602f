"""
Region partition tree.

The viewport is recursively halved into regions. Regions live in an arena
keyed by id and reference each other by id, so the tree can be copied and
replaced as a whole. Every mutating operation returns a new tree and
leaves the receiver untouched.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from snaptile.models import Edge, Point, Rect, Region, Size, ROOT_ID, new_region_id
from snaptile.utils.profiling import timed

logger = logging.getLogger("snaptile.partition")


class PartitionTree:
    """
    Immutable binary space partition of the viewport.

    Invariants:
        - exactly one root (``ROOT_ID``), every other region has one parent
        - internal regions have two children tiling the parent exactly
        - a window occupies at most one leaf
    """

    def __init__(self, regions: Mapping[str, Region]):
        self._regions: Dict[str, Region] = dict(regions)

    @classmethod
    def for_viewport(cls, size: Size) -> "PartitionTree":
        """Tree with a single empty leaf covering the viewport."""
        root = Region(region_id=ROOT_ID, rect=Rect.from_size(size))
        return cls({ROOT_ID: root})

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def root(self) -> Region:
        return self._regions[ROOT_ID]

    def get(self, region_id: Optional[str]) -> Optional[Region]:
        if region_id is None:
            return None
        return self._regions.get(region_id)

    def __contains__(self, region_id: str) -> bool:
        return region_id in self._regions

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions.values())

    def parent_of(self, region_id: str) -> Optional[Region]:
        region = self.get(region_id)
        return self.get(region.parent_id) if region else None

    def sibling_of(self, region_id: str) -> Optional[Region]:
        parent = self.parent_of(region_id)
        if parent is None:
            return None
        first, second = parent.children
        return self.get(second if first == region_id else first)

    def leaves(self) -> List[Region]:
        """Leaves in depth-first, first-child-first order."""
        result = []
        stack = [self.root]
        while stack:
            region = stack.pop()
            if region.is_leaf:
                result.append(region)
            else:
                first, second = region.children
                stack.append(self._regions[second])
                stack.append(self._regions[first])
        return result

    def leaf_of(self, window_id: str) -> Optional[Region]:
        """The leaf occupied by ``window_id``, if any."""
        for region in self._regions.values():
            if region.is_leaf and region.occupant_id == window_id:
                return region
        return None

    def occupants(self) -> Dict[str, Region]:
        """Map of occupant window id to the leaf it fills."""
        return {r.occupant_id: r for r in self.leaves() if r.occupant_id is not None}

    @timed("tree_locate")
    def locate(self, point: Point) -> Optional[Region]:
        """
        Find the leaf containing ``point``.

        Descends from the root, at each level picking the child whose
        rectangle contains the point. Returns None outside the root.
        """
        region = self.root
        if not region.rect.contains(point):
            return None
        while not region.is_leaf:
            first, second = (self._regions[c] for c in region.children)
            if first.rect.contains(point):
                region = first
            elif second.rect.contains(point):
                region = second
            else:
                # Only reachable after a root-only resize grew the root
                return None
        return region

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @timed("tree_split")
    def split(self, leaf_id: str, edge: Edge, new_occupant_id: str) -> "PartitionTree":
        """
        Halve a leaf and put ``new_occupant_id`` on the ``edge`` side.

        The other half inherits the leaf's previous occupant (possibly
        none) and the leaf becomes internal. Unknown ids and internal
        regions leave the tree unchanged.
        """
        leaf = self.get(leaf_id)
        if leaf is None or not leaf.is_leaf:
            logger.debug(f"split ignored: {leaf_id} is not a leaf")
            return self

        first_rect, second_rect = leaf.rect.split(edge)
        new_first = edge in (Edge.LEFT, Edge.TOP)
        first = Region(
            region_id=new_region_id(),
            rect=first_rect,
            parent_id=leaf.region_id,
            occupant_id=new_occupant_id if new_first else leaf.occupant_id,
        )
        second = Region(
            region_id=new_region_id(),
            rect=second_rect,
            parent_id=leaf.region_id,
            occupant_id=leaf.occupant_id if new_first else new_occupant_id,
        )

        regions = dict(self._regions)
        regions[leaf.region_id] = leaf.as_internal((first.region_id, second.region_id))
        regions[first.region_id] = first
        regions[second.region_id] = second
        logger.debug(f"split {leaf_id} on {edge.value} for {new_occupant_id}")
        return PartitionTree(regions)

    @timed("tree_merge")
    def merge(self, leaf_id: str) -> "PartitionTree":
        """
        Collapse a leaf and its sibling back into their parent.

        The parent becomes a leaf covering the envelope of both children
        and holding the sibling's occupant. If the sibling is internal, its
        subtree is promoted into the parent and re-laid-out to fill it.
        The root, internal regions and unknown ids are left alone.
        """
        leaf = self.get(leaf_id)
        if leaf is None or not leaf.is_leaf or leaf.parent_id is None:
            logger.debug(f"merge ignored: {leaf_id} is not a mergeable leaf")
            return self

        parent = self._regions[leaf.parent_id]
        sibling = self.sibling_of(leaf_id)
        # The root tracks the viewport, which may differ from its children
        rect = parent.rect if parent.is_root else leaf.rect.envelope(sibling.rect)

        regions = dict(self._regions)
        del regions[leaf.region_id]
        del regions[sibling.region_id]

        if sibling.is_leaf:
            regions[parent.region_id] = parent.as_leaf(rect, sibling.occupant_id)
            logger.debug(f"merged {leaf_id} into {parent.region_id}")
            return PartitionTree(regions)

        # Promote the sibling's subtree into the parent's slot
        promoted = parent.as_internal(sibling.children).with_rect(rect)
        regions[parent.region_id] = promoted
        for child_id in sibling.children:
            regions[child_id] = replace(regions[child_id], parent_id=parent.region_id)
        tree = PartitionTree(regions)._relayout_from(parent.region_id)
        logger.debug(f"merged {leaf_id}, promoted subtree of {sibling.region_id}")
        return tree

    def with_occupant(self, leaf_id: str, occupant_id: Optional[str]) -> "PartitionTree":
        """Set or clear the occupant of a leaf."""
        leaf = self.get(leaf_id)
        if leaf is None or not leaf.is_leaf:
            return self
        regions = dict(self._regions)
        regions[leaf_id] = leaf.with_occupant(occupant_id)
        return PartitionTree(regions)

    def resize(self, width: float, height: float) -> "PartitionTree":
        """
        Replace the root rectangle with the new viewport size.

        Descendant regions keep their rectangles.
        """
        regions = dict(self._regions)
        regions[ROOT_ID] = self.root.with_rect(Rect(0.0, 0.0, width, height))
        return PartitionTree(regions)

    def relayout(self) -> "PartitionTree":
        """Recompute every descendant from its parent, keeping split axes."""
        return self._relayout_from(ROOT_ID)

    def _relayout_from(self, region_id: str) -> "PartitionTree":
        regions = dict(self._regions)
        stack = [region_id]
        while stack:
            region = regions[stack.pop()]
            if region.is_leaf:
                continue
            first_id, second_id = region.children
            first, second = regions[first_id], regions[second_id]
            edge = Edge.LEFT if _is_side_by_side(first.rect, second.rect) else Edge.TOP
            first_rect, second_rect = region.rect.split(edge)
            regions[first_id] = first.with_rect(first_rect)
            regions[second_id] = second.with_rect(second_rect)
            stack.extend((first_id, second_id))
        return PartitionTree(regions)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        return {"regions": [r.to_dict() for r in self._regions.values()]}

    def structure(self) -> Tuple:
        """Nested tuples of rectangles and occupants, ignoring region ids."""
        def _walk(region: Region):
            rect = tuple(round(v, 9) for v in region.rect.as_array())
            if region.is_leaf:
                return (rect, region.occupant_id)
            return (rect, tuple(_walk(self._regions[c]) for c in region.children))
        return _walk(self.root)


def _is_side_by_side(first: Rect, second: Rect) -> bool:
    """True for children of a vertical (left/right) split."""
    return first.y == second.y and first.x != second.x

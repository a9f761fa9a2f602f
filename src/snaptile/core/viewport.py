"""Viewport resize handling."""

import logging

from snaptile.models import Size
from snaptile.core.state import TilerState

logger = logging.getLogger("snaptile.viewport")


def resize_viewport(state: TilerState, width: float, height: float,
                    rescale: bool = False) -> TilerState:
    """
    Track a viewport size change.

    Only the root region follows the viewport; descendant regions and all
    windows keep their geometry, so after a shrink they may lie partly or
    fully off screen. With ``rescale`` the whole tree is re-laid-out
    proportionally and docked windows follow their leaves.
    Non-positive sizes are ignored.
    """
    if width <= 0 or height <= 0:
        logger.debug(f"resize ignored: {width}x{height}")
        return state

    tree = state.tree.resize(width, height)
    registry = state.registry
    if rescale:
        tree = tree.relayout()
        registry = registry.sync(tree)
    logger.debug(f"viewport resized to {width}x{height} (rescale={rescale})")
    return state.evolve(viewport=Size(width, height), tree=tree, registry=registry)

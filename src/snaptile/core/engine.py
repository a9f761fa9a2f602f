"""
Event reducer and engine.

Hosts deliver events one at a time; ``reduce`` maps the current state and
an event to the next state. ``TilerEngine`` keeps the current state for
hosts that prefer an object to thread through their event loop.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from snaptile.config import TilerSettings
from snaptile.models import Point, Size
from snaptile.core.drag import DragController
from snaptile.core.state import Snapshot, TilerState
from snaptile.core.viewport import resize_viewport
from snaptile.utils.placement import PlacementPolicy, RandomPlacement
from snaptile.utils.profiling import timed

logger = logging.getLogger("snaptile.engine")


@dataclass(frozen=True)
class PointerDown:
    window_id: str
    pos: Point


@dataclass(frozen=True)
class PointerMove:
    pos: Point


@dataclass(frozen=True)
class PointerUp:
    pos: Point


@dataclass(frozen=True)
class ViewportResize:
    width: float
    height: float


@dataclass(frozen=True)
class CreateWindow:
    """Create a floating window; a blank id is generated."""
    window_id: str = ""


@dataclass(frozen=True)
class CloseWindow:
    window_id: str


@dataclass(frozen=True)
class MoveWindowOut:
    window_id: str


Event = Union[PointerDown, PointerMove, PointerUp, ViewportResize,
              CreateWindow, CloseWindow, MoveWindowOut]


def event_from_dict(data: dict) -> Event:
    """
    Build an event from a plain dictionary.

    Example:
        {"type": "pointer_down", "window_id": "a", "x": 10, "y": 10}
    """
    kind = data.get("type")
    if kind == "pointer_down":
        return PointerDown(data["window_id"], Point(data["x"], data["y"]))
    elif kind == "pointer_move":
        return PointerMove(Point(data["x"], data["y"]))
    elif kind == "pointer_up":
        return PointerUp(Point(data["x"], data["y"]))
    elif kind == "viewport_resize":
        return ViewportResize(data["width"], data["height"])
    elif kind == "create_window":
        return CreateWindow(data.get("window_id", ""))
    elif kind == "close_window":
        return CloseWindow(data["window_id"])
    elif kind == "move_window_out":
        return MoveWindowOut(data["window_id"])
    else:
        raise ValueError(f"Unknown event type: {kind}")


def reduce(state: TilerState,
           event: Event,
           settings: TilerSettings,
           placement: PlacementPolicy,
           drag: Optional[DragController] = None) -> TilerState:
    """
    Apply one event and return the next state.

    Invalid references (unknown windows, drags that were never started)
    leave the state unchanged.
    """
    drag = drag or DragController(settings)

    if isinstance(event, PointerDown):
        return drag.start(state, event.pos, event.window_id)
    elif isinstance(event, PointerMove):
        return drag.update(state, event.pos)
    elif isinstance(event, PointerUp):
        return drag.end(state, event.pos)
    elif isinstance(event, ViewportResize):
        return resize_viewport(state, event.width, event.height,
                               rescale=settings.rescale_on_resize)
    elif isinstance(event, CreateWindow):
        registry, _ = state.registry.create(state.viewport, placement, settings,
                                            window_id=event.window_id)
        return state.evolve(registry=registry)
    elif isinstance(event, CloseWindow):
        registry, tree = state.registry.close(event.window_id, state.tree)
        return state.evolve(registry=registry, tree=tree)
    elif isinstance(event, MoveWindowOut):
        registry, tree = state.registry.move_out(event.window_id, state.tree,
                                                 state.viewport, placement, settings)
        return state.evolve(registry=registry, tree=tree)
    else:
        raise TypeError(f"Unsupported event: {event!r}")


class TilerEngine:
    """
    Stateful front end over ``reduce``.

    Usage:
        engine = TilerEngine(Size(1200, 800))
        window_id = engine.create_window()
        engine.pointer_down(window_id, Point(10, 10))
        engine.pointer_move(Point(12, 12))
        engine.pointer_up(Point(12, 12))
        snapshot = engine.snapshot()
    """

    def __init__(self,
                 viewport: Optional[Size] = None,
                 settings: Optional[TilerSettings] = None,
                 placement: Optional[PlacementPolicy] = None):
        self.settings = settings or TilerSettings()
        self.placement = placement or RandomPlacement(
            seed=self.settings.placement_seed,
            bottom_margin=self.settings.placement_bottom_margin,
        )
        self.drag = DragController(self.settings)
        self.state = TilerState.initial(viewport or self.settings.viewport_size)

    @timed("dispatch")
    def dispatch(self, event: Event) -> TilerState:
        """Apply an event and make the result the current state."""
        logger.debug(f"dispatch {event}")
        self.state = reduce(self.state, event, self.settings, self.placement, self.drag)
        return self.state

    def dispatch_all(self, events: Iterable[Event]) -> TilerState:
        for event in events:
            self.dispatch(event)
        return self.state

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()

    # Convenience wrappers mirroring the events

    def create_window(self, window_id: str = "") -> str:
        """Create a window and return its id."""
        before = set(w.window_id for w in self.state.registry)
        self.dispatch(CreateWindow(window_id))
        if window_id:
            return window_id
        created = [w.window_id for w in self.state.registry if w.window_id not in before]
        return created[0]

    def close_window(self, window_id: str) -> TilerState:
        return self.dispatch(CloseWindow(window_id))

    def move_window_out(self, window_id: str) -> TilerState:
        return self.dispatch(MoveWindowOut(window_id))

    def pointer_down(self, window_id: str, pos: Point) -> TilerState:
        return self.dispatch(PointerDown(window_id, pos))

    def pointer_move(self, pos: Point) -> TilerState:
        return self.dispatch(PointerMove(pos))

    def pointer_up(self, pos: Point) -> TilerState:
        return self.dispatch(PointerUp(pos))

    def resize(self, width: float, height: float) -> TilerState:
        return self.dispatch(ViewportResize(width, height))

    def drag_window(self, window_id: str, start: Point, end: Point) -> TilerState:
        """Press on ``start``, move to ``end`` and release there."""
        self.pointer_down(window_id, start)
        self.pointer_move(end)
        return self.pointer_up(end)

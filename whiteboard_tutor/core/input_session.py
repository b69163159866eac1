"""
Input session controller for the whiteboard.

Turns an ordered touch sequence (start, moves, end or cancel) into exactly
one effect on the PathCollection:

- Draw mode: a new stroke is opened on start, grows on every move and is
  committed on end/cancel (a tap with no move commits a single-point dot).
- Erase mode: every start/move removes all strokes whose expanded bounding
  box contains the touch point.
- Scroll mode (from the scroll coordinator): every touch event moves the
  session to Panning, even mid-gesture, and the paths are never touched.

Events are processed synchronously in arrival order on the UI thread.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union

from ..config import Config
from .hit_test import stroke_hit
from .stroke_model import ActiveStroke, PathCollection, Point, Stroke
from .scroll_coordinator import SurfaceScrollCoordinator

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Persistent tool selection."""
    DRAW = "draw"
    ERASE = "erase"


# ==================== Session States ====================

@dataclass(frozen=True)
class Idle:
    """No touch in progress."""


@dataclass(frozen=True)
class Drawing:
    """A stroke is being drawn; it is not yet part of the paths."""
    active_stroke: ActiveStroke


@dataclass(frozen=True)
class Erasing:
    """An erase drag is in progress."""


@dataclass(frozen=True)
class Panning:
    """A touch owned by page scrolling; ignored by the board."""


SessionState = Union[Idle, Drawing, Erasing, Panning]

# Observer signature: (committed strokes, in-progress stroke or None)
ChangeListener = Callable[[Tuple[Stroke, ...], Optional[ActiveStroke]], None]


class InputSessionController:
    """
    State machine owning the touch session for one whiteboard.

    The PathCollection belongs to the host screen and is passed in; the
    controller only mutates it in response to touch events or clear().

    Usage:
        paths = PathCollection()
        controller = InputSessionController(paths, on_change=canvas.repaint_paths)
        controller.on_touch_start(Point(10, 10))
        controller.on_touch_move(Point(20, 10))
        controller.on_touch_end()
    """

    def __init__(
        self,
        paths: PathCollection,
        scroll: Optional[SurfaceScrollCoordinator] = None,
        *,
        color: str = Config.DEFAULT_STROKE_COLOR,
        stroke_width: float = Config.DEFAULT_STROKE_WIDTH,
        erase_threshold: float = Config.ERASE_THRESHOLD,
        on_change: Optional[ChangeListener] = None
    ):
        self._paths = paths
        self._scroll = scroll
        self._color = color
        self._stroke_width = stroke_width
        self._erase_threshold = erase_threshold
        self._on_change = on_change

        self._mode = Mode.DRAW
        self._state: SessionState = Idle()

    # ==================== Properties ====================

    @property
    def paths(self) -> PathCollection:
        return self._paths

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._mode

    @mode.setter
    def mode(self, value: Mode):
        self._mode = Mode(value)

    @property
    def active_stroke(self) -> Optional[ActiveStroke]:
        """The in-progress stroke, only while Drawing."""
        if isinstance(self._state, Drawing):
            return self._state.active_stroke
        return None

    @property
    def is_idle(self) -> bool:
        return isinstance(self._state, Idle)

    def set_change_listener(self, listener: Optional[ChangeListener]):
        """Register the redraw observer (replaces any previous one)."""
        self._on_change = listener

    # ==================== Touch Events ====================

    def on_touch_start(self, point: Point, mode: Optional[Mode] = None):
        """Begin a touch session at point."""
        if self._scroll_owns_touches():
            self._enter_panning()
            return

        if isinstance(self._state, Drawing):
            # A new start without an end: keep the open ink rather than drop it
            self._commit_active_stroke()

        mode = Mode(mode) if mode is not None else self._mode

        if mode == Mode.ERASE:
            self._state = Erasing()
            self._erase_at(point)
        else:
            stroke = ActiveStroke.starting_at(point, self._color, self._stroke_width)
            self._state = Drawing(stroke)
            self._notify()

    def on_touch_move(self, point: Point):
        """Continue the current session."""
        if self._scroll_owns_touches():
            self._enter_panning()
            return

        if isinstance(self._state, Drawing):
            self._state.active_stroke.append(point)
            self._notify()
        elif isinstance(self._state, Erasing):
            self._erase_at(point)

    def on_touch_end(self):
        """Finish the current session (commits an open stroke)."""
        if self._scroll_owns_touches():
            self._enter_panning()
        elif isinstance(self._state, Drawing):
            self._commit_active_stroke()
        self._state = Idle()

    def on_touch_cancel(self):
        """
        Platform cancelled the touch.

        Treated like an end: an open stroke is still committed so no ink
        is lost.
        """
        self.on_touch_end()

    def close_session(self):
        """
        Close any open session outside the touch stream.

        Called by the host when it stops routing touches to the board (for
        example when scroll mode is switched on). An open stroke is
        committed; touch events arriving afterwards under scroll mode never
        mutate the paths.
        """
        if isinstance(self._state, Drawing):
            self._commit_active_stroke()
        self._state = Idle()

    def clear(self):
        """Remove every stroke and drop any in-progress stroke."""
        removed = self._paths.clear()
        self._state = Idle()
        logger.debug(f"Whiteboard cleared ({removed} strokes)")
        self._notify()

    # ==================== Helpers ====================

    def _scroll_owns_touches(self) -> bool:
        return self._scroll is not None and not self._scroll.accepts_drawing_touches()

    def _enter_panning(self):
        """Hand the rest of the gesture to scrolling; open ink is dropped."""
        dropped = isinstance(self._state, Drawing)
        self._state = Panning()
        if dropped:
            logger.debug("Scroll mode took over an open stroke; stroke discarded")
            self._notify()

    def _commit_active_stroke(self):
        stroke = self._state.active_stroke
        if len(stroke) >= 1:
            self._paths.append(stroke.to_stroke())
            logger.debug(f"Committed stroke with {len(stroke)} points "
                         f"(total strokes: {len(self._paths)})")
        self._state = Idle()
        self._notify()

    def _erase_at(self, point: Point):
        threshold = self._erase_threshold
        removed = self._paths.remove_where(lambda s: stroke_hit(point, s, threshold))
        if removed:
            logger.debug(f"Erased {len(removed)} stroke(s) at ({point.x:.1f}, {point.y:.1f})")
            self._notify()

    def _notify(self):
        if self._on_change is not None:
            self._on_change(self._paths.snapshot(), self.active_stroke)


__all__ = [
    'Mode',
    'Idle',
    'Drawing',
    'Erasing',
    'Panning',
    'SessionState',
    'InputSessionController',
]

"""
Surface scroll coordinator.

Decides whether touches drive the board or page scrolling, and keeps the
board's vertical extent growing so the user never reaches its bottom.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import Config

logger = logging.getLogger(__name__)


@dataclass
class ScrollState:
    scroll_mode_enabled: bool = False
    content_height: float = 0.0


class SurfaceScrollCoordinator:
    """
    Owns ScrollState for one whiteboard surface.

    Scroll mode is a manual toggle and the single gate deciding whether
    touches reach the InputSessionController. While it is on, every scroll
    update that brings the viewport within `margin` of the content bottom
    grows the content by `extend_pages` viewport heights. Content height
    only ever grows.
    """

    def __init__(
        self,
        viewport_height: float,
        content_height: Optional[float] = None,
        *,
        margin: float = Config.SCROLL_EXTEND_MARGIN,
        extend_pages: int = Config.SCROLL_EXTEND_PAGES
    ):
        self._viewport_height = max(0.0, float(viewport_height))
        self._margin = margin
        self._extend_pages = extend_pages

        if content_height is None:
            content_height = self._viewport_height * extend_pages
        self._state = ScrollState(
            scroll_mode_enabled=False,
            content_height=max(float(content_height), self._viewport_height)
        )

        self.on_content_height_changed: Optional[Callable[[float], None]] = None
        self.on_scroll_mode_changed: Optional[Callable[[bool], None]] = None

    # ==================== Properties ====================

    @property
    def state(self) -> ScrollState:
        return ScrollState(self._state.scroll_mode_enabled, self._state.content_height)

    @property
    def scroll_mode_enabled(self) -> bool:
        return self._state.scroll_mode_enabled

    @property
    def content_height(self) -> float:
        return self._state.content_height

    @property
    def viewport_height(self) -> float:
        return self._viewport_height

    @property
    def extend_increment(self) -> float:
        return self._viewport_height * self._extend_pages

    # ==================== Mode ====================

    def set_scroll_mode(self, enabled: bool):
        enabled = bool(enabled)
        if self._state.scroll_mode_enabled == enabled:
            return
        self._state.scroll_mode_enabled = enabled
        logger.debug(f"Scroll mode {'enabled' if enabled else 'disabled'}")
        if self.on_scroll_mode_changed is not None:
            self.on_scroll_mode_changed(enabled)

    def toggle_scroll_mode(self) -> bool:
        self.set_scroll_mode(not self._state.scroll_mode_enabled)
        return self._state.scroll_mode_enabled

    def accepts_drawing_touches(self) -> bool:
        """True when touches should go to the drawing controller."""
        return not self._state.scroll_mode_enabled

    # ==================== Geometry ====================

    def set_viewport_height(self, height: float):
        """
        Viewport resized. Content is raised to at least one viewport.

        A surface created before its viewport was laid out (zero height and
        zero content) takes its initial extend_pages x viewport here.
        """
        unsized = self._viewport_height == 0 and self._state.content_height == 0
        self._viewport_height = max(0.0, float(height))
        floor = self.extend_increment if unsized else self._viewport_height
        if floor > self._state.content_height:
            self._grow_to(floor)

    def on_scroll(self, scroll_offset: float) -> bool:
        """
        Apply the auto-extension rule for a scroll-position update.

        Args:
            scroll_offset: Distance from the content top to the viewport top

        Returns:
            True if the content height grew
        """
        if not self._state.scroll_mode_enabled:
            return False

        visible_bottom = scroll_offset + self._viewport_height
        if visible_bottom > self._state.content_height - self._margin:
            increment = self.extend_increment
            if increment <= 0:
                return False
            self._grow_to(self._state.content_height + increment)
            return True
        return False

    def _grow_to(self, height: float):
        if height <= self._state.content_height:
            return
        self._state.content_height = height
        logger.debug(f"Content height extended to {height:.0f}")
        if self.on_content_height_changed is not None:
            self.on_content_height_changed(height)


__all__ = ['ScrollState', 'SurfaceScrollCoordinator']

"""
WhiteboardView - scrollable host for the whiteboard canvas

Wires a SurfaceScrollCoordinator to a QScrollArea:
- Scroll mode off: the canvas captures all input, wheel and drag scrolling
  are disabled.
- Scroll mode on: the canvas is transparent to input, the viewport scrolls
  by dragging (QScroller) or wheel, and the canvas grows as the user nears
  its bottom.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QScrollArea, QScroller, QFrame, QWidget
from PyQt6.QtCore import Qt, pyqtSignal

from ..core.input_session import InputSessionController, Mode
from ..core.scroll_coordinator import SurfaceScrollCoordinator
from ..core.stroke_model import PathCollection
from .whiteboard_canvas import WhiteboardCanvas

logger = logging.getLogger(__name__)


class WhiteboardView(QScrollArea):
    """Extendable vertical whiteboard."""

    scroll_mode_changed = pyqtSignal(bool)
    content_height_changed = pyqtSignal(int)

    def __init__(self, paths: PathCollection, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._coordinator = SurfaceScrollCoordinator(viewport_height=0)
        self._controller = InputSessionController(paths, self._coordinator)
        self._canvas = WhiteboardCanvas(self._controller)

        self._coordinator.on_content_height_changed = self._apply_content_height
        self._coordinator.on_scroll_mode_changed = self._apply_scroll_mode

        self._setup_view()

    def _setup_view(self):
        """Configure the scroll area."""
        self.setWidget(self._canvas)
        self.setWidgetResizable(False)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setStyleSheet(
            "QScrollArea { background: #ffffff; border: 2px solid #e5e7eb; border-radius: 12px; }"
        )
        self.verticalScrollBar().valueChanged.connect(self._on_scroll_value_changed)

    # ==================== Properties ====================

    @property
    def canvas(self) -> WhiteboardCanvas:
        return self._canvas

    @property
    def controller(self) -> InputSessionController:
        return self._controller

    @property
    def coordinator(self) -> SurfaceScrollCoordinator:
        return self._coordinator

    @property
    def scroll_mode_enabled(self) -> bool:
        return self._coordinator.scroll_mode_enabled

    # ==================== Public API ====================

    def set_mode(self, mode: Mode):
        self._canvas.set_mode(mode)

    def set_scroll_mode(self, enabled: bool):
        self._coordinator.set_scroll_mode(enabled)

    def clear(self):
        self._canvas.clear()

    def capture_image(self) -> str:
        """Capture the board as base64 PNG (at least one viewport tall)."""
        return self._canvas.capture_image(min_height=self.viewport().height())

    # ==================== Coordinator Callbacks ====================

    def _apply_scroll_mode(self, enabled: bool):
        """Hand input to scrolling or back to the canvas."""
        self._canvas.set_input_enabled(not enabled)

        if enabled:
            self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
            QScroller.grabGesture(self.viewport(), QScroller.ScrollerGestureType.LeftMouseButtonGesture)
            # Evaluate the current position so a short board can be scrolled at all
            self._coordinator.on_scroll(self.verticalScrollBar().value())
        else:
            QScroller.ungrabGesture(self.viewport())
            self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.scroll_mode_changed.emit(enabled)

    def _apply_content_height(self, height: float):
        self._canvas.resize(self.viewport().width(), int(height))
        self.content_height_changed.emit(int(height))

    def _on_scroll_value_changed(self, value: int):
        self._coordinator.on_scroll(value)

    # ==================== Events ====================

    def wheelEvent(self, event):
        if not self._coordinator.scroll_mode_enabled:
            event.accept()
            return
        super().wheelEvent(event)

    def resizeEvent(self, event):
        """Keep the canvas as wide as the viewport and at least as tall."""
        super().resizeEvent(event)
        self._coordinator.set_viewport_height(self.viewport().height())
        self._canvas.resize(self.viewport().width(), int(self._coordinator.content_height))


__all__ = ['WhiteboardView']

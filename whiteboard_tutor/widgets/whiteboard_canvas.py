"""
WhiteboardCanvas - freehand drawing surface

Feeds mouse and single-finger touch input to an InputSessionController and
paints the committed strokes plus the in-progress stroke. The canvas keeps
no drawing state of its own beyond the last snapshot it was handed.
"""

import logging
from typing import Optional, Tuple

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, pyqtSignal, QEvent, QPointF
from PyQt6.QtGui import QPainter, QColor, QCursor

from ..config import Config
from ..core.input_session import InputSessionController, Mode
from ..core.stroke_model import ActiveStroke, Point, Stroke
from ..utils.canvas_capture import capture_widget
from .stroke_renderer import paint_strokes

logger = logging.getLogger(__name__)


class WhiteboardCanvas(QWidget):
    """
    Drawing surface for handwritten solutions.

    Features:
    - Draw and erase modes
    - Mouse and touch input (first touch point only)
    - Tap-to-dot strokes
    - PNG capture of the used part of the board
    """

    # Signals
    paths_changed = pyqtSignal(int)  # committed stroke count

    def __init__(self, controller: InputSessionController, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._controller = controller
        self._strokes: Tuple[Stroke, ...] = controller.paths.snapshot()
        self._active_stroke: Optional[ActiveStroke] = None
        self._stroke_count = len(self._strokes)
        self._input_enabled = True
        self._background = QColor(Config.BOARD_BACKGROUND)

        self._controller.set_change_listener(self._on_model_changed)
        self._setup_widget()

    def _setup_widget(self):
        """Configure the widget."""
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)
        self.setAutoFillBackground(False)
        self.setCursor(self._get_mode_cursor(self._controller.mode))

    # ==================== Properties ====================

    @property
    def controller(self) -> InputSessionController:
        return self._controller

    @property
    def mode(self) -> Mode:
        return self._controller.mode

    @property
    def stroke_count(self) -> int:
        return self._stroke_count

    @property
    def input_enabled(self) -> bool:
        return self._input_enabled

    # ==================== Mode Management ====================

    def set_mode(self, mode: Mode):
        """Set draw or erase mode for the next touch."""
        self._controller.mode = mode
        self.setCursor(self._get_mode_cursor(mode))

    def _get_mode_cursor(self, mode: Mode) -> QCursor:
        """Get cursor for mode."""
        if mode == Mode.ERASE:
            return QCursor(Qt.CursorShape.PointingHandCursor)
        return QCursor(Qt.CursorShape.CrossCursor)

    def set_input_enabled(self, enabled: bool):
        """
        Route input to the board (True) or let it pass through (False).

        Disabling mid-gesture closes the open session, keeping its ink.
        """
        if enabled == self._input_enabled:
            return
        self._input_enabled = enabled
        if not enabled and not self._controller.is_idle:
            self._controller.close_session()
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, not enabled)

    def clear(self):
        """Remove all strokes from the board."""
        self._controller.clear()

    # ==================== Event Interception (Touch) ====================

    def event(self, event):
        """Intercept touch events at QEvent level."""
        event_type = event.type()

        if event_type in (QEvent.Type.TouchBegin, QEvent.Type.TouchUpdate,
                          QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
            self._handle_touch_event(event)
            return True

        return super().event(event)

    def _handle_touch_event(self, event):
        """Handle single-finger touch input."""
        event_type = event.type()

        if event_type == QEvent.Type.TouchCancel:
            self._controller.on_touch_cancel()
            return

        points = event.points()
        if not points:
            return
        pos = self._to_point(points[0].position())

        if event_type == QEvent.Type.TouchBegin:
            self._controller.on_touch_start(pos)
        elif event_type == QEvent.Type.TouchUpdate:
            self._controller.on_touch_move(pos)
        elif event_type == QEvent.Type.TouchEnd:
            self._controller.on_touch_end()
        event.accept()

    # ==================== Mouse Events ====================

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._controller.on_touch_start(self._to_point(event.position()))
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if event.buttons() & Qt.MouseButton.LeftButton:
            self._controller.on_touch_move(self._to_point(event.position()))
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._controller.on_touch_end()
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    @staticmethod
    def _to_point(pos: QPointF) -> Point:
        return Point(pos.x(), pos.y())

    # ==================== Rendering ====================

    def _on_model_changed(self, strokes: Tuple[Stroke, ...], active_stroke: Optional[ActiveStroke]):
        """Redraw after any controller mutation."""
        self._strokes = strokes
        self._active_stroke = active_stroke

        if len(strokes) != self._stroke_count:
            self._stroke_count = len(strokes)
            self.paths_changed.emit(self._stroke_count)

        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.fillRect(event.rect(), self._background)
            paint_strokes(painter, self._strokes, self._active_stroke)
        finally:
            painter.end()

    # ==================== Capture ====================

    def capture_image(self, min_height: int = 0) -> str:
        """
        Capture the used part of the board as base64 PNG.

        The image spans from the top of the board to just below the lowest
        ink, but never less than min_height.

        Raises:
            CaptureError: if rendering or encoding fails
        """
        bottom = self._controller.paths.content_bottom()
        height = max(int(bottom) + Config.CAPTURE_PADDING, min_height)
        return capture_widget(self, height)


__all__ = ['WhiteboardCanvas']

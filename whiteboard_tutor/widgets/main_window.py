"""
MainWindow - Main application window

Pattern: QMainWindow with a stacked central widget
"""

import logging
from PyQt6.QtWidgets import QMainWindow, QStackedWidget, QStatusBar, QLabel
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtCore import QThreadPool

from ..config import Config
from ..events.event_bus import get_event_bus
from ..services.gemini_service import GeminiService
from .selection_screen import SelectionScreen
from .question_screen import QuestionScreen

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window

    Layout:
        +----------------------------+
        |  SelectionScreen           |
        |    or                      |
        |  QuestionScreen            |
        +----------------------------+
        |  StatusBar                 |
        +----------------------------+
    """

    LOADING_MESSAGES = {
        'question': "Generating question...",
        'hint': "Analyzing your work...",
        'verify': "Checking your answer...",
    }

    STATUS_TIMEOUT_MS = 5000

    def __init__(self, parent=None, service=None, event_bus=None):
        super().__init__(parent)

        # Services and event bus (injectable for testing)
        self._event_bus = event_bus or get_event_bus()
        self._service = service or GeminiService()

        self._setup_window()
        self._create_widgets()
        self._connect_signals()

    def _setup_window(self):
        """Configure window properties"""
        self.setWindowTitle(Config.APP_NAME)
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)

    def _create_widgets(self):
        """Create UI widgets"""
        self._stack = QStackedWidget()
        self._selection_screen = SelectionScreen()
        self._question_screen = QuestionScreen(self._service)
        self._stack.addWidget(self._selection_screen)
        self._stack.addWidget(self._question_screen)
        self.setCentralWidget(self._stack)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

        # Board state (selection, tool, scroll mode, stroke count)
        self._board_status = QLabel()
        self._board_status.setStyleSheet("color: #6b7280; font-size: 12px;")
        self._status_bar.addPermanentWidget(self._board_status)
        self._refresh_board_status()

    def _connect_signals(self):
        """Connect screen and event bus signals"""
        self._selection_screen.start_requested.connect(self._on_start_requested)
        self._question_screen.back_requested.connect(self._show_selection)

        self._event_bus.loading_started.connect(self._on_loading_started)
        self._event_bus.loading_finished.connect(self._on_loading_finished)
        self._event_bus.error_occurred.connect(self._on_error)
        self._event_bus.question_changed.connect(self._on_question_changed)

        self._event_bus.selection_changed.connect(self._refresh_board_status)
        self._event_bus.mode_changed.connect(self._refresh_board_status)
        self._event_bus.scroll_mode_changed.connect(self._refresh_board_status)
        self._event_bus.stroke_count_changed.connect(self._refresh_board_status)

    # ==================== Navigation ====================

    def _on_start_requested(self, subject: str, class_level: int):
        logger.info(f"Starting practice: {subject}, Class {class_level}")
        self._stack.setCurrentWidget(self._question_screen)
        self._question_screen.start(subject, class_level)

    def _show_selection(self):
        self._stack.setCurrentWidget(self._selection_screen)

    # ==================== Status Bar ====================

    def _on_loading_started(self, operation: str):
        self._status_bar.showMessage(self.LOADING_MESSAGES.get(operation, "Working..."))

    def _on_loading_finished(self, operation: str):
        self._status_bar.clearMessage()

    def _on_error(self, error_type: str, message: str):
        self._status_bar.showMessage(f"Error: {message}", self.STATUS_TIMEOUT_MS)

    def _on_question_changed(self, question: str):
        self._status_bar.showMessage("New question ready", self.STATUS_TIMEOUT_MS)

    def _refresh_board_status(self, *args):
        """Rebuild the permanent status text from the event bus state"""
        parts = []
        subject, class_level = self._event_bus.get_selection()
        if subject:
            parts.append(f"{subject} • Class {class_level}")
        parts.append(self._event_bus.get_mode().capitalize())
        if self._event_bus.is_scroll_mode():
            parts.append("Scrolling")
        count = self._event_bus.get_stroke_count()
        parts.append(f"{count} stroke{'' if count == 1 else 's'}")
        self._board_status.setText("  |  ".join(parts))

    @property
    def board_status_text(self) -> str:
        return self._board_status.text()

    def closeEvent(self, event: QCloseEvent):
        """Wait briefly for running AI calls before closing"""
        QThreadPool.globalInstance().waitForDone(1000)
        event.accept()


__all__ = ['MainWindow']

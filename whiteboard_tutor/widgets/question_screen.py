"""
QuestionScreen - practise one question on the whiteboard

Loads a generated question, hosts the whiteboard and runs the hint and
answer-verification calls in the background, one call of each kind at a
time.
"""

import logging
from typing import Dict, Optional, Set

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QScrollArea, QStackedLayout, QMessageBox, QFrame
)
from PyQt6.QtCore import Qt, pyqtSignal, QThreadPool
from PyQt6.QtGui import QKeySequence, QShortcut

from ..core.input_session import Mode
from ..core.stroke_model import PathCollection
from ..events.event_bus import get_event_bus
from ..services.ai_worker import AITask
from ..services.gemini_service import GeminiService
from ..services.response_parser import VerificationResult
from ..utils.canvas_capture import CaptureError
from .whiteboard_toolbar import WhiteboardToolbar
from .whiteboard_view import WhiteboardView
from .dialogs.result_dialog import ResultDialog
from .dialogs.hint_dialog import HintDialog

logger = logging.getLogger(__name__)


class QuestionScreen(QWidget):
    """Question card, whiteboard and hint/submit actions"""

    back_requested = pyqtSignal()

    OP_QUESTION = 'question'
    OP_HINT = 'hint'
    OP_VERIFY = 'verify'

    def __init__(self, service: GeminiService, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._service = service
        self._event_bus = get_event_bus()
        self._thread_pool = QThreadPool.globalInstance()

        self._subject = ''
        self._class_level = 0
        self._question = ''
        self._hint = ''
        self._paths = PathCollection()

        self._current: Dict[str, AITask] = {}  # in-flight task per operation
        self._tasks: Set[AITask] = set()
        self._generation = 0  # bumped on every new question; stale replies are dropped

        self._build_ui()
        self._connect_signals()
        self._setup_shortcuts()

    # ==================== UI ====================

    def _build_ui(self):
        self._stack = QStackedLayout(self)

        # Loading page
        loading_page = QWidget()
        loading_layout = QVBoxLayout(loading_page)
        self._loading_label = QLabel("Generating question...")
        self._loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._loading_label.setStyleSheet("font-size: 16px; color: #6b7280;")
        loading_layout.addWidget(self._loading_label)
        self._stack.addWidget(loading_page)

        # Content page
        content = QWidget()
        content.setStyleSheet("background: #f5f5f5;")
        layout = QVBoxLayout(content)
        layout.setContentsMargins(15, 10, 15, 15)
        layout.setSpacing(10)

        top_row = QHBoxLayout()
        self._back_btn = QPushButton("< Back")
        self._back_btn.setStyleSheet(
            "QPushButton { background: transparent; color: #6366f1; border: none; font-size: 14px; }"
        )
        top_row.addWidget(self._back_btn)
        top_row.addStretch()
        layout.addLayout(top_row)

        layout.addWidget(self._build_question_card())

        self._toolbar = WhiteboardToolbar()
        layout.addWidget(self._toolbar)

        self._whiteboard = WhiteboardView(self._paths)
        layout.addWidget(self._whiteboard, 1)

        self._hint_btn = QPushButton("Get Hint")
        self._hint_btn.setStyleSheet("""
            QPushButton { background: #fef3c7; color: #92400e; border: 2px solid #fbbf24;
                          border-radius: 10px; padding: 12px; font-size: 15px; font-weight: bold; }
            QPushButton:disabled { color: #b45309; }
        """)
        layout.addWidget(self._hint_btn)

        button_row = QHBoxLayout()
        button_row.setSpacing(10)
        self._submit_btn = QPushButton("Submit Answer")
        self._submit_btn.setStyleSheet("""
            QPushButton { background: #10b981; color: #ffffff; border: none;
                          border-radius: 10px; padding: 14px; font-size: 15px; font-weight: bold; }
            QPushButton:disabled { background: #9ca3af; }
        """)
        self._new_question_btn = QPushButton("New Question")
        self._new_question_btn.setStyleSheet("""
            QPushButton { background: #ffffff; color: #6366f1; border: 2px solid #6366f1;
                          border-radius: 10px; padding: 14px; font-size: 15px; font-weight: bold; }
        """)
        button_row.addWidget(self._submit_btn, 1)
        button_row.addWidget(self._new_question_btn, 1)
        layout.addLayout(button_row)

        self._stack.addWidget(content)

    def _build_question_card(self) -> QWidget:
        card = QFrame()
        card.setStyleSheet("QFrame { background: #ffffff; border-radius: 12px; }")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 12, 16, 12)

        label = QLabel("QUESTION:")
        label.setStyleSheet("font-size: 13px; font-weight: 600; color: #6366f1;")
        card_layout.addWidget(label)

        self._question_label = QLabel()
        self._question_label.setWordWrap(True)
        self._question_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self._question_label.setStyleSheet("font-size: 17px; color: #1f2937;")

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._question_label)
        scroll.setMaximumHeight(150)
        scroll.setStyleSheet("QScrollArea { border: none; }")
        card_layout.addWidget(scroll)

        self._meta_label = QLabel()
        self._meta_label.setStyleSheet(
            "font-size: 13px; color: #6b7280; border-top: 1px solid #e5e7eb; padding-top: 8px;"
        )
        card_layout.addWidget(self._meta_label)
        return card

    def _connect_signals(self):
        self._back_btn.clicked.connect(self._on_back_clicked)
        self._toolbar.mode_changed.connect(self._on_mode_changed)
        self._toolbar.scroll_toggled.connect(self._whiteboard.set_scroll_mode)
        self._toolbar.clear_clicked.connect(self.clear_board)
        self._whiteboard.scroll_mode_changed.connect(self._event_bus.set_scroll_mode)
        self._whiteboard.canvas.paths_changed.connect(self._on_paths_changed)
        self._hint_btn.clicked.connect(self.request_hint)
        self._submit_btn.clicked.connect(self.submit_answer)
        self._new_question_btn.clicked.connect(self.next_question)

    def _setup_shortcuts(self):
        QShortcut(QKeySequence("D"), self, activated=lambda: self._toolbar.set_mode(Mode.DRAW))
        QShortcut(QKeySequence("E"), self, activated=lambda: self._toolbar.set_mode(Mode.ERASE))
        QShortcut(QKeySequence("S"), self,
                  activated=lambda: self._toolbar.set_scroll_enabled(not self._toolbar.scroll_enabled))

    # ==================== Properties ====================

    @property
    def question(self) -> str:
        return self._question

    @property
    def paths(self) -> PathCollection:
        return self._paths

    @property
    def whiteboard(self) -> WhiteboardView:
        return self._whiteboard

    def is_busy(self, operation: str) -> bool:
        return operation in self._current

    # ==================== Public API ====================

    def start(self, subject: str, class_level: int):
        """Begin practising a subject/class with a fresh question."""
        self._subject = subject
        self._class_level = class_level
        self._meta_label.setText(f"{subject}  •  Class {class_level}")
        self._reset_attempt()
        self.load_question()

    def load_question(self):
        self._generation += 1
        self._stack.setCurrentIndex(0)
        self._run(self.OP_QUESTION, self._service.generate_question, self._subject, self._class_level)

    def next_question(self):
        self._reset_attempt()
        self.load_question()

    def clear_board(self):
        self._whiteboard.clear()

    def request_hint(self):
        if self.is_busy(self.OP_HINT):
            return

        image = None
        if self._paths:
            try:
                image = self._whiteboard.capture_image()
            except CaptureError as e:
                logger.info(f"Could not capture canvas, will provide general hint: {e}")

        self._run(self.OP_HINT, self._service.generate_hint, self._question, image)

    def submit_answer(self):
        if self.is_busy(self.OP_VERIFY):
            return

        if not self._paths:
            QMessageBox.information(
                self,
                "No Solution",
                "Please draw your solution on the whiteboard before submitting."
            )
            return

        try:
            image = self._whiteboard.capture_image()
        except CaptureError as e:
            self._show_error(self.OP_VERIFY, str(e))
            return

        self._run(self.OP_VERIFY, self._service.verify_answer, self._question, image)

    # ==================== Background Calls ====================

    def _run(self, operation: str, func, *args):
        task = AITask(operation, func, *args)
        generation = self._generation
        task.signals.succeeded.connect(
            lambda op, result, elapsed, g=generation, t=task: self._on_task_succeeded(t, g, op, result, elapsed)
        )
        task.signals.failed.connect(
            lambda op, message, g=generation, t=task: self._on_task_failed(t, g, op, message)
        )

        self._tasks.add(task)
        self._current[operation] = task
        self._event_bus.start_loading(operation)
        self._update_buttons()
        self._thread_pool.start(task)

    def _finish(self, task: AITask, operation: str):
        self._tasks.discard(task)
        # A newer call of the same kind keeps its busy flag
        if self._current.get(operation) is not task:
            return
        del self._current[operation]
        self._event_bus.finish_loading(operation)
        self._update_buttons()

    def _on_task_succeeded(self, task: AITask, generation: int, operation: str, result, elapsed_ms: float):
        self._finish(task, operation)
        if generation != self._generation:
            logger.debug(f"Dropping stale {operation} reply")
            return
        logger.info(f"{operation} call finished in {elapsed_ms:.0f} ms")

        if operation == self.OP_QUESTION:
            self._set_question(result)
        elif operation == self.OP_HINT:
            self._hint = result
            HintDialog(result, self).exec()
        elif operation == self.OP_VERIFY:
            self._show_result(result)

    def _on_task_failed(self, task: AITask, generation: int, operation: str, message: str):
        self._finish(task, operation)
        if generation != self._generation:
            return
        self._show_error(operation, message)

    # ==================== Outcomes ====================

    def _set_question(self, question: str):
        self._question = question
        self._question_label.setText(question)
        self._event_bus.set_question(question)
        self._stack.setCurrentIndex(1)

    def _show_result(self, result: VerificationResult):
        code = ResultDialog(result, self).exec()
        if code == ResultDialog.NEXT_QUESTION:
            self.next_question()
        elif code == ResultDialog.TRY_AGAIN:
            self.clear_board()

    def _show_error(self, operation: str, message: str):
        logger.warning(f"{operation} failed: {message}")
        self._event_bus.report_error(operation, message)

        if operation != self.OP_QUESTION:
            QMessageBox.critical(self, "Error", message)
            return

        box = QMessageBox(QMessageBox.Icon.Critical, "Error", message, parent=self)
        retry_btn = box.addButton("Retry", QMessageBox.ButtonRole.AcceptRole)
        box.addButton("Go Back", QMessageBox.ButtonRole.RejectRole)
        box.exec()
        if box.clickedButton() is retry_btn:
            self.load_question()
        else:
            self.back_requested.emit()

    # ==================== State ====================

    def _reset_attempt(self):
        self._hint = ''
        self.clear_board()

    def _on_back_clicked(self):
        self._generation += 1
        self._reset_attempt()
        self.back_requested.emit()

    def _on_mode_changed(self, mode: Mode):
        self._whiteboard.set_mode(mode)
        self._event_bus.set_mode(mode.value)

    def _on_paths_changed(self, count: int):
        self._event_bus.set_stroke_count(count)
        self._update_buttons()

    def _update_buttons(self):
        hint_busy = self.is_busy(self.OP_HINT)
        self._hint_btn.setEnabled(not hint_busy)
        self._hint_btn.setText("Analyzing..." if hint_busy else "Get Hint")

        verifying = self.is_busy(self.OP_VERIFY)
        self._submit_btn.setEnabled(not verifying and len(self._paths) > 0)
        self._submit_btn.setText("Checking..." if verifying else "Submit Answer")


__all__ = ['QuestionScreen']

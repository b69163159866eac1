"""
Result Dialog - shows the grading outcome for a submitted solution
"""
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QScrollArea, QWidget, QApplication
)
from PyQt6.QtCore import Qt

from ...services.response_parser import VerificationResult


class ResultDialog(QDialog):
    """Correct/incorrect feedback with Try Again / Next Question choices"""

    WIDTH = 420
    HEIGHT = 520

    # Dialog result codes
    TRY_AGAIN = 2
    NEXT_QUESTION = 3

    CORRECT_COLOR = "#10b981"
    INCORRECT_COLOR = "#ef4444"

    def __init__(self, result: VerificationResult, parent=None):
        super().__init__(parent)

        self._result = result

        self._configure_window()
        self._apply_styles()
        self._center_over_parent()
        self._build_ui()

    def _configure_window(self):
        """Configure window properties"""
        self.setWindowTitle("Result")
        self.setMinimumSize(self.WIDTH, self.HEIGHT // 2)
        self.resize(self.WIDTH, self.HEIGHT)
        self.setModal(True)

    def _apply_styles(self):
        """Apply dialog styling"""
        self.setStyleSheet("""
            QDialog { background-color: #ffffff; }
            QLabel { color: #1f2937; }
            QPushButton {
                color: #ffffff;
                border: none;
                border-radius: 10px;
                padding: 12px;
                font-weight: bold;
                font-size: 14px;
            }
            QPushButton#tryAgainBtn { background-color: #f59e0b; }
            QPushButton#nextBtn { background-color: #6366f1; }
        """)

    def _center_over_parent(self):
        """Center dialog over parent window"""
        if self.parent():
            pg = self.parent().geometry()
            x = pg.x() + (pg.width() - self.WIDTH) // 2
            y = pg.y() + (pg.height() - self.HEIGHT) // 2

            screen = QApplication.primaryScreen()
            if screen:
                screen_geometry = screen.availableGeometry()
                max_x = screen_geometry.x() + screen_geometry.width() - self.WIDTH
                max_y = screen_geometry.y() + screen_geometry.height() - self.HEIGHT
                x = max(screen_geometry.x(), min(x, max_x))
                y = max(screen_geometry.y() + 30, min(y, max_y))

            self.move(x, y)

    def _build_ui(self):
        """Build the dialog UI"""
        layout = QVBoxLayout(self)
        layout.setSpacing(12)
        layout.setContentsMargins(0, 0, 0, 16)

        # Header banner
        correct = self._result.is_correct
        header = QLabel("Correct!" if correct else "Incorrect")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setStyleSheet(
            f"background-color: {self.CORRECT_COLOR if correct else self.INCORRECT_COLOR};"
            "color: #ffffff; font-size: 22px; font-weight: bold; padding: 18px;"
        )
        layout.addWidget(header)

        # Scrollable feedback
        body = QWidget()
        body_layout = QVBoxLayout(body)
        body_layout.setContentsMargins(20, 4, 20, 4)
        body_layout.setSpacing(8)

        body_layout.addWidget(self._section_title("Feedback:"))
        body_layout.addWidget(self._wrapped_text(self._result.feedback))

        if self._result.correct_answer:
            body_layout.addSpacing(8)
            body_layout.addWidget(self._section_title("Correct Answer:"))
            answer = self._wrapped_text(self._result.correct_answer)
            answer.setStyleSheet(
                "background-color: #f0fdf4; border-left: 4px solid #10b981; padding: 10px;"
            )
            body_layout.addWidget(answer)

        body_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(body)
        scroll.setStyleSheet("QScrollArea { border: none; }")
        layout.addWidget(scroll, 1)

        # Buttons
        button_row = QHBoxLayout()
        button_row.setContentsMargins(20, 0, 20, 0)
        button_row.setSpacing(10)

        if not correct:
            try_again_btn = QPushButton("Try Again")
            try_again_btn.setObjectName("tryAgainBtn")
            try_again_btn.clicked.connect(lambda: self.done(self.TRY_AGAIN))
            button_row.addWidget(try_again_btn)

        next_btn = QPushButton("Next Question")
        next_btn.setObjectName("nextBtn")
        next_btn.clicked.connect(lambda: self.done(self.NEXT_QUESTION))
        button_row.addWidget(next_btn)

        layout.addLayout(button_row)

    def _section_title(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet("font-size: 15px; font-weight: bold;")
        return label

    def _wrapped_text(self, text: str) -> QLabel:
        label = QLabel(text or "")
        label.setWordWrap(True)
        label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        label.setStyleSheet("font-size: 14px;")
        return label


__all__ = ['ResultDialog']

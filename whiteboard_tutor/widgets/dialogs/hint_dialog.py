"""
Hint Dialog
"""
from PyQt6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton, QScrollArea
from PyQt6.QtCore import Qt


class HintDialog(QDialog):
    """Shows a generated hint"""

    WIDTH = 400

    def __init__(self, hint: str, parent=None):
        super().__init__(parent)

        self.setWindowTitle("Hint")
        self.setMinimumWidth(self.WIDTH)
        self.setModal(True)
        self.setStyleSheet("""
            QDialog { background-color: #ffffff; }
            QPushButton {
                background-color: #6366f1;
                color: #ffffff;
                border: none;
                border-radius: 10px;
                padding: 12px;
                font-weight: bold;
            }
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 16)
        layout.setSpacing(12)

        header = QLabel("Hint")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setStyleSheet(
            "background-color: #fbbf24; color: #92400e; font-size: 20px;"
            "font-weight: bold; padding: 16px;"
        )
        layout.addWidget(header)

        text = QLabel(hint)
        text.setWordWrap(True)
        text.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        text.setStyleSheet("color: #1f2937; font-size: 14px; padding: 0 20px;")

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(text)
        scroll.setStyleSheet("QScrollArea { border: none; background: #ffffff; }")
        layout.addWidget(scroll, 1)

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        layout.addWidget(close_btn)
        layout.setAlignment(close_btn, Qt.AlignmentFlag.AlignHCenter)


__all__ = ['HintDialog']

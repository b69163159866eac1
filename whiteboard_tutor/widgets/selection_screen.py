"""
SelectionScreen - choose subject and class before practising
"""

from typing import Dict, Optional
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QButtonGroup, QMessageBox
)
from PyQt6.QtCore import pyqtSignal, Qt

from ..config import Config
from ..events.event_bus import get_event_bus


class SelectionScreen(QWidget):
    """Subject and class picker"""

    start_requested = pyqtSignal(str, int)  # subject, class_level

    OPTION_STYLE = """
        QPushButton { background: #ffffff; color: #1f2937; border: 2px solid #e5e7eb;
                      border-radius: 10px; padding: 14px; font-size: 15px; font-weight: 600; }
        QPushButton:checked { background: #6366f1; color: #ffffff; border-color: #6366f1; }
        QPushButton:disabled { background: #f3f4f6; color: #9ca3af; }
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._event_bus = get_event_bus()
        self._subject_buttons: Dict[str, QPushButton] = {}
        self._class_buttons: Dict[int, QPushButton] = {}

        self._build_ui()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        title = QLabel(Config.APP_NAME)
        title.setStyleSheet("font-size: 24px; font-weight: bold; color: #1f2937;")
        layout.addWidget(title)

        # Subjects
        layout.addWidget(self._section_title("Select Subject"))
        self._subject_group = QButtonGroup(self)
        self._subject_group.setExclusive(True)
        subject_row = QHBoxLayout()
        for subject in Config.SUBJECTS:
            active = Config.is_subject_active(subject)
            btn = QPushButton(subject if active else f"{subject}\nComing Soon")
            btn.setCheckable(True)
            btn.setEnabled(active)
            btn.setStyleSheet(self.OPTION_STYLE)
            self._subject_group.addButton(btn)
            self._subject_buttons[subject] = btn
            subject_row.addWidget(btn)
        layout.addLayout(subject_row)

        # Classes
        layout.addWidget(self._section_title("Select Class"))
        self._class_group = QButtonGroup(self)
        self._class_group.setExclusive(True)
        class_row = QHBoxLayout()
        for class_level in Config.CLASS_LEVELS:
            btn = QPushButton(f"Class {class_level}")
            btn.setCheckable(True)
            btn.setStyleSheet(self.OPTION_STYLE)
            self._class_group.addButton(btn)
            self._class_buttons[class_level] = btn
            class_row.addWidget(btn)
        layout.addLayout(class_row)

        layout.addStretch()

        start_btn = QPushButton("Start Practice")
        start_btn.setStyleSheet("""
            QPushButton { background: #6366f1; color: #ffffff; border: none;
                          border-radius: 12px; padding: 16px; font-size: 17px; font-weight: bold; }
            QPushButton:hover { background: #4f46e5; }
        """)
        start_btn.clicked.connect(self._on_start_clicked)
        layout.addWidget(start_btn)

    def _section_title(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet("font-size: 17px; font-weight: 600; color: #374151;")
        return label

    # ==================== Selection ====================

    @property
    def selected_subject(self) -> Optional[str]:
        for subject, btn in self._subject_buttons.items():
            if btn.isChecked():
                return subject
        return None

    @property
    def selected_class(self) -> Optional[int]:
        for class_level, btn in self._class_buttons.items():
            if btn.isChecked():
                return class_level
        return None

    def _on_start_clicked(self):
        subject = self.selected_subject
        class_level = self.selected_class

        if not subject or class_level is None:
            QMessageBox.warning(
                self,
                "Incomplete Selection",
                "Please select both subject and class to continue."
            )
            return

        self._event_bus.set_selection(subject, class_level)
        self.start_requested.emit(subject, class_level)


__all__ = ['SelectionScreen']

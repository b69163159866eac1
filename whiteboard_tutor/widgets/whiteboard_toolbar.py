"""
Whiteboard Toolbar Widget

Single-row toolbar for the whiteboard with:
- Mode selection (draw, erase)
- Scroll mode toggle
- Clear button
"""

from typing import Dict, Optional
from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QPushButton, QFrame, QButtonGroup, QLabel
)
from PyQt6.QtCore import pyqtSignal

from ..core.input_session import Mode


class WhiteboardToolbar(QWidget):
    """Single-row toolbar for whiteboard controls."""

    # Signals
    mode_changed = pyqtSignal(object)  # Mode
    scroll_toggled = pyqtSignal(bool)
    clear_clicked = pyqtSignal()

    # Mode definitions: (label, Mode, tooltip)
    MODES = [
        ("Draw", Mode.DRAW, "Draw with the pen (D)"),
        ("Erase", Mode.ERASE, "Erase strokes you touch (E)"),
    ]

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._mode_buttons: Dict[Mode, QPushButton] = {}
        self._current_mode = Mode.DRAW

        self._setup_ui()
        self._connect_signals()

        self._mode_buttons[Mode.DRAW].setChecked(True)

    def _setup_ui(self):
        """Build the single-row toolbar UI."""
        self.setFixedHeight(44)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 4, 0, 4)
        layout.setSpacing(6)

        # Button styles
        self._tool_btn_style = """
            QPushButton { background: #f3f4f6; color: #1f2937; border: 1px solid #d1d5db;
                          border-radius: 8px; padding: 6px 14px; font-weight: 600; }
            QPushButton:hover { background: #e5e7eb; }
            QPushButton:checked { background: #6366f1; color: #ffffff; border-color: #6366f1; }
        """

        # Mode button group (exclusive selection)
        self._mode_group = QButtonGroup(self)
        self._mode_group.setExclusive(True)

        for label, mode, tooltip in self.MODES:
            btn = self._create_checkable_button(label, tooltip)
            self._mode_group.addButton(btn)
            self._mode_buttons[mode] = btn
            layout.addWidget(btn)

        layout.addWidget(self._create_separator())

        # Scroll toggle (independent of mode)
        self._scroll_btn = self._create_checkable_button("Scroll", "Scroll the board instead of drawing (S)")
        layout.addWidget(self._scroll_btn)

        layout.addStretch()

        self._hint_label = QLabel("Draw your solution below")
        self._hint_label.setStyleSheet("color: #6b7280; font-size: 12px; font-style: italic;")
        layout.addWidget(self._hint_label)

        # Clear button
        self._clear_btn = QPushButton("Clear")
        self._clear_btn.setToolTip("Clear the whole board")
        clear_style = """
            QPushButton { background: #ef4444; color: #ffffff; border: none;
                          border-radius: 8px; padding: 6px 14px; font-weight: 600; }
            QPushButton:hover { background: #dc2626; }
        """
        self._clear_btn.setStyleSheet(clear_style)
        layout.addWidget(self._clear_btn)

    def _create_checkable_button(self, label: str, tooltip: str) -> QPushButton:
        """Create a checkable toolbar button."""
        btn = QPushButton(label)
        btn.setCheckable(True)
        btn.setToolTip(tooltip)
        btn.setStyleSheet(self._tool_btn_style)
        return btn

    def _create_separator(self) -> QFrame:
        """Create a vertical separator."""
        sep = QFrame()
        sep.setFrameShape(QFrame.Shape.VLine)
        sep.setStyleSheet("background: #d1d5db; max-width: 1px;")
        return sep

    def _connect_signals(self):
        """Connect internal signals."""
        for mode, btn in self._mode_buttons.items():
            btn.clicked.connect(lambda checked, m=mode: self._on_mode_clicked(m))

        self._scroll_btn.toggled.connect(self._on_scroll_toggled)
        self._clear_btn.clicked.connect(self.clear_clicked.emit)

    def _on_mode_clicked(self, mode: Mode):
        """Handle mode button click."""
        if mode == self._current_mode:
            return
        self._current_mode = mode
        self.mode_changed.emit(mode)

    def _on_scroll_toggled(self, checked: bool):
        self._hint_label.setText("Scrolling - drag to move" if checked else "Draw your solution below")
        self.scroll_toggled.emit(checked)

    # ==================== PUBLIC API ====================

    @property
    def current_mode(self) -> Mode:
        """Get the currently selected mode."""
        return self._current_mode

    @property
    def scroll_enabled(self) -> bool:
        return self._scroll_btn.isChecked()

    def set_mode(self, mode: Mode):
        """Set the active mode programmatically (emits mode_changed)."""
        if mode in self._mode_buttons:
            self._mode_buttons[mode].setChecked(True)
            self._on_mode_clicked(mode)

    def set_scroll_enabled(self, enabled: bool):
        """Set the scroll toggle programmatically (emits scroll_toggled)."""
        self._scroll_btn.setChecked(enabled)


__all__ = ['WhiteboardToolbar']

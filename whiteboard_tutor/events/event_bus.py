"""
EventBus - Central event system for application-wide state management

Pattern: Observer/Publisher-Subscriber
"""

from PyQt6.QtCore import QObject, pyqtSignal
from typing import Optional, Tuple


class EventBus(QObject):
    """
    Central event bus for decoupled communication between components

    Usage:
        event_bus = get_event_bus()
        event_bus.mode_changed.connect(some_handler)
        event_bus.set_mode("erase")
    """

    VALID_MODES = ("draw", "erase")

    # Selection events
    selection_changed = pyqtSignal(str, int)  # subject, class_level

    # Question events
    question_changed = pyqtSignal(str)  # question text

    # Whiteboard events
    mode_changed = pyqtSignal(str)  # "draw" or "erase"
    scroll_mode_changed = pyqtSignal(bool)  # enabled/disabled
    stroke_count_changed = pyqtSignal(int)  # committed strokes on the board

    # Loading state events
    loading_started = pyqtSignal(str)  # operation_name
    loading_finished = pyqtSignal(str)  # operation_name

    # Error events
    error_occurred = pyqtSignal(str, str)  # error_type, error_message

    def __init__(self):
        super().__init__()

        # State storage
        self._subject: Optional[str] = None
        self._class_level: Optional[int] = None
        self._question: str = ""
        self._mode: str = "draw"
        self._scroll_mode: bool = False
        self._stroke_count: int = 0

    # Getters (read current state)

    def get_selection(self) -> Tuple[Optional[str], Optional[int]]:
        """Get (subject, class_level) currently selected"""
        return self._subject, self._class_level

    def get_question(self) -> str:
        """Get the question currently shown"""
        return self._question

    def get_mode(self) -> str:
        """Get current whiteboard mode ('draw' or 'erase')"""
        return self._mode

    def is_scroll_mode(self) -> bool:
        """Check if scroll mode is active"""
        return self._scroll_mode

    def get_stroke_count(self) -> int:
        """Get number of committed strokes on the board"""
        return self._stroke_count

    # Setters (update state and emit signals)

    def set_selection(self, subject: str, class_level: int):
        """
        Set subject and class chosen on the selection screen

        Args:
            subject: Subject name, e.g. "Maths"
            class_level: Class number, e.g. 9
        """
        if (self._subject, self._class_level) != (subject, class_level):
            self._subject = subject
            self._class_level = class_level
            self.selection_changed.emit(subject, class_level)

    def set_question(self, question: str):
        """Set the question currently shown"""
        if self._question != question:
            self._question = question
            self.question_changed.emit(question)

    def set_mode(self, mode: str):
        """
        Set whiteboard mode

        Args:
            mode: "draw" or "erase"
        """
        if mode not in self.VALID_MODES:
            raise ValueError(f"Invalid whiteboard mode: {mode}")

        if self._mode != mode:
            self._mode = mode
            self.mode_changed.emit(mode)

    def set_scroll_mode(self, enabled: bool):
        """Set scroll mode state"""
        if self._scroll_mode != enabled:
            self._scroll_mode = enabled
            self.scroll_mode_changed.emit(enabled)

    def set_stroke_count(self, count: int):
        """Set number of committed strokes"""
        if self._stroke_count != count:
            self._stroke_count = count
            self.stroke_count_changed.emit(count)

    # Convenience methods

    def report_error(self, error_type: str, message: str):
        """
        Report an error to the UI

        Args:
            error_type: Type of error (e.g., "question", "hint", "verify", "capture")
            message: Human-readable error message
        """
        self.error_occurred.emit(error_type, message)

    def start_loading(self, operation: str):
        """Signal that a long operation has started"""
        self.loading_started.emit(operation)

    def finish_loading(self, operation: str):
        """Signal that a long operation has finished"""
        self.loading_finished.emit(operation)


# Singleton instance (lazy initialization)
_event_bus_instance: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """
    Get global EventBus singleton instance

    Returns:
        Global EventBus instance
    """
    global _event_bus_instance
    if _event_bus_instance is None:
        _event_bus_instance = EventBus()
    return _event_bus_instance


# Export
__all__ = ['EventBus', 'get_event_bus']

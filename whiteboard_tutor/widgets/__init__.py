"""UI Widgets for Whiteboard Tutor"""

from .main_window import MainWindow
from .selection_screen import SelectionScreen
from .question_screen import QuestionScreen
from .whiteboard_view import WhiteboardView
from .whiteboard_canvas import WhiteboardCanvas
from .whiteboard_toolbar import WhiteboardToolbar

__all__ = [
    'MainWindow',
    'SelectionScreen',
    'QuestionScreen',
    'WhiteboardView',
    'WhiteboardCanvas',
    'WhiteboardToolbar',
]

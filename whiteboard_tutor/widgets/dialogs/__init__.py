"""
Dialog widgets for Whiteboard Tutor
"""

from .result_dialog import ResultDialog
from .hint_dialog import HintDialog

__all__ = ['ResultDialog', 'HintDialog']

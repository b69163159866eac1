"""
AITask - run one generative AI call off the UI thread

Pattern: QRunnable worker + QObject signals, started on QThreadPool
"""

import time
from typing import Any, Callable

from PyQt6.QtCore import QObject, QRunnable, pyqtSignal

from .gemini_service import AIServiceError


class AITaskSignals(QObject):
    """Signals for AITask"""

    succeeded = pyqtSignal(str, object, float)  # operation, result, elapsed_ms
    failed = pyqtSignal(str, str)  # operation, error_message


class AITask(QRunnable):
    """
    Background task wrapping one GeminiService call

    Usage:
        task = AITask('question', service.generate_question, 'Maths', 9)
        task.signals.succeeded.connect(on_done)
        task.signals.failed.connect(on_error)
        QThreadPool.globalInstance().start(task)
    """

    def __init__(self, operation: str, func: Callable[..., Any], *args, **kwargs):
        super().__init__()
        self.operation = operation
        self.func = func
        self.args = args
        self.kwargs = kwargs
        self.signals = AITaskSignals()
        self.start_time = time.time()

    def run(self):
        """Execute the call and report the outcome"""
        try:
            result = self.func(*self.args, **self.kwargs)
        except AIServiceError as e:
            self.signals.failed.emit(self.operation, str(e))
            return
        except Exception as e:
            self.signals.failed.emit(self.operation, f"Unexpected error: {e}")
            return

        elapsed_ms = (time.time() - self.start_time) * 1000
        self.signals.succeeded.emit(self.operation, result, elapsed_ms)


__all__ = ['AITask', 'AITaskSignals']

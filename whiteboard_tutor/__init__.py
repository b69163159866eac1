"""
Whiteboard Tutor

Practise questions by working them out on a touch whiteboard, with hints and
answer checking from a generative AI model.
"""

__version__ = "1.0.0"

from .config import Config
from .events.event_bus import EventBus, get_event_bus

__all__ = [
    'Config',
    'EventBus',
    'get_event_bus',
]

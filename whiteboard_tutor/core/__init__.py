"""
Whiteboard core: stroke model, erase hit-test, input session state machine
and scroll coordination. No Qt dependency.
"""

from .stroke_model import Point, Stroke, ActiveStroke, PathCollection
from .hit_test import bounding_box, stroke_hit, strokes_hit
from .scroll_coordinator import ScrollState, SurfaceScrollCoordinator
from .input_session import (
    Mode, Idle, Drawing, Erasing, Panning, SessionState, InputSessionController
)

__all__ = [
    'Point',
    'Stroke',
    'ActiveStroke',
    'PathCollection',
    'bounding_box',
    'stroke_hit',
    'strokes_hit',
    'ScrollState',
    'SurfaceScrollCoordinator',
    'Mode',
    'Idle',
    'Drawing',
    'Erasing',
    'Panning',
    'SessionState',
    'InputSessionController',
]

"""Shared pytest fixtures"""

import os

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from whiteboard_tutor.config import Config
from whiteboard_tutor.core import PathCollection, Point, Stroke


@pytest.fixture(scope="session")
def qapp():
    """Application instance shared by QObject and widget tests"""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def user_dir(tmp_path, monkeypatch):
    """Point Config's user data dir at a temporary folder"""
    monkeypatch.setattr(Config, 'get_user_data_dir', classmethod(lambda cls: tmp_path))
    monkeypatch.delenv(Config.API_KEY_ENV_VAR, raising=False)
    return tmp_path


def make_stroke(*coords, color="#000000", width=3):
    return Stroke(points=tuple(Point(x, y) for x, y in coords), color=color, stroke_width=width)


@pytest.fixture
def square_stroke():
    """Stroke whose bounding box is [0,0]-[10,10]"""
    return make_stroke((0, 0), (10, 0), (10, 10), (0, 10))


@pytest.fixture
def paths():
    return PathCollection()

import pytest

from whiteboard_tutor.events.event_bus import EventBus
from whiteboard_tutor.widgets.main_window import MainWindow


class FakeService:
    def generate_question(self, subject, class_level):
        return "What is 2 + 2?"


@pytest.fixture
def window(qapp):
    bus = EventBus()
    window = MainWindow(service=FakeService(), event_bus=bus)
    yield window, bus
    window.deleteLater()


def test_status_bar_shows_initial_board_state(window):
    window, bus = window
    assert window.board_status_text == "Draw  |  0 strokes"


def test_status_bar_follows_board_state(window):
    window, bus = window

    bus.set_selection("Maths", 9)
    bus.set_mode("erase")
    bus.set_scroll_mode(True)
    bus.set_stroke_count(1)

    assert window.board_status_text == "Maths • Class 9  |  Erase  |  Scrolling  |  1 stroke"

    bus.set_scroll_mode(False)
    bus.set_stroke_count(3)
    assert window.board_status_text == "Maths • Class 9  |  Erase  |  3 strokes"


def test_new_question_is_announced(window):
    window, bus = window
    bus.set_question("What is 2 + 2?")
    assert window.statusBar().currentMessage() == "New question ready"

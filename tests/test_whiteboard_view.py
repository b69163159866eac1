from PyQt6.QtCore import Qt

from whiteboard_tutor.core import PathCollection, Point
from whiteboard_tutor.widgets.whiteboard_view import WhiteboardView


def make_view(qapp, paths):
    view = WhiteboardView(paths)
    view.resize(300, 400)
    view.show()
    qapp.processEvents()
    return view


def test_first_layout_gives_two_viewports_of_board(qapp):
    view = make_view(qapp, PathCollection())

    viewport_height = view.viewport().height()
    assert viewport_height > 0
    assert view.coordinator.content_height == 2 * viewport_height
    assert view.canvas.height() == 2 * viewport_height
    view.close()


def test_scroll_mode_makes_canvas_transparent_and_closes_stroke(qapp):
    paths = PathCollection()
    view = make_view(qapp, paths)
    canvas = view.canvas

    view.controller.on_touch_start(Point(10, 10))
    view.controller.on_touch_move(Point(40, 40))
    view.set_scroll_mode(True)

    assert canvas.testAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
    assert not canvas.input_enabled
    assert view.controller.is_idle
    assert len(paths) == 1

    view.set_scroll_mode(False)
    assert not canvas.testAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
    assert canvas.input_enabled
    view.close()


def test_scrolling_to_bottom_grows_board(qapp):
    view = make_view(qapp, PathCollection())
    heights = []
    view.content_height_changed.connect(heights.append)

    view.set_scroll_mode(True)
    qapp.processEvents()
    scroll_bar = view.verticalScrollBar()
    assert scroll_bar.maximum() > 0

    before = view.coordinator.content_height
    scroll_bar.setValue(scroll_bar.maximum())

    assert view.coordinator.content_height > before
    assert heights and heights[-1] == int(view.coordinator.content_height)
    assert view.canvas.height() == int(view.coordinator.content_height)
    view.close()


def test_scroll_bar_ignored_while_drawing(qapp):
    view = make_view(qapp, PathCollection())
    before = view.coordinator.content_height

    view.verticalScrollBar().valueChanged.emit(10_000)

    assert view.coordinator.content_height == before
    view.close()

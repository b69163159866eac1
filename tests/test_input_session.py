import pytest

from whiteboard_tutor.core import (
    Drawing, Erasing, Idle, InputSessionController, Mode, Panning, PathCollection,
    Point, SurfaceScrollCoordinator,
)

from conftest import make_stroke


@pytest.fixture
def changes():
    return []


@pytest.fixture
def controller(paths, changes):
    return InputSessionController(
        paths, on_change=lambda strokes, active: changes.append((strokes, active))
    )


def draw(controller, *coords):
    first, *rest = coords
    controller.on_touch_start(Point(*first))
    for x, y in rest:
        controller.on_touch_move(Point(x, y))
    controller.on_touch_end()


# ==================== Drawing ====================

def test_draw_commits_one_stroke(controller, paths):
    controller.on_touch_start(Point(10, 10))
    controller.on_touch_move(Point(20, 10))
    controller.on_touch_move(Point(20, 20))
    controller.on_touch_end()

    assert len(paths) == 1
    assert paths[0].points == (Point(10, 10), Point(20, 10), Point(20, 20))
    assert isinstance(controller.state, Idle)


def test_stroke_uses_controller_ink(paths):
    controller = InputSessionController(paths, color="#ff0000", stroke_width=6)
    draw(controller, (0, 0), (1, 1))

    assert paths[0].color == "#ff0000"
    assert paths[0].stroke_width == 6


def test_moves_are_appended_in_order(controller):
    moves = [Point(i, i * 2) for i in range(1, 30)]
    controller.on_touch_start(Point(0, 0))
    for point in moves:
        controller.on_touch_move(point)

    assert controller.active_stroke.points == (Point(0, 0), *moves)


def test_in_progress_stroke_not_in_paths(controller, paths):
    controller.on_touch_start(Point(0, 0))
    controller.on_touch_move(Point(5, 5))

    assert isinstance(controller.state, Drawing)
    assert len(paths) == 0


def test_end_twice_commits_once(controller, paths):
    controller.on_touch_start(Point(0, 0))
    for i in range(4):
        controller.on_touch_move(Point(i, i))
    controller.on_touch_end()
    controller.on_touch_end()

    assert len(paths) == 1
    assert len(paths[0]) == 5


def test_tap_commits_dot(controller, paths):
    controller.on_touch_start(Point(7, 7))
    controller.on_touch_end()

    assert len(paths) == 1
    assert paths[0].is_dot


def test_cancel_commits_open_stroke(controller, paths):
    controller.on_touch_start(Point(0, 0))
    controller.on_touch_move(Point(3, 3))
    controller.on_touch_cancel()

    assert len(paths) == 1
    assert controller.is_idle


def test_start_while_drawing_commits_previous(controller, paths):
    controller.on_touch_start(Point(0, 0))
    controller.on_touch_move(Point(1, 1))
    controller.on_touch_start(Point(50, 50))

    assert len(paths) == 1
    assert paths[0].points == (Point(0, 0), Point(1, 1))
    assert controller.active_stroke.points == (Point(50, 50),)


def test_move_and_end_while_idle_do_nothing(controller, paths, changes):
    controller.on_touch_move(Point(1, 1))
    controller.on_touch_end()

    assert len(paths) == 0
    assert changes == []


def test_observer_sees_active_stroke(controller, changes):
    controller.on_touch_start(Point(0, 0))
    controller.on_touch_move(Point(1, 0))

    strokes, active = changes[-1]
    assert strokes == ()
    assert active.points == (Point(0, 0), Point(1, 0))

    controller.on_touch_end()
    strokes, active = changes[-1]
    assert len(strokes) == 1
    assert active is None


# ==================== Erasing ====================

def test_erase_removes_nearby_stroke(controller, paths, square_stroke):
    paths.append(square_stroke)
    controller.mode = Mode.ERASE

    controller.on_touch_start(Point(12, 12))

    assert len(paths) == 0
    assert isinstance(controller.state, Erasing)


def test_erase_keeps_far_stroke(controller, paths, square_stroke):
    paths.append(square_stroke)
    controller.mode = Mode.ERASE

    controller.on_touch_start(Point(200, 200))
    controller.on_touch_end()

    assert list(paths) == [square_stroke]


def test_erase_drag_removes_along_path(controller, paths):
    left = make_stroke((0, 0), (10, 10))
    right = make_stroke((300, 0), (310, 10))
    middle = make_stroke((150, 300), (160, 310))
    for stroke in (left, right, middle):
        paths.append(stroke)
    controller.mode = Mode.ERASE

    controller.on_touch_start(Point(5, 5))
    assert list(paths) == [right, middle]
    controller.on_touch_move(Point(305, 5))
    controller.on_touch_end()

    assert list(paths) == [middle]


def test_erase_removes_every_matching_stroke(controller, paths):
    for i in range(3):
        paths.append(make_stroke((i, i), (i + 5, i + 5)))
    controller.mode = Mode.ERASE

    controller.on_touch_start(Point(4, 4))

    assert len(paths) == 0


def test_erase_never_grows_paths(controller, paths):
    for i in range(10):
        paths.append(make_stroke((i * 40, 0), (i * 40 + 5, 5)))
    controller.mode = Mode.ERASE

    counts = [len(paths)]
    controller.on_touch_start(Point(0, 0))
    counts.append(len(paths))
    for x in range(0, 400, 25):
        controller.on_touch_move(Point(x, 0))
        counts.append(len(paths))
    controller.on_touch_end()

    assert counts == sorted(counts, reverse=True)


def test_per_touch_mode_overrides_default(controller, paths, square_stroke):
    paths.append(square_stroke)

    controller.on_touch_start(Point(5, 5), Mode.ERASE)

    assert len(paths) == 0


def test_move_in_erase_session_never_draws(controller, paths):
    controller.mode = Mode.ERASE
    controller.on_touch_start(Point(0, 0))
    controller.on_touch_move(Point(5, 5))
    controller.on_touch_end()

    assert len(paths) == 0


# ==================== Scroll gating ====================

def test_scroll_mode_blocks_drawing_and_erasing(paths, square_stroke):
    coordinator = SurfaceScrollCoordinator(viewport_height=500)
    controller = InputSessionController(paths, coordinator)
    paths.append(square_stroke)
    coordinator.set_scroll_mode(True)

    controller.on_touch_start(Point(5, 5))
    assert isinstance(controller.state, Panning)
    controller.on_touch_move(Point(6, 6))
    controller.on_touch_end()

    controller.mode = Mode.ERASE
    controller.on_touch_start(Point(5, 5))
    controller.on_touch_move(Point(5, 6))
    controller.on_touch_cancel()

    assert list(paths) == [square_stroke]


def test_scroll_mode_switched_on_mid_erase_stops_erasing(paths, square_stroke):
    coordinator = SurfaceScrollCoordinator(viewport_height=500)
    controller = InputSessionController(paths, coordinator)
    paths.append(square_stroke)
    controller.mode = Mode.ERASE

    controller.on_touch_start(Point(300, 300))
    coordinator.set_scroll_mode(True)
    controller.on_touch_move(Point(5, 5))

    assert list(paths) == [square_stroke]
    assert isinstance(controller.state, Panning)
    controller.on_touch_end()
    assert controller.is_idle


def test_scroll_mode_switched_on_mid_draw_commits_nothing(paths, changes):
    coordinator = SurfaceScrollCoordinator(viewport_height=500)
    controller = InputSessionController(
        paths, coordinator, on_change=lambda strokes, active: changes.append(active)
    )

    controller.on_touch_start(Point(0, 0))
    controller.on_touch_move(Point(1, 1))
    coordinator.set_scroll_mode(True)
    controller.on_touch_move(Point(2, 2))
    controller.on_touch_end()

    assert len(paths) == 0
    assert controller.active_stroke is None
    assert changes[-1] is None


def test_scroll_mode_switched_on_mid_draw_then_cancel_commits_nothing(paths):
    coordinator = SurfaceScrollCoordinator(viewport_height=500)
    controller = InputSessionController(paths, coordinator)

    controller.on_touch_start(Point(0, 0))
    coordinator.set_scroll_mode(True)
    controller.on_touch_cancel()
    controller.on_touch_start(Point(3, 3))

    assert len(paths) == 0


def test_close_session_keeps_open_ink(paths):
    coordinator = SurfaceScrollCoordinator(viewport_height=500)
    controller = InputSessionController(paths, coordinator)

    controller.on_touch_start(Point(0, 0))
    controller.on_touch_move(Point(4, 4))
    controller.close_session()
    coordinator.set_scroll_mode(True)
    controller.on_touch_move(Point(8, 8))
    controller.on_touch_end()

    assert len(paths) == 1
    assert paths[0].points == (Point(0, 0), Point(4, 4))


def test_drawing_resumes_after_scroll_mode_off(paths):
    coordinator = SurfaceScrollCoordinator(viewport_height=500)
    controller = InputSessionController(paths, coordinator)
    coordinator.set_scroll_mode(True)
    draw(controller, (0, 0), (1, 1))
    coordinator.set_scroll_mode(False)
    draw(controller, (0, 0), (1, 1))

    assert len(paths) == 1


# ==================== Clear ====================

def test_clear_mid_drawing_discards_stroke(controller, paths, square_stroke):
    paths.append(square_stroke)
    controller.on_touch_start(Point(0, 0))
    controller.on_touch_move(Point(5, 5))

    controller.clear()

    assert len(paths) == 0
    assert controller.is_idle
    controller.on_touch_end()
    assert len(paths) == 0


def test_clear_notifies_observer(controller, changes):
    controller.clear()
    assert changes[-1] == ((), None)


def test_invalid_mode_rejected(controller):
    with pytest.raises(ValueError):
        controller.mode = "pan"

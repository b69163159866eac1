import math

import pytest

from whiteboard_tutor.core import (
    InputSessionController, Mode, Point, Stroke, bounding_box, stroke_hit, strokes_hit,
)

from conftest import make_stroke


def test_bounding_box(square_stroke):
    assert bounding_box(square_stroke) == (0, 0, 10, 10)


def test_bounding_box_rejects_empty_stroke():
    with pytest.raises(ValueError):
        bounding_box(Stroke(points=()))


def test_erase_inside_expanded_box(square_stroke):
    assert stroke_hit(Point(12, 12), square_stroke, threshold=15)


def test_erase_far_away_misses(square_stroke):
    assert not stroke_hit(Point(200, 200), square_stroke, threshold=15)


def test_threshold_boundary_is_inclusive(square_stroke):
    assert stroke_hit(Point(25, 25), square_stroke, threshold=15)
    assert stroke_hit(Point(-15, 5), square_stroke, threshold=15)
    assert not stroke_hit(Point(25.01, 5), square_stroke, threshold=15)


def test_default_threshold_is_fifteen(square_stroke):
    assert stroke_hit(Point(25, 5), square_stroke)
    assert not stroke_hit(Point(26, 5), square_stroke)


def test_single_point_stroke_hit():
    dot = make_stroke((50, 50))
    assert stroke_hit(Point(60, 40), dot)
    assert not stroke_hit(Point(70, 50), dot)


def test_diagonal_stroke_matches_anywhere_in_box():
    diagonal = make_stroke((0, 0), (100, 100))
    # Far from the ink but inside the bounding box
    assert stroke_hit(Point(95, 5), diagonal)


def test_empty_stroke_never_matches():
    assert not stroke_hit(Point(0, 0), Stroke(points=()))


def test_non_finite_stroke_never_matches():
    broken = make_stroke((0, 0), (math.nan, 5))
    assert not stroke_hit(Point(0, 0), broken)


def test_overflowing_stroke_never_matches():
    huge = Stroke(points=(Point(10 ** 400, 0),))
    assert not stroke_hit(Point(0, 0), huge)


def test_overflowing_stroke_is_kept_by_eraser(paths):
    huge = Stroke(points=(Point(10 ** 400, 0),))
    paths.append(huge)
    controller = InputSessionController(paths)
    controller.mode = Mode.ERASE

    controller.on_touch_start(Point(0, 0))
    controller.on_touch_move(Point(1, 1))

    assert list(paths) == [huge]


def test_strokes_hit_returns_indices(square_stroke):
    far = make_stroke((500, 500), (510, 510))
    assert strokes_hit(Point(5, 5), [far, square_stroke, far]) == [1]

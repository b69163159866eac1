"""
Stroke renderer for painting whiteboard strokes.

Converts Stroke / ActiveStroke values into QPainterPath objects and paints
them with round caps and joins.
"""

from typing import Iterable, Optional, Sequence, Union

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QPainter, QPainterPath, QPen, QColor

from ..core.stroke_model import ActiveStroke, Point, Stroke

StrokeLike = Union[Stroke, ActiveStroke]


def build_painter_path(points: Sequence[Point]) -> QPainterPath:
    """
    Build a polyline path through points.

    Args:
        points: Ordered stroke samples

    Returns:
        QPainterPath (empty if there are no points)
    """
    path = QPainterPath()
    if not points:
        return path
    first = points[0]
    path.moveTo(QPointF(first.x, first.y))
    for point in points[1:]:
        path.lineTo(QPointF(point.x, point.y))
    return path


def create_pen(color: str, width: float) -> QPen:
    """Create a round-capped ink pen."""
    pen = QPen(QColor(color), width)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    return pen


def paint_stroke(painter: QPainter, stroke: StrokeLike):
    """Paint one stroke; a single-sample stroke is painted as a dot."""
    points = stroke.points
    if not points:
        return
    painter.setPen(create_pen(stroke.color, stroke.stroke_width))
    if len(points) == 1:
        painter.drawPoint(QPointF(points[0].x, points[0].y))
    else:
        painter.drawPath(build_painter_path(points))


def paint_strokes(painter: QPainter, strokes: Iterable[Stroke],
                  active_stroke: Optional[ActiveStroke] = None):
    """Paint committed strokes in z-order, then the in-progress stroke on top."""
    painter.setBrush(Qt.BrushStyle.NoBrush)
    for stroke in strokes:
        paint_stroke(painter, stroke)
    if active_stroke is not None:
        paint_stroke(painter, active_stroke)


__all__ = ['build_painter_path', 'create_pen', 'paint_stroke', 'paint_strokes']

"""
Stroke model for the whiteboard.

A stroke is one continuous freehand ink path from touch-down to touch-up.
Committed strokes are immutable values kept in a PathCollection whose order
is the paint order (later strokes on top).
"""

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Tuple

from ..config import Config


@dataclass(frozen=True)
class Point:
    """A sampled location in the surface's local coordinate space."""
    x: float
    y: float


@dataclass(frozen=True)
class Stroke:
    """A committed freehand stroke."""
    points: Tuple[Point, ...]
    color: str = Config.DEFAULT_STROKE_COLOR
    stroke_width: float = Config.DEFAULT_STROKE_WIDTH

    def __post_init__(self):
        if self.stroke_width <= 0:
            raise ValueError(f"Stroke width must be positive, got {self.stroke_width}")
        # Accept any iterable of points but always store a tuple
        if not isinstance(self.points, tuple):
            object.__setattr__(self, 'points', tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_dot(self) -> bool:
        """True for a tap that never moved (single sample)."""
        return len(self.points) == 1


@dataclass
class ActiveStroke:
    """
    The one stroke being drawn right now.

    Points are append-only: they are never reordered or dropped until the
    stroke is committed with to_stroke().
    """
    color: str = Config.DEFAULT_STROKE_COLOR
    stroke_width: float = Config.DEFAULT_STROKE_WIDTH
    _points: List[Point] = field(default_factory=list)

    @classmethod
    def starting_at(cls, point: Point, color: str, stroke_width: float) -> 'ActiveStroke':
        stroke = cls(color=color, stroke_width=stroke_width)
        stroke.append(point)
        return stroke

    def append(self, point: Point):
        self._points.append(point)

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def to_stroke(self) -> Stroke:
        """Freeze into an immutable committed stroke."""
        return Stroke(points=tuple(self._points), color=self.color, stroke_width=self.stroke_width)


class PathCollection:
    """
    Ordered collection of committed strokes.

    Insertion order is z-order. Strokes have no identity of their own, so
    the only mutations are append, filtered removal and clear.
    """

    def __init__(self, strokes=None):
        self._strokes: List[Stroke] = list(strokes or [])

    def __len__(self) -> int:
        return len(self._strokes)

    def __iter__(self) -> Iterator[Stroke]:
        return iter(self._strokes)

    def __getitem__(self, index: int) -> Stroke:
        return self._strokes[index]

    def __bool__(self) -> bool:
        return bool(self._strokes)

    def __repr__(self) -> str:
        return f"PathCollection({len(self._strokes)} strokes)"

    def append(self, stroke: Stroke):
        """Commit a stroke on top of all others."""
        self._strokes.append(stroke)

    def remove_where(self, predicate: Callable[[Stroke], bool]) -> List[Stroke]:
        """
        Remove every stroke matching predicate.

        Returns:
            The removed strokes, in their original order
        """
        kept: List[Stroke] = []
        removed: List[Stroke] = []
        for stroke in self._strokes:
            (removed if predicate(stroke) else kept).append(stroke)
        if removed:
            self._strokes = kept
        return removed

    def clear(self) -> int:
        """Remove all strokes. Returns how many were removed."""
        count = len(self._strokes)
        self._strokes = []
        return count

    def snapshot(self) -> Tuple[Stroke, ...]:
        """Immutable view handed to the renderer."""
        return tuple(self._strokes)

    def content_bottom(self) -> float:
        """Largest y of any stroke point, or 0 when empty."""
        bottom = 0.0
        for stroke in self._strokes:
            for point in stroke.points:
                if point.y > bottom:
                    bottom = point.y
        return bottom


__all__ = ['Point', 'Stroke', 'ActiveStroke', 'PathCollection']

"""
Eraser hit-testing.

A stroke is "near enough to erase" when the query point lies inside the
stroke's axis-aligned bounding box grown by a fixed margin. This is a coarse
test: a long diagonal stroke matches anywhere inside its box, not only near
its ink.
"""

import logging
from typing import Iterable, List, Tuple

import numpy as np

from ..config import Config
from .stroke_model import Point, Stroke

logger = logging.getLogger(__name__)

BoundingBox = Tuple[float, float, float, float]  # min_x, min_y, max_x, max_y


def bounding_box(stroke: Stroke) -> BoundingBox:
    """
    Compute the bounding box of a stroke's points.

    Raises:
        ValueError: if the stroke has no points or non-finite coordinates
    """
    coords = np.array([(p.x, p.y) for p in stroke.points], dtype=float)
    if coords.size == 0:
        raise ValueError("Stroke has no points")
    if not np.isfinite(coords).all():
        raise ValueError("Stroke has non-finite coordinates")

    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


def stroke_hit(point: Point, stroke: Stroke, threshold: float = Config.ERASE_THRESHOLD) -> bool:
    """
    Check whether point falls inside the stroke's box expanded by threshold.

    Never raises: malformed strokes are reported as not matching.
    """
    try:
        min_x, min_y, max_x, max_y = bounding_box(stroke)
    except (ValueError, TypeError, AttributeError, ArithmeticError) as e:
        logger.debug(f"Skipping stroke in hit-test: {e}")
        return False

    return (min_x - threshold <= point.x <= max_x + threshold
            and min_y - threshold <= point.y <= max_y + threshold)


def strokes_hit(point: Point, strokes: Iterable[Stroke],
                threshold: float = Config.ERASE_THRESHOLD) -> List[int]:
    """Indices of all strokes matched by point."""
    return [i for i, stroke in enumerate(strokes) if stroke_hit(point, stroke, threshold)]


__all__ = ['BoundingBox', 'bounding_box', 'stroke_hit', 'strokes_hit']

"""How two intervals relate: ordering combined with overlap.

Plain ``<``/``>`` is not enough for intervals that may overlap or nest, so
``classify`` answers with one of seven relations (plus ``EMPTY``) seen from
the first interval's point of view. ``IntersectionExt.intersection`` folds
that into the coarse empty/overlap/full answer.

Exact touches are decided by bound kind, not just value: ``[1, 5)`` and
``[5, 10]`` touch at 5 but share no point, so the first is ``LESS``.
"""

import logging
from enum import Enum
from typing import Any

from rangebra.bound import Unordered, compare_ends, compare_starts, reaches
from rangebra.interval import Interval, as_interval
from rangebra.shapes import Shape

logger = logging.getLogger(__name__)


class Intersection(Enum):
    """Coarse intersection of two intervals."""

    EMPTY = "empty"
    OVERLAP = "overlap"
    FULL = "full"

    def is_any(self) -> bool:
        return self is not Intersection.EMPTY


class IntersectionExt(Enum):
    """Relation of one interval to another, from the first one's side."""

    EMPTY = "empty"
    LESS = "less"
    LESS_OVERLAP = "less_overlap"
    WITHIN = "within"
    SAME = "same"
    OVER = "over"
    GREATER_OVERLAP = "greater_overlap"
    GREATER = "greater"

    def intersection(self) -> Intersection:
        return _COARSE[self]

    def is_any(self) -> bool:
        """True if the two intervals share at least one point."""
        return _COARSE[self] is not Intersection.EMPTY

    def is_within(self) -> bool:
        """True if the first interval lies entirely inside the second."""
        return self in (IntersectionExt.WITHIN, IntersectionExt.SAME)

    def mirror(self) -> "IntersectionExt":
        """The same relation seen from the other interval's side."""
        return _MIRROR[self]


_COARSE = {
    IntersectionExt.EMPTY: Intersection.EMPTY,
    IntersectionExt.LESS: Intersection.EMPTY,
    IntersectionExt.LESS_OVERLAP: Intersection.OVERLAP,
    IntersectionExt.WITHIN: Intersection.FULL,
    IntersectionExt.SAME: Intersection.FULL,
    IntersectionExt.OVER: Intersection.FULL,
    IntersectionExt.GREATER_OVERLAP: Intersection.OVERLAP,
    IntersectionExt.GREATER: Intersection.EMPTY,
}

_MIRROR = {
    IntersectionExt.EMPTY: IntersectionExt.EMPTY,
    IntersectionExt.LESS: IntersectionExt.GREATER,
    IntersectionExt.LESS_OVERLAP: IntersectionExt.GREATER_OVERLAP,
    IntersectionExt.WITHIN: IntersectionExt.OVER,
    IntersectionExt.SAME: IntersectionExt.SAME,
    IntersectionExt.OVER: IntersectionExt.WITHIN,
    IntersectionExt.GREATER_OVERLAP: IntersectionExt.LESS_OVERLAP,
    IntersectionExt.GREATER: IntersectionExt.LESS,
}


def classify(
    this: "Interval[Any] | Shape", other: "Interval[Any] | Shape"
) -> IntersectionExt:
    """Classify ``this`` against ``other``.

    Args:
        this: Interval (or native shape) whose point of view is reported
        other: Interval (or native shape) it is compared with

    Returns:
        ``EMPTY`` if either interval is empty or a comparison is unordered,
        otherwise the single relation that holds.

    Example:
        >>> classify(closed_open(3, 10), closed_open(9, 11))
        <IntersectionExt.LESS_OVERLAP: 'less_overlap'>
        >>> classify(closed_open(3, 10), closed_open(10, 11))
        <IntersectionExt.LESS: 'less'>
    """
    a = as_interval(this)
    b = as_interval(other)
    if a.is_empty() or b.is_empty():
        return IntersectionExt.EMPTY

    try:
        ends = compare_ends(a.end, b.end)
        if ends == 0:
            starts = compare_starts(a.start, b.start)
            if starts < 0:
                return IntersectionExt.OVER
            if starts > 0:
                return IntersectionExt.WITHIN
            return IntersectionExt.SAME

        if ends < 0:
            if not reaches(a.end, b.start):
                return IntersectionExt.LESS
            if compare_starts(a.start, b.start) < 0:
                return IntersectionExt.LESS_OVERLAP
            return IntersectionExt.WITHIN

        # a ends beyond b
        if reaches(b.end, a.start):
            if compare_starts(a.start, b.start) <= 0:
                return IntersectionExt.OVER
            return IntersectionExt.GREATER_OVERLAP
        return IntersectionExt.GREATER
    except Unordered:
        logger.debug("classify(%s, %s): unordered endpoints", a, b)
        return IntersectionExt.EMPTY


def does_intersect(
    this: "Interval[Any] | Shape", other: "Interval[Any] | Shape"
) -> bool:
    """True if the two intervals share at least one point."""
    a = as_interval(this)
    b = as_interval(other)
    if a.is_empty() or b.is_empty():
        return False
    try:
        return reaches(a.end, b.start) and reaches(b.end, a.start)
    except Unordered:
        logger.debug("does_intersect(%s, %s): unordered endpoints", a, b)
        return False

"""Set subtraction ``A - B`` over intervals.

Removing ``B`` from ``A`` leaves at most two pieces: the part of ``A`` below
``B``'s start and the part above ``B``'s end. Each piece is ``A`` clipped to a
half-line whose edge is ``B``'s bound with inclusivity flipped: removing
``[5, ...`` leaves ``... 5)``, removing ``(5, ...`` leaves ``... 5]``.

Clipping keeps whichever bound is tighter on each side, so every combination
of included, excluded and unbounded edges on either interval falls out of the
same two comparisons. Pieces that end up empty are dropped.
"""

import logging
from typing import Any, TypeVar

from rangebra.bound import (
    UNBOUNDED,
    Bound,
    Unbounded,
    Unordered,
    compare_ends,
    compare_starts,
    flip,
    reaches,
)
from rangebra.interval import Interval, as_interval
from rangebra.results import NOTHING, BinaryResult, One, from_pieces
from rangebra.shapes import Shape

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _clip(
    interval: Interval[T], start: "Bound[T]", end: "Bound[T]"
) -> Interval[T] | None:
    """Narrow ``interval`` to the given bounds, or None if nothing is left.

    The clipped piece keeps the interval's reversed flag.
    """
    new_start = start if compare_starts(start, interval.start) > 0 else interval.start
    new_end = end if compare_ends(end, interval.end) < 0 else interval.end
    if not reaches(new_end, new_start):
        return None
    return Interval(start=new_start, end=new_end, reversed=interval.reversed)


def subtract(
    this: "Interval[T] | Shape", other: "Interval[Any] | Shape"
) -> BinaryResult[T]:
    """Remove ``other`` from ``this``.

    Args:
        this: Interval (or native shape) to subtract from
        other: Interval (or native shape) to remove

    Returns:
        ``Nothing`` if ``other`` covers ``this``, ``One(this)`` unchanged if
        ``other`` is empty or disjoint, otherwise ``One`` or ``Two`` pieces.
        Unordered endpoints (NaN) also give ``Nothing``.

    Example:
        >>> [str(piece) for piece in subtract(closed(1, 10), point(5))]
        ['[1, 5)', '(5, 10]']
        >>> closed_open(1, 10) - closed_open(5, 10) == One(closed_open(1, 5))
        True
    """
    a = as_interval(this)
    b = as_interval(other)

    # Removing an empty set is a no-op, even where its value lies inside a.
    if b.is_empty():
        return One(a)

    pieces: list[Interval[T]] = []
    try:
        if not isinstance(b.start, Unbounded):
            lower = _clip(a, UNBOUNDED, flip(b.start))
            if lower is not None:
                pieces.append(lower)
        if not isinstance(b.end, Unbounded):
            upper = _clip(a, flip(b.end), UNBOUNDED)
            if upper is not None:
                pieces.append(upper)
    except Unordered:
        logger.debug("subtract(%s, %s): unordered endpoints", a, b)
        return NOTHING

    return from_pieces(pieces)

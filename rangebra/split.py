"""Split a closed range by a closed-open one.

Cutting ``[a, b]`` with ``[x, y)`` keeps what lies below ``x`` as a
closed-open ``[a, x)`` (the cut's start is inclusive, so it is excluded from
the lower piece) and what lies from ``y`` up as a closed ``[y, b]`` (the cut's
end is exclusive, so ``y`` survives). The two pieces therefore have different
shapes, which is why the result is a ``SplitResult`` rather than a
``BinaryResult``.
"""

import logging
from typing import TypeVar

from rangebra.bound import Unordered, partial_cmp
from rangebra.interval import Interval
from rangebra.results import NOTHING, Both, First, Second, SplitResult
from rangebra.shapes import Closed, ClosedOpen

logger = logging.getLogger(__name__)

T = TypeVar("T")


def split(
    whole: Closed[T], cut: ClosedOpen[T]
) -> SplitResult[ClosedOpen[T], Closed[T]]:
    """Split ``whole`` at the boundaries of ``cut``.

    Endpoints are taken exactly as written in the two shapes.

    Returns:
        ``Second(whole)`` when the cut misses it, ``First`` when only the part
        below the cut remains (including a cut starting exactly at ``whole``'s
        end), ``Second`` when only the part above remains, ``Both`` when the
        cut lies inside, ``Nothing`` when the cut covers everything or a
        comparison is unordered.

    Example:
        >>> split(Closed(1, 10), ClosedOpen(5, 9))
        Both(lower=ClosedOpen(start=1, end=5), upper=Closed(start=9, end=10))
        >>> split(Closed(1, 10), ClosedOpen(10, 30))
        First(lower=ClosedOpen(start=1, end=10))
    """
    a, b = whole.start, whole.end
    x, y = cut.start, cut.end
    try:
        # cut lies entirely below
        if partial_cmp(a, y) >= 0:
            return Second(whole)
        bx = partial_cmp(b, x)
        # cut lies entirely above
        if bx < 0:
            return Second(whole)
        # cut starts right at the end: only the end value is removed
        if bx == 0:
            return First(ClosedOpen(a, b))
        ax = partial_cmp(a, x)
        by = partial_cmp(b, y)
    except Unordered:
        logger.debug("split(%r, %r): unordered endpoints", whole, cut)
        return NOTHING

    if ax >= 0:
        if by >= 0:
            return Second(Closed(y, b))
        return NOTHING
    if by >= 0:
        return Both(ClosedOpen(a, x), Closed(y, b))
    return First(ClosedOpen(a, x))


def split_interval(
    whole: Interval[T], cut: "ClosedOpen[T] | Interval[T]"
) -> SplitResult[ClosedOpen[T], Closed[T]]:
    """Split a closed interval by a closed-open cut.

    Both are converted to their native shapes (``to_closed`` and
    ``to_closed_open``) and split as written, so a reversed operand keeps the
    orientation its caller gave it.

    Raises:
        TypeError: If ``whole`` is not ``CLOSED`` or ``cut`` is neither a
            ``ClosedOpen`` nor an interval of kind ``CLOSED_OPEN``
    """
    closed_whole = whole.to_closed()
    if closed_whole is None:
        raise TypeError(
            f"split() needs an interval closed on both ends, got {whole}.\n"
            f"Hint: use subtract() for other shapes: interval - cut"
        )
    if isinstance(cut, Interval):
        cut_shape = cut.to_closed_open()
        if cut_shape is None:
            raise TypeError(
                f"split() needs a closed-open cut [start, end), got {cut}.\n"
                f"Hint: use subtract() for other shapes: interval - cut"
            )
    elif isinstance(cut, ClosedOpen):
        cut_shape = cut
    else:
        raise TypeError(
            f"split() cut must be a ClosedOpen or an Interval, "
            f"got {type(cut).__name__!r}: {cut!r}"
        )
    return split(closed_whole, cut_shape)

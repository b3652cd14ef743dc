"""Next/previous stepping for discrete value types.

``Interval.avoid`` needs to know the value right after (or right before) an
included endpoint. Callers supply that knowledge as a ``Successor``: any object
with ``next`` and ``prev`` methods returning the neighbouring value, or
``None`` when no representable neighbour exists.

Calendar stepping is backed by python-dateutil's relativedelta, so steps such
as "one month" land on real calendar dates.
"""

from datetime import date
from typing import Any, Protocol, TypeVar, override

from dateutil.relativedelta import relativedelta

from rangebra.util import (
    I8_MAX,
    I8_MIN,
    I16_MAX,
    I16_MIN,
    I32_MAX,
    I32_MIN,
    I64_MAX,
    I64_MIN,
    U8_MAX,
    U16_MAX,
    U32_MAX,
    U64_MAX,
)

T = TypeVar("T")
D = TypeVar("D", bound=date)


class Successor(Protocol[T]):
    def next(self, value: T) -> T | None:
        """The value right after ``value``, or None on overflow."""
        ...

    def prev(self, value: T) -> T | None:
        """The value right before ``value``, or None on overflow."""
        ...


class IntegerStep:
    """Step integers by one within optional limits.

    Args:
        minimum: Smallest representable value (None for no limit)
        maximum: Largest representable value (None for no limit)

    Example:
        >>> U8.next(255) is None
        True
        >>> I8.prev(0)
        -1
    """

    def __init__(self, minimum: int | None = None, maximum: int | None = None):
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(
                f"IntegerStep minimum ({minimum}) must be <= maximum ({maximum})"
            )
        self.minimum: int | None = minimum
        self.maximum: int | None = maximum

    def next(self, value: int) -> int | None:
        if self.maximum is not None and value >= self.maximum:
            return None
        return value + 1

    def prev(self, value: int) -> int | None:
        if self.minimum is not None and value <= self.minimum:
            return None
        return value - 1

    @override
    def __repr__(self) -> str:
        return f"IntegerStep(minimum={self.minimum}, maximum={self.maximum})"


INT = IntegerStep()
I8 = IntegerStep(I8_MIN, I8_MAX)
I16 = IntegerStep(I16_MIN, I16_MAX)
I32 = IntegerStep(I32_MIN, I32_MAX)
I64 = IntegerStep(I64_MIN, I64_MAX)
U8 = IntegerStep(0, U8_MAX)
U16 = IntegerStep(0, U16_MAX)
U32 = IntegerStep(0, U32_MAX)
U64 = IntegerStep(0, U64_MAX)


class CalendarStep:
    """Step dates or datetimes by a calendar delta.

    Accepts the same keyword arguments as ``dateutil.relativedelta``
    (``days=1``, ``months=1``, ``hours=1``, ...). Stepping past the range
    ``datetime`` supports (years 1..9999) returns None.

    Example:
        >>> CalendarStep(days=1).next(date(2025, 1, 31))
        datetime.date(2025, 2, 1)
        >>> CalendarStep(months=1).next(date(2025, 1, 31))
        datetime.date(2025, 2, 28)
    """

    def __init__(self, **delta: Any):
        if not delta:
            raise ValueError(
                "CalendarStep requires a non-empty delta.\n"
                "Example: CalendarStep(days=1) or CalendarStep(months=1)"
            )
        self.delta: relativedelta = relativedelta(**delta)

    def next(self, value: D) -> D | None:
        try:
            return value + self.delta
        except (OverflowError, ValueError):
            return None

    def prev(self, value: D) -> D | None:
        try:
            return value - self.delta
        except (OverflowError, ValueError):
            return None

    @override
    def __repr__(self) -> str:
        return f"CalendarStep({self.delta!r})"

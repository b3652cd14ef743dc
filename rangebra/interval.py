import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from rangebra.bound import (
    UNBOUNDED,
    Bound,
    Excluded,
    Included,
    Unbounded,
    Unordered,
    bound_value,
    compare_to_bound,
    map_bound,
    partial_cmp,
)
from rangebra.shapes import (
    SHAPE_TYPES,
    AtLeast,
    AtMost,
    Closed,
    ClosedOpen,
    Everything,
    LessThan,
    RangeKind,
    Shape,
)
from rangebra.successor import Successor

if TYPE_CHECKING:
    from rangebra.classify import Intersection, IntersectionExt
    from rangebra.results import BinaryResult, SplitResult

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _check_bound(bound: Any, edge: str) -> None:
    if not isinstance(bound, (Unbounded, Included, Excluded)):
        raise TypeError(
            f"Interval {edge} must be a bound, got {type(bound).__name__!r}: {bound!r}\n"
            f"Hint: wrap values in Included(...) or Excluded(...), or use UNBOUNDED:\n"
            f"  Interval.new(Included(1), Excluded(10))  # [1, 10)\n"
            f"  Interval.new(UNBOUNDED, Included(5))     # (-inf, 5]"
        )


@dataclass(frozen=True, kw_only=True)
class Interval(Generic[T]):
    """A contiguous, possibly empty or unbounded set of ordered values.

    Bounds are always stored low-to-high. ``reversed`` records that the caller
    wrote the interval high-to-low; it only affects conversions back to native
    shapes, never set membership.

    Build intervals with ``Interval.new`` (which accepts either orientation),
    ``Interval.from_shape`` or the module-level builders such as
    ``closed_open(1, 10)``.
    """

    start: "Bound[T]"
    end: "Bound[T]"
    reversed: bool = False

    def __post_init__(self) -> None:
        _check_bound(self.start, "start")
        _check_bound(self.end, "end")
        if isinstance(self.start, Unbounded) or isinstance(self.end, Unbounded):
            return
        try:
            out_of_order = partial_cmp(self.start.value, self.end.value) > 0
        except Unordered:
            return
        if out_of_order:
            raise ValueError(
                f"Interval start ({self.start}) must be <= end ({self.end}).\n"
                f"Hint: Interval.new(start, end) accepts high-to-low pairs;\n"
                f"      it swaps the bounds and sets reversed=True."
            )

    @classmethod
    def new(cls, start: "Bound[T]", end: "Bound[T]") -> "Interval[T]":
        """Build an interval from two bounds written in either order.

        When both bounds carry values and the first exceeds the second, the
        bounds (with their inclusivity) are swapped and ``reversed`` is set.

        Example:
            >>> Interval.new(Included(10), Included(1))
            Interval(start=Included(value=1), end=Included(value=10), reversed=True)
        """
        _check_bound(start, "start")
        _check_bound(end, "end")
        if not isinstance(start, Unbounded) and not isinstance(end, Unbounded):
            if start.value > end.value:
                return cls(start=end, end=start, reversed=True)
        return cls(start=start, end=end)

    @classmethod
    def from_shape(cls, shape: Shape) -> "Interval[Any]":
        """Build an interval from a native range shape.

        ``ClosedOpen(10, 1)`` and ``Closed(10, 1)`` produce reversed intervals
        that convert back to the same shape.
        """
        if isinstance(shape, ClosedOpen):
            return cls.new(Included(shape.start), Excluded(shape.end))
        if isinstance(shape, Closed):
            return cls.new(Included(shape.start), Included(shape.end))
        if isinstance(shape, AtLeast):
            return cls(start=Included(shape.start), end=UNBOUNDED)
        if isinstance(shape, LessThan):
            return cls(start=UNBOUNDED, end=Excluded(shape.end))
        if isinstance(shape, AtMost):
            return cls(start=UNBOUNDED, end=Included(shape.end))
        if isinstance(shape, Everything):
            return cls(start=UNBOUNDED, end=UNBOUNDED)
        valid = ", ".join(t.__name__ for t in SHAPE_TYPES)
        raise TypeError(
            f"Cannot build an Interval from {type(shape).__name__!r}: {shape!r}\n"
            f"Supported shapes: {valid}"
        )

    @property
    def low(self) -> T | None:
        """The smaller endpoint value, None when unbounded below."""
        return bound_value(self.start)

    @property
    def high(self) -> T | None:
        """The larger endpoint value, None when unbounded above."""
        return bound_value(self.end)

    def is_empty(self) -> bool:
        if isinstance(self.start, Unbounded) or isinstance(self.end, Unbounded):
            return False
        if self.start.value != self.end.value:
            return False
        return isinstance(self.start, Excluded) or isinstance(self.end, Excluded)

    def contains(self, value: T) -> bool:
        """Test whether ``value`` is a member of this interval.

        Values without a defined order against the endpoints (NaN) are never
        members.
        """
        try:
            return (
                compare_to_bound(value, self.start, is_start=True) >= 0
                and compare_to_bound(value, self.end, is_start=False) <= 0
            )
        except Unordered:
            logger.debug("contains(%r) on %s: unordered value", value, self)
            return False

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def range_kind(self) -> RangeKind:
        """Return the native shape this interval converts to, or OTHER."""
        if self.to_closed_open() is not None:
            return RangeKind.CLOSED_OPEN
        if self.to_closed() is not None:
            return RangeKind.CLOSED
        if self.to_at_least() is not None:
            return RangeKind.AT_LEAST
        if self.to_less_than() is not None:
            return RangeKind.LESS_THAN
        if self.to_at_most() is not None:
            return RangeKind.AT_MOST
        if self.to_everything() is not None:
            return RangeKind.EVERYTHING
        return RangeKind.OTHER

    # Conversions back to native shapes. The to_* forms return None on
    # failure; the try_* forms return the unchanged interval instead.

    def to_closed_open(self) -> ClosedOpen[T] | None:
        start, end = self.start, self.end
        if not self.reversed and isinstance(start, Included) and isinstance(end, Excluded):
            return ClosedOpen(start.value, end.value)
        if self.reversed and isinstance(start, Excluded) and isinstance(end, Included):
            return ClosedOpen(end.value, start.value)
        return None

    def to_closed(self) -> Closed[T] | None:
        start, end = self.start, self.end
        if isinstance(start, Included) and isinstance(end, Included):
            if self.reversed:
                return Closed(end.value, start.value)
            return Closed(start.value, end.value)
        return None

    def to_at_least(self) -> AtLeast[T] | None:
        if isinstance(self.start, Included) and isinstance(self.end, Unbounded):
            return AtLeast(self.start.value)
        return None

    def to_less_than(self) -> LessThan[T] | None:
        if isinstance(self.start, Unbounded) and isinstance(self.end, Excluded):
            return LessThan(self.end.value)
        return None

    def to_at_most(self) -> AtMost[T] | None:
        if isinstance(self.start, Unbounded) and isinstance(self.end, Included):
            return AtMost(self.end.value)
        return None

    def to_everything(self) -> Everything | None:
        if isinstance(self.start, Unbounded) and isinstance(self.end, Unbounded):
            return Everything()
        return None

    def try_closed_open(self) -> "ClosedOpen[T] | Interval[T]":
        return self._or_self(self.to_closed_open())

    def try_closed(self) -> "Closed[T] | Interval[T]":
        return self._or_self(self.to_closed())

    def try_at_least(self) -> "AtLeast[T] | Interval[T]":
        return self._or_self(self.to_at_least())

    def try_less_than(self) -> "LessThan[T] | Interval[T]":
        return self._or_self(self.to_less_than())

    def try_at_most(self) -> "AtMost[T] | Interval[T]":
        return self._or_self(self.to_at_most())

    def try_everything(self) -> "Everything | Interval[T]":
        return self._or_self(self.to_everything())

    def _or_self(self, shape: Any) -> Any:
        return self if shape is None else shape

    def map(self, f: Callable[[T], R]) -> "Interval[R]":
        """Apply ``f`` to every endpoint value, keeping bound kinds.

        The reversed flag is kept. If ``f`` turns the endpoints around (a
        decreasing function), the bounds are swapped back into low-to-high
        order and the flag toggles, so the caller's orientation still holds.
        """
        mapped: Interval[R] = Interval.new(
            map_bound(self.start, f), map_bound(self.end, f)
        )
        return replace(mapped, reversed=mapped.reversed != self.reversed)

    def avoid(self, value: T, toward_end: bool, step: Successor[T]) -> T | None:
        """Move ``value`` just outside this interval.

        Values outside the interval are returned unchanged. A member is pushed
        past the end bound (``toward_end=True``) or below the start bound,
        stepping with ``step`` across an included endpoint.

        Returns:
            The first non-member in that direction, or None when the interval
            is unbounded that way or stepping overflows.

        Example:
            >>> from rangebra.successor import INT
            >>> closed(1, 10).avoid(5, toward_end=True, step=INT)
            11
            >>> closed_open(1, 10).avoid(5, toward_end=True, step=INT)
            10
        """
        if not self.contains(value):
            return value
        edge = self.end if toward_end else self.start
        if isinstance(edge, Unbounded):
            return None
        if isinstance(edge, Excluded):
            return edge.value
        if toward_end:
            return step.next(edge.value)
        return step.prev(edge.value)

    def classify(self, other: "Interval[T] | Shape") -> "IntersectionExt":
        from rangebra.classify import classify

        return classify(self, other)

    def intersection(self, other: "Interval[T] | Shape") -> "Intersection":
        return self.classify(other).intersection()

    def does_intersect(self, other: "Interval[T] | Shape") -> bool:
        from rangebra.classify import does_intersect

        return does_intersect(self, other)

    def subtract(self, other: "Interval[T] | Shape") -> "BinaryResult[T]":
        from rangebra.subtract import subtract

        return subtract(self, other)

    def __sub__(self, other: "Interval[T] | Shape") -> "BinaryResult[T]":
        return self.subtract(other)

    def split(
        self, cut: "ClosedOpen[T] | Interval[T]"
    ) -> "SplitResult[ClosedOpen[T], Closed[T]]":
        """Split a closed interval by a closed-open one (see ``rangebra.split``)."""
        from rangebra.split import split_interval

        return split_interval(self, cut)

    def __str__(self) -> str:
        """Human-friendly notation, e.g. ``[1, 10)`` or ``(-inf, 5]``."""
        if isinstance(self.start, Unbounded):
            left = "(-inf"
        else:
            left = ("[" if isinstance(self.start, Included) else "(") + str(self.start.value)
        if isinstance(self.end, Unbounded):
            right = "+inf)"
        else:
            right = str(self.end.value) + ("]" if isinstance(self.end, Included) else ")")
        text = f"{left}, {right}"
        return f"{text} reversed" if self.reversed else text


def as_interval(value: "Interval[T] | Shape") -> "Interval[Any]":
    """Coerce an interval or native shape to an ``Interval``."""
    if isinstance(value, Interval):
        return value
    return Interval.from_shape(value)


# Builders for the common literal forms.


def closed_open(start: T, end: T) -> Interval[T]:
    """``[start, end)``; high-to-low arguments give a reversed interval."""
    return Interval.new(Included(start), Excluded(end))


def closed(start: T, end: T) -> Interval[T]:
    """``[start, end]``"""
    return Interval.new(Included(start), Included(end))


def open_closed(start: T, end: T) -> Interval[T]:
    """``(start, end]``"""
    return Interval.new(Excluded(start), Included(end))


def open_interval(start: T, end: T) -> Interval[T]:
    """``(start, end)``"""
    return Interval.new(Excluded(start), Excluded(end))


def at_least(start: T) -> Interval[T]:
    return Interval.new(Included(start), UNBOUNDED)


def greater_than(start: T) -> Interval[T]:
    return Interval.new(Excluded(start), UNBOUNDED)


def less_than(end: T) -> Interval[T]:
    return Interval.new(UNBOUNDED, Excluded(end))


def at_most(end: T) -> Interval[T]:
    return Interval.new(UNBOUNDED, Included(end))


def unbounded() -> Interval[Any]:
    return Interval.new(UNBOUNDED, UNBOUNDED)


def point(value: T) -> Interval[T]:
    """The single-value interval ``[value, value]``."""
    return Interval.new(Included(value), Included(value))

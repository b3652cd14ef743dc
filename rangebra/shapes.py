"""Native range shapes.

Plain endpoint pairs in the forms most code already speaks: half-open
``[start, end)``, closed ``[start, end]``, the three half-bounded forms and
the full line. ``Interval.from_shape`` turns any of them into a canonical
interval and the ``Interval.to_*`` / ``try_*`` methods project back.

A shape keeps its endpoints exactly as written, so ``ClosedOpen(10, 1)`` is a
valid, high-to-low range.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")


class RangeKind(Enum):
    """Which native shape an interval can be expressed as."""

    CLOSED_OPEN = "closed_open"
    CLOSED = "closed"
    AT_LEAST = "at_least"
    LESS_THAN = "less_than"
    AT_MOST = "at_most"
    EVERYTHING = "everything"
    OTHER = "other"


@dataclass(frozen=True)
class ClosedOpen(Generic[T]):
    """``[start, end)``"""

    start: T
    end: T


@dataclass(frozen=True)
class Closed(Generic[T]):
    """``[start, end]``"""

    start: T
    end: T


@dataclass(frozen=True)
class AtLeast(Generic[T]):
    """``[start, +inf)``"""

    start: T


@dataclass(frozen=True)
class LessThan(Generic[T]):
    """``(-inf, end)``"""

    end: T


@dataclass(frozen=True)
class AtMost(Generic[T]):
    """``(-inf, end]``"""

    end: T


@dataclass(frozen=True)
class Everything:
    """``(-inf, +inf)``"""


Shape: TypeAlias = (
    ClosedOpen[Any] | Closed[Any] | AtLeast[Any] | LessThan[Any] | AtMost[Any] | Everything
)

SHAPE_TYPES: tuple[type, ...] = (ClosedOpen, Closed, AtLeast, LessThan, AtMost, Everything)

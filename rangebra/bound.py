"""Interval endpoints and bound-aware comparisons.

A bound is one of three shapes: ``Unbounded`` (no limit on that side),
``Included(value)`` or ``Excluded(value)``. Every algorithm in rangebra
compares bounds through the helpers below, which treat a missing start as
-inf, a missing end as +inf, and an excluded edge as sitting just past its
value, away from the interval it limits.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Unordered(ValueError):
    """Raised when two values have no defined order (e.g. NaN).

    Public operations catch this and return their conservative result
    instead of letting it escape.
    """


@dataclass(frozen=True)
class Unbounded:
    """No limit on this side of the interval."""

    def __repr__(self) -> str:
        return "Unbounded()"


UNBOUNDED = Unbounded()


@dataclass(frozen=True)
class Included(Generic[T]):
    value: T


@dataclass(frozen=True)
class Excluded(Generic[T]):
    value: T


Bound: TypeAlias = Unbounded | Included[T] | Excluded[T]


def partial_cmp(a: Any, b: Any) -> int:
    """Three-way compare ``a`` and ``b``.

    Returns -1, 0 or 1. Raises ``Unordered`` when neither ``a < b``,
    ``a > b`` nor ``a == b`` holds.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    raise Unordered(f"{a!r} and {b!r} have no defined order")


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _edge(bound: "Bound[Any]", is_start: bool) -> int:
    # Excluded edges sit just past their value, away from the interval.
    if isinstance(bound, Excluded):
        return 1 if is_start else -1
    return 0


def compare_to_bound(value: Any, bound: "Bound[Any]", is_start: bool) -> int:
    """Locate ``value`` relative to a start or end bound.

    Returns -1 if the value lies below the bound's edge, 1 if above, and 0 if
    it sits exactly on an included edge. An excluded edge never yields 0: the
    value lands on the outside of the interval.

    Example:
        >>> compare_to_bound(5, Excluded(5), is_start=True)
        -1
        >>> compare_to_bound(5, Included(5), is_start=False)
        0
    """
    if isinstance(bound, Unbounded):
        return 1 if is_start else -1
    order = partial_cmp(value, bound.value)
    if order == 0 and isinstance(bound, Excluded):
        return -1 if is_start else 1
    return order


def _compare_edges(a: "Bound[Any]", b: "Bound[Any]", is_start: bool) -> int:
    a_open = isinstance(a, Unbounded)
    b_open = isinstance(b, Unbounded)
    if a_open or b_open:
        if a_open and b_open:
            return 0
        infinite = -1 if is_start else 1
        return infinite if a_open else -infinite
    order = partial_cmp(a.value, b.value)
    if order:
        return order
    return _sign(_edge(a, is_start) - _edge(b, is_start))


def compare_starts(a: "Bound[Any]", b: "Bound[Any]") -> int:
    """Order two start bounds; ``Unbounded`` is -inf, ``Included(v)`` < ``Excluded(v)``."""
    return _compare_edges(a, b, is_start=True)


def compare_ends(a: "Bound[Any]", b: "Bound[Any]") -> int:
    """Order two end bounds; ``Unbounded`` is +inf, ``Excluded(v)`` < ``Included(v)``."""
    return _compare_edges(a, b, is_start=False)


def reaches(end: "Bound[Any]", start: "Bound[Any]") -> bool:
    """True if an interval ending at ``end`` shares a point with one starting at ``start``.

    Touching values only share a point when both bounds include it.
    """
    if isinstance(end, Unbounded) or isinstance(start, Unbounded):
        return True
    order = partial_cmp(end.value, start.value)
    if order:
        return order > 0
    return isinstance(end, Included) and isinstance(start, Included)


def flip(bound: "Bound[T]") -> "Bound[T]":
    """Swap inclusivity: the complement of a set limited by ``bound`` starts here."""
    if isinstance(bound, Included):
        return Excluded(bound.value)
    if isinstance(bound, Excluded):
        return Included(bound.value)
    return bound


def map_bound(bound: "Bound[T]", f: Callable[[T], R]) -> "Bound[R]":
    if isinstance(bound, Included):
        return Included(f(bound.value))
    if isinstance(bound, Excluded):
        return Excluded(f(bound.value))
    return bound


def bound_value(bound: "Bound[T]") -> T | None:
    if isinstance(bound, Unbounded):
        return None
    return bound.value

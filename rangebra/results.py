"""Outcomes of operations that can produce zero, one or two pieces.

Subtracting one interval from another, or splitting one by another, can
leave nothing, a single piece, or two disjoint pieces. These results are
explicit variants so callers branch on the shape of the answer:

    >>> match closed(1, 10) - closed(4, 6):
    ...     case Two(lower, upper):
    ...         ...

Every variant also exposes ``pieces`` and iterates over them, lower first.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, override

from rangebra.interval import Interval

T = TypeVar("T")
L = TypeVar("L")
U = TypeVar("U")


class _Pieces(ABC):
    @property
    @abstractmethod
    def pieces(self) -> tuple[Any, ...]:
        """The produced pieces, lower first."""
        pass

    def __iter__(self) -> Iterator[Any]:
        return iter(self.pieces)

    def __len__(self) -> int:
        return len(self.pieces)


class BinaryResult(_Pieces, Generic[T]):
    """Result of subtraction: ``Nothing``, ``One`` or ``Two`` intervals."""


class SplitResult(_Pieces, Generic[L, U]):
    """Result of a split: ``Nothing``, ``First``, ``Second`` or ``Both``.

    The lower and upper pieces may be different shapes.
    """


@dataclass(frozen=True)
class Nothing(BinaryResult[Any], SplitResult[Any, Any]):
    """No piece remains."""

    @property
    @override
    def pieces(self) -> tuple[()]:
        return ()


@dataclass(frozen=True)
class One(BinaryResult[T]):
    interval: Interval[T]

    @property
    @override
    def pieces(self) -> tuple[Interval[T]]:
        return (self.interval,)


@dataclass(frozen=True)
class Two(BinaryResult[T]):
    """Two disjoint intervals with a gap between them, ``lower`` below ``upper``."""

    lower: Interval[T]
    upper: Interval[T]

    @property
    @override
    def pieces(self) -> tuple[Interval[T], Interval[T]]:
        return (self.lower, self.upper)


@dataclass(frozen=True)
class First(SplitResult[L, Any]):
    """Only the piece below the cut remains."""

    lower: L

    @property
    @override
    def pieces(self) -> tuple[L]:
        return (self.lower,)


@dataclass(frozen=True)
class Second(SplitResult[Any, U]):
    """Only the piece above the cut remains."""

    upper: U

    @property
    @override
    def pieces(self) -> tuple[U]:
        return (self.upper,)


@dataclass(frozen=True)
class Both(SplitResult[L, U]):
    lower: L
    upper: U

    @property
    @override
    def pieces(self) -> tuple[L, U]:
        return (self.lower, self.upper)


NOTHING = Nothing()


def from_pieces(pieces: list[Interval[T]]) -> BinaryResult[T]:
    """Wrap up to two ordered, disjoint pieces in the matching variant."""
    if not pieces:
        return NOTHING
    if len(pieces) == 1:
        return One(pieces[0])
    lower, upper = pieces
    return Two(lower, upper)

from importlib.resources import files

from .bound import UNBOUNDED, Bound, Excluded, Included, Unbounded, Unordered
from .classify import Intersection, IntersectionExt, classify, does_intersect
from .interval import (
    Interval,
    as_interval,
    at_least,
    at_most,
    closed,
    closed_open,
    greater_than,
    less_than,
    open_closed,
    open_interval,
    point,
    unbounded,
)
from .results import (
    NOTHING,
    BinaryResult,
    Both,
    First,
    Nothing,
    One,
    Second,
    SplitResult,
    Two,
)
from .shapes import AtLeast, AtMost, Closed, ClosedOpen, Everything, LessThan, RangeKind
from .split import split
from .subtract import subtract
from .successor import INT, CalendarStep, IntegerStep, Successor

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Bound",
    "Unbounded",
    "UNBOUNDED",
    "Included",
    "Excluded",
    "Unordered",
    "Interval",
    "as_interval",
    "closed_open",
    "closed",
    "open_closed",
    "open_interval",
    "at_least",
    "greater_than",
    "less_than",
    "at_most",
    "unbounded",
    "point",
    "ClosedOpen",
    "Closed",
    "AtLeast",
    "LessThan",
    "AtMost",
    "Everything",
    "RangeKind",
    "BinaryResult",
    "SplitResult",
    "Nothing",
    "NOTHING",
    "One",
    "Two",
    "First",
    "Second",
    "Both",
    "Intersection",
    "IntersectionExt",
    "classify",
    "does_intersect",
    "subtract",
    "split",
    "Successor",
    "IntegerStep",
    "CalendarStep",
    "INT",
    "docs",
]

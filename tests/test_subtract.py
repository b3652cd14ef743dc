"""Tests for interval subtraction."""

import math

import pytest

from rangebra import (
    NOTHING,
    ClosedOpen,
    Included,
    Interval,
    LessThan,
    One,
    Two,
    at_least,
    at_most,
    closed,
    closed_open,
    greater_than,
    less_than,
    open_closed,
    open_interval,
    point,
    subtract,
    unbounded,
)


def reversed_point(value):
    return Interval(start=Included(value), end=Included(value), reversed=True)


def test_subtract_disjoint_touching_keeps_left_operand():
    """Test that removing an interval that only touches leaves the operand."""
    assert closed_open(5, 10) - closed_open(0, 5) == One(closed_open(5, 10))


def test_subtract_shared_end_keeps_lower_part():
    """Test that removing the tail leaves the head."""
    assert closed_open(1, 10) - closed_open(5, 10) == One(closed_open(1, 5))


def test_subtract_point_punches_a_hole():
    """Test that removing a single point leaves two open-edged pieces."""
    result = closed(1, 10) - point(5)
    assert result == Two(closed_open(1, 5), open_closed(5, 10))
    assert len(result) == 2


def test_subtract_from_reversed_keeps_orientation():
    """Test that pieces cut from a reversed interval stay reversed."""
    result = closed(10, 1) - at_most(5)
    assert result == One(closed_open(10, 5))
    (piece,) = result
    assert piece.reversed
    assert piece.to_closed_open() == ClosedOpen(10, 5)


def test_subtract_leaves_reversed_single_point():
    """Test that the included end of a reversed interval survives alone."""
    assert closed_open(10, 1) - less_than(10) == One(reversed_point(10))


def test_subtract_open_edges_from_reversed():
    """Test that open edges of both operands carry into the pieces."""
    assert open_closed(10, 1) - closed(3, 5) == Two(
        open_closed(3, 1), open_interval(10, 5)
    )


def test_subtract_half_open_cut_leaves_point_and_upper():
    """Test that an open start on the cut keeps its value in the lower piece."""
    assert closed(20, 10) - open_closed(10, 15) == Two(
        reversed_point(10), closed_open(20, 15)
    )
    assert at_least(10) - open_interval(10, 20) == Two(closed(10, 10), at_least(20))


def test_subtract_from_everything():
    """Test that removing a bounded interval from everything leaves two rays."""
    assert unbounded() - closed(1, 10) == Two(less_than(1), greater_than(10))


def test_subtract_empty_is_identity():
    """Test that removing an empty interval changes nothing."""
    assert unbounded() - closed_open(1, 1) == One(unbounded())
    # the empty interval's value lies inside the operand
    assert closed(1, 10) - open_interval(5, 5) == One(closed(1, 10))


def test_subtract_rays_leave_single_points():
    """Test that open rays leave the included endpoint behind."""
    assert at_least(1) - greater_than(1) == One(closed(1, 1))
    assert open_closed(10, 20) - open_interval(10, 20) == One(closed(20, 20))


def test_subtract_open_ray_from_reversed():
    """Test that an open ray trims the high end of a reversed interval."""
    assert closed_open(10, 1) - greater_than(5) == One(closed_open(5, 1))


def test_subtract_covering_leaves_nothing():
    """Test that removing a superset leaves nothing."""
    result = closed(3, 5) - unbounded()
    assert result == NOTHING
    assert not result
    assert list(result) == []


def test_subtract_from_empty_is_nothing():
    """Test that an empty operand minus anything non-empty is nothing."""
    assert closed_open(1, 1) - closed(5, 6) == NOTHING


def test_subtract_accepts_native_shapes():
    """Test that subtract coerces native shapes on either side."""
    assert subtract(ClosedOpen(1, 10), LessThan(5)) == One(closed_open(5, 10))
    assert closed(1, 10).subtract(ClosedOpen(5, 20)) == One(closed_open(1, 5))


def test_subtract_unordered_values_give_nothing():
    """Test that NaN endpoints produce no pieces instead of raising."""
    assert closed(0.0, 1.0) - closed(math.nan, math.nan) == NOTHING
    assert closed(math.nan, math.nan) - closed(0.0, 1.0) == NOTHING


def test_subtract_pieces_are_ordered_and_disjoint():
    """Test that both pieces are non-empty and the lower one is below the upper."""
    result = closed(0, 100) - open_interval(40, 60)
    assert isinstance(result, Two)
    assert not result.lower.is_empty()
    assert not result.upper.is_empty()
    assert not result.lower.does_intersect(result.upper)
    assert result.lower.high <= result.upper.low


def test_subtract_pieces_partition_the_difference():
    """Test that a value lies in a piece exactly when it is in A but not in B."""
    a = open_closed(0, 20)
    b = closed_open(5, 12)
    pieces = list(a - b)
    for value in range(-2, 23):
        expected = value in a and value not in b
        assert any(value in piece for piece in pieces) == expected


def test_subtract_pattern_matching():
    """Test that results can be destructured with match."""
    match closed(1, 10) - closed(4, 6):
        case Two(lower, upper):
            assert lower == closed_open(1, 4)
            assert upper == open_closed(6, 10)
        case _:
            pytest.fail("expected two pieces")


# A cross-section of every operand shape against every cut shape, including
# reversed operands and cuts that touch at included or excluded edges.
CASES = [
    (unbounded(), unbounded(), NOTHING),
    (at_most(11), at_most(10), One(open_closed(10, 11))),
    (at_least(1), at_most(1), One(greater_than(1))),
    (closed(1, 10), at_most(10), NOTHING),
    (closed(1, 10), at_most(1), One(open_closed(1, 10))),
    (closed_open(1, 10), at_most(5), One(open_interval(5, 10))),
    (open_closed(10, 1), at_most(1), One(open_interval(10, 1))),
    (greater_than(1), at_most(0), One(greater_than(1))),
    (closed_open(10, 1), at_most(10), NOTHING),
    (closed_open(10, 1), at_most(5), One(closed_open(10, 5))),
    (open_interval(1, 10), at_most(10), NOTHING),
    (open_interval(1, 10), at_most(1), One(open_interval(1, 10))),
    (open_interval(10, 1), at_most(0), One(open_interval(10, 1))),
    (less_than(9), less_than(10), NOTHING),
    (at_least(1), less_than(1), One(at_least(1))),
    (closed(1, 10), less_than(10), One(closed(10, 10))),
    (closed(10, 1), less_than(5), One(closed(10, 5))),
    (closed_open(1, 10), less_than(10), NOTHING),
    (closed_open(1, 10), less_than(1), One(closed_open(1, 10))),
    (open_closed(10, 1), less_than(0), One(open_closed(10, 1))),
    (open_closed(1, 10), less_than(11), NOTHING),
    (open_closed(1, 10), less_than(1), One(open_closed(1, 10))),
    (closed_open(10, 1), less_than(1), One(closed_open(10, 1))),
    (open_interval(1, 10), less_than(5), One(closed_open(5, 10))),
    (open_interval(10, 1), less_than(1), One(open_interval(10, 1))),
    (at_most(1), at_least(1), One(less_than(1))),
    (less_than(1), at_least(2), One(less_than(1))),
    (closed(1, 10), at_least(0), NOTHING),
    (closed(1, 10), at_least(11), One(closed(1, 10))),
    (closed_open(1, 10), at_least(0), NOTHING),
    (closed_open(1, 10), at_least(5), One(closed_open(1, 5))),
    (open_closed(10, 1), at_least(10), One(open_closed(10, 1))),
    (greater_than(1), at_least(2), One(open_interval(1, 2))),
    (closed_open(10, 1), at_least(1), NOTHING),
    (closed_open(10, 1), at_least(2), One(open_interval(2, 1))),
    (open_interval(1, 10), at_least(1), NOTHING),
    (open_interval(1, 10), at_least(10), One(open_interval(1, 10))),
    (open_interval(10, 1), at_least(11), One(open_interval(10, 1))),
    (at_most(5), closed(5, 10), One(less_than(5))),
    (less_than(5), closed(5, 10), One(less_than(5))),
    (at_least(1), closed(5, 10), Two(closed_open(1, 5), greater_than(10))),
    (closed(1, 10), closed(-1, 0), One(closed(1, 10))),
    (closed(10, 1), closed(-1, 0), One(closed(10, 1))),
    (closed(1, 10), closed(-1, 10), NOTHING),
    (closed(10, 1), closed(-1, 10), NOTHING),
    (closed(1, 10), closed(2, 2), Two(closed_open(1, 2), open_closed(2, 10))),
    (closed(1, 10), closed(10, 10), One(closed_open(1, 10))),
    (closed(10, 1), closed(5, 12), One(open_closed(5, 1))),
    (closed_open(1, 10), closed(-1, 0), One(closed_open(1, 10))),
    (closed_open(1, 10), closed(-1, 2), One(open_interval(2, 10))),
    (closed_open(1, 10), closed(-1, 11), NOTHING),
    (closed_open(1, 10), closed(1, 11), NOTHING),
    (closed_open(1, 10), closed(3, 5), Two(closed_open(1, 3), open_interval(5, 10))),
    (closed_open(1, 10), closed(10, 12), One(closed_open(1, 10))),
    (greater_than(1), closed(-1, 0), One(greater_than(1))),
    (greater_than(1), closed(1, 5), One(greater_than(5))),
    (open_closed(1, 10), closed(-2, 1), One(open_closed(1, 10))),
    (open_closed(1, 10), closed(1, 5), One(open_closed(5, 10))),
    (open_closed(1, 10), closed(5, 5), Two(open_interval(1, 5), open_closed(5, 10))),
    (open_closed(1, 10), closed(13, 15), One(open_closed(1, 10))),
    (closed_open(10, 1), closed(10, -2), NOTHING),
    (closed_open(10, 1), closed(15, 1), NOTHING),
    (closed_open(10, 1), closed(15, 5), One(open_interval(5, 1))),
    (at_least(1), closed_open(1, 1), One(at_least(1))),
    (closed_open(1, 5), closed_open(1, 1), One(closed_open(1, 5))),
    (unbounded(), closed_open(1, 10), Two(less_than(1), at_least(10))),
    (at_most(10), closed_open(10, 11), One(less_than(10))),
    (less_than(10), closed_open(1, 12), One(less_than(1))),
    (at_least(1), closed_open(-2, 1), One(at_least(1))),
    (closed(1, 10), closed_open(-2, 0), One(closed(1, 10))),
    (closed(10, 1), closed_open(-2, 1), One(closed(10, 1))),
    (closed(10, 1), closed_open(-2, 10), One(reversed_point(10))),
    (closed(1, 10), closed_open(4, 8), Two(closed_open(1, 4), closed(8, 10))),
    (closed(1, 10), closed_open(10, 15), One(closed_open(1, 10))),
    (closed(10, 1), closed_open(12, 15), One(closed(10, 1))),
    (open_closed(10, 1), closed_open(-2, 1), One(open_closed(10, 1))),
    (closed_open(1, 10), closed_open(-2, 15), NOTHING),
    (open_closed(10, 1), closed_open(1, 6), One(open_closed(10, 6))),
    (open_closed(10, 1), closed_open(4, 10), One(open_closed(4, 1))),
    (closed_open(1, 10), closed_open(12, 15), One(closed_open(1, 10))),
    (greater_than(1), closed_open(-5, 1), One(greater_than(1))),
    (open_closed(1, 10), closed_open(-5, 0), One(open_closed(1, 10))),
    (open_closed(1, 10), closed_open(-5, 15), NOTHING),
    (closed_open(10, 1), closed_open(-5, 10), One(reversed_point(10))),
    (open_closed(1, 10), closed_open(1, 15), NOTHING),
    (closed_open(10, 1), closed_open(1, 5), One(closed(10, 5))),
    (closed_open(10, 1), closed_open(3, 10), Two(open_interval(3, 1), reversed_point(10))),
    (closed_open(10, 1), closed_open(10, 15), One(open_interval(10, 1))),
    (open_interval(1, 10), closed_open(-5, 5), One(closed_open(5, 10))),
    (open_interval(1, 10), closed_open(1, 10), NOTHING),
    (open_interval(1, 10), closed_open(3, 15), One(open_interval(1, 3))),
    (open_interval(10, 1), closed_open(-5, 1), One(open_interval(10, 1))),
    (open_interval(10, 1), closed_open(1, 5), One(open_closed(10, 5))),
    (open_interval(10, 1), closed_open(3, 10), One(open_interval(3, 1))),
    (unbounded(), greater_than(1), One(at_most(1))),
    (less_than(1), greater_than(-3), One(at_most(-3))),
    (at_least(1), greater_than(1), One(closed(1, 1))),
    (closed(1, 10), greater_than(10), One(closed(1, 10))),
    (closed(10, 1), greater_than(10), One(closed(10, 1))),
    (closed_open(1, 10), greater_than(5), One(closed(1, 5))),
    (open_closed(10, 1), greater_than(1), One(reversed_point(1))),
    (greater_than(1), greater_than(-3), NOTHING),
    (open_closed(1, 10), greater_than(1), NOTHING),
    (closed_open(10, 1), greater_than(-3), NOTHING),
    (closed_open(10, 1), greater_than(15), One(closed_open(10, 1))),
    (open_interval(1, 10), greater_than(10), One(open_interval(1, 10))),
    (at_most(10), open_closed(1, 10), One(at_most(1))),
    (at_most(10), open_closed(12, 15), One(at_most(10))),
    (less_than(10), open_closed(10, 10), One(less_than(10))),
    (at_least(10), open_closed(10, 10), One(at_least(10))),
    (closed(10, 20), open_closed(1, 10), One(open_closed(10, 20))),
    (closed(10, 20), open_closed(10, 15), Two(closed(10, 10), open_closed(15, 20))),
    (closed(10, 20), open_closed(13, 20), One(closed(10, 13))),
    (closed(20, 10), open_closed(1, 5), One(closed(20, 10))),
    (closed(20, 10), open_closed(1, 25), NOTHING),
    (closed(20, 10), open_closed(13, 25), One(closed(13, 10))),
    (closed_open(10, 20), open_closed(1, 10), One(open_interval(10, 20))),
    (closed_open(10, 20), open_closed(10, 15), Two(closed(10, 10), open_interval(15, 20))),
    (closed_open(10, 20), open_closed(13, 20), One(closed(10, 13))),
    (open_closed(20, 10), open_closed(1, 5), One(open_closed(20, 10))),
    (open_closed(20, 10), open_closed(1, 25), NOTHING),
    (open_closed(20, 10), open_closed(13, 15), Two(closed(13, 10), open_interval(20, 15))),
    (open_closed(20, 10), open_closed(22, 25), One(open_closed(20, 10))),
    (greater_than(10), open_closed(10, 15), One(greater_than(15))),
    (open_closed(10, 20), open_closed(1, 10), One(open_closed(10, 20))),
    (open_closed(10, 20), open_closed(10, 15), One(open_closed(15, 20))),
    (open_closed(10, 20), open_closed(13, 20), One(open_closed(10, 13))),
    (closed_open(20, 10), open_closed(1, 5), One(closed_open(20, 10))),
    (closed_open(20, 10), open_closed(1, 25), NOTHING),
    (closed_open(20, 10), open_closed(13, 15), Two(closed_open(13, 10), closed_open(20, 15))),
    (closed_open(20, 10), open_closed(22, 25), One(closed_open(20, 10))),
    (open_interval(10, 20), open_closed(1, 20), NOTHING),
    (open_interval(10, 20), open_closed(10, 25), NOTHING),
    (open_interval(10, 20), open_closed(20, 25), One(open_interval(10, 20))),
    (open_interval(20, 10), open_closed(1, 15), One(open_interval(20, 15))),
    (open_interval(20, 10), open_closed(10, 20), NOTHING),
    (open_interval(20, 10), open_closed(13, 25), One(closed_open(13, 10))),
    (unbounded(), open_interval(13, 15), Two(at_most(13), at_least(15))),
    (at_most(10), open_interval(1, 15), One(at_most(1))),
    (less_than(10), open_interval(1, 5), Two(at_most(1), closed_open(5, 10))),
    (less_than(10), open_interval(12, 15), One(less_than(10))),
    (at_least(10), open_interval(10, 10), One(at_least(10))),
    (closed(10, 20), open_interval(1, 10), One(closed(10, 20))),
    (closed(10, 20), open_interval(10, 10), One(closed(10, 20))),
    (closed(10, 20), open_interval(15, 20), Two(closed(10, 15), closed(20, 20))),
    (closed(10, 20), open_interval(22, 25), One(closed(10, 20))),
    (closed(20, 10), open_interval(1, 20), One(reversed_point(20))),
    (closed(20, 10), open_interval(10, 20), Two(reversed_point(10), reversed_point(20))),
    (closed(20, 10), open_interval(20, 25), One(closed(20, 10))),
    (closed_open(10, 20), open_interval(1, 15), One(closed_open(15, 20))),
    (closed_open(10, 20), open_interval(10, 15), Two(closed(10, 10), closed_open(15, 20))),
    (closed_open(10, 20), open_interval(15, 20), One(closed(10, 15))),
    (open_closed(20, 10), open_interval(1, 5), One(open_closed(20, 10))),
    (open_closed(20, 10), open_interval(1, 25), NOTHING),
    (open_closed(20, 10), open_interval(10, 25), One(reversed_point(10))),
    (open_closed(20, 10), open_interval(22, 25), One(open_closed(20, 10))),
    (greater_than(10), open_interval(10, 10), One(greater_than(10))),
    (open_closed(10, 20), open_interval(1, 10), One(open_closed(10, 20))),
    (open_closed(10, 20), open_interval(10, 10), One(open_closed(10, 20))),
    (open_closed(10, 20), open_interval(13, 15), Two(open_closed(10, 13), closed(15, 20))),
    (open_closed(10, 20), open_interval(23, 25), One(open_closed(10, 20))),
    (open_interval(10, 20), open_interval(1, 20), NOTHING),
    (open_interval(10, 20), open_interval(10, 20), NOTHING),
    (open_interval(10, 20), open_interval(13, 25), One(open_closed(10, 13))),
]


@pytest.mark.parametrize("a, b, expected", CASES)
def test_subtract_table(a, b, expected):
    assert a - b == expected


def test_subtract_empty_from_itself_is_identity():
    """Test that the empty-subtrahend rule wins when both operands are empty."""
    empty = closed_open(1, 1)
    assert empty - empty == One(empty)

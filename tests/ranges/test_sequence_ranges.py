"""Tests for ranges over indexable sequences."""

import pytest

from rangekit.cursors.index import BidirectionalIndexCursor, ForwardIndexCursor, IndexCursor
from rangekit.ranges import BidirectionalRange, ForwardRange, SequenceRange
from rangekit.types.base import CursorCategory


@pytest.mark.parametrize(
    "range_cls,cursor_cls,category",
    [
        (ForwardRange, ForwardIndexCursor, CursorCategory.SINGLE_PASS),
        (BidirectionalRange, BidirectionalIndexCursor, CursorCategory.BIDIRECTIONAL),
        (SequenceRange, IndexCursor, CursorCategory.RANDOM_ACCESS),
    ],
)
def test_range_produces_cursors_of_its_tier(range_cls, cursor_cls, category):
    """begin()/end() bracket the whole sequence with the range's cursor type."""
    data = [1, 2, 3]
    rng = range_cls(data)

    assert rng.category is category
    assert type(rng.begin()) is cursor_cls
    assert rng.begin().index == 0
    assert rng.end().index == 3
    assert list(rng) == data
    assert len(rng) == 3


def test_truthiness_and_empty():
    """A range is truthy iff begin() != end()."""
    assert SequenceRange([0])
    assert not SequenceRange([])
    assert SequenceRange([]).empty()


def test_const_bounds():
    """cbegin()/cend() return read-only cursors at the same positions."""
    data = [1, 2]
    rng = SequenceRange(data)
    assert rng.cbegin().is_const
    assert rng.cend().is_const
    assert rng.cbegin() == rng.begin()
    assert rng.cend().index == 2


def test_range_references_sequence():
    """The range sees later writes to the sequence."""
    data = [1, 2]
    rng = SequenceRange(data)
    data[0] = 7
    assert rng.sequence is data
    assert list(rng) == [7, 2]


def test_repr():
    """repr() names the range class and its length."""
    assert repr(BidirectionalRange("abc")) == "BidirectionalRange(len=3)"

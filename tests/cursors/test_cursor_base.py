"""Tests for the cursor capability interfaces."""

import copy

import pytest

from rangekit.cursors.base import (
    BidirectionalCursor,
    Cursor,
    RandomAccessCursor,
    category_of,
    common_category,
)
from rangekit.cursors.index import IndexCursor
from rangekit.errors import CapabilityError, ContractError, PreconditionError
from rangekit.ranges import BidirectionalRange, StreamRange
from rangekit.types.base import CursorCategory


class CountdownCursor(Cursor[int]):
    """Minimal single-pass cursor implemented only from the required surface."""

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining

    def read(self) -> int:
        return self.remaining

    def increment(self) -> None:
        self.remaining -= 1

    def equal(self, other):
        return self.remaining == other.remaining

    def copy(self):
        return CountdownCursor(self.remaining)

    def assign(self, other) -> None:
        self.remaining = other.remaining


def test_interfaces_cannot_be_instantiated():
    """The capability interfaces are abstract."""
    with pytest.raises(TypeError):
        Cursor()  # type: ignore[abstract]
    with pytest.raises(TypeError):
        RandomAccessCursor()  # type: ignore[abstract]


def test_minimal_cursor_defaults():
    """A user cursor gets read-only defaults and equality for free."""
    cursor = CountdownCursor(3)
    assert cursor.is_const
    assert cursor == CountdownCursor(3)
    assert cursor != CountdownCursor(2)
    assert cursor.as_const() == cursor
    with pytest.raises(CapabilityError):
        cursor.write(1)


def test_copy_module_uses_cursor_copy():
    """copy.copy() duplicates the position."""
    cursor = CountdownCursor(3)
    clone = copy.copy(cursor)
    clone.increment()
    assert cursor.remaining == 3
    assert clone.remaining == 2


def test_user_cursor_works_with_algorithms():
    """Algorithms dispatch on the interface a user cursor derives from."""
    from rangekit import advance_bounded

    cursor = CountdownCursor(5)
    assert advance_bounded(cursor, 10, CountdownCursor(2)) == 7
    assert cursor.remaining == 2
    with pytest.raises(CapabilityError):
        advance_bounded(cursor, -1, CountdownCursor(5))


def test_category_of_accepts_classes_instances_and_ranges():
    """Tiers are read from classes, cursors and ranges alike."""
    assert category_of(CountdownCursor) is CursorCategory.SINGLE_PASS
    assert category_of(BidirectionalCursor) is CursorCategory.BIDIRECTIONAL
    assert category_of(IndexCursor([1], 0)) is CursorCategory.RANDOM_ACCESS
    assert category_of(BidirectionalRange([1])) is CursorCategory.BIDIRECTIONAL
    assert category_of(StreamRange(iter([]))) is CursorCategory.SINGLE_PASS
    with pytest.raises(TypeError, match="no cursor category"):
        category_of(42)


def test_common_category_is_weakest():
    """The common tier of a group is its weakest member."""
    assert (
        common_category(CursorCategory.RANDOM_ACCESS, CursorCategory.BIDIRECTIONAL)
        is CursorCategory.BIDIRECTIONAL
    )
    assert common_category(CursorCategory.RANDOM_ACCESS) is CursorCategory.RANDOM_ACCESS
    with pytest.raises(ValueError):
        common_category()


def test_error_hierarchy():
    """Contract errors are assertion failures, not ordinary value errors."""
    assert issubclass(ContractError, AssertionError)
    assert issubclass(CapabilityError, ContractError)
    assert issubclass(PreconditionError, ContractError)
    assert not issubclass(PreconditionError, ValueError)

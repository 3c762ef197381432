"""Ranges over indexable Python sequences and numpy arrays."""

from __future__ import annotations

from typing import ClassVar, Generic, Sequence, Type, TypeVar

from rangekit.cursors.index import (
    BidirectionalIndexCursor,
    ForwardIndexCursor,
    IndexCursor,
)
from rangekit.ranges.base import Range
from rangekit.types.base import CursorCategory

T = TypeVar("T")


class ForwardRange(Range[T], Generic[T]):
    """Traverse a sequence through forward-only cursors."""

    cursor_type: ClassVar[Type[ForwardIndexCursor]] = ForwardIndexCursor
    category: ClassVar[CursorCategory] = CursorCategory.SINGLE_PASS

    def __init__(self, seq: Sequence[T]) -> None:
        self._seq = seq

    @property
    def sequence(self) -> Sequence[T]:
        return self._seq

    def begin(self) -> ForwardIndexCursor[T]:
        return self.cursor_type(self._seq, 0)

    def end(self) -> ForwardIndexCursor[T]:
        return self.cursor_type(self._seq, len(self._seq))

    def __len__(self) -> int:
        return len(self._seq)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self._seq)})"


class BidirectionalRange(ForwardRange[T]):
    """Traverse a sequence through bidirectional cursors only."""

    cursor_type: ClassVar[Type[ForwardIndexCursor]] = BidirectionalIndexCursor
    category: ClassVar[CursorCategory] = CursorCategory.BIDIRECTIONAL


class SequenceRange(ForwardRange[T]):
    """Traverse a sequence through random-access cursors."""

    cursor_type: ClassVar[Type[ForwardIndexCursor]] = IndexCursor
    category: ClassVar[CursorCategory] = CursorCategory.RANDOM_ACCESS

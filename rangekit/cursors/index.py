"""Cursors that address a Python sequence (or numpy array) by integer index.

All three classes share one position model and differ only in the capability
interface they expose, so the same data can be traversed as a random-access,
bidirectional or forward-only sequence.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, ClassVar, Self, Sequence, TypeVar

import numpy as np

from rangekit.config import RANGE_CONFIG
from rangekit.cursors.base import BidirectionalCursor, Cursor, RandomAccessCursor
from rangekit.errors import CapabilityError, PreconditionError
from rangekit.logging import get_logger
from rangekit.types.base import CursorCategory, Difference

T = TypeVar("T")

logger = get_logger(__name__)


def is_writable(seq: Any) -> bool:
    """Return True if elements of ``seq`` can be assigned by index."""
    if isinstance(seq, np.ndarray):
        return bool(seq.flags.writeable)
    return isinstance(seq, MutableSequence)


class ForwardIndexCursor(Cursor[T]):
    """Forward-only cursor over an indexable sequence.

    Args:
        seq: The sequence to traverse. It is referenced, never copied.
        index: Starting position, ``0 <= index <= len(seq)``.
        const: Force a read-only cursor. Sequences that do not support item
            assignment always produce read-only cursors.
    """

    category: ClassVar[CursorCategory] = CursorCategory.SINGLE_PASS

    def __init__(self, seq: Sequence[T], index: int = 0, const: bool = False) -> None:
        if not 0 <= index <= len(seq):
            raise PreconditionError(
                f"index {index} outside [0, {len(seq)}] for {type(self).__name__}"
            )
        self._seq = seq
        self._index = index
        self._const = const or not is_writable(seq)

    @property
    def index(self) -> int:
        """Current position as an offset from the start of the sequence."""
        return self._index

    @property
    def sequence(self) -> Sequence[T]:
        """The sequence this cursor addresses."""
        return self._seq

    @property
    def is_const(self) -> bool:
        return self._const

    def read(self) -> T:
        if self._index >= len(self._seq):
            raise PreconditionError("cannot dereference a cursor at the end position")
        return self._seq[self._index]

    def write(self, value: T) -> None:
        if self._const:
            raise CapabilityError(f"{type(self).__name__} over {type(self._seq).__name__} is read-only")
        if self._index >= len(self._seq):
            raise PreconditionError("cannot write through a cursor at the end position")
        self._seq[self._index] = value  # type: ignore[index]

    def increment(self) -> None:
        if self._index >= len(self._seq):
            logger.debug("increment past end at index %d", self._index)
            raise PreconditionError("cannot increment a cursor at the end position")
        self._index += 1

    def equal(self, other: Cursor[Any]) -> bool:
        return self._index == self._peer(other)._index

    def copy(self) -> Self:
        return type(self)(self._seq, self._index, self._const)

    def assign(self, other: Cursor[Any]) -> None:
        if not isinstance(other, ForwardIndexCursor):
            raise TypeError(f"cannot assign {type(other).__name__} to {type(self).__name__}")
        if other._const and not self._const:
            raise CapabilityError("cannot assign a const cursor to a mutable cursor")
        self._seq = other._seq
        self._index = other._index

    def as_const(self) -> Self:
        return type(self)(self._seq, self._index, const=True)

    def _peer(self, other: Cursor[Any]) -> ForwardIndexCursor[Any]:
        """Validate that ``other`` addresses the same sequence and return it."""
        if not isinstance(other, ForwardIndexCursor):
            raise PreconditionError(
                f"cannot relate {type(self).__name__} to {type(other).__name__}"
            )
        if RANGE_CONFIG.check_same_sequence and other._seq is not self._seq:
            logger.debug("comparing cursors over different sequences")
            raise PreconditionError("cursors refer to different sequences")
        return other

    def __repr__(self) -> str:
        flag = ", const=True" if self._const else ""
        return f"{type(self).__name__}(index={self._index}{flag})"


class BidirectionalIndexCursor(ForwardIndexCursor[T], BidirectionalCursor[T]):
    """Index cursor restricted to forward and backward single steps."""

    category: ClassVar[CursorCategory] = CursorCategory.BIDIRECTIONAL

    def decrement(self) -> None:
        if self._index <= 0:
            logger.debug("decrement before begin")
            raise PreconditionError("cannot decrement a cursor at the begin position")
        self._index -= 1


class IndexCursor(BidirectionalIndexCursor[T], RandomAccessCursor[T]):
    """Random-access cursor over an indexable sequence."""

    category: ClassVar[CursorCategory] = CursorCategory.RANDOM_ACCESS

    def advance(self, n: Difference) -> None:
        target = self._index + n
        if not 0 <= target <= len(self._seq):
            logger.debug("advance by %d from %d leaves the sequence", n, self._index)
            raise PreconditionError(
                f"advancing by {n} from index {self._index} leaves [0, {len(self._seq)}]"
            )
        self._index = target

    def distance_to(self, other: Cursor[Any]) -> Difference:
        return self._peer(other)._index - self._index

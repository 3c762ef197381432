"""Single-pass ranges over iterators."""

from __future__ import annotations

from typing import ClassVar, Iterable, TypeVar

from rangekit.cursors.stream import StreamCursor, StreamState
from rangekit.ranges.base import Range
from rangekit.types.base import CursorCategory

T = TypeVar("T")


class StreamRange(Range[T]):
    """Range over an iterable consumed at most once.

    Calling :meth:`begin` again restarts from wherever the stream currently
    is; elements already consumed are gone.
    """

    category: ClassVar[CursorCategory] = CursorCategory.SINGLE_PASS

    def __init__(self, source: Iterable[T]) -> None:
        self._state = StreamState(iter(source))

    def begin(self) -> StreamCursor[T]:
        return StreamCursor(self._state, self._state.position)

    def end(self) -> StreamCursor[T]:
        return StreamCursor(self._state, None)

    @property
    def consumed(self) -> int:
        """Number of elements already consumed from the stream."""
        return self._state.position

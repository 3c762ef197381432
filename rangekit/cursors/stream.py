"""Single-pass cursors over Python iterators."""

from __future__ import annotations

from typing import Any, ClassVar, Iterator, Optional, Self, TypeVar

from rangekit.cursors.base import Cursor
from rangekit.errors import PreconditionError
from rangekit.logging import get_logger
from rangekit.types.base import CursorCategory

T = TypeVar("T")

logger = get_logger(__name__)

_EMPTY = object()


class StreamState:
    """Consumption state shared by every cursor over one iterator.

    The head element is pulled lazily, so creating cursors or comparing
    positions never consumes more than one element ahead.
    """

    def __init__(self, iterator: Iterator[Any]) -> None:
        self._iterator = iterator
        self._head: Any = _EMPTY
        self.position = 0
        self.exhausted = False

    def head(self) -> Any:
        if self._head is _EMPTY and not self.exhausted:
            try:
                self._head = next(self._iterator)
            except StopIteration:
                self.exhausted = True
        return self._head

    def at_end(self) -> bool:
        self.head()
        return self.exhausted

    def pop(self) -> None:
        self.head()
        self._head = _EMPTY
        self.position += 1


class StreamCursor(Cursor[T]):
    """Cursor that consumes an iterator as it moves.

    Copies share the stream: once any copy steps forward, the others are stale
    and may only be compared or reassigned. The end cursor (``position`` of
    ``None``) equals any live cursor whose stream is exhausted.
    """

    category: ClassVar[CursorCategory] = CursorCategory.SINGLE_PASS

    def __init__(self, state: StreamState, position: Optional[int]) -> None:
        self._state = state
        self._position = position

    def _require_live(self, action: str) -> None:
        if self._position is None:
            raise PreconditionError(f"cannot {action} the end cursor of a stream")
        if self._position != self._state.position:
            logger.debug(
                "stale stream cursor at %d, stream at %d",
                self._position,
                self._state.position,
            )
            raise PreconditionError(
                f"cannot {action} a stale stream cursor; the stream has moved past it"
            )
        if self._state.at_end():
            raise PreconditionError(f"cannot {action} a stream cursor at the end position")

    def read(self) -> T:
        self._require_live("dereference")
        return self._state.head()

    def increment(self) -> None:
        self._require_live("increment")
        self._state.pop()
        self._position = self._state.position

    def equal(self, other: Cursor[Any]) -> bool:
        if not isinstance(other, StreamCursor) or other._state is not self._state:
            raise PreconditionError("stream cursors refer to different streams")
        if self._position is None and other._position is None:
            return True
        if self._position is None:
            return other._is_exhausted()
        if other._position is None:
            return self._is_exhausted()
        return self._position == other._position

    def _is_exhausted(self) -> bool:
        return self._position == self._state.position and self._state.at_end()

    def copy(self) -> Self:
        return type(self)(self._state, self._position)

    def assign(self, other: Cursor[Any]) -> None:
        if not isinstance(other, StreamCursor):
            raise TypeError(f"cannot assign {type(other).__name__} to {type(self).__name__}")
        self._state = other._state
        self._position = other._position

    def __repr__(self) -> str:
        where = "end" if self._position is None else self._position
        return f"StreamCursor(position={where})"

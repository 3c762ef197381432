"""Abstract range: anything exposing begin/end cursors."""

from __future__ import annotations

import abc
from typing import Any, Generic, Iterator, TypeVar

from rangekit.cursors.base import Cursor
from rangekit.types.base import CursorCategory

T = TypeVar("T")


class Range(abc.ABC, Generic[T]):
    """A sequence traversed through a pair of cursors.

    ``category`` is the capability tier of the cursors produced by
    :meth:`begin` and :meth:`end`. Python iteration walks those cursors, so a
    range can be used directly in a ``for`` loop.
    """

    category: CursorCategory

    @abc.abstractmethod
    def begin(self) -> Cursor[T]:
        """Return a cursor at the first element."""
        ...

    @abc.abstractmethod
    def end(self) -> Cursor[T]:
        """Return a cursor one past the last element."""
        ...

    def cbegin(self) -> Cursor[T]:
        """Return a read-only cursor at the first element."""
        return self.begin().as_const()

    def cend(self) -> Cursor[T]:
        """Return a read-only cursor one past the last element."""
        return self.end().as_const()

    def empty(self) -> bool:
        return self.begin() == self.end()

    def __bool__(self) -> bool:
        return not self.empty()

    def __iter__(self) -> Iterator[T]:
        cursor, last = self.begin(), self.end()
        while cursor != last:
            yield cursor.read()
            cursor.increment()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(category={self.category.name})"


def is_range(obj: Any) -> bool:
    """Return True if ``obj`` is a :class:`Range`."""
    return isinstance(obj, Range)

"""Cursor capability interfaces.

A cursor is a position marker over one sequence. What a cursor can do is fixed
by its class: every cursor can be dereferenced, stepped forward and compared;
:class:`BidirectionalCursor` adds stepping backward; :class:`RandomAccessCursor`
adds O(1) offsetting and distance measurement. Algorithms pick their strategy
from the class a cursor derives from, never from a per-instance flag.

Cursors are mutable value objects. ``copy()`` duplicates the position only; the
underlying sequence is shared.
"""

from __future__ import annotations

import abc
from typing import Any, ClassVar, Generic, Self, TypeVar

from rangekit.errors import CapabilityError
from rangekit.types.base import CursorCategory, Difference

T = TypeVar("T")


class Cursor(abc.ABC, Generic[T]):
    """Single-pass cursor: dereference, step forward, compare.

    Subclasses must override :meth:`read`, :meth:`increment`, :meth:`equal`,
    :meth:`copy` and :meth:`assign`.
    """

    category: ClassVar[CursorCategory] = CursorCategory.SINGLE_PASS

    @abc.abstractmethod
    def read(self) -> T:
        """Return the element at the current position."""
        ...

    @abc.abstractmethod
    def increment(self) -> None:
        """Step one position forward."""
        ...

    @abc.abstractmethod
    def equal(self, other: Self) -> bool:
        """Return True if ``other`` denotes the same position."""
        ...

    @abc.abstractmethod
    def copy(self) -> Self:
        """Return an independent cursor at the same position."""
        ...

    @abc.abstractmethod
    def assign(self, other: Self) -> None:
        """Move this cursor to the position held by ``other``."""
        ...

    @property
    def is_const(self) -> bool:
        """True if elements cannot be written through this cursor."""
        return True

    def as_const(self) -> Cursor[T]:
        """Return a read-only cursor at the same position."""
        return self.copy()

    def write(self, value: T) -> None:
        """Store ``value`` at the current position.

        Raises:
            CapabilityError: If the cursor is read-only.
        """
        raise CapabilityError(f"{type(self).__name__} is read-only")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Self:
        return self.copy()


class BidirectionalCursor(Cursor[T]):
    """Cursor that can also step backward."""

    category: ClassVar[CursorCategory] = CursorCategory.BIDIRECTIONAL

    @abc.abstractmethod
    def decrement(self) -> None:
        """Step one position backward."""
        ...


class RandomAccessCursor(BidirectionalCursor[T]):
    """Cursor with O(1) offsetting and distance measurement.

    ``b - a`` is the signed number of steps from ``a`` to ``b``.
    """

    category: ClassVar[CursorCategory] = CursorCategory.RANDOM_ACCESS

    @abc.abstractmethod
    def advance(self, n: Difference) -> None:
        """Move by ``n`` positions (negative moves backward)."""
        ...

    @abc.abstractmethod
    def distance_to(self, other: Self) -> Difference:
        """Return the signed number of steps from this cursor to ``other``."""
        ...

    def __sub__(self, other: Any) -> Difference:
        if not isinstance(other, RandomAccessCursor):
            return NotImplemented
        return other.distance_to(self)


def category_of(obj: Any) -> CursorCategory:
    """Return the capability tier of a cursor class, cursor or range.

    Raises:
        TypeError: If ``obj`` carries no capability tier.
    """
    if isinstance(obj, type) and issubclass(obj, Cursor):
        return obj.category
    if isinstance(obj, Cursor):
        return type(obj).category
    category = getattr(obj, "category", None)
    if isinstance(category, CursorCategory):
        return category
    raise TypeError(f"{type(obj).__name__} has no cursor category")


def common_category(*categories: CursorCategory) -> CursorCategory:
    """Return the weakest of the given tiers.

    Raises:
        ValueError: If no tiers are given.
    """
    if not categories:
        raise ValueError("common_category() requires at least one category")
    return min(categories)

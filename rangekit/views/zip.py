"""Zip view: traverse N ranges in lockstep as a range of tuples.

The zip stops at the shortest input. Two zip cursors compare equal as soon as
*any* pair of component cursors is equal, so a cursor whose shortest component
has run out compares equal to ``end()`` regardless of how far the other
components could still go.

The cursor class is picked once per collection from the weakest tier among the
inputs: :class:`ZipCursor` (forward only), :class:`BidirectionalZipCursor` or
:class:`RandomAccessZipCursor`. Algorithms such as
:func:`rangekit.algorithms.advance_bounded` therefore treat zip cursors like any
other cursor of that tier.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Sequence, Self, Tuple, Type

from rangekit.config import RANGE_CONFIG
from rangekit.cursors.base import (
    BidirectionalCursor,
    Cursor,
    RandomAccessCursor,
    category_of,
    common_category,
)
from rangekit.errors import CapabilityError, PreconditionError
from rangekit.logging import get_logger
from rangekit.ranges.adapt import as_range
from rangekit.ranges.base import Range, is_range
from rangekit.types.base import CursorCategory, Difference

logger = get_logger(__name__)

# Zip cursors are only created by ZipCollection.
_TOKEN = object()


class ZipCursor(Cursor[Tuple[Any, ...]]):
    """Forward cursor over a :class:`ZipCollection`.

    Holds one cursor per input range plus a reference to the parent
    collection, which supplies the ``begin()``/``end()`` bounds used by the
    stepping precondition checks.
    """

    category: ClassVar[CursorCategory] = CursorCategory.SINGLE_PASS

    def __init__(
        self,
        token: object,
        parent: ZipCollection,
        cursors: Tuple[Cursor[Any], ...],
        const: bool = False,
    ) -> None:
        if token is not _TOKEN:
            raise TypeError(
                f"{type(self).__name__} objects are obtained from ZipCollection.begin()/end()"
            )
        self._parent = parent
        self._cursors = cursors
        self._const = const

    @property
    def collection(self) -> ZipCollection:
        """The collection this cursor traverses."""
        return self._parent

    @property
    def components(self) -> Tuple[Cursor[Any], ...]:
        """Copies of the component cursors, in input order."""
        return tuple(c.copy() for c in self._cursors)

    @property
    def is_const(self) -> bool:
        return self._const or any(c.is_const for c in self._cursors)

    def read(self) -> Tuple[Any, ...]:
        return tuple(c.read() for c in self._cursors)

    def write(self, values: Sequence[Any]) -> None:
        """Write ``values[i]`` through component cursor ``i``.

        Raises:
            CapabilityError: If this cursor or any component is read-only.
            ValueError: If ``values`` does not have one entry per component.
        """
        if self.is_const:
            raise CapabilityError("cannot write through a const zip cursor")
        if len(values) != len(self._cursors):
            raise ValueError(
                f"expected {len(self._cursors)} values, got {len(values)}"
            )
        for cursor, value in zip(self._cursors, values):
            cursor.write(value)

    def equal(self, other: Cursor[Any]) -> bool:
        peer = self._peer(other)
        # Any pair equal: the shortest input decides where the zip ends.
        return any(a == b for a, b in zip(self._cursors, peer._cursors))

    def increment(self) -> None:
        if RANGE_CONFIG.checked and self == self._parent.end():
            logger.debug("increment of zip cursor at end")
            raise PreconditionError("cannot increment a zip cursor at the end position")
        for cursor in self._cursors:
            cursor.increment()

    def copy(self) -> Self:
        return type(self)(
            _TOKEN, self._parent, tuple(c.copy() for c in self._cursors), self._const
        )

    def assign(self, other: Cursor[Any]) -> None:
        if not isinstance(other, ZipCursor) or len(other._cursors) != len(self._cursors):
            raise TypeError(f"cannot assign {type(other).__name__} to {type(self).__name__}")
        pairs = list(zip(self._cursors, other._cursors))
        # Validate every component before moving any of them.
        for mine, theirs in pairs:
            if type(mine) is not type(theirs):
                raise TypeError(
                    f"cannot assign {type(theirs).__name__} to {type(mine).__name__}"
                )
            if theirs.is_const and not mine.is_const:
                raise CapabilityError(
                    "cannot assign a const zip cursor to a mutable zip cursor"
                )
        for mine, theirs in pairs:
            mine.assign(theirs)
        self._parent = other._parent

    def as_const(self) -> Self:
        """Return the const cursor at the same position.

        There is no conversion in the other direction.
        """
        return type(self)(
            _TOKEN, self._parent, tuple(c.as_const() for c in self._cursors), True
        )

    def _peer(self, other: Cursor[Any]) -> ZipCursor:
        if not isinstance(other, ZipCursor) or other._parent is not self._parent:
            logger.debug("comparing zip cursors from unrelated collections")
            raise PreconditionError("zip cursors belong to different collections")
        return other

    def __repr__(self) -> str:
        flag = ", const=True" if self._const else ""
        parts = ", ".join(repr(c) for c in self._cursors)
        return f"{type(self).__name__}({parts}{flag})"


class BidirectionalZipCursor(ZipCursor, BidirectionalCursor[Tuple[Any, ...]]):
    """Zip cursor over inputs that are all at least bidirectional."""

    category: ClassVar[CursorCategory] = CursorCategory.BIDIRECTIONAL

    def decrement(self) -> None:
        if RANGE_CONFIG.checked and self == self._parent.begin():
            logger.debug("decrement of zip cursor at begin")
            raise PreconditionError("cannot decrement a zip cursor at the begin position")
        for cursor in self._cursors:
            cursor.decrement()  # type: ignore[attr-defined]


class RandomAccessZipCursor(BidirectionalZipCursor, RandomAccessCursor[Tuple[Any, ...]]):
    """Zip cursor over inputs that are all random-access."""

    category: ClassVar[CursorCategory] = CursorCategory.RANDOM_ACCESS

    def advance(self, n: Difference) -> None:
        # Same relative offset for every component.
        for cursor in self._cursors:
            cursor.advance(n)  # type: ignore[attr-defined]

    def distance_to(self, other: Cursor[Any]) -> Difference:
        """Return the signed zip distance from this cursor to ``other``.

        Computes ``other_i - self_i`` per component. When the first component
        moves forward the smallest value wins (the shortest input runs out
        first); otherwise the largest value wins. Only the first component's
        sign decides which fold is used, so components that have drifted out
        of lockstep with mixed signs fold by that sign alone.
        """
        peer = self._peer(other)
        distances = [b - a for a, b in zip(self._cursors, peer._cursors)]
        if distances[0] > 0:
            return min(distances)
        return max(distances)


_CURSOR_TYPES: Dict[CursorCategory, Type[ZipCursor]] = {
    CursorCategory.SINGLE_PASS: ZipCursor,
    CursorCategory.BIDIRECTIONAL: BidirectionalZipCursor,
    CursorCategory.RANDOM_ACCESS: RandomAccessZipCursor,
}


class ZipCollection(Range[Tuple[Any, ...]]):
    """N ranges traversed together, yielding tuples until the shortest ends.

    The collection references its ranges; nothing is copied. Its capability
    tier is the weakest tier among the inputs.

    Args:
        *ranges: The ranges to zip, at least one.

    Raises:
        ValueError: If no ranges are given.
        TypeError: If an argument is not a :class:`Range`.
    """

    def __init__(self, *ranges: Range[Any]) -> None:
        if not ranges:
            raise ValueError("ZipCollection requires at least one range")
        for rng in ranges:
            if not is_range(rng):
                raise TypeError(f"expected a Range, got {type(rng).__name__}")
        self._ranges: Tuple[Range[Any], ...] = tuple(ranges)
        self.category = common_category(*(category_of(r) for r in ranges))
        self._cursor_type = _CURSOR_TYPES[self.category]
        logger.debug(
            "zip over %d range(s), category %s", len(ranges), self.category.name
        )

    def base(self) -> Tuple[Range[Any], ...]:
        """Return the zipped ranges in input order."""
        return self._ranges

    def begin(self) -> ZipCursor:
        return self._make(tuple(r.begin() for r in self._ranges), const=False)

    def end(self) -> ZipCursor:
        return self._make(tuple(r.end() for r in self._ranges), const=False)

    def cbegin(self) -> ZipCursor:
        return self._make(tuple(r.cbegin() for r in self._ranges), const=True)

    def cend(self) -> ZipCursor:
        return self._make(tuple(r.cend() for r in self._ranges), const=True)

    def _make(self, cursors: Tuple[Cursor[Any], ...], const: bool) -> ZipCursor:
        return self._cursor_type(_TOKEN, self, cursors, const)

    def __len__(self) -> int:
        if self.category is not CursorCategory.RANDOM_ACCESS:
            raise TypeError(f"len() requires a random-access zip, not {self.category.name}")
        # With an empty first input the distance fold picks the maximum.
        if self.empty():
            return 0
        return self.end() - self.begin()

    def __repr__(self) -> str:
        inner = ", ".join(repr(r) for r in self._ranges)
        return f"ZipCollection({inner})"


def zip_view(*sources: Any) -> ZipCollection:
    """Zip ranges, sequences, arrays or iterables into one range of tuples.

    Each source is adapted with :func:`rangekit.ranges.as_range`.

    Example:
        >>> list(zip_view([1, 2, 3], "ab"))
        [(1, 'a'), (2, 'b')]
    """
    return ZipCollection(*(as_range(s) for s in sources))

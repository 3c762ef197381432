"""Bounded and unbounded cursor advancement.

``advance_bounded`` moves a cursor toward a bound without crossing it. The
strategy is chosen from the cursor's class through ``functools.singledispatch``
over the capability interfaces, so a random-access cursor always takes the
O(1) path and the choice is cached per cursor class:

=================  ============================  ===========================
Tier               forward (n > 0)               backward (n < 0)
=================  ============================  ===========================
single-pass        step until bound, O(n)        CapabilityError
bidirectional      step until bound, O(n)        step until bound, O(|n|)
random-access      jump, O(1)                    jump, O(1)
=================  ============================  ===========================
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, Tuple, TypeVar

from rangekit.cursors.base import BidirectionalCursor, Cursor, RandomAccessCursor
from rangekit.errors import CapabilityError
from rangekit.logging import get_logger
from rangekit.types.base import Difference

C = TypeVar("C", bound=Cursor[Any])

logger = get_logger(__name__)


def advance_bounded(cursor: Cursor[Any], n: Difference, bound: Cursor[Any]) -> Difference:
    """Move ``cursor`` by up to ``n`` steps without crossing ``bound``.

    Args:
        cursor: Cursor to move in place.
        n: Signed step count. Positive moves forward, negative backward.
        bound: Position that must not be crossed (an end cursor when moving
            forward, a begin cursor when moving backward).

    Returns:
        The part of ``n`` that could not be consumed. It has the sign of ``n``
        and ``0`` means every step was taken.

    Raises:
        CapabilityError: If ``n < 0`` and the cursor cannot move backward.
    """
    if n > 0:
        return _forward_bounded(cursor, n, bound)
    if n < 0:
        return _backward_bounded(cursor, n, bound)
    return 0


@singledispatch
def _forward_bounded(cursor: Any, n: Difference, bound: Any) -> Difference:
    raise TypeError(f"{type(cursor).__name__} is not a cursor")


@_forward_bounded.register(Cursor)
def _(cursor: Cursor[Any], n: Difference, bound: Cursor[Any]) -> Difference:
    while n > 0 and cursor != bound:
        cursor.increment()
        n -= 1
    return n


@_forward_bounded.register(RandomAccessCursor)
def _(cursor: RandomAccessCursor[Any], n: Difference, bound: RandomAccessCursor[Any]) -> Difference:
    # A zip at its bound can still report room through its distance fold.
    if cursor == bound:
        return n
    room = bound - cursor
    if room < n:
        cursor.assign(bound)
        return n - room
    cursor.advance(n)
    return 0


@singledispatch
def _backward_bounded(cursor: Any, n: Difference, bound: Any) -> Difference:
    raise TypeError(f"{type(cursor).__name__} is not a cursor")


@_backward_bounded.register(Cursor)
def _(cursor: Cursor[Any], n: Difference, bound: Cursor[Any]) -> Difference:
    logger.debug("backward advance requested on %s", type(cursor).__name__)
    raise CapabilityError(f"{type(cursor).__name__} cannot move backward")


@_backward_bounded.register(BidirectionalCursor)
def _(cursor: BidirectionalCursor[Any], n: Difference, bound: BidirectionalCursor[Any]) -> Difference:
    while n < 0 and cursor != bound:
        cursor.decrement()
        n += 1
    return n


@_backward_bounded.register(RandomAccessCursor)
def _(cursor: RandomAccessCursor[Any], n: Difference, bound: RandomAccessCursor[Any]) -> Difference:
    if cursor == bound:
        return n
    room = -(cursor - bound)
    if n < room:
        cursor.assign(bound)
        return n - room
    cursor.advance(n)
    return 0


def next_bounded(cursor: C, n: Difference, bound: Cursor[Any]) -> Tuple[C, Difference]:
    """Return a copy of ``cursor`` moved by up to ``n`` steps, and the leftover.

    The original cursor is left untouched.
    """
    moved = cursor.copy()
    return moved, advance_bounded(moved, n, bound)


def prev_bounded(cursor: C, n: Difference, bound: Cursor[Any]) -> Tuple[C, Difference]:
    """Return a copy of ``cursor`` moved back by up to ``n`` steps, and the leftover.

    ``n`` counts backward steps, so the leftover is reported with the sign of
    ``n`` as well.
    """
    moved = cursor.copy()
    return moved, -advance_bounded(moved, -n, bound)


@singledispatch
def advance(cursor: Any, n: Difference) -> None:
    """Move ``cursor`` by ``n`` steps with no bound.

    Raises:
        CapabilityError: If ``n < 0`` and the cursor cannot move backward.
    """
    raise TypeError(f"{type(cursor).__name__} is not a cursor")


@advance.register(Cursor)
def _(cursor: Cursor[Any], n: Difference) -> None:
    if n < 0:
        raise CapabilityError(f"{type(cursor).__name__} cannot move backward")
    for _ in range(n):
        cursor.increment()


@advance.register(BidirectionalCursor)
def _(cursor: BidirectionalCursor[Any], n: Difference) -> None:
    for _ in range(n):
        cursor.increment()
    for _ in range(-n):
        cursor.decrement()


@advance.register(RandomAccessCursor)
def _(cursor: RandomAccessCursor[Any], n: Difference) -> None:
    cursor.advance(n)


@singledispatch
def distance(first: Any, last: Any) -> Difference:
    """Return the number of steps from ``first`` to ``last``.

    O(1) for random-access cursors. Other cursors are walked from a copy of
    ``first`` until they reach ``last``; for a single-pass stream this
    consumes the elements walked over.
    """
    raise TypeError(f"{type(first).__name__} is not a cursor")


@distance.register(Cursor)
def _(first: Cursor[Any], last: Cursor[Any]) -> Difference:
    walker = first.copy()
    count = 0
    while walker != last:
        walker.increment()
        count += 1
    return count


@distance.register(RandomAccessCursor)
def _(first: RandomAccessCursor[Any], last: RandomAccessCursor[Any]) -> Difference:
    return last - first

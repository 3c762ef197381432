"""Generic algorithms over cursors."""

from rangekit.algorithms.advance import (
    advance,
    advance_bounded,
    distance,
    next_bounded,
    prev_bounded,
)

__all__ = [
    "advance",
    "advance_bounded",
    "distance",
    "next_bounded",
    "prev_bounded",
]

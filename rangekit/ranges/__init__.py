"""Ranges: begin/end cursor pairs over sequences and streams."""

from rangekit.ranges.adapt import as_range
from rangekit.ranges.base import Range, is_range
from rangekit.ranges.sequence import BidirectionalRange, ForwardRange, SequenceRange
from rangekit.ranges.stream import StreamRange

__all__ = [
    "Range",
    "is_range",
    "as_range",
    "ForwardRange",
    "BidirectionalRange",
    "SequenceRange",
    "StreamRange",
]

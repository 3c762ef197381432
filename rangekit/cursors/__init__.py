"""Cursor capability interfaces and concrete cursors."""

from rangekit.cursors.base import (
    BidirectionalCursor,
    Cursor,
    RandomAccessCursor,
    category_of,
    common_category,
)
from rangekit.cursors.index import (
    BidirectionalIndexCursor,
    ForwardIndexCursor,
    IndexCursor,
)
from rangekit.cursors.stream import StreamCursor, StreamState

__all__ = [
    "Cursor",
    "BidirectionalCursor",
    "RandomAccessCursor",
    "category_of",
    "common_category",
    "ForwardIndexCursor",
    "BidirectionalIndexCursor",
    "IndexCursor",
    "StreamCursor",
    "StreamState",
]

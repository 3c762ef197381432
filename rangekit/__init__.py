"""rangekit: capability-tiered cursors, bounded advance and zip views.

rangekit models sequences as pairs of cursors whose capabilities (single-pass,
bidirectional, random-access) are fixed by their class. Algorithms dispatch on
that class to pick the cheapest correct strategy.

Primary API:
    advance_bounded() - Move a cursor toward a bound without crossing it
    zip_view() - Traverse several sequences in lockstep as tuples
    ZipCollection, ZipCursor - The zip range and its cursors
    as_range() - Adapt lists, tuples, strings, numpy arrays and iterators
    Cursor, BidirectionalCursor, RandomAccessCursor - Capability interfaces

Example:
    from rangekit import advance_bounded, zip_view

    z = zip_view([1, 2, 3], ["a", "b"])
    list(z)                      # [(1, 'a'), (2, 'b')]

    it = z.begin()
    leftover = advance_bounded(it, 5, z.end())   # leftover == 3, it == z.end()
"""

from __future__ import annotations

from rangekit import logging
from rangekit._version import __version__
from rangekit.algorithms.advance import (
    advance,
    advance_bounded,
    distance,
    next_bounded,
    prev_bounded,
)
from rangekit.config import RANGE_CONFIG, RangeConfig, configure
from rangekit.cursors.base import (
    BidirectionalCursor,
    Cursor,
    RandomAccessCursor,
    category_of,
    common_category,
)
from rangekit.cursors.index import BidirectionalIndexCursor, ForwardIndexCursor, IndexCursor
from rangekit.cursors.stream import StreamCursor
from rangekit.errors import CapabilityError, ContractError, PreconditionError
from rangekit.ranges import (
    BidirectionalRange,
    ForwardRange,
    Range,
    SequenceRange,
    StreamRange,
    as_range,
)
from rangekit.types.base import CursorCategory
from rangekit.views.zip import (
    BidirectionalZipCursor,
    RandomAccessZipCursor,
    ZipCollection,
    ZipCursor,
    zip_view,
)

__all__ = [
    # Version
    "__version__",
    # Algorithms
    "advance",
    "advance_bounded",
    "distance",
    "next_bounded",
    "prev_bounded",
    # Zip
    "zip_view",
    "ZipCollection",
    "ZipCursor",
    "BidirectionalZipCursor",
    "RandomAccessZipCursor",
    # Cursors
    "Cursor",
    "BidirectionalCursor",
    "RandomAccessCursor",
    "ForwardIndexCursor",
    "BidirectionalIndexCursor",
    "IndexCursor",
    "StreamCursor",
    "CursorCategory",
    "category_of",
    "common_category",
    # Ranges
    "Range",
    "ForwardRange",
    "BidirectionalRange",
    "SequenceRange",
    "StreamRange",
    "as_range",
    # Errors
    "ContractError",
    "CapabilityError",
    "PreconditionError",
    # Configuration
    "RangeConfig",
    "RANGE_CONFIG",
    "configure",
    # Utilities
    "logging",
]

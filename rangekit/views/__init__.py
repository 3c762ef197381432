"""Views composed from other ranges."""

from rangekit.views.zip import (
    BidirectionalZipCursor,
    RandomAccessZipCursor,
    ZipCollection,
    ZipCursor,
    zip_view,
)

__all__ = [
    "ZipCollection",
    "ZipCursor",
    "BidirectionalZipCursor",
    "RandomAccessZipCursor",
    "zip_view",
]

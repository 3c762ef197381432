"""Tests for cursor capability tags."""

import pytest

from rangekit.types.base import CursorCategory


def test_categories_are_ordered_by_capability():
    """Stronger tiers compare greater, so min() picks the weakest."""
    assert CursorCategory.SINGLE_PASS < CursorCategory.BIDIRECTIONAL
    assert CursorCategory.BIDIRECTIONAL < CursorCategory.RANDOM_ACCESS
    assert (
        min(CursorCategory.RANDOM_ACCESS, CursorCategory.SINGLE_PASS)
        is CursorCategory.SINGLE_PASS
    )


@pytest.mark.parametrize(
    "text,expected",
    [
        ("random_access", CursorCategory.RANDOM_ACCESS),
        ("Bidirectional", CursorCategory.BIDIRECTIONAL),
        ("single-pass", CursorCategory.SINGLE_PASS),
        (" SINGLE_PASS ", CursorCategory.SINGLE_PASS),
    ],
)
def test_from_string(text, expected):
    """Names parse case-insensitively, with dashes accepted for underscores."""
    assert CursorCategory.from_string(text) is expected


def test_from_string_invalid():
    """Invalid names list the valid choices."""
    with pytest.raises(ValueError, match="Valid values are: SINGLE_PASS"):
        CursorCategory.from_string("contiguous")

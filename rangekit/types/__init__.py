"""Shared type aliases and category tags."""

from rangekit.types.base import CursorCategory, Difference

__all__ = ["CursorCategory", "Difference"]

"""Capability tags and numeric aliases shared by cursors and algorithms."""

from __future__ import annotations

from enum import IntEnum

#: Signed step count between two cursor positions.
Difference = int


class CursorCategory(IntEnum):
    """Capability tier of a cursor type.

    Tiers are ordered: a stronger tier supports every operation of the weaker
    ones, so the common tier of a group of cursors is their ``min``.
    """

    #: Step forward, dereference, compare. Positions may not be revisited.
    SINGLE_PASS = 1
    #: Adds stepping backward.
    BIDIRECTIONAL = 2
    #: Adds O(1) offsetting and distance measurement.
    RANDOM_ACCESS = 3

    @classmethod
    def from_string(cls, value: str) -> "CursorCategory":
        """Parse a string into a CursorCategory enum value.

        Args:
            value: Case-insensitive name (e.g., "random_access", "BIDIRECTIONAL").

        Returns:
            The corresponding CursorCategory member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid cursor category '{value}'. Valid values are: {valid}"
            ) from None

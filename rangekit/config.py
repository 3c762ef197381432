"""Runtime configuration for rangekit cursors and views."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass
class RangeConfig:
    """Switches for the contract checks performed during traversal."""

    # Zip cursors verify they are not at end()/begin() before stepping.
    # Each check builds a bound cursor and compares N components.
    checked: bool = True

    # Index cursors verify both operands refer to the same sequence object
    # before comparing positions or measuring distance.
    check_same_sequence: bool = True

    def unchecked(self) -> RangeConfig:
        """Return a copy with every contract check disabled."""
        return replace(self, checked=False, check_same_sequence=False)


# Global configuration instance
RANGE_CONFIG = RangeConfig()


def configure(**overrides: Any) -> RangeConfig:
    """Update the global configuration in place.

    Args:
        **overrides: Field names of :class:`RangeConfig` and their new values.

    Returns:
        The (mutated) global configuration.

    Raises:
        ValueError: If an override names an unknown field.
    """
    known = {f.name for f in fields(RangeConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        valid = ", ".join(sorted(known))
        raise ValueError(
            f"Unknown configuration field(s): {', '.join(unknown)}. Valid fields are: {valid}"
        )
    for name, value in overrides.items():
        setattr(RANGE_CONFIG, name, value)
    return RANGE_CONFIG

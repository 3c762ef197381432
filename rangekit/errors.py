"""Contract-violation exceptions raised by cursors and algorithms.

These signal programming errors in the caller (stepping past a bound, asking a
single-pass cursor to move backward, and so on). They are raised explicitly
rather than through ``assert`` so they survive ``python -O``.
"""

from __future__ import annotations


class ContractError(AssertionError):
    """Base class for fatal cursor contract violations."""


class CapabilityError(ContractError):
    """An operation was requested that the cursor's tier or const-ness lacks."""


class PreconditionError(ContractError):
    """An operation was requested outside the cursor's valid range or domain."""

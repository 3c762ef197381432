"""Adapt arbitrary Python objects into ranges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import singledispatch
from typing import Any

import numpy as np

from rangekit.logging import get_logger
from rangekit.ranges.base import Range
from rangekit.ranges.sequence import SequenceRange
from rangekit.ranges.stream import StreamRange

logger = get_logger(__name__)


@singledispatch
def as_range(obj: Any) -> Range[Any]:
    """Return a range view of ``obj``.

    - Ranges are returned unchanged.
    - Sequences and numpy arrays become random-access :class:`SequenceRange`.
    - Any other iterable becomes a single-pass :class:`StreamRange`.

    Raises:
        TypeError: If ``obj`` is not iterable.
    """
    if isinstance(obj, Iterable):
        logger.debug("adapting %s as a single-pass stream", type(obj).__name__)
        return StreamRange(obj)
    raise TypeError(f"cannot adapt {type(obj).__name__} to a range")


@as_range.register(Range)
def _(obj: Range[Any]) -> Range[Any]:
    return obj


@as_range.register(Sequence)
def _(obj: Sequence[Any]) -> Range[Any]:
    return SequenceRange(obj)


@as_range.register(np.ndarray)
def _(obj: np.ndarray) -> Range[Any]:
    if obj.ndim == 0:
        raise TypeError("cannot adapt a 0-d array to a range")
    return SequenceRange(obj)

"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import fields

import pytest

from rangekit.config import RANGE_CONFIG


@pytest.fixture(autouse=True)
def _restore_range_config():
    """Restore the global configuration after each test."""
    saved = {f.name: getattr(RANGE_CONFIG, f.name) for f in fields(RANGE_CONFIG)}
    yield
    for name, value in saved.items():
        setattr(RANGE_CONFIG, name, value)

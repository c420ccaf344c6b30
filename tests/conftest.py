"""Shared fixtures for the SMPP time codec tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2011, 10, 19, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock():
    def now_fn() -> datetime:
        return FIXED_NOW

    return now_fn

"""Clock providers used to anchor relative and absolute timestamps."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def read_clock(now_fn: Clock) -> datetime:
    """Sample ``now_fn`` once, treating a naive result as UTC."""
    now = now_fn()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now


__all__ = ["Clock", "utc_now", "read_clock"]

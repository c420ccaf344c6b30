"""Exceptions raised by the SMPP time codec."""

from __future__ import annotations


class TimeFormatError(ValueError):
    """Raised when a timestamp does not match the SMPP wire format."""


class TimeOverflowError(OverflowError):
    """Raised when a duration cannot fit in the two-digit year field."""


__all__ = ["TimeFormatError", "TimeOverflowError"]

"""Absolute time resolution for SMPP timestamps tagged ``+`` or ``-``."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Tuple

from .errors import TimeFormatError
from .pattern import TimestampFields

MAX_QUARTER_HOURS = 95
CENTURY = 2000

_FIELD_RANGES = (
    ("month", 1, 12),
    ("day", 1, 31),
    ("hour", 0, 23),
    ("minute", 0, 59),
    ("second", 0, 59),
)


def quarter_hours_to_offset(quarter_hours: int, sign: str) -> timedelta:
    if not 0 <= quarter_hours <= MAX_QUARTER_HOURS:
        raise TimeFormatError(
            f"Time difference must be 0-{MAX_QUARTER_HOURS}, got {quarter_hours}"
        )
    if sign not in ("+", "-"):
        raise TimeFormatError(f"Invalid offset indicator {sign!r}")
    hours = quarter_hours >> 2
    minutes = (quarter_hours % 4) * 15
    direction = -1 if sign == "-" else 1
    return direction * timedelta(hours=hours, minutes=minutes)


def offset_to_quarter_hours(offset: timedelta) -> Tuple[int, str]:
    """Inverse of :func:`quarter_hours_to_offset`.

    A zero offset is always reported with a ``+`` sign.
    """
    if offset % timedelta(minutes=15):
        raise TimeFormatError(
            f"UTC offset {offset} is not a whole number of quarter hours"
        )
    sign = "-" if offset < timedelta(0) else "+"
    quarter_hours = abs(offset) // timedelta(minutes=15)
    if quarter_hours > MAX_QUARTER_HOURS:
        raise TimeFormatError(f"UTC offset {offset} is out of range")
    return quarter_hours, sign


def check_calendar_fields(fields: TimestampFields) -> None:
    for name, low, high in _FIELD_RANGES:
        value = getattr(fields, name)
        if not low <= value <= high:
            raise TimeFormatError(
                f'Timestamp "{fields.text}" has {name} {value} outside {low}-{high}'
            )


def resolve_absolute(fields: TimestampFields) -> datetime:
    if not fields.is_absolute:
        raise TimeFormatError(f'Timestamp "{fields.text}" is not absolute')
    check_calendar_fields(fields)
    offset = quarter_hours_to_offset(fields.quarter_hours, fields.tag)
    try:
        return datetime(
            year=CENTURY + fields.year,
            month=fields.month,
            day=fields.day,
            hour=fields.hour,
            minute=fields.minute,
            second=fields.second,
            tzinfo=timezone(offset),
        )
    except ValueError as exc:
        raise TimeFormatError(
            f'Timestamp "{fields.text}" is not a valid calendar date'
        ) from exc


__all__ = [
    "MAX_QUARTER_HOURS",
    "CENTURY",
    "quarter_hours_to_offset",
    "offset_to_quarter_hours",
    "check_calendar_fields",
    "resolve_absolute",
]

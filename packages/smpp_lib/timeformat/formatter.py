"""Encoding of durations and instants into SMPP time strings."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .absolute import offset_to_quarter_hours
from .errors import TimeFormatError
from .relative import RelativeBreakdown


def _check_century(dt: datetime, what: str) -> None:
    if not 2000 <= dt.year <= 2099:
        raise TimeFormatError(f"Year {dt.year} cannot be encoded in {what}")


def _two_digit_fields(*values: int) -> str:
    return "".join(f"{value:02d}" for value in values)


def format_relative(delta: timedelta) -> str:
    rel = RelativeBreakdown.from_timedelta(delta)
    return (
        _two_digit_fields(
            rel.years, rel.months, rel.days, rel.hours, rel.minutes, rel.seconds
        )
        + "000R"
    )


def format_absolute(dt: datetime) -> str:
    _check_century(dt, "an SMPP timestamp")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    offset = dt.utcoffset() or timedelta()
    quarter_hours, sign = offset_to_quarter_hours(offset)
    return (
        _two_digit_fields(
            dt.year % 100, dt.month, dt.day, dt.hour, dt.minute, dt.second
        )
        + "0"
        + f"{quarter_hours:02d}"
        + sign
    )


def format_dlr_timestamp(dt: datetime) -> str:
    _check_century(dt, "a delivery receipt")
    return _two_digit_fields(dt.year % 100, dt.month, dt.day, dt.hour, dt.minute)


__all__ = ["format_relative", "format_absolute", "format_dlr_timestamp"]

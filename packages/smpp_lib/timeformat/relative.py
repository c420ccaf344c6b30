"""Relative time handling for SMPP timestamps tagged ``R``.

SMPP relative times use a denormalised calendar: a year is always 365 days
and a month is always 30 days.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .errors import TimeFormatError, TimeOverflowError
from .pattern import TimestampFields

HOURS_PER_DAY = 24
HOURS_PER_MONTH = 30 * HOURS_PER_DAY
HOURS_PER_YEAR = 365 * HOURS_PER_DAY
MAX_YEARS = 99


@dataclass(frozen=True)
class RelativeBreakdown:
    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def total_seconds(self) -> int:
        total_hours = (
            self.years * HOURS_PER_YEAR
            + self.months * HOURS_PER_MONTH
            + self.days * HOURS_PER_DAY
            + self.hours
        )
        return (total_hours * 60 + self.minutes) * 60 + self.seconds

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.total_seconds())

    @classmethod
    def from_fields(cls, fields: TimestampFields) -> "RelativeBreakdown":
        return cls(
            years=fields.year,
            months=fields.month,
            days=fields.day,
            hours=fields.hour,
            minutes=fields.minute,
            seconds=fields.second,
        )

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "RelativeBreakdown":
        if delta < timedelta(0):
            raise TimeFormatError(f"Cannot encode negative duration {delta}")
        total = delta // timedelta(seconds=1)
        total_minutes, seconds = divmod(total, 60)
        total_hours, minutes = divmod(total_minutes, 60)
        years, total_hours = divmod(total_hours, HOURS_PER_YEAR)
        if years > MAX_YEARS:
            raise TimeOverflowError(
                f"Time duration {delta} overflows {MAX_YEARS} years"
            )
        months, total_hours = divmod(total_hours, HOURS_PER_MONTH)
        days, hours = divmod(total_hours, HOURS_PER_DAY)
        return cls(
            years=years,
            months=months,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
        )


def resolve_relative(fields: TimestampFields) -> timedelta:
    if not fields.is_relative:
        raise TimeFormatError(f'Timestamp "{fields.text}" is not relative')
    return RelativeBreakdown.from_fields(fields).to_timedelta()


__all__ = [
    "HOURS_PER_DAY",
    "HOURS_PER_MONTH",
    "HOURS_PER_YEAR",
    "MAX_YEARS",
    "RelativeBreakdown",
    "resolve_relative",
]

"""High level entry points for SMPP time strings."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, tzinfo
from typing import Union

from .absolute import resolve_absolute
from .clock import Clock, read_clock, utc_now
from .dlr import parse_dlr_timestamp as _parse_dlr
from .errors import TimeFormatError
from .formatter import format_absolute, format_relative
from .pattern import TextInput, match_smpp_timestamp
from .relative import resolve_relative
from .timestamps import AbsoluteTimestamp, ParsedTimestamp, RelativeTimestamp

FormattableTime = Union[timedelta, datetime, AbsoluteTimestamp, RelativeTimestamp]


class SMPPTimeCodec:
    """Parses and formats SMPP timestamps against an injectable clock."""

    def __init__(
        self,
        *,
        now_fn: Clock | None = None,
        dlr_tz: tzinfo | None = None,
        logger: logging.Logger | None = None,
    ):
        self._now_fn = now_fn or utc_now
        self._dlr_tz = dlr_tz
        self._logger = logger or logging.getLogger(__name__)

    @property
    def now_fn(self) -> Clock:
        return self._now_fn

    @property
    def dlr_tz(self) -> tzinfo | None:
        return self._dlr_tz

    def parse(
        self, data: TextInput, *, now_fn: Clock | None = None
    ) -> ParsedTimestamp:
        try:
            fields = match_smpp_timestamp(data)
            if fields.is_relative:
                duration = resolve_relative(fields)
                now = read_clock(now_fn or self._now_fn)
                return RelativeTimestamp(instant=now + duration, duration=duration)
            instant = resolve_absolute(fields)
        except TimeFormatError as exc:
            self._logger.debug("Rejected SMPP timestamp %r: %s", data, exc)
            raise
        now = read_clock(now_fn or self._now_fn)
        # Whole seconds, truncated toward zero.
        seconds = int((instant - now).total_seconds())
        return AbsoluteTimestamp(instant=instant, duration=timedelta(seconds=seconds))

    def parse_dlr(self, data: TextInput, tz: tzinfo | None = None) -> datetime:
        try:
            return _parse_dlr(data, tz if tz is not None else self._dlr_tz)
        except TimeFormatError as exc:
            self._logger.debug("Rejected delivery receipt timestamp %r: %s", data, exc)
            raise

    def format(self, value: FormattableTime) -> str:
        if isinstance(value, (AbsoluteTimestamp, RelativeTimestamp)):
            return value.to_smpp_string()
        if isinstance(value, timedelta):
            return format_relative(value)
        if isinstance(value, datetime):
            return format_absolute(value)
        raise TypeError(f"Unsupported SMPP time value {type(value).__name__}")


_default_codec = SMPPTimeCodec()


def parse_smpp_timestamp(
    data: TextInput, *, now_fn: Clock | None = None
) -> ParsedTimestamp:
    return _default_codec.parse(data, now_fn=now_fn)


def parse_dlr_timestamp(data: TextInput, tz: tzinfo | None = None) -> datetime:
    return _default_codec.parse_dlr(data, tz)


def to_smpp_time_string(value: FormattableTime) -> str:
    return _default_codec.format(value)


__all__ = [
    "FormattableTime",
    "SMPPTimeCodec",
    "parse_smpp_timestamp",
    "parse_dlr_timestamp",
    "to_smpp_time_string",
]

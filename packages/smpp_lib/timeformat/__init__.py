"""SMPP ``YYMMDDhhmmsstnnp`` and delivery receipt time codecs."""

from __future__ import annotations

from .absolute import (
    offset_to_quarter_hours,
    quarter_hours_to_offset,
    resolve_absolute,
)
from .clock import Clock, utc_now
from .codec import (
    SMPPTimeCodec,
    parse_dlr_timestamp,
    parse_smpp_timestamp,
    to_smpp_time_string,
)
from .errors import TimeFormatError, TimeOverflowError
from .formatter import format_absolute, format_dlr_timestamp, format_relative
from .pattern import TimestampFields, match_smpp_timestamp
from .relative import RelativeBreakdown, resolve_relative
from .timestamps import AbsoluteTimestamp, ParsedTimestamp, RelativeTimestamp

__all__ = [
    "Clock",
    "utc_now",
    "TimeFormatError",
    "TimeOverflowError",
    "TimestampFields",
    "match_smpp_timestamp",
    "quarter_hours_to_offset",
    "offset_to_quarter_hours",
    "resolve_absolute",
    "RelativeBreakdown",
    "resolve_relative",
    "format_relative",
    "format_absolute",
    "format_dlr_timestamp",
    "AbsoluteTimestamp",
    "RelativeTimestamp",
    "ParsedTimestamp",
    "SMPPTimeCodec",
    "parse_smpp_timestamp",
    "parse_dlr_timestamp",
    "to_smpp_time_string",
]

"""Public API for the SMPP protocol helpers."""

from __future__ import annotations

from .timeformat import (
    AbsoluteTimestamp,
    ParsedTimestamp,
    RelativeBreakdown,
    RelativeTimestamp,
    SMPPTimeCodec,
    TimeFormatError,
    TimeOverflowError,
    parse_dlr_timestamp,
    parse_smpp_timestamp,
    to_smpp_time_string,
)

__version__ = "0.1.0"

__all__ = [
    "AbsoluteTimestamp",
    "RelativeTimestamp",
    "ParsedTimestamp",
    "RelativeBreakdown",
    "SMPPTimeCodec",
    "TimeFormatError",
    "TimeOverflowError",
    "parse_smpp_timestamp",
    "parse_dlr_timestamp",
    "to_smpp_time_string",
]

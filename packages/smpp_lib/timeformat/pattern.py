"""Validation and decomposition of ``YYMMDDhhmmsstnnp`` strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from .errors import TimeFormatError

SMPP_TIME_PATTERN = re.compile(
    r"(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})(\d{1})(\d{2})([R+-])",
    re.ASCII,
)

RELATIVE_TAG = "R"
ABSOLUTE_TAGS = ("+", "-")

TextInput = Union[str, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class TimestampFields:
    """The nine fields captured from an SMPP time string."""

    text: str
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    tenths: int
    quarter_hours: int
    tag: str

    @property
    def is_relative(self) -> bool:
        return self.tag == RELATIVE_TAG

    @property
    def is_absolute(self) -> bool:
        return self.tag in ABSOLUTE_TAGS


def coerce_text(data: TextInput) -> str:
    if isinstance(data, str):
        return data
    if isinstance(data, memoryview):
        data = bytes(data)
    if isinstance(data, (bytes, bytearray)):
        try:
            return data.decode("ascii")
        except UnicodeDecodeError as exc:
            raise TimeFormatError(f"Timestamp {data!r} is not ASCII") from exc
    raise TimeFormatError(
        f"Timestamp {data!r} must be text, got {type(data).__name__}"
    )


def match_smpp_timestamp(data: TextInput) -> TimestampFields:
    text = coerce_text(data)
    match = SMPP_TIME_PATTERN.fullmatch(text)
    if match is None:
        raise TimeFormatError(f'Timestamp "{text}" has the wrong format.')
    yy, mon, dd, hh, mm, ss, t, nn, tag = match.groups()
    return TimestampFields(
        text=text,
        year=int(yy),
        month=int(mon),
        day=int(dd),
        hour=int(hh),
        minute=int(mm),
        second=int(ss),
        tenths=int(t),
        quarter_hours=int(nn),
        tag=tag,
    )


__all__ = [
    "SMPP_TIME_PATTERN",
    "RELATIVE_TAG",
    "ABSOLUTE_TAGS",
    "TextInput",
    "TimestampFields",
    "coerce_text",
    "match_smpp_timestamp",
]

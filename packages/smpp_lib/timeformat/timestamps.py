"""Dataclasses describing parsed SMPP timestamps."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Union

from .formatter import format_absolute, format_relative


@dataclass(frozen=True)
class AbsoluteTimestamp:
    instant: datetime
    duration: timedelta

    @property
    def is_relative(self) -> bool:
        return False

    @property
    def is_absolute(self) -> bool:
        return True

    def to_smpp_string(self) -> str:
        return format_absolute(self.instant)


@dataclass(frozen=True)
class RelativeTimestamp:
    instant: datetime
    duration: timedelta

    @property
    def is_relative(self) -> bool:
        return True

    @property
    def is_absolute(self) -> bool:
        return False

    def to_smpp_string(self) -> str:
        return format_relative(self.duration)


ParsedTimestamp = Union[AbsoluteTimestamp, RelativeTimestamp]


__all__ = ["AbsoluteTimestamp", "RelativeTimestamp", "ParsedTimestamp"]

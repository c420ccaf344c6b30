"""Delivery receipt timestamp parsing (``YYMMDDhhmm``)."""

from __future__ import annotations

import re
from datetime import datetime, tzinfo
from typing import Optional

from .absolute import CENTURY
from .errors import TimeFormatError
from .pattern import TextInput, coerce_text

DLR_TIME_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})", re.ASCII)


def parse_dlr_timestamp(data: TextInput, tz: Optional[tzinfo] = None) -> datetime:
    text = coerce_text(data)
    match = DLR_TIME_PATTERN.fullmatch(text)
    if match is None:
        raise TimeFormatError(
            f'Delivery receipt timestamp "{text}" has the wrong format.'
        )
    yy, mon, dd, hh, mm = (int(group) for group in match.groups())
    try:
        return datetime(
            year=CENTURY + yy,
            month=mon,
            day=dd,
            hour=hh,
            minute=mm,
            second=0,
            tzinfo=tz,
        )
    except ValueError as exc:
        raise TimeFormatError(
            f'Delivery receipt timestamp "{text}" is not a valid calendar date'
        ) from exc


__all__ = ["DLR_TIME_PATTERN", "parse_dlr_timestamp"]

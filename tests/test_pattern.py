"""Unit tests for the SMPP time string pattern matcher."""

from __future__ import annotations

import pytest

from smpp_lib.timeformat import TimeFormatError, match_smpp_timestamp


def test_match_absolute_fields() -> None:
    fields = match_smpp_timestamp("111019103011100+")
    assert (fields.year, fields.month, fields.day) == (11, 10, 19)
    assert (fields.hour, fields.minute, fields.second) == (10, 30, 11)
    assert fields.tenths == 1
    assert fields.quarter_hours == 0
    assert fields.tag == "+"
    assert fields.is_absolute
    assert not fields.is_relative


def test_match_relative_fields() -> None:
    fields = match_smpp_timestamp("000002000000000R")
    assert fields.day == 2
    assert fields.is_relative
    assert not fields.is_absolute


def test_match_accepts_bytes() -> None:
    fields = match_smpp_timestamp(b"111019080000004-")
    assert fields.text == "111019080000004-"
    assert fields.tag == "-"


@pytest.mark.parametrize(
    "text",
    [
        "11101910301110+",
        "000002000000000r",
        "0000020000AA000R",
        "",
        "111019103011100+0",
        "111019103011100+\n",
        "111019103011100*",
        "١١١019103011100+",
    ],
)
def test_match_rejects_malformed(text: str) -> None:
    with pytest.raises(TimeFormatError) as exc_info:
        match_smpp_timestamp(text)
    assert f'"{text}"' in str(exc_info.value)


def test_match_rejects_non_ascii_bytes() -> None:
    with pytest.raises(TimeFormatError):
        match_smpp_timestamp(b"\xff11019103011100+")


def test_match_rejects_non_text() -> None:
    with pytest.raises(TimeFormatError) as exc_info:
        match_smpp_timestamp(12345)  # type: ignore[arg-type]
    assert "12345" in str(exc_info.value)


def test_format_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        match_smpp_timestamp("bogus")

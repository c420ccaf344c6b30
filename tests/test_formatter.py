"""Unit tests for SMPP time string formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from smpp_lib.timeformat import (
    TimeFormatError,
    TimeOverflowError,
    format_absolute,
    format_dlr_timestamp,
    format_relative,
    match_smpp_timestamp,
    resolve_absolute,
)


def test_format_relative_two_days() -> None:
    assert format_relative(timedelta(hours=48)) == "000002000000000R"


def test_format_relative_largest_year_count() -> None:
    delta = timedelta(hours=875043, minutes=34, seconds=29)
    assert format_relative(delta) == "991025033429000R"


def test_format_relative_overflow() -> None:
    with pytest.raises(TimeOverflowError):
        format_relative(timedelta(hours=876143, minutes=34, seconds=29))


def test_format_relative_overflow_is_builtin_overflow() -> None:
    with pytest.raises(OverflowError):
        format_relative(timedelta(days=365 * 100))


def test_format_relative_carries_minutes() -> None:
    assert format_relative(timedelta(hours=48, minutes=65)) == "000002010500000R"


def test_format_relative_zero() -> None:
    assert format_relative(timedelta(0)) == "000000000000000R"


def test_format_relative_rejects_negative() -> None:
    with pytest.raises(TimeFormatError):
        format_relative(timedelta(minutes=-5))


@pytest.mark.parametrize(
    "text",
    [
        "111019080000002+",
        "111019080000017+",
        "111019080000004-",
        "991231235959095-",
        "000101000000048+",
    ],
)
def test_format_absolute_inverts_resolution(text: str) -> None:
    assert format_absolute(resolve_absolute(match_smpp_timestamp(text))) == text


def test_format_absolute_zero_offset() -> None:
    assert format_absolute(resolve_absolute(match_smpp_timestamp("111019080000000-"))) == (
        "111019080000000+"
    )


def test_format_absolute_summer_time_offset() -> None:
    cest = timezone(timedelta(hours=2), "CEST")
    dt = datetime(2011, 10, 19, 9, 30, tzinfo=cest)
    assert format_absolute(dt) == "111019093000008+"


def test_format_absolute_naive_is_utc() -> None:
    assert format_absolute(datetime(2014, 2, 3, 13, 37, 5)) == "140203133705000+"


def test_format_absolute_drops_subseconds() -> None:
    dt = datetime(2014, 2, 3, 13, 37, 5, 900000, tzinfo=timezone.utc)
    assert format_absolute(dt) == "140203133705000+"


def test_format_absolute_rejects_odd_offset() -> None:
    dt = datetime(2014, 2, 3, 13, 37, tzinfo=timezone(timedelta(minutes=20)))
    with pytest.raises(TimeFormatError):
        format_absolute(dt)


def test_format_dlr_timestamp() -> None:
    assert format_dlr_timestamp(datetime(2014, 2, 3, 13, 37, 59)) == "1402031337"


def test_format_dlr_timestamp_rejects_other_centuries() -> None:
    with pytest.raises(TimeFormatError):
        format_dlr_timestamp(datetime(1999, 12, 31, 23, 59))


@pytest.mark.parametrize(
    "dt",
    [
        datetime(1999, 12, 31, 23, tzinfo=timezone.utc),
        datetime(2100, 1, 1, tzinfo=timezone.utc),
    ],
)
def test_format_absolute_rejects_other_centuries(dt: datetime) -> None:
    with pytest.raises(TimeFormatError):
        format_absolute(dt)

"""
Tests for ``urlhits.date_helpers``.
"""

import datetime

import pytest

from urlhits.date_helpers import (
    date_key_from_date,
    date_key_from_timestamp,
    format_date_key,
    InvalidDateKey,
)


@pytest.mark.parametrize(
    ["ts", "date_key"],
    [
        (0, 19700101),
        (1700000000, 20231114),
        (1700000001, 20231114),
        (1700086400, 20231115),
        (1709596799, 20240304),
        (1709596800, 20240305),
        (-1, 19691231),
        (-86400, 19691231),
        (-86401, 19691230),
        (-30610224000, 10000101),
        (253402300799, 99991231),
    ],
)
def test_date_key_from_timestamp(ts: int, date_key: int) -> None:
    """
    A timestamp is turned into the UTC day it falls on.
    """
    assert date_key_from_timestamp(ts) == date_key


@pytest.mark.parametrize(
    "ts",
    [
        # 31 December 0999, which doesn't have a 4-digit year
        -30610224001,
        # 1 January 10000
        253402300800,
        9223372036854775807,
        -9223372036854775808,
    ],
)
def test_timestamp_without_a_date_key(ts: int) -> None:
    """
    If a timestamp is on a day without a 4-digit year, there's no
    8-digit date key for it.
    """
    assert date_key_from_timestamp(ts) is None


def test_date_key_from_date() -> None:
    assert date_key_from_date(datetime.date(2024, 3, 5)) == 20240305


def test_date_key_sorts_chronologically() -> None:
    """
    Sorting date keys as ints is the same as sorting the dates.
    """
    dates = [
        datetime.date(2023, 12, 31),
        datetime.date(2024, 1, 1),
        datetime.date(1999, 9, 9),
        datetime.date(2024, 10, 2),
        datetime.date(2024, 2, 10),
    ]

    assert sorted(date_key_from_date(d) for d in dates) == [
        date_key_from_date(d) for d in sorted(dates)
    ]


@pytest.mark.parametrize(
    ["date_key", "label"],
    [
        (20240305, "03/05/2024 GMT"),
        (20231114, "11/14/2023 GMT"),
        (19691231, "12/31/1969 GMT"),
    ],
)
def test_format_date_key(date_key: int, label: str) -> None:
    assert format_date_key(date_key) == label


def test_date_key_round_trip() -> None:
    """
    Encoding a day and decoding it again gets the label for that day.
    """
    ts = int(datetime.datetime(2024, 3, 5, 12, 30, tzinfo=datetime.UTC).timestamp())

    date_key = date_key_from_timestamp(ts)
    assert date_key is not None

    assert format_date_key(date_key) == "03/05/2024 GMT"


@pytest.mark.parametrize("date_key", [0, 2024035, 202403051, -2024035])
def test_invalid_date_key_is_error(date_key: int) -> None:
    """
    A date key that isn't exactly 8 digits can't be formatted.
    """
    with pytest.raises(InvalidDateKey, match="Invalid date key"):
        format_date_key(date_key)

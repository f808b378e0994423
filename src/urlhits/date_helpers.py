"""
Helpers for turning timestamps into date keys, and date keys back into
something a human can read.

A date key is an int like ``20240305`` -- the UTC calendar day written
as YYYYMMDD.  Because it's fixed-width and big-endian, sorting the ints
sorts the days chronologically.
"""

import datetime


DATE_LABEL_SUFFIX = "GMT"


class InvalidDateKey(ValueError):
    """
    Thrown if a date key isn't exactly 8 digits.

    Every key we create goes through ``date_key_from_date()``, so seeing
    this means something upstream is broken.
    """

    pass


def date_key_from_date(d: datetime.date) -> int:
    """
    Encode a date as YYYYMMDD, e.g.

        >>> date_key_from_date(datetime.date(2024, 3, 5))
        20240305

    """
    return d.year * 10000 + d.month * 100 + d.day


def date_key_from_timestamp(ts: int) -> int | None:
    """
    Return the date key for the UTC day containing this Unix timestamp.

    Returns None if the timestamp can't be placed on a day with a 4-digit
    year, because then there's no 8-digit key for it.
    """
    try:
        d = datetime.datetime.fromtimestamp(ts, tz=datetime.UTC).date()
    except (OverflowError, OSError, ValueError):
        return None

    if d.year < 1000:
        return None

    return date_key_from_date(d)


def format_date_key(date_key: int) -> str:
    """
    Turn a date key back into a label for the report, e.g.

        >>> format_date_key(20240305)
        '03/05/2024 GMT'

    """
    key = str(date_key)

    if len(key) != 8 or not key.isdigit():
        raise InvalidDateKey(f"Invalid date key: {key}")

    return f"{key[4:6]}/{key[6:]}/{key[:4]} {DATE_LABEL_SUFFIX}"

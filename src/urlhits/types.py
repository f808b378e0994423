"""
Types.
"""

import collections
import typing


# A UTC calendar day written as YYYYMMDD, e.g. 20240305
DateKey = int

# url -> number of hits
UrlCounts = collections.Counter[str]


class UrlHit(typing.TypedDict):
    """
    The number of times a single URL was requested on a single day.
    """

    url: str
    hits: int


class DailyReport(typing.TypedDict):
    """
    All the hits for one day, with the most popular URLs first.
    """

    date_key: DateKey
    date: str
    hits: list[UrlHit]


class ParseStatistics(typing.TypedDict):
    """
    A tally of how much of the input we were able to use.
    """

    lines_read: int
    lines_skipped: int
    hits_recorded: int

"""
Render the per-day report, e.g.

    11/14/2023 GMT
    /a 2
    /b 1
    11/15/2023 GMT
    /c 2

"""

from collections.abc import Iterator
import typing

from .aggregator import HitAggregator
from .date_helpers import format_date_key
from .types import DailyReport


# Undecodable bytes in the log become lone surrogates when we read it,
# and turn back into the same bytes when we write the report.
LOG_ENCODING = "utf-8"
LOG_ERRORS = "surrogateescape"


def build_report(aggregator: HitAggregator) -> Iterator[DailyReport]:
    """
    Generate one entry per day, oldest day first.

    This will throw ``InvalidDateKey`` if one of the days can't be
    turned back into a date.
    """
    for date_key in aggregator.dates():
        yield {
            "date_key": date_key,
            "date": format_date_key(date_key),
            "hits": aggregator.count_hits_per_url(date_key),
        }


def render_report(aggregator: HitAggregator) -> Iterator[str]:
    """
    Generate the lines of the report, without trailing newlines.
    """
    for day in build_report(aggregator):
        yield day["date"]

        for entry in day["hits"]:
            yield f"{entry['url']} {entry['hits']}"


def write_report(aggregator: HitAggregator, out: typing.BinaryIO) -> None:
    """
    Write the report to a binary stream as UTF-8.

    URLs which weren't valid UTF-8 in the log are written back out as
    the bytes they started as.
    """
    for line in render_report(aggregator):
        out.write(line.encode(LOG_ENCODING, LOG_ERRORS) + b"\n")

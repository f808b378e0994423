"""
Tally hits per URL, per day.

This is where all the counting happens: the report code only reads
what's been collected here.
"""

from collections.abc import Iterable
import collections

from .date_helpers import date_key_from_timestamp
from .parser import parse_line
from .types import DateKey, ParseStatistics, UrlCounts, UrlHit


class HitAggregator:
    """
    Collects hit counts from an access log, and provides some convenience
    methods for querying them once the whole log has been read.
    """

    def __init__(self) -> None:
        """
        Create a new, empty instance of HitAggregator.
        """
        # date key -> dict(url -> hits)
        self.hit_table: dict[DateKey, UrlCounts] = {}

        # Date keys in the order we first saw them.  This only gets
        # sorted once, in ``finish()``, rather than on every new day.
        self.date_order: list[DateKey] = []

        self.lines_read = 0
        self.lines_skipped = 0
        self.hits_recorded = 0

        self._is_sorted = False

    def __len__(self) -> int:
        return len(self.hit_table)

    def add_line(self, line: str) -> bool:
        """
        Record a single line from the log.

        Returns True if the line was counted, False if it was skipped
        because it couldn't be parsed.
        """
        self.lines_read += 1

        parsed = parse_line(line)

        if parsed is None:
            self.lines_skipped += 1
            return False

        ts, url = parsed

        date_key = date_key_from_timestamp(ts)

        if date_key is None:
            self.lines_skipped += 1
            return False

        try:
            bucket = self.hit_table[date_key]
        except KeyError:
            bucket = self.hit_table[date_key] = collections.Counter()
            self.date_order.append(date_key)
            self._is_sorted = False

        bucket[url] += 1
        self.hits_recorded += 1

        return True

    def consume(self, lines: Iterable[str]) -> "HitAggregator":
        """
        Record every line from ``lines``, then sort the days.

        Any error from reading ``lines`` (e.g. an I/O error halfway
        through a file) is passed straight through.
        """
        for line in lines:
            self.add_line(line)

        self.finish()

        return self

    def finish(self) -> None:
        """
        Put the days in chronological order.
        """
        if not self._is_sorted:
            self.date_order.sort()
            self._is_sorted = True

    def dates(self) -> list[DateKey]:
        """
        Return the date key of every day that had at least one hit,
        in chronological order.
        """
        self.finish()
        return list(self.date_order)

    def count_hits_per_url(self, date_key: DateKey) -> list[UrlHit]:
        """
        Given a day, return the hits for each URL on that day, e.g.

            [{"url": "/a", "hits": 2}, {"url": "/b", "hits": 1}, …]

        The most popular URLs come first.  If two URLs have the same
        number of hits, they're sorted by URL.
        """
        counts = self.hit_table.get(date_key, collections.Counter())

        return [
            {"url": url, "hits": hits}
            for url, hits in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        ]

    @property
    def statistics(self) -> ParseStatistics:
        """
        How many lines we've read, and how many of them we could use.
        """
        return {
            "lines_read": self.lines_read,
            "lines_skipped": self.lines_skipped,
            "hits_recorded": self.hits_recorded,
        }


def aggregate(lines: Iterable[str]) -> HitAggregator:
    """
    Read every line of an access log, and return the tallied hits.
    """
    return HitAggregator().consume(lines)

"""
Parse lines from an access log.

Each line should look like

    1700000000|/2023/some-post/

i.e. a Unix timestamp and a URL, separated by a pipe.  Access logs are
messy, so anything that doesn't fit this shape is dropped rather than
treated as an error.
"""

import re


FIELD_SEPARATOR = "|"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Only plain ASCII digits with an optional sign -- ``int()`` on its own
# would also accept whitespace, underscores and non-ASCII digits.
TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


def parse_timestamp(text: str) -> int | None:
    """
    Parse a Unix timestamp, or return None if it isn't a base-10 integer
    that fits in a signed 64-bit int.
    """
    if TIMESTAMP_RE.fullmatch(text) is None:
        return None

    # Very long strings of digits hit Python's int conversion limit.
    try:
        ts = int(text)
    except ValueError:
        return None

    if not INT64_MIN <= ts <= INT64_MAX:
        return None

    return ts


def parse_line(line: str) -> tuple[int, str] | None:
    """
    Split a log line into a (timestamp, url) pair.

    Returns None if the line doesn't have exactly two fields, or if the
    timestamp can't be parsed.  The URL is passed through untouched.
    """
    line = line.removesuffix("\n").removesuffix("\r")

    parts = line.split(FIELD_SEPARATOR)

    if len(parts) != 2:
        return None

    timestamp, url = parts

    ts = parse_timestamp(timestamp)

    if ts is None:
        return None

    return ts, url

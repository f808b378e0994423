"""
Command-line entry point.

    $ urlhits access.log
    11/14/2023 GMT
    /a 2
    /b 1

This reads the whole log before printing anything.
"""

import argparse
import logging
import pathlib
import sys
import typing

import humanize
import tqdm

from .aggregator import HitAggregator
from .date_helpers import InvalidDateKey
from .report import LOG_ENCODING, LOG_ERRORS, write_report


logger = logging.getLogger("urlhits")


class ArgumentParser(argparse.ArgumentParser):
    """
    An argument parser which prints usage errors to stdout and exits
    with status 1, rather than argparse's default of stderr and 2.
    """

    def error(self, message: str) -> typing.NoReturn:
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        sys.exit(1)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = ArgumentParser(
        prog="urlhits",
        description="Count hits per URL in an access log, grouped by UTC day.",
    )

    parser.add_argument(
        "path", type=pathlib.Path, help="path to a log with lines like 'TIMESTAMP|URL'"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="log a summary of how many lines were used or skipped",
    )
    parser.add_argument(
        "--progress", action="store_true", help="show a progress bar while reading"
    )

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    """
    Send log messages to stderr, so they don't get mixed up with
    the report on stdout.
    """
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)


def read_log(path: pathlib.Path, *, progress: bool = False) -> HitAggregator:
    """
    Read and tally every line in the log at ``path``.

    Lines are only split on ``\\n``.  Bytes that aren't valid UTF-8 are
    kept (as surrogates) rather than treated as an error, so two URLs
    that differ only in those bytes are still counted separately.
    """
    aggregator = HitAggregator()

    with open(
        path, encoding=LOG_ENCODING, errors=LOG_ERRORS, newline="\n"
    ) as in_file:
        lines = tqdm.tqdm(in_file, desc=path.name, unit=" lines", disable=not progress)
        aggregator.consume(lines)

    return aggregator


def log_summary(aggregator: HitAggregator) -> None:
    stats = aggregator.statistics

    logger.info(
        "Read %s lines: recorded %s hits across %s days, skipped %s lines",
        humanize.intcomma(stats["lines_read"]),
        humanize.intcomma(stats["hits_recorded"]),
        humanize.intcomma(len(aggregator)),
        humanize.intcomma(stats["lines_skipped"]),
    )


def write_output(aggregator: HitAggregator) -> None:
    """
    Print the report to stdout.

    This writes bytes rather than text, so it doesn't depend on the
    terminal's encoding.
    """
    sys.stdout.flush()
    write_report(aggregator, sys.stdout.buffer)
    sys.stdout.buffer.flush()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    setup_logging(verbose=args.verbose)

    logger.info("Reading access log from %s", args.path)

    try:
        aggregator = read_log(args.path, progress=args.progress)
        log_summary(aggregator)
        write_output(aggregator)
    except (OSError, InvalidDateKey) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0

from collections.abc import Callable
import pathlib

import pytest


@pytest.fixture
def log_file(tmp_path: pathlib.Path) -> Callable[[str], pathlib.Path]:
    """
    Returns a function that writes an access log into ``tmp_path``,
    and returns the path to the log.
    """

    def write_log(contents: str, name: str = "access.log") -> pathlib.Path:
        path = tmp_path / name
        path.write_bytes(contents.encode("utf-8"))
        return path

    return write_log


@pytest.fixture
def example_log() -> str:
    """
    A short log covering two days, with one malformed line.

    1700000000 and 1700000001 are both on 14 November 2023 (UTC), and
    1700086400 is exactly one day later.
    """
    return (
        "1700000000|/a\n"
        "1700000000|/b\n"
        "1700000001|/a\n"
        "1700086400|/c\n"
        "not-a-valid-line\n"
        "1700086400|/c\n"
    )

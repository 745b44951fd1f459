"""Reading and checking the description of a board."""

from __future__ import annotations

from typing import Iterable, List

from alumgame.chars import is_digit
from alumgame.numbers import atoi

MAX_MATCHES = 10000


class BoardError(Exception):
    """A board description that cannot be played."""


def is_number(line: str) -> bool:
    """True when every character of the line is a decimal digit."""
    return all(is_digit(c) for c in line)


def parse_row(line: str) -> int:
    """The number of matches a line describes, from 1 to 10000."""
    if not is_number(line):
        raise BoardError("ERROR. Number is wrong")
    num = atoi(line)
    if num < 1:
        raise BoardError("ERROR. Number is < than 1.")
    if num > MAX_MATCHES:
        raise BoardError("ERROR. Number is > than 10000.")
    return num


def read_rows(lines: Iterable[str], stop_at_blank: bool = False) -> List[int]:
    """Row sizes from lines until their end, or until a blank line if asked to."""
    rows = []
    for line in lines:
        if stop_at_blank and line == "":
            break
        rows.append(parse_row(line))
    if not rows:
        raise BoardError("Error. Number of matches is 0.")
    return rows


def usage() -> str:
    """The command-line usage line."""
    return "alum1 [FILE]"
"""Formatting and parsing helpers for the phone book."""

from __future__ import annotations

import re

COLUMN_WIDTH = 10

_RED = "\033[31m"
_RESET = "\033[0m"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def error_text(message: str) -> str:
    """Return the message wrapped in red terminal colour codes."""
    return f"{_RED}{message}{_RESET}"


def parse_index(text: str) -> int:
    """Parse a whole string as a 32-bit integer.

    Leading whitespace is allowed; anything after the digits is not.
    Raises ValueError when the text is not such an integer.
    """
    match = _INTEGER.fullmatch(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def truncate(text: str) -> str:
    """Fit text into a column, replacing overflow with a trailing dot."""
    if len(text) > COLUMN_WIDTH:
        return text[: COLUMN_WIDTH - 1] + "."
    return text


def search_header() -> str:
    """Return the header line of the contact table."""
    titles = ("index", "first name", "last name", "nickname")
    return "|".join(f"{title:>{COLUMN_WIDTH}}" for title in titles)
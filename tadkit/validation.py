"""Checks and a prompting loop for the package's interactive commands."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

_DECIMAL_MARKS = frozenset(",. ")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _strip_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


def has_decimal_mark(text: str) -> bool:
    """Return True if the text holds a comma, a period or a space."""
    return any(char in _DECIMAL_MARKS for char in text)


def parse_int(text: str, low: int | None = None, high: int | None = None) -> int:
    """Read the integer at the start of ``text`` and check it lies in [low, high].

    Text with a decimal mark is rejected, as is text that does not start with
    an integer. Characters after the leading integer are ignored.
    Raises ValueError when the text is not acceptable.
    """
    text = _strip_newline(text)
    if has_decimal_mark(text):
        raise ValueError(f"not a whole number: {text!r}")
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = int(match.group(1))
    if low is not None and value < low:
        raise ValueError(f"{value} is below {low}")
    if high is not None and value > high:
        raise ValueError(f"{value} is above {high}")
    return value


def is_alphanumeric(text: str) -> bool:
    """Return True if every character before the first newline is a letter or digit."""
    line = text.split("\n", 1)[0]
    return all(char.isascii() and char.isalnum() for char in line)


def is_valid_name(text: str) -> bool:
    """Return True if the text starts with a letter."""
    text = _strip_newline(text)
    return bool(text) and text[0].isascii() and text[0].isalpha()


def prompt_until(
    prompt: str,
    retry: str,
    validate: Callable[[str], T],
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] | None = None,
) -> T:
    """Ask for a line until ``validate`` accepts it, and return what it returns.

    ``validate`` signals rejection by raising ValueError. ``read`` returns one
    line at a time and an empty string at end of input, which raises EOFError.
    """
    read = read if read is not None else sys.stdin.readline
    write = write if write is not None else sys.stdout.write
    write(prompt)
    while True:
        line = read()
        if line == "":
            raise EOFError("input ended before a valid value was given")
        try:
            return validate(_strip_newline(line))
        except ValueError:
            write(retry)
"""Small recursive exercises: palindromes, products, Fibonacci, divisibility, fragments."""

from __future__ import annotations

import re
from collections.abc import Iterator
from itertools import islice

MAX_FRAGMENTS = 100

_SIGNED_DIGITS = re.compile(r"-?[0-9]*")
_DIGITS = re.compile(r"[0-9]*")


def normalise_phrase(text: str) -> str:
    """Drop every whitespace character and lower-case the rest."""
    return "".join(char for char in text if not char.isspace()).lower()


def is_palindrome(text: str) -> bool:
    """Return True if the text reads the same in both directions, character for character."""
    return text == text[::-1]


def product(m: int, n: int) -> int:
    """Multiply two integers of either sign."""
    if m == 0 or n == 0:
        return 0
    if n < 0:
        m, n = -m, -n
    return m * n


def fibonacci_term(k: int) -> int:
    """Return term ``k`` of the series 1, 1, 2, 3, 5, ... starting at k = 0."""
    if k < 0:
        raise ValueError("k must not be negative")
    current, following = 1, 1
    for _ in range(k):
        current, following = following, current + following
    return current


def divisible_by_7(number: int) -> bool:
    """Decide divisibility by 7 by repeatedly subtracting twice the last digit."""
    number = abs(number)
    while number >= 70:
        number = abs(number // 10 - 2 * (number % 10))
    return number % 7 == 0


def _fragments(n: int, b: int) -> Iterator[int]:
    pending = [n]
    while pending:
        current = pending.pop()
        if current <= b:
            yield current
        else:
            part = current // b
            pending.append(current - part)
            pending.append(part)


def explosion(n: int, b: int) -> list[int]:
    """Break ``n`` into fragments no larger than ``b``.

    A number larger than ``b`` splits into ``n // b`` and ``n - n // b``,
    each broken further, left part first. At most 100 fragments are kept.
    """
    if b < 2:
        raise ValueError("the bomb value must be at least 2")
    return list(islice(_fragments(n, b), MAX_FRAGMENTS))


def parse_signed_integer(text: str) -> int:
    """Read a line made only of digits, optionally led by a minus sign.

    A lone minus sign reads as 0. Raises ValueError for anything else.
    """
    line = text.split("\n", 1)[0]
    if not line:
        raise ValueError("empty input")
    if not _SIGNED_DIGITS.fullmatch(line):
        raise ValueError(f"not an integer: {line!r}")
    return 0 if line == "-" else int(line)


def parse_natural(text: str) -> int:
    """Read a line made only of digits; an empty line reads as 0.

    Raises ValueError for a negative value or anything that is not digits.
    """
    line = text[:-1] if text.endswith("\n") else text
    if not _DIGITS.fullmatch(line):
        if line.startswith("-"):
            raise ValueError("negative values are not accepted")
        raise ValueError(f"not a number: {line!r}")
    return int(line) if line else 0
"""Turning command-line arguments into the list of values to sort."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable

from pushswap.libft.chars import atoi, is_digit
from pushswap.libft.strings import split

_WHITESPACE = "\t\n\v \f\r"
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """The arguments do not describe a list of distinct 32-bit integers."""


def long_atoi(text: str) -> int:
    """Parse a leading decimal integer without any size limit.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = "".join(takewhile(is_digit, stripped))
    return sign * int(digits) if digits else 0


def is_valid_int(token: str) -> bool:
    """True when token is an optional sign followed by digits and fits in 32 bits."""
    value = long_atoi(token)
    if not INT_MIN <= value <= INT_MAX:
        return False
    body = token[1:] if token[:1] in ("-", "+") else token
    return all(is_digit(ch) for ch in body)


def extract_tokens(args: Iterable[str]) -> list[str]:
    """Split every argument on spaces and return all the words in order."""
    return [word for arg in args for word in split(arg, " ")]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Return the integers named by args, top of the stack first.

    Raises ParseError for a word that is not a valid integer or for a value
    given twice.
    """
    tokens = extract_tokens(args)
    for token in tokens:
        if not is_valid_int(token):
            raise ParseError(f"invalid integer {token!r}")
    values = [atoi(token) for token in tokens]
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise ParseError(f"duplicate value {value}")
        seen.add(value)
    return values
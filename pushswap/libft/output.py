"""Formatted and unformatted output to text streams."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from pushswap.libft.chars import itoa

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_MISSING = object()


def number_in_base(n: int, digits: str) -> str:
    """Render a non-negative integer using the given digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if n < 0:
        raise ValueError(f"cannot render negative number {n}")
    out = []
    while True:
        n, rest = divmod(n, base)
        out.append(digits[rest])
        if n == 0:
            break
    return "".join(reversed(out))


def _require_int(arg: Any, conv: str) -> int:
    if not isinstance(arg, int):
        raise TypeError(f"%{conv} expects an int, got {type(arg).__name__}")
    return arg


def _signed(arg: Any, conv: str) -> str:
    value = _require_int(arg, conv) & _UINT_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    return str(value)


def _unsigned(arg: Any, conv: str) -> str:
    return str(_require_int(arg, conv) & _UINT_MASK)


def _char_text(arg: Any, conv: str = "c") -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%{conv} expects a single character, got {arg!r}")
        return arg
    return chr(_require_int(arg, conv) & 0xFF)


def _string(arg: Any, conv: str) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%{conv} expects a str, got {type(arg).__name__}")
    return arg


def _pointer(arg: Any, conv: str) -> str:
    if arg is None or arg == 0:
        return "(nil)"
    return "0x" + number_in_base(_require_int(arg, conv) & _ULONG_MASK, LOWER_HEX)


def _hex_lower(arg: Any, conv: str) -> str:
    return number_in_base(_require_int(arg, conv) & _UINT_MASK, LOWER_HEX)


def _hex_upper(arg: Any, conv: str) -> str:
    return number_in_base(_require_int(arg, conv) & _UINT_MASK, UPPER_HEX)


_CONVERSIONS = {
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "c": _char_text,
    "s": _string,
    "p": _pointer,
    "x": _hex_lower,
    "X": _hex_upper,
}


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions c, s, p, d, i, u, x, X and %% in fmt.

    A '%' followed by any other character is dropped and the character is
    kept; a trailing lone '%' is dropped. Surplus arguments are ignored.
    """
    pieces: list[str] = []
    chars = iter(fmt)
    values = iter(args)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conv = next(chars, None)
        if conv is None:
            break
        if conv == "%":
            pieces.append("%")
        elif conv in _CONVERSIONS:
            arg = next(values, _MISSING)
            if arg is _MISSING:
                raise TypeError(f"not enough arguments for %{conv}")
            pieces.append(_CONVERSIONS[conv](arg, conv))
        else:
            pieces.append(conv)
    return "".join(pieces)


def _target(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to file (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    _target(file).write(text)
    return len(text)


def put_char(c: int | str, file: TextIO | None = None) -> None:
    """Write one character."""
    _target(file).write(_char_text(c))


def put_str(s: str, file: TextIO | None = None) -> None:
    """Write a string."""
    _target(file).write(s)


def put_endl(s: str, file: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    _target(file).write(s + "\n")


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(file).write(itoa(n))
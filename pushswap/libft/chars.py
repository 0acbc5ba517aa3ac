"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = "\t\n\v \f\r"
_INT_BITS = 32


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; other characters are returned unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; other characters are returned unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def _wrap_int(value: int) -> int:
    """Wrap a value to a signed 32-bit integer."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits are
    read until the first non-digit. Text without digits gives 0. The result
    wraps around like a 32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - 48)
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if _wrap_int(n) != n:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)
"""String helpers with C string-library semantics over Python str values.

Functions that return a position in C return an index here, or None where
C returns a null pointer. Functions that fill a caller-supplied buffer in C
return the resulting text instead.
"""

from __future__ import annotations

from typing import Callable


def _char(c: int | str) -> str:
    """Normalise a character given as an int (low byte kept) or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Return the length of s."""
    return len(s)


def split(s: str, sep: int | str) -> list[str]:
    """Split s on the character sep, dropping empty words."""
    separator = _char(sep)
    return [word for word in s.split(separator) if word]


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for the terminator ``"\\0"`` gives ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for the terminator ``"\\0"`` gives ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup_no_nl(s: str) -> str:
    """Return a copy of s cut at its first newline."""
    return s.split("\n", 1)[0]


def striteri(s: str, f: Callable[[int, str], object]) -> None:
    """Call f(index, char) for every character of s, in order."""
    for index, ch in enumerate(s):
        f(index, ch)


def strjoin(a: str, b: str) -> str:
    """Return a followed by b."""
    return a + b


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the text that fits and the full length of src.
    """
    if size < 0:
        raise ValueError("strlcpy: negative size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full concatenation would
    have had; when size is not larger than dest, dest is left unchanged and
    the length returned is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("strlcat: negative size")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string built from f(index, char) for every character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference of the first mismatch."""
    for index in range(n):
        c1 = ord(s1[index]) if index < len(s1) else 0
        c2 = ord(s2[index]) if index < len(s2) else 0
        if c1 == 0 and c2 == 0:
            break
        if c1 != c2:
            return c1 - c2
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of needle lying wholly within the first n characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if n <= 0:
        return None
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters of charset from both ends of s."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s starting at start.

    A start beyond the end of s gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: negative start or length")
    if start > len(s):
        return ""
    return s[start:start + length]
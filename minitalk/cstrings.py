"""String and byte-buffer helpers with NUL-terminated string semantics.

Text arguments are treated as C strings: anything after the first NUL
character is ignored. Search functions return an index, or ``None`` when
nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import chain, islice, repeat
from typing import Optional, Union

CharLike = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview]

_WHITESPACE = " \t\n\v\f\r"


def _cstr(text: str) -> str:
    """Return ``text`` cut at its first NUL character."""
    return text.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; no digits gives 0.
    """
    rest = _cstr(text).lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal form of ``n``."""
    return str(n)


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    text = _cstr(text)
    separator = _char(sep)
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return _cstr(text).strip(_cstr(charset))


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    text = _cstr(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    haystack = _cstr(haystack)
    needle = _cstr(needle)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders the strings."""
    _non_negative("n", n)
    left = chain(map(ord, _cstr(s1)), repeat(0))
    right = chain(map(ord, _cstr(s2)), repeat(0))
    for a, b in islice(zip(left, right), n):
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``; searching for NUL gives the string's length."""
    text = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``; searching for NUL gives the string's length."""
    text = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c & 0xFF`` among the first ``n`` bytes."""
    _non_negative("n", n)
    buffer = bytes(data)
    if n > len(buffer):
        raise ValueError(f"n ({n}) exceeds the buffer size ({len(buffer)})")
    index = buffer.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; returns the difference at the first mismatch, else 0."""
    _non_negative("n", n)
    left, right = bytes(a), bytes(b)
    if n > len(left) or n > len(right):
        raise ValueError(f"n ({n}) exceeds a buffer size")
    return next((x - y for x, y in zip(left[:n], right[:n]) if x != y), 0)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to every character of ``text``."""
    return "".join(func(i, ch) for i, ch in enumerate(_cstr(text)))
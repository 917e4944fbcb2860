"""Character classification, case mapping and small output helpers."""

from __future__ import annotations

from typing import TextIO, Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the character code of ``c``, which may be an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (int or str) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for the ASCII decimal digits."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _like(c, code - 32)
    return c


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _like(c, code + 32)
    return c


def putstr_fd(text: str | None, stream: TextIO) -> None:
    """Write ``text`` up to its first NUL character; ``None`` writes nothing."""
    if text is None:
        return
    stream.write(text.split("\0", 1)[0])


def putendl_fd(text: str | None, stream: TextIO) -> None:
    """Write ``text`` as :func:`putstr_fd` does, followed by a newline."""
    putstr_fd(text, stream)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of ``n``."""
    stream.write(str(n))
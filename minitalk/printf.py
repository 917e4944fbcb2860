"""A small formatted-output routine supporting the ``cspdiuxX%`` conversions.

Conversions take no flags, width or precision. ``%`` followed by an
unknown character produces nothing and consumes no argument. A ``%`` at the
very end of the format is ignored. Numeric arguments are reduced to the
width of the matching C type: ``d``, ``i``, ``u``, ``x`` and ``X`` use 32
bits and ``p`` uses 64 bits.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_INT_BITS = 32
_PTR_BITS = 64
_MISSING = object()


def _require_int(spec: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _to_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int("c", value) & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _format_signed(value: Any) -> str:
    return str(_to_signed(_require_int("d", value), _INT_BITS))


def _format_unsigned(value: Any) -> str:
    return str(_to_unsigned(_require_int("u", value), _INT_BITS))


def _format_hex(value: Any) -> str:
    return format(_to_unsigned(_require_int("x", value), _INT_BITS), "x")


def _format_upper_hex(value: Any) -> str:
    return format(_to_unsigned(_require_int("X", value), _INT_BITS), "X")


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else _to_unsigned(_require_int("p", value), _PTR_BITS)
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "p": _format_pointer,
    "x": _format_hex,
    "X": _format_upper_hex,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        return ""
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return handler(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    The format is read up to its first NUL character; extra arguments are
    ignored and missing ones raise :class:`TypeError`.
    """
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    pieces: list[str] = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
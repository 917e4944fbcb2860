"""Bit-level wire format: one byte travels as eight signals, least significant bit first.

A ``1`` bit is carried by ``SIGUSR1`` and a ``0`` bit by ``SIGUSR2``. A
message is its bytes followed by a terminating NUL byte. The receiver
acknowledges every signal with ``SIGUSR1``.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

SIGNAL_ONE = signal.SIGUSR1
SIGNAL_ZERO = signal.SIGUSR2
SIGNAL_ACK = signal.SIGUSR1
BITS_PER_BYTE = 8

Message = Union[str, bytes, bytearray]


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the eight bits of ``value``, least significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> bit) & 1 for bit in range(BITS_PER_BYTE))


def encode_message(message: Message) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of a NUL terminator.

    Text is sent as UTF-8; anything after a NUL in the message is dropped.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for value in data + b"\0":
        yield from encode_byte(value)


@dataclass
class ByteDecoder:
    """Collects bits, least significant first, into whole bytes."""

    _value: int = field(default=0, repr=False)
    _count: int = field(default=0, repr=False)

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the byte once eight bits are in, otherwise ``None``."""
        if bit not in (0, 1) or isinstance(bit, bool):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value |= bit << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self._value = 0
        self._count = 0
        return value
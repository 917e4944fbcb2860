"""Client that sends a message to a server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Optional

from minitalk.cstrings import atoi
from minitalk.protocol import (
    SIGNAL_ACK,
    SIGNAL_ONE,
    SIGNAL_ZERO,
    Message,
    encode_byte,
    encode_message,
)

USAGE = "Usage: client <server PID> <message>\n"
_POLL_INTERVAL = 50e-6

_ack_received = False


def _on_ack(signum, frame) -> None:
    global _ack_received
    _ack_received = True


@contextmanager
def _acknowledgements() -> Iterator[None]:
    """Listen for acknowledgement signals for the duration of the block."""
    previous = signal.signal(SIGNAL_ACK, _on_ack)
    try:
        yield
    finally:
        signal.signal(SIGNAL_ACK, signal.SIG_DFL if previous is None else previous)


def _send_bit(server_pid: int, bit: int) -> None:
    global _ack_received
    _ack_received = False
    os.kill(server_pid, SIGNAL_ONE if bit else SIGNAL_ZERO)
    while not _ack_received:
        time.sleep(_POLL_INTERVAL)


def send_byte(server_pid: int, value: int) -> None:
    """Send one byte, waiting for the server to acknowledge each bit.

    Raises :class:`OSError` if a signal cannot be delivered.
    """
    bits = encode_byte(value)
    with _acknowledgements():
        for bit in bits:
            _send_bit(server_pid, bit)


def send_message(server_pid: int, message: Message) -> None:
    """Send ``message`` and its NUL terminator, bit by bit."""
    with _acknowledgements():
        for bit in encode_message(message):
            _send_bit(server_pid, bit)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: ``client <server PID> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write(USAGE)
        return 1
    server_pid = atoi(args[0])
    if server_pid <= 0:
        sys.stderr.write(f"Invalid server PID: {args[0]!r}\n")
        sys.stderr.write(USAGE)
        return 1
    try:
        send_message(server_pid, args[1])
    except OSError as exc:
        sys.stderr.write(f"Error sending signal: {exc.strerror or exc}\n")
        return 1
    return 0
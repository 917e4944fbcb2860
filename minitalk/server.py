"""Server that rebuilds messages from incoming signals and prints them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Sequence
from typing import BinaryIO, NoReturn, Optional

from minitalk.printf import printf
from minitalk.protocol import SIGNAL_ACK, SIGNAL_ONE, SIGNAL_ZERO, ByteDecoder

Notify = Callable[[int, int], None]


class Server:
    """Decodes bits carried by signals and writes each finished byte out.

    A NUL byte ends a message and is written as a newline. Every signal is
    acknowledged to its sender.
    """

    def __init__(self, output: Optional[BinaryIO] = None, notify: Notify = os.kill) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self._notify = notify
        self._decoder = ByteDecoder()

    def handle(self, signum: int, sender_pid: int) -> Optional[int]:
        """Process one signal from ``sender_pid``; return the byte it completed, if any.

        Raises :class:`OSError` if the acknowledgement cannot be sent.
        """
        value = self._decoder.feed(1 if signum == SIGNAL_ONE else 0)
        if value is not None:
            self.output.write(b"\n" if value == 0 else bytes([value]))
            self.output.flush()
        self._notify(sender_pid, SIGNAL_ACK)
        return value

    def serve_forever(self) -> NoReturn:
        """Wait for signals and handle them until an error occurs."""
        signals = {SIGNAL_ONE, SIGNAL_ZERO}
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, signals)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: print the PID and serve until stopped."""
    printf("Server started. PID: %d\n", os.getpid())
    try:
        Server().serve_forever()
    except OSError as exc:
        sys.stderr.write(f"Error sending signal: {exc.strerror or exc}\n")
        return 1
    except KeyboardInterrupt:
        return 130
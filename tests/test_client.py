import signal
from unittest import mock

import pytest

from minitalk.client import main, send_byte, send_message
from minitalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, encode_byte, encode_message


class FakeServer:
    """Records the signals sent and acknowledges each one at once."""

    def __init__(self):
        self.sent = []

    def __call__(self, pid, signum):
        self.sent.append((pid, signum))
        signal.raise_signal(signal.SIGUSR1)

    @property
    def bits(self):
        return [1 if signum == SIGNAL_ONE else 0 for _, signum in self.sent]


@pytest.fixture
def fake_server():
    server = FakeServer()
    with mock.patch("os.kill", side_effect=server):
        yield server


def test_send_byte_sends_bits_lsb_first(fake_server):
    send_byte(4242, ord("A"))
    expected = list(encode_byte(ord("A")))
    assert expected == [1, 0, 0, 0, 0, 0, 1, 0]
    assert fake_server.bits == expected
    assert {pid for pid, _ in fake_server.sent} == {4242}


def test_send_byte_uses_only_user_signals(fake_server):
    send_byte(4242, 0x5A)
    assert {signum for _, signum in fake_server.sent} <= {SIGNAL_ONE, SIGNAL_ZERO}
    assert len(fake_server.sent) == 8
    assert fake_server.bits == list(encode_byte(0x5A))


def test_send_message_matches_encoding(fake_server):
    send_message(4242, "hello")
    assert fake_server.bits == list(encode_message("hello"))


def test_ack_handler_restored(fake_server):
    before = signal.getsignal(signal.SIGUSR1)
    send_message(4242, "x")
    assert fake_server.bits == list(encode_message("x"))
    assert signal.getsignal(signal.SIGUSR1) == before


def test_send_byte_propagates_delivery_failure():
    with mock.patch("os.kill", side_effect=ProcessLookupError(3, "No such process")):
        with pytest.raises(ProcessLookupError):
            send_byte(4242, 1)


def test_main_sends_message(fake_server):
    assert main(["4242", "hi"]) == 0
    assert fake_server.bits == list(encode_message("hi"))


@pytest.mark.parametrize("argv", [[], ["4242"], ["4242", "a", "b"]])
def test_main_usage_error(argv, capsys):
    assert main(argv) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_rejects_non_positive_pid(capsys):
    with mock.patch("os.kill") as kill:
        assert main(["abc", "hi"]) == 1
        assert kill.call_count == 0
    assert "Usage" in capsys.readouterr().err


def test_main_reports_delivery_failure(capsys):
    with mock.patch("os.kill", side_effect=ProcessLookupError(3, "No such process")):
        assert main(["4242", "hi"]) == 1
    assert "Error sending signal" in capsys.readouterr().err
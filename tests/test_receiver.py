import io
import signal

import pytest

from sigtalk.protocol import message_bits
from sigtalk.receiver import Receiver


class Recorder:
    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def __call__(self, pid, signum):
        self.calls.append((pid, signum))
        if self.fail_on is not None and self.fail_on(len(self.calls), pid, signum):
            raise ProcessLookupError("no such process")


def _feed(receiver, message, sender):
    results = [receiver.receive(bit, sender) for bit in message_bits(message)]
    return results


def test_complete_message_is_written_and_acknowledged():
    notify = Recorder()
    out = io.StringIO()
    receiver = Receiver(notify, out)
    results = _feed(receiver, "hello", 42)
    assert results[-1] == "hello"
    assert all(r is None for r in results[:-1])
    assert out.getvalue() == "hello\nMessage acknowledged\n"
    assert len(notify.calls) == 8 * 6
    assert all(call == (42, signal.SIGUSR1) for call in notify.calls)


def test_state_is_reset_after_message():
    receiver = Receiver(Recorder(), io.StringIO())
    _feed(receiver, "ok", 7)
    assert receiver.client_pid == 0
    assert receiver.buffer == bytearray()
    assert receiver.current_bit == 0


def test_consecutive_messages_from_different_senders():
    out = io.StringIO()
    receiver = Receiver(Recorder(), out)
    _feed(receiver, "one", 1)
    _feed(receiver, "two", 2)
    assert out.getvalue() == "one\nMessage acknowledged\ntwo\nMessage acknowledged\n"


def test_new_sender_displaces_previous_one():
    notify = Recorder()
    out = io.StringIO()
    receiver = Receiver(notify, out)
    bits = list(message_bits("abc"))
    for bit in bits[:10]:
        receiver.receive(bit, 1)
    receiver.receive(0, 2)
    assert (1, signal.SIGUSR2) in notify.calls
    assert receiver.client_pid == 2
    assert receiver.buffer == bytearray()
    assert receiver.current_bit == 1


def test_displaced_transfer_then_full_message():
    out = io.StringIO()
    receiver = Receiver(Recorder(), out)
    for bit in list(message_bits("zzz"))[:5]:
        receiver.receive(bit, 1)
    assert _feed(receiver, "fresh", 2)[-1] == "fresh"
    assert out.getvalue().startswith("fresh\n")


def test_failed_bit_ack_resets(capsys):
    notify = Recorder(fail_on=lambda count, pid, signum: True)
    receiver = Receiver(notify, io.StringIO())
    receiver.receive(1, 5)
    assert receiver.client_pid == 0
    assert receiver.current_bit == 0
    assert "Failed to acknowledge bit reception" in capsys.readouterr().err


def test_failed_final_ack(capsys):
    total = len(list(message_bits("hi")))
    notify = Recorder(fail_on=lambda count, pid, signum: count == total)
    out = io.StringIO()
    receiver = Receiver(notify, out)
    assert _feed(receiver, "hi", 9)[-1] == "hi"
    assert out.getvalue() == "hi\n"
    assert "Failed to send acknowledgment to client" in capsys.readouterr().err


def test_long_message_round_trip():
    message = "x" * 3000 + "end"
    out = io.StringIO()
    receiver = Receiver(Recorder(), out)
    assert _feed(receiver, message, 3)[-1] == message
    assert out.getvalue().splitlines()[0] == message


def test_reset_clears_partial_state():
    receiver = Receiver(Recorder(), io.StringIO())
    for bit in list(message_bits("q"))[:4]:
        receiver.receive(bit, 8)
    receiver.reset()
    assert receiver.client_pid == 0
    assert receiver.current_bit == 0
    assert receiver.current_char == 0


def test_invalid_bit():
    receiver = Receiver(Recorder(), io.StringIO())
    with pytest.raises(ValueError):
        receiver.receive(3, 1)
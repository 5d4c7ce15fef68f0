"""Client that sends a text message to a server process through user signals."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable
from typing import Optional, Sequence, Union

from sigtalk.convert import parse_int
from sigtalk.output import printf, put_endl
from sigtalk.protocol import TalkError, message_bits, signal_for_bit

_ACK_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


def validate_args(argv: Sequence[str]) -> tuple[int, str]:
    """Check ``[server_pid, message]`` and return them as ``(pid, message)``."""
    if len(argv) != 2:
        raise TalkError("Usage: ./client [server_pid] [message]")
    pid = parse_int(argv[0])
    if pid <= 0:
        raise TalkError("Invalid PID")
    message = argv[1]
    if not message:
        raise TalkError("Message cannot be empty")
    return pid, message


def transmit(
    pid: int,
    message: Union[str, bytes],
    send: Callable[[int, int], None],
    wait_ack: Callable[[], None],
) -> None:
    """Send ``message`` and its terminator to ``pid`` one bit at a time.

    ``send(pid, signum)`` delivers each bit and ``wait_ack()`` blocks until
    the server has acknowledged it.
    """
    for bit in message_bits(message):
        try:
            send(pid, signal_for_bit(bit))
        except OSError as exc:
            raise TalkError("Failed to send signal to server") from exc
        wait_ack()


def _wait_ack() -> None:
    info = signal.sigwaitinfo(_ACK_SIGNALS)
    if info.si_signo == signal.SIGUSR2:
        raise TalkError("")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the message named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        pid, message = validate_args(args)
        try:
            previous = signal.pthread_sigmask(signal.SIG_BLOCK, _ACK_SIGNALS)
        except (AttributeError, OSError, ValueError) as exc:
            raise TalkError("Failed to setup signal handlers") from exc
        try:
            transmit(pid, message, os.kill, _wait_ack)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)
    except TalkError as exc:
        put_endl(str(exc), sys.stderr)
        return 1
    printf("Message sent successfully")
    sys.stdout.flush()
    return 0
"""Server that prints messages received bit by bit through user signals."""

from __future__ import annotations

import os
import signal
import sys
from contextlib import redirect_stderr
from typing import Optional, Sequence, TextIO

from sigtalk.output import put_endl, render
from sigtalk.protocol import TalkError, bit_for_signal
from sigtalk.receiver import Receiver

_DATA_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})
_STOP_SIGNALS = frozenset({signal.SIGINT, signal.SIGTERM})


def serve(out: TextIO, err: TextIO) -> None:
    """Announce the process id on ``out`` and receive messages until stopped.

    Bits arrive as ``SIGUSR1``/``SIGUSR2``; ``SIGINT`` or ``SIGTERM`` end
    the loop. Diagnostics go to ``err``.
    """
    out.write(render("Server PID: %d\n", os.getpid()))
    out.flush()
    wanted = _DATA_SIGNALS | _STOP_SIGNALS
    try:
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, wanted)
    except (AttributeError, OSError, ValueError) as exc:
        raise TalkError("Failed to setup signal handlers") from exc
    receiver = Receiver(os.kill, out)
    try:
        with redirect_stderr(err):
            while True:
                info = signal.sigwaitinfo(wanted)
                if info.si_signo in _STOP_SIGNALS:
                    return
                receiver.receive(bit_for_signal(info.si_signo), info.si_pid)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server on standard output; return the exit status."""
    try:
        serve(sys.stdout, sys.stderr)
    except TalkError as exc:
        put_endl(str(exc), sys.stderr)
        return 1
    return 0
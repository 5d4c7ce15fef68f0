import io
import os
import signal
import threading

import pytest

from sigtalk.server import main, serve

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2, signal.SIGINT, signal.SIGTERM}


@pytest.fixture
def blocked():
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
    yield previous
    signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _raise_here(signum):
    signal.pthread_kill(threading.get_ident(), signum)


def test_serve_announces_pid_and_stops_on_term(blocked):
    _raise_here(signal.SIGTERM)
    out = io.StringIO()
    err = io.StringIO()
    serve(out, err)
    assert out.getvalue() == f"Server PID: {os.getpid()}\n"
    assert err.getvalue() == ""
    assert signal.SIGTERM not in signal.sigpending()


def test_serve_restores_signal_mask(blocked):
    before = signal.pthread_sigmask(signal.SIG_BLOCK, [])
    _raise_here(signal.SIGINT)
    out = io.StringIO()
    err = io.StringIO()
    serve(out, err)
    assert out.getvalue() == f"Server PID: {os.getpid()}\n"
    assert err.getvalue() == ""
    assert signal.pthread_sigmask(signal.SIG_BLOCK, []) == before


def test_main_returns_zero_after_stop(blocked, capsys):
    _raise_here(signal.SIGTERM)
    assert main() == 0
    assert f"Server PID: {os.getpid()}" in capsys.readouterr().out
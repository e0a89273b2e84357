"""Unit tests for the signal handler module in dirtree CLI."""

import signal
from unittest.mock import MagicMock, patch

import pytest

from dirtree.cli.signal_handler import (
    EXIT_SIGINT,
    EXIT_SIGPIPE,
    SignalHandler,
    cleanup,
    setup_signal_handling,
    signal_handler,
)


@pytest.fixture
def fresh_signal_handler():
    """A SignalHandler independent of the module singleton."""
    return SignalHandler()


def test_signal_handler_initialization():
    with patch("signal.getsignal", return_value=signal.SIG_DFL) as mock_getsignal:
        handler = SignalHandler()

    mock_getsignal.assert_any_call(signal.SIGPIPE)
    mock_getsignal.assert_any_call(signal.SIGINT)
    assert not handler.interrupted()
    assert handler.exit_code() is None
    assert handler.original_sigpipe_handler is signal.SIG_DFL


def test_handle_sigpipe(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigpipe(signal.SIGPIPE, MagicMock())

    assert fresh_signal_handler.sigpipe_received.is_set()
    assert fresh_signal_handler.interrupted()
    assert fresh_signal_handler.exit_code() == EXIT_SIGPIPE == 141
    mock_signal.assert_called_once_with(signal.SIGPIPE, fresh_signal_handler.original_sigpipe_handler)


def test_handle_sigint(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigint(signal.SIGINT, None)

    assert fresh_signal_handler.sigint_received.is_set()
    assert fresh_signal_handler.exit_code() == EXIT_SIGINT == 130
    mock_signal.assert_called_once_with(signal.SIGINT, fresh_signal_handler.original_sigint_handler)


def test_sigpipe_takes_precedence(fresh_signal_handler):
    fresh_signal_handler.sigint_received.set()
    fresh_signal_handler.sigpipe_received.set()
    assert fresh_signal_handler.exit_code() == EXIT_SIGPIPE


def test_setup_signal_handling():
    with patch("signal.signal") as mock_signal:
        setup_signal_handling()

    assert mock_signal.call_count == 2
    mock_signal.assert_any_call(signal.SIGPIPE, signal_handler.handle_sigpipe)
    mock_signal.assert_any_call(signal.SIGINT, signal_handler.handle_sigint)


def test_cleanup_without_signals():
    with patch("dirtree.cli.signal_handler.signal_handler", SignalHandler()):
        with patch("dirtree.cli.signal_handler.os") as mock_os:
            cleanup()
    mock_os.dup2.assert_not_called()


def test_cleanup_after_signal():
    handler = SignalHandler()
    handler.sigpipe_received.set()

    with patch("dirtree.cli.signal_handler.signal_handler", handler):
        with patch("dirtree.cli.signal_handler.os") as mock_os, patch("dirtree.cli.signal_handler.sys") as mock_sys:
            mock_os.open.return_value = 123
            mock_sys.stdout.fileno.return_value = 1
            cleanup()

    mock_os.dup2.assert_called_once_with(123, 1)

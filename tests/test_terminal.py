"""Tests for terminal size detection."""

import os

from pic2term.utils import terminal


def test_returns_detected_size(monkeypatch):
    monkeypatch.setattr(
        terminal.os, "get_terminal_size", lambda fd: os.terminal_size((132, 43))
    )
    assert terminal.get_terminal_size() == (132, 43)


def test_not_a_terminal(monkeypatch):
    def _raise(fd):
        raise OSError("Inappropriate ioctl for device")

    monkeypatch.setattr(terminal.os, "get_terminal_size", _raise)
    assert terminal.get_terminal_size() is None


def test_zero_size_is_unknown(monkeypatch):
    monkeypatch.setattr(
        terminal.os, "get_terminal_size", lambda fd: os.terminal_size((0, 0))
    )
    assert terminal.get_terminal_size() is None

import io
import os
import logging

import pytest

termios = pytest.importorskip("termios")

import tty  # noqa: E402

from termctl.commands._unix import UnixRawModeCommand  # noqa: E402
from termctl.kernel import unix  # noqa: E402


class FakeTermios:
    """Stands in for tcgetattr/tcsetattr on a pretend terminal at fd 7."""

    def __init__(self):
        self.modes = {
            7: [
                termios.ICRNL | termios.IXON | termios.BRKINT,
                termios.OPOST,
                termios.CS8 | termios.CREAD,
                termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN | termios.ECHOE,
                termios.B38400,
                termios.B38400,
                [0] * 32,
            ]
        }

    def tcgetattr(self, fd):
        if fd not in self.modes:
            raise termios.error(25, "Inappropriate ioctl for device")
        mode = self.modes[fd]
        return mode[:6] + [list(mode[6])]

    def tcsetattr(self, fd, when, mode):
        if fd not in self.modes:
            raise termios.error(25, "Inappropriate ioctl for device")
        self.modes[fd] = mode[:6] + [list(mode[6])]


@pytest.fixture
def fake_termios(monkeypatch):
    fake = FakeTermios()
    monkeypatch.setattr(unix.termios, "tcgetattr", fake.tcgetattr)
    monkeypatch.setattr(unix.termios, "tcsetattr", fake.tcsetattr)
    return fake


def test_make_raw():
    mode = FakeTermios().modes[7]
    raw = unix.make_raw(mode)

    lflag = raw[tty.LFLAG]
    assert not lflag & (termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
    assert lflag & termios.ECHOE
    iflag = raw[tty.IFLAG]
    assert not iflag & (termios.ICRNL | termios.IXON)
    assert iflag & termios.BRKINT
    assert raw[tty.CC][termios.VMIN] == 1

    # The original is not modified
    assert mode[tty.LFLAG] & termios.ECHO
    assert mode[tty.CC][termios.VMIN] == 0


def test_raw_mode_command(fake_termios):
    ori_mode = fake_termios.tcgetattr(7)
    command = UnixRawModeCommand(7)

    assert command.execute() is True
    assert not fake_termios.modes[7][tty.LFLAG] & termios.ICANON

    assert command.undo() is True
    assert fake_termios.modes[7] == ori_mode


def test_raw_mode_command_not_a_terminal(fake_termios):
    command = UnixRawModeCommand(3)
    assert command.execute() is False
    assert not command.applied
    assert command.undo() is False


def test_parse_cursor_report():
    assert unix.parse_cursor_report("\x1b[11;6R") == (5, 10)
    assert unix.parse_cursor_report("junk\x1b[1;1Rmore") == (0, 0)
    assert unix.parse_cursor_report("\x1b[11;6") is None
    assert unix.parse_cursor_report("") is None


def test_query_cursor_position(monkeypatch):
    modes = []
    monkeypatch.setattr(unix, "get_terminal_mode", lambda fd: ["ori"])
    monkeypatch.setattr(unix, "make_raw", lambda mode: ["raw"])
    monkeypatch.setattr(
        unix, "set_terminal_mode", lambda fd, mode: modes.append(mode) or True
    )

    fd_read, fd_write = os.pipe()
    try:
        os.write(fd_write, b"\x1b[11;6R")
        stdout = io.StringIO()
        assert unix.query_cursor_position(fd_read, stdout) == (5, 10)
        assert stdout.getvalue() == "\x1b[6n"
        # Mode is restored afterwards
        assert modes == [["raw"], ["ori"]]
    finally:
        os.close(fd_read)
        os.close(fd_write)


def test_query_cursor_position_no_answer(monkeypatch):
    monkeypatch.setattr(unix, "get_terminal_mode", lambda fd: ["ori"])
    monkeypatch.setattr(unix, "make_raw", lambda mode: ["raw"])
    monkeypatch.setattr(unix, "set_terminal_mode", lambda fd, mode: True)

    fd_read, fd_write = os.pipe()
    try:
        position = unix.query_cursor_position(fd_read, io.StringIO(), timeout=0.01)
        assert position == (-1, -1)
    finally:
        os.close(fd_read)
        os.close(fd_write)


def test_query_cursor_position_not_a_terminal(fake_termios):
    stdout = io.StringIO()
    assert unix.query_cursor_position(3, stdout) == (-1, -1)
    assert stdout.getvalue() == ""


def test_query_cursor_position_drops_other_input(monkeypatch, caplog):
    caplog.set_level(logging.DEBUG, logger="termctl")
    monkeypatch.setattr(unix, "get_terminal_mode", lambda fd: ["ori"])
    monkeypatch.setattr(unix, "make_raw", lambda mode: ["raw"])
    monkeypatch.setattr(unix, "set_terminal_mode", lambda fd, mode: True)

    fd_read, fd_write = os.pipe()
    try:
        os.write(fd_write, b"ab\x1b[3;4R")
        assert unix.query_cursor_position(fd_read, io.StringIO()) == (3, 2)
    finally:
        os.close(fd_read)
        os.close(fd_write)
    assert "'ab'" in caplog.text

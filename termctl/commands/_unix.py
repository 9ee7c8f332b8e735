from ..kernel import unix
from ._base import Command


class UnixRawModeCommand(Command):
    """Put the terminal input in raw mode: no line editing, no echo, no signals.

    The original termios attributes are captured on execute and written
    back as-is on undo.
    """

    def __init__(self, fd):
        super().__init__()
        self._fd = fd
        self._ori_mode = None

    def _execute(self):
        ori_mode = unix.get_terminal_mode(self._fd)
        if ori_mode is None:
            return False
        if not unix.set_terminal_mode(self._fd, unix.make_raw(ori_mode)):
            return False
        self._ori_mode = ori_mode
        return True

    def _undo(self):
        return unix.set_terminal_mode(self._fd, self._ori_mode)

import shutil

from ..commands import AnsiAlternateScreenCommand
from ._base import ClearType, TerminalBackend


CLEAR_SEQUENCES = {
    ClearType.ALL: "\x1b[2J",
    ClearType.FROM_CURSOR_DOWN: "\x1b[J",
    ClearType.FROM_CURSOR_UP: "\x1b[1J",
    ClearType.CURRENT_LINE: "\x1b[2K",
    ClearType.UNTIL_NEW_LINE: "\x1b[K",
}


class AnsiTerminal(TerminalBackend):
    """Screen actions via escape sequences."""

    def clear(self, clear_type):
        self._state.write(CLEAR_SEQUENCES[clear_type])

    def size(self):
        # This works on both Unix and Windows
        size = shutil.get_terminal_size()
        return size.columns, size.lines

    def set_size(self, width, height):
        # Xterm window manipulation, not supported by every terminal
        self._state.write(f"\x1b[8;{height};{width}t")

    def scroll_up(self, count):
        if count > 0:
            self._state.write(f"\x1b[{count}S")

    def scroll_down(self, count):
        if count > 0:
            self._state.write(f"\x1b[{count}T")

    def alternate_screen_command(self):
        return AnsiAlternateScreenCommand(self._state.stdout)

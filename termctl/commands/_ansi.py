from ._base import Command


class AnsiAlternateScreenCommand(Command):
    """Switch to the terminal's alternate screen buffer, and back on undo."""

    def __init__(self, stdout):
        super().__init__()
        self._stdout = stdout

    def _write(self, text):
        self._stdout.write(text)
        self._stdout.flush()
        return True

    def _execute(self):
        return self._write("\x1b[?1049h")

    def _undo(self):
        return self._write("\x1b[?1049l")

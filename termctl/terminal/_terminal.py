import logging

from .._state import get_state
from ..commands import raw_mode_command
from ._base import ClearType
from ._context import CommandContext


logger = logging.getLogger("termctl")


class Terminal:
    """Clear, scroll and resize the screen, and manage the terminal modes.

    Raw input mode and the alternate screen are applied as reversible
    commands. Each can be used as a context manager::

        with terminal().alternate_screen(), terminal().raw_mode():
            ...

    or enabled explicitly, in which case the returned key can be passed to
    ``undo()``. ``restore()`` undoes everything that is still applied, in
    reverse order, including the enabling of escape sequences on Windows.
    """

    def __init__(self, state=None):
        self._state = state or get_state()
        self._terminal = self._state.backends.resolve("terminal")

    def clear(self, clear_type=ClearType.ALL):
        """Clear (part of) the screen."""
        self._terminal.clear(ClearType(clear_type))
        return self

    def size(self):
        """Get the size of the terminal as (width, height)."""
        return self._terminal.size()

    def set_size(self, width, height):
        """Resize the terminal."""
        self._terminal.set_size(width, height)
        return self

    def scroll_up(self, count=1):
        self._terminal.scroll_up(count)
        return self

    def scroll_down(self, count=1):
        self._terminal.scroll_down(count)
        return self

    def scroll(self, count):
        """Scroll by count lines; up if positive, down if negative."""
        if count >= 0:
            self._terminal.scroll_up(count)
        else:
            self._terminal.scroll_down(-count)
        return self

    def write(self, value):
        """Write the value at the cursor position, and flush."""
        self._state.write(str(value))
        return self

    print = write

    # Reversible changes

    def _apply(self, command, what):
        key, ok = self._state.registry.apply(command)
        if not ok:
            logger.warning(f"Could not enable {what}")
        return key

    def enable_raw_mode(self):
        """Put the input in raw mode. Returns the key of the command."""
        return self._apply(raw_mode_command(self._state), "raw mode")

    def raw_mode(self):
        """Context manager for raw input mode."""
        return CommandContext(self._state.registry, raw_mode_command(self._state))

    def enable_alternate_screen(self):
        """Switch to the alternate screen. Returns the key of the command."""
        return self._apply(self._terminal.alternate_screen_command(), "alternate screen")

    def alternate_screen(self):
        """Context manager for the alternate screen."""
        return CommandContext(
            self._state.registry, self._terminal.alternate_screen_command()
        )

    def undo(self, key):
        """Undo the change with the given key."""
        return self._state.registry.undo(key)

    def restore(self):
        """Undo all changes, restoring the terminal to how the process found it."""
        return self._state.registry.undo_all()


def terminal():
    """Get a Terminal for the current process."""
    return Terminal()

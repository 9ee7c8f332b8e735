import enum


class ClearType(enum.Enum):
    """The region of the screen to clear."""

    ALL = "all"
    FROM_CURSOR_DOWN = "from_cursor_down"
    FROM_CURSOR_UP = "from_cursor_up"
    CURRENT_LINE = "current_line"
    UNTIL_NEW_LINE = "until_new_line"


class TerminalBackend:
    """Base class for the screen actions of a backend."""

    def __init__(self, state):
        self._state = state

    def clear(self, clear_type):
        raise NotImplementedError()

    def size(self):
        """Get the size of the visible screen as (width, height)."""
        raise NotImplementedError()

    def set_size(self, width, height):
        raise NotImplementedError()

    def scroll_up(self, count):
        raise NotImplementedError()

    def scroll_down(self, count):
        raise NotImplementedError()

    def alternate_screen_command(self):
        """Create the command that switches to the alternate screen."""
        raise NotImplementedError()

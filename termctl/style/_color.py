from .._state import get_state


class TerminalColor:
    """Set the colors of the text that is written next."""

    def __init__(self, state=None):
        self._state = state or get_state()
        self._color = self._state.backends.resolve("color")

    def set_fg(self, color):
        """Set the foreground color."""
        self._color.set_fg(color)
        return self

    def set_bg(self, color):
        """Set the background color."""
        self._color.set_bg(color)
        return self

    def set_attr(self, attr):
        """Set a text attribute (escape sequence backend only)."""
        self._color.set_attr(attr)
        return self

    def reset(self):
        """Reset to the original colors."""
        self._color.reset()
        return self


def color():
    """Get a TerminalColor for the current process."""
    return TerminalColor()

from .._state import get_state


class TerminalCursor:
    """Move the cursor around, and print at its position.

    Positions are 0-based (x, y). The actions are forwarded to the backend
    that was selected for this process. Methods that change the cursor
    return the cursor itself, so calls can be chained::

        cursor().goto(10, 4).print("@")

    """

    def __init__(self, state=None):
        self._state = state or get_state()
        self._cursor = self._state.backends.resolve("cursor")

    def goto(self, x, y):
        """Go to position (x, y)."""
        self._cursor.goto(x, y)
        return self

    def pos(self):
        """Get the current position as an (x, y) tuple."""
        return self._cursor.pos()

    def move_up(self, count=1):
        self._cursor.move_up(count)
        return self

    def move_down(self, count=1):
        self._cursor.move_down(count)
        return self

    def move_left(self, count=1):
        self._cursor.move_left(count)
        return self

    def move_right(self, count=1):
        self._cursor.move_right(count)
        return self

    def save_position(self):
        """Save the current position.

        There is one saved position for the whole process, not one per
        cursor instance.
        """
        self._cursor.save_position()
        return self

    def reset_position(self):
        """Go back to the position saved with ``save_position()``."""
        self._cursor.reset_position()
        return self

    def print(self, value):
        """Print the value at the current position, and flush."""
        self._state.write(str(value))
        return self


def cursor():
    """Get a TerminalCursor for the current process."""
    return TerminalCursor()

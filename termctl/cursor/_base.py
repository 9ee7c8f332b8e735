class CursorBackend:
    """Base class for the cursor actions of a backend.

    Positions are 0-based (x, y), where x is the column.
    """

    def __init__(self, state):
        self._state = state

    def goto(self, x, y):
        raise NotImplementedError()

    def pos(self):
        raise NotImplementedError()

    def move_up(self, count):
        raise NotImplementedError()

    def move_down(self, count):
        raise NotImplementedError()

    def move_left(self, count):
        raise NotImplementedError()

    def move_right(self, count):
        raise NotImplementedError()

    def save_position(self):
        """Save the position. There is one saved position per process."""
        raise NotImplementedError()

    def reset_position(self):
        """Go to the saved position."""
        raise NotImplementedError()

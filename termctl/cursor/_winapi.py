import logging

from ._base import CursorBackend


logger = logging.getLogger("termctl")


class WinApiCursor(CursorBackend):
    """Cursor actions via the Windows console API.

    Relative moves read the position and then set it, holding the state
    lock in between. Moving past the top or left edge stops at 0.
    """

    def __init__(self, state):
        super().__init__(state)
        self._kernel = state.kernel

    def goto(self, x, y):
        self._kernel.set_cursor_position(x, y)

    def pos(self):
        return self._kernel.get_screen_buffer_info().cursor

    def _move(self, dx, dy):
        with self._state.lock:
            x, y = self.pos()
            self.goto(max(0, x + dx), max(0, y + dy))

    def move_up(self, count):
        self._move(0, -count)

    def move_down(self, count):
        self._move(0, count)

    def move_left(self, count):
        self._move(-count, 0)

    def move_right(self, count):
        self._move(count, 0)

    def save_position(self):
        self._state.saved_position = self.pos()

    def reset_position(self):
        position = self._state.saved_position
        if position is None:
            logger.warning("reset_position() called without a saved position")
            return
        self.goto(*position)

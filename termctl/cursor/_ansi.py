from ._base import CursorBackend


class AnsiCursor(CursorBackend):
    """Cursor actions via escape sequences."""

    def _move(self, count, direction):
        # CSI 0 A moves one line on most terminals
        if count > 0:
            self._state.write(f"\x1b[{count}{direction}")

    def goto(self, x, y):
        self._state.write(f"\x1b[{y + 1};{x + 1}H")

    def pos(self):
        state = self._state
        if state.is_windows:
            return state.kernel.get_screen_buffer_info().cursor
        from ..kernel.unix import query_cursor_position

        return query_cursor_position(state.fd_in, state.stdout)

    def move_up(self, count):
        self._move(count, "A")

    def move_down(self, count):
        self._move(count, "B")

    def move_right(self, count):
        self._move(count, "C")

    def move_left(self, count):
        self._move(count, "D")

    def save_position(self):
        # The terminal keeps the position (DECSC), so it is shared by all
        # cursor instances in the process.
        self._state.write("\x1b7")

    def reset_position(self):
        self._state.write("\x1b8")

import logging

from ..commands import WinAlternateScreenCommand
from ..kernel.wincon import Rect
from ._base import ClearType, TerminalBackend


logger = logging.getLogger("termctl")


class WinApiTerminal(TerminalBackend):
    """Screen actions via the Windows console API.

    Scrolling moves the console window over the screen buffer, in the same
    direction as the escape sequences move the content: scrolling up shows
    lines further down the buffer.
    """

    def __init__(self, state):
        super().__init__(state)
        self._kernel = state.kernel

    def clear(self, clear_type):
        kernel = self._kernel
        info = kernel.get_screen_buffer_info()
        width, height = info.size
        x, y = info.cursor
        new_cursor = None

        if clear_type == ClearType.ALL:
            start, count = (0, 0), width * height
            new_cursor = (0, 0)
        elif clear_type == ClearType.FROM_CURSOR_DOWN:
            start, count = (x, y), width * height - (y * width + x)
        elif clear_type == ClearType.FROM_CURSOR_UP:
            start, count = (0, 0), y * width + x + 1
        elif clear_type == ClearType.CURRENT_LINE:
            start, count = (0, y), width
            new_cursor = (0, y)
        elif clear_type == ClearType.UNTIL_NEW_LINE:
            start, count = (x, y), width - x
        else:
            raise ValueError(f"Invalid clear type: {clear_type!r}")

        kernel.fill_output_character(" ", count, start)
        kernel.fill_output_attribute(info.attributes, count, start)
        if new_cursor is not None:
            kernel.set_cursor_position(*new_cursor)

    def size(self):
        window = self._kernel.get_screen_buffer_info().window
        return window.right - window.left + 1, window.bottom - window.top + 1

    def set_size(self, width, height):
        kernel = self._kernel
        info = kernel.get_screen_buffer_info()
        window = info.window

        max_width, max_height = kernel.get_largest_window_size()
        if width > max_width or height > max_height:
            logger.warning(
                f"Window size {width}x{height} exceeds the maximum {max_width}x{max_height}"
            )
            return

        # The buffer must be at least as large as the window
        buffer_width, buffer_height = info.size
        new_buffer_size = (
            max(buffer_width, window.left + width),
            max(buffer_height, window.top + height),
        )
        if new_buffer_size != info.size:
            if not kernel.set_screen_buffer_size(*new_buffer_size):
                logger.warning(f"Cannot resize screen buffer to {new_buffer_size}")
                return

        rect = Rect(
            window.left, window.top, window.left + width - 1, window.top + height - 1
        )
        if not kernel.set_window_info(rect):
            logger.warning(f"Cannot resize console window to {width}x{height}")

    def _shift_window(self, dy):
        kernel = self._kernel
        info = kernel.get_screen_buffer_info()
        window = info.window
        # Stay within the buffer
        dy = max(dy, -window.top)
        dy = min(dy, info.size[1] - 1 - window.bottom)
        if dy == 0:
            return
        rect = Rect(window.left, window.top + dy, window.right, window.bottom + dy)
        if not kernel.set_window_info(rect):
            logger.warning(f"Cannot scroll console window by {dy}")

    def scroll_up(self, count):
        self._shift_window(count)

    def scroll_down(self, count):
        self._shift_window(-count)

    def alternate_screen_command(self):
        return WinAlternateScreenCommand(self._kernel)

import logging

from ..kernel.wincon import (
    BACKGROUND_BLUE,
    BACKGROUND_GREEN,
    BACKGROUND_INTENSITY,
    BACKGROUND_MASK,
    BACKGROUND_RED,
    FOREGROUND_BLUE,
    FOREGROUND_GREEN,
    FOREGROUND_INTENSITY,
    FOREGROUND_MASK,
    FOREGROUND_RED,
)
from ._base import Color, ColorBackend, ColorType


logger = logging.getLogger("termctl")


def _color_bits(blue, green, red, intensity):
    return {
        Color.BLACK: 0,
        Color.DARK_RED: red,
        Color.DARK_GREEN: green,
        Color.DARK_YELLOW: green | red,
        Color.DARK_BLUE: blue,
        Color.DARK_MAGENTA: red | blue,
        Color.DARK_CYAN: green | blue,
        Color.GREY: red | green | blue,
        Color.RED: intensity | red,
        Color.GREEN: intensity | green,
        Color.YELLOW: intensity | green | red,
        Color.BLUE: intensity | blue,
        Color.MAGENTA: intensity | red | blue,
        Color.CYAN: intensity | green | blue,
        Color.WHITE: intensity | red | green | blue,
    }


FOREGROUND_BITS = _color_bits(
    FOREGROUND_BLUE, FOREGROUND_GREEN, FOREGROUND_RED, FOREGROUND_INTENSITY
)
BACKGROUND_BITS = _color_bits(
    BACKGROUND_BLUE, BACKGROUND_GREEN, BACKGROUND_RED, BACKGROUND_INTENSITY
)


def color_attributes(color, color_type):
    """Get the console text attribute bits for a color."""
    if color_type == ColorType.FOREGROUND:
        return FOREGROUND_BITS[color]
    return BACKGROUND_BITS[color]


class WinApiColor(ColorBackend):
    """Color actions via the console text attributes.

    The attributes found when the backend is created are what ``reset()``
    goes back to.
    """

    def __init__(self, state):
        super().__init__(state)
        self._kernel = state.kernel
        self._ori_attributes = self._kernel.get_screen_buffer_info().attributes

    def _current(self):
        return self._kernel.get_screen_buffer_info().attributes

    def set_fg(self, color):
        # Keep everything but the foreground, e.g. the background and the
        # COMMON_LVB_* bits
        keep = self._current() & ~(FOREGROUND_MASK | FOREGROUND_INTENSITY)
        self._kernel.set_text_attribute(
            color_attributes(color, ColorType.FOREGROUND) | keep
        )

    def set_bg(self, color):
        keep = self._current() & ~(BACKGROUND_MASK | BACKGROUND_INTENSITY)
        self._kernel.set_text_attribute(
            color_attributes(color, ColorType.BACKGROUND) | keep
        )

    def set_attr(self, attr):
        logger.debug(f"text attribute {attr!r} is not supported by the console API")

    def reset(self):
        self._kernel.set_text_attribute(self._ori_attributes)

from ._base import Color, ColorBackend, ColorType


# Indices in the 256-color palette
PALETTE_INDICES = {
    Color.BLACK: 0,
    Color.DARK_RED: 1,
    Color.DARK_GREEN: 2,
    Color.DARK_YELLOW: 3,
    Color.DARK_BLUE: 4,
    Color.DARK_MAGENTA: 5,
    Color.DARK_CYAN: 6,
    Color.GREY: 7,
    Color.RED: 9,
    Color.GREEN: 10,
    Color.YELLOW: 11,
    Color.BLUE: 12,
    Color.MAGENTA: 13,
    Color.CYAN: 14,
    Color.WHITE: 15,
}


def color_sgr(color, color_type):
    """Get the SGR parameters for a color, e.g. "38;5;9"."""
    prefix = "38" if color_type == ColorType.FOREGROUND else "48"
    return f"{prefix};5;{PALETTE_INDICES[color]}"


class AnsiColor(ColorBackend):
    """Color actions via escape sequences."""

    def set_fg(self, color):
        self._state.write(f"\x1b[{color_sgr(color, ColorType.FOREGROUND)}m")

    def set_bg(self, color):
        self._state.write(f"\x1b[{color_sgr(color, ColorType.BACKGROUND)}m")

    def set_attr(self, attr):
        self._state.write(f"\x1b[{int(attr)}m")

    def reset(self):
        self._state.write("\x1b[0m")

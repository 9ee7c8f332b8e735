import enum


class Color(enum.Enum):
    """The colors that both backends can show."""

    BLACK = "black"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    GREY = "grey"
    WHITE = "white"


class ColorType(enum.Enum):
    FOREGROUND = "foreground"
    BACKGROUND = "background"


class Attribute(enum.IntEnum):
    """Text attributes, as SGR parameters. Only shown by the escape sequence backend."""

    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINED = 4
    SLOW_BLINK = 5
    RAPID_BLINK = 6
    REVERSE = 7
    HIDDEN = 8
    CROSSED_OUT = 9


class ColorBackend:
    """Base class for the color actions of a backend."""

    def __init__(self, state):
        self._state = state

    def set_fg(self, color):
        raise NotImplementedError()

    def set_bg(self, color):
        raise NotImplementedError()

    def set_attr(self, attr):
        raise NotImplementedError()

    def reset(self):
        """Reset colors and attributes to what they were at the start."""
        raise NotImplementedError()

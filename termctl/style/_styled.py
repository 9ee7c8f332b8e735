from .._state import get_state
from ._ansi import color_sgr
from ._base import Attribute, ColorType
from ._color import TerminalColor


class ObjectStyle:
    """Foreground, background and attributes that can be applied to a value."""

    def __init__(self, fg=None, bg=None, attrs=()):
        self.fg_color = fg
        self.bg_color = bg
        self.attrs = list(attrs)

    def __repr__(self):
        return f"<ObjectStyle fg={self.fg_color} bg={self.bg_color} attrs={self.attrs}>"

    def fg(self, color):
        self.fg_color = color
        return self

    def bg(self, color):
        self.bg_color = color
        return self

    def add_attr(self, attr):
        self.attrs.append(Attribute(attr))
        return self

    def copy(self):
        return ObjectStyle(self.fg_color, self.bg_color, self.attrs)

    def apply_to(self, value):
        """Get a StyledObject for the value, with a copy of this style."""
        return StyledObject(self.copy(), value)


class StyledObject:
    """A value with a style.

    ``str()`` gives the value wrapped in escape sequences. ``print()``
    shows it via the color backend of the process, so that it also works
    on consoles without escape sequence support.
    """

    def __init__(self, style, content):
        self.style = style
        self.content = content

    def fg(self, color):
        self.style.fg(color)
        return self

    def bg(self, color):
        self.style.bg(color)
        return self

    def attr(self, attr):
        self.style.add_attr(attr)
        return self

    def _sgr_params(self):
        style = self.style
        params = []
        if style.fg_color is not None:
            params.append(color_sgr(style.fg_color, ColorType.FOREGROUND))
        if style.bg_color is not None:
            params.append(color_sgr(style.bg_color, ColorType.BACKGROUND))
        params.extend(str(int(attr)) for attr in style.attrs)
        return params

    def __str__(self):
        params = self._sgr_params()
        if not params:
            return str(self.content)
        return f"\x1b[{';'.join(params)}m{self.content}\x1b[0m"

    def print(self, state=None):
        """Write the styled value to the terminal."""
        state = state or get_state()
        colors = TerminalColor(state)
        style = self.style
        styled = False
        if style.fg_color is not None:
            colors.set_fg(style.fg_color)
            styled = True
        if style.bg_color is not None:
            colors.set_bg(style.bg_color)
            styled = True
        for attr in style.attrs:
            colors.set_attr(attr)
            styled = True
        state.write(str(self.content))
        if styled:
            colors.reset()
        return self


def paint(value):
    """Get a StyledObject for the value, to set colors on::

        paint("Error").fg(Color.RED).bg(Color.BLACK).print()

    """
    return ObjectStyle().apply_to(value)

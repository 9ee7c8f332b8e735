"""
termctl - control the terminal on Unix and Windows.

Cursor positioning, clearing, scrolling, raw input mode, the alternate
screen and text colors, via escape sequences where the terminal supports
them, and via the Windows console API where it does not. Which of the two
is used is decided once per process.

Changes to the terminal modes are reversible commands, kept in a
registry, so that the terminal can always be put back the way it was::

    import termctl

    term = termctl.terminal()
    with term.alternate_screen(), term.raw_mode():
        term.clear()
        termctl.cursor().goto(5, 10).print("Hello")
        termctl.paint("world").fg(termctl.Color.RED).print()

"""

import os

from .errors import TerminalError, TerminalFatalError  # noqa
from ._capability import Capability, CapabilityProbe  # noqa
from ._state import TerminalState, get_state, set_state  # noqa
from .commands import Command, CommandRegistry  # noqa
from .cursor import TerminalCursor, cursor  # noqa
from .terminal import ClearType, Terminal, terminal  # noqa
from .style import (  # noqa
    Attribute,
    Color,
    ColorType,
    ObjectStyle,
    StyledObject,
    TerminalColor,
    color,
    paint,
)
from .utils import enable_udp_logging
from ._cli import cli  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))


if os.environ.get("TERMCTL_UDP_LOG"):
    enable_udp_logging()

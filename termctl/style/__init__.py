"""
Text colors and attributes, with a backend for escape sequences and one
for the Windows console API.
"""

from ._base import Attribute, Color, ColorBackend, ColorType  # noqa
from ._ansi import AnsiColor  # noqa
from ._winapi import WinApiColor  # noqa
from ._color import TerminalColor, color  # noqa
from ._styled import ObjectStyle, StyledObject, paint  # noqa

"""
Screen actions (clearing, scrolling, resizing) and terminal modes (raw
input, alternate screen), with a backend for escape sequences and one for
the Windows console API.
"""

from ._base import ClearType, TerminalBackend  # noqa
from ._ansi import AnsiTerminal  # noqa
from ._winapi import WinApiTerminal  # noqa
from ._context import CommandContext  # noqa
from ._terminal import Terminal, terminal  # noqa

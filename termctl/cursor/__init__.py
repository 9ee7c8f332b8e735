"""
Cursor positioning, with a backend for escape sequences and one for the
Windows console API.
"""

from ._base import CursorBackend  # noqa
from ._ansi import AnsiCursor  # noqa
from ._winapi import WinApiCursor  # noqa
from ._cursor import TerminalCursor, cursor  # noqa

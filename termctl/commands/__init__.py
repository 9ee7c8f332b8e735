"""
Reversible changes to the terminal, and the registry that keeps track of them.
"""

from ._base import Command, CommandRegistry, generate_key  # noqa
from ._ansi import AnsiAlternateScreenCommand  # noqa
from ._windows import (  # noqa
    ConsoleModeCommand,
    EnableAnsiCommand,
    WinAlternateScreenCommand,
    WinRawModeCommand,
)


def raw_mode_command(state):
    """Create the command that puts the input of the given state in raw mode."""
    if state.is_windows:
        return WinRawModeCommand(state.kernel)
    else:
        from ._unix import UnixRawModeCommand

        return UnixRawModeCommand(state.fd_in)

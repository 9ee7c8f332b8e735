class TerminalError(Exception):
    """Base class for errors raised by termctl."""


class TerminalFatalError(TerminalError):
    """The terminal is in a state we cannot safely continue from.

    Raised when a console handle is invalid, a screen buffer cannot be
    created or activated, or a coordinate is outside what the console can
    represent. The library never catches this; continuing would write to a
    terminal in an unknown state.
    """

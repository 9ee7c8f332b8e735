"""
Commands that change the state of a Windows console through kernel32.

See https://docs.microsoft.com/en-us/windows/console/high-level-console-modes
"""

from ..kernel.wincon import (
    ENABLE_ECHO_INPUT,
    ENABLE_LINE_INPUT,
    ENABLE_PROCESSED_INPUT,
    ENABLE_VIRTUAL_TERMINAL_PROCESSING,
    Rect,
)
from ._base import Command


class ConsoleModeCommand(Command):
    """Set and/or clear flags in the mode word of a console handle.

    Only the given flags are touched. The mode word found on execute is
    written back on undo.
    """

    def __init__(self, kernel, add=0, remove=0):
        super().__init__()
        self._kernel = kernel
        self._add = add
        self._remove = remove
        self._ori_mode = None

    def _get_handle(self):
        raise NotImplementedError()

    def _execute(self):
        handle = self._get_handle()
        ori_mode = self._kernel.get_console_mode(handle)
        if ori_mode is None:
            return False
        new_mode = (ori_mode | self._add) & ~self._remove
        if not self._kernel.set_console_mode(handle, new_mode):
            return False
        self._ori_mode = ori_mode
        return True

    def _undo(self):
        return self._kernel.set_console_mode(self._get_handle(), self._ori_mode)


class EnableAnsiCommand(ConsoleModeCommand):
    """Enable processing of escape sequences on the console output.

    Fails on consoles older than Windows 10, which is how we detect whether
    escape sequences are supported at all.
    """

    def __init__(self, kernel):
        super().__init__(kernel, add=ENABLE_VIRTUAL_TERMINAL_PROCESSING)

    def _get_handle(self):
        return self._kernel.output_handle


class WinRawModeCommand(ConsoleModeCommand):
    """Disable line input, echo and Ctrl-C processing on the console input."""

    def __init__(self, kernel):
        super().__init__(
            kernel,
            remove=ENABLE_LINE_INPUT | ENABLE_ECHO_INPUT | ENABLE_PROCESSED_INPUT,
        )

    def _get_handle(self):
        return self._kernel.input_handle


class WinAlternateScreenCommand(Command):
    """Switch to a new console screen buffer, and back on undo.

    The top two rows (80 columns) of the original buffer are copied into
    the new buffer. The block has a fixed size, so switching does not
    depend on the size of the screen.

    Only the active buffer changes. The cursor, color and terminal backends,
    and Python's stdout, keep writing to the original std output handle, so
    output does not show on the new buffer until it is switched back.
    See https://docs.microsoft.com/en-us/windows/console/reading-and-writing-blocks-of-characters-and-attributes
    """

    COPY_RECT = Rect(left=0, top=0, right=79, bottom=1)

    def __init__(self, kernel):
        super().__init__()
        self._kernel = kernel
        self._screen_handle = None

    def _execute(self):
        kernel = self._kernel
        ori_handle = kernel.output_handle
        screen_handle = kernel.create_screen_buffer()
        kernel.copy_block(ori_handle, screen_handle, self.COPY_RECT)
        kernel.set_active_screen_buffer(screen_handle)
        self._screen_handle = screen_handle
        return True

    def _undo(self):
        kernel = self._kernel
        kernel.set_active_screen_buffer(kernel.output_handle)
        kernel.close_handle(self._screen_handle)
        self._screen_handle = None
        return True

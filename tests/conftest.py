import io

import pytest

from termctl import TerminalState
from termctl.errors import TerminalFatalError
from termctl.kernel.wincon import (
    ENABLE_ECHO_INPUT,
    ENABLE_LINE_INPUT,
    ENABLE_PROCESSED_INPUT,
    ENABLE_PROCESSED_OUTPUT,
    ENABLE_VIRTUAL_TERMINAL_PROCESSING,
    ENABLE_WINDOW_INPUT,
    ENABLE_WRAP_AT_EOL_OUTPUT,
    Rect,
    ScreenBufferInfo,
)


class FakeKernel:
    """Emulates the parts of a Windows console that termctl uses."""

    def __init__(self, vt_supported=True, size=(80, 300), window=(0, 0, 79, 24)):
        self.output_handle = "stdout"
        self.input_handle = "stdin"
        self.vt_supported = vt_supported
        self.modes = {
            "stdout": ENABLE_PROCESSED_OUTPUT | ENABLE_WRAP_AT_EOL_OUTPUT,
            "stdin": ENABLE_PROCESSED_INPUT
            | ENABLE_LINE_INPUT
            | ENABLE_ECHO_INPUT
            | ENABLE_WINDOW_INPUT
            | 0x0080,
        }
        self.fail_get_mode = False
        self.fail_set_mode = False
        self.size = size
        self.window = Rect(*window)
        self.cursor = (0, 0)
        self.attributes = 0x0007
        self.cells = {}
        self.cell_attributes = {}
        self.active = "stdout"
        self.created = []
        self.closed = []
        self.copies = []
        self.calls = []

    def get_console_mode(self, handle):
        self.calls.append(("get_console_mode", handle))
        if self.fail_get_mode:
            return None
        return self.modes[handle]

    def set_console_mode(self, handle, mode):
        self.calls.append(("set_console_mode", handle, mode))
        if self.fail_set_mode:
            return False
        if mode & ENABLE_VIRTUAL_TERMINAL_PROCESSING and handle == "stdout":
            if not self.vt_supported:
                return False
        self.modes[handle] = mode
        return True

    def get_screen_buffer_info(self, handle=None):
        return ScreenBufferInfo(
            size=self.size,
            cursor=self.cursor,
            attributes=self.attributes,
            window=self.window,
            maximum_window=(self.window.right + 1, self.window.bottom + 1),
        )

    def get_largest_window_size(self):
        return 200, 100

    def set_cursor_position(self, x, y):
        if not (0 <= x < self.size[0] and 0 <= y < self.size[1]):
            raise TerminalFatalError(f"Cannot set cursor position to ({x}, {y})")
        self.cursor = (x, y)

    def set_text_attribute(self, attributes):
        self.attributes = attributes
        return True

    def set_window_info(self, rect, absolute=True):
        self.window = rect
        return True

    def set_screen_buffer_size(self, width, height):
        self.size = (width, height)
        return True

    def _fill(self, target, value, count, start):
        width = self.size[0]
        index = start[1] * width + start[0]
        for i in range(index, index + count):
            target[(i % width, i // width)] = value
        return count

    def fill_output_character(self, char, count, start):
        return self._fill(self.cells, char, count, start)

    def fill_output_attribute(self, attributes, count, start):
        return self._fill(self.cell_attributes, attributes, count, start)

    def create_screen_buffer(self):
        handle = f"screen{len(self.created) + 1}"
        self.created.append(handle)
        return handle

    def set_active_screen_buffer(self, handle):
        self.active = handle

    def copy_block(self, source, target, rect):
        self.copies.append((source, target, rect))

    def close_handle(self, handle):
        self.closed.append(handle)
        return True


class FakeStdin:
    def __init__(self, fd=7):
        self._fd = fd

    def fileno(self):
        return self._fd


@pytest.fixture
def kernel():
    return FakeKernel()


@pytest.fixture
def win_state(kernel):
    """State of a Windows 10 console, with escape sequences supported."""
    return TerminalState(platform="win32", kernel=kernel, stdout=io.StringIO())


@pytest.fixture
def legacy_kernel():
    return FakeKernel(vt_supported=False)


@pytest.fixture
def legacy_state(legacy_kernel):
    """State of a Windows console without escape sequence support."""
    return TerminalState(platform="win32", kernel=legacy_kernel, stdout=io.StringIO())


@pytest.fixture
def unix_state():
    return TerminalState(platform="linux", stdin=FakeStdin(), stdout=io.StringIO())

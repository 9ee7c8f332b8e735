"""
All calls into kernel32 go through this module.

Only importable on Windows. Everything above this layer talks to a
``WindowsKernel`` instance with plain Python values (ints, tuples and the
namedtuples from ``wincon``), so that it can be replaced by a fake in tests.
"""

import ctypes
import logging
from ctypes import wintypes

from ..errors import TerminalFatalError
from .wincon import (
    MAX_COORD,
    STD_INPUT_HANDLE,
    STD_OUTPUT_HANDLE,
    Rect,
    ScreenBufferInfo,
)


logger = logging.getLogger("termctl")

KERNEL32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore

INVALID_HANDLE_VALUE = wintypes.HANDLE(-1).value

GENERIC_READ = 0x80000000
GENERIC_WRITE = 0x40000000
FILE_SHARE_READ = 0x00000001
FILE_SHARE_WRITE = 0x00000002
CONSOLE_TEXTMODE_BUFFER = 1


class COORD(ctypes.Structure):
    _fields_ = [("X", wintypes.SHORT), ("Y", wintypes.SHORT)]


class SMALL_RECT(ctypes.Structure):
    _fields_ = [
        ("Left", wintypes.SHORT),
        ("Top", wintypes.SHORT),
        ("Right", wintypes.SHORT),
        ("Bottom", wintypes.SHORT),
    ]


class CONSOLE_SCREEN_BUFFER_INFO(ctypes.Structure):
    _fields_ = [
        ("dwSize", COORD),
        ("dwCursorPosition", COORD),
        ("wAttributes", wintypes.WORD),
        ("srWindow", SMALL_RECT),
        ("dwMaximumWindowSize", COORD),
    ]


class CHAR_INFO(ctypes.Structure):
    class _Char(ctypes.Union):
        _fields_ = [("UnicodeChar", wintypes.WCHAR), ("AsciiChar", wintypes.CHAR)]

    _fields_ = [("Char", _Char), ("Attributes", wintypes.WORD)]


KERNEL32.GetStdHandle.argtypes = [wintypes.DWORD]
KERNEL32.GetStdHandle.restype = wintypes.HANDLE
KERNEL32.GetConsoleMode.argtypes = [wintypes.HANDLE, ctypes.POINTER(wintypes.DWORD)]
KERNEL32.SetConsoleMode.argtypes = [wintypes.HANDLE, wintypes.DWORD]
KERNEL32.GetConsoleScreenBufferInfo.argtypes = [
    wintypes.HANDLE,
    ctypes.POINTER(CONSOLE_SCREEN_BUFFER_INFO),
]
KERNEL32.SetConsoleCursorPosition.argtypes = [wintypes.HANDLE, COORD]
KERNEL32.SetConsoleTextAttribute.argtypes = [wintypes.HANDLE, wintypes.WORD]
KERNEL32.SetConsoleWindowInfo.argtypes = [
    wintypes.HANDLE,
    wintypes.BOOL,
    ctypes.POINTER(SMALL_RECT),
]
KERNEL32.SetConsoleScreenBufferSize.argtypes = [wintypes.HANDLE, COORD]
KERNEL32.GetLargestConsoleWindowSize.argtypes = [wintypes.HANDLE]
KERNEL32.GetLargestConsoleWindowSize.restype = COORD
KERNEL32.FillConsoleOutputCharacterW.argtypes = [
    wintypes.HANDLE,
    wintypes.WCHAR,
    wintypes.DWORD,
    COORD,
    ctypes.POINTER(wintypes.DWORD),
]
KERNEL32.FillConsoleOutputAttribute.argtypes = [
    wintypes.HANDLE,
    wintypes.WORD,
    wintypes.DWORD,
    COORD,
    ctypes.POINTER(wintypes.DWORD),
]
KERNEL32.CreateConsoleScreenBuffer.argtypes = [
    wintypes.DWORD,
    wintypes.DWORD,
    ctypes.c_void_p,
    wintypes.DWORD,
    ctypes.c_void_p,
]
KERNEL32.CreateConsoleScreenBuffer.restype = wintypes.HANDLE
KERNEL32.SetConsoleActiveScreenBuffer.argtypes = [wintypes.HANDLE]
KERNEL32.ReadConsoleOutputW.argtypes = [
    wintypes.HANDLE,
    ctypes.POINTER(CHAR_INFO),
    COORD,
    COORD,
    ctypes.POINTER(SMALL_RECT),
]
KERNEL32.WriteConsoleOutputW.argtypes = [
    wintypes.HANDLE,
    ctypes.POINTER(CHAR_INFO),
    COORD,
    COORD,
    ctypes.POINTER(SMALL_RECT),
]
KERNEL32.CloseHandle.argtypes = [wintypes.HANDLE]


def is_valid_handle(handle) -> bool:
    return handle is not None and handle != INVALID_HANDLE_VALUE


def _small_rect(rect):
    return SMALL_RECT(rect.left, rect.top, rect.right, rect.bottom)


class WindowsKernel:
    """Thin object wrapper around the console functions of kernel32.

    The std handles are resolved on first use and cached; failing to get
    them is fatal, since no console operation can work without them.
    """

    def __init__(self):
        self._output_handle = None
        self._input_handle = None

    @property
    def output_handle(self):
        if self._output_handle is None:
            handle = KERNEL32.GetStdHandle(STD_OUTPUT_HANDLE)
            if not is_valid_handle(handle):
                raise TerminalFatalError("Cannot get console output handle")
            self._output_handle = handle
        return self._output_handle

    @property
    def input_handle(self):
        if self._input_handle is None:
            handle = KERNEL32.GetStdHandle(STD_INPUT_HANDLE)
            if not is_valid_handle(handle):
                raise TerminalFatalError("Cannot get console input handle")
            self._input_handle = handle
        return self._input_handle

    # Modes

    def get_console_mode(self, handle):
        """Get the mode word of the given handle, or None on failure."""
        mode = wintypes.DWORD()
        if not KERNEL32.GetConsoleMode(handle, ctypes.byref(mode)):
            logger.info(f"GetConsoleMode failed: {ctypes.get_last_error()}")
            return None
        return mode.value

    def set_console_mode(self, handle, mode: int) -> bool:
        if not KERNEL32.SetConsoleMode(handle, mode):
            logger.info(f"SetConsoleMode failed: {ctypes.get_last_error()}")
            return False
        return True

    # Screen buffer

    def get_screen_buffer_info(self, handle=None):
        handle = self.output_handle if handle is None else handle
        csbi = CONSOLE_SCREEN_BUFFER_INFO()
        if not KERNEL32.GetConsoleScreenBufferInfo(handle, ctypes.byref(csbi)):
            raise TerminalFatalError("Cannot get console screen buffer info")
        window = csbi.srWindow
        return ScreenBufferInfo(
            size=(csbi.dwSize.X, csbi.dwSize.Y),
            cursor=(csbi.dwCursorPosition.X, csbi.dwCursorPosition.Y),
            attributes=csbi.wAttributes,
            window=Rect(window.Left, window.Top, window.Right, window.Bottom),
            maximum_window=(csbi.dwMaximumWindowSize.X, csbi.dwMaximumWindowSize.Y),
        )

    def get_largest_window_size(self):
        size = KERNEL32.GetLargestConsoleWindowSize(self.output_handle)
        return size.X, size.Y

    def set_cursor_position(self, x: int, y: int):
        if not (0 <= x < MAX_COORD):
            raise TerminalFatalError(f"X: {x}, argument out of range")
        if not (0 <= y < MAX_COORD):
            raise TerminalFatalError(f"Y: {y}, argument out of range")
        if not KERNEL32.SetConsoleCursorPosition(self.output_handle, COORD(x, y)):
            raise TerminalFatalError(f"Cannot set cursor position to ({x}, {y})")

    def set_text_attribute(self, attributes: int) -> bool:
        return bool(KERNEL32.SetConsoleTextAttribute(self.output_handle, attributes))

    def set_window_info(self, rect, absolute=True) -> bool:
        small_rect = _small_rect(rect)
        return bool(
            KERNEL32.SetConsoleWindowInfo(
                self.output_handle, absolute, ctypes.byref(small_rect)
            )
        )

    def set_screen_buffer_size(self, width: int, height: int) -> bool:
        return bool(
            KERNEL32.SetConsoleScreenBufferSize(self.output_handle, COORD(width, height))
        )

    def fill_output_character(self, char: str, count: int, start) -> int:
        written = wintypes.DWORD()
        KERNEL32.FillConsoleOutputCharacterW(
            self.output_handle, char, count, COORD(*start), ctypes.byref(written)
        )
        return written.value

    def fill_output_attribute(self, attributes: int, count: int, start) -> int:
        written = wintypes.DWORD()
        KERNEL32.FillConsoleOutputAttribute(
            self.output_handle, attributes, count, COORD(*start), ctypes.byref(written)
        )
        return written.value

    def create_screen_buffer(self):
        handle = KERNEL32.CreateConsoleScreenBuffer(
            GENERIC_READ | GENERIC_WRITE,
            FILE_SHARE_READ | FILE_SHARE_WRITE,
            None,
            CONSOLE_TEXTMODE_BUFFER,
            None,
        )
        if not is_valid_handle(handle):
            raise TerminalFatalError("Cannot create console screen buffer")
        return handle

    def set_active_screen_buffer(self, handle):
        if not KERNEL32.SetConsoleActiveScreenBuffer(handle):
            raise TerminalFatalError("Cannot set active screen buffer")

    def copy_block(self, source, target, rect):
        """Copy the cells (characters and attributes) in rect from source to target."""
        width = rect.right - rect.left + 1
        height = rect.bottom - rect.top + 1
        cells = (CHAR_INFO * (width * height))()
        buffer_size = COORD(width, height)
        buffer_coord = COORD(0, 0)

        read_rect = _small_rect(rect)
        if not KERNEL32.ReadConsoleOutputW(
            source, cells, buffer_size, buffer_coord, ctypes.byref(read_rect)
        ):
            raise TerminalFatalError("Cannot read console output")

        write_rect = _small_rect(rect)
        if not KERNEL32.WriteConsoleOutputW(
            target, cells, buffer_size, buffer_coord, ctypes.byref(write_rect)
        ):
            raise TerminalFatalError("Cannot write console output")

    def close_handle(self, handle) -> bool:
        return bool(KERNEL32.CloseHandle(handle))

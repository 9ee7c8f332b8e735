"""
Constants and plain value types for the Windows console API.

These are kept free of ctypes so that the commands and backends that use
them can be imported (and tested) on any platform. The ctypes side lives
in ``windows.py``.
"""

from collections import namedtuple


STD_INPUT_HANDLE = -10
STD_OUTPUT_HANDLE = -11

# Input modes
ENABLE_PROCESSED_INPUT = 0x0001
ENABLE_LINE_INPUT = 0x0002
ENABLE_ECHO_INPUT = 0x0004
ENABLE_WINDOW_INPUT = 0x0008
ENABLE_VIRTUAL_TERMINAL_INPUT = 0x0200

# Output modes
ENABLE_PROCESSED_OUTPUT = 0x0001
ENABLE_WRAP_AT_EOL_OUTPUT = 0x0002
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004

# Text attributes
FOREGROUND_BLUE = 0x0001
FOREGROUND_GREEN = 0x0002
FOREGROUND_RED = 0x0004
FOREGROUND_INTENSITY = 0x0008
BACKGROUND_BLUE = 0x0010
BACKGROUND_GREEN = 0x0020
BACKGROUND_RED = 0x0040
BACKGROUND_INTENSITY = 0x0080

FOREGROUND_MASK = FOREGROUND_BLUE | FOREGROUND_GREEN | FOREGROUND_RED
BACKGROUND_MASK = BACKGROUND_BLUE | BACKGROUND_GREEN | BACKGROUND_RED

# SetConsoleCursorPosition takes a COORD of SHORTs
MAX_COORD = 0x7FFF


Rect = namedtuple("Rect", ["left", "top", "right", "bottom"])

ScreenBufferInfo = namedtuple(
    "ScreenBufferInfo", ["size", "cursor", "attributes", "window", "maximum_window"]
)
ScreenBufferInfo.__doc__ = """Snapshot of CONSOLE_SCREEN_BUFFER_INFO.

size and cursor and maximum_window are (x, y) tuples, window is a Rect.
"""

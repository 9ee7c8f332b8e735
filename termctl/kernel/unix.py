"""
Unix terminal helpers on top of termios.
"""

import os
import re
import tty
import select
import logging
import termios


logger = logging.getLogger("termctl")

# Cursor position report, e.g. "\x1b[12;40R" (row;column, 1-based)
CPR_PATTERN = re.compile(r"\x1b\[(\d+);(\d+)R")


def patch_lflag(attrs: int) -> int:
    return attrs & ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)


def patch_iflag(attrs: int) -> int:
    return attrs & ~(
        # Disable XON/XOFF flow control on output and input.
        # (Don't capture Ctrl-S and Ctrl-Q.)
        # Like executing: "stty -ixon."
        termios.IXON
        | termios.IXOFF
        |
        # Don't translate carriage return into newline on input.
        termios.ICRNL
        | termios.INLCR
        | termios.IGNCR
    )


def get_terminal_mode(fd):
    """Get the termios attributes of fd, or None if fd is not a terminal."""
    try:
        return termios.tcgetattr(fd)
    except termios.error as err:
        logger.info(f"tcgetattr failed for fd {fd}: {err}")
        return None


def set_terminal_mode(fd, mode) -> bool:
    try:
        termios.tcsetattr(fd, termios.TCSANOW, mode)
    except termios.error as err:
        logger.info(f"tcsetattr failed for fd {fd}: {err}")
        return False
    return True


def make_raw(mode):
    """Return a copy of the given termios attributes, patched for raw input."""
    new_mode = list(mode)
    new_mode[tty.LFLAG] = patch_lflag(mode[tty.LFLAG])
    new_mode[tty.IFLAG] = patch_iflag(mode[tty.IFLAG])
    new_mode[tty.CC] = list(mode[tty.CC])
    # VMIN defines the number of characters read at a time in
    # non-canonical mode. It seems to default to 1 on Linux, but on
    # Solaris and derived operating systems it defaults to 4. (This is
    # because the VMIN slot is the same as the VEOF slot, which
    # defaults to ASCII EOT = Ctrl-D = 4.)
    new_mode[tty.CC][termios.VMIN] = 1
    return new_mode


def parse_cursor_report(text):
    """Parse a cursor position report into 0-based (x, y), or None."""
    match = CPR_PATTERN.search(text)
    if match is None:
        return None
    row, col = (int(val) for val in match.groups())
    return col - 1, row - 1


def query_cursor_position(fd_in, stdout, timeout=1.0):
    """Ask the terminal where the cursor is.

    The input is switched to non-canonical mode for the duration of the
    query, so that the report is not echoed and arrives without a newline.
    Returns (-1, -1) when the terminal does not answer within timeout.

    Other input that arrives in the same reads, e.g. type-ahead, is
    dropped (and logged at debug level).
    """
    ori_mode = get_terminal_mode(fd_in)
    if ori_mode is None:
        logger.warning("Cannot query cursor position: input is not a terminal")
        return -1, -1

    set_terminal_mode(fd_in, make_raw(ori_mode))
    try:
        stdout.write("\x1b[6n")
        stdout.flush()
        response = ""
        while True:
            ready, _, _ = select.select([fd_in], [], [], timeout)
            if not ready:
                break
            bb = os.read(fd_in, 32)
            if not bb:
                break
            response += bb.decode(errors="replace")
            match = CPR_PATTERN.search(response)
            if match is not None:
                dropped = response[: match.start()] + response[match.end() :]
                if dropped:
                    logger.debug(f"Dropped input around cursor report: {dropped!r}")
                return parse_cursor_report(match.group(0))
    finally:
        set_terminal_mode(fd_in, ori_mode)

    logger.warning(f"No cursor position report from terminal, got {response!r}")
    return -1, -1

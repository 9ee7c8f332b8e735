from termctl.commands import (
    EnableAnsiCommand,
    WinAlternateScreenCommand,
    WinRawModeCommand,
)
from termctl.kernel.wincon import (
    ENABLE_ECHO_INPUT,
    ENABLE_LINE_INPUT,
    ENABLE_PROCESSED_INPUT,
    ENABLE_VIRTUAL_TERMINAL_PROCESSING,
    ENABLE_WINDOW_INPUT,
    ENABLE_WRAP_AT_EOL_OUTPUT,
)


def test_enable_ansi(kernel):
    ori_mode = kernel.modes["stdout"]
    command = EnableAnsiCommand(kernel)

    assert command.execute() is True
    mode = kernel.modes["stdout"]
    assert mode & ENABLE_VIRTUAL_TERMINAL_PROCESSING
    # Unrelated bits are untouched
    assert mode & ~ENABLE_VIRTUAL_TERMINAL_PROCESSING == ori_mode
    # Input is not touched
    assert not any(call[1] == "stdin" for call in kernel.calls)

    assert command.undo() is True
    assert kernel.modes["stdout"] == ori_mode


def test_enable_ansi_unsupported(legacy_kernel):
    ori_mode = legacy_kernel.modes["stdout"]
    command = EnableAnsiCommand(legacy_kernel)
    assert command.execute() is False
    assert not command.applied
    assert legacy_kernel.modes["stdout"] == ori_mode


def test_enable_ansi_cannot_get_mode(kernel):
    kernel.fail_get_mode = True
    command = EnableAnsiCommand(kernel)
    assert command.execute() is False
    # Nothing was written
    assert not any(call[0] == "set_console_mode" for call in kernel.calls)


def test_raw_mode_restores_mode_word_exactly(kernel):
    ori_mode = kernel.modes["stdin"]
    command = WinRawModeCommand(kernel)

    assert command.execute() is True
    mode = kernel.modes["stdin"]
    assert not mode & ENABLE_LINE_INPUT
    assert not mode & ENABLE_ECHO_INPUT
    assert not mode & ENABLE_PROCESSED_INPUT
    assert mode & ENABLE_WINDOW_INPUT
    assert mode & 0x0080

    assert command.undo() is True
    assert kernel.modes["stdin"] == ori_mode
    # Output is not touched
    assert not any(call[1] == "stdout" for call in kernel.calls)


def test_raw_mode_undo_writes_captured_mode(kernel):
    # Even if someone else changed the mode in between, undo goes back
    # to the mode from before execute, instead of flipping bits.
    ori_mode = kernel.modes["stdin"]
    command = WinRawModeCommand(kernel)
    command.execute()
    kernel.modes["stdin"] |= ENABLE_WRAP_AT_EOL_OUTPUT
    command.undo()
    assert kernel.modes["stdin"] == ori_mode


def test_raw_mode_failed_set(kernel):
    ori_mode = kernel.modes["stdin"]
    kernel.fail_set_mode = True
    command = WinRawModeCommand(kernel)
    assert command.execute() is False
    assert not command.applied
    assert kernel.modes["stdin"] == ori_mode


def test_raw_mode_failed_undo(kernel):
    command = WinRawModeCommand(kernel)
    command.execute()
    kernel.fail_set_mode = True
    assert command.undo() is False
    assert command.applied


def test_alternate_screen(kernel):
    command = WinAlternateScreenCommand(kernel)

    assert command.execute() is True
    assert kernel.created == ["screen1"]
    assert kernel.active == "screen1"
    source, target, rect = kernel.copies[0]
    assert (source, target) == ("stdout", "screen1")
    # A fixed block, whatever the size of the screen
    assert (rect.right - rect.left + 1, rect.bottom - rect.top + 1) == (80, 2)

    assert command.undo() is True
    assert kernel.active == "stdout"
    assert kernel.closed == ["screen1"]


def test_raw_mode_execute_twice_restores_original(kernel):
    ori_mode = kernel.modes["stdin"]
    command = WinRawModeCommand(kernel)
    assert command.execute() is True
    assert command.execute() is False

    assert command.undo() is True
    assert kernel.modes["stdin"] == ori_mode


def test_raw_mode_applied_twice_then_restore(win_state, kernel):
    ori_modes = dict(kernel.modes)
    command = WinRawModeCommand(kernel)
    win_state.registry.apply(command)
    win_state.registry.apply(command)

    assert win_state.registry.undo_all() is True
    assert kernel.modes == ori_modes

import sys
import logging
import threading

from .commands import CommandRegistry
from ._capability import CapabilityProbe
from ._selector import BackendSelector


logger = logging.getLogger("termctl")


class TerminalState:
    """All state that termctl keeps for the process.

    This holds the escape sequence capability, the selected backends, the
    registry of reversible commands, the saved cursor position, and (on
    Windows) the kernel with its cached console handles. Everything is
    created on first use.

    The lock serializes backend resolution, changes to the registry and
    the read-then-write cursor moves. Other than that, the state assumes
    one writer at a time.
    """

    def __init__(self, platform=None, stdin=None, stdout=None, kernel=None):
        self.platform = platform or sys.platform
        self.is_windows = self.platform.startswith("win")
        self._stdin = stdin
        self._stdout = stdout
        self._kernel = kernel

        self.lock = threading.RLock()
        self.registry = CommandRegistry(self.lock)
        self.capability = CapabilityProbe(self)
        self.backends = BackendSelector(self)
        self.saved_position = None

    @property
    def stdin(self):
        return self._stdin or sys.__stdin__

    @property
    def stdout(self):
        return self._stdout or sys.__stdout__

    @property
    def fd_in(self):
        return self.stdin.fileno()

    @property
    def kernel(self):
        """The Windows console kernel, created on first use."""
        if self._kernel is None:
            if not self.is_windows:
                raise RuntimeError("The console API is only available on Windows.")
            from .kernel.windows import WindowsKernel

            self._kernel = WindowsKernel()
        return self._kernel

    def write(self, text):
        """Write text to the terminal and flush, so it lands at the cursor."""
        stdout = self.stdout
        stdout.write(text)
        stdout.flush()


_state = None
_state_lock = threading.Lock()


def get_state():
    """Get the process-wide TerminalState, creating it on first use."""
    global _state
    with _state_lock:
        if _state is None:
            _state = TerminalState()
        return _state


def set_state(state):
    """Install a TerminalState as the process-wide state. Returns the previous one.

    Facades created earlier keep using the state they were created with.
    """
    global _state
    assert state is None or isinstance(state, TerminalState)
    with _state_lock:
        previous, _state = _state, state
        return previous

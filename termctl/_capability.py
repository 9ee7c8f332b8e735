import enum
import logging

from .commands import EnableAnsiCommand


logger = logging.getLogger("termctl")


class Capability(enum.Enum):
    """Whether the terminal accepts escape sequences."""

    UNTESTED = "untested"
    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"


class CapabilityProbe:
    """Find out whether the terminal accepts escape sequences.

    On Unix this is a given. On Windows, escape sequences have to be
    enabled explicitly, and enabling them is also how we find out whether
    the console supports them. A successful enabling is registered as a
    command, so that restoring the terminal disables it again. A failed
    attempt changed nothing, and leaves nothing in the registry.
    """

    def __init__(self, state):
        self._state = state
        self._capability = Capability.UNTESTED
        self._attempted = False

    @property
    def capability(self):
        return self._capability

    def is_supported(self) -> bool:
        """Whether escape sequences are supported (False if not detected yet)."""
        return self._capability is Capability.SUPPORTED

    def was_attempted(self) -> bool:
        return self._attempted

    def detect(self) -> bool:
        """Detect support for escape sequences, enabling them where needed."""
        state = self._state
        if state.is_windows:
            command = EnableAnsiCommand(state.kernel)
            supported = command.execute()
            if supported:
                state.registry.register(command)
        else:
            supported = True

        self._capability = Capability.SUPPORTED if supported else Capability.UNSUPPORTED
        self._attempted = True
        logger.info(f"escape sequence support: {self._capability.value}")
        return supported

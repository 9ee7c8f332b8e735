import logging


logger = logging.getLogger("termctl")

CONTRACTS = ("cursor", "terminal", "color")


def _backend_classes(contract):
    """Get the (ansi, winapi) backend classes for a contract."""
    if contract == "cursor":
        from .cursor import AnsiCursor, WinApiCursor

        return AnsiCursor, WinApiCursor
    elif contract == "terminal":
        from .terminal import AnsiTerminal, WinApiTerminal

        return AnsiTerminal, WinApiTerminal
    elif contract == "color":
        from .style import AnsiColor, WinApiColor

        return AnsiColor, WinApiColor
    else:
        raise ValueError(f"Unknown backend contract: {contract!r}")


class BackendSelector:
    """Picks, once per contract, the backend that all facades forward to.

    On Windows, the escape sequence backend is used if the console supports
    it, and the console API backend otherwise. Elsewhere the escape sequence
    backend is the only option. A choice is never revisited.
    """

    def __init__(self, state):
        self._state = state
        self._backends = {}

    def __contains__(self, contract):
        return contract in self._backends

    def use_ansi(self) -> bool:
        """Whether the escape sequence backends should be used."""
        state = self._state
        if not state.is_windows:
            return True
        probe = state.capability
        if not probe.was_attempted():
            probe.detect()
        return probe.is_supported()

    def resolve(self, contract):
        """Get the backend for the given contract ("cursor", "terminal" or "color")."""
        with self._state.lock:
            backend = self._backends.get(contract)
            if backend is None:
                ansi_cls, winapi_cls = _backend_classes(contract)
                cls = ansi_cls if self.use_ansi() else winapi_cls
                backend = cls(self._state)
                self._backends[contract] = backend
                logger.info(f"using {cls.__name__} for {contract}")
            return backend

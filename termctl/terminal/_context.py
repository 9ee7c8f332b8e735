class CommandContext:
    """Context manager that applies a command on enter, and undoes it on exit.

    The command goes through the registry, so a ``restore()`` of the
    terminal will also undo it if the context is never exited.
    """

    def __init__(self, registry, command):
        self._registry = registry
        self._command = command
        self._entered = False
        self.ok = False

    @property
    def key(self):
        return self._command.key

    def __enter__(self):
        if self._entered:
            raise RuntimeError("Can only enter the context once.")
        self._entered = True
        _, self.ok = self._registry.apply(self._command)
        return self

    def __exit__(self, *args):
        self._entered = False
        self.reset()

    def reset(self):
        """Undo the command, restoring the terminal to the state it was when the context was entered."""
        return self._registry.undo(self._command.key)

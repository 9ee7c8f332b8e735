import logging
import itertools
import threading


logger = logging.getLogger("termctl")

# Keys are never reused within a process. Python ints do not wrap.
_key_counter = itertools.count(1)


def generate_key():
    return next(_key_counter)


class Command:
    """Base class for a reversible change to the terminal.

    Subclasses implement ``_execute()`` and ``_undo()``, and must capture
    whatever state they overwrite in ``_execute()`` so that ``_undo()`` can
    put it back exactly. A failed ``_execute()`` must leave the terminal
    untouched.
    """

    def __init__(self):
        self._key = generate_key()
        self._applied = False

    def __repr__(self):
        state = "applied" if self._applied else "not applied"
        return f"<{self.__class__.__name__} {self._key} {state}>"

    @property
    def key(self):
        """The unique key of this command."""
        return self._key

    @property
    def applied(self):
        """Whether the change is currently in effect."""
        return self._applied

    def execute(self) -> bool:
        """Apply the change. Returns whether it succeeded.

        Executing a command that is already applied does nothing and
        returns False, so the captured state stays that of the first execute.
        """
        if self._applied:
            logger.debug(f"not executing {self!r}")
            return False
        ok = bool(self._execute())
        if ok:
            self._applied = True
        logger.debug(f"execute {self!r}: {ok}")
        return ok

    def undo(self) -> bool:
        """Revert the change. Returns whether it succeeded.

        Undoing a command that is not applied does nothing and returns False.
        """
        if not self._applied:
            logger.debug(f"not undoing {self!r}")
            return False
        ok = bool(self._undo())
        if ok:
            self._applied = False
        logger.debug(f"undo {self!r}: {ok}")
        return ok

    # For subclasses to implement

    def _execute(self):
        raise NotImplementedError()

    def _undo(self):
        raise NotImplementedError()


class CommandRegistry:
    """Ledger of the commands that changed the terminal.

    Commands are kept in registration order, and are never dropped: an
    undone command stays in the registry, with ``applied`` set to False.
    Looking up an unknown key is not an error.

    Changes to the registry hold the given lock (usually that of the
    process state), so commands from different threads do not interleave.
    """

    def __init__(self, lock=None):
        self._lock = threading.RLock() if lock is None else lock
        self._commands = {}

    def __len__(self):
        return len(self._commands)

    def __iter__(self):
        return iter(list(self._commands.values()))

    def __contains__(self, key):
        return key in self._commands

    def get(self, key):
        """Get the command for the given key, or None."""
        return self._commands.get(key)

    def applied(self):
        """Get a list of the commands currently in effect, in registration order."""
        return [command for command in self._commands.values() if command.applied]

    def register(self, command):
        """Add a command (that is not yet executed). Returns its key."""
        assert isinstance(command, Command)
        with self._lock:
            self._commands[command.key] = command
        return command.key

    def apply(self, command):
        """Register and execute a command. Returns (key, success)."""
        with self._lock:
            key = self.register(command)
            return key, command.execute()

    def undo(self, key) -> bool:
        """Undo the command with the given key."""
        with self._lock:
            command = self._commands.get(key)
            if command is None:
                logger.debug(f"undo of unknown command key {key}")
                return False
            return command.undo()

    def undo_all(self) -> bool:
        """Undo every applied command, most recent first.

        Returns True if all undos succeeded. A failed undo does not stop
        the others from being attempted.
        """
        ok = True
        with self._lock:
            for command in reversed(self.applied()):
                if not command.undo():
                    logger.warning(f"Could not undo {command!r}")
                    ok = False
        return ok

"""Log sink interface (adapter pattern)."""

from typing import Callable, Protocol, runtime_checkable

# Bare capability form: sink(level, message)
LogFunction = Callable[[str, str], None]


@runtime_checkable
class ILogSink(Protocol):
    """Interface for the host's log output.

    Receives the level tag untouched and the fully rendered message.
    """

    def log(self, level: str, message: str) -> None:
        """Record one rendered entry."""
        ...

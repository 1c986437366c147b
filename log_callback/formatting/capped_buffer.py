"""Capped text builder for rendered messages."""

from typing import Iterable, Union

# Literal text, or a (char, count) run expanded only as far as it fits
Segment = Union[str, tuple[str, int]]


class CappedBuffer:
    """Growable text builder that never holds more than `capacity - 1` chars.

    Mirrors a fixed `char[capacity]` buffer: one slot is reserved for the
    terminator, so the longest message is `capacity - 1` characters.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.limit = capacity - 1
        self.truncated = False
        self._parts: list[str] = []
        self._size = 0

    @property
    def room(self) -> int:
        return self.limit - self._size

    @property
    def full(self) -> bool:
        return self._size >= self.limit

    def __len__(self) -> int:
        return self._size

    def append(self, text: str) -> None:
        """Append text, cutting it at the limit."""
        if not text:
            return

        room = self.room
        if len(text) > room:
            text = text[:room]
            self.truncated = True

        if text:
            self._parts.append(text)
            self._size += len(text)

    def append_run(self, char: str, count: int) -> None:
        """Append `count` copies of `char` without building the full run."""
        if count <= 0:
            return

        room = self.room
        if count > room:
            count = room
            self.truncated = True

        if count:
            self._parts.append(char * count)
            self._size += count

    def extend(self, segments: Iterable[Segment]) -> None:
        for segment in segments:
            if isinstance(segment, tuple):
                self.append_run(*segment)
            else:
                self.append(segment)

    def getvalue(self) -> str:
        return "".join(self._parts)

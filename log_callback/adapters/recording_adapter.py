"""In-memory recording adapter."""

import threading
from dataclasses import dataclass
from typing import Optional
from ..interfaces import ILogSink


@dataclass(frozen=True)
class LogEntry:
    """One forwarded log call."""
    level: str
    message: str


class RecordingAdapter:
    """Adapter that keeps every forwarded entry in memory."""

    def __init__(self):
        self.entries: list[LogEntry] = []
        self._lock = threading.Lock()

    def log(self, level: str, message: str) -> None:
        """Record log entry."""
        with self._lock:
            self.entries.append(LogEntry(level=level, message=message))

    @property
    def last(self) -> Optional[LogEntry]:
        """Most recent entry, or None when nothing was logged."""
        with self._lock:
            return self.entries[-1] if self.entries else None

    @property
    def call_count(self) -> int:
        with self._lock:
            return len(self.entries)

    def clear(self) -> None:
        with self._lock:
            self.entries.clear()

"""Stream logging adapter (stdout by default)."""

import sys
from datetime import datetime
from typing import Optional, TextIO
from ..interfaces import ILogSink


class StdoutAdapter:
    """Adapter writing `[timestamp] LEVEL: message` lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def log(self, level: str, message: str) -> None:
        """Write log entry to the stream."""
        # Resolve lazily so captured/redirected stdout is honoured
        stream = self.stream or sys.stdout
        timestamp = datetime.now().isoformat()
        print(f"[{timestamp}] {level.upper()}: {message}", file=stream, flush=True)

"""Standard library logging adapter."""

import logging
from typing import Optional
from ..interfaces import ILogSink

# Level tag -> logging level (table-driven)
LEVEL_MAP = {
    'debug': logging.DEBUG,
    'verbose': logging.INFO,
    'notice': logging.INFO,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'warn': logging.WARNING,
    'error': logging.ERROR,
}


class LoggingAdapter:
    """Adapter forwarding entries to a `logging.Logger`."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("log_callback")

    def log(self, level: str, message: str) -> None:
        """Write log entry through the logging module."""
        # Unknown tags are still written, never dropped
        py_level = LEVEL_MAP.get(level.lower(), logging.INFO)
        self.logger.log(py_level, "%s", message, extra={"tag": level})

"""Interface definitions for log sink adapters."""

from .i_log_sink import ILogSink, LogFunction

__all__ = [
    'ILogSink',
    'LogFunction',
]

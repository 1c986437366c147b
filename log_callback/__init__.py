"""Printf-style log rendering with a pluggable sink."""

from .formatting_log_adapter import FormattingLogAdapter
from .interfaces import ILogSink
from .adapters import (
    StdoutAdapter,
    LoggingAdapter,
    WebhookAdapter,
    RecordingAdapter,
    LogEntry,
)

__all__ = [
    'FormattingLogAdapter',
    'ILogSink',
    'StdoutAdapter',
    'LoggingAdapter',
    'WebhookAdapter',
    'RecordingAdapter',
    'LogEntry',
]

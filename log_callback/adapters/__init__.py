"""Adapter implementations for log sinks."""

from .stdout_adapter import StdoutAdapter
from .logging_adapter import LoggingAdapter
from .webhook_adapter import WebhookAdapter
from .recording_adapter import RecordingAdapter, LogEntry

# Table-driven sink selection (suckless pattern)
SINK_ADAPTERS = {
    'stdout': StdoutAdapter,
    'logging': LoggingAdapter,
    'webhook': WebhookAdapter,
}

__all__ = [
    'SINK_ADAPTERS',
    'StdoutAdapter',
    'LoggingAdapter',
    'WebhookAdapter',
    'RecordingAdapter',
    'LogEntry',
]

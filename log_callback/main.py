"""Log callback - command line entry point.

Usage: log-callback LEVEL TEMPLATE [ARG...]
"""

import sys
from typing import Any, Optional
from . import config
from .adapters import SINK_ADAPTERS, WebhookAdapter
from .formatting_log_adapter import FormattingLogAdapter
from .interfaces import ILogSink


def coerce_arg(raw: str) -> Any:
    """Turn a command line word into int, float or str (in that order)."""
    try:
        return int(raw)
    except ValueError:
        pass

    # Words like "nan" or "inf" stay strings
    if not any(ch.isdigit() for ch in raw):
        return raw

    try:
        return float(raw)
    except ValueError:
        return raw


def build_sink(name: str) -> Optional[ILogSink]:
    """Instantiate the configured sink, None when it cannot be built."""
    adapter_class = SINK_ADAPTERS.get(name)
    if adapter_class is None:
        return None

    if adapter_class is WebhookAdapter:
        if not config.LOG_WEBHOOK_URL:
            return None
        return WebhookAdapter(
            url=config.LOG_WEBHOOK_URL,
            timeout=config.LOG_WEBHOOK_TIMEOUT
        )

    return adapter_class()


def main(argv: Optional[list[str]] = None) -> None:
    """Render one message and forward it to the configured sink."""
    args = sys.argv[1:] if argv is None else argv

    # Validate input (early return)
    if len(args) < 2:
        print("ERROR: usage: log-callback LEVEL TEMPLATE [ARG...]", file=sys.stderr)
        sys.exit(1)

    if config.LOG_BUFFER_SIZE < 1:
        print(
            f"ERROR: LOG_BUFFER_SIZE must be >= 1, got {config.LOG_BUFFER_SIZE}",
            file=sys.stderr
        )
        sys.exit(1)

    # Mount sink adapter
    sink = build_sink(config.LOG_SINK)
    if sink is None:
        print(
            f"ERROR: sink '{config.LOG_SINK}' unavailable "
            "(unknown name or LOG_WEBHOOK_URL not set)",
            file=sys.stderr
        )
        sys.exit(1)

    level, template, *rest = args
    adapter = FormattingLogAdapter(sink, capacity=config.LOG_BUFFER_SIZE)
    adapter.log(level, template, *[coerce_arg(word) for word in rest])


if __name__ == "__main__":
    main()

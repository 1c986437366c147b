"""Configuration management."""

import os


def _int_env(name: str, default: int) -> int:
    """Read an integer variable, falling back to default when unset or bad."""
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


# Rendering Configuration
DEFAULT_BUFFER_SIZE = 1024
LOG_BUFFER_SIZE = _int_env("LOG_BUFFER_SIZE", DEFAULT_BUFFER_SIZE)

# Sink Configuration
LOG_SINK = os.getenv("LOG_SINK", "stdout")
LOG_WEBHOOK_URL = os.getenv("LOG_WEBHOOK_URL", "")
LOG_WEBHOOK_TIMEOUT = _int_env("LOG_WEBHOOK_TIMEOUT", 10)

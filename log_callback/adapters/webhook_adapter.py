"""Webhook logging adapter (HTTP POST per entry)."""

import sys
import requests
from ..interfaces import ILogSink


class WebhookAdapter:
    """Adapter posting log entries to an HTTP endpoint."""

    def __init__(self, url: str, timeout: float = 10):
        self.url = url
        self.timeout = timeout

    def log(self, level: str, message: str) -> None:
        """Post log entry as JSON."""
        # Validate input (early return)
        if not self.url:
            print("ERROR: webhook url empty", file=sys.stderr)
            return

        try:
            resp = requests.post(
                self.url,
                json={"level": level, "message": message},
                timeout=self.timeout
            )
            if resp.status_code not in (200, 201, 202, 204):
                print(
                    f"ERROR: webhook post failed: {resp.status_code}",
                    file=sys.stderr
                )

        except requests.RequestException as e:
            print(f"ERROR: webhook post failed: {e}", file=sys.stderr)

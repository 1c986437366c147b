"""Formatting log adapter: render a printf-style template, forward to a sink."""

from typing import Any, Union
from .config import DEFAULT_BUFFER_SIZE
from .formatting import ArgumentCursor, CappedBuffer, parse, render_placeholder
from .interfaces import ILogSink, LogFunction


class FormattingLogAdapter:
    """Renders `(template, *args)` into a capped message for a sink.

    The sink is an `ILogSink` object or a bare `sink(level, message)`
    function.

    The message never exceeds `capacity - 1` characters, matching a
    `char[capacity]` buffer with room for its terminator. Every `log()` call
    reaches the sink exactly once; rendering itself never raises.
    """

    def __init__(
        self,
        sink: Union[ILogSink, LogFunction],
        capacity: int = DEFAULT_BUFFER_SIZE
    ):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.sink = sink
        self._forward: LogFunction = sink.log if isinstance(sink, ILogSink) else sink
        self.capacity = capacity

    def render(self, template: str, *args: Any) -> str:
        """Render template with args, truncated to the buffer capacity."""
        if template is None:
            template = ""
        elif isinstance(template, (bytes, bytearray)):
            template = bytes(template).decode("utf-8", errors="replace")

        buf = CappedBuffer(self.capacity)
        cursor = ArgumentCursor(args)

        for item in parse(str(template)):
            # Nothing more can be written (early return)
            if buf.full:
                break

            if isinstance(item, str):
                buf.append(item)
            else:
                buf.extend(render_placeholder(item, cursor))

        return buf.getvalue()

    def log(self, level: str, template: str, *args: Any) -> None:
        """Render and forward one message to the sink."""
        message = self.render(template, *args)
        self._forward(level, message)

    __call__ = log

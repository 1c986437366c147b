"""Printf-style rendering into a capped buffer."""

from .capped_buffer import CappedBuffer, Segment
from .template_parser import Placeholder, parse
from .conversions import (
    ArgumentCursor,
    CONVERSION_HANDLERS,
    MISSING,
    render_placeholder,
)

__all__ = [
    'CappedBuffer',
    'Segment',
    'Placeholder',
    'parse',
    'ArgumentCursor',
    'CONVERSION_HANDLERS',
    'MISSING',
    'render_placeholder',
]

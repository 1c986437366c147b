"""Printf-style template parser.

Splits a template into literal text and `Placeholder` records:

    %[flags][width][.precision][length]conversion

`%%` is returned as literal text. Anything that does not form a valid
placeholder (unknown conversion, `%n`, a dangling `%`) is returned as
literal text too, so it never consumes an argument.
"""

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Union

FLAG_CHARS = "-+ #0"
STAR = "*"

# Two-char modifiers first (longest match)
LENGTH_MODIFIERS = ('hh', 'll', 'h', 'l', 'L', 'q', 'j', 'z', 't')

CONVERSIONS = "diuxXofFeEgGcsp"

# Width/precision is clamped later, anything past this is "huge"
_MAX_COUNT_DIGITS = 18


@dataclass(frozen=True)
class Placeholder:
    """One parsed conversion directive."""
    text: str
    flags: str
    width: Optional[Union[int, str]]
    precision: Optional[Union[int, str]]
    length: str
    conversion: str

    @property
    def wants_width_arg(self) -> bool:
        return self.width == STAR

    @property
    def wants_precision_arg(self) -> bool:
        return self.precision == STAR


def _to_count(digits: str) -> int:
    """Parse a width/precision digit run without huge-int conversion."""
    if len(digits) > _MAX_COUNT_DIGITS:
        return sys.maxsize
    return int(digits)


def _scan_digits(template: str, pos: int) -> int:
    """Return the index after a run of ASCII digits."""
    end = pos
    while end < len(template) and template[end] in "0123456789":
        end += 1
    return end


def _parse_placeholder(template: str, start: int) -> tuple[Optional[Placeholder], int]:
    """Parse one directive at `start` (which points at '%').

    Returns the placeholder (or None when the directive is invalid) and the
    index just past the consumed text.
    """
    size = len(template)
    pos = start + 1

    flag_start = pos
    while pos < size and template[pos] in FLAG_CHARS:
        pos += 1
    flags = template[flag_start:pos]

    width: Optional[Union[int, str]] = None
    if pos < size and template[pos] == STAR:
        width = STAR
        pos += 1
    else:
        end = _scan_digits(template, pos)
        if end > pos:
            width = _to_count(template[pos:end])
            pos = end

    precision: Optional[Union[int, str]] = None
    if pos < size and template[pos] == ".":
        pos += 1
        if pos < size and template[pos] == STAR:
            precision = STAR
            pos += 1
        else:
            end = _scan_digits(template, pos)
            # A bare '.' means precision 0
            precision = _to_count(template[pos:end]) if end > pos else 0
            pos = end

    length = ""
    for modifier in LENGTH_MODIFIERS:
        if template.startswith(modifier, pos):
            length = modifier
            pos += len(modifier)
            break

    if pos >= size:
        return None, size

    conversion = template[pos]
    pos += 1
    if conversion not in CONVERSIONS:
        return None, pos

    return Placeholder(
        text=template[start:pos],
        flags=flags,
        width=width,
        precision=precision,
        length=length,
        conversion=conversion
    ), pos


def parse(template: str) -> Iterator[Union[str, Placeholder]]:
    """Yield literal text chunks and placeholders in template order.

    Lazy, so a caller that stops early never scans the rest of the template.
    """
    pos = 0
    size = len(template)

    while pos < size:
        percent = template.find("%", pos)
        if percent < 0:
            yield template[pos:]
            return

        if percent > pos:
            yield template[pos:percent]

        # Escaped percent (consumes no argument)
        if template.startswith("%%", percent):
            yield "%"
            pos = percent + 2
            continue

        placeholder, pos = _parse_placeholder(template, percent)
        if placeholder is None:
            yield template[percent:pos]
        else:
            yield placeholder

"""Conversion handlers for parsed placeholders.

Each handler turns one argument into a `Field` (sign/prefix, digits,
zero runs, exponent). Padding is laid out afterwards as segments, so huge
widths and precisions become (char, count) runs the buffer cuts at its limit
instead of strings built in full.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Sequence
from .capped_buffer import Segment
from .template_parser import Placeholder

# Argument marker for "ran out of arguments"
MISSING = object()

# Two's-complement width for unsigned wrap of negative ints
LENGTH_BITS = {
    'hh': 8,
    'h': 16,
    '': 32,
    'l': 64,
    'll': 64,
    'L': 64,
    'q': 64,
    'j': 64,
    'z': 64,
    't': 64,
}

# Every finite double has an exact decimal expansion within this many digits
EXACT_FLOAT_DIGITS = 1100

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UNSIGNED_FORMATS = {'u': 'd', 'x': 'x', 'X': 'X', 'o': 'o'}


@dataclass
class Field:
    """One rendered conversion before width padding."""
    body: str
    head: str = ""
    zeros: int = 0
    trail_zeros: int = 0
    tail: str = ""
    zero_pad: bool = False

    @property
    def length(self) -> int:
        return (
            len(self.head) + self.zeros + len(self.body)
            + self.trail_zeros + len(self.tail)
        )

    def segments(self, extra_zeros: int = 0) -> list[Segment]:
        return [
            self.head,
            ("0", self.zeros + extra_zeros),
            self.body,
            ("0", self.trail_zeros),
            self.tail,
        ]


class ArgumentCursor:
    """Hands out call arguments in order."""

    def __init__(self, args: Sequence[Any]):
        self._args = args
        self._pos = 0

    @property
    def consumed(self) -> int:
        return self._pos

    def take(self) -> Any:
        if self._pos >= len(self._args):
            return MISSING
        value = self._args[self._pos]
        self._pos += 1
        return value


def safe_str(value: Any) -> str:
    """str() that never raises."""
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def _require_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"integer conversion needs int, got {type(value).__name__}")
    return value


def _sign(negative: bool, flags: str) -> str:
    if negative:
        return "-"
    if "+" in flags:
        return "+"
    if " " in flags:
        return " "
    return ""


def _digits_field(head: str, digits: str, precision, is_zero: bool) -> Field:
    """Integer field with C precision rules (minimum digit count)."""
    if precision == 0 and is_zero:
        digits = ""
    zeros = max(0, precision - len(digits)) if precision is not None else 0
    # '0' flag is ignored once a precision is given
    return Field(head=head, zeros=zeros, body=digits, zero_pad=precision is None)


def _signed(placeholder: Placeholder, value: Any, flags: str, precision) -> Field:
    number = _require_int(value)
    return _digits_field(
        _sign(number < 0, flags), format(abs(number), "d"), precision, number == 0
    )


def _unsigned(placeholder: Placeholder, value: Any, flags: str, precision) -> Field:
    number = _require_int(value)
    if number < 0:
        number &= (1 << LENGTH_BITS[placeholder.length]) - 1

    conversion = placeholder.conversion
    digits = format(number, _UNSIGNED_FORMATS[conversion])

    head = ""
    if "#" in flags and number and conversion in "xX":
        head = "0" + conversion

    field = _digits_field(head, digits, precision, number == 0)

    # Alternate octal: first digit must be 0
    if "#" in flags and conversion == "o":
        if field.zeros == 0 and not field.body.startswith("0"):
            field.zeros = 1

    return field


def _floating(placeholder: Placeholder, value: Any, flags: str, precision) -> Field:
    if not isinstance(value, (int, float)):
        raise TypeError(f"float conversion needs a number, got {type(value).__name__}")
    number = float(value)
    conversion = placeholder.conversion

    wanted = 6 if precision is None else precision
    shown = min(wanted, EXACT_FLOAT_DIGITS)
    py_flags = "".join(flag for flag in flags if flag in "+ #")
    text = f"%{py_flags}.{shown}{conversion}" % number

    head = ""
    if text[:1] in ("+", "-", " "):
        head, text = text[0], text[1:]

    if not math.isfinite(number):
        return Field(head=head, body=text)

    # Digits beyond the exact expansion are all zeros
    trail_zeros = 0
    if conversion in "fFeE" or "#" in flags:
        trail_zeros = wanted - shown

    body, tail = text, ""
    marker = "E" if conversion.isupper() else "e"
    exponent = text.find(marker)
    if exponent >= 0:
        body, tail = text[:exponent], text[exponent:]

    return Field(
        head=head, body=body, trail_zeros=trail_zeros, tail=tail, zero_pad=True
    )


def _char(placeholder: Placeholder, value: Any, flags: str, precision) -> Field:
    if isinstance(value, int):
        return Field(body=chr(value))
    if isinstance(value, str):
        return Field(body=value[:1])
    if isinstance(value, (bytes, bytearray)):
        return Field(body=bytes(value[:1]).decode("latin-1"))
    raise TypeError(f"char conversion needs int or str, got {type(value).__name__}")


def _string(placeholder: Placeholder, value: Any, flags: str, precision) -> Field:
    if value is None:
        text = NULL_STRING
    elif isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("utf-8", errors="replace")
    else:
        text = safe_str(value)

    if precision is not None:
        text = text[:precision]
    return Field(body=text)


def _pointer(placeholder: Placeholder, value: Any, flags: str, precision) -> Field:
    if value is None or (isinstance(value, int) and value == 0):
        return Field(body=NULL_POINTER)

    # Non-integers point at themselves
    address = value if isinstance(value, int) else id(value)
    if address < 0:
        address &= (1 << 64) - 1
    return Field(head="0x", body=format(address, "x"), zero_pad=True)


# Table-driven dispatch (suckless pattern)
CONVERSION_HANDLERS: dict[str, Callable[..., Field]] = {
    'd': _signed,
    'i': _signed,
    'u': _unsigned,
    'x': _unsigned,
    'X': _unsigned,
    'o': _unsigned,
    'f': _floating,
    'F': _floating,
    'e': _floating,
    'E': _floating,
    'g': _floating,
    'G': _floating,
    'c': _char,
    's': _string,
    'p': _pointer,
}


def layout(field: Field, width, flags: str) -> list[Segment]:
    """Apply field width: left-justify, zero-fill or right-justify."""
    pad = max(0, (width or 0) - field.length)

    if "-" in flags:
        return [*field.segments(), (" ", pad)]
    if "0" in flags and field.zero_pad:
        return field.segments(extra_zeros=pad)
    return [(" ", pad), *field.segments()]


def render_placeholder(placeholder: Placeholder, cursor: ArgumentCursor) -> list[Segment]:
    """Bind arguments to one placeholder and lay it out as segments.

    A missing argument (or an unusable `*` argument) emits the placeholder
    text verbatim. A value the conversion cannot take is rendered with str().
    """
    flags = placeholder.flags

    width = placeholder.width
    if placeholder.wants_width_arg:
        width = cursor.take()
        if not isinstance(width, int):
            return [placeholder.text]
        if width < 0:
            flags += "-"
            width = -width

    precision = placeholder.precision
    if placeholder.wants_precision_arg:
        precision = cursor.take()
        if not isinstance(precision, int):
            return [placeholder.text]
        if precision < 0:
            precision = None

    value = cursor.take()
    if value is MISSING:
        return [placeholder.text]

    handler = CONVERSION_HANDLERS[placeholder.conversion]
    try:
        field = handler(placeholder, value, flags, precision)
    except (TypeError, ValueError, OverflowError):
        field = Field(body=safe_str(value))

    return layout(field, width, flags)

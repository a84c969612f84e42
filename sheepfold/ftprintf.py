"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_INT_BITS = 32
_LONG_MASK = (1 << 64) - 1
_UINT_MASK = (1 << _INT_BITS) - 1


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value & (1 << (_INT_BITS - 1)) else value


def check_base(base: str) -> bool:
    """Tell whether a digit alphabet is usable.

    It must be non-empty, hold no '+' or '-', and never repeat a digit
    immediately after itself.
    """
    if not base:
        return False
    previous = ""
    for digit in base:
        if digit == previous or digit in "+-":
            return False
        previous = digit
    return True


def number_in_base(number: int, base: str) -> str:
    """Write an unsigned long in the given digit alphabet.

    An unusable alphabet gives the empty string; negative numbers wrap
    around as unsigned 64-bit values.
    """
    if not check_base(base):
        return ""
    number &= _LONG_MASK
    radix = len(base)
    digits = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
        if not number:
            break
    return "".join(reversed(digits))


def format_pointer(address: Any) -> str:
    """Format an address as 0x followed by lowercase hex, or (nil) for null.

    Integers are taken as addresses; other objects stand for their identity.
    """
    if address is None:
        return "(nil)"
    value = address if isinstance(address, int) else id(address)
    if value == 0:
        return "(nil)"
    return "0x" + number_in_base(value, HEX_LOWER)


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c needs a single character, got {arg!r}")
        return arg
    if isinstance(arg, int):
        return chr(arg & 0xFF)
    raise TypeError(f"%c needs a character or an integer, got {type(arg).__name__}")


def _format_string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _require_int(arg: Any, spec: str) -> int:
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise TypeError(f"%{spec} needs an integer, got {type(arg).__name__}")
    return arg


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return spec
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(arg)
    if spec == "s":
        return _format_string(arg)
    if spec == "p":
        return format_pointer(arg)
    value = _require_int(arg, spec)
    if spec in "di":
        return str(_to_int32(value))
    base = {"u": DECIMAL, "x": HEX_LOWER, "X": HEX_UPPER}[spec]
    return number_in_base(value & _UINT_MASK, base)


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text ft_printf would write for a format and its arguments.

    An unknown conversion character is written as itself; a lone '%' at the
    very end writes a NUL character.
    """
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("\0")
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def ft_printf(fmt: str, *args: Any) -> int:
    """Write formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
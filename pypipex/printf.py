"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any

SPECIFIERS = "cspdiuxX%"

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1
_MISSING = object()


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _int32(value: int) -> int:
    return ((value + (1 << 31)) & _UINT_MASK) - (1 << 31)


def _render_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _render_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _render_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _render(spec: str, value: Any) -> str:
    if spec == "c":
        return _render_char(value)
    if spec == "s":
        return _render_string(value)
    if spec == "p":
        return _render_pointer(value)
    number = _as_int(value, spec)
    if spec in "di":
        return str(_int32(number))
    if spec == "u":
        return str(number & _UINT_MASK)
    if spec == "x":
        return format(number & _UINT_MASK, "x")
    return format(number & _UINT_MASK, "X")


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Raises ValueError for a trailing ``%``, an unknown conversion or a
    missing argument. Surplus arguments are ignored.
    """
    pieces: list[str] = []
    chars = iter(fmt)
    values = iter(args)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec not in SPECIFIERS:
            raise ValueError(f"unknown conversion '%{spec}'")
        if spec == "%":
            pieces.append("%")
            continue
        value = next(values, _MISSING)
        if value is _MISSING:
            raise ValueError(f"missing argument for '%{spec}'")
        pieces.append(_render(spec, value))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
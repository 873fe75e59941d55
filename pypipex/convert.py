"""Conversions between decimal text and machine-sized integers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")

_INT_BITS = 32
_LONG_BITS = 64
_LONG_MAX = (1 << (_LONG_BITS - 1)) - 1
_ULONG_MASK = (1 << _LONG_BITS) - 1


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's complement integer of ``bits`` width."""
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _scan(text: str) -> tuple[int, str]:
    """Skip leading whitespace and an optional sign.

    Returns the sign and the run of leading decimal digits that follows.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    return sign, "".join(digits)


def atoi(text: str) -> int:
    """Parse a decimal integer the way a 32-bit ``atoi`` does.

    Once the magnitude exceeds the 64-bit signed maximum the result is
    -1 for positive input and 0 for negative input; otherwise the value
    is truncated to a 32-bit signed integer.
    """
    sign, digits = _scan(text)
    result = 0
    for ch in digits:
        result = (result * 10 + int(ch)) & _ULONG_MASK
        if result > _LONG_MAX:
            return -1 if sign == 1 else 0
    return _wrap_signed(result * sign, _INT_BITS)


def _parse_long(text: str) -> int:
    sign, digits = _scan(text)
    result = 0
    for ch in digits:
        result = _wrap_signed(result * 10 + int(ch), _LONG_BITS)
    return _wrap_signed(result * sign, _LONG_BITS)


def atol(text: str) -> int:
    """Parse a decimal integer into a 64-bit signed value, wrapping on overflow."""
    return _parse_long(text)


def atoll(text: str) -> int:
    """Parse a decimal integer into a 64-bit signed value, wrapping on overflow."""
    return _parse_long(text)


def itoa(n: int) -> str:
    """Render an integer as decimal text."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)
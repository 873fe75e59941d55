"""String helpers: splitting, trimming, slicing, searching and comparing."""

from __future__ import annotations

from itertools import islice, zip_longest


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove every character in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end of ``s`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or None. An empty needle
    matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def _as_cstring(value: str | bytes) -> bytes:
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return data.split(b"\0", 1)[0]


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most ``n`` bytes of two strings.

    Returns zero when they match, otherwise the difference of the first
    differing bytes as unsigned values. Comparison stops at a NUL byte.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    a = _as_cstring(s1)
    b = _as_cstring(s2)
    for x, y in islice(zip_longest(a, b, fillvalue=0), n):
        if x != y:
            return x - y
    return 0
"""Locating an executable through the PATH variable of an environment."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pypipex.text import split


def _path_value(env: Mapping[str, str] | Iterable[str] | None) -> str | None:
    if not env:
        return None
    if isinstance(env, Mapping):
        return env.get("PATH")
    for entry in env:
        if entry.startswith("PATH="):
            return entry[len("PATH="):]
    return None


def find_path(
    cmd: str, env: Mapping[str, str] | Iterable[str] | None
) -> str | None:
    """Return the first executable ``cmd`` found in the directories of PATH.

    ``env`` is either a mapping of variable names to values or a sequence
    of ``NAME=value`` strings. Each non-empty PATH entry is joined with
    ``cmd``; the first candidate that is executable is returned. None is
    returned when there is no environment, no PATH, or no match.
    """
    value = _path_value(env)
    if value is None:
        return None
    for directory in split(value, ":"):
        if directory.endswith("/"):
            candidate = directory + cmd
        else:
            candidate = directory + "/" + cmd
        if os.access(candidate, os.X_OK):
            return candidate
    return None
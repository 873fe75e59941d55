"""Reporting system errors on standard error."""

from __future__ import annotations

import os
import sys


def _describe(error: OSError | int | None) -> str:
    if error is None:
        return os.strerror(0)
    if isinstance(error, OSError):
        if error.errno is not None:
            return os.strerror(error.errno)
        return str(error)
    return os.strerror(error)


def report_error(message: str, error: OSError | int | None = None) -> str:
    """Write ``Error: <message>: <description>`` to standard error.

    ``error`` is an OSError or an errno value; its system description is
    used. The written line is returned.
    """
    line = f"Error: {message}: {_describe(error)}\n"
    sys.stderr.write(line)
    sys.stderr.flush()
    return line
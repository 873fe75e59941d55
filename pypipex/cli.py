"""Command line entry point: pypipex file1 cmd1 cmd2 file2."""

from __future__ import annotations

import os
import sys

from pypipex.pipeline import Pipex
from pypipex.printf import printf

USAGE = "Usage: ./pipex file1 cmd1 cmd2 file2\n"


def main(argv: list[str] | None = None) -> int:
    """Run ``< file1 cmd1 | cmd2 > file2`` and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        printf(USAGE)
        return 1
    infile, cmd1, cmd2, outfile = args
    try:
        pipex = Pipex(infile, cmd1, cmd2, outfile, os.environ)
    except OSError:
        return 1
    return pipex.run()


if __name__ == "__main__":
    sys.exit(main())
"""Running two commands joined by a pipe between an input and an output file."""

from __future__ import annotations

import errno
import os
import subprocess
from collections.abc import Iterable, Mapping
from typing import Union

from pypipex.cmdsplit import split_command
from pypipex.errors import report_error
from pypipex.pathfind import find_path

COMMAND_NOT_FOUND = 127

Environment = Union[Mapping[str, str], Iterable[str], None]
_Child = Union[subprocess.Popen, int]


def _as_mapping(env: Mapping[str, str] | list[str] | None) -> dict[str, str]:
    if env is None:
        return {}
    if isinstance(env, Mapping):
        return dict(env)
    mapping: dict[str, str] = {}
    for entry in env:
        name, _, value = entry.partition("=")
        mapping[name] = value
    return mapping


def _status(child: _Child) -> int:
    """Wait for a child and return its exit code, negative if it was killed."""
    if isinstance(child, subprocess.Popen):
        return child.wait()
    return child


class Pipex:
    """Feeds ``infile`` through ``cmd1 | cmd2`` and writes the result to ``outfile``.

    Files are opened on construction; ``run`` starts both commands, waits
    for them and returns the exit status of the pipeline.
    """

    def __init__(
        self,
        infile: str | os.PathLike,
        cmd1: str,
        cmd2: str,
        outfile: str | os.PathLike,
        env: Environment,
    ) -> None:
        self.cmd1 = cmd1
        self.cmd2 = cmd2
        if env is not None and not isinstance(env, Mapping):
            env = list(env)
        self.env = env
        self._child_env = _as_mapping(env)
        self._finished = False
        if not cmd1 or not cmd2:
            report_error("Error: Invalid empty command")
        self._infile: int | None = self._open_infile(infile)
        self._outfile: int | None = None
        self._outfile_error: OSError | None = None
        try:
            self._outfile = os.open(
                outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644
            )
        except OSError as exc:
            report_error("Error: Unable to open/create output file", exc)
            self._outfile_error = exc

    @staticmethod
    def _open_infile(path: str | os.PathLike) -> int:
        try:
            return os.open(path, os.O_RDONLY)
        except OSError as exc:
            report_error("Error: Unable to open input file", exc)
        try:
            return os.open(os.devnull, os.O_RDONLY)
        except OSError as exc:
            report_error(os.devnull, exc)
            raise

    def __enter__(self) -> Pipex:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._close()

    def _close(self) -> None:
        for fd in (self._infile, self._outfile):
            if fd is not None:
                os.close(fd)
        self._infile = None
        self._outfile = None
        self._finished = True

    def _resolve(self, cmd: str) -> tuple[list[str], str] | None:
        args = split_command(cmd)
        if not args:
            report_error("Error: Invalid command")
            return None
        path = find_path(args[0], self.env)
        if path is None:
            report_error("Error: Command not found", errno.ENOENT)
            return None
        return args, path

    def _spawn(self, cmd: str, stdin, stdout) -> _Child:
        resolved = self._resolve(cmd)
        if resolved is None:
            return COMMAND_NOT_FOUND
        args, path = resolved
        try:
            return subprocess.Popen(
                args,
                executable=path,
                stdin=stdin,
                stdout=stdout,
                env=self._child_env,
            )
        except OSError as exc:
            report_error("Error: Command execution failed", exc)
            return exc.errno or 1

    def run(self) -> int:
        """Run the pipeline and return its exit status.

        The status is that of the second command if it exited normally,
        else that of the first, else 1.
        """
        if self._finished:
            raise RuntimeError("pipeline has already been run")
        try:
            first = self._spawn(self.cmd1, self._infile, subprocess.PIPE)
            started = isinstance(first, subprocess.Popen)
            upstream = first.stdout if started else subprocess.DEVNULL
            try:
                if self._outfile is None:
                    report_error(
                        "Error: Unable to open output file", self._outfile_error
                    )
                    second: _Child = 1
                else:
                    second = self._spawn(self.cmd2, upstream, self._outfile)
            finally:
                if started:
                    first.stdout.close()
        finally:
            self._close()
        status1 = _status(first)
        status2 = _status(second)
        if status2 >= 0:
            return status2
        if status1 >= 0:
            return status1
        return 1
# pypipex

`pypipex` runs two commands connected by a pipe. The first command reads from
an input file, and the second command writes to an output file. It does the
same job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pypipex infile "cmd1 args" "cmd2 args" outfile
```

`python -m pypipex.cli` does the same thing. The command needs exactly four
arguments. With any other number it prints
`Usage: ./pipex file1 cmd1 cmd2 file2` and exits with status 1.

- Each command is looked up in the directories listed in `PATH`. The commands
  run with the current environment.
- Words in a command are separated by spaces, tabs and newlines. A word that
  starts with `'` or `"` runs to the matching quote, and both quotes are
  removed. For example, `grep 'a b'` passes `a b` as one argument. Escapes are
  not recognised.
- If the input file cannot be opened, an error is printed on standard error
  and the first command reads from `/dev/null` instead.
- The output file is created with mode `0644`, or truncated if it exists. If it
  cannot be opened, an error is printed and the second command is not run.
- Errors are printed on standard error in the form
  `Error: <message>: <system description>`.
- The exit status is the second command's exit status if it exited normally.
  Otherwise it is the first command's status if that one exited normally, and
  otherwise it is 1. A command that cannot be found counts as status 127, and a
  second command that is skipped because of the output file counts as status 1.

Example:

```sh
pypipex /etc/hosts "grep localhost" "wc -l" count.txt
```

## Library

```python
from pypipex.pipeline import Pipex
from pypipex.cmdsplit import split_command
from pypipex.pathfind import find_path

split_command("grep 'hello world'")   # ['grep', 'hello world']
find_path("ls", {"PATH": "/bin:/usr/bin"})   # e.g. '/bin/ls', or None

with Pipex("in.txt", "cat", "wc -l", "out.txt", {"PATH": "/bin:/usr/bin"}) as pipex:
    status = pipex.run()
```

- `Pipex(infile, cmd1, cmd2, outfile, env)` opens the files when it is created.
  `env` can be a mapping or a sequence of `NAME=value` strings. It is used to
  look up the commands and is also the complete environment the commands run
  with. `run()` starts both commands, waits for them, closes the files and
  returns the exit status described above. Calling `run()` a second time raises
  `RuntimeError`.
- `find_path(cmd, env)` returns the first `PATH` entry joined with `cmd` that
  is executable. It returns `None` if there is no environment, no `PATH`, or
  no match.
- `pypipex.errors.report_error(message, error=None)` writes an error line to
  standard error and returns it. `error` can be an `OSError` or an errno value.

Other helpers:

- `pypipex.convert`: `atoi` (32-bit result), `atol` and `atoll` (64-bit
  results that wrap on overflow), and `itoa`.
- `pypipex.text`: `split`, `strtrim`, `substr`, `strnstr` (returns an index or
  `None`) and `strncmp`.
- `pypipex.printf`: `sprintf` and `printf` handle the conversions
  `%c %s %p %d %i %u %x %X %%`. A lone `%` at the end, an unknown conversion, or
  a missing argument raises `ValueError`. `printf` returns the number of
  characters written.
- `pypipex.linereader`: `LineReader(buffer_size)` and `get_next_line(fd)` read
  a raw file descriptor one line at a time. They return `bytes` that include
  the newline, or `None` at end of input.

## What it does not do

`pypipex` always joins exactly two commands. It is not a shell. It does not
support pipelines of any other length, here-documents, variables, globbing, or
redirections written inside the command strings.
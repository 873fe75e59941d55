"""Splitting a command line into words, honouring simple quotes."""

from __future__ import annotations

import re

# A word is a single- or double-quoted run (the closing quote may be
# missing, in which case the word runs to the end of the line) or a run
# of characters that are not blanks. Quotes inside an unquoted word are
# kept as ordinary characters.
_WORD = re.compile(r"""'([^']*)'?|"([^"]*)"?|([^ \t\n]+)""")


def split_command(cmd: str) -> list[str]:
    """Split ``cmd`` into its words.

    Words are separated by spaces, tabs and newlines. A word that starts
    with a quote extends to the matching quote, which is dropped along
    with the opening one; no escapes are recognised.
    """
    return [match.group(match.lastindex) for match in _WORD.finditer(cmd)]
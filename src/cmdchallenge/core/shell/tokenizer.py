from __future__ import annotations

"""
Command Line Tokenizer.

Splits a raw terminal line into a command name and its arguments using
POSIX shell quoting rules.
"""

import shlex
from typing import List, Tuple


def tokenize(line: str) -> Tuple[str, List[str]]:
    """
    Split a raw line into (command, args).

    Args:
        line: Text typed by the user, e.g. 'cd "my dir"'.

    Returns:
        Tuple[str, List[str]]: The command name ("" for a blank line) and
                               its arguments.

    Raises:
        ValueError: On unbalanced quotes or a dangling escape.
    """
    tokens = shlex.split(line, comments=False, posix=True)
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]

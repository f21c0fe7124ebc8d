"""Line-oriented input for the interactive shell.

Reading is decoupled from the shell so the same loop can run against
the terminal or against in-memory streams in tests.
"""

from __future__ import annotations

from typing import Optional, TextIO


def read_line(prompt: str, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    """Write ``prompt`` and read one line of input.

    Returns
    -------
    str or None
        The line without its trailing newline, or None at end of input.
    """
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def is_exit_command(text: Optional[str], prefixes: str = "EQ") -> bool:
    """Tell whether ``text`` asks to end the session.

    End of input (None) always does; otherwise the first character is
    compared case-insensitively against ``prefixes`` ("exit", "quit").
    """
    if text is None:
        return True
    if not text:
        return False
    return text[0].upper() in prefixes.upper()

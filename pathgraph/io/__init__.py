"""Input/output helpers for the interactive shell."""

from .prompt import is_exit_command, read_line

__all__ = ["is_exit_command", "read_line"]

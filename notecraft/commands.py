"""notecraft command error types."""

from __future__ import annotations


class CommandError(RuntimeError):
    """Raised when a command cannot be found or fails while running."""


class CommandUnavailableError(CommandError):
    """Raised when a command does not apply to the current context."""


__all__ = ["CommandError", "CommandUnavailableError"]

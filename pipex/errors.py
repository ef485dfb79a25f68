"""Errors raised while setting up a pipeline stage."""

from __future__ import annotations


class PipexError(Exception):
    """Base class for pipeline failures; the stage exits with status 1."""

    message = "pipex failed"
    exit_status = 1

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.message}: {self.reason}" if self.reason else self.message


class EmptyCommandError(PipexError):
    """The command text holds no words."""

    message = "Bruh, really? Give me a command or a path, but let's say it"


class CommandNotFoundError(PipexError):
    """The command could not be located or started."""

    message = "Bru, you let it blank"

    def __init__(self, command: str, reason: str | None = None) -> None:
        super().__init__(reason)
        self.command = command


class FileOpenError(PipexError):
    """The input or output file could not be opened."""

    message = "Can't touch this"

    def __init__(self, path: str, reason: str | None = None) -> None:
        super().__init__(reason)
        self.path = path
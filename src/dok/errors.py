"""Application-level exception types for dok."""

from __future__ import annotations


class DokError(Exception):
    """Base exception for dok."""


class ToolUnavailableError(DokError):
    """Raised when a required external tool cannot be invoked. Fatal for the whole run."""


class CommandNotFoundError(DokError):
    """Raised when no registered command matches an alias."""

    def __init__(self, alias: str) -> None:
        super().__init__(f"command '{alias}' not found")
        self.alias = alias


class MissingArgumentError(DokError):
    """Raised when a command is invoked without a required argument."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.usage = usage


class ExternalInvocationError(DokError):
    """Raised when an external tool exits with a non-zero code."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class SpawnError(DokError):
    """Raised when an external program could not be started at all."""

    def __init__(self, program: str, reason: str) -> None:
        super().__init__(f"failed to start '{program}': {reason}")
        self.program = program


class UpdateError(DokError):
    """Raised when downloading or installing an update fails."""

"""Exception hierarchy for Gradle Bootstrap.

Every failure the core can produce is one of the classes below.  None of them
are retried internally; mapping them to user-facing messages is left to the
calling layer (the CLI, or an HTTP front end).
"""

from __future__ import annotations

from pathlib import Path


class BootstrapError(Exception):
    """Base class for all Gradle Bootstrap errors."""


class ValidationError(BootstrapError, ValueError):
    """Raised when a project descriptor violates a core invariant.

    Always raised before anything is written to disk.
    """

    def __init__(self, message: str, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class ExportError(BootstrapError, OSError):
    """Raised when the filesystem refuses a write during export."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class ArchiveError(ExportError):
    """Raised when an archive cannot be built from a project directory."""


class ConfigurationError(BootstrapError):
    """Raised when version-control initialization fails."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(message)

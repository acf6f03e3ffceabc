"""Exceptions raised by a build and caught by callers.

Rules:
- Every build failure is an NpmBuildError subclass.
- Keep exceptions simple: carry the data a caller needs for a diagnostic.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations

from pathlib import Path


class NpmBuildError(Exception):
    """Base class for all build failures.

    ``operation`` names the build step that failed once the executor has seen the error.
    """

    operation: str | None = None


class BuildConfigurationError(NpmBuildError):
    """Raised when a Build is configured in a way that cannot be executed."""


class FilesystemError(NpmBuildError):
    """Raised when a copy step fails (missing source, permissions, disk full).

    The underlying OSError is chained as ``__cause__``.
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ToolNotFoundError(NpmBuildError):
    """Raised when the package-manager executable cannot be resolved or spawned."""

    def __init__(self, executable: str, message: str | None = None) -> None:
        super().__init__(message or f"Could not find '{executable}' on PATH")
        self.executable = executable


class ScriptExecutionError(NpmBuildError):
    """Raised when an npm process exits with a non-zero status."""

    def __init__(self, script: str, exit_code: int, command: list[str] | None = None) -> None:
        super().__init__(f"npm script '{script}' failed with exit code {exit_code}")
        self.script = script
        self.exit_code = exit_code
        self.command = command or []

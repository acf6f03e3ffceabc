"""
Build operation DTOs.

Each scheduled step of a Build is one of these frozen dataclasses.
The executor dispatches on the concrete type.

Rules:
- Import only stdlib and typing (no npmbuild.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Union


@dataclass(frozen=True)
class CopyAll:
    """Copy every entry of the project directory into the target directory."""

    def describe(self) -> str:
        return "copy all"


@dataclass(frozen=True)
class CopyFile:
    """Copy one entry (file or directory) given relative to the project directory."""

    relative_path: PurePath

    def describe(self) -> str:
        return f"copy {self.relative_path.as_posix()}"


@dataclass(frozen=True)
class RunScript:
    """Run ``npm run <script_name> [args...]`` in the target directory."""

    script_name: str
    args: tuple[str, ...] = ()

    def describe(self) -> str:
        return " ".join(["run", self.script_name, *self.args])


@dataclass(frozen=True)
class InstallDependencies:
    """Run ``npm install`` or ``npm ci``; inserted by the executor, never scheduled directly."""

    command: str = "install"

    def describe(self) -> str:
        return self.command


Operation = Union[CopyAll, CopyFile, RunScript, InstallDependencies]


@dataclass
class OperationResult:
    """A completed build step."""

    operation: Operation
    duration_seconds: float = 0.0

    def __str__(self) -> str:
        return f"[done] {self.operation.describe()} ({self.duration_seconds:.2f}s)"

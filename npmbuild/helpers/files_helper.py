"""
Filesystem helpers for selecting what a build copies.

Pure path logic only; the copying itself lives in components.copy_comp.
Relative copy paths go through validate_relative_path() so a build can
never read outside its project directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path, PurePath

from npmbuild.helpers.exceptions import BuildConfigurationError

logger = logging.getLogger(__name__)

# Directory names never copied by copy_all() unless the config says otherwise
DEFAULT_EXCLUDES = ("node_modules", ".git", ".hg", ".svn")


def validate_relative_path(user_path: str | PurePath) -> PurePath:
    """
    Check that a copy path is relative and stays inside the project directory.

    Structural checks only (no filesystem access):
    - Reject NUL bytes
    - Reject absolute paths
    - Reject any ".." component
    - Reject empty paths and "."

    Args:
        user_path: Path given to copy_file()/copy_items()

    Returns:
        The path as a PurePath

    Raises:
        BuildConfigurationError: If the path is not a plain relative path

    Examples:
        >>> validate_relative_path("src/index.js")
        PurePosixPath('src/index.js')

        >>> validate_relative_path("/etc/passwd")
        BuildConfigurationError: Items to be copied cannot be absolute paths
    """
    path_string = str(user_path)

    if "\x00" in path_string:
        raise BuildConfigurationError(f"Invalid copy path: {path_string!r}")

    pure_path = PurePath(path_string)

    if pure_path.is_absolute() or pure_path.anchor:
        raise BuildConfigurationError(f"Items to be copied cannot be absolute paths: {path_string}")

    if ".." in pure_path.parts:
        raise BuildConfigurationError(f"Items to be copied must stay inside the project directory: {path_string}")

    if not pure_path.parts:
        raise BuildConfigurationError("Copy path must name a file or directory, use copy_all() for everything")

    return pure_path


def is_same_directory(a: str | Path, b: str | Path) -> bool:
    """Check whether two paths resolve to the same location (neither needs to exist)."""
    return Path(a).resolve() == Path(b).resolve()


def list_project_entries(
    project_dir: str | Path,
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
    target_dir: str | Path | None = None,
) -> list[PurePath]:
    """
    List the top-level entries of a project directory that copy_all() should copy.

    Args:
        project_dir: Directory being copied
        exclude: Entry names to skip (matched against the name only)
        target_dir: Build target; skipped when it sits directly in project_dir

    Returns:
        Sorted entry names relative to project_dir

    Raises:
        OSError: If project_dir cannot be listed (missing, not a directory, permissions)

    Note:
        A target nested deeper than the top level is skipped while copying
        (see components.copy_comp), since only top-level names are listed here.
    """
    project = Path(project_dir)
    excluded = set(exclude)
    resolved_target = Path(target_dir).resolve() if target_dir is not None else None

    entries = []
    for entry in project.iterdir():
        if entry.name in excluded:
            logger.debug(f"[copy] Skipping excluded entry {entry.name}")
            continue
        if resolved_target is not None and entry.resolve() == resolved_target:
            logger.debug(f"[copy] Skipping target directory {entry.name} nested in project")
            continue
        entries.append(PurePath(entry.name))

    return sorted(entries)

"""
Project copy component.

Copies project entries into the build target directory, byte for byte.

Architecture:
- Leaf component (no upward imports)
- Every OSError is re-raised as FilesystemError naming the failing path
- Existing target entries are replaced, not merged, so stale files never survive a rebuild
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path, PurePath

from npmbuild.helpers.exceptions import FilesystemError
from npmbuild.helpers.files_helper import DEFAULT_EXCLUDES, is_same_directory, list_project_entries

logger = logging.getLogger(__name__)


def ensure_target_directory(target_dir: str | Path) -> Path:
    """Create the target directory (and parents) if missing."""
    target = Path(target_dir)
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Could not create target directory {target}: {e}", target) from e
    return target


def copy_all(
    project_dir: str | Path,
    target_dir: str | Path,
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
) -> list[PurePath]:
    """
    Copy every entry of project_dir into target_dir, preserving relative structure.

    Excluded names are skipped at every depth. The target directory is skipped
    wherever it appears inside the project, so nesting the target under the
    project cannot recurse.

    Args:
        project_dir: Source tree
        target_dir: Destination tree (must already exist)
        exclude: Entry names to skip

    Returns:
        Top-level entries that were copied

    Raises:
        FilesystemError: If the project cannot be listed or any entry fails to copy
    """
    project = Path(project_dir)
    excluded = tuple(exclude)

    if is_same_directory(project, target_dir):
        logger.debug("[copy] Project and target are the same directory, nothing to copy")
        return []

    try:
        entries = list_project_entries(project, excluded, target_dir)
    except OSError as e:
        raise FilesystemError(f"Could not read project directory {project}: {e}", project) from e

    for entry in entries:
        _replace_entry(project / entry, Path(target_dir) / entry, _make_ignore(excluded, target_dir))

    logger.info(f"[copy] Copied {len(entries)} entries from {project} to {target_dir}")
    return entries


def copy_entry(
    project_dir: str | Path,
    target_dir: str | Path,
    relative_path: PurePath,
    exclude: Iterable[str] = DEFAULT_EXCLUDES,
) -> Path:
    """
    Copy a single entry given relative to project_dir into the same place under target_dir.

    Files are copied alone. Directories are copied recursively with the same
    exclusions copy_all() applies below the top level.

    Args:
        project_dir: Source tree
        target_dir: Destination tree
        relative_path: Validated relative path (see helpers.files_helper.validate_relative_path)
        exclude: Entry names to skip inside copied directories

    Returns:
        Destination path

    Raises:
        FilesystemError: If the source is missing or the copy fails
    """
    source = Path(project_dir) / relative_path
    destination = Path(target_dir) / relative_path

    if is_same_directory(project_dir, target_dir):
        logger.debug(f"[copy] Project and target are the same directory, skipping {relative_path}")
        return destination

    if not source.exists():
        raise FilesystemError(f"Source not found: {source}", source)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Could not create directory {destination.parent}: {e}", destination.parent) from e

    _replace_entry(source, destination, _make_ignore(tuple(exclude), target_dir))
    logger.info(f"[copy] Copied {relative_path.as_posix()}")
    return destination


def _make_ignore(exclude: tuple[str, ...], target_dir: str | Path) -> Callable[[str, list[str]], set[str]]:
    """Build a shutil.copytree ignore callback skipping excluded names and the target itself."""
    excluded = set(exclude)
    resolved_target = Path(target_dir).resolve()

    def _ignore(directory: str, names: list[str]) -> set[str]:
        ignored = {name for name in names if name in excluded}
        for name in names:
            if name not in ignored and (Path(directory) / name).resolve() == resolved_target:
                ignored.add(name)
        return ignored

    return _ignore


def _replace_entry(source: Path, destination: Path, ignore: Callable[[str, list[str]], set[str]]) -> None:
    """Remove whatever sits at destination, then copy source there."""
    try:
        if destination.is_dir() and not destination.is_symlink():
            shutil.rmtree(destination)
        elif destination.exists() or destination.is_symlink():
            destination.unlink()

        if source.is_dir():
            shutil.copytree(source, destination, ignore=ignore)
        else:
            shutil.copy2(source, destination)
    except OSError as e:
        # shutil.Error subclasses OSError
        raise FilesystemError(f"Could not copy {source} to {destination}: {e}", source) from e

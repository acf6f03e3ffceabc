"""
Build: fluent configuration for copying an npm project and running its scripts.

A Build is configured through chained calls and then run once with
execute(). Operations run strictly in the order they were scheduled; the
first failure aborts the rest and propagates to the caller.

Example (in a host build script):
    >>> (
    ...     Build()
    ...     .project_directory("frontend")
    ...     .target_directory(out_dir / "npm")
    ...     .copy_all()
    ...     .run_script("build")
    ...     .execute()
    ... )
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable
from pathlib import Path, PurePath

from npmbuild.components.copy_comp import copy_all, copy_entry, ensure_target_directory
from npmbuild.components.npm_comp import resolve_npm, run_npm
from npmbuild.helpers.dto.operations_dto import (
    CopyAll,
    CopyFile,
    InstallDependencies,
    Operation,
    OperationResult,
    RunScript,
)
from npmbuild.helpers.exceptions import BuildConfigurationError, NpmBuildError
from npmbuild.helpers.files_helper import is_same_directory, validate_relative_path
from npmbuild.services.config_service import ConfigService

logger = logging.getLogger(__name__)


class Build:
    """
    Builder for one npm run.

    Defaults come from ConfigService (npmbuild.yaml, NPMBUILD_* env vars);
    every fluent call overrides them for this Build only. Both directories
    default to the current working directory and are not checked until
    execute().
    """

    def __init__(self, config: ConfigService | None = None) -> None:
        settings = (config or ConfigService()).make_build_settings()

        self._project_directory = Path(".")
        self._target_directory = Path(".")
        self._operations: list[Operation] = []
        self._npm_executable = settings.npm_executable
        self._release = settings.release
        self._node_env = settings.node_env
        self._install = settings.install
        self._exclude: list[str] = list(settings.exclude)
        self._executed = False

    # ----------------------------------------------------------------------
    # Configuration
    # ----------------------------------------------------------------------

    def project_directory(self, directory: str | os.PathLike[str]) -> Build:
        """Set where the npm project sources live."""
        self._project_directory = Path(directory)
        return self

    def target_directory(self, directory: str | os.PathLike[str]) -> Build:
        """
        Set the directory the project is copied to and npm runs in.

        If this differs from the project directory, schedule copy_all(),
        copy_file() or copy_items() before the first script.
        """
        self._target_directory = Path(directory)
        return self

    def copy_all(self) -> Build:
        """Schedule a copy of the whole project, minus excluded names and the target itself."""
        self._operations.append(CopyAll())
        return self

    def copy_file(self, path: str | PurePath) -> Build:
        """
        Schedule a copy of one entry given relative to the project directory.

        Raises:
            BuildConfigurationError: If the path is absolute or leaves the project directory
        """
        self._operations.append(CopyFile(validate_relative_path(path)))
        return self

    def copy_items(self, paths: Iterable[str | PurePath]) -> Build:
        """Schedule copy_file() for each path, in order."""
        for path in paths:
            self.copy_file(path)
        return self

    def exclude(self, *names: str) -> Build:
        """Add entry names that copying skips (on top of the configured exclusions)."""
        self._exclude.extend(name for name in names if name not in self._exclude)
        return self

    def run_script(self, script_name: str, *args: str) -> Build:
        """Schedule ``npm run <script_name> [args...]`` in the target directory."""
        if not script_name:
            raise BuildConfigurationError("Script name must not be empty")
        self._operations.append(RunScript(script_name, tuple(str(a) for a in args)))
        return self

    def node_env(self, value: str) -> Build:
        """
        Set NODE_ENV for every npm process.

        If never called, NODE_ENV is taken from the config, then the
        environment, then defaults to ``production`` in release mode and
        ``development`` otherwise.
        """
        self._node_env = value
        return self

    def release(self, enabled: bool = True) -> Build:
        """Release mode installs with ``npm ci`` and defaults NODE_ENV to production."""
        self._release = enabled
        return self

    def skip_install(self) -> Build:
        """Do not run npm install/ci before the first script."""
        self._install = False
        return self

    def npm_executable(self, executable: str) -> Build:
        """Use a different executable name or path instead of ``npm``."""
        self._npm_executable = executable
        return self

    @property
    def operations(self) -> tuple[Operation, ...]:
        """Operations scheduled so far, in order."""
        return tuple(self._operations)

    @property
    def executed(self) -> bool:
        return self._executed

    def resolved_node_env(self) -> str:
        if self._node_env:
            return self._node_env
        from_env = os.environ.get("NODE_ENV")
        if from_env:
            return from_env
        return "production" if self._release else "development"

    # ----------------------------------------------------------------------
    # Execution
    # ----------------------------------------------------------------------

    def plan(self) -> list[Operation]:
        """
        Return the operations execute() will run, in order.

        Inserts the install step before the first script and checks that
        something gets copied when project and target differ.

        Raises:
            BuildConfigurationError: If a script would run in a target nothing was copied to
        """
        planned: list[Operation] = []
        copied = is_same_directory(self._project_directory, self._target_directory)
        installed = not self._install

        for op in self._operations:
            if isinstance(op, (CopyAll, CopyFile)):
                copied = True
            elif isinstance(op, RunScript):
                if not copied:
                    raise BuildConfigurationError(
                        f"Target directory {self._target_directory} selected but no items to copy there; "
                        "call copy_all(), copy_file() or copy_items() before run_script()"
                    )
                if not installed:
                    planned.append(InstallDependencies("ci" if self._release else "install"))
                    installed = True
            planned.append(op)

        return planned

    def execute(self) -> list[OperationResult]:
        """
        Run every scheduled operation in order. A Build can be executed once.

        Returns:
            One OperationResult per completed step

        Raises:
            BuildConfigurationError: Invalid configuration, or the Build was already executed
            ToolNotFoundError: npm could not be found (raised before anything is copied)
            FilesystemError: A copy step failed
            ScriptExecutionError: An npm process exited non-zero
        """
        if self._executed:
            raise BuildConfigurationError("This Build has already been executed; create a new Build")
        self._executed = True

        planned = self.plan()
        npm_path = None
        if any(isinstance(op, (RunScript, InstallDependencies)) for op in planned):
            npm_path = resolve_npm(self._npm_executable)

        node_env = self.resolved_node_env()
        try:
            ensure_target_directory(self._target_directory)
        except NpmBuildError as e:
            e.operation = "create target directory"
            logger.error(f"[build] '{e.operation}' failed: {e}")
            raise

        logger.info(
            f"[build] {len(planned)} step(s): {self._project_directory} -> {self._target_directory}"
        )

        results: list[OperationResult] = []
        for op in planned:
            started = time.time()
            try:
                self._run_operation(op, npm_path, node_env)
            except NpmBuildError as e:
                e.operation = op.describe()
                logger.error(f"[build] '{e.operation}' failed: {e}")
                raise
            results.append(OperationResult(op, time.time() - started))

        logger.info(f"[build] Completed {len(results)} step(s)")
        return results

    def _run_operation(self, op: Operation, npm_path: str | None, node_env: str) -> None:
        if isinstance(op, CopyAll):
            copy_all(self._project_directory, self._target_directory, self._exclude)
        elif isinstance(op, CopyFile):
            copy_entry(self._project_directory, self._target_directory, op.relative_path, self._exclude)
        elif isinstance(op, InstallDependencies):
            assert npm_path is not None
            run_npm(npm_path, [op.command], self._target_directory, node_env, script=op.command)
        elif isinstance(op, RunScript):
            assert npm_path is not None
            run_npm(
                npm_path,
                ["run", op.script_name, *op.args],
                self._target_directory,
                node_env,
                script=op.script_name,
            )
        else:
            raise BuildConfigurationError(f"Unknown operation: {op!r}")


def execute(build: Build) -> list[OperationResult]:
    """Run a configured Build; same as ``build.execute()``."""
    return build.execute()

"""
npm invocation component.

Resolves the package-manager executable and runs it with a fixed argument
list in the build target directory.

Architecture:
- Leaf component (no upward imports)
- Only the exit code is inspected; stdout/stderr are inherited so npm output
  lands in the host build log
- No timeouts, no retries
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from npmbuild.helpers.exceptions import ScriptExecutionError, ToolNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_NPM_EXECUTABLE = "npm"


def resolve_npm(executable: str = DEFAULT_NPM_EXECUTABLE) -> str:
    """
    Resolve the npm executable through PATH (PATHEXT on Windows, so npm.cmd is found).

    Args:
        executable: Command name or path to the executable

    Returns:
        Absolute path to the executable

    Raises:
        ToolNotFoundError: If the executable cannot be found
    """
    resolved = shutil.which(executable)
    if resolved is None:
        logger.error(f"[npm] '{executable}' not found on PATH")
        raise ToolNotFoundError(executable)
    logger.debug(f"[npm] Using {resolved}")
    return resolved


def build_environment(node_env: str) -> dict[str, str]:
    """Return a copy of the current environment with NODE_ENV set."""
    env = os.environ.copy()
    env["NODE_ENV"] = node_env
    return env


def run_npm(npm_path: str, args: list[str], cwd: str | Path, node_env: str, script: str | None = None) -> None:
    """
    Run npm with the given arguments and wait for it to finish.

    Args:
        npm_path: Resolved executable (see resolve_npm)
        args: Arguments after the executable, e.g. ["run", "build"]
        cwd: Working directory (the build target)
        node_env: Value for NODE_ENV
        script: Name reported in ScriptExecutionError; defaults to the first argument

    Raises:
        ToolNotFoundError: If the process cannot be spawned
        ScriptExecutionError: If the process exits non-zero
    """
    command = [npm_path, *args]
    label = script or (args[0] if args else npm_path)
    logger.info(f"[npm] {' '.join(args)} (cwd={cwd}, NODE_ENV={node_env})")

    try:
        result = subprocess.run(command, cwd=str(cwd), env=build_environment(node_env), check=False)
    except OSError as e:
        logger.error(f"[npm] Could not start {npm_path}: {e}")
        raise ToolNotFoundError(npm_path, f"Could not start '{npm_path}': {e}") from e

    if result.returncode != 0:
        logger.error(f"[npm] '{label}' exited with code {result.returncode}")
        raise ScriptExecutionError(label, result.returncode, command)

"""
npmbuild - drive npm scripts from a host build.

Copies a front-end project into a build output directory and runs
``npm run <script>`` there, failing the host build on the first error.

Example:
    >>> from npmbuild import Build
    >>> (
    ...     Build()
    ...     .project_directory("frontend")
    ...     .target_directory("build/frontend")
    ...     .copy_all()
    ...     .run_script("build")
    ...     .execute()
    ... )
"""

from .__version__ import __version__
from .builder import Build, execute
from .helpers.exceptions import (
    BuildConfigurationError,
    FilesystemError,
    NpmBuildError,
    ScriptExecutionError,
    ToolNotFoundError,
)

__all__ = [
    "Build",
    "BuildConfigurationError",
    "FilesystemError",
    "NpmBuildError",
    "ScriptExecutionError",
    "ToolNotFoundError",
    "__version__",
    "execute",
]

"""
Helpers package.
"""

from .dto.operations_dto import (
    CopyAll,
    CopyFile,
    InstallDependencies,
    Operation,
    OperationResult,
    RunScript,
)
from .exceptions import (
    BuildConfigurationError,
    FilesystemError,
    NpmBuildError,
    ScriptExecutionError,
    ToolNotFoundError,
)
from .files_helper import (
    DEFAULT_EXCLUDES,
    is_same_directory,
    list_project_entries,
    validate_relative_path,
)

__all__ = [
    "DEFAULT_EXCLUDES",
    "BuildConfigurationError",
    "CopyAll",
    "CopyFile",
    "FilesystemError",
    "InstallDependencies",
    "NpmBuildError",
    "Operation",
    "OperationResult",
    "RunScript",
    "ScriptExecutionError",
    "ToolNotFoundError",
    "is_same_directory",
    "list_project_entries",
    "validate_relative_path",
]

"""
Dto package.
"""

from .config_dto import BuildSettings
from .operations_dto import (
    CopyAll,
    CopyFile,
    InstallDependencies,
    Operation,
    OperationResult,
    RunScript,
)

__all__ = [
    "BuildSettings",
    "CopyAll",
    "CopyFile",
    "InstallDependencies",
    "Operation",
    "OperationResult",
    "RunScript",
]

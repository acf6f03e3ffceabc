"""
Components package.
"""

from .copy_comp import copy_all, copy_entry, ensure_target_directory
from .npm_comp import DEFAULT_NPM_EXECUTABLE, build_environment, resolve_npm, run_npm

__all__ = [
    "DEFAULT_NPM_EXECUTABLE",
    "build_environment",
    "copy_all",
    "copy_entry",
    "ensure_target_directory",
    "resolve_npm",
    "run_npm",
]

"""
Commands package.
"""

from .config_cli import cmd_config
from .run_cli import build_from_args, cmd_run

__all__ = [
    "build_from_args",
    "cmd_config",
    "cmd_run",
]

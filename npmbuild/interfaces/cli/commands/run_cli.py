"""
Run command: copy a project into a target directory and run npm scripts there.
"""

from __future__ import annotations

import argparse

from rich.markup import escape

from npmbuild.builder import Build
from npmbuild.helpers.exceptions import NpmBuildError, ScriptExecutionError
from npmbuild.interfaces.cli.ui import print_error, print_success


def build_from_args(args: argparse.Namespace) -> Build:
    """Translate parsed CLI flags into a configured Build (not executed)."""
    build = Build().project_directory(args.project).target_directory(args.target or args.project)

    if args.npm:
        build.npm_executable(args.npm)
    if args.release:
        build.release()
    if args.node_env:
        build.node_env(args.node_env)
    if args.no_install:
        build.skip_install()
    if args.exclude:
        build.exclude(*args.exclude)

    if args.copy_all:
        build.copy_all()
    if args.copy:
        build.copy_items(args.copy)

    return build.run_script(args.script, *args.script_args)


def script_exit_status(exit_code: int) -> int:
    """
    Map an npm return code to a shell exit status.

    Negative codes mean the process was killed by a signal; report them as
    128 + signal number like a POSIX shell. Zero never signals failure, so it becomes 1.
    """
    if exit_code < 0:
        return 128 + abs(exit_code)
    return exit_code or 1


def cmd_run(args: argparse.Namespace) -> int:
    """
    Execute the build described by the CLI flags.

    Returns 0 on success, the script's exit status when an npm script fails
    (see script_exit_status), and 1 for every other failure.
    """
    try:
        results = build_from_args(args).execute()
    except ScriptExecutionError as e:
        print_error(f"{escape(e.operation or e.script)}: {escape(str(e))}")
        return script_exit_status(e.exit_code)
    except NpmBuildError as e:
        where = f"{e.operation}: " if e.operation else ""
        print_error(escape(f"{where}{e}"))
        return 1

    print_success(f"Ran {len(results)} step(s) in {escape(str(args.target or args.project))}")
    return 0

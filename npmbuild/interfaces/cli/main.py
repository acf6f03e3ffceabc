#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
import logging

from npmbuild.__version__ import __version__
from npmbuild.interfaces.cli.commands.config_cli import cmd_config
from npmbuild.interfaces.cli.commands.run_cli import cmd_run


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="npmbuild",
        description="npmbuild - copy an npm project into a build directory and run its scripts",
        epilog="Examples:\n"
        "  npmbuild run --project web --target build/web --copy-all build      # npm run build in build/web\n"
        "  npmbuild run --copy package.json --copy src --target out lint     # copy two entries, npm run lint\n"
        "  npmbuild run --release --project web --target dist/web --copy-all build --mode prod\n"
        "  npmbuild config                                                   # show effective configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'npmbuild <command> --help' for command-specific help)",
    )

    # run: copy + npm run
    s = sub.add_parser("run", help="Copy project files and run an npm script")
    s.add_argument("script", help="npm script name (npm run <script>)")
    s.add_argument(
        "script_args",
        nargs=argparse.REMAINDER,
        help="extra arguments passed after the script name (npmbuild options go before SCRIPT)",
    )
    s.add_argument("--project", default=".", help="project directory (default: current directory)")
    s.add_argument("--target", help="target directory (default: the project directory)")
    s.add_argument("--copy-all", action="store_true", help="copy the whole project into the target")
    s.add_argument("--copy", action="append", metavar="PATH", help="copy one entry (repeatable)")
    s.add_argument("--exclude", action="append", metavar="NAME", help="skip entries with this name (repeatable)")
    s.add_argument("--node-env", help="value for NODE_ENV")
    s.add_argument("--release", action="store_true", help="use npm ci and default NODE_ENV to production")
    s.add_argument("--no-install", action="store_true", help="skip npm install/ci")
    s.add_argument("--npm", help="npm executable name or path")
    s.set_defaults(func=cmd_run)

    # config: show effective configuration
    s = sub.add_parser("config", help="Show the effective configuration")
    s.set_defaults(func=cmd_config)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

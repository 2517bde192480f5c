"""Command-line entry point for managing several GoldenGate homes at once."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable

from ggutil.backup import run_backup
from ggutil.collect import run_collect
from ggutil.common import CommandError
from ggutil.monitor import run_config, run_mon
from ggutil.process import run_info, run_param, run_stats
from ggutil.shell import debug_print
from ggutil.tasks import run_tasks

VERSION = "1.0.0"
ENV_HOMES = "GG_HOMES"
DEFAULT_HOMES = "/acfsogg/oggo,/acfsogg/oggm,/acfsogg/oggp,/acfsogg/oggb"


def parse_gg_homes(homes: str) -> list[str]:
    """Split a comma- or semicolon-separated list of homes, dropping blanks."""
    parts = homes.replace(";", ",").split(",")
    return [part.strip() for part in parts if part.strip()]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ggutil",
        description="Oracle GoldenGate multi-instance management tool",
    )
    parser.add_argument(
        "-g",
        "--gghomes",
        default="",
        help=(
            "Specify one or more OGG Home paths, comma-separated. If not specified, "
            f"attempts to read from {ENV_HOMES} environment variable."
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output (show errors, warnings, exceptions)",
    )
    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.add_parser("version", help="Show application version")
    sub.add_parser("tasks", help="List all OGG SOURCEISTABLE tasks under all homes.")
    sub.add_parser(
        "mon",
        help="Get version and path information for all OGG instances, "
        "print 'info all' results for each.",
    )
    sub.add_parser(
        "config",
        help="View process configuration details within OGG instances.",
    )
    sub.add_parser(
        "backup",
        help="Backup configuration, log, report files, etc., for OGG instances.",
    )
    named = {
        "info": "Get information for OGG processes.",
        "param": "Get parameter configuration for OGG processes.",
        "stats": "View statistics for a specific OGG process (total, daily, hourly).",
        "collect": "Collect information for a specific OGG process "
        "(info, infodetail, showch, status).",
    }
    for name, text in named.items():
        cmd = sub.add_parser(name, help=text)
        cmd.add_argument("names", nargs="*", metavar="<process_name>")
    return parser


def _resolve_homes(flag_value: str, debug: bool) -> list[str]:
    homes = flag_value
    if not homes:
        homes = os.environ.get(ENV_HOMES, "")
        if not homes:
            homes = DEFAULT_HOMES
            debug_print(
                debug, None, "Warning: OGG Home not specified, using default: %s\n", homes
            )
    debug_print(debug, None, "Detected OGG Homes: %s\n", homes)
    parsed = parse_gg_homes(homes)
    if not parsed:
        debug_print(debug, None, "Error: Failed to parse any valid OGG Home paths.\n")
        raise CommandError("Error: Failed to parse any valid OGG Home paths.")
    return parsed


def _first_name(args: argparse.Namespace, message: str) -> str:
    if not args.names:
        raise CommandError(message)
    return args.names[0]


def _dispatch(args: argparse.Namespace, homes: list[str]) -> None:
    debug = args.debug
    simple: dict[str, Callable[[list[str], bool], object]] = {
        "tasks": run_tasks,
        "mon": run_mon,
        "config": run_config,
        "backup": run_backup,
    }
    named: dict[str, tuple[Callable[[list[str], str, bool], object], str]] = {
        "info": (
            run_info,
            "Error: 'info' command requires at least one process name argument.",
        ),
        "param": (
            run_param,
            "Error: 'param' command requires at least one process name argument.",
        ),
        "stats": (
            run_stats,
            "Error: 'stats' command requires a process name argument.",
        ),
        "collect": (
            run_collect,
            "Error: 'collect' command requires at least one process name argument.",
        ),
    }
    command = args.command
    if command == "version":
        print("ggutil version:", VERSION)
    elif command in simple:
        simple[command](homes, debug)
    else:
        handler, message = named[command]
        handler(homes, _first_name(args, message), debug)


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        homes = _resolve_homes(args.gghomes, args.debug)
        if args.command is None:
            parser.print_help()
            return 0
        _dispatch(args, homes)
    except CommandError as exc:
        print(exc, file=sys.stderr)
        if args.debug:
            print(f"Application error: {exc}", file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
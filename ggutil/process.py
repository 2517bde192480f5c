"""The ``info``, ``param`` and ``stats`` commands for one named process."""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator

from ggutil.common import CommandError, matching_process_lines
from ggutil.gger import GGER
from ggutil.instance import GGInst
from ggutil.report import gger_info, gger_param, gger_stats
from ggutil.shell import debug_print

_NO_HOMES = "Error: OGG Home list is empty. Please check configuration."
_BAR = "=" * 40


def _processes(index: int, home: str, process_name: str, debug: bool) -> Iterator[GGER]:
    gi = GGInst.from_home(home)
    debug_print(debug, sys.stdout, "Create new instance %d for %s: %s\n", index, home, gi)
    for line in matching_process_lines(gi.infoall, process_name):
        er = GGER.from_info(home, line)
        debug_print(debug, sys.stdout, "Create new GGER from %s: %s\n", line, er)
        yield er


def _for_each_home(homes: list[str], job: Callable[[int, str], str]) -> None:
    with ThreadPoolExecutor(max_workers=len(homes)) as pool:
        for text in pool.map(job, range(len(homes)), homes):
            print(text, end="")


def _banner(group: str, home: str) -> str:
    return f"\n==== OGG Process [ {group} ] Under Home: [ {home} ] ====\n\n"


def run_info(homes: list[str], process_name: str, debug: bool = False) -> None:
    """Print attributes, detail and checkpoint output of the process in every home."""
    debug_print(
        debug, sys.stdout, "Executing 'info' command for process '%s'\n", process_name
    )
    if not homes:
        raise CommandError(_NO_HOMES)
    if not process_name:
        raise CommandError("Error: Process name is required for 'info' command.")

    def info(index: int, home: str) -> str:
        return "".join(
            f"\n{gger_info(er, home)}\n"
            for er in _processes(index, home, process_name, debug)
        )

    _for_each_home(homes, info)


def run_param(homes: list[str], process_name: str, debug: bool = False) -> None:
    """Print the parameter file of the process in every home."""
    if not homes:
        raise CommandError(_NO_HOMES)
    if not process_name:
        raise CommandError("Error: No process names specified for 'param' command.")

    def param(index: int, home: str) -> str:
        parts = []
        for er in _processes(index, home, process_name, debug):
            path, content = gger_param(er)
            parts.append(_banner(er.group, home))
            parts.append(f"Param file [ {path} ] content for '{er.group}':\n\n{content}\n")
        return "".join(parts)

    _for_each_home(homes, param)


def run_stats(homes: list[str], process_name: str, debug: bool = False) -> None:
    """Print total, daily and hourly statistics of the process in every home."""
    debug_print(
        debug, sys.stdout, "Executing 'stats' command for process '%s'\n", process_name
    )
    if not homes:
        raise CommandError(_NO_HOMES)
    if not process_name:
        raise CommandError("Error: Process name is required for 'stats' command.")

    sections = (
        ("total stats", "total"),
        ("daily stats", "daily"),
        ("hourly stats/sec", "hourly, reportrate sec"),
    )

    def stats(index: int, home: str) -> str:
        parts = []
        for er in _processes(index, home, process_name, debug):
            parts.append(_banner(er.group, home))
            for title, interval in sections:
                parts.append(f"{_BAR}[{title}]{_BAR}\n")
                parts.append(gger_stats(er, home, interval) + "\n")
        return "".join(parts)

    _for_each_home(homes, stats)
"""The ``mon`` and ``config`` commands: per-home status and configuration."""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from ggutil.instance import GGInst
from ggutil.shell import debug_print

_NO_HOMES = (
    "No OGG Home configured. Please specify using the -g parameter "
    "or GG_HOMES environment variable.\n"
)


def _for_each_home(homes: list[str], job: Callable[[int, str], str]) -> None:
    with ThreadPoolExecutor(max_workers=len(homes)) as pool:
        for text in pool.map(job, range(len(homes)), homes):
            print(text)


def run_mon(homes: list[str], debug: bool = False) -> None:
    """Print version, path and ``info all`` output for every home."""
    if not homes:
        debug_print(debug, sys.stdout, _NO_HOMES)
        return

    def mon(index: int, home: str) -> str:
        gi = GGInst.from_home(home)
        debug_print(debug, sys.stdout, "Create new instance %d for %s: %s\n", index, home, gi)
        return gi.mon()

    _for_each_home(homes, mon)


def run_config(homes: list[str], debug: bool = False) -> None:
    """Print the configuration table of every home's processes."""
    if not homes:
        debug_print(debug, sys.stdout, _NO_HOMES)
        return

    def config(index: int, home: str) -> str:
        gi = GGInst.from_home(home)
        debug_print(debug, sys.stdout, "Create new instance %d for %s: %s\n", index, home, gi)
        gi.set_er()
        gi.set_er_config()
        debug_print(debug, sys.stdout, "ER Config: %s\n", gi.er)
        return gi.render_config_table()

    _for_each_home(homes, config)
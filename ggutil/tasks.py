"""Listing SOURCEISTABLE initial-load tasks of every GoldenGate home."""

from __future__ import annotations

import re
import sys
from concurrent.futures import ThreadPoolExecutor

from tabulate import tabulate

from ggutil.common import CommandError
from ggutil.shell import GGSCIError, debug_print, execute_ggsci_command

TASK_HEADERS = ["Task", "Program", "Status", "Group", "Checkpoint"]

_BLOCK_START = re.compile(r"^EXTRACT .*|^REPLICAT .*", re.MULTILINE)
_TASK_MARKER = "Task" + " " * 17 + "SOURCEISTABLE"
_CHECKPOINT = "Log Read Checkpoint"
_CONTINUATION = " " * 21


def _parse_block(block: str) -> list[str] | None:
    prog = status = group = chkpt = task = ""
    for line in block.split("\n"):
        fields = line.split()
        if fields and fields[0] in ("EXTRACT", "REPLICAT"):
            prog = fields[0]
            if len(fields) > 2:
                group = fields[1]
                status = fields[-1]
        if line.startswith(_CHECKPOINT):
            chkpt = line[len(_CHECKPOINT):].strip()
        elif line.startswith(_CONTINUATION) and chkpt:
            chkpt += " " + line.strip()
        if line.startswith("Task") and "SOURCEISTABLE" in line:
            task = "SOURCEISTABLE"
    if task != "SOURCEISTABLE":
        return None
    return [task, prog, status, group, chkpt]


def parse_sourceistable_tasks(output: str) -> list[list[str]]:
    """Rows of (task, program, status, group, checkpoint) from ``info *,tasks``."""
    starts = [m.start() for m in _BLOCK_START.finditer(output)]
    starts.append(len(output))
    rows = []
    for begin, end in zip(starts, starts[1:]):
        block = output[begin:end]
        if _TASK_MARKER not in block:
            continue
        row = _parse_block(block)
        if row is not None:
            rows.append(row)
    return rows


def render_tasks(home_rows: dict[str, list[list[str]]], homes: list[str]) -> str:
    """One grid table per home, in ``homes`` order, plus a summary if none found."""
    parts = []
    found = False
    for home in homes:
        rows = home_rows.get(home, [])
        parts.append(f"\n==== OGG SOURCEISTABLE Tasks ({home}) ====\n")
        if not rows:
            parts.append("\n")
            continue
        table = tabulate(
            rows,
            headers=TASK_HEADERS,
            tablefmt="grid",
            stralign="left",
            disable_numparse=True,
        )
        parts.append(table + "\n")
        found = True
    if not found:
        parts.append("\nNo SOURCEISTABLE tasks found in any OGG instance.\n")
    return "".join(parts)


def _query(home: str, debug: bool) -> list[list[str]]:
    debug_print(debug, sys.stdout, "Querying tasks in %s\n", home)
    try:
        output, _ = execute_ggsci_command(home, "info *,tasks")
    except GGSCIError as exc:
        print(f"[ERROR] Failed to run info *,tasks in {home}: {exc}")
        return []
    return parse_sourceistable_tasks(output)


def run_tasks(homes: list[str], debug: bool = False) -> None:
    """Query every home concurrently and print its SOURCEISTABLE tasks."""
    if not homes:
        raise CommandError("Error: OGG Home list is empty. Please check configuration.")
    with ThreadPoolExecutor(max_workers=len(homes)) as pool:
        results = list(pool.map(lambda home: _query(home, debug), homes))
    home_rows: dict[str, list[list[str]]] = {}
    for home, rows in zip(homes, results):
        home_rows.setdefault(home, []).extend(rows)
    print(render_tasks(home_rows, homes), end="")
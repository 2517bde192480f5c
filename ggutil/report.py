"""Formatting process statistics, parameters and details for display."""

from __future__ import annotations

from dataclasses import astuple, dataclass

from tabulate import tabulate

from ggutil.gger import GGER
from ggutil.shell import read_lines

_STATS_HEADERS = [
    "Table Name",
    "Insert",
    "Updates",
    "Befores",
    "Deletes",
    "Upserts",
    "Discards",
    "Operations",
]

_COUNTERS = (
    ("inserts", "insert"),
    ("updates", "update"),
    ("befores", "before"),
    ("deletes", "delete"),
    ("upserts", "upsert"),
    ("discards", "discard"),
)


@dataclass
class TableStats:
    """Operation totals for one table, as reported by GGSCI ``stats``."""

    table: str = ""
    insert: str = ""
    update: str = ""
    before: str = ""
    delete: str = ""
    upsert: str = ""
    discard: str = ""
    operation: str = ""


def _grid(rows: list[list[str]], headers: list[str]) -> str:
    return tabulate(
        rows, headers=headers, tablefmt="grid", stralign="left", disable_numparse=True
    )


def parse_stats(output: str) -> tuple[str, list[TableStats]]:
    """Return the first 'statistics since' line and per-table totals."""
    since = ""
    stats: list[TableStats] = []
    current = TableStats()
    for line in output.split("\n"):
        if line.startswith(("Extracting from", "Replicating from")):
            fields = line.split()
            if len(fields) >= 3:
                current.table = fields[2]
        if not since and " statistics since" in line:
            since = line
        if "Total" in line and "statistics" not in line:
            fields = line.split()
            if len(fields) < 3:
                continue
            kind, value = fields[1], fields[2]
            for word, attr in _COUNTERS:
                if word in kind:
                    setattr(current, attr, value)
                    break
            else:
                if "operations" in kind:
                    current.operation = value
                    stats.append(current)
                    current = TableStats()
    return since, stats


def format_stats(output: str) -> str:
    """Render GGSCI ``stats`` output as a grid table of per-table totals."""
    since, stats = parse_stats(output)
    prefix = f"\n{since}\n" if since else ""
    return prefix + _grid([list(astuple(s)) for s in stats], _STATS_HEADERS)


def gger_stats(er: GGER, home: str, interval: str) -> str:
    """Run ``stats`` for the process over ``interval`` and format the result."""
    return format_stats(er.get_stats(home, interval))


def gger_param(er: GGER) -> tuple[str, str]:
    """Return the parameter file path and its content (or an error message)."""
    if not er.param_file:
        return "", "[ERROR] No param file path found for this process."
    try:
        lines = read_lines(er.param_file)
    except OSError as exc:
        return er.param_file, f"[ERROR] Failed to read param file {er.param_file}: {exc}"
    return er.param_file, "\n".join(lines)


def gger_info(er: GGER, home: str) -> str:
    """Describe the process: attribute table, extra files, detail and showch output."""
    print(f"\n==== OGG Process [ {er.group} ] Under Home: [ {home} ] ====")
    rows = [
        ["Group", er.group],
        ["Program", er.program],
        ["Status", er.status],
        ["Lag", er.lag],
        ["ChkptTime", er.chkpt_time],
        ["Report File", er.rpt_file],
        ["Param File", er.param_file],
    ]
    parts = [_grid(rows, ["Field", "Value"]), "\n"]
    if er.obey_files:
        parts.append("obeyFiles:\n")
        parts.extend(f"  - {obey}\n" for obey in er.obey_files)
    if er.props_file:
        parts.append(f"Props File: {er.props_file}\n")
    if er.properties_file:
        parts.append(f"Properties File: {er.properties_file}\n")
    bar = "=" * 40
    parts.append(f"\n{bar}[info detail]{bar}\n")
    parts.append(er.get_info_detail(home))
    parts.append(f"\n{bar}[info showch]{bar}\n")
    parts.append(er.get_info_showch(home))
    return "".join(parts)
"""Extract and Replicat processes of a GoldenGate home."""

from __future__ import annotations

import os
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterator

from ggutil.dbinfo import DB2Entry, get_db2_info, get_oracle_info
from ggutil.program import GGProgram
from ggutil.shell import ShellError, exec_ggsci_cmd, read_lines, write_content

SCRATCH_DIR = "/tmp"

_TABLE_PREFIXES = ("map", "MAP", "table", "TABLE")
_INTEGER = re.compile(r"[+-]?\d+")


def _join(*parts: str) -> str:
    joined = "/".join(part for part in parts if part)
    return os.path.normpath(joined) if joined else ""


def _field(fields: list[str], index: int) -> str:
    return fields[index] if len(fields) > index else ""


def _read_or_report(path: str) -> list[str]:
    try:
        return read_lines(path)
    except OSError as exc:
        print(exc)
        return []


def _count_tables(lines: list[str], stop_at: str | None = None) -> int:
    count = 0
    for line in lines:
        if line.startswith(_TABLE_PREFIXES):
            count += 1
            continue
        if stop_at is not None and stop_at in line:
            break
    return count


def _connection(spec: str) -> str:
    """Turn ``user@alias`` into the alias, resolving TNS names to host details."""
    parts = spec.split("@")
    if len(parts) < 2:
        return spec
    conn = parts[1]
    if "/" not in conn:
        conn += "(" + get_oracle_info(conn) + ")"
    return conn


def _walk_files(root: str) -> Iterator[str]:
    """Yield names of non-directory entries below ``root`` in lexical walk order."""
    try:
        entries = sorted(os.scandir(root), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(entry.path)
        else:
            yield entry.name


@dataclass
class GGER(GGProgram):
    """An Extract or Replicat process with its files and configuration summary."""

    group: str = ""
    lag: str = ""
    chkpt_time: str = ""
    props_file: str = ""
    properties_file: str = ""
    prm_tab_cnt: int = 0
    rpt_tab_cnt: int = 0
    source: str = ""
    target: str = ""

    @classmethod
    def from_info(cls, home: str, info: str) -> "GGER":
        """Build from an ``EXTRACT``/``REPLICAT`` line of ``info all`` output."""
        er = cls()
        fields = info.split()
        if len(fields) != 5:
            return er
        er.program, er.status, er.group, er.lag, er.chkpt_time = fields
        er.rpt_file = _join(home, "dirrpt", er.group + ".rpt")
        er.param_file = _join(home, "dirprm", er.group.lower() + ".prm")

        props_file = ""
        for line in _read_or_report(er.param_file):
            if line.startswith(("obey", "OBEY")):
                target = _field(line.split(" "), 1)
                if target.startswith("./"):
                    er.obey_files.append(_join(home, target.replace("./", "/")))
                else:
                    er.obey_files.append(target)
            if not line.startswith("--") and "property" in line:
                value = _field(line.split("="), 1)
                if value.startswith("./"):
                    props_file = _join(home, value.replace("./", "/"))
                else:
                    props_file = _join(home, value)

        properties_file = ""
        if props_file:
            for line in _read_or_report(props_file):
                if not line.startswith("#") and line.endswith("properties"):
                    parts = line.split("=")
                    if len(parts) > 1:
                        properties_file = _join(home, "dirprm", parts[1])
        er.props_file, er.properties_file = props_file, properties_file
        return er

    def _ggsci(self, home: str, command: str) -> str:
        try:
            return exec_ggsci_cmd(home, command)
        except ShellError as exc:
            return exc.output

    def get_info(self, home: str) -> str:
        """Output of ``info <program> <group>``."""
        return self._ggsci(home, f"info {self.program} {self.group}")

    def get_info_detail(self, home: str) -> str:
        """Output of ``info <program> <group>, detail``."""
        return self._ggsci(home, f"info {self.program} {self.group}, detail")

    def get_info_showch(self, home: str) -> str:
        """Output of ``info <program> <group>, showch``."""
        return self._ggsci(home, f"info {self.program} {self.group}, showch")

    def get_stats(self, home: str, interval: str) -> str:
        """Output of ``stats <program> <group>, <interval>``."""
        return self._ggsci(home, f"stats {self.program} {self.group}, {interval}")

    def get_send_status(self, home: str) -> str:
        """Output of ``send <program> <group> status``."""
        return self._ggsci(home, f"send {self.program} {self.group} status")

    def _trail_position(self, home: str) -> str:
        trail = seqno = rba = ""
        for line in self.get_info_detail(home).split("\n"):
            if "EXTTRAIL" in line:
                fields = line.split()
                trail = _field(fields, 0)
                raw = _field(fields, 1)
                number = int(raw) if _INTEGER.fullmatch(raw) else 0
                seqno = f"{number:09d}"
                rba = _field(fields, 2)
                break
        return f"{trail}{seqno}({rba})"

    def _pump_checkpoint(self, home: str) -> str:
        seqno = rba = ""
        for line in self.get_info(home).split("\n"):
            fields = line.split()
            if "Log Read Checkpoint  File" in line and len(fields) > 4:
                seqno = fields[4]
            if "RBA " in line and len(fields) > 3:
                rba = fields[3]
        return f"{seqno}({rba})"

    def _replicat_checkpoint(self, home: str) -> str:
        seqno = rba = ""
        for line in self.get_info_detail(home).split("\n"):
            fields = line.split()
            if "File" in line:
                if len(fields) > 4:
                    seqno = fields[4]
                continue
            if "RBA" in line and len(fields) > 3:
                rba = fields[3]
        return f"{seqno}({rba})"

    def set_config(self, home: str) -> None:
        """Work out source, target and table counts from files and GGSCI output."""
        source = target = ""
        prm_lines = _read_or_report(self.param_file)

        if self.program == "EXTRACT":
            for line in prm_lines:
                if line.startswith("--"):
                    continue
                if line.startswith(("userid", "USERID")):
                    source = _connection(_field(line.split(), 1))
                    break
                if line.startswith(("sourcedb", "SOURCEDB")):
                    source = _field(line.split(" "), 1)
                    break
                if line.startswith(("exttrail", "EXTTRAIL")):
                    target = _field(line.split(), 1)
                    break
                if line.startswith(("rmthost", "RMTHOST")):
                    target = _field(line.split(), 1)
                    continue
                if line.startswith(("rmtfile", "RMTFILE")):
                    target += ":" + _field(line.split(), 1)
                    continue
            if not target:
                target = self._trail_position(home)
            if not source:
                source = self._pump_checkpoint(home)
                self.program += "*p"

        if self.program == "REPLICAT":
            source = self._replicat_checkpoint(home)
            for line in prm_lines:
                if line.startswith("--"):
                    continue
                if line.startswith(("targetdb", "TARGETDB")):
                    target = _field(line.split(), 1).replace(",", "")
                if line.startswith(("userid", "USERID")):
                    target = _connection(_field(line.split(), 1).replace(",", ""))
                    continue
                if line.startswith(("targetdb libfile", "TARGETDB LIBFILE")):
                    target = "ElasticSearch" if self.group.startswith("ES") else "Kafka"
                    continue

        prm_count = _count_tables(prm_lines)
        for obey in self.obey_files:
            if os.path.exists(obey):
                prm_count += _count_tables(_read_or_report(obey))
        rpt_count = _count_tables(
            _read_or_report(self.rpt_file), stop_at="Run Time Messages"
        )

        self.prm_tab_cnt, self.rpt_tab_cnt = prm_count, rpt_count
        self.source, self.target = source, target

    def set_db2_alias(self, db2_list: list[DB2Entry]) -> None:
        """Append DB2 host details to the source (Extract) or target (Replicat)."""
        if self.program == "EXTRACT":
            self.source += "(" + get_db2_info(self.source, db2_list) + ")"
        if self.program == "REPLICAT":
            self.target += "(" + get_db2_info(self.target, db2_list) + ")"

    def collect_file_list(self, home: str) -> tuple[list[str], list[str]]:
        """Return (files to archive, scratch files written here to remove later)."""
        files: list[str] = []
        if os.path.exists(self.param_file):
            files.append(self.param_file)
        files.extend(self.obey_files)
        if self.props_file:
            files.append(self.props_file)
        if self.properties_file:
            files.append(self.properties_file)

        rpt_dir = _join(home, "dirrpt")
        files.extend(
            _join(rpt_dir, name)
            for name in _walk_files(rpt_dir)
            if name.startswith(self.group) and name.endswith(".rpt")
        )

        jobs: list[tuple[str, Callable[[str], str]]] = [
            ("sendstatus", self.get_send_status),
            ("info", self.get_info),
            ("showch", self.get_info_showch),
            ("infodetail", self.get_info_detail),
            ("stats", lambda h: self.get_stats(h, "totalsonly *.*, reportrate min")),
        ]
        with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
            outputs = list(pool.map(lambda job: job[1](home), jobs))

        scratch: list[str] = []
        for (suffix, _), content in zip(jobs, outputs):
            path = os.path.join(SCRATCH_DIR, f"{self.group}_{suffix}.txt")
            try:
                write_content(content, path)
            except OSError:
                continue
            if os.path.exists(path):
                files.append(path)
                scratch.append(path)
        return files, scratch
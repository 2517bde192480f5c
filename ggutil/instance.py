"""A GoldenGate home with its Manager, Extract and Replicat processes."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from ggutil.dbinfo import get_db2_list
from ggutil.gger import GGER
from ggutil.program import GGManager
from ggutil.shell import ShellError, exec_ggsci_cmd
from ggutil.software import GGSoft

_SPACES = re.compile(" +")
_CONFIG_ROW = "{:<10} {:<10} {:<10} {:<10} {:<10} {:<44} {:<44}\n"


@dataclass
class GGInst:
    """One GoldenGate home: software details, processes and key files."""

    soft: GGSoft
    er: list[GGER] = field(default_factory=list)
    mgr: GGManager = field(default_factory=GGManager)
    infoall: str = ""
    global_file: str = ""
    err_log: str = ""
    jar_files: list[str] = field(default_factory=list)

    @classmethod
    def from_home(cls, home: str) -> "GGInst":
        """Read software details and ``info all`` output for ``home``."""
        try:
            infoall = exec_ggsci_cmd(home, "info all")
        except ShellError as exc:
            infoall = exc.output
        return cls(soft=GGSoft.from_home(home), infoall=infoall)

    @property
    def home(self) -> str:
        return self.soft.home

    def set_mgr(self) -> None:
        """Pick the Manager process out of the ``info all`` output."""
        for line in self.infoall.split("\n"):
            if line.startswith("MANAGER"):
                self.mgr = GGManager.from_info(self.home, line)
                break

    def set_er(self) -> None:
        """Build the Extract and Replicat processes listed by ``info all``."""
        lines = _SPACES.sub(" ", self.infoall).split("\n")
        self.er = [
            GGER.from_info(self.home, line)
            for line in lines
            if line.startswith(("EXTRACT", "REPLICAT"))
        ]

    def set_er_config(self) -> None:
        """Work out the configuration summary of every Extract and Replicat."""
        db2_list = get_db2_list() if self.soft.gg_type == "DB2" else []
        for er in self.er:
            er.set_config(self.home)
            if db2_list:
                er.set_db2_alias(db2_list)

    def set_files(self) -> None:
        """Locate GLOBALS, the error log and the jar files under dirprm."""
        self.global_file = os.path.join(self.home, "GLOBALS")
        self.err_log = os.path.join(self.home, "ggserr.log")
        prm_dir = os.path.join(self.home, "dirprm")
        try:
            names = sorted(os.listdir(prm_dir))
        except OSError as exc:
            print(exc)
            names = []
        self.jar_files = [
            os.path.join(prm_dir, name) for name in names if name.endswith(".jar")
        ]

    def _banner(self) -> str:
        return f"\n==== Home: {self.home}, {self.soft.ogg_for}, {self.soft.version}\n"

    def mon(self) -> str:
        """Home banner followed by the ``info all`` output."""
        return self._banner() + self.infoall + "-" * 80 + "\n"

    def render_config_table(self) -> str:
        """Fixed-width table of every process's source, target and table counts."""
        parts = [
            self._banner(),
            "\n",
            _CONFIG_ROW.format(
                "Program", "Status", "Group", "TabNo(prm)", "TabNo(rpt)", "Source", "Target"
            ),
            _CONFIG_ROW.format(*(["-" * 10] * 5 + ["-" * 44] * 2)),
        ]
        parts.extend(
            _CONFIG_ROW.format(
                er.program,
                er.status,
                er.group,
                er.prm_tab_cnt,
                er.rpt_tab_cnt,
                er.source,
                er.target,
            )
            for er in self.er
        )
        return "".join(parts)

    def back_file_list(self) -> list[str]:
        """Files worth backing up for this home, in a stable order."""
        files: list[str] = []
        for path in (self.global_file, self.err_log):
            if os.path.exists(path):
                files.append(path)
        files.extend(self.jar_files)
        for path in (self.mgr.rpt_file, self.mgr.param_file):
            if os.path.exists(path):
                files.append(path)
        files.extend(self.mgr.obey_files)
        for er in self.er:
            for path in (er.rpt_file, er.param_file):
                if os.path.exists(path):
                    files.append(path)
            files.extend(er.obey_files)
            if er.props_file:
                files.append(er.props_file)
            if er.properties_file:
                files.append(er.properties_file)
        return files
"""Common GoldenGate process data and the Manager process."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _join(home: str, relative: str) -> str:
    return os.path.normpath(home + "/" + relative)


@dataclass
class GGProgram:
    """A GoldenGate process with its status and related files."""

    program: str = ""
    status: str = ""
    rpt_file: str = ""
    param_file: str = ""
    obey_files: list[str] = field(default_factory=list)


@dataclass
class GGManager(GGProgram):
    """The Manager process of a GoldenGate home."""

    @classmethod
    def from_info(cls, home: str, info: str) -> "GGManager":
        """Build from a ``MANAGER <status>`` line of ``info all`` output."""
        mgr = cls(
            rpt_file=_join(home, "dirrpt/MGR.rpt"),
            param_file=_join(home, "dirprm/mgr.prm"),
        )
        fields = info.split()
        if len(fields) == 2:
            mgr.program, mgr.status = fields
        return mgr
"""Version and flavour details of a GoldenGate installation."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ggutil.shell import ShellError, exec_shell

_SPACES = re.compile(" +")


def parse_type(version_text: str) -> str:
    """Derive the database type from ``ggsci -v`` output."""
    gg_type = ""
    for line in _SPACES.sub(" ", version_text).split("\n"):
        if " for " in line:
            return line.split(" for ")[1]
        if "Oracle 1" in line:
            parts = line.split(" on ")[0].split(",")
            if len(parts) > 3:
                gg_type += parts[3]
    return gg_type


def parse_for(version_text: str) -> tuple[str, str]:
    """Return the display flavour and version lines from ``ggsci -v`` output."""
    ogg_for = version = ""
    for line in version_text.split("\n"):
        if line.startswith("Oracle GoldenGate") and " for " in line:
            ogg_for = line.replace(" Command Interpreter", "", 1)
            ogg_for = ogg_for.replace("Oracle GoldenGate", "OGG", 1)
        if line.startswith("Version") and "Build" not in line:
            version = line
        if ogg_for and version:
            break
    return ogg_for, version


@dataclass
class GGSoft:
    """Software details of one GoldenGate home."""

    home: str
    v: str = ""
    gg_type: str = ""
    ogg_for: str = ""
    version: str = ""

    @classmethod
    def from_home(cls, home: str) -> "GGSoft":
        """Run ``ggsci -v`` in ``home`` and parse what it reports."""
        try:
            text = exec_shell(home + "/ggsci -v")
        except ShellError as exc:
            text = exc.output
        ogg_for, version = parse_for(text)
        return cls(
            home=home,
            v=text,
            gg_type=parse_type(text),
            ogg_for=ogg_for,
            version=version,
        )
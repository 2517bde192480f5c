"""Helpers shared by the commands: errors, hostnames, files and process lookup."""

from __future__ import annotations

import os
import re
import shutil
import socket
import sys

_SPACES = re.compile(" +")


class CommandError(Exception):
    """A command cannot run; the message is meant for the user."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def get_hostname() -> str:
    """The name of this host."""
    return socket.gethostname()


def copy_file(file: str, dest_dir: str) -> str:
    """Copy ``file`` below ``dest_dir``, keeping its directory path; return the copy.

    Raises OSError when the file cannot be read or written.
    """
    with open(file, "rb") as src:
        parent = os.path.normpath(os.path.dirname(file) or ".")
        actual_dir = parent.replace("/", dest_dir + "/", 1)
        os.makedirs(actual_dir, exist_ok=True)
        dest = os.path.join(actual_dir, os.path.basename(file))
        with open(dest, "wb") as out:
            shutil.copyfileobj(src, out)
    return dest


def remove_file(file: str) -> None:
    """Delete ``file``, printing the error if that fails."""
    try:
        os.remove(file)
    except OSError as exc:
        print(exc)


def get_basedir() -> str:
    """Absolute directory of the running program."""
    return os.path.abspath(os.path.dirname(sys.argv[0]))


def matching_process_lines(infoall: str, process_name: str) -> list[str]:
    """Extract/Replicat lines of ``info all`` output whose group is ``process_name``."""
    wanted = process_name.upper()
    matches = []
    for line in _SPACES.sub(" ", infoall).split("\n"):
        if not line.startswith(("EXTRACT", "REPLICAT")):
            continue
        fields = line.split()
        if len(fields) > 2 and fields[2] == wanted:
            matches.append(line)
    return matches
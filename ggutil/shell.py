"""Running shell and GGSCI commands, plus small file and output helpers."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Iterable, TextIO

_BASH = "/bin/bash"


class ShellError(Exception):
    """A shell command could not run or exited with a non-zero status.

    ``output`` holds whatever the command wrote to stdout before failing.
    """

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


class GGSCIError(Exception):
    """A GGSCI session could not be started or finished unsuccessfully."""

    def __init__(self, message: str, stdout: str = "", stderr: str = "") -> None:
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr


def exec_shell(cmd: str) -> str:
    """Run ``cmd`` through bash and return its standard output."""
    try:
        completed = subprocess.run(
            [_BASH, "-c", cmd],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        raise ShellError(f"cannot run shell command: {exc}") from exc
    output = completed.stdout.decode("utf-8", errors="replace")
    if completed.returncode != 0:
        raise ShellError(
            f"shell command exited with status {completed.returncode}", output
        )
    return output


def exec_ggsci_cmd(home: str, command: str) -> str:
    """Pipe one command into ``ggsci -s`` of ``home``, dropping prompt lines."""
    return exec_shell(f'echo "{command}" | {home}/ggsci -s | grep -v ^GGSCI ')


def _with_exit(commands: str) -> str:
    if commands.strip().endswith("\nexit") or "exit" in commands.lower():
        return commands
    if not commands.endswith("\n"):
        commands += "\n"
    return commands + "exit\n"


def execute_ggsci_command(ogg_home: str, commands: str) -> tuple[str, str]:
    """Feed ``commands`` to the ggsci of ``ogg_home``; return (stdout, stderr).

    An ``exit`` command is appended unless the commands already mention one.
    """
    ggsci_path = os.path.join(ogg_home, "ggsci")
    if not os.path.exists(ggsci_path):
        raise GGSCIError(f"ggsci not found at {ggsci_path}")
    try:
        completed = subprocess.run(
            [ggsci_path],
            input=_with_exit(commands).encode("utf-8"),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise GGSCIError(f"failed to start ggsci command at {ogg_home}: {exc}") from exc
    stdout = completed.stdout.decode("utf-8", errors="replace")
    stderr = completed.stderr.decode("utf-8", errors="replace")
    if completed.returncode != 0:
        raise GGSCIError(
            f"ggsci command execution failed at {ogg_home} "
            f"with exit status {completed.returncode}",
            stdout,
            stderr,
        )
    return stdout, stderr


def read_lines(filename: str | os.PathLike[str]) -> list[str]:
    """Return the file's contents split on newlines (a trailing newline yields '')."""
    data = Path(filename).read_bytes()
    return data.decode("utf-8", errors="replace").split("\n")


def write_content(content: str, file: str | os.PathLike[str]) -> None:
    """Write ``content`` to ``file``, replacing what was there."""
    Path(file).write_text(content, encoding="utf-8")


def unique_strings(items: Iterable[str]) -> list[str]:
    """Return the items with duplicates removed, keeping first occurrences."""
    return list(dict.fromkeys(items))


def debug_print(debug: bool, writer: TextIO | None, fmt: str, *args: object) -> None:
    """Write a %-formatted message to ``writer`` (stdout if None) when debugging."""
    if not debug:
        return
    out = writer if writer is not None else sys.stdout
    out.write(fmt % args if args else fmt)
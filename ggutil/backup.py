"""The ``backup`` command: archive configuration, logs and reports of every home."""

from __future__ import annotations

import os
import shutil
import sys
import tarfile
import time
from concurrent.futures import ThreadPoolExecutor

from ggutil.common import copy_file, get_hostname
from ggutil.instance import GGInst
from ggutil.shell import debug_print

BACKUP_ROOT = "/tmp"

_NO_HOMES = (
    "No OGG Home configured. Please specify using the -g parameter "
    "or GG_HOMES environment variable.\n"
)


def tar_gz(path: str, debug: bool = False) -> str:
    """Pack the directory ``path`` into ``path.tar.gz`` and return the archive path."""
    archive = path + ".tar.gz"
    try:
        with tarfile.open(archive, "w:gz") as tar:
            tar.add(path, arcname=os.path.basename(path))
    except (OSError, tarfile.TarError) as exc:
        debug_print(debug, sys.stdout, "Error creating tar.gz: %s\n", exc)
    print(f"\nPlease refer to gz file {archive}")
    return archive


def _backup_home(index: int, home: str, dest_dir: str, debug: bool) -> None:
    gi = GGInst.from_home(home)
    debug_print(debug, sys.stdout, "Create new instance %d for %s: %s\n", index, home, gi)
    gi.set_mgr()
    debug_print(debug, sys.stdout, "Manager: %s\n", gi.mgr)
    gi.set_er()
    debug_print(debug, sys.stdout, "ER: %s\n", gi.er)
    gi.set_files()
    for file in gi.back_file_list():
        debug_print(debug, sys.stdout, "File: %s\n", file)
        try:
            copy_file(file, dest_dir)
        except OSError as exc:
            print(f"err {exc}")


def run_backup(homes: list[str], debug: bool = False) -> str | None:
    """Copy each home's key files into a staging directory and archive it.

    Returns the path of the archive, or None when no home is configured.
    """
    stamp = time.strftime("%Y%m%d_%H%M%S")
    dest_dir = os.path.join(BACKUP_ROOT, f"oggbackup_{get_hostname()}_{stamp}")
    if not homes:
        debug_print(debug, sys.stdout, _NO_HOMES)
        return None

    with ThreadPoolExecutor(max_workers=len(homes)) as pool:
        list(
            pool.map(
                lambda index, home: _backup_home(index, home, dest_dir, debug),
                range(len(homes)),
                homes,
            )
        )
    debug_print(debug, sys.stdout, "Backup to %s completed \n", dest_dir)
    archive = tar_gz(dest_dir, debug)
    try:
        shutil.rmtree(dest_dir)
    except FileNotFoundError:
        pass
    except OSError as exc:
        debug_print(debug, sys.stdout, "Error removing backup directory: %s\n", exc)
    return archive
"""The ``collect`` command: zip everything related to one process."""

from __future__ import annotations

import os
import sys
import time
import zipfile
from concurrent.futures import ThreadPoolExecutor

from ggutil.common import CommandError, matching_process_lines, remove_file
from ggutil.gger import GGER
from ggutil.instance import GGInst
from ggutil.shell import debug_print

COLLECT_DIR = "/tmp"


def _zip_files(files: list[str], zip_path: str) -> None:
    with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for file in files:
            zf.write(file, arcname=os.path.basename(file))


def _collect_home(index: int, home: str, process_name: str, debug: bool) -> str | None:
    gi = GGInst.from_home(home)
    debug_print(debug, sys.stdout, "Create new instance %d for %s: %s\n", index, home, gi)
    for line in matching_process_lines(gi.infoall, process_name):
        er = GGER.from_info(home, line)
        debug_print(debug, sys.stdout, "Create new GGER from %s: %s\n", line, er)
        files, scratch = er.collect_file_list(home)
        if not files:
            print(f"No files to collect for {process_name} in {home}", file=sys.stderr)
            return None
        stamp = time.strftime("%Y%m%d_%H%M%S")
        zip_path = os.path.join(
            COLLECT_DIR, f"oggcollect_{process_name.lower()}_{stamp}.zip"
        )
        error: Exception | None = None
        try:
            _zip_files(files, zip_path)
        except (OSError, zipfile.BadZipFile) as exc:
            error = exc
        print("\nPlease to refer to file -- " + zip_path + "\n")
        if error is not None:
            print(error)
        for path in scratch:
            remove_file(path)
        return zip_path
    return None


def run_collect(homes: list[str], process_name: str, debug: bool = False) -> list[str]:
    """Zip the files, reports and GGSCI output of ``process_name`` in every home.

    Returns the paths of the zip files created.
    """
    if not homes:
        raise CommandError("Error: OGG Home list is empty. Please check configuration.")
    if not process_name:
        raise CommandError("Error: No process name specified for 'collect' command.")
    with ThreadPoolExecutor(max_workers=len(homes)) as pool:
        results = list(
            pool.map(
                lambda index, home: _collect_home(index, home, process_name, debug),
                range(len(homes)),
                homes,
            )
        )
    return [path for path in results if path is not None]
import os
import tarfile

import pytest

from ggutil import backup

_SCRIPT = """#!/bin/bash
if [ "$1" = "-v" ]; then
  echo "Oracle GoldenGate Command Interpreter for Oracle"
  echo "Version 19.1.0.0.4"
  exit 0
fi
read -r cmd
case "$cmd" in
  "info all")
    echo "MANAGER     RUNNING"
    echo "EXTRACT     RUNNING     EXT1        00:00:00      00:00:05"
    ;;
  *) echo "output for $cmd" ;;
esac
"""


@pytest.fixture
def home(tmp_path):
    root = tmp_path / "ogg"
    (root / "dirprm").mkdir(parents=True)
    (root / "dirrpt").mkdir()
    script = root / "ggsci"
    script.write_text(_SCRIPT)
    os.chmod(script, 0o755)
    (root / "GLOBALS").write_text("GGSCHEMA ggadmin\n")
    (root / "ggserr.log").write_text("log line\n")
    (root / "dirprm" / "mgr.prm").write_text("PORT 7809\n")
    (root / "dirprm" / "ext1.prm").write_text("EXTRACT ext1\nTABLE hr.*;\n")
    (root / "dirprm" / "x.jar").write_text("jar")
    (root / "dirrpt" / "MGR.rpt").write_text("mgr report\n")
    (root / "dirrpt" / "EXT1.rpt").write_text("ext report\n")
    return str(root)


def test_tar_gz_packs_directory(tmp_path, capsys):
    src = tmp_path / "bundle"
    src.mkdir()
    (src / "f.txt").write_text("hello")
    archive = backup.tar_gz(str(src))
    assert archive == str(src) + ".tar.gz"
    with tarfile.open(archive) as tar:
        member = tar.extractfile("bundle/f.txt")
        assert member.read() == b"hello"
    assert "Please refer to gz file " + archive in capsys.readouterr().out


def test_tar_gz_reports_missing_directory_when_debugging(tmp_path, capsys):
    missing = str(tmp_path / "absent")
    backup.tar_gz(missing, debug=True)
    out = capsys.readouterr().out
    assert "Error creating tar.gz" in out


def test_run_backup_without_homes(capsys):
    assert backup.run_backup([], debug=True) is None
    assert "No OGG Home configured" in capsys.readouterr().out


def test_run_backup_archives_home_files(home, tmp_path, monkeypatch):
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    monkeypatch.setattr(backup, "BACKUP_ROOT", str(out_dir))
    archive = backup.run_backup([home])
    assert archive.startswith(str(out_dir / "oggbackup_"))
    assert archive.endswith(".tar.gz")
    with tarfile.open(archive) as tar:
        names = tar.getnames()
    for suffix in (
        "/GLOBALS",
        "/ggserr.log",
        "/dirprm/x.jar",
        "/dirprm/mgr.prm",
        "/dirprm/ext1.prm",
        "/dirrpt/MGR.rpt",
        "/dirrpt/EXT1.rpt",
    ):
        assert any(name.endswith(home + suffix) for name in names), suffix
    # The staging directory is removed, only the archive stays.
    assert os.listdir(out_dir) == [os.path.basename(archive)]
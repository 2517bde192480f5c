import pytest

from ggutil.monitor import run_config, run_mon

FAKE_GGSCI = """#!/bin/sh
if [ "$1" = "-v" ]; then
cat <<'EOF'
Oracle GoldenGate Command Interpreter for Oracle
Version 19.1.0
EOF
else
cat > /dev/null
cat <<'EOF'
MANAGER     RUNNING
EOF
fi
"""


@pytest.fixture
def fake_home(tmp_path):
    script = tmp_path / "ggsci"
    script.write_text(FAKE_GGSCI)
    script.chmod(0o755)
    return str(tmp_path)


def test_run_mon_no_homes_debug_message(capsys):
    run_mon([], True)
    assert "No OGG Home configured" in capsys.readouterr().out


def test_run_mon_no_homes_silent_without_debug(capsys):
    run_mon([], False)
    assert capsys.readouterr().out == ""


def test_run_mon_prints_home_banner(fake_home, capsys):
    run_mon([fake_home], False)
    out = capsys.readouterr().out
    assert f"==== Home: {fake_home}, OGG for Oracle, Version 19.1.0\n" in out
    assert "MANAGER     RUNNING" in out
    assert "-" * 80 in out


def test_run_mon_debug_announces_instances(fake_home, capsys):
    run_mon([fake_home], True)
    out = capsys.readouterr().out
    assert f"Create new instance 0 for {fake_home}" in out


def test_run_config_prints_table_headers(fake_home, capsys):
    run_config([fake_home], False)
    out = capsys.readouterr().out
    assert f"==== Home: {fake_home}, OGG for Oracle, Version 19.1.0" in out
    header = next(line for line in out.split("\n") if line.startswith("Program"))
    assert header.split() == [
        "Program", "Status", "Group", "TabNo(prm)", "TabNo(rpt)", "Source", "Target"
    ]


def test_run_config_no_homes_debug_message(capsys):
    run_config([], True)
    assert "No OGG Home configured" in capsys.readouterr().out
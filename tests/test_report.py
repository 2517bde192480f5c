import re
import stat

import pytest

from ggutil.gger import GGER
from ggutil.report import (
    TableStats,
    format_stats,
    gger_info,
    gger_param,
    gger_stats,
    parse_stats,
)

SCRIPT = """#!/bin/bash
read -r cmd
key=$(printf '%s' "$cmd" | tr -c 'A-Za-z0-9' '_')
f="$(dirname "$0")/responses/$key"
if [ -f "$f" ]; then cat "$f"; fi
"""

SINCE = "*** Total statistics since 2024-01-01 09:00:00 ***"

STATS_OUTPUT = f"""Sending STATS request to EXTRACT EXT1 ...

Start of Statistics at 2024-01-01 10:00:00.

Extracting from SRC.ORDERS to SRC.ORDERS:

{SINCE}
\tTotal inserts                   \t        10.00
\tTotal updates                   \t         5.00
\tTotal deletes                   \t         1.00
\tTotal upserts                   \t         0.00
\tTotal discards                  \t         0.00
\tTotal operations                \t        16.00

Extracting from SRC.ITEMS to SRC.ITEMS:

*** Total statistics since 2024-01-01 09:30:00 ***
\tTotal inserts                   \t         2.00
\tTotal befores                   \t         3.00
\tTotal operations                \t         5.00

End of Statistics.
"""


@pytest.fixture
def home(tmp_path):
    script = tmp_path / "ggsci"
    script.write_text(SCRIPT)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    (tmp_path / "responses").mkdir()
    return tmp_path


def respond(home, command, text):
    key = re.sub(r"[^A-Za-z0-9]", "_", command)
    (home / "responses" / key).write_text(text)


def test_parse_stats_rows_and_since():
    since, stats = parse_stats(STATS_OUTPUT)
    assert since == SINCE
    assert stats == [
        TableStats(
            table="SRC.ORDERS",
            insert="10.00",
            update="5.00",
            delete="1.00",
            upsert="0.00",
            discard="0.00",
            operation="16.00",
        ),
        TableStats(table="SRC.ITEMS", insert="2.00", before="3.00", operation="5.00"),
    ]


def test_parse_stats_without_operations_line_drops_row():
    since, stats = parse_stats("Replicating from A.B to C.D:\n\tTotal inserts 1.00\n")
    assert since == ""
    assert stats == []


def test_format_stats_includes_since_and_rows():
    text = format_stats(STATS_OUTPUT)
    assert text.startswith("\n" + SINCE + "\n")
    assert "Table Name" in text
    assert "Operations" in text
    table_rows = [line for line in text.split("\n") if line.startswith("| SRC.")]
    assert len(table_rows) == 2
    assert "16.00" in table_rows[0]


def test_format_stats_empty_output_has_only_headers():
    text = format_stats("")
    assert text.startswith("+")
    assert "Table Name" in text
    assert "SRC." not in text


def test_gger_stats_runs_command(home):
    respond(home, "stats EXTRACT EXT1, total", STATS_OUTPUT)
    er = GGER(program="EXTRACT", group="EXT1")
    text = gger_stats(er, str(home), "total")
    assert SINCE in text
    assert "SRC.ITEMS" in text


def test_gger_param_reads_file(tmp_path):
    prm = tmp_path / "ext1.prm"
    prm.write_text("EXTRACT ext1\nTABLE SRC.*;\n")
    er = GGER(param_file=str(prm))
    path, content = gger_param(er)
    assert path == str(prm)
    assert content == "EXTRACT ext1\nTABLE SRC.*;\n"


def test_gger_param_missing_path():
    assert gger_param(GGER()) == ("", "[ERROR] No param file path found for this process.")


def test_gger_param_unreadable(tmp_path):
    missing = str(tmp_path / "none.prm")
    path, content = gger_param(GGER(param_file=missing))
    assert path == missing
    assert content.startswith(f"[ERROR] Failed to read param file {missing}: ")


def test_gger_info_sections(home, capsys):
    respond(home, "info REPLICAT REP1, detail", "detail body\n")
    respond(home, "info REPLICAT REP1, showch", "showch body\n")
    er = GGER(
        program="REPLICAT",
        status="RUNNING",
        group="REP1",
        obey_files=["/x/a.oby"],
        props_file="/x/k.props",
        properties_file="/x/p.properties",
    )
    text = gger_info(er, str(home))
    assert f"Under Home: [ {home} ]" in capsys.readouterr().out
    assert "| Group" in text and "REP1" in text
    assert "obeyFiles:\n  - /x/a.oby\n" in text
    assert "Props File: /x/k.props\n" in text
    assert "Properties File: /x/p.properties\n" in text
    detail_at = text.index("[info detail]")
    showch_at = text.index("[info showch]")
    assert detail_at < text.index("detail body") < showch_at < text.index("showch body")


def test_gger_info_omits_absent_files(home, capsys):
    er = GGER(program="EXTRACT", group="EXT1")
    text = gger_info(er, str(home))
    capsys.readouterr()
    assert "obeyFiles" not in text
    assert "Props File" not in text
    assert text.endswith("[info showch]" + "=" * 40 + "\n")
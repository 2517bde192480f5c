import os
import stat

from ggutil.dbinfo import (
    DB2Entry,
    get_db2_info,
    get_db2_list,
    get_oracle_info,
    parse_db2_list,
    parse_oracle_info,
)

NODE_OUTPUT = """
 Node Directory

 Number of entries in the directory = 1

Node 1 entry:

 Node name                      = NODE1
 Comment                        =
 Protocol                       = TCPIP
 Hostname                       = host1
 Service name                   = 50000
"""

DB_OUTPUT = """
 System Database Directory

Database 1 entry:

 Database alias                       = SAMPLE
 Database name                        = SAMPLE
 Node name                            = NODE1

Database 2 entry:

 Database alias                       = REMOTE
 Database name                        = RDB
 Node name                            = OTHER
"""

TNSPING_OUTPUT = (
    "Used TNSNAMES adapter to resolve the alias\n"
    "Attempting to contact (DESCRIPTION = (ADDRESS = (PROTOCOL = TCP)"
    "(HOST = db1)(PORT = 1521)) (CONNECT_DATA = (SERVER = DEDICATED) "
    "(SERVICE_NAME = orcl)))\n"
    "OK (10 msec)\n"
)


def _script(path, body):
    path.write_text("#!/bin/bash\n" + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def test_parse_db2_list_joins_nodes():
    entries = parse_db2_list(NODE_OUTPUT, DB_OUTPUT)
    assert len(entries) == 2
    first = entries[0]
    assert (first.alias, first.name, first.node) == ("SAMPLE", "SAMPLE", "NODE1")
    assert (first.hostname, first.service_name) == ("host1", "50000")


def test_parse_db2_list_unmatched_node_carries_previous_host():
    entries = parse_db2_list(NODE_OUTPUT, DB_OUTPUT)
    second = entries[1]
    assert second.node == "OTHER"
    assert second.hostname == entries[0].hostname


def test_parse_db2_list_empty():
    assert parse_db2_list("", "") == []


def test_get_db2_info_case_insensitive():
    entries = parse_db2_list(NODE_OUTPUT, DB_OUTPUT)
    assert get_db2_info("sample", entries) == "host1:50000/SAMPLE"


def test_get_db2_info_missing_alias():
    entries = [DB2Entry(alias="X", name="Y", node="N", hostname="h", service_name="1")]
    assert get_db2_info("nothere", entries) == ""


def test_parse_oracle_info():
    assert parse_oracle_info(TNSPING_OUTPUT) == "db1:1521/orcl"


def test_parse_oracle_info_no_description():
    assert parse_oracle_info("TNS-03505: Failed to resolve name\n") == ""


def test_get_oracle_info_runs_tnsping(tmp_path, monkeypatch):
    (tmp_path / "out.txt").write_text(TNSPING_OUTPUT)
    _script(tmp_path / "tnsping", f'cat "{tmp_path}/out.txt"\n')
    monkeypatch.setenv("PATH", f"{tmp_path}{os.pathsep}{os.environ.get('PATH', '')}")
    assert get_oracle_info("orcl") == parse_oracle_info(TNSPING_OUTPUT)


def test_get_db2_list_runs_db2(tmp_path, monkeypatch):
    (tmp_path / "node.txt").write_text(NODE_OUTPUT)
    (tmp_path / "db.txt").write_text(DB_OUTPUT)
    _script(
        tmp_path / "db2",
        f'if [ "$3" = "node" ]; then cat "{tmp_path}/node.txt"; '
        f'else cat "{tmp_path}/db.txt"; fi\n',
    )
    monkeypatch.setenv("PATH", f"{tmp_path}{os.pathsep}{os.environ.get('PATH', '')}")
    assert get_db2_list() == parse_db2_list(NODE_OUTPUT, DB_OUTPUT)
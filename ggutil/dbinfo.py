"""Looking up database connection details for DB2 aliases and Oracle TNS names."""

from __future__ import annotations

from dataclasses import dataclass

from ggutil.shell import ShellError, exec_shell


@dataclass
class DB2Entry:
    """A catalogued DB2 database together with its network node."""

    alias: str = ""
    name: str = ""
    node: str = ""
    hostname: str = ""
    service_name: str = ""


def _value(line: str) -> str:
    """Text between the first and the second '=' of a line."""
    parts = line.split("=")
    return parts[1] if len(parts) > 1 else ""


def _shell_output(cmd: str) -> str:
    try:
        return exec_shell(cmd)
    except ShellError as exc:
        return exc.output


def parse_db2_list(node_output: str, db_output: str) -> list[DB2Entry]:
    """Join ``db2 list node directory`` and ``db2 list database directory`` output."""
    nodes: list[DB2Entry] = []
    node = hostname = service_name = ""
    for line in node_output.split("\n"):
        if "Node name" in line:
            node = _value(line)
            continue
        if "Hostname" in line:
            hostname = _value(line)
            continue
        if "Service name" in line:
            service_name = _value(line)
            nodes.append(
                DB2Entry(
                    node=node.strip(),
                    hostname=hostname.strip(),
                    service_name=service_name.strip(),
                )
            )
            node = hostname = service_name = ""

    databases: list[DB2Entry] = []
    alias = name = node = ""
    for line in db_output.split("\n"):
        if "Database alias" in line:
            alias = _value(line)
            continue
        if "Database name" in line:
            name = _value(line)
            continue
        if "Node name" in line:
            node = _value(line)
            databases.append(
                DB2Entry(alias=alias.strip(), name=name.strip(), node=node.strip())
            )
            alias = name = node = ""

    result: list[DB2Entry] = []
    # Host details carry over from the previous database when no node matches.
    hostname = service_name = ""
    for db in databases:
        match = next((n for n in nodes if n.node == db.node), None)
        if match is not None:
            hostname, service_name = match.hostname, match.service_name
        result.append(
            DB2Entry(
                alias=db.alias,
                name=db.name,
                node=db.node,
                hostname=hostname,
                service_name=service_name,
            )
        )
    return result


def get_db2_list() -> list[DB2Entry]:
    """Query the local DB2 catalog for databases and their nodes."""
    node_output = _shell_output("db2 list node directory")
    db_output = _shell_output("db2 list database directory")
    return parse_db2_list(node_output, db_output)


def get_db2_info(alias: str, db_list: list[DB2Entry]) -> str:
    """Return ``host:service/name`` for the alias (case-insensitive), or ''."""
    wanted = alias.upper()
    for entry in db_list:
        if entry.alias == wanted:
            return f"{entry.hostname}:{entry.service_name}/{entry.name}"
    return ""


def parse_oracle_info(tnsping_output: str) -> str:
    """Extract ``host:port/service`` from tnsping output."""
    result = ""
    for line in tnsping_output.split("\n"):
        if "DESCRIPTION" not in line:
            continue
        for part in line.split(")"):
            if "HOST" in part:
                result = _value(part).strip()
            if "PORT" in part:
                result += ":" + _value(part).strip()
            if "SERVICE_NAME" in part:
                result += "/" + _value(part).strip()
    return result


def get_oracle_info(alias: str) -> str:
    """Run tnsping for ``alias`` and return its ``host:port/service``."""
    return parse_oracle_info(_shell_output("tnsping " + alias))
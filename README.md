# ggutil

A command-line tool for looking after several Oracle GoldenGate (OGG) homes at
once. Each command runs against every configured OGG home in parallel. It
queries each home through its `ggsci` executable and reads the parameter and
report files kept under that home.

## Installation

```
pip install .
```

This installs the `ggutil` command.

## Choosing OGG homes

Give one or more OGG home paths with `-g` / `--gghomes`. Separate them with
commas or semicolons. Blank entries and surrounding spaces are ignored:

```
ggutil -g /u01/ogg1,/u01/ogg2 mon
```

If you leave out `-g`, the `GG_HOMES` environment variable is used instead. If
that is not set either, the tool uses the default set
`/acfsogg/oggo,/acfsogg/oggm,/acfsogg/oggp,/acfsogg/oggb`.

Add `--debug` to print diagnostic messages: which homes were detected, the
instances and processes found, and the files handled.

If you give no command, the tool prints its help.

## Commands

| Command | What it does |
|---|---|
| `ggutil version` | Print the tool version |
| `ggutil mon` | Print the flavour, version line and `info all` output for each home |
| `ggutil tasks` | List the SOURCEISTABLE (initial-load) tasks in each home as a table |
| `ggutil info <process>` | Show a process's attributes and files, followed by its `info ..., detail` and `info ..., showch` output |
| `ggutil param <process>` | Print the parameter file of a process |
| `ggutil config` | Tabulate each Extract and Replicat: status, table counts from the parameter and report files, source and target |
| `ggutil stats <process>` | Show total, daily and hourly per-table statistics for a process |
| `ggutil collect <process>` | Zip a process's parameter, obey, properties and report files, together with its status, info, showch, detail and stats output, into `/tmp/oggcollect_<process>_<timestamp>.zip` |
| `ggutil backup` | Archive the GLOBALS file, `ggserr.log`, jar files, and the Manager, Extract and Replicat parameter and report files of every home into `/tmp/oggbackup_<host>_<timestamp>.tar.gz` |

Process names are matched case-insensitively against the group names listed by
`info all`. Only the first name given is used. For example:

```
ggutil -g /u01/ogg1 stats ext1
ggutil collect rep1
```

`info`, `param`, `stats` and `collect` exit with status 1 and an error message
when no process name is given.

## Using it from Python

The building blocks are importable as well:

- `ggutil.instance.GGInst.from_home(home)` reads a home's software details and
  `info all` output; `set_mgr()`, `set_er()`, `set_er_config()` and
  `set_files()` fill in its processes and files, and `mon()`,
  `render_config_table()` and `back_file_list()` report on them.
- `ggutil.gger.GGER.from_info(home, line)` builds an Extract or Replicat from an
  `info all` line.
- `ggutil.report.parse_stats(output)` and `format_stats(output)` turn GGSCI
  `stats` output into per-table totals and a grid table.
- `ggutil.tasks.parse_sourceistable_tasks(output)` parses `info *,tasks`
  output.
- `ggutil.cli.parse_gg_homes(text)` splits a list of homes.

## Requirements

Each OGG home must contain a working `ggsci` executable, and `/bin/bash` must
be available. The `config` command also resolves database aliases: it calls
`tnsping` for Oracle connections, and `db2` when the home is a DB2 build.
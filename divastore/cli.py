"""Command that stores a day's JSON exports in an SQLite database."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from pathlib import Path
from typing import Any, Iterable

from divastore.storing import StoringJob
from divastore.tables import DEFAULT_ORDER, TABLES, date_stamp, table

__all__ = ["run_all", "main"]


def run_all(
    connection: Any, root: str | Path, stamp: str | None, names: Iterable[str]
) -> dict[str, int | None]:
    """Run the storing jobs one after another.

    A failing job is reported on stderr and the next one still runs.
    Maps each table name to its inserted row count, or None on failure.
    """
    jobs = [StoringJob(table(name), root, stamp) for name in names]
    results: dict[str, int | None] = {}
    for job in jobs:
        key = job.spec.key
        try:
            results[key] = job.run(connection)
        except Exception as exc:  # reported per job, like each job's own handler
            print(exc, file=sys.stderr)
            results[key] = None
        else:
            print(f"[DBStoring] {key} successfully")
    return results


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="divastore", description="Store sensor-log JSON exports in a database."
    )
    parser.add_argument("--database", default="diva2db.sqlite", help="SQLite database file")
    parser.add_argument("--root", default="DIVA2_DATA", help="directory holding the day folders")
    parser.add_argument("--date", dest="stamp", default=None, help="day stamp, default today")
    parser.add_argument(
        "--table",
        dest="tables",
        action="append",
        choices=list(TABLES),
        help="table to store (repeatable); default stores all but framedata",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    names = args.tables or list(DEFAULT_ORDER)
    stamp = args.stamp or date_stamp()
    with closing(sqlite3.connect(args.database)) as connection:
        run_all(connection, args.root, stamp, names)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Load one JSON export file and store its records in its database table."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from divastore.tables import TableSpec, date_stamp

__all__ = ["StoringJob", "load_records", "store_records", "data_path"]

_log = logging.getLogger(__name__)


def data_path(root: str | Path, spec: TableSpec, stamp: str) -> Path:
    """Location of a table's JSON export for the capture day *stamp*."""
    return Path(root) / f"{stamp}_0" / "JSON" / spec.filename


def load_records(path: str | Path) -> list[Any]:
    """Read the records of a JSON export.

    A missing file or a JSON null gives no records; a document that is
    not an array raises ValueError.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            document = json.load(handle)
    except FileNotFoundError:
        _log.info("no export at %s", path)
        return []
    if document is None:
        return []
    if not isinstance(document, list):
        raise ValueError(f"{path}: expected a JSON array of records")
    return document


def _execute_committed(connection: Any, sql: str, params: tuple = ()) -> None:
    cursor = connection.cursor()
    try:
        cursor.execute(sql, params)
        connection.commit()
    except BaseException:
        connection.rollback()
        raise
    finally:
        cursor.close()


def store_records(connection: Any, spec: TableSpec, records: Iterable[Any]) -> int:
    """Create the table and insert each record in its own transaction.

    Returns the number of rows inserted. Rows committed before a failing
    record stay in the table; the error is raised.
    """
    _execute_committed(connection, spec.create_sql)
    insert = spec.insert_sql()
    stored = 0
    for record in records:
        _execute_committed(connection, insert, spec.row(record))
        stored += 1
    return stored


@dataclass
class StoringJob:
    """Stores one table's export for one capture day."""

    spec: TableSpec
    root: str | Path
    stamp: str | None = None
    stopped: bool = field(default=False, init=False)

    @property
    def path(self) -> Path:
        return data_path(self.root, self.spec, self.stamp or date_stamp())

    def run(self, connection: Any) -> int:
        """Store the export; returns the number of rows inserted."""
        if self.stopped:
            return 0
        records = load_records(self.path)
        return store_records(connection, self.spec, records)

    def stop(self) -> None:
        """Mark the job as stopped so a later run does nothing."""
        self.stopped = True
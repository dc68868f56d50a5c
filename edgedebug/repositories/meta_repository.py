from __future__ import annotations

import logging
import sqlite3

from edgedebug.errors import StoreError, UsageError
from edgedebug.models.resources import ALL_KINDS, KIND_SELECTORS, ResourceRecord
from edgedebug.repositories.database import Database

LOGGER = logging.getLogger("edgedebug.store")


class MetaRepository:
    def __init__(self, db: Database) -> None:
        self._db = db

    def fetch_all(self, kind: str) -> list[ResourceRecord]:
        """Return every stored record of `kind`, or of every type for `all`."""
        if kind not in KIND_SELECTORS:
            raise UsageError(f"resource type {kind} is not available")

        try:
            with self._db.connection() as conn:
                if kind == ALL_KINDS:
                    rows = conn.execute("SELECT key, type, value FROM meta").fetchall()
                else:
                    rows = conn.execute(
                        "SELECT key, type, value FROM meta WHERE type = ?",
                        (kind,),
                    ).fetchall()
        except sqlite3.Error as exc:
            LOGGER.debug("store query failed path=%s error=%s", self._db.path, exc)
            raise StoreError(f"cannot read store at {self._db.path}: {exc}") from exc

        LOGGER.debug("fetched records kind=%s count=%s", kind, len(rows))
        return [_row_to_record(row) for row in rows]


def _row_to_record(row: sqlite3.Row) -> ResourceRecord:
    return ResourceRecord(
        key=str(row["key"]),
        kind=str(row["type"]),
        payload=_as_payload_text(row["value"]),
    )


def _as_payload_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)

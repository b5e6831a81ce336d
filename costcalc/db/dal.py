"""Data Access Layer for persisted preferences.

`Database` exposes the metadata table as a JSON key/value store
(``get(key, default)`` / ``set(key, value)`` / ``delete(key)``), which is
all the preference services need.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sqlite3
from typing import Any

UTC_NOW_SQL = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"

logger = logging.getLogger("costcalc.db")


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path

    # ------------------------------------------------------------------
    # Connection helpers
    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    # ------------------------------------------------------------------
    # Raw metadata access
    def get_raw(self, key: str) -> str | None:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("SELECT value FROM metadata WHERE key = ?", (key,))
            row = cur.fetchone()
            return row[0] if row else None

    def set_raw(self, key: str, value: str) -> None:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(
                f"""
                INSERT INTO metadata (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = ({UTC_NOW_SQL})
                """,
                (key, value),
            )
            conn.commit()

    def delete(self, key: str) -> bool:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute("DELETE FROM metadata WHERE key = ?", (key,))
            conn.commit()
            return cur.rowcount > 0

    # ------------------------------------------------------------------
    # JSON key/value store
    def get(self, key: str, default: Any = None) -> Any:
        raw = self.get_raw(key)
        if not raw:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("ignoring malformed metadata value", extra={"key": key})
            return default

    def set(self, key: str, value: Any) -> None:
        self.set_raw(key, json.dumps(value, separators=(",", ":")))

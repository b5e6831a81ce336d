"""Database schema DDL definitions and initialization utilities.

Tables:
  - metadata: key/value store for user preferences (JSON encoded values)
    and the schema version marker
"""

from __future__ import annotations
import sqlite3
from typing import Sequence
from pathlib import Path

BASIC_UTC_NOW = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"
CURRENT_SCHEMA_VERSION = 1
SCHEMA_VERSION_KEY = "schema_version"

METADATA_DDL = f"""
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

DDL_ORDER: Sequence[str] = (METADATA_DDL,)


def init_db(path: Path) -> int:
    """Create all tables idempotently and return the schema version.

    Parameters
    ----------
    path: Path to SQLite database file.
    """
    conn = sqlite3.connect(path)
    try:
        cur = conn.cursor()
        for ddl in DDL_ORDER:
            cur.execute(ddl)
        cur.execute(
            "INSERT OR IGNORE INTO metadata (key, value) VALUES (?, ?)",
            (SCHEMA_VERSION_KEY, str(CURRENT_SCHEMA_VERSION)),
        )
        cur.execute("SELECT value FROM metadata WHERE key = ?", (SCHEMA_VERSION_KEY,))
        version = int(cur.fetchone()[0])
        conn.commit()
        return version
    finally:
        conn.close()

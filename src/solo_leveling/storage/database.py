from __future__ import annotations

import contextlib
import importlib
import logging
import pathlib
import sqlite3
from typing import Generator

logger = logging.getLogger(__name__)

MEMORY = ":memory:"

_MIGRATIONS = [
    "001_initial",
]


class Database:
    """sqlite file (or ``:memory:``) holding player-state blobs."""

    def __init__(self, db_path: str = MEMORY) -> None:
        self.db_path = db_path
        self._conn: sqlite3.Connection | None = None
        if db_path != MEMORY:
            pathlib.Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def initialize(self) -> None:
        """Bring the schema up to the latest migration."""
        with self.get_connection() as conn:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS schema_version "
                "(version INTEGER PRIMARY KEY, name TEXT NOT NULL)"
            )
        current = self.schema_version()
        for version, name in enumerate(_MIGRATIONS, 1):
            if version <= current:
                continue
            logger.info("Applying migration %s to %s", name, self.db_path)
            module = importlib.import_module(f"solo_leveling.storage.migrations.{name}")
            with self.get_connection() as conn:
                module.upgrade(conn)
                conn.execute("INSERT INTO schema_version VALUES (?, ?)", (version, name))

    def schema_version(self) -> int:
        """Highest applied migration number, 0 for a blank database."""
        row = self.conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
        return row[0] or 0

    @contextlib.contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Yield the connection; commit on success, roll back on exception."""
        conn = self.conn
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

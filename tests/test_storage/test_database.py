"""Tests for src/solo_leveling/storage/database.py."""
from __future__ import annotations

import pytest

from solo_leveling.storage.database import Database, _MIGRATIONS


def _tables(db: Database) -> set[str]:
    rows = db.conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
    return {r[0] for r in rows}


class TestInitialize:
    def test_latest_version(self, in_memory_db):
        assert in_memory_db.schema_version() == len(_MIGRATIONS)

    def test_migration_names_recorded(self, in_memory_db):
        names = [r["name"] for r in in_memory_db.conn.execute(
            "SELECT name FROM schema_version ORDER BY version"
        )]
        assert names == _MIGRATIONS

    def test_rerun_is_noop(self, in_memory_db):
        in_memory_db.initialize()
        count = in_memory_db.conn.execute("SELECT count(*) FROM schema_version").fetchone()[0]
        assert count == len(_MIGRATIONS)

    def test_player_states_table(self, in_memory_db):
        assert "player_states" in _tables(in_memory_db)

    def test_in_memory_database(self):
        db = Database()
        db.initialize()
        assert "player_states" in _tables(db)
        db.close()

    def test_blank_version_is_zero(self):
        db = Database()
        db.conn.execute("CREATE TABLE schema_version (version INTEGER PRIMARY KEY, name TEXT NOT NULL)")
        assert db.schema_version() == 0
        db.close()

    def test_creates_parent_directory(self, tmp_path):
        db = Database(str(tmp_path / "nested" / "dir" / "save.db"))
        db.initialize()
        assert (tmp_path / "nested" / "dir").is_dir()
        db.close()

    def test_no_wal_files(self, tmp_path):
        db = Database(str(tmp_path / "plain.db"))
        db.initialize()
        db.close()
        assert not (tmp_path / "plain.db-wal").exists()


class TestGetConnection:
    def _insert(self, conn, user_id: str) -> None:
        conn.execute(
            "INSERT INTO player_states (user_id, state, updated_at) VALUES (?, '{}', '2024-01-01')",
            (user_id,),
        )

    def _exists(self, db: Database, user_id: str) -> bool:
        row = db.conn.execute("SELECT 1 FROM player_states WHERE user_id = ?", (user_id,)).fetchone()
        return row is not None

    def test_commits_on_success(self, in_memory_db):
        with in_memory_db.get_connection() as conn:
            self._insert(conn, "u1")
        assert self._exists(in_memory_db, "u1")

    def test_rollback_on_error(self, in_memory_db):
        with pytest.raises(RuntimeError):
            with in_memory_db.get_connection() as conn:
                self._insert(conn, "u2")
                raise RuntimeError("boom")
        assert not self._exists(in_memory_db, "u2")

    def test_close_then_reopen(self, tmp_path):
        db = Database(str(tmp_path / "x.db"))
        db.initialize()
        db.close()
        db.close()
        assert db.schema_version() == len(_MIGRATIONS)
        db.close()

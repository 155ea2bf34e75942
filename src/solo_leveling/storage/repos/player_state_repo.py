from __future__ import annotations

import logging
from datetime import datetime, timezone

from pydantic import ValidationError

from solo_leveling.models.player import PlayerState
from solo_leveling.storage.database import Database
from solo_leveling.utils import decode_object

logger = logging.getLogger(__name__)


class PlayerStateRepo:
    """Repository for the per-user player-state document."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def save(self, state: PlayerState) -> None:
        """Insert or replace the stored blob for ``state.user_id``."""
        now = datetime.now(timezone.utc).isoformat()
        with self.db.get_connection() as conn:
            conn.execute(
                "INSERT INTO player_states (user_id, state, updated_at) "
                "VALUES (?, ?, ?) "
                "ON CONFLICT(user_id) DO UPDATE SET "
                "state = excluded.state, updated_at = excluded.updated_at",
                (state.user_id, state.model_dump_json(), now),
            )

    def load(self, user_id: str) -> PlayerState | None:
        """Fetch a stored state. Unreadable blobs count as missing."""
        with self.db.get_connection() as conn:
            row = conn.execute(
                "SELECT state FROM player_states WHERE user_id = ?", (user_id,)
            ).fetchone()
        if row is None:
            return None
        data = decode_object(row["state"])
        if data is None:
            logger.warning("Discarding unreadable state blob for %s", user_id)
            return None
        try:
            return PlayerState.model_validate(data)
        except ValidationError:
            logger.warning("Discarding invalid state blob for %s", user_id, exc_info=True)
            return None

    def load_or_create(self, user_id: str) -> PlayerState:
        """Return the stored state, or a fresh level-1 state if none exists."""
        return self.load(user_id) or PlayerState(user_id=user_id)

    def list_users(self) -> list[str]:
        """Return stored user ids, most recently updated first."""
        with self.db.get_connection() as conn:
            rows = conn.execute(
                "SELECT user_id FROM player_states ORDER BY updated_at DESC"
            ).fetchall()
        return [r["user_id"] for r in rows]

    def delete(self, user_id: str) -> None:
        with self.db.get_connection() as conn:
            conn.execute("DELETE FROM player_states WHERE user_id = ?", (user_id,))

from __future__ import annotations

from solo_leveling.storage.repos.player_state_repo import PlayerStateRepo

__all__ = [
    "PlayerStateRepo",
]

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from solo_leveling.mechanics.leveling import xp_for_next_level
from solo_leveling.models.item import Equipment

CORE_STATS = ("strength", "vitality", "agility", "intelligence", "fortune", "metabolism")


class PlayerStats(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: int = Field(default=1, ge=1)
    xp_current: float = Field(default=0, ge=0)
    xp_for_next_level: int = Field(default_factory=lambda: xp_for_next_level(1))
    # Lifetime XP; only ever grows. Rank is derived from it.
    total_xp: float = Field(default=0, ge=0)
    strength: int = 10
    vitality: int = 10
    agility: int = 10
    intelligence: int = 10
    fortune: int = 10
    metabolism: int = 10
    passive_points: int = 0
    shards: int = 0


class PlayerState(BaseModel):
    """The persisted per-user blob."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    stats: PlayerStats = Field(default_factory=PlayerStats)
    inventory: list[Equipment] = Field(default_factory=list)
    dungeon_runs: int = 0
    unlocked_title_ids: list[str] = Field(default_factory=list)
    unlocked_frame_ids: list[str] = Field(default_factory=list)

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from solo_leveling.mechanics.ranks import RankTier
from solo_leveling.models.item import Equipment


class Dungeon(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str = ""
    base_xp: int = Field(ge=0)
    loot_pool: list[str] = Field(default_factory=list)
    rare_drop_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    difficulty: RankTier = RankTier.E
    recommended_power: int = 0


class DungeonReward(BaseModel):
    xp: int = 0
    rewards: list[str] = Field(default_factory=list)
    equipment: list[Equipment] = Field(default_factory=list)
    # Cosmetic unlock hook; nothing sets these yet.
    unlocked_title_id: Optional[str] = None
    unlocked_frame_id: Optional[str] = None

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EquipmentSlot(str, Enum):
    WEAPON = "weapon"
    HELMET = "helmet"
    CHEST = "chest"
    GLOVES = "gloves"
    BOOTS = "boots"
    NECKLACE = "necklace"
    RING = "ring"
    RING2 = "ring2"
    EARRINGS = "earrings"


class Rarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"
    GODLIKE = "godlike"


class StatType(str, Enum):
    STRENGTH = "strength"
    VITALITY = "vitality"
    AGILITY = "agility"
    INTELLIGENCE = "intelligence"
    FORTUNE = "fortune"
    METABOLISM = "metabolism"


class StatBonus(BaseModel):
    stat: StatType
    value: int = 0


class Equipment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:9])
    name: str
    slot: EquipmentSlot
    rarity: Rarity = Rarity.COMMON
    level: int = 0
    max_level: int = 3
    base_stats: list[StatBonus] = Field(default_factory=list)
    description: str = ""
    difficulty: int = 1
    is_equipped: bool = False
    acquired_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

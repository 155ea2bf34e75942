"""Dungeon reward generation — pure calculations, randomness injected.

Draw order on victory is fixed: one XP variance draw, one draw per loot
pool entry (in pool order), whatever the equipment factory consumes for
the guaranteed item, then the rare-drop check.
"""
from __future__ import annotations

import math
from typing import Callable

from solo_leveling.mechanics.equipment import generate_equipment
from solo_leveling.mechanics.ranks import RankTier
from solo_leveling.mechanics.rng import RandomSource, resolve
from solo_leveling.models.dungeon import Dungeon, DungeonReward
from solo_leveling.models.item import Equipment

DEFEAT_XP_FACTOR = 0.1
XP_VARIANCE = 0.2
LOOT_DROP_CHANCE = 0.5

GUARANTEED_DROP_DIFFICULTY = 3
RARE_DROP_DIFFICULTY = 4

_SHARD_MULTIPLIERS: dict[RankTier, int] = {
    RankTier.E: 1,
    RankTier.D: 2,
    RankTier.C: 3,
    RankTier.B: 4,
    RankTier.A: 5,
    RankTier.S: 6,
    RankTier.SS: 8,
    RankTier.SSS: 10,
}

EquipmentFactory = Callable[..., Equipment]


def generate_rewards(
    dungeon: Dungeon,
    victory: bool,
    player_level: int,
    rng: RandomSource | None = None,
    equipment_factory: EquipmentFactory = generate_equipment,
) -> DungeonReward:
    """Compute XP, loot and equipment for a finished dungeon run.

    Defeat is deterministic: 10% of base XP and nothing else. Victory
    pays base XP plus 0-20% variance, rolls each loot item at 50%, and
    drops one guaranteed item plus an optional rare one.
    """
    if not victory:
        return DungeonReward(xp=math.floor(dungeon.base_xp * DEFEAT_XP_FACTOR))

    rng = resolve(rng)
    xp = math.floor(dungeon.base_xp * (1 + rng.random() * XP_VARIANCE))

    rewards = [item for item in dungeon.loot_pool if rng.random() < LOOT_DROP_CHANCE]

    equipment = [
        equipment_factory(
            player_level=player_level,
            difficulty=GUARANTEED_DROP_DIFFICULTY,
            rng=rng,
        )
    ]
    if rng.random() < dungeon.rare_drop_rate:
        equipment.append(
            equipment_factory(
                player_level=player_level,
                difficulty=RARE_DROP_DIFFICULTY,
                rng=rng,
            )
        )

    return DungeonReward(xp=xp, rewards=rewards, equipment=equipment)


def shard_reward(difficulty: RankTier) -> int:
    """Shards paid for clearing a dungeon of the given difficulty."""
    # 10 base shards, +30% per multiplier step
    return 10 + 3 * _SHARD_MULTIPLIERS.get(difficulty, 1)

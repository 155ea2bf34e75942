"""Procedural equipment generation — pure, randomness injected.

Higher ``difficulty`` shifts rarity weights toward the rare end; the
player's level adds a flat bonus to every rolled stat.
"""
from __future__ import annotations

import math

from solo_leveling.mechanics.rng import RandomSource, pick, randint, resolve
from solo_leveling.models.item import Equipment, EquipmentSlot, Rarity, StatBonus, StatType

RARITY_WEIGHTS: dict[Rarity, float] = {
    Rarity.COMMON: 50,
    Rarity.UNCOMMON: 30,
    Rarity.RARE: 15,
    Rarity.EPIC: 4,
    Rarity.LEGENDARY: 0.9,
    Rarity.MYTHIC: 0.1,
    Rarity.GODLIKE: 0.01,
}

STAT_RANGES: dict[Rarity, tuple[int, int]] = {
    Rarity.COMMON: (0, 0),
    Rarity.UNCOMMON: (0, 1),
    Rarity.RARE: (1, 2),
    Rarity.EPIC: (2, 3),
    Rarity.LEGENDARY: (4, 6),
    Rarity.MYTHIC: (8, 12),
    Rarity.GODLIKE: (15, 25),
}

STAT_COUNTS: dict[Rarity, int] = {
    Rarity.COMMON: 1,
    Rarity.UNCOMMON: 1,
    Rarity.RARE: 2,
    Rarity.EPIC: 2,
    Rarity.LEGENDARY: 3,
    Rarity.MYTHIC: 3,
    Rarity.GODLIKE: 4,
}

MAX_UPGRADE_LEVELS: dict[Rarity, int] = {
    Rarity.COMMON: 3,
    Rarity.UNCOMMON: 5,
    Rarity.RARE: 7,
    Rarity.EPIC: 10,
    Rarity.LEGENDARY: 12,
    Rarity.MYTHIC: 14,
    Rarity.GODLIKE: 16,
}

PREFIXES = [
    "Ancient", "Broken", "Cursed", "Ethereal", "Forgotten", "Glowing", "Iron",
    "Jagged", "Obsidian", "Rusty", "Silent", "Twisted", "Astral", "Burning",
    "Frozen", "Hollow", "Infernal", "Luminous", "Primal", "Radiant", "Shadow",
    "Umbral", "Void", "Abyssal", "Celestial", "Phantom", "Storm", "Titan",
]

ROOTS: dict[EquipmentSlot, list[str]] = {
    EquipmentSlot.WEAPON: ["Blade", "Katana", "Scythe", "Fang", "Spear", "Halberd", "Hammer", "Staff", "Bow"],
    EquipmentSlot.HELMET: ["Helm", "Visor", "Hood", "Crown", "Circlet", "Mask"],
    EquipmentSlot.CHEST: ["Armor", "Plate", "Mail", "Cuirass", "Robe", "Cloak", "Carapace"],
    EquipmentSlot.GLOVES: ["Gloves", "Gauntlets", "Bracers", "Grips", "Wraps"],
    EquipmentSlot.BOOTS: ["Boots", "Greaves", "Sabatons", "Treads", "Striders"],
    EquipmentSlot.NECKLACE: ["Amulet", "Pendant", "Locket", "Talisman", "Medallion"],
    EquipmentSlot.RING: ["Ring", "Band", "Loop", "Signet", "Coil"],
    EquipmentSlot.RING2: ["Ring", "Band", "Loop", "Signet", "Coil"],
    EquipmentSlot.EARRINGS: ["Earrings", "Studs", "Hoops", "Drops"],
}

SUFFIXES = [
    "of the Bear", "of the Dragon", "of the Eagle", "of the Wolf", "of the Moon",
    "of the Night", "of the Phoenix", "of the King", "of Blood", "of Chaos",
    "of Fire", "of Glory", "of Ice", "of Rage", "of Time", "of the Void",
]


def rarity_weights(difficulty: int) -> dict[Rarity, float]:
    """Rarity weights adjusted for a difficulty tier."""
    weights = dict(RARITY_WEIGHTS)
    if difficulty >= 100:
        weights[Rarity.GODLIKE] += 2
        weights[Rarity.MYTHIC] += 5
        weights[Rarity.LEGENDARY] += 10
    elif difficulty >= 50:
        weights[Rarity.MYTHIC] += 1
        weights[Rarity.LEGENDARY] += 5
        weights[Rarity.EPIC] += 10

    if difficulty >= 10:
        bonus = (difficulty - 1) * 5
        weights[Rarity.COMMON] = max(5, weights[Rarity.COMMON] - bonus)
        weights[Rarity.UNCOMMON] = max(10, weights[Rarity.UNCOMMON] - bonus)
        weights[Rarity.RARE] += bonus
    elif difficulty > 1:
        # Low tiers move weight off common/uncommon one step at a time;
        # the total stays the same.
        step = difficulty - 1
        weights[Rarity.COMMON] -= 2 * step
        weights[Rarity.UNCOMMON] -= step
        weights[Rarity.RARE] += 2 * step
        weights[Rarity.EPIC] += step
    return weights


def roll_rarity(difficulty: int, rng: RandomSource | None = None) -> Rarity:
    """Weighted rarity pick for ``difficulty`` using one draw."""
    rng = resolve(rng)
    weights = rarity_weights(difficulty)
    limit = rng.random() * sum(weights.values())
    cumulative = 0.0
    for rarity, weight in weights.items():
        cumulative += weight
        if limit <= cumulative:
            return rarity
    return Rarity.COMMON


def _roll_name(slot: EquipmentSlot, rng: RandomSource) -> tuple[str, str]:
    prefix = pick(rng, PREFIXES)
    root = pick(rng, ROOTS[slot])
    suffix = pick(rng, SUFFIXES)
    form = rng.random()
    if form < 0.4:
        name = f"{prefix} {root} {suffix}"
    elif form < 0.7:
        name = f"{prefix} {root}"
    else:
        name = f"{root} {suffix}"
    return name, prefix


def _roll_stats(rarity: Rarity, player_level: int, rng: RandomSource) -> list[StatBonus]:
    low, high = STAT_RANGES[rarity]
    level_bonus = math.floor(player_level * 0.01)
    available = list(StatType)
    stats: list[StatBonus] = []
    for _ in range(STAT_COUNTS[rarity]):
        stat = available.pop(int(rng.random() * len(available)))
        value = randint(rng, low, high) + level_bonus
        if value > 0:
            stats.append(StatBonus(stat=stat, value=value))
    if not stats:
        # Never hand out an item with an empty stat line.
        stats.append(StatBonus(stat=pick(rng, list(StatType)), value=0))
    return stats


def generate_equipment(
    slot: EquipmentSlot | None = None,
    rarity: Rarity | None = None,
    player_level: int = 1,
    difficulty: int = 1,
    rng: RandomSource | None = None,
) -> Equipment:
    """Generate one equipment item. Always returns a valid item."""
    rng = resolve(rng)
    slot = slot or pick(rng, list(EquipmentSlot))
    rarity = rarity or roll_rarity(difficulty, rng)
    name, prefix = _roll_name(slot, rng)

    return Equipment(
        name=name,
        slot=slot,
        rarity=rarity,
        level=0,
        max_level=MAX_UPGRADE_LEVELS[rarity],
        base_stats=_roll_stats(rarity, player_level, rng),
        description=f"A unique {rarity.value} {slot.value}, forged from the essence of {prefix}.",
        difficulty=difficulty,
    )

"""XP and level-up mechanics — pure math, no I/O."""
from __future__ import annotations

import math
from dataclasses import dataclass

# Passive (allocatable) stat points granted for each level gained
PASSIVE_POINTS_PER_LEVEL = 5

_MISSION_BASE_XP = 50


@dataclass(frozen=True)
class LevelResult:
    level: int
    xp: float
    leveled_up: bool
    xp_for_next_level: int
    levels_gained: int = 0


def xp_for_next_level(level: int) -> int:
    """XP needed to clear the given level: floor(100 * level^2)."""
    return math.floor(100 * level ** 2)


def apply_experience(current_level: int, current_xp: float) -> LevelResult:
    """Roll unspent XP over into as many levels as it pays for.

    ``current_xp`` is the remainder carried toward ``current_level``'s
    threshold, not lifetime XP. Multi-level jumps happen in one call:
    level 1 with 600 XP lands on level 3 with 100 left over.
    """
    level = current_level
    xp = current_xp
    while xp >= xp_for_next_level(level):
        xp -= xp_for_next_level(level)
        level += 1

    gained = level - current_level
    return LevelResult(
        level=level,
        xp=xp,
        leveled_up=gained > 0,
        xp_for_next_level=xp_for_next_level(level),
        levels_gained=gained,
    )


def increase_stat(current_value: float, amount: float = 1) -> float:
    """Add ``amount`` to a stat. No clamping."""
    return current_value + amount


def passive_points_for(levels_gained: int) -> int:
    """Passive points earned for a number of levels gained."""
    if levels_gained <= 0:
        return 0
    return levels_gained * PASSIVE_POINTS_PER_LEVEL


def mission_xp_reward(level: int) -> int:
    """Base XP for completing a mission, scaled 10% per player level."""
    return math.floor(_MISSION_BASE_XP * (1 + level * 0.1))

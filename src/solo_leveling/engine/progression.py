"""Player-state updates — every function returns a new value.

The engine never writes anything back; callers own storage and decide
when a new state replaces the old one.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from solo_leveling.mechanics.leveling import (
    apply_experience,
    increase_stat,
    mission_xp_reward,
    passive_points_for,
)
from solo_leveling.mechanics.ranks import RankTier, rank_for_experience, rank_progress
from solo_leveling.mechanics.rewards import shard_reward
from solo_leveling.models.dungeon import Dungeon, DungeonReward
from solo_leveling.models.player import CORE_STATS, PlayerState, PlayerStats

logger = logging.getLogger(__name__)


class ProgressionError(ValueError):
    """Raised when a requested state change is not allowed."""


@dataclass(frozen=True)
class ProgressionUpdate:
    stats: PlayerStats
    leveled_up: bool = False
    levels_gained: int = 0
    xp_gained: float = 0


@dataclass(frozen=True)
class StateUpdate:
    state: PlayerState
    leveled_up: bool = False
    levels_gained: int = 0
    xp_gained: float = 0


def apply_xp_gain(stats: PlayerStats, xp_gain: float) -> ProgressionUpdate:
    """Add XP to both the level remainder and lifetime total, then level up."""
    result = apply_experience(stats.level, stats.xp_current + xp_gain)
    new_stats = stats.model_copy(update={
        "level": result.level,
        "xp_current": result.xp,
        "xp_for_next_level": result.xp_for_next_level,
        "total_xp": stats.total_xp + xp_gain,
        "passive_points": stats.passive_points + passive_points_for(result.levels_gained),
    })
    if result.leveled_up:
        logger.info("Level up: %d -> %d", stats.level, result.level)
    return ProgressionUpdate(
        stats=new_stats,
        leveled_up=result.leveled_up,
        levels_gained=result.levels_gained,
        xp_gained=xp_gain,
    )


def apply_mission_completion(state: PlayerState, xp_gain: float | None = None) -> StateUpdate:
    """Grant mission XP; defaults to the level-scaled mission reward."""
    if xp_gain is None:
        xp_gain = mission_xp_reward(state.stats.level)
    update = apply_xp_gain(state.stats, xp_gain)
    logger.debug("Mission completed by %s (+%s XP)", state.user_id, xp_gain)
    return StateUpdate(
        state=state.model_copy(update={"stats": update.stats}),
        leveled_up=update.leveled_up,
        levels_gained=update.levels_gained,
        xp_gained=xp_gain,
    )


def apply_dungeon_result(
    state: PlayerState,
    dungeon: Dungeon,
    reward: DungeonReward,
    victory: bool,
) -> StateUpdate:
    """Fold a generated dungeon reward into the player's state.

    XP always applies (defeat still pays its penalty share). Equipment,
    shards, the run counter and cosmetic unlocks apply on victory only.
    """
    update = apply_xp_gain(state.stats, reward.xp)
    changes: dict = {"stats": update.stats}

    if victory:
        changes["stats"] = update.stats.model_copy(update={
            "shards": update.stats.shards + shard_reward(dungeon.difficulty),
        })
        changes["inventory"] = [*state.inventory, *reward.equipment]
        changes["dungeon_runs"] = state.dungeon_runs + 1
        if reward.unlocked_title_id and reward.unlocked_title_id not in state.unlocked_title_ids:
            changes["unlocked_title_ids"] = [*state.unlocked_title_ids, reward.unlocked_title_id]
        if reward.unlocked_frame_id and reward.unlocked_frame_id not in state.unlocked_frame_ids:
            changes["unlocked_frame_ids"] = [*state.unlocked_frame_ids, reward.unlocked_frame_id]
        logger.info(
            "Dungeon %s cleared by %s: %d XP, %d item(s)",
            dungeon.id, state.user_id, reward.xp, len(reward.equipment),
        )
    else:
        logger.info("Dungeon %s failed by %s: %d XP", dungeon.id, state.user_id, reward.xp)

    return StateUpdate(
        state=state.model_copy(update=changes),
        leveled_up=update.leveled_up,
        levels_gained=update.levels_gained,
        xp_gained=reward.xp,
    )


def allocate_stat_point(stats: PlayerStats, stat_name: str) -> PlayerStats:
    """Spend one passive point on a core stat."""
    stat = stat_name.lower()
    if stat not in CORE_STATS:
        raise ProgressionError(f"Unknown stat: {stat_name}")
    if stats.passive_points <= 0:
        raise ProgressionError("No passive points to spend.")
    return stats.model_copy(update={
        stat: increase_stat(getattr(stats, stat)),
        "passive_points": stats.passive_points - 1,
    })


def current_rank(stats: PlayerStats) -> RankTier:
    return rank_for_experience(stats.total_xp)


def current_rank_progress(stats: PlayerStats) -> float:
    return rank_progress(stats.total_xp)

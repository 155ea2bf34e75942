"""Rank tier mechanics — pure lookups over lifetime XP, no I/O.

Rank is a derived view: callers recompute it from lifetime XP on every
read instead of storing it.
"""
from __future__ import annotations

from enum import Enum


class RankTier(str, Enum):
    E = "E"
    D = "D"
    C = "C"
    B = "B"
    A = "A"
    S = "S"
    SS = "SS"
    SSS = "SSS"


# Ordered lowest to highest; thresholds are inclusive lower bounds and
# strictly increasing.
RANK_TIERS: tuple[tuple[RankTier, int], ...] = (
    (RankTier.E, 0),
    (RankTier.D, 100),
    (RankTier.C, 500),
    (RankTier.B, 1500),
    (RankTier.A, 3000),
    (RankTier.S, 5000),
    (RankTier.SS, 10000),
    (RankTier.SSS, 20000),
)


def _tier_index(tier: RankTier) -> int:
    for i, (t, _) in enumerate(RANK_TIERS):
        if t == tier:
            return i
    raise ValueError(f"Unknown rank tier: {tier}")


def rank_threshold(tier: RankTier) -> int:
    """Lifetime XP needed to reach ``tier``."""
    return RANK_TIERS[_tier_index(tier)][1]


def next_rank(tier: RankTier) -> RankTier | None:
    """The tier after ``tier``, or None at the top."""
    idx = _tier_index(tier) + 1
    if idx >= len(RANK_TIERS):
        return None
    return RANK_TIERS[idx][0]


def rank_for_experience(xp: float) -> RankTier:
    """Return the highest tier whose threshold is at or below ``xp``."""
    for tier, threshold in reversed(RANK_TIERS):
        if xp >= threshold:
            return tier
    return RankTier.E


def rank_progress(xp: float) -> float:
    """Percent progress (0-100) from the current tier toward the next.

    The top tier always reports 100.
    """
    tier = rank_for_experience(xp)
    upcoming = next_rank(tier)
    if upcoming is None:
        return 100.0

    current = rank_threshold(tier)
    span = rank_threshold(upcoming) - current
    pct = 100.0 * (xp - current) / span
    return max(0.0, min(100.0, pct))

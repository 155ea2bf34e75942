"""Shared fixtures for the solo_leveling test suite."""
from __future__ import annotations

import random

import pytest

from solo_leveling.models.dungeon import Dungeon
from solo_leveling.models.item import Equipment, EquipmentSlot, Rarity
from solo_leveling.models.player import PlayerState, PlayerStats


@pytest.fixture
def sample_dungeon() -> Dungeon:
    return Dungeon(
        id="floor_12",
        name="Goblin Warrens",
        base_xp=200,
        loot_pool=["Mana Crystal", "Goblin Ear", "Health Potion"],
        rare_drop_rate=0.25,
    )


@pytest.fixture
def fresh_state() -> PlayerState:
    return PlayerState(user_id="hunter-1")


@pytest.fixture
def veteran_state() -> PlayerState:
    return PlayerState(
        user_id="hunter-2",
        stats=PlayerStats(level=3, xp_current=250, xp_for_next_level=900, total_xp=750, passive_points=2),
    )


class RecordingFactory:
    """Equipment factory stand-in that records calls and draws nothing."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    def __call__(self, **kwargs) -> Equipment:
        self.calls.append(kwargs)
        return Equipment(
            name=f"Test Item {len(self.calls)}",
            slot=EquipmentSlot.WEAPON,
            rarity=Rarity.RARE,
            difficulty=kwargs.get("difficulty", 1),
        )


@pytest.fixture
def recording_factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def in_memory_db(tmp_path):
    from solo_leveling.storage.database import Database

    db = Database(str(tmp_path / "test.db"))
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def seeded_rng():
    state = random.getstate()
    random.seed(42)
    yield
    random.setstate(state)

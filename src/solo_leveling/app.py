"""Application bootstrap — wires config, storage, engine and display."""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any

from solo_leveling import config as cfg
from solo_leveling.engine.progression import (
    StateUpdate,
    allocate_stat_point,
    apply_dungeon_result,
    apply_mission_completion,
)
from solo_leveling.mechanics.rewards import generate_rewards
from solo_leveling.models.dungeon import Dungeon, DungeonReward
from solo_leveling.models.player import PlayerState

logger = logging.getLogger(__name__)


class ProgressionApp:
    """Runs one player action per call: load, compute, save, render."""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        config_path: Path | None = None,
        db_path: str | None = None,
        user_id: str | None = None,
    ) -> None:
        self.config = config if config is not None else cfg.load_config(config_path)
        self.db_path = db_path or cfg.db_path(self.config)
        self.user_id = user_id or cfg.user_id(self.config)

        # Lazy-initialized components
        self._db = None
        self._repo = None
        self._display = None

    # -- Component initialization (lazy) --

    @property
    def db(self):
        if self._db is None:
            from solo_leveling.storage.database import Database

            self._db = Database(self.db_path)
            self._db.initialize()
        return self._db

    @property
    def repo(self):
        if self._repo is None:
            from solo_leveling.storage.repos import PlayerStateRepo

            self._repo = PlayerStateRepo(self.db)
        return self._repo

    @property
    def display(self):
        if self._display is None:
            from solo_leveling.cli.display import Display

            self._display = Display()
        return self._display

    # -- Actions --

    def load_state(self) -> PlayerState:
        return self.repo.load_or_create(self.user_id)

    def show_status(self) -> PlayerState:
        state = self.load_state()
        self.display.show_status(state)
        return state

    def complete_mission(self, xp: float | None = None) -> StateUpdate:
        update = apply_mission_completion(self.load_state(), xp)
        self.repo.save(update.state)
        self.display.show_xp_gain(update.xp_gained, "mission")
        self._announce_level_up(update)
        return update

    def run_dungeon(
        self,
        dungeon: Dungeon,
        victory: bool,
        seed: int | None = None,
    ) -> tuple[DungeonReward, StateUpdate]:
        state = self.load_state()
        rng = random.Random(seed) if seed is not None else None
        reward = generate_rewards(dungeon, victory, state.stats.level, rng=rng)
        update = apply_dungeon_result(state, dungeon, reward, victory)
        self.repo.save(update.state)
        self.display.show_dungeon_result(dungeon, reward, victory)
        self._announce_level_up(update)
        return reward, update

    def allocate(self, stat_name: str) -> PlayerState:
        state = self.load_state()
        stats = allocate_stat_point(state.stats, stat_name)
        new_state = state.model_copy(update={"stats": stats})
        self.repo.save(new_state)
        self.display.show_message(
            f"{stat_name.title()} is now {getattr(stats, stat_name.lower())} "
            f"({stats.passive_points} point(s) left)"
        )
        return new_state

    def show_ranks(self) -> None:
        self.display.show_ranks()

    def close(self) -> None:
        if self._db is not None:
            self._db.close()
            self._db = None

    def _announce_level_up(self, update: StateUpdate) -> None:
        if update.leveled_up:
            self.display.show_level_up(update.state.stats.level, update.levels_gained)

"""Rich terminal display for player progression."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from solo_leveling.engine.progression import current_rank, current_rank_progress
from solo_leveling.mechanics.ranks import RANK_TIERS, RankTier
from solo_leveling.models.dungeon import Dungeon, DungeonReward
from solo_leveling.models.player import CORE_STATS, PlayerState

RANK_STYLES: dict[RankTier, str] = {
    RankTier.E: "white",
    RankTier.D: "green",
    RankTier.C: "cyan",
    RankTier.B: "blue",
    RankTier.A: "magenta",
    RankTier.S: "yellow",
    RankTier.SS: "bold yellow",
    RankTier.SSS: "bold red",
}

RARITY_STYLES: dict[str, str] = {
    "common": "white",
    "uncommon": "green",
    "rare": "blue",
    "epic": "magenta",
    "legendary": "yellow",
    "mythic": "red",
    "godlike": "bold red",
}


def progress_bar(pct: float, width: int = 20) -> str:
    """Text bar for a 0-100 percentage."""
    filled = int(max(0.0, min(100.0, pct)) / 100 * width)
    return f"{'█' * filled}{'░' * (width - filled)}"


class Display:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_status(self, state: PlayerState) -> None:
        stats = state.stats
        rank = current_rank(stats)
        rank_pct = current_rank_progress(stats)
        level_pct = 100 * stats.xp_current / max(stats.xp_for_next_level, 1)

        content = Text()
        content.append(f"Level {stats.level}\n", style="bold cyan")
        content.append(f"XP  [{progress_bar(level_pct)}] ", style="cyan")
        content.append(f"{stats.xp_current:g}/{stats.xp_for_next_level}\n")
        content.append("Rank ", style="bold")
        content.append(f"{rank.value}", style=RANK_STYLES[rank])
        content.append(f"  [{progress_bar(rank_pct)}] {rank_pct:.0f}%\n", style=RANK_STYLES[rank])
        content.append(f"Lifetime XP: {stats.total_xp:g}\n", style="dim")
        content.append(f"Passive points: {stats.passive_points}   ", style="dim")
        content.append(f"Shards: {stats.shards}\n", style="dim")

        table = Table(box=box.SIMPLE, show_header=False)
        table.add_column("Stat", style="bold")
        table.add_column("Value", justify="right")
        for stat in CORE_STATS:
            table.add_row(stat.title(), str(getattr(stats, stat)))

        self.console.print(Panel(content, title=state.user_id, border_style="cyan", box=box.ROUNDED))
        self.console.print(table)

    def show_level_up(self, new_level: int, levels_gained: int) -> None:
        msg = f"LEVEL UP! You are now level {new_level}"
        if levels_gained > 1:
            msg += f" (+{levels_gained} levels)"
        self.console.print(Panel(Text(msg, style="bold yellow"), border_style="yellow", box=box.DOUBLE))

    def show_xp_gain(self, xp: float, source: str) -> None:
        self.console.print(f"[green]+{xp:g} XP[/green] [dim]from {source}[/dim]")

    def show_dungeon_result(self, dungeon: Dungeon, reward: DungeonReward, victory: bool) -> None:
        title = dungeon.name or dungeon.id
        if not victory:
            self.console.print(Panel(
                Text(f"Defeated in {title}. +{reward.xp} XP", style="red"),
                border_style="red",
            ))
            return

        content = Text()
        content.append(f"{title} cleared!\n", style="bold green")
        content.append(f"+{reward.xp} XP\n", style="green")
        if reward.rewards:
            content.append("Loot: ", style="bold")
            content.append(", ".join(reward.rewards) + "\n")
        for item in reward.equipment:
            content.append(f"  {item.name} ", style=RARITY_STYLES.get(item.rarity.value, "white"))
            content.append(f"({item.rarity.value} {item.slot.value})", style="dim")
            stats = ", ".join(f"{b.stat.value} +{b.value}" for b in item.base_stats)
            content.append(f" {stats}\n")
        self.console.print(Panel(content, border_style="green", box=box.ROUNDED))

    def show_ranks(self) -> None:
        table = Table(title="Rank Tiers", box=box.ROUNDED)
        table.add_column("Rank", style="bold")
        table.add_column("Lifetime XP", justify="right")
        for tier, threshold in RANK_TIERS:
            table.add_row(Text(tier.value, style=RANK_STYLES[tier]), f"{threshold:,}")
        self.console.print(table)

    def show_message(self, message: str) -> None:
        self.console.print(message)

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]{message}[/bold red]")

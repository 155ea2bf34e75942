"""Typer CLI application."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from solo_leveling.config import configure_logging, load_config

app = typer.Typer(
    name="solo-leveling",
    help="Level up by completing real-life missions and clearing dungeons",
    no_args_is_help=False,
)

_state: dict = {"config": {}}


@app.callback()
def main(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.toml"),
) -> None:
    config = load_config(config_path)
    configure_logging(config)
    _state["config"] = config


def _make_app(user: Optional[str], db: Optional[str]):
    from solo_leveling.app import ProgressionApp

    return ProgressionApp(config=_state["config"], db_path=db, user_id=user)


@app.command()
def status(
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Player id"),
    db: Optional[str] = typer.Option(None, "--db", help="Save database path"),
) -> None:
    """Show level, experience and rank."""
    progression = _make_app(user, db)
    try:
        progression.show_status()
    finally:
        progression.close()


@app.command()
def mission(
    xp: Optional[float] = typer.Option(None, "--xp", help="XP to grant (default: level-scaled reward)"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Player id"),
    db: Optional[str] = typer.Option(None, "--db", help="Save database path"),
) -> None:
    """Complete a mission and collect its XP."""
    progression = _make_app(user, db)
    try:
        progression.complete_mission(xp)
    finally:
        progression.close()


@app.command()
def dungeon(
    name: str = typer.Argument(..., help="Dungeon id"),
    base_xp: int = typer.Option(..., "--base-xp", min=0, help="Base XP reward"),
    loot: Optional[str] = typer.Option(None, "--loot", help="Comma-separated loot pool"),
    rare_drop_rate: float = typer.Option(0.0, "--rare-drop-rate", min=0.0, max=1.0),
    defeat: bool = typer.Option(False, "--defeat", help="Record the run as a defeat"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible drops"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Player id"),
    db: Optional[str] = typer.Option(None, "--db", help="Save database path"),
) -> None:
    """Finish a dungeon run and collect rewards."""
    from solo_leveling.models.dungeon import Dungeon
    from solo_leveling.utils import parse_csv

    run = Dungeon(
        id=name,
        name=name.replace("_", " ").title(),
        base_xp=base_xp,
        loot_pool=parse_csv(loot),
        rare_drop_rate=rare_drop_rate,
    )
    progression = _make_app(user, db)
    try:
        progression.run_dungeon(run, victory=not defeat, seed=seed)
    finally:
        progression.close()


@app.command()
def allocate(
    stat: str = typer.Argument(..., help="Core stat to raise"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Player id"),
    db: Optional[str] = typer.Option(None, "--db", help="Save database path"),
) -> None:
    """Spend one passive point on a stat."""
    from solo_leveling.engine.progression import ProgressionError

    progression = _make_app(user, db)
    try:
        progression.allocate(stat)
    except ProgressionError as e:
        progression.display.show_error(str(e))
        raise typer.Exit(code=1)
    finally:
        progression.close()


@app.command()
def ranks() -> None:
    """List rank tiers and their lifetime XP thresholds."""
    from solo_leveling.cli.display import Display

    Display().show_ranks()


if __name__ == "__main__":
    app()

"""CSV export helpers for a player's games."""

from __future__ import annotations

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import List

from hoopstats.models import GameRecord, Player, Roster
from hoopstats.stats import shooting_percentage


logger = logging.getLogger(__name__)

CSV_HEADERS: tuple[str, ...] = (
    "Date",
    "Points",
    "Rebounds",
    "Assists",
    "Steals",
    "Blocks",
    "FGM",
    "FGA",
    "3PM",
    "3PA",
    "FTM",
    "FTA",
    "FG%",
    "3P%",
    "FT%",
)


def _pct_cell(made: int, attempted: int) -> str:
    return f"{shooting_percentage(made, attempted):.2f}"


def csv_row(game: GameRecord) -> List[str]:
    """Return the fifteen CSV cells for ``game``, percentages to two decimals."""

    row = [game.date, *(str(value) for value in game.stat_values())]
    row.append(_pct_cell(game.field_goals_made, game.field_goals_attempted))
    row.append(_pct_cell(game.threes_made, game.threes_attempted))
    row.append(_pct_cell(game.free_throws_made, game.free_throws_attempted))
    return row


def export_player_to_csv(player: Player) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for game in player.games:
        writer.writerow(csv_row(game))
    return buffer.getvalue()


def csv_filename(name: str) -> str:
    """Default CSV file name for a player: spaces become underscores."""

    return name.replace(" ", "_") + ".csv"


def write_player_csv(player: Player, path: Path) -> Path:
    path.write_text(export_player_to_csv(player), encoding="utf-8")
    logger.info("Exported %s to CSV file %s", player.name, path)
    return path


def export_roster_to_directory(roster: Roster, directory: Path) -> List[Path]:
    """Write one CSV per player into ``directory``; returns the written paths."""

    directory.mkdir(parents=True, exist_ok=True)
    return [
        write_player_csv(player, directory / csv_filename(player.name))
        for player in roster.players
    ]


__all__ = [
    "CSV_HEADERS",
    "csv_filename",
    "csv_row",
    "export_player_to_csv",
    "export_roster_to_directory",
    "write_player_csv",
]

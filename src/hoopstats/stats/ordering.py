"""In-place, stable reordering of a player's games."""

from __future__ import annotations

import logging

from hoopstats.models import Player


logger = logging.getLogger(__name__)


def sort_by_date_ascending(player: Player) -> None:
    # Lexical comparison; only chronological for YYYY-MM-DD dates.
    player.games.sort(key=lambda game: game.date)
    logger.info("Games for %s sorted by date (oldest -> newest)", player.name)


def sort_by_points_descending(player: Player) -> None:
    # list.sort is stable with reverse=True, so equal point totals keep their order.
    player.games.sort(key=lambda game: game.points, reverse=True)
    logger.info("Games for %s sorted by points (highest -> lowest)", player.name)

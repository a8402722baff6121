"""Plain-text reports for the command-line front end."""

from __future__ import annotations

import math
from typing import List

from hoopstats.models import Player, Roster
from hoopstats.results import EmptyCollection
from hoopstats.stats import (
    averages,
    best_scoring_games,
    shooting_percentage,
    simplified_efficiency_rating,
    totals,
)

RATING_NOTE = (
    "Simple PER is a simplified teaching formula (production minus missed FG and FT), "
    "not the NBA's PER."
)


def _no_games(player: Player) -> str:
    return EmptyCollection(player_name=player.name).message


def format_player_list(roster: Roster) -> str:
    if not roster.players:
        return "No players available. Add a player first."
    lines = ["Players:"]
    for idx, player in enumerate(roster.players, start=1):
        lines.append(f"{idx}. {player.name} ({len(player.games)} games)")
    return "\n".join(lines)


def format_game_list(player: Player) -> str:
    if not player.games:
        return _no_games(player)
    lines = [f"Games for {player.name}:"]
    for idx, game in enumerate(player.games, start=1):
        lines.append(f"{idx}. {game.date} - {game.points} pts")
    return "\n".join(lines)


def format_totals(player: Player) -> str:
    if not player.games:
        return _no_games(player)
    t = totals(player)
    return "\n".join(
        [
            f"=== TOTALS for {player.name} ===",
            f"Games: {t.games}",
            f"Points: {t.points}",
            f"Rebounds: {t.rebounds}",
            f"Assists: {t.assists}",
            f"Steals: {t.steals}",
            f"Blocks: {t.blocks}",
            f"FG%: {t.field_goal_pct:.2f}% ({t.field_goals_made}/{t.field_goals_attempted})",
            f"3P%: {t.three_point_pct:.2f}% ({t.threes_made}/{t.threes_attempted})",
            f"FT%: {t.free_throw_pct:.2f}% ({t.free_throws_made}/{t.free_throws_attempted})",
        ]
    )


def format_averages(player: Player) -> str:
    result = averages(player)
    if isinstance(result, EmptyCollection):
        return result.message
    return "\n".join(
        [
            f"=== AVERAGES for {player.name} ===",
            f"PPG: {result.points:.2f}",
            f"RPG: {result.rebounds:.2f}",
            f"APG: {result.assists:.2f}",
            f"SPG: {result.steals:.2f}",
            f"BPG: {result.blocks:.2f}",
            f"Simple PER: {simplified_efficiency_rating(player):.2f}",
            RATING_NOTE,
        ]
    )


def format_best_games(player: Player) -> str:
    result = best_scoring_games(player)
    if isinstance(result, EmptyCollection):
        return result.message
    lines = [f"=== Best Scoring Game(s): {result[0].game.points} pts ==="]
    for ranked in result:
        game = ranked.game
        fg = shooting_percentage(game.field_goals_made, game.field_goals_attempted)
        three = shooting_percentage(game.threes_made, game.threes_attempted)
        lines.append(f"{ranked.position}. {game.date} - {game.points} pts, FG%={fg:.1f}%, 3P={three:.1f}%")
    return "\n".join(lines)


def _mark_count(points: int, points_per_mark: int) -> int:
    # Half away from zero; negative totals draw no bar.
    return max(0, int(math.floor(points / points_per_mark + 0.5)))


def format_points_chart(player: Player, points_per_mark: int = 2) -> str:
    """ASCII bar chart of points per game, one ``*`` per ``points_per_mark`` points."""

    if points_per_mark < 1:
        raise ValueError("points_per_mark must be at least 1")
    if not player.games:
        return f"No games to chart for {player.name}."
    lines = [f"=== ASCII Chart: Points per Game (each '*' = {points_per_mark} points) ==="]
    for idx, game in enumerate(player.games, start=1):
        bar = "*" * _mark_count(game.points, points_per_mark)
        lines.append(f"{idx:>3} [{game.date}] {game.points:>3} | {bar}")
    return "\n".join(lines)


def format_roster_summary(roster: Roster) -> str:
    lines: List[str] = ["=== Quick Player Summary ==="]
    for player in roster.players:
        line = f"{player.name} - Games: {len(player.games)}"
        result = averages(player)
        if not isinstance(result, EmptyCollection):
            line += f", PPG: {result.points:.2f}, PER: {simplified_efficiency_rating(player):.2f}"
        lines.append(line)
    if roster.players:
        lines.append(RATING_NOTE)
    return "\n".join(lines)


__all__ = [
    "RATING_NOTE",
    "format_averages",
    "format_best_games",
    "format_game_list",
    "format_player_list",
    "format_points_chart",
    "format_roster_summary",
    "format_totals",
]

"""Shooting percentages, totals, averages and the simplified efficiency rating.

The efficiency rating here is a transparent classroom formula, not the
league's PER: per game it adds points, rebounds, assists, steals and blocks,
subtracts missed field goals and missed free throws one-for-one, and makes no
adjustment for pace, minutes or opponent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from hoopstats.models import GameRecord, Player
from hoopstats.results import EmptyCollection


@dataclass(frozen=True)
class Totals:
    games: int = 0
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    field_goals_made: int = 0
    field_goals_attempted: int = 0
    threes_made: int = 0
    threes_attempted: int = 0
    free_throws_made: int = 0
    free_throws_attempted: int = 0

    @property
    def field_goal_pct(self) -> float:
        return shooting_percentage(self.field_goals_made, self.field_goals_attempted)

    @property
    def three_point_pct(self) -> float:
        return shooting_percentage(self.threes_made, self.threes_attempted)

    @property
    def free_throw_pct(self) -> float:
        return shooting_percentage(self.free_throws_made, self.free_throws_attempted)


@dataclass(frozen=True)
class Averages:
    """Per-game averages of the counting stats."""

    games: int
    points: float
    rebounds: float
    assists: float
    steals: float
    blocks: float


@dataclass(frozen=True)
class RankedGame:
    """A game paired with its 1-based position in the player's list."""

    position: int
    game: GameRecord


def shooting_percentage(made: int, attempted: int) -> float:
    """Return ``made / attempted * 100``, or ``0.0`` with no attempts."""

    if attempted == 0:
        return 0.0
    return made / attempted * 100.0


def totals(player: Player) -> Totals:
    games = player.games
    return Totals(
        games=len(games),
        points=sum(g.points for g in games),
        rebounds=sum(g.rebounds for g in games),
        assists=sum(g.assists for g in games),
        steals=sum(g.steals for g in games),
        blocks=sum(g.blocks for g in games),
        field_goals_made=sum(g.field_goals_made for g in games),
        field_goals_attempted=sum(g.field_goals_attempted for g in games),
        threes_made=sum(g.threes_made for g in games),
        threes_attempted=sum(g.threes_attempted for g in games),
        free_throws_made=sum(g.free_throws_made for g in games),
        free_throws_attempted=sum(g.free_throws_attempted for g in games),
    )


def averages(player: Player) -> Union[Averages, EmptyCollection]:
    if not player.games:
        return EmptyCollection(player_name=player.name)
    summed = totals(player)
    count = summed.games
    return Averages(
        games=count,
        points=summed.points / count,
        rebounds=summed.rebounds / count,
        assists=summed.assists / count,
        steals=summed.steals / count,
        blocks=summed.blocks / count,
    )


def _game_efficiency(game: GameRecord) -> int:
    production = game.points + game.rebounds + game.assists + game.steals + game.blocks
    missed_field_goals = game.field_goals_attempted - game.field_goals_made
    missed_free_throws = game.free_throws_attempted - game.free_throws_made
    return production - (missed_field_goals + missed_free_throws)


def simplified_efficiency_rating(player: Player) -> float:
    """Mean per-game efficiency; ``0.0`` for a player without games."""

    if not player.games:
        return 0.0
    return sum(_game_efficiency(g) for g in player.games) / len(player.games)


def best_scoring_games(player: Player) -> Union[List[RankedGame], EmptyCollection]:
    """Return every game tied for the highest point total, in list order."""

    if not player.games:
        return EmptyCollection(player_name=player.name)
    best = max(g.points for g in player.games)
    return [
        RankedGame(position=idx, game=game)
        for idx, game in enumerate(player.games, start=1)
        if game.points == best
    ]


__all__ = [
    "Averages",
    "RankedGame",
    "Totals",
    "averages",
    "best_scoring_games",
    "shooting_percentage",
    "simplified_efficiency_rating",
    "totals",
]

"""Player and roster models with position-addressed game editing."""

from __future__ import annotations

import logging
from typing import Any, List, Union

from pydantic import BaseModel, Field

from hoopstats.models.game import GameRecord
from hoopstats.results import AlreadyExists, OutOfRange


logger = logging.getLogger(__name__)


class Player(BaseModel):
    """A named player and the ordered list of their games.

    Games are addressed by 1-based position. A position is only meaningful
    until the next append, delete, or sort on the same player.
    """

    name: str = Field(..., min_length=1)
    games: List[GameRecord] = Field(default_factory=list)

    def append_game(self, record: GameRecord) -> None:
        self.games.append(record)
        logger.info("Game added for %s (%s)", self.name, record.date)

    def _check_position(self, position: int) -> OutOfRange | None:
        if position < 1 or position > len(self.games):
            return OutOfRange(position=position, size=len(self.games))
        return None

    def edit_game(self, position: int, **fields: Any) -> Union[GameRecord, OutOfRange]:
        """Replace the game at ``position`` with a copy carrying ``fields``."""

        out_of_range = self._check_position(position)
        if out_of_range is not None:
            return out_of_range
        updated = self.games[position - 1].with_changes(**fields)
        self.games[position - 1] = updated
        return updated

    def delete_game(self, position: int) -> Union[GameRecord, OutOfRange]:
        out_of_range = self._check_position(position)
        if out_of_range is not None:
            return out_of_range
        removed = self.games.pop(position - 1)
        logger.info("Deleted game %d (%s) for %s", position, removed.date, self.name)
        return removed


class Roster(BaseModel):
    """Every tracked player, in the order they were added."""

    players: List[Player] = Field(default_factory=list)

    def add_player(self, name: str) -> Union[Player, AlreadyExists]:
        for idx, player in enumerate(self.players, start=1):
            if player.name == name:
                return AlreadyExists(player=player, position=idx)
        player = Player(name=name)
        self.players.append(player)
        logger.info("Player %r added (index %d)", name, len(self.players))
        return player

    def find_player(self, index: int) -> Union[Player, OutOfRange]:
        if index < 1 or index > len(self.players):
            return OutOfRange(position=index, size=len(self.players))
        return self.players[index - 1]

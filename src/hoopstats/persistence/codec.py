"""Line-oriented text encoding of a full roster.

Layout::

    <player count>
    <player name>            (whole line, spaces allowed)
    <game count>
    <date> <points> <rebounds> <assists> <steals> <blocks> <fgm> <fga> <3pm> <3pa> <ftm> <fta>
    ...

There is no escaping: names may not contain newlines and dates may not
contain whitespace.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from hoopstats.models import STAT_FIELDS, GameRecord, Player, Roster


logger = logging.getLogger(__name__)

GAME_LINE_FIELDS = ("date", *STAT_FIELDS)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_WHITESPACE_PATTERN = re.compile(r"\s")


class RosterDecodeError(ValueError):
    """Raised when roster text does not follow the expected layout."""

    def __init__(self, message: str, *, line: Optional[int] = None, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.field = field


class RosterEncodeError(ValueError):
    """Raised when a roster value cannot be written without corrupting the file."""


def _encode_game(game: GameRecord) -> str:
    return " ".join([game.date, *(str(value) for value in game.stat_values())])


def encode_roster(roster: Roster) -> str:
    lines: List[str] = [str(len(roster.players))]
    for player in roster.players:
        if not player.name or "\n" in player.name or "\r" in player.name:
            raise RosterEncodeError(f"Player name {player.name!r} must be a single non-empty line")
        lines.append(player.name)
        lines.append(str(len(player.games)))
        for position, game in enumerate(player.games, start=1):
            if not game.date or _WHITESPACE_PATTERN.search(game.date):
                raise RosterEncodeError(
                    f"Game {position} for {player.name!r} has date {game.date!r}; "
                    "dates must be a single token without whitespace"
                )
            lines.append(_encode_game(game))
    return "\n".join(lines) + "\n"


class _LineReader:
    def __init__(self, text: str):
        self._lines = [line.rstrip("\r") for line in text.split("\n")]
        if self._lines and self._lines[-1] == "":
            self._lines.pop()
        self._index = 0

    @property
    def line_number(self) -> int:
        return self._index

    def next_line(self, what: str) -> str:
        if self._index >= len(self._lines):
            raise RosterDecodeError(
                f"Unexpected end of file while reading {what}",
                line=self._index + 1,
                field=what,
            )
        line = self._lines[self._index]
        self._index += 1
        return line

    def remaining(self) -> int:
        return len(self._lines) - self._index


def _parse_int(token: str, *, line: int, field: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(token):
        raise RosterDecodeError(f"Expected an integer, got {token!r}", line=line, field=field)
    return int(token)


def _parse_count(reader: _LineReader, what: str) -> int:
    line = reader.next_line(what)
    tokens = line.split()
    if not tokens:
        raise RosterDecodeError(f"Missing {what}", line=reader.line_number, field=what)
    value = _parse_int(tokens[0], line=reader.line_number, field=what)
    if value < 0:
        raise RosterDecodeError(
            f"{what.capitalize()} must be non-negative, got {value}",
            line=reader.line_number,
            field=what,
        )
    return value


def _parse_game(line: str, *, line_number: int) -> GameRecord:
    tokens = line.split()
    if len(tokens) < len(GAME_LINE_FIELDS):
        raise RosterDecodeError(
            f"Game line has {len(tokens)} fields, expected {len(GAME_LINE_FIELDS)}",
            line=line_number,
        )
    if len(tokens) > len(GAME_LINE_FIELDS):
        logger.debug("Ignoring %d extra tokens on line %d", len(tokens) - len(GAME_LINE_FIELDS), line_number)
    values = {
        name: _parse_int(token, line=line_number, field=name)
        for name, token in zip(STAT_FIELDS, tokens[1:])
    }
    return GameRecord(date=tokens[0], **values)


def decode_roster(text: str) -> Roster:
    """Parse roster text into a new :class:`Roster`.

    Raises :class:`RosterDecodeError` on the first malformed count, name or
    game line.
    """

    reader = _LineReader(text)
    player_count = _parse_count(reader, "player count")
    players: List[Player] = []
    for _ in range(player_count):
        name = reader.next_line("player name")
        if not name:
            raise RosterDecodeError("Player name is empty", line=reader.line_number, field="player name")
        game_count = _parse_count(reader, "game count")
        games = [
            _parse_game(reader.next_line("game line"), line_number=reader.line_number)
            for _ in range(game_count)
        ]
        players.append(Player(name=name, games=games))
    if reader.remaining():
        logger.debug("Ignoring %d trailing lines after the last player", reader.remaining())
    return Roster(players=players)


__all__ = [
    "GAME_LINE_FIELDS",
    "RosterDecodeError",
    "RosterEncodeError",
    "decode_roster",
    "encode_roster",
]

"""Result values returned for expected, non-fatal conditions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from hoopstats.models.player import Player


@dataclass(frozen=True)
class OutOfRange:
    """A 1-based position or index fell outside the current collection."""

    position: int
    size: int

    @property
    def message(self) -> str:
        if self.size == 0:
            return f"Invalid number {self.position}: nothing to choose from."
        return f"Invalid number {self.position}: expected 1-{self.size}."


@dataclass(frozen=True)
class EmptyCollection:
    """A metric that needs at least one game was asked for a player with none."""

    player_name: str

    @property
    def message(self) -> str:
        return f"No games to report for {self.player_name}."


@dataclass(frozen=True)
class AlreadyExists:
    """``add_player`` found a player with the same name."""

    player: "Player"
    position: int

    @property
    def message(self) -> str:
        return f"Player already exists at index {self.position}."


@dataclass(frozen=True)
class DecodeError:
    """The roster file was readable but malformed."""

    message: str
    line: Optional[int] = None
    field: Optional[str] = None

    def describe(self) -> str:
        where = []
        if self.line is not None:
            where.append(f"line {self.line}")
        if self.field:
            where.append(f"field {self.field!r}")
        if not where:
            return self.message
        return f"{self.message} ({', '.join(where)})"


@dataclass(frozen=True)
class EncodeError:
    """The roster holds a value the text format cannot represent."""

    message: str


@dataclass(frozen=True)
class StorageError:
    """The roster file could not be opened, read, or written."""

    path: Path
    message: str


__all__ = [
    "AlreadyExists",
    "DecodeError",
    "EmptyCollection",
    "EncodeError",
    "OutOfRange",
    "StorageError",
]

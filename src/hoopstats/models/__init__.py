"""Canonical stat models shared by the metrics, persistence and report layers."""

from .game import STAT_FIELDS, GameRecord
from .player import Player, Roster

__all__ = ["GameRecord", "Player", "Roster", "STAT_FIELDS"]

"""Persistence layer for storing the roster as plain text."""

from .codec import RosterDecodeError, RosterEncodeError, decode_roster, encode_roster
from .store import DEFAULT_DATA_FILE, load, save

__all__ = [
    "DEFAULT_DATA_FILE",
    "RosterDecodeError",
    "RosterEncodeError",
    "decode_roster",
    "encode_roster",
    "load",
    "save",
]

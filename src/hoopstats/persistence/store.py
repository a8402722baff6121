"""Load and save the roster file, reporting failures as result values."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from hoopstats.models import Roster
from hoopstats.persistence.codec import (
    RosterDecodeError,
    RosterEncodeError,
    decode_roster,
    encode_roster,
)
from hoopstats.results import DecodeError, EncodeError, StorageError


logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "players_data.txt"


def load(path: Path | str) -> Union[Roster, DecodeError, StorageError]:
    """Decode ``path`` into a fresh roster.

    The caller's current roster is never touched; swap in the returned
    roster only when it is a :class:`Roster`.
    """

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read roster file %s: %s", path, exc)
        return StorageError(path=path, message=f"Could not read '{path}': {exc}")
    try:
        roster = decode_roster(text)
    except RosterDecodeError as exc:
        logger.warning("Malformed roster file %s: %s (line %s)", path, exc.message, exc.line)
        return DecodeError(message=exc.message, line=exc.line, field=exc.field)
    logger.info("Loaded %d players from %s", len(roster.players), path)
    return roster


def save(roster: Roster, path: Path | str) -> Union[Path, EncodeError, StorageError]:
    """Write ``roster`` to ``path`` through a temporary file and an atomic rename."""

    path = Path(path)
    try:
        payload = encode_roster(roster)
    except RosterEncodeError as exc:
        return EncodeError(message=str(exc))

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(payload)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        logger.warning("Could not write roster file %s: %s", path, exc)
        return StorageError(path=path, message=f"Error opening '{path}' for writing: {exc}")
    logger.info("Saved %d players to %s", len(roster.players), path)
    return path


__all__ = ["DEFAULT_DATA_FILE", "load", "save"]

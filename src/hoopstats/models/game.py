"""Single-game box score model."""

from __future__ import annotations

import logging
from typing import Any, Tuple

from pydantic import BaseModel, model_validator
from pydantic.config import ConfigDict


logger = logging.getLogger(__name__)

# Order of the numeric columns in the roster file and the CSV export.
STAT_FIELDS: Tuple[str, ...] = (
    "points",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "field_goals_made",
    "field_goals_attempted",
    "threes_made",
    "threes_attempted",
    "free_throws_made",
    "free_throws_attempted",
)


class GameRecord(BaseModel):
    """One player's box-score line for one game.

    ``date`` is expected as ``YYYY-MM-DD`` so that lexical order is
    chronological, but other strings are stored untouched. Made/attempted
    pairs are not cross-checked, except that ``field_goals_made`` is raised to
    ``threes_made`` whenever the latter is larger.
    """

    date: str = ""
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

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _clamp_field_goals(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        threes = data.get("threes_made", 0)
        made = data.get("field_goals_made", 0)
        # Non-int values are left for strict field validation to reject.
        if type(threes) is int and type(made) is int and threes > made:
            logger.warning(
                "3PM (%d) exceeds FGM (%d) for game %r; raising FGM to %d",
                threes,
                made,
                data.get("date", ""),
                threes,
            )
            data = {**data, "field_goals_made": threes}
        return data

    def with_changes(self, **fields: Any) -> "GameRecord":
        """Return a re-validated copy with ``fields`` replaced."""

        return GameRecord(**{**self.model_dump(), **fields})

    def stat_values(self) -> Tuple[int, ...]:
        return tuple(getattr(self, name) for name in STAT_FIELDS)

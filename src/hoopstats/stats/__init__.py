"""Derived metrics and game ordering."""

from .metrics import (
    Averages,
    RankedGame,
    Totals,
    averages,
    best_scoring_games,
    shooting_percentage,
    simplified_efficiency_rating,
    totals,
)
from .ordering import sort_by_date_ascending, sort_by_points_descending

__all__ = [
    "Averages",
    "RankedGame",
    "Totals",
    "averages",
    "best_scoring_games",
    "shooting_percentage",
    "simplified_efficiency_rating",
    "sort_by_date_ascending",
    "sort_by_points_descending",
    "totals",
]

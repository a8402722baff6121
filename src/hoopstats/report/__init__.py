"""Report utilities (CSV export, text summaries, charts)."""

from .export import (
    CSV_HEADERS,
    csv_filename,
    csv_row,
    export_player_to_csv,
    export_roster_to_directory,
    write_player_csv,
)
from .text import (
    format_averages,
    format_best_games,
    format_game_list,
    format_player_list,
    format_points_chart,
    format_roster_summary,
    format_totals,
)

__all__ = [
    "CSV_HEADERS",
    "csv_filename",
    "csv_row",
    "export_player_to_csv",
    "export_roster_to_directory",
    "write_player_csv",
    "format_averages",
    "format_best_games",
    "format_game_list",
    "format_player_list",
    "format_points_chart",
    "format_roster_summary",
    "format_totals",
]

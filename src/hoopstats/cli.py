"""Command-line interface for recording games and reporting player stats."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

from hoopstats.config_loader import CliProfile
from hoopstats.models import GameRecord, Player, Roster
from hoopstats.persistence import load, save
from hoopstats.report import (
    csv_filename,
    export_roster_to_directory,
    format_averages,
    format_best_games,
    format_game_list,
    format_player_list,
    format_points_chart,
    format_roster_summary,
    format_totals,
    write_player_csv,
)
from hoopstats.results import AlreadyExists, DecodeError, OutOfRange, StorageError
from hoopstats.stats import sort_by_date_ascending, sort_by_points_descending


logger = logging.getLogger(__name__)

# (model field, command-line flag, help label)
_STAT_OPTIONS = (
    ("points", "--points", "Points"),
    ("rebounds", "--rebounds", "Rebounds"),
    ("assists", "--assists", "Assists"),
    ("steals", "--steals", "Steals"),
    ("blocks", "--blocks", "Blocks"),
    ("field_goals_made", "--fgm", "Field goals made (FGM)"),
    ("field_goals_attempted", "--fga", "Field goals attempted (FGA)"),
    ("threes_made", "--tpm", "3-pointers made (3PM)"),
    ("threes_attempted", "--tpa", "3-pointers attempted (3PA)"),
    ("free_throws_made", "--ftm", "Free throws made (FTM)"),
    ("free_throws_attempted", "--fta", "Free throws attempted (FTA)"),
)


def _add_stat_arguments(parser: argparse.ArgumentParser, *, keep_current: bool) -> None:
    for field, flag, label in _STAT_OPTIONS:
        parser.add_argument(
            flag,
            dest=field,
            type=int,
            default=None if keep_current else 0,
            help=f"{label}" + (" (omit to keep current value)" if keep_current else ""),
        )


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Track basketball player stats per game")
    parser.add_argument("--data", type=Path, default=None, help="Roster data file")
    parser.add_argument("--profile", type=Path, default=None, help="Load CLI profile JSON")
    parser.add_argument("--save-profile", type=Path, default=None, help="Save CLI profile JSON")
    parser.add_argument(
        "--points-per-mark",
        type=int,
        default=None,
        help="Points represented by one '*' in charts",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress messages")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("players", help="List players")

    add_player = sub.add_parser("add-player", help="Add a new player")
    add_player.add_argument("name", help="Player's full name")

    add_game = sub.add_parser("add-game", help="Add a game for a player")
    add_game.add_argument("player", type=int, help="Player number")
    add_game.add_argument("--date", required=True, help="Game date (YYYY-MM-DD)")
    _add_stat_arguments(add_game, keep_current=False)

    games = sub.add_parser("games", help="List a player's games")
    games.add_argument("player", type=int, help="Player number")

    edit_game = sub.add_parser("edit-game", help="Edit a player's game")
    edit_game.add_argument("player", type=int, help="Player number")
    edit_game.add_argument("game", type=int, help="Game number")
    edit_game.add_argument("--date", default=None, help="Game date (YYYY-MM-DD)")
    _add_stat_arguments(edit_game, keep_current=True)

    delete_game = sub.add_parser("delete-game", help="Delete a player's game")
    delete_game.add_argument("player", type=int, help="Player number")
    delete_game.add_argument("game", type=int, help="Game number")

    sort = sub.add_parser("sort", help="Reorder a player's games")
    sort.add_argument("player", type=int, help="Player number")
    sort.add_argument("key", choices=("date", "points"), help="Sort key")

    for name, help_text in (
        ("totals", "Show totals and shooting percentages"),
        ("averages", "Show per-game averages and simple PER"),
        ("best", "Show best scoring game(s)"),
        ("chart", "ASCII chart of points per game"),
    ):
        report = sub.add_parser(name, help=help_text)
        report.add_argument("player", type=int, help="Player number")

    sub.add_parser("summary", help="List all players with PPG and simple PER")

    export = sub.add_parser("export", help="Export a player's games to CSV")
    export.add_argument("player", type=int, help="Player number")
    export.add_argument("--output", type=Path, default=None, help="CSV path (default: <name>.csv)")

    export_all = sub.add_parser("export-all", help="Export every player to individual CSV files")
    export_all.add_argument("--directory", type=Path, default=None, help="Output directory")

    return parser.parse_args(argv)


def _resolve_profile(args: argparse.Namespace) -> CliProfile:
    profile = CliProfile.load(args.profile) if args.profile else CliProfile()
    if args.data is not None:
        profile.data_file = args.data
    if args.points_per_mark is not None:
        profile.points_per_mark = args.points_per_mark
    # Applies to profile values too; charts need at least one point per mark.
    profile.points_per_mark = max(1, profile.points_per_mark)
    if args.command == "export-all" and args.directory is not None:
        profile.csv_directory = args.directory
    return profile


def _load_roster(path: Path) -> Optional[Roster]:
    if not path.exists():
        print(f"No saved file '{path}' found; starting with an empty roster.")
        return Roster()
    result = load(path)
    if isinstance(result, DecodeError):
        print(f"Could not load '{path}': {result.describe()}")
        return None
    if isinstance(result, StorageError):
        print(result.message)
        return None
    return result


def _save_roster(roster: Roster, path: Path) -> int:
    result = save(roster, path)
    if isinstance(result, Path):
        return 0
    print(result.message)
    return 1


def _player(roster: Roster, index: int) -> Optional[Player]:
    result = roster.find_player(index)
    if isinstance(result, OutOfRange):
        print(result.message)
        return None
    return result


def _stat_fields(args: argparse.Namespace) -> Dict[str, object]:
    return {
        field: getattr(args, field)
        for field, _, _ in _STAT_OPTIONS
        if getattr(args, field) is not None
    }


def _cmd_players(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    print(format_player_list(roster))
    return 0


def _cmd_add_player(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    name = args.name.strip()
    if not name:
        print("Player name cannot be empty.")
        return 1
    result = roster.add_player(name)
    if isinstance(result, AlreadyExists):
        print(result.message)
        return 0
    print(f"Player '{result.name}' added (index {len(roster.players)}).")
    return _save_roster(roster, profile.data_file)


def _cmd_add_game(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    player = _player(roster, args.player)
    if player is None:
        return 1
    record = GameRecord(date=args.date, **_stat_fields(args))
    player.append_game(record)
    print(f"Game added for {player.name} ({record.date}).")
    return _save_roster(roster, profile.data_file)


def _cmd_games(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    player = _player(roster, args.player)
    if player is None:
        return 1
    print(format_game_list(player))
    return 0


def _cmd_edit_game(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    player = _player(roster, args.player)
    if player is None:
        return 1
    changes = _stat_fields(args)
    if args.date:
        changes["date"] = args.date
    result = player.edit_game(args.game, **changes)
    if isinstance(result, OutOfRange):
        print(result.message)
        return 1
    print(f"Game {args.game} updated.")
    return _save_roster(roster, profile.data_file)


def _cmd_delete_game(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    player = _player(roster, args.player)
    if player is None:
        return 1
    result = player.delete_game(args.game)
    if isinstance(result, OutOfRange):
        print(result.message)
        return 1
    print(f"Game {args.game} ({result.date}) deleted.")
    return _save_roster(roster, profile.data_file)


def _cmd_sort(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    player = _player(roster, args.player)
    if player is None:
        return 1
    if args.key == "date":
        sort_by_date_ascending(player)
        print("Games sorted by date (oldest -> newest).")
    else:
        sort_by_points_descending(player)
        print("Games sorted by points (highest -> lowest).")
    return _save_roster(roster, profile.data_file)


def _report_command(render: Callable[[Player], str]) -> Callable[[argparse.Namespace, Roster, CliProfile], int]:
    def run(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
        player = _player(roster, args.player)
        if player is None:
            return 1
        print(render(player))
        return 0

    return run


def _cmd_chart(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    player = _player(roster, args.player)
    if player is None:
        return 1
    print(format_points_chart(player, points_per_mark=profile.points_per_mark))
    return 0


def _cmd_summary(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    print(format_roster_summary(roster))
    return 0


def _cmd_export(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    player = _player(roster, args.player)
    if player is None:
        return 1
    output = args.output or Path(csv_filename(player.name))
    try:
        write_player_csv(player, output)
    except OSError as exc:
        print(f"Error opening '{output}' for CSV export: {exc}")
        return 1
    print(f"Exported {player.name} to CSV file '{output}'.")
    return 0


def _cmd_export_all(args: argparse.Namespace, roster: Roster, profile: CliProfile) -> int:
    directory = profile.csv_directory or Path(".")
    try:
        paths = export_roster_to_directory(roster, directory)
    except OSError as exc:
        print(f"CSV export to '{directory}' failed: {exc}")
        return 1
    print(f"Exported {len(paths)} players to CSV files in '{directory}'.")
    return 0


_COMMANDS: Dict[str, Callable[[argparse.Namespace, Roster, CliProfile], int]] = {
    "players": _cmd_players,
    "add-player": _cmd_add_player,
    "add-game": _cmd_add_game,
    "games": _cmd_games,
    "edit-game": _cmd_edit_game,
    "delete-game": _cmd_delete_game,
    "sort": _cmd_sort,
    "totals": _report_command(format_totals),
    "averages": _report_command(format_averages),
    "best": _report_command(format_best_games),
    "chart": _cmd_chart,
    "summary": _cmd_summary,
    "export": _cmd_export,
    "export-all": _cmd_export_all,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    profile = _resolve_profile(args)
    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved CLI profile to {args.save_profile}")

    roster = _load_roster(profile.data_file)
    if roster is None:
        return 1
    return _COMMANDS[args.command](args, roster, profile)


if __name__ == "__main__":
    raise SystemExit(main())

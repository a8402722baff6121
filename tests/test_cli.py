from pathlib import Path

import pytest

from hoopstats.cli import main
from hoopstats.config_loader import CliProfile
from hoopstats.models import Roster
from hoopstats.persistence import load


def _run(data: Path, *args: str) -> int:
    return main(["--data", str(data), *args])


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "players_data.txt"
    assert _run(path, "add-player", "Ada Guard") == 0
    assert _run(path, "add-game", "1", "--date", "2024-01-05", "--points", "18", "--fgm", "7", "--fga", "12") == 0
    assert _run(path, "add-game", "1", "--date", "2024-01-02", "--points", "25", "--tpm", "5", "--fgm", "3") == 0
    return path


def test_add_player_and_games_persist(data_file: Path):
    roster = load(data_file)

    assert isinstance(roster, Roster)
    games = roster.players[0].games
    assert [g.points for g in games] == [18, 25]
    assert games[1].field_goals_made == 5


def test_duplicate_player_is_reported(data_file: Path, capsys):
    assert _run(data_file, "add-player", "Ada Guard") == 0

    assert "already exists at index 1" in capsys.readouterr().out
    assert len(load(data_file).players) == 1


def test_edit_and_delete_by_position(data_file: Path):
    assert _run(data_file, "edit-game", "1", "2", "--rebounds", "11") == 0
    assert load(data_file).players[0].games[1].rebounds == 11

    assert _run(data_file, "delete-game", "1", "1") == 0
    games = load(data_file).players[0].games
    assert [g.date for g in games] == ["2024-01-02"]


def test_invalid_positions_return_error_code(data_file: Path, capsys):
    assert _run(data_file, "delete-game", "1", "9") == 1
    assert _run(data_file, "totals", "4") == 1

    out = capsys.readouterr().out
    assert "expected 1-2" in out
    assert "expected 1-1" in out


def test_sort_then_report(data_file: Path, capsys):
    assert _run(data_file, "sort", "1", "date") == 0
    assert [g.date for g in load(data_file).players[0].games] == ["2024-01-02", "2024-01-05"]

    assert _run(data_file, "sort", "1", "points") == 0
    assert _run(data_file, "best", "1") == 0
    assert _run(data_file, "averages", "1") == 0

    out = capsys.readouterr().out
    assert "=== Best Scoring Game(s): 25 pts ===" in out
    assert "1. 2024-01-02 - 25 pts" in out
    assert "PPG: 21.50" in out


def test_export_writes_csv(data_file: Path, tmp_path: Path):
    output = tmp_path / "ada.csv"

    assert _run(data_file, "export", "1", "--output", str(output)) == 0

    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Date,Points")
    assert lines[1].endswith(",58.33,0.00,0.00")


def test_export_all_uses_profile_directory(data_file: Path, tmp_path: Path):
    profile_path = tmp_path / "profile.json"
    CliProfile(data_file=data_file, csv_directory=tmp_path / "csv").save(profile_path)

    assert main(["--profile", str(profile_path), "export-all"]) == 0

    assert (tmp_path / "csv" / "Ada_Guard.csv").exists()


def test_corrupt_data_file_is_reported(tmp_path: Path, capsys):
    path = tmp_path / "players_data.txt"
    path.write_text("1\nAda\nlots\n", encoding="utf-8")

    assert _run(path, "summary") == 1

    assert "line 3" in capsys.readouterr().out
    assert path.read_text(encoding="utf-8") == "1\nAda\nlots\n"


def test_chart_scale_from_command_line(data_file: Path, capsys):
    assert _run(data_file, "--points-per-mark", "5", "chart", "1") == 0

    out = capsys.readouterr().out
    assert "each '*' = 5 points" in out
    assert "  1 [2024-01-05]  18 | ****" in out


def test_chart_clamps_non_positive_profile_scale(data_file: Path, tmp_path: Path, capsys):
    profile_path = tmp_path / "profile.json"
    CliProfile(data_file=data_file, points_per_mark=0).save(profile_path)

    assert main(["--profile", str(profile_path), "chart", "1"]) == 0

    out = capsys.readouterr().out
    assert "each '*' = 1 points" in out
    assert "  1 [2024-01-05]  18 | " + "*" * 18 in out

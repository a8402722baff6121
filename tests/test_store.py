from pathlib import Path

from hoopstats.models import GameRecord, Player, Roster
from hoopstats.persistence import load, save
from hoopstats.results import DecodeError, EncodeError, StorageError


def _sample_roster() -> Roster:
    roster = Roster()
    ada = roster.add_player("Ada Guard")
    ada.append_game(GameRecord(date="2024-01-05", points=20, field_goals_made=8, field_goals_attempted=15))
    ada.append_game(GameRecord(date="2024-01-07", points=12, threes_made=2, threes_attempted=4))
    roster.add_player("Bo Center")
    return roster


def test_save_then_load_round_trip(tmp_path: Path):
    path = tmp_path / "players_data.txt"
    roster = _sample_roster()

    assert save(roster, path) == path
    loaded = load(path)

    assert isinstance(loaded, Roster)
    assert loaded == roster
    assert loaded is not roster


def test_save_leaves_no_temporary_files(tmp_path: Path):
    path = tmp_path / "players_data.txt"

    save(_sample_roster(), path)
    save(_sample_roster(), path)

    assert [p.name for p in tmp_path.iterdir()] == ["players_data.txt"]


def test_load_missing_file_reports_storage_error(tmp_path: Path):
    path = tmp_path / "missing.txt"

    result = load(path)

    assert isinstance(result, StorageError)
    assert result.path == path


def test_failed_load_leaves_current_roster_unchanged(tmp_path: Path):
    good = tmp_path / "good.txt"
    bad = tmp_path / "bad.txt"
    save(_sample_roster(), good)
    current = load(good)
    assert isinstance(current, Roster)
    snapshot = current.model_copy(deep=True)
    bad.write_text(
        "1\nAda Guard\n2\n2024-01-05 20 0 0 0 0 8 15 0 0 0 0\n2024-01-07 12 0 0 0 0 2\n",
        encoding="utf-8",
    )

    result = load(bad)
    if isinstance(result, Roster):
        current = result

    assert isinstance(result, DecodeError)
    assert result.line == 5
    assert "line 5" in result.describe()
    assert current == snapshot


def test_save_unencodable_roster_keeps_existing_file(tmp_path: Path):
    path = tmp_path / "players_data.txt"
    save(_sample_roster(), path)
    before = path.read_text(encoding="utf-8")
    broken = Roster(players=[Player(name="No Date", games=[GameRecord(points=3)])])

    result = save(broken, path)

    assert isinstance(result, EncodeError)
    assert path.read_text(encoding="utf-8") == before


def test_save_into_missing_directory_reports_storage_error(tmp_path: Path):
    path = tmp_path / "nope" / "players_data.txt"

    result = save(_sample_roster(), path)

    assert isinstance(result, StorageError)
    assert not path.exists()

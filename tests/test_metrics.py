import pytest

from hoopstats.models import GameRecord, Player
from hoopstats.results import EmptyCollection
from hoopstats.stats import (
    Averages,
    averages,
    best_scoring_games,
    shooting_percentage,
    simplified_efficiency_rating,
    totals,
)


def _player_with_points(*points: int) -> Player:
    return Player(
        name="Test Player",
        games=[GameRecord(date=f"2024-02-{idx:02d}", points=p) for idx, p in enumerate(points, start=1)],
    )


def _two_game_player() -> Player:
    return Player(
        name="Two Games",
        games=[
            GameRecord(
                date="2024-01-01",
                points=20,
                rebounds=5,
                assists=3,
                steals=1,
                blocks=1,
                field_goals_made=8,
                field_goals_attempted=15,
                threes_made=2,
                threes_attempted=5,
                free_throws_made=2,
                free_throws_attempted=2,
            ),
            GameRecord(
                date="2024-01-03",
                points=11,
                rebounds=9,
                assists=0,
                steals=2,
                blocks=3,
                field_goals_made=4,
                field_goals_attempted=10,
                threes_made=0,
                threes_attempted=1,
                free_throws_made=3,
                free_throws_attempted=6,
            ),
        ],
    )


def test_shooting_percentage_guards_zero_attempts():
    assert shooting_percentage(0, 0) == 0.0
    assert shooting_percentage(7, 0) == 0.0
    assert shooting_percentage(5, 10) == 50.0
    assert shooting_percentage(1, 3) == pytest.approx(33.3333, rel=1e-4)


def test_totals_sum_every_field():
    result = totals(_two_game_player())

    assert result.games == 2
    assert result.points == 31
    assert result.rebounds == 14
    assert result.field_goals_made == 12
    assert result.field_goals_attempted == 25
    assert result.free_throws_attempted == 8
    assert result.field_goal_pct == pytest.approx(48.0)
    assert result.three_point_pct == pytest.approx(100 * 2 / 6)
    assert result.free_throw_pct == pytest.approx(62.5)


def test_totals_for_player_without_games_is_zero():
    result = totals(Player(name="Bench"))

    assert result.games == 0
    assert result.points == 0
    assert result.field_goal_pct == 0.0


def test_averages_per_game():
    result = averages(_two_game_player())

    assert isinstance(result, Averages)
    assert result.points == pytest.approx(15.5)
    assert result.rebounds == pytest.approx(7.0)
    assert result.assists == pytest.approx(1.5)
    assert result.steals == pytest.approx(1.5)
    assert result.blocks == pytest.approx(2.0)


def test_efficiency_rating_single_game_example():
    player = Player(
        name="Example",
        games=[
            GameRecord(
                points=20,
                rebounds=5,
                assists=3,
                steals=1,
                blocks=1,
                field_goals_made=8,
                field_goals_attempted=15,
                free_throws_made=4,
                free_throws_attempted=5,
            )
        ],
    )

    assert simplified_efficiency_rating(player) == 22.0


def test_efficiency_rating_averages_over_games():
    # Game one: 30 - (7 + 0) = 23; game two: 25 - (6 + 3) = 16.
    assert simplified_efficiency_rating(_two_game_player()) == pytest.approx(19.5)


def test_best_scoring_games_returns_all_ties_in_order():
    result = best_scoring_games(_player_with_points(18, 25, 25, 10))

    assert [entry.position for entry in result] == [2, 3]
    assert all(entry.game.points == 25 for entry in result)


def test_best_scoring_game_single_winner():
    result = best_scoring_games(_player_with_points(4, 9, 2))

    assert len(result) == 1
    assert result[0].position == 2
    assert result[0].game.date == "2024-02-02"


def test_empty_player_guards():
    player = Player(name="Bench")

    assert averages(player) == EmptyCollection(player_name="Bench")
    assert best_scoring_games(player) == EmptyCollection(player_name="Bench")
    assert simplified_efficiency_rating(player) == 0.0

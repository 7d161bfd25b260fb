import pytest

from footyhub.client.prediction import predict, predict_by_ids, team_score
from footyhub.client.state import Team, TeamRegistry
from footyhub.config import DRAW_LABEL
from footyhub.data.schemas import parse_standings
from footyhub.errors import InvalidSelection


def _team(team_id, name, points, gd):
    return Team(id=team_id, name=name, points=points, goal_difference=gd)


def test_team_score_adds_home_advantage_only_at_home():
    team = _team(1, "A", 60, 20)
    assert team_score(team, is_home=True) == pytest.approx(46.0)
    assert team_score(team, is_home=False) == pytest.approx(41.0)


def test_predict_stronger_home_side_wins():
    result = predict(_team(1, "A", 60, 20), _team(2, "B", 50, 10))

    assert result.home_win_probability == 58
    assert result.away_win_probability == 42
    assert result.outcome == "A"
    assert not result.is_draw


def test_predict_stronger_away_side_wins():
    result = predict(_team(1, "A", 10, -5), _team(2, "B", 60, 20))

    assert result.home_win_probability == 18
    assert result.away_win_probability == 82
    assert result.outcome == "B"


def test_predict_close_match_is_reported_as_draw():
    result = predict(_team(1, "A", 50, 10), _team(2, "B", 50, 10))

    assert result.home_win_probability == 53
    assert result.away_win_probability == 47
    assert result.is_draw
    assert result.outcome == DRAW_LABEL


def test_predict_clamps_probability_above_100():
    # 5 / (5 - 3.5) would be 333%
    result = predict(_team(1, "A", 0, 0), _team(2, "B", 0, -10))

    assert result.home_win_probability == 100
    assert result.away_win_probability == 0
    assert result.outcome == "A"


def test_predict_clamps_probability_below_zero():
    # -2 / 10 would be -20%
    result = predict(_team(1, "A", 0, -20), _team(2, "B", 20, 0))

    assert result.home_win_probability == 0
    assert result.away_win_probability == 100
    assert result.outcome == "B"


def test_predict_same_team_is_invalid():
    team = _team(1, "A", 60, 20)
    with pytest.raises(InvalidSelection):
        predict(team, team)


@pytest.fixture
def registry(standings_payload):
    reg = TeamRegistry()
    reg.register_teams(parse_standings(standings_payload))
    return reg


def test_predict_by_ids_uses_registry_stats(registry):
    result = predict_by_ids(registry, 64, 57)

    assert result.home.name == "Liverpool"
    assert result.away.name == "Arsenal"
    assert (result.home_win_probability, result.away_win_probability) == (58, 42)


@pytest.mark.parametrize("home_id, away_id", [(None, 57), (64, None), (0, 0), (None, None)])
def test_predict_by_ids_requires_both_teams(registry, home_id, away_id):
    with pytest.raises(InvalidSelection, match="select two teams"):
        predict_by_ids(registry, home_id, away_id)


def test_predict_by_ids_rejects_identical_selection(registry):
    with pytest.raises(InvalidSelection, match="must be different"):
        predict_by_ids(registry, 64, 64)


def test_predict_by_ids_rejects_unknown_team(registry):
    with pytest.raises(InvalidSelection):
        predict_by_ids(registry, 64, 9999)


def test_predict_zero_total_substitutes_one_and_stays_in_range():
    home = _team(1, "A", 0, -20)
    away = _team(2, "B", 1, 4)
    assert team_score(home, is_home=True) == -2.0
    assert team_score(away, is_home=False) == 2.0

    result = predict(home, away)

    # -2 / 1 would be -200%
    assert 0 <= result.home_win_probability <= 100
    assert 0 <= result.away_win_probability <= 100
    assert result.home_win_probability + result.away_win_probability == 100
    assert result.home_win_probability == 0
    assert result.outcome == "B"

import pytest

from playerstats.config import DEFENDER_POSITIONS, get_ranking, iter_rankings


def test_get_ranking_is_case_insensitive():
    rules = get_ranking("SCORERS")
    assert rules.stat_field == "Gls"
    assert rules.path == "/top-goleadores"


def test_rankings_are_capped_at_twenty():
    assert {rules.limit for rules in iter_rankings()} == {20}


def test_projection_includes_ranked_field_only():
    assert get_ranking("touches").projection == {"_id": 0, "strPlayer": 1, "strCutout": 1, "Touches": 1}
    assert get_ranking("defenders").projection == {"_id": 0, "strPlayer": 1, "strCutout": 1}


def test_defender_positions():
    assert DEFENDER_POSITIONS == ("Center-Back", "Left-Back", "Right-Back")


def test_get_ranking_missing_raises():
    with pytest.raises(KeyError):
        get_ranking("dribblers")

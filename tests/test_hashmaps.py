import pytest

from ferrule.lessons.hashmaps import (
    Fruit,
    Team,
    build_scores_table,
    fill_basket,
    fruit_basket,
    update_team_info,
)

RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_bananas_are_given():
    assert fruit_basket()["banana"] == 2


def test_given_fruits_are_not_modified():
    basket = fill_basket(given_basket())
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    assert len(fill_basket(given_basket())) >= 5


def test_greater_than_eleven_fruits():
    assert sum(fill_basket(given_basket()).values()) > 11


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_update_team_info_accumulates():
    scores = {}
    update_team_info(scores, "Italy", 1, 3)
    update_team_info(scores, "Italy", 2, 0)
    assert scores["Italy"] == Team("Italy", 3, 3)


@pytest.mark.parametrize("line", ["England,France,four,2", "England,France,4", "A,B,300,1"])
def test_malformed_lines_are_rejected(line):
    with pytest.raises(ValueError):
        build_scores_table(line)
from math import comb

import pytest

from monobattlemixer.pairing.partition import (
    generate_matchups,
    generate_teams,
    other_team,
)


def _pool(size):
    return [f"P{i}" for i in range(1, size + 1)]


def test_generates_subsets_in_pool_order():
    assert generate_teams(["A", "B", "C", "D"], 2) == [
        ("A", "B"),
        ("A", "C"),
        ("A", "D"),
        ("B", "C"),
        ("B", "D"),
        ("C", "D"),
    ]


@pytest.mark.parametrize("team_size", [1, 2, 3, 4, 5])
def test_partition_completeness(team_size):
    pool = _pool(2 * team_size)
    teams = generate_teams(pool, team_size)

    assert len(teams) == comb(2 * team_size, team_size)
    assert len({frozenset(team) for team in teams}) == len(teams)
    for team in teams:
        assert len(team) == team_size
        assert set(team) <= set(pool)


def test_four_a_side_yields_seventy_candidates():
    matchups = generate_matchups(_pool(8), 4)

    assert len(matchups) == 70
    # each split shows up once from each side
    splits = {frozenset(m.team_sets()) for m in matchups}
    assert len(splits) == 35


def test_complement_covers_the_pool():
    pool = _pool(8)
    for matchup in generate_matchups(pool, 4):
        assert len(matchup.team_b) == 4
        assert not set(matchup.team_a) & set(matchup.team_b)
        assert set(matchup.participants) == set(pool)


def test_other_team_keeps_pool_order():
    assert other_team(["D", "A", "C", "B"], ("A", "B")) == ("D", "C")


def test_team_larger_than_pool_yields_nothing():
    assert generate_teams(_pool(8), 9) == []


def test_generation_is_restartable():
    pool = _pool(6)
    assert generate_teams(pool, 3) == generate_teams(pool, 3)

import random

import pytest

from monobattlemixer.controllers.ledger_updater import commit_round
from monobattlemixer.controllers.round_optimizer import (
    optimize_round,
    optimize_round_greedy,
    select_best_matchup,
    slice_pool,
)
from monobattlemixer.exceptions import (
    InvalidConfigurationException,
    NoCandidatePartitionException,
)
from monobattlemixer.models.ledger import PairingLedger
from monobattlemixer.models.matchup import Matchup
from monobattlemixer.pairing.greedy import choose_least_repeated_pair, greedy_split
from monobattlemixer.pairing.scorer import score_matchup


def _names(count):
    return [f"P{i}" for i in range(1, count + 1)]


def _ledger(names):
    ledger = PairingLedger()
    ledger.initialize(names)
    return ledger


def test_slice_pool_is_contiguous():
    pool = _names(10)
    assert slice_pool(pool, 2, 4) == [
        ("P1", "P2", "P3", "P4"),
        ("P5", "P6", "P7", "P8"),
    ]


def test_slice_pool_rejects_short_pool():
    with pytest.raises(InvalidConfigurationException):
        slice_pool(_names(7), 1, 8)


def test_end_to_end_eight_participants():
    pool = _names(8)
    ledger = _ledger(pool)

    (first,) = optimize_round(ledger, pool, 1, 8, 4)
    assert score_matchup(ledger, first) == 0
    # everything ties at zero, so the first generated split wins
    assert first == Matchup(("P1", "P2", "P3", "P4"), ("P5", "P6", "P7", "P8"))

    commit_round(ledger, [first])
    team_a, team_b = set(first.team_a), set(first.team_b)
    for i, a in enumerate(pool):
        for b in pool[i + 1 :]:
            same_team = {a, b} <= team_a or {a, b} <= team_b
            assert ledger.get(a, b) == (1 if same_team else 0)
    assert sum(ledger.pair_counts.values()) == 12
    assert all(ledger.games_played(name) == 1 for name in pool)

    (second,) = optimize_round(ledger, pool, 1, 8, 4)
    assert not second.same_split_as(first)
    # two from each previous team on both sides is the freshest split
    assert score_matchup(ledger, second) == 4


def test_optimize_round_is_deterministic():
    pool = _names(16)
    ledger = _ledger(pool)
    commit_round(ledger, optimize_round(ledger, pool, 2, 8, 4))
    shuffled = list(reversed(pool))

    assert optimize_round(ledger, shuffled, 2, 8, 4) == optimize_round(
        ledger, shuffled, 2, 8, 4
    )


def test_optimize_round_does_not_touch_the_ledger():
    pool = _names(8)
    ledger = _ledger(pool)
    before = dict(ledger.pair_counts)

    optimize_round(ledger, pool, 1, 8, 4)

    assert ledger.pair_counts == before
    assert all(ledger.games_played(name) == 0 for name in pool)


def test_games_played_accounting():
    pool = _names(20)
    ledger = _ledger(pool)

    commit_round(ledger, optimize_round(ledger, pool, 2, 8, 4))

    assert [ledger.games_played(name) for name in pool] == [1] * 16 + [0] * 4


def test_ledger_stays_symmetric_after_commits():
    pool = _names(12)
    ledger = _ledger(pool)
    rng = random.Random(3)
    for _ in range(5):
        order = list(pool)
        rng.shuffle(order)
        commit_round(ledger, optimize_round(ledger, order, 1, 8, 4))

    for a in pool:
        for b in pool:
            if a != b:
                assert ledger.get(a, b) == ledger.get(b, a)


def test_select_best_keeps_first_of_equal_scores():
    ledger = _ledger(["A", "B", "C", "D"])
    ledger.increment("A", "B")
    candidates = [
        Matchup(("A", "B"), ("C", "D")),
        Matchup(("A", "C"), ("B", "D")),
        Matchup(("A", "D"), ("B", "C")),
    ]

    best, score = select_best_matchup(ledger, candidates)

    assert best == candidates[1]
    assert score == 0


def test_select_best_without_candidates():
    with pytest.raises(NoCandidatePartitionException):
        select_best_matchup(_ledger(["A", "B"]), [])


def test_slice_without_partitions_fails():
    pool = _names(8)
    with pytest.raises(NoCandidatePartitionException):
        optimize_round(_ledger(pool), pool, 1, 8, 9)


def test_least_repeated_pair_prefers_fresh_pairs():
    ledger = _ledger(["A", "B", "C"])
    assert choose_least_repeated_pair(ledger, ["A", "B", "C"]) == ("A", "B")

    ledger.increment("A", "B")
    assert choose_least_repeated_pair(ledger, ["A", "B", "C"]) == ("A", "C")


def test_greedy_split_builds_two_full_teams():
    pool = _names(8)
    ledger = _ledger(pool)

    matchup = greedy_split(ledger, pool, 4, random.Random(11))

    assert len(matchup.team_a) == 4
    assert len(matchup.team_b) == 4
    assert set(matchup.participants) == set(pool)


def test_greedy_round_is_reproducible_with_a_seed():
    pool = _names(16)
    ledger = _ledger(pool)

    first = optimize_round_greedy(ledger, pool, 2, 8, 4, random.Random(5))
    second = optimize_round_greedy(ledger, pool, 2, 8, 4, random.Random(5))

    assert first == second
    assert set(first[0].participants) == set(pool[:8])
    assert set(first[1].participants) == set(pool[8:])

import random

import pytest

from monobattlemixer.controllers.round_manager import RoundManager
from monobattlemixer.exceptions import (
    DuplicateParticipantException,
    InvalidConfigurationException,
)
from monobattlemixer.models.mixer_config import MixerConfig


def _names(count):
    return [f"P{i:02d}" for i in range(1, count + 1)]


def _rounds_as_dicts(manager):
    return [round_data.to_dict() for round_data in manager.rounds]


def test_too_few_participants_fails_before_any_round():
    with pytest.raises(InvalidConfigurationException):
        RoundManager(MixerConfig(), _names(15))


def test_duplicate_roster_is_rejected():
    config = MixerConfig(matchups_per_round=1)
    with pytest.raises(DuplicateParticipantException):
        RoundManager(config, _names(7) + ["P01"])


def test_seeded_runs_are_reproducible():
    config = MixerConfig(num_rounds=4, seed=42)
    first = RoundManager(config, _names(20))
    second = RoundManager(config, _names(20))

    first.run()
    second.run()

    assert _rounds_as_dicts(first) == _rounds_as_dicts(second)


def test_injected_rng_overrides_the_seed():
    config = MixerConfig(num_rounds=3, seed=1)
    first = RoundManager(config, _names(20), rng=random.Random(9))
    second = RoundManager(MixerConfig(num_rounds=3), _names(20), rng=random.Random(9))

    first.run()
    second.run()

    assert _rounds_as_dicts(first) == _rounds_as_dicts(second)


def test_participants_who_sat_out_are_ordered_first():
    manager = RoundManager(MixerConfig(num_rounds=2, seed=7), _names(20))
    round_one = manager.create_next_round()
    played = {name for m in round_one.matchups for name in m.participants}
    sat_out = set(_names(20)) - played

    order = manager.order_pool()

    assert len(sat_out) == 4
    assert set(order[:4]) == sat_out


def test_run_creates_every_round_and_balances_games():
    config = MixerConfig(num_rounds=6, seed=3)
    manager = RoundManager(config, _names(20))

    rounds = manager.run()

    assert [r.round_number for r in rounds] == [1, 2, 3, 4, 5, 6]
    assert all(r.is_committed for r in rounds)
    games = [manager.ledger.games_played(name) for name in _names(20)]
    assert sum(games) == 6 * 16
    assert max(games) - min(games) <= 1
    with pytest.raises(ValueError):
        manager.create_next_round()


def test_every_round_uses_distinct_participants():
    manager = RoundManager(MixerConfig(num_rounds=3, seed=5), _names(18))

    for round_data in manager.run():
        names = [n for m in round_data.matchups for n in m.participants]
        assert len(names) == 16
        assert len(set(names)) == 16


def test_scores_are_recorded_before_commit():
    manager = RoundManager(
        MixerConfig(num_rounds=1, matchups_per_round=1, seed=0), _names(8)
    )

    round_data = manager.create_next_round()

    assert round_data.scores == [0]
    assert sum(manager.ledger.pair_counts.values()) == 12


def test_second_round_of_eight_avoids_the_first_split():
    config = MixerConfig(num_rounds=2, matchups_per_round=1, seed=0)
    manager = RoundManager(config, _names(8))

    first, second = manager.run()

    assert not second.matchups[0].same_split_as(first.matchups[0])
    assert second.scores == [4]


def test_greedy_pairing_system():
    config = MixerConfig(num_rounds=3, pairing_system="greedy", seed=8)
    manager = RoundManager(config, _names(16))

    for round_data in manager.run():
        for matchup in round_data.matchups:
            assert len(matchup.team_a) == len(matchup.team_b) == 4


def test_get_round():
    manager = RoundManager(MixerConfig(num_rounds=2, seed=1), _names(16))
    manager.run()

    assert manager.get_round(2).round_number == 2
    assert manager.get_round(0) is None
    assert manager.get_round(3) is None
    assert manager.current_round_number == 2

import pytest

from monobattlemixer.controllers.ledger_updater import commit_round
from monobattlemixer.exceptions import InconsistentLedgerException
from monobattlemixer.models.ledger import PairingLedger
from monobattlemixer.models.matchup import Matchup
from monobattlemixer.pairing.scorer import score_matchup, score_team


def _ledger(names):
    ledger = PairingLedger()
    ledger.initialize(names)
    return ledger


def test_fresh_ledger_scores_zero():
    ledger = _ledger(["A", "B", "C", "D"])
    assert score_matchup(ledger, Matchup(("A", "B"), ("C", "D"))) == 0


def test_score_team_sums_intra_team_pairs():
    ledger = _ledger(["A", "B", "C", "D"])
    ledger.increment("A", "B")
    ledger.increment("A", "B")
    ledger.increment("B", "C")
    ledger.increment("A", "D")  # not a teammate pair below

    assert score_team(ledger, ("A", "B", "C")) == 3
    assert score_team(ledger, ("C",)) == 0


def test_score_ignores_cross_team_pairs():
    ledger = _ledger(["A", "B", "C", "D"])
    ledger.increment("A", "C")
    ledger.increment("B", "D")

    assert score_matchup(ledger, Matchup(("A", "B"), ("C", "D"))) == 0
    assert score_matchup(ledger, Matchup(("A", "C"), ("B", "D"))) == 2


def test_repeating_a_matchup_strictly_raises_its_score():
    ledger = _ledger([f"P{i}" for i in range(1, 9)])
    matchup = Matchup(("P1", "P2", "P3", "P4"), ("P5", "P6", "P7", "P8"))

    scores = [score_matchup(ledger, matchup)]
    for _ in range(3):
        commit_round(ledger, [matchup])
        scores.append(score_matchup(ledger, matchup))

    assert scores == [0, 12, 24, 36]


def test_unknown_teammate_is_an_inconsistency():
    ledger = _ledger(["A", "B"])
    with pytest.raises(InconsistentLedgerException):
        score_team(ledger, ("A", "Z"))


def test_matchup_teams_keeps_side_order():
    matchup = Matchup(("Ann", "Bob"), ("Cid", "Dee"))

    assert matchup.teams == (("Ann", "Bob"), ("Cid", "Dee"))
    assert matchup.participants == ("Ann", "Bob", "Cid", "Dee")

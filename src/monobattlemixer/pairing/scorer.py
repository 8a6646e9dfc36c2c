"""Familiarity scoring for candidate matchups."""

# Monobattle Mixer
# Copyright (C) 2025  Monobattle Mixer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Sequence

from monobattlemixer.models.ledger import PairingLedger
from monobattlemixer.models.matchup import Matchup


def score_team(ledger: PairingLedger, team: Sequence[str]) -> int:
    """Sum the ledger counts of every pair of teammates in ``team``."""
    score = 0
    for i in range(len(team) - 1):
        for j in range(i + 1, len(team)):
            score += ledger.get(team[i], team[j])
    return score


def score_matchup(ledger: PairingLedger, matchup: Matchup) -> int:
    """
    Familiarity score of a matchup, lower is better.

    0 means no two teammates on either side have shared a team before.
    Raises InconsistentLedgerException if a pair has no ledger entry.
    """
    return score_team(ledger, matchup.team_a) + score_team(ledger, matchup.team_b)

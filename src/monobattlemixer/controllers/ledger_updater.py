"""Folding finalized matchups into the pairing ledger."""

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

from typing import Iterable, Sequence

from monobattlemixer.models.ledger import PairingLedger
from monobattlemixer.models.matchup import Matchup
from monobattlemixer.utils import setup_logger

logger = setup_logger(__name__)


def commit_team(ledger: PairingLedger, team: Sequence[str]) -> None:
    """Count every teammate pair once and one game for every member."""
    for i in range(len(team) - 1):
        for j in range(i + 1, len(team)):
            ledger.increment(team[i], team[j])
    for name in team:
        ledger.record_game(name)


def commit_round(ledger: PairingLedger, matchups: Iterable[Matchup]) -> None:
    """Fold one round of finalized matchups into the ledger.

    Must run exactly once per round, after the matchups are final and before
    the next round's pool is ordered.

    Args:
        ledger: Ledger to update in place
        matchups: The round's finalized matchups
    """
    committed = 0
    for matchup in matchups:
        for team in matchup.teams:
            commit_team(ledger, team)
        committed += 1
        logger.debug(
            f"Committed {list(matchup.team_a)} vs {list(matchup.team_b)}"
        )
    logger.info(f"Committed {committed} matchups to the pairing ledger")

"""Simple greedy team split.

A cheaper alternative to scoring every partition: shuffle the slice, then keep
moving the least repeated pair of the remaining participants to the second
team until the remainder is a full team.
"""

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

import random
from typing import List, Sequence, Tuple

from monobattlemixer.exceptions import NoCandidatePartitionException
from monobattlemixer.models.ledger import PairingLedger
from monobattlemixer.models.matchup import Matchup


def choose_least_repeated_pair(
    ledger: PairingLedger, names: Sequence[str]
) -> Tuple[str, str]:
    """Return the pair of ``names`` with the lowest ledger count, first seen wins."""
    if len(names) < 2:
        raise NoCandidatePartitionException(
            f"Need at least two participants to form a pair, got {len(names)}"
        )

    best_pair = (names[0], names[1])
    best_count = ledger.get(names[0], names[1])
    for i in range(len(names) - 1):
        for j in range(i + 1, len(names)):
            count = ledger.get(names[i], names[j])
            if count < best_count:
                best_pair = (names[i], names[j])
                best_count = count
    return best_pair


def greedy_split(
    ledger: PairingLedger,
    pool: Sequence[str],
    team_size: int,
    rng: random.Random,
) -> Matchup:
    """
    Split ``pool`` into two teams by repeatedly pulling out the freshest pair.

    The pulled pairs form ``team_b``; whatever is left forms ``team_a``.
    ``team_size`` must be even so that pulled pairs fill ``team_b`` exactly.
    """
    remaining: List[str] = list(pool)
    rng.shuffle(remaining)
    pulled: List[str] = []
    while len(remaining) > team_size:
        first, second = choose_least_repeated_pair(ledger, remaining)
        pulled.extend((first, second))
        remaining.remove(first)
        remaining.remove(second)
    return Matchup(team_a=tuple(remaining), team_b=tuple(pulled))

"""Per-round matchup optimization.

Slices the ordered pool into matchup-sized groups and picks, for each group
independently, the partition with the lowest familiarity score.
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

from monobattlemixer.exceptions import (
    InvalidConfigurationException,
    NoCandidatePartitionException,
)
from monobattlemixer.models.ledger import PairingLedger
from monobattlemixer.models.matchup import Matchup
from monobattlemixer.pairing.greedy import greedy_split
from monobattlemixer.pairing.partition import generate_matchups
from monobattlemixer.pairing.scorer import score_matchup
from monobattlemixer.type_hints import Pool
from monobattlemixer.utils import setup_logger

logger = setup_logger(__name__)


def slice_pool(
    pool: Pool, matchups_per_round: int, matchup_size: int
) -> List[Tuple[str, ...]]:
    """Cut the first ``matchups_per_round * matchup_size`` participants into slices.

    Raises:
        InvalidConfigurationException: If the pool is too small
    """
    needed = matchups_per_round * matchup_size
    if len(pool) < needed:
        raise InvalidConfigurationException(
            f"Pool of {len(pool)} participants cannot fill "
            f"{matchups_per_round} matchups of {matchup_size}"
        )
    return [
        tuple(pool[i * matchup_size : (i + 1) * matchup_size])
        for i in range(matchups_per_round)
    ]


def select_best_matchup(
    ledger: PairingLedger, candidates: Sequence[Matchup]
) -> Tuple[Matchup, int]:
    """Return the lowest scoring candidate and its score.

    Ties keep the candidate seen first.

    Raises:
        NoCandidatePartitionException: If there are no candidates
    """
    if not candidates:
        raise NoCandidatePartitionException("No candidate partitions to choose from")

    best = candidates[0]
    best_score = score_matchup(ledger, best)
    for candidate in candidates[1:]:
        score = score_matchup(ledger, candidate)
        if score < best_score:
            logger.debug(f"New better score found: {score}")
            best = candidate
            best_score = score
    return best, best_score


def optimize_round(
    ledger: PairingLedger,
    pool: Pool,
    matchups_per_round: int,
    matchup_size: int,
    team_size: int,
) -> List[Matchup]:
    """Choose the lowest scoring matchup for every slice of the pool.

    Slices are optimized independently; the result is a per-slice optimum,
    not a search across the whole round. The ledger is only read.

    Args:
        ledger: Teammate history to score against
        pool: Participants ordered for this round
        matchups_per_round: Number of slices to fill
        matchup_size: Participants per slice
        team_size: Participants per team

    Returns:
        One matchup per slice, in slice order

    Raises:
        InvalidConfigurationException: If the pool is too small
        NoCandidatePartitionException: If a slice yields no candidates
    """
    matchups = []
    for index, group in enumerate(slice_pool(pool, matchups_per_round, matchup_size)):
        candidates = generate_matchups(group, team_size)
        logger.debug(f"Number of possible team pairs: {len(candidates)}")
        if not candidates:
            raise NoCandidatePartitionException(
                f"Slice {index + 1} of {len(group)} participants produced no "
                f"partitions into teams of {team_size}"
            )
        best, _ = select_best_matchup(ledger, candidates)
        matchups.append(best)
    return matchups


def optimize_round_greedy(
    ledger: PairingLedger,
    pool: Pool,
    matchups_per_round: int,
    matchup_size: int,
    team_size: int,
    rng: random.Random,
) -> List[Matchup]:
    """Split every slice with :func:`greedy_split` instead of a full search."""
    return [
        greedy_split(ledger, group, team_size, rng)
        for group in slice_pool(pool, matchups_per_round, matchup_size)
    ]

"""Round management for a mixer run.

This module handles all round-related operations including pool ordering,
matchup generation, ledger commits, and round history.
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
from typing import List, Optional, Sequence

from monobattlemixer.constants import PAIRING_EXHAUSTIVE, PAIRING_GREEDY
from monobattlemixer.controllers.ledger_updater import commit_round
from monobattlemixer.controllers.round_optimizer import (
    optimize_round,
    optimize_round_greedy,
)
from monobattlemixer.models.ledger import PairingLedger
from monobattlemixer.models.matchup import Matchup
from monobattlemixer.models.mixer_config import MixerConfig
from monobattlemixer.models.round_data import RoundData
from monobattlemixer.pairing.scorer import score_matchup
from monobattlemixer.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression for a mixer run.

    This class is responsible for:
    - Owning the pairing ledger for the whole run
    - Ordering the pool before each round (shuffle, then fewest games first)
    - Dispatching to the configured pairing system
    - Committing each round to the ledger and keeping the round history
    """

    def __init__(
        self,
        config: MixerConfig,
        participants: Sequence[str],
        rng: Optional[random.Random] = None,
    ):
        """Initialize the round manager.

        Args:
            config: Run configuration, validated against the roster here
            participants: Unique participant names
            rng: Random source for the pool shuffle; seeded from
                ``config.seed`` when not given

        Raises:
            InvalidConfigurationException: If the configuration does not fit
                the roster
            DuplicateParticipantException: If a name is repeated
        """
        config.validate(len(participants))
        self.config = config
        self.ledger = PairingLedger()
        self.ledger.initialize(participants)
        if rng is None:
            rng = (
                random.Random(config.seed)
                if config.seed is not None
                else random.Random()
            )
        self.rng = rng
        self.rounds: List[RoundData] = []
        # persistent ordering, reshuffled and re-sorted every round
        self._order: List[str] = self.ledger.names

    @property
    def current_round_number(self) -> int:
        """Get the current round number (1-indexed).

        Returns:
            The current round number, or 0 if no rounds have been created.
        """
        return len(self.rounds)

    @property
    def is_finished(self) -> bool:
        return len(self.rounds) >= self.config.num_rounds

    def order_pool(self) -> List[str]:
        """Shuffle the roster, then stable sort it by games played ascending.

        Returns:
            A copy of the new ordering
        """
        self.rng.shuffle(self._order)
        self._order.sort(key=self.ledger.games_played)
        return list(self._order)

    def build_matchups(self, pool: Sequence[str]) -> List[Matchup]:
        """Run the configured pairing system over an ordered pool."""
        config = self.config
        if config.pairing_system == PAIRING_GREEDY:
            return optimize_round_greedy(
                self.ledger,
                pool,
                config.matchups_per_round,
                config.participants_per_matchup,
                config.participants_per_team,
                self.rng,
            )
        if config.pairing_system == PAIRING_EXHAUSTIVE:
            return optimize_round(
                self.ledger,
                pool,
                config.matchups_per_round,
                config.participants_per_matchup,
                config.participants_per_team,
            )
        raise NotImplementedError(
            f"Pairing system '{config.pairing_system}' is not implemented"
        )

    def create_next_round(self) -> RoundData:
        """Generate, commit and record the next round.

        Returns:
            The committed round

        Raises:
            ValueError: If all rounds have already been created
        """
        if self.is_finished:
            raise ValueError(
                f"Cannot create more rounds: already at {self.config.num_rounds} rounds"
            )

        round_number = len(self.rounds) + 1
        pool = self.order_pool()
        logger.info(
            f"Creating round {round_number} with {self.config.participants_per_round} "
            f"of {len(pool)} participants"
        )

        matchups = self.build_matchups(pool)
        # scores are taken before the commit changes them
        scores = [score_matchup(self.ledger, m) for m in matchups]
        for matchup, score in zip(matchups, scores):
            logger.info(
                f"Round {round_number}: {list(matchup.team_a)} vs "
                f"{list(matchup.team_b)} (score {score})"
            )

        commit_round(self.ledger, matchups)
        round_data = RoundData(
            round_number=round_number,
            matchups=matchups,
            scores=scores,
            is_committed=True,
        )
        self.rounds.append(round_data)
        return round_data

    def run(self) -> List[RoundData]:
        """Create every remaining round.

        Returns:
            All rounds of the run, in order
        """
        while not self.is_finished:
            self.create_next_round()
        return list(self.rounds)

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get data for a specific round (1-indexed), or None."""
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        return None

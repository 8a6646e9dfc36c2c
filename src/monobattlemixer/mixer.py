"""End-to-end mixer run: roster in, teams report out."""

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

import logging
import random
from typing import Optional, Sequence

from monobattlemixer.controllers.round_manager import RoundManager
from monobattlemixer.models.mixer_config import MixerConfig
from monobattlemixer.reporting import (
    build_json_report,
    format_participant_summary,
    generate_text_report,
    save_json_report,
    save_report,
)
from monobattlemixer.roster import load_participants
from monobattlemixer.utils import set_log_level, setup_logger

logger = setup_logger(__name__)


def run_mixer(
    config: MixerConfig,
    participants: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
) -> RoundManager:
    """Schedule every round and write the configured reports.

    Args:
        config: Run configuration
        participants: Roster to use instead of reading ``config.player_file``
        rng: Random source for the pool shuffle

    Returns:
        The finished round manager, holding rounds and ledger
    """
    set_log_level(logging.DEBUG if config.debug else logging.INFO)

    if participants is None:
        participants = load_participants(config.player_file)

    manager = RoundManager(config, participants, rng=rng)
    logger.debug(
        f"Players for round 0:\n\n{format_participant_summary(manager.ledger)}"
    )

    while not manager.is_finished:
        round_data = manager.create_next_round()
        logger.debug(
            f"Players for round {round_data.round_number}:\n\n"
            f"{format_participant_summary(manager.ledger)}"
        )

    save_report(config.output_file, generate_text_report(manager.rounds))
    if config.json_output:
        save_json_report(
            config.json_output,
            build_json_report(config, manager.rounds, manager.ledger),
        )
    return manager

"""MixerConfig data class."""

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

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from monobattlemixer.constants import (
    DEFAULT_MATCHUPS_PER_ROUND,
    DEFAULT_NUM_ROUNDS,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_PAIRING_SYSTEM,
    DEFAULT_PARTICIPANTS_PER_MATCHUP,
    DEFAULT_PARTICIPANTS_PER_TEAM,
    DEFAULT_PLAYER_FILE,
)
from monobattlemixer.exceptions import FileLoadException, InvalidConfigurationException
from monobattlemixer.utils.validation import validate_run_shape_strict


@dataclass
class MixerConfig:
    """Mixer run configuration settings.

    Attributes
    ----------
    num_rounds : int
        Number of rounds to schedule.
    matchups_per_round : int
        Independent matchups played in each round.
    participants_per_matchup : int
        Participants in one matchup, both teams together.
    participants_per_team : int
        Participants on one team.
    pairing_system : str
        "exhaustive" scores every partition of a slice, "greedy" builds the
        second team from the least repeated pairs.
    seed : int or None
        Seed for the pool shuffle. None draws a fresh random seed.
    player_file : str
        Roster text file, one participant per line.
    output_file : str
        Text report destination.
    json_output : str or None
        Optional JSON export destination.
    debug : bool
        Log candidate counts and score improvements.
    """

    num_rounds: int = DEFAULT_NUM_ROUNDS
    matchups_per_round: int = DEFAULT_MATCHUPS_PER_ROUND
    participants_per_matchup: int = DEFAULT_PARTICIPANTS_PER_MATCHUP
    participants_per_team: int = DEFAULT_PARTICIPANTS_PER_TEAM
    pairing_system: str = DEFAULT_PAIRING_SYSTEM
    seed: Optional[int] = None
    player_file: str = DEFAULT_PLAYER_FILE
    output_file: str = DEFAULT_OUTPUT_FILE
    json_output: Optional[str] = None
    debug: bool = False

    @property
    def participants_per_round(self) -> int:
        return self.matchups_per_round * self.participants_per_matchup

    def validate(self, total_participants: Optional[int] = None) -> None:
        """Check the run shape, and the roster size when given.

        Raises
        ------
        InvalidConfigurationException
            If the sizes are inconsistent with each other or the roster.
        """
        validate_run_shape_strict(
            self.num_rounds,
            self.matchups_per_round,
            self.participants_per_matchup,
            self.participants_per_team,
            self.pairing_system,
            total_participants,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "num_rounds": self.num_rounds,
            "matchups_per_round": self.matchups_per_round,
            "participants_per_matchup": self.participants_per_matchup,
            "participants_per_team": self.participants_per_team,
            "pairing_system": self.pairing_system,
            "seed": self.seed,
            "player_file": self.player_file,
            "output_file": self.output_file,
            "json_output": self.json_output,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MixerConfig":
        """Deserialize configuration from dictionary."""
        unknown = set(data) - set(cls().to_dict())
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}"
            )
        debug = data.get("debug", False)
        if not isinstance(debug, bool):
            raise InvalidConfigurationException(
                f"Configuration value debug must be true or false, got {debug!r}"
            )
        try:
            return cls(
                num_rounds=int(data.get("num_rounds", DEFAULT_NUM_ROUNDS)),
                matchups_per_round=int(
                    data.get("matchups_per_round", DEFAULT_MATCHUPS_PER_ROUND)
                ),
                participants_per_matchup=int(
                    data.get(
                        "participants_per_matchup", DEFAULT_PARTICIPANTS_PER_MATCHUP
                    )
                ),
                participants_per_team=int(
                    data.get("participants_per_team", DEFAULT_PARTICIPANTS_PER_TEAM)
                ),
                pairing_system=data.get("pairing_system", DEFAULT_PAIRING_SYSTEM),
                seed=data.get("seed"),
                player_file=data.get("player_file", DEFAULT_PLAYER_FILE),
                output_file=data.get("output_file", DEFAULT_OUTPUT_FILE),
                json_output=data.get("json_output"),
                debug=debug,
            )
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationException(
                f"Invalid configuration value: {e}"
            ) from e


def load_config(path: Union[str, Path]) -> MixerConfig:
    """Load a :class:`MixerConfig` from a JSON file.

    Raises
    ------
    FileLoadException
        If the file cannot be read or is not valid JSON.
    InvalidConfigurationException
        If the JSON does not describe a configuration.
    """
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadException(f"Could not read config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FileLoadException(f"Config file {config_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationException(
            f"Config file {config_path} must contain a JSON object"
        )
    return MixerConfig.from_dict(data)

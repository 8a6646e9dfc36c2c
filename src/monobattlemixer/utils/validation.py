"""Validation utilities for Monobattle Mixer.

This module provides reusable validation functions with consistent error handling.
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

from typing import Optional

from monobattlemixer.constants import PAIRING_GREEDY, PAIRING_SYSTEMS
from monobattlemixer.exceptions import InvalidConfigurationException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Participant Name Validation ==========


def validate_participant_name(name: Optional[str]) -> ValidationResult:
    """Validate a participant name read from a roster.

    Args:
        name: Raw name, possibly with surrounding whitespace

    Returns:
        ValidationResult with the stripped name if valid
    """
    if name is None or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Participant name is required",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


# ========== Run Shape Validation ==========


def validate_run_shape(
    num_rounds: int,
    matchups_per_round: int,
    participants_per_matchup: int,
    participants_per_team: int,
    pairing_system: str,
    total_participants: Optional[int] = None,
) -> ValidationResult:
    """Validate the numeric shape of a mixer run.

    Args:
        num_rounds: Number of rounds to schedule
        matchups_per_round: Matchups played in each round
        participants_per_matchup: Participants in one matchup (both teams)
        participants_per_team: Participants on one team
        pairing_system: Name of the pairing system
        total_participants: Roster size, or None to skip the roster check

    Returns:
        ValidationResult with validation status

    Example:
        >>> bool(validate_run_shape(16, 2, 8, 4, "exhaustive", 16))
        True
    """
    counts = {
        "number of rounds": num_rounds,
        "matchups per round": matchups_per_round,
        "participants per matchup": participants_per_matchup,
        "participants per team": participants_per_team,
    }
    for label, value in counts.items():
        if value < 1:
            return ValidationResult(
                is_valid=False,
                error_message=f"The {label} must be at least 1, got {value}",
            )

    if participants_per_matchup != 2 * participants_per_team:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Participants per matchup ({participants_per_matchup}) must be "
                f"exactly twice the participants per team ({participants_per_team})"
            ),
        )

    if pairing_system not in PAIRING_SYSTEMS:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Unknown pairing system '{pairing_system}'. "
                f"Choose one of: {', '.join(PAIRING_SYSTEMS)}"
            ),
        )

    if pairing_system == PAIRING_GREEDY and participants_per_team % 2:
        return ValidationResult(
            is_valid=False,
            error_message=(
                "The greedy pairing system builds teams two participants at a "
                f"time and needs an even team size, got {participants_per_team}"
            ),
        )

    if total_participants is not None:
        needed = matchups_per_round * participants_per_matchup
        if total_participants < needed:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Not enough participants: {matchups_per_round} matchups of "
                    f"{participants_per_matchup} need {needed}, "
                    f"only {total_participants} available"
                ),
            )

    return ValidationResult(is_valid=True)


def validate_run_shape_strict(*args, **kwargs) -> None:
    """Validate the run shape and raise exception if invalid.

    Raises:
        InvalidConfigurationException: If the run shape is invalid
    """
    result = validate_run_shape(*args, **kwargs)
    if not result.is_valid:
        raise InvalidConfigurationException(result.error_message)

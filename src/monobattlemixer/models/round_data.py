"""Data model for a mixer round."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from monobattlemixer.models.matchup import Matchup


@dataclass
class RoundData:
    """Container for all data related to a single round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    matchups : list of Matchup
        Finalized matchups in slice order.
    scores : list of int
        Familiarity score of each matchup at the time it was chosen.
    is_committed : bool
        Indicates whether the round has been folded into the ledger.
    """

    round_number: int
    matchups: List[Matchup] = field(default_factory=list)
    scores: List[int] = field(default_factory=list)
    is_committed: bool = False

    @property
    def total_score(self) -> int:
        return sum(self.scores)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "matchups": [m.to_dict() for m in self.matchups],
            "scores": list(self.scores),
            "is_committed": self.is_committed,
        }

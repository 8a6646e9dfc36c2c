"""Data model for a single matchup of two teams."""

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

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from monobattlemixer.type_hints import Team, TeamSet


@dataclass(frozen=True)
class Matchup:
    """Two disjoint teams playing each other.

    Attributes:
        team_a: First side, in generation order
        team_b: Second side, derived as the complement of ``team_a``
    """

    team_a: Team
    team_b: Team

    @property
    def teams(self) -> Tuple[Team, Team]:
        """Both sides, ``team_a`` first."""
        return (self.team_a, self.team_b)

    @property
    def participants(self) -> Tuple[str, ...]:
        """All participants of the matchup, ``team_a`` first."""
        return self.team_a + self.team_b

    def team_sets(self) -> Tuple[TeamSet, TeamSet]:
        return (frozenset(self.team_a), frozenset(self.team_b))

    def same_split_as(self, other: "Matchup") -> bool:
        """True if both matchups split participants into the same two teams."""
        return set(self.team_sets()) == set(other.team_sets())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize matchup to dictionary."""
        return {"team_a": list(self.team_a), "team_b": list(self.team_b)}

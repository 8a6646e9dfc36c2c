"""Team partitioning and scoring for Monobattle Mixer."""

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

from monobattlemixer.pairing.greedy import choose_least_repeated_pair, greedy_split
from monobattlemixer.pairing.partition import (
    generate_matchups,
    generate_teams,
    other_team,
)
from monobattlemixer.pairing.scorer import score_matchup, score_team

__all__ = [
    "generate_teams",
    "generate_matchups",
    "other_team",
    "score_team",
    "score_matchup",
    "choose_least_repeated_pair",
    "greedy_split",
]

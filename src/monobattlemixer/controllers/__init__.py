"""Round control for Monobattle Mixer.

Orders the pool, optimizes each round's matchups and commits them to the
pairing ledger.
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

from monobattlemixer.controllers.ledger_updater import commit_round, commit_team
from monobattlemixer.controllers.round_manager import RoundManager
from monobattlemixer.controllers.round_optimizer import (
    optimize_round,
    optimize_round_greedy,
    select_best_matchup,
    slice_pool,
)

__all__ = [
    "RoundManager",
    "optimize_round",
    "optimize_round_greedy",
    "select_best_matchup",
    "slice_pool",
    "commit_round",
    "commit_team",
]

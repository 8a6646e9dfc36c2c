"""Team partition generator.

Enumerates every way to pick one team of ``team_size`` out of a slice of
``2 * team_size`` participants. Only one side is generated; the other side
of each matchup is the complement within the slice.
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

from typing import List, Sequence, Tuple

from monobattlemixer.models.matchup import Matchup
from monobattlemixer.type_hints import Pool, Team, Teams


def _build_teams(
    remaining: Tuple[str, ...], team_so_far: Team, team_size: int
) -> Teams:
    """
    Recursive "N choose K" step.

    Each level picks the next member from ``remaining`` and recurses on the
    players after it only, so a subset is never built twice in a different
    order. The loop stops once too few candidates are left to fill the team.
    """
    if len(team_so_far) == team_size:
        return [team_so_far]

    teams: Teams = []
    still_needed = team_size - len(team_so_far)
    for i in range(len(remaining) - still_needed + 1):
        teams.extend(
            _build_teams(remaining[i + 1 :], team_so_far + (remaining[i],), team_size)
        )
    return teams


def generate_teams(pool: Pool, team_size: int) -> Teams:
    """
    Generate every distinct ``team_size`` subset of ``pool``.

    Parameters
    ----------
        pool: Participants of one slice, exactly ``2 * team_size`` of them
        team_size: Participants per team

    Returns
    -------
        ``C(len(pool), team_size)`` teams, members in pool order. The pool
        size is the caller's responsibility; other sizes still enumerate
        subsets but the complements are no longer teams.
    """
    return _build_teams(tuple(pool), (), team_size)


def other_team(pool: Sequence[str], team: Team) -> Team:
    """Return the members of ``pool`` not in ``team``, keeping pool order."""
    chosen = set(team)
    return tuple(name for name in pool if name not in chosen)


def generate_matchups(pool: Pool, team_size: int) -> List[Matchup]:
    """
    Build one candidate matchup per generated team.

    Swapped duplicates (A vs B and B vs A) are both kept: half of the
    ``C(2k, k)`` candidates mirror the other half.
    """
    pool = tuple(pool)
    return [
        Matchup(team_a=team, team_b=other_team(pool, team))
        for team in generate_teams(pool, team_size)
    ]

"""A participant in a mixer run."""

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
from typing import Any, Dict


@dataclass(slots=True)
class Participant:
    """
    Mutable participant state owned by a :class:`PairingLedger`.

    The name is the identity of the participant and is never changed after
    registration. The ledger is the only writer of ``games_played``.

    Attributes
    ----------
    name : str
        Unique participant name.
    games_played : int
        Number of rounds this participant has been scheduled in.
    """

    name: str
    games_played: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {"name": self.name, "games_played": self.games_played}

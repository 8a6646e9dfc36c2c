"""Pairing ledger: who has been a teammate of whom, and how often."""

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
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from monobattlemixer.exceptions import (
    DuplicateParticipantException,
    InconsistentLedgerException,
    LedgerStateException,
)
from monobattlemixer.models.participant import Participant
from monobattlemixer.type_hints import PairKey


def pair_key(name_a: str, name_b: str) -> PairKey:
    """Normalize an unordered pair, lexicographically smaller name first."""
    if name_b < name_a:
        return (name_b, name_a)
    return (name_a, name_b)


@dataclass
class PairingLedger:
    """
    Tracks how many times every pair of participants shared a team.

    Every pair of distinct registered participants has an entry from
    :meth:`initialize` on. A missing entry is never read as zero: it means
    the ledger is out of sync with the participants being scored.

    Attributes
    ----------
    pair_counts : dict of (str, str) to int
        Teammate counts keyed by :func:`pair_key`.
    participants : dict of str to Participant
        Registered participants in registration order.
    initialized : bool
        Whether :meth:`initialize` has run.
    """

    pair_counts: Dict[PairKey, int] = field(default_factory=dict)
    participants: Dict[str, Participant] = field(default_factory=dict)
    initialized: bool = False

    def initialize(self, names: Iterable[str]) -> None:
        """Register ``names`` and set every pair count to 0.

        Raises
        ------
        LedgerStateException
            If the ledger was already initialized.
        DuplicateParticipantException
            If a name appears more than once.
        """
        if self.initialized:
            raise LedgerStateException("Pairing ledger is already initialized")

        roster: List[str] = []
        seen = set()
        for name in names:
            if name in seen:
                raise DuplicateParticipantException(
                    f"Participant '{name}' is registered more than once"
                )
            seen.add(name)
            roster.append(name)

        # nothing is registered until the whole roster checks out
        for name in roster:
            self.participants[name] = Participant(name)

        for i in range(len(roster) - 1):
            for j in range(i + 1, len(roster)):
                self.pair_counts[pair_key(roster[i], roster[j])] = 0

        self.initialized = True

    @property
    def names(self) -> List[str]:
        """Participant names in registration order."""
        return list(self.participants)

    def _entry(self, name_a: str, name_b: str) -> PairKey:
        key = pair_key(name_a, name_b)
        if key not in self.pair_counts:
            raise InconsistentLedgerException(
                f"Pairing ledger was in a bad state; could not find the pair "
                f"{name_a} / {name_b}"
            )
        return key

    def get(self, name_a: str, name_b: str) -> int:
        """Return how many times two participants have been teammates."""
        return self.pair_counts[self._entry(name_a, name_b)]

    def increment(self, name_a: str, name_b: str) -> None:
        """Record one more round where two participants were teammates."""
        key = self._entry(name_a, name_b)
        self.pair_counts[key] += 1

    def participant(self, name: str) -> Participant:
        """Return the registered participant called ``name``."""
        try:
            return self.participants[name]
        except KeyError:
            raise InconsistentLedgerException(
                f"Pairing ledger has no participant named '{name}'"
            ) from None

    def games_played(self, name: str) -> int:
        """Return how many rounds ``name`` has been scheduled in."""
        return self.participant(name).games_played

    def record_game(self, name: str) -> None:
        """Count one more scheduled round for ``name``."""
        self.participant(name).games_played += 1

    def iter_pairs(self) -> Iterator[Tuple[PairKey, int]]:
        """Yield ``(pair, count)`` for every pair in the ledger."""
        yield from self.pair_counts.items()

    def partners_of(self, name: str) -> Dict[str, int]:
        """Return every other participant's teammate count with ``name``."""
        self.participant(name)
        return {
            other: self.get(name, other) for other in self.participants if other != name
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the ledger to a dictionary."""
        return {
            "participants": [p.to_dict() for p in self.participants.values()],
            "pair_counts": [
                {"pair": list(pair), "count": count}
                for pair, count in sorted(self.iter_pairs())
            ],
        }

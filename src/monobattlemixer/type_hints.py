"""Type hints used in Monobattle Mixer."""

from typing import FrozenSet, List, Sequence, Tuple

# One side of a matchup, participant names in generation order
Team = Tuple[str, ...]
# All generated sides for one slice
Teams = List[Team]
# Ordered participant names handed to the optimizer
Pool = Sequence[str]
# Normalized ledger key, lexicographically smaller name first
PairKey = Tuple[str, str]
# Order-free view of a team, for comparisons
TeamSet = FrozenSet[str]

#  LocalWords:  PairKey TeamSet

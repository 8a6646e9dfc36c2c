from monobattlemixer.models.ledger import PairingLedger, pair_key
from monobattlemixer.models.matchup import Matchup
from monobattlemixer.models.mixer_config import MixerConfig, load_config
from monobattlemixer.models.participant import Participant
from monobattlemixer.models.round_data import RoundData

__all__ = [
    "PairingLedger",
    "pair_key",
    "Matchup",
    "MixerConfig",
    "load_config",
    "Participant",
    "RoundData",
]

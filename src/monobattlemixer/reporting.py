"""Human-readable and JSON reports of a mixer run."""

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

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Union

from monobattlemixer.constants import REPORT_ROUND_HEADER, REPORT_TITLE
from monobattlemixer.exceptions import FileSaveException
from monobattlemixer.models.ledger import PairingLedger
from monobattlemixer.models.mixer_config import MixerConfig
from monobattlemixer.models.round_data import RoundData
from monobattlemixer.utils import setup_logger

logger = setup_logger(__name__)


def format_team(team: Sequence[str]) -> str:
    """Render a team as ``[A, B, C]`` in team order."""
    return "[" + ", ".join(team) + "]"


def format_round(round_data: RoundData) -> str:
    """Render one round: a header and one ``(1) [...] vs (2) [...]`` line per matchup."""
    lines = [
        "",
        REPORT_ROUND_HEADER.format(round_number=round_data.round_number),
    ]
    for j, matchup in enumerate(round_data.matchups):
        lines.append(
            f"({j * 2 + 1}) {format_team(matchup.team_a)} vs "
            f"({j * 2 + 2}) {format_team(matchup.team_b)}"
        )
    return "\n".join(lines) + "\n"


def generate_text_report(rounds: Iterable[RoundData]) -> str:
    """Build the full teams report for every round."""
    parts = ["\n" + REPORT_TITLE + "\n"]
    parts.extend(format_round(round_data) for round_data in rounds)
    return "".join(parts)


def format_participant_summary(ledger: PairingLedger) -> str:
    """Render every participant with games played and teammate counts.

    One ``** name[games]: other(count), ...`` line per participant, sorted
    by name.
    """
    lines: List[str] = ["["]
    for name in sorted(ledger.names):
        partners = ", ".join(
            f"{other}({count})" for other, count in ledger.partners_of(name).items()
        )
        lines.append(f"** {name}[{ledger.games_played(name)}]: {partners}")
    lines.append("]")
    return "\n".join(lines)


def build_json_report(
    config: MixerConfig, rounds: Iterable[RoundData], ledger: PairingLedger
) -> Dict[str, Any]:
    """Collect configuration, rounds and final ledger state in one dictionary."""
    return {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "config": config.to_dict(),
        "rounds": [round_data.to_dict() for round_data in rounds],
        "ledger": ledger.to_dict(),
    }


def save_report(path: Union[str, Path], content: str) -> Path:
    """Write ``content`` to ``path``.

    Raises:
        FileSaveException: If the file cannot be written
    """
    report_path = Path(path)
    try:
        report_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileSaveException(f"Could not write report {report_path}: {e}") from e
    logger.info(f"Report written to {report_path}")
    return report_path


def save_json_report(path: Union[str, Path], report: Dict[str, Any]) -> Path:
    """Write a JSON report to ``path``."""
    return save_report(path, json.dumps(report, indent=2))

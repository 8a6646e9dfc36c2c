"""Reading the participant roster from a text file."""

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

from pathlib import Path
from typing import Iterable, List, Union

from monobattlemixer.constants import ROSTER_COMMENT_PREFIX
from monobattlemixer.exceptions import DuplicateParticipantException, FileLoadException
from monobattlemixer.utils import setup_logger
from monobattlemixer.utils.validation import validate_participant_name

logger = setup_logger(__name__)


def parse_participants(lines: Iterable[str]) -> List[str]:
    """Turn roster lines into unique participant names.

    Blank lines and lines starting with ``#`` are skipped; names are
    stripped of surrounding whitespace.

    Raises:
        DuplicateParticipantException: If a name appears twice
    """
    names: List[str] = []
    seen = set()
    for line_number, line in enumerate(lines, start=1):
        if line.strip().startswith(ROSTER_COMMENT_PREFIX):
            continue
        result = validate_participant_name(line)
        if not result:
            continue
        name = result.sanitized_value
        if name in seen:
            raise DuplicateParticipantException(
                f"Participant '{name}' appears more than once (line {line_number})"
            )
        seen.add(name)
        names.append(name)
    return names


def load_participants(path: Union[str, Path]) -> List[str]:
    """Read the roster file at ``path``, one participant per line.

    Raises:
        FileLoadException: If the file cannot be read
        DuplicateParticipantException: If a name appears twice
    """
    roster_path = Path(path)
    try:
        with open(roster_path, "r", encoding="utf-8") as f:
            names = parse_participants(f)
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadException(f"Could not read roster {roster_path}: {e}") from e
    logger.info(f"Loaded {len(names)} participants from {roster_path}")
    return names

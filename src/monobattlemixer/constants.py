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

# --- Files ---
DEFAULT_PLAYER_FILE = "players.txt"
DEFAULT_OUTPUT_FILE = "teams.txt"
ROSTER_COMMENT_PREFIX = "#"

# --- Run shape ---
DEFAULT_NUM_ROUNDS = 16
DEFAULT_MATCHUPS_PER_ROUND = 2
DEFAULT_PARTICIPANTS_PER_MATCHUP = 8
DEFAULT_PARTICIPANTS_PER_TEAM = 4

# Pairing systems
PAIRING_EXHAUSTIVE = "exhaustive"  # Score every N choose K partition
PAIRING_GREEDY = "greedy"  # Repeatedly pull the least repeated pair
PAIRING_SYSTEMS = (PAIRING_EXHAUSTIVE, PAIRING_GREEDY)
DEFAULT_PAIRING_SYSTEM = PAIRING_EXHAUSTIVE

# --- Report ---
REPORT_TITLE = "====== Monobattle Mixer Teams ======"
REPORT_ROUND_HEADER = "--- Round {round_number} ---"

# --- Logging ---
LOG_APP_FOLDER = "Monobattle Mixer"
LOG_FILE_NAME = "monobattle-mixer.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5

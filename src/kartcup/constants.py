# Kart Cup
# Copyright (C) 2025  Kart Cup developers
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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
DEFAULT_STATE_FILE = f"kartcup{SAVE_FILE_EXTENSION}"
STATE_FILE_ENV_VAR = "KARTCUP_STATE_FILE"

# Points awarded per finish position (index 0 = 1st place)
POINTS_TABLE = (15, 12, 10, 8, 7, 6, 5, 4, 3, 2, 1, 0)

# Finish positions accepted when recording a race
MIN_POSITION = 1
MAX_POSITION = 24

# Best-position tie-break for a player without any recorded race
NO_POSITION_PLACEHOLDER = 99

# Roster limits
MIN_PLAYERS = 4
MAX_PLAYERS = 50

# Championship scheduling
RACES_PER_PLAYER = 3
RACE_SIZE = 4
MAX_SCHEDULE_ATTEMPTS = 100

# Semi-finals
QUALIFIER_COUNT = 8
QUALIFIERS_PER_SESSION = 2
SEMI_FINAL_RACES = 2
# 0-indexed ranking positions; seeds 1, 8, 3, 6 and 2, 7, 4, 5
SESSION_A_SEEDS = (0, 7, 2, 5)
SESSION_B_SEEDS = (1, 6, 3, 4)
SESSION_A_ID = "s1"
SESSION_B_ID = "s2"
SESSION_NAMES = {
    SESSION_A_ID: "Semi-Final A",
    SESSION_B_ID: "Semi-Final B",
}

# Grand final
FINAL_RACES = 3

# Race naming
CHAMPIONSHIP_RACE_ID = "gp-{number}"
CHAMPIONSHIP_RACE_NAME = "Grand Prix {number}"
SEMI_FINAL_RACE_ID = "{session_id}-gp{number}"
SEMI_FINAL_RACE_NAME = "Semi GP {number}"
FINAL_RACE_ID = "f-gp{number}"
FINAL_RACE_NAME = "Final GP {number}"

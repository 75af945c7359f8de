"""Tournament engine for Kart Cup.

Scoring, championship scheduling, qualifier seeding and the phase state
machine, plus the ``Tournament`` class tying them together.
"""

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

from kartcup.tournament.qualifiers import (
    build_final_races,
    get_qualifiers,
    rank_players,
    seed_semi_finals,
    seed_sessions,
    select_finalists,
)
from kartcup.tournament.scheduler import count_repeat_pairings, generate_schedule
from kartcup.tournament.scoring import (
    compute_standing,
    final_standings,
    get_points,
    recompute_player_standings,
    session_standings,
)
from kartcup.tournament.tournament import Tournament

__all__ = [
    "Tournament",
    "build_final_races",
    "compute_standing",
    "count_repeat_pairings",
    "final_standings",
    "generate_schedule",
    "get_points",
    "get_qualifiers",
    "rank_players",
    "recompute_player_standings",
    "seed_semi_finals",
    "seed_sessions",
    "select_finalists",
    "session_standings",
]

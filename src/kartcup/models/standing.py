"""Leaderboard row for phase-scoped standings."""

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

from dataclasses import dataclass, field
from typing import List

from kartcup.constants import NO_POSITION_PLACEHOLDER


@dataclass(frozen=True)
class Standing:
    """Points a player collected over one set of races.

    Attributes
    ----------
    player_id : str
        The player this row describes.
    score : int
        Sum of points over the races.
    races_played : int
        Races with a recorded result for the player.
    positions : list of int
        Recorded positions, in race order.
    """

    player_id: str
    score: int = 0
    races_played: int = 0
    positions: List[int] = field(default_factory=list)

    @property
    def best_position(self) -> int:
        return min(self.positions) if self.positions else NO_POSITION_PLACEHOLDER

"""Data models for Kart Cup."""

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

from .player import Player
from .race import Race
from .semi_final import SemiFinalSession
from .standing import Standing
from .tournament_state import Phase, TournamentState

__all__ = [
    "Phase",
    "Player",
    "Race",
    "SemiFinalSession",
    "Standing",
    "TournamentState",
]

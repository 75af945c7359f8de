"""Data model for a single Grand Prix race."""

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
from typing import Any, Dict, List

from kartcup.type_hints import RaceResults


@dataclass
class Race:
    """Container for one race and its finish positions.

    Attributes
    ----------
    id : str
        Race identifier, unique within the tournament (``gp-1``, ``s1-gp2``...).
    name : str
        Display name.
    player_ids : list of str
        Participants. Fixed when the race is scheduled.
    results : dict of str to int
        Finish position per participant. Partial until the race is complete.
    is_completed : bool
        True once every participant has a recorded position.
    """

    id: str
    name: str
    player_ids: List[str] = field(default_factory=list)
    results: RaceResults = field(default_factory=dict)
    is_completed: bool = False

    def has_all_results(self) -> bool:
        """Check whether every participant has a recorded position."""
        return all(pid in self.results for pid in self.player_ids)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize race to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "player_ids": list(self.player_ids),
            "results": dict(self.results),
            "is_completed": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Race":
        """Deserialize race from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            player_ids=list(data.get("player_ids", [])),
            results={str(k): int(v) for k, v in data.get("results", {}).items()},
            is_completed=data.get("is_completed", False),
        )

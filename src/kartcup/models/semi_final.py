"""Data model for a semi-final session."""

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

from kartcup.constants import SESSION_NAMES

from .race import Race


@dataclass
class SemiFinalSession:
    """One of the two four-racer semi-final brackets.

    Attributes
    ----------
    id : str
        ``s1`` (Semi-Final A) or ``s2`` (Semi-Final B).
    name : str
        Display name.
    player_ids : list of str
        Seeded participants, up to four.
    races : list of Race
        The session's two races.
    manual_qualifiers : list of str
        Players picked by the organiser to advance, at most two. Kept in
        selection order; the finals concatenate them in that order.
    """

    id: str
    name: str
    player_ids: List[str] = field(default_factory=list)
    races: List[Race] = field(default_factory=list)
    manual_qualifiers: List[str] = field(default_factory=list)

    @classmethod
    def empty(cls, session_id: str) -> "SemiFinalSession":
        """Create an unseeded session with its default name."""
        return cls(id=session_id, name=SESSION_NAMES.get(session_id, session_id))

    @property
    def races_completed(self) -> bool:
        return bool(self.races) and all(r.is_completed for r in self.races)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize session to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "player_ids": list(self.player_ids),
            "races": [r.to_dict() for r in self.races],
            "manual_qualifiers": list(self.manual_qualifiers),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SemiFinalSession":
        """Deserialize session from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", SESSION_NAMES.get(data["id"], data["id"])),
            player_ids=list(data.get("player_ids", [])),
            races=[Race.from_dict(r) for r in data.get("races", [])],
            manual_qualifiers=list(data.get("manual_qualifiers", [])),
        )

"""Racer data class."""

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

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil import parser as date_parser

from kartcup.constants import NO_POSITION_PLACEHOLDER
from kartcup.utils import generate_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Player:
    """A registered racer and their championship standing.

    Attributes
    ----------
    id : str
        Unique identifier, generated at registration.
    first_name : str
        Racer's first name.
    gamer_tag : str
        Display tag shown on leaderboards.
    score : int
        Championship points. Derived from race results.
    races_played : int
        Number of championship races with a recorded result. Derived.
    positions : list of int
        Finish positions in championship race order. Derived.
    registered_at : datetime
        Registration time (UTC).
    """

    first_name: str
    gamer_tag: str
    id: str = field(default_factory=lambda: generate_id("Player"))
    score: int = 0
    races_played: int = 0
    positions: List[int] = field(default_factory=list)
    registered_at: datetime = field(default_factory=_utcnow)

    @property
    def best_position(self) -> int:
        """Lowest finish position so far, or the placeholder if none."""
        return min(self.positions) if self.positions else NO_POSITION_PLACEHOLDER

    @property
    def display_name(self) -> str:
        return f"{self.gamer_tag} ({self.first_name})"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "gamer_tag": self.gamer_tag,
            "score": self.score,
            "races_played": self.races_played,
            "positions": list(self.positions),
            "registered_at": self.registered_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        registered_at: Optional[datetime] = None
        raw_timestamp = data.get("registered_at")
        if raw_timestamp:
            registered_at = date_parser.isoparse(raw_timestamp)
            if registered_at.tzinfo is None:
                registered_at = registered_at.replace(tzinfo=timezone.utc)

        return cls(
            id=data["id"],
            first_name=data.get("first_name", ""),
            gamer_tag=data.get("gamer_tag", ""),
            score=data.get("score", 0),
            races_played=data.get("races_played", 0),
            positions=list(data.get("positions", [])),
            registered_at=registered_at or _utcnow(),
        )

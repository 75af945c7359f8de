"""Tournament state container.

The whole tournament lives in one ``TournamentState`` value. Transition
functions never edit a state they were handed; they work on a copy and
return it, so a failed operation leaves the caller's state untouched.
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

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from kartcup.constants import SESSION_A_ID, SESSION_B_ID

from .player import Player
from .race import Race
from .semi_final import SemiFinalSession


class Phase(Enum):
    """Tournament phases, in the order they are played."""

    REGISTRATION = "REGISTRATION"
    CHAMPIONSHIP = "CHAMPIONSHIP"
    SEMI_FINALS = "SEMI_FINALS"
    FINALS = "FINALS"
    COMPLETED = "COMPLETED"


def _empty_semi_finals() -> Dict[str, SemiFinalSession]:
    return {
        SESSION_A_ID: SemiFinalSession.empty(SESSION_A_ID),
        SESSION_B_ID: SemiFinalSession.empty(SESSION_B_ID),
    }


@dataclass
class TournamentState:
    """Everything needed to resume a tournament.

    Attributes
    ----------
    phase : Phase
        Current phase. Exactly one phase is current at any time.
    players : list of Player
        Roster in registration order.
    championship_races : list of Race
        Qualifying schedule.
    semi_finals : dict of str to SemiFinalSession
        Sessions keyed by id (``s1``, ``s2``).
    final_races : list of Race
        Grand final races.
    """

    phase: Phase = Phase.REGISTRATION
    players: List[Player] = field(default_factory=list)
    championship_races: List[Race] = field(default_factory=list)
    semi_finals: Dict[str, SemiFinalSession] = field(
        default_factory=_empty_semi_finals
    )
    final_races: List[Race] = field(default_factory=list)

    @property
    def session_a(self) -> SemiFinalSession:
        return self.semi_finals[SESSION_A_ID]

    @property
    def session_b(self) -> SemiFinalSession:
        return self.semi_finals[SESSION_B_ID]

    def copy(self) -> "TournamentState":
        """Return an independent deep copy of this state."""
        return copy.deepcopy(self)

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def all_races(self) -> List[Race]:
        """Every race of every phase, championship first."""
        races = list(self.championship_races)
        for session in self.semi_finals.values():
            races.extend(session.races)
        races.extend(self.final_races)
        return races

    def find_race(self, race_id: str) -> Optional[Race]:
        for race in self.all_races():
            if race.id == race_id:
                return race
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the whole tournament to a dictionary."""
        return {
            "phase": self.phase.value,
            "players": [p.to_dict() for p in self.players],
            "championship_races": [r.to_dict() for r in self.championship_races],
            "semi_finals": {
                session_id: session.to_dict()
                for session_id, session in self.semi_finals.items()
            },
            "final_races": [r.to_dict() for r in self.final_races],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentState":
        """Deserialize a tournament from a dictionary."""
        semi_finals = _empty_semi_finals()
        for session_id, session_data in data.get("semi_finals", {}).items():
            semi_finals[session_id] = SemiFinalSession.from_dict(session_data)

        return cls(
            phase=Phase(data.get("phase", Phase.REGISTRATION.value)),
            players=[Player.from_dict(p) for p in data.get("players", [])],
            championship_races=[
                Race.from_dict(r) for r in data.get("championship_races", [])
            ],
            semi_finals=semi_finals,
            final_races=[Race.from_dict(r) for r in data.get("final_races", [])],
        )

"""Main Tournament class - the entry point for running a Kart Cup.

This is the primary interface for tournament management. It keeps the
current state, applies the phase transitions from ``state_machine`` and swaps
the new state in only after a transition succeeds.
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

import random
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from kartcup import storage
from kartcup.models import (
    Phase,
    Player,
    Race,
    SemiFinalSession,
    Standing,
    TournamentState,
)
from kartcup.utils import setup_logger

from . import state_machine
from .qualifiers import rank_players
from .scoring import final_standings, session_standings

logger = setup_logger(__name__)


class Tournament:
    """Stateful wrapper around the tournament transitions.

    Every mutating method computes a complete new state and replaces the old
    one. When a ``save_path`` is given, the new state is written to disk after
    each successful mutation.
    """

    def __init__(
        self,
        state: Optional[TournamentState] = None,
        save_path: Optional[Union[str, Path]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize a tournament.

        Args
        ----
        state: Existing state to resume; a new empty tournament when omitted
        save_path: File to persist the state to after every change
        rng: Random source for championship scheduling
        """
        self._state = state if state is not None else state_machine.new_tournament()
        self.save_path = Path(save_path) if save_path is not None else None
        self.rng = rng

    @classmethod
    def load(cls, path: Union[str, Path], **kwargs) -> "Tournament":
        """Resume the tournament saved at ``path`` and keep saving there."""
        return cls(state=storage.load_state(path), save_path=path, **kwargs)

    # ========== Properties ==========

    @property
    def state(self) -> TournamentState:
        """Current state. Treat as read-only."""
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def players(self) -> List[Player]:
        return list(self._state.players)

    @property
    def championship_races(self) -> List[Race]:
        return list(self._state.championship_races)

    @property
    def semi_finals(self) -> Tuple[SemiFinalSession, SemiFinalSession]:
        return self._state.session_a, self._state.session_b

    @property
    def final_races(self) -> List[Race]:
        return list(self._state.final_races)

    def _apply(self, next_state: TournamentState) -> None:
        if next_state is self._state:
            return
        self._state = next_state
        if self.save_path is not None:
            storage.save_state(self._state, self.save_path)

    # ========== Player Management ==========

    def add_player(self, first_name: str, gamer_tag: str) -> Optional[Player]:
        """Register a racer; returns None when the roster is full."""
        next_state, player = state_machine.add_player(
            self._state, first_name, gamer_tag
        )
        self._apply(next_state)
        return player

    def remove_player(self, player_id: str) -> None:
        self._apply(state_machine.remove_player(self._state, player_id))

    # ========== Phase Transitions ==========

    def start_championship(self) -> List[Race]:
        """Schedule the championship and return its races."""
        self._apply(state_machine.start_championship(self._state, rng=self.rng))
        return self.championship_races

    def record_race_result(self, race_id: str, positions: Mapping[str, Any]) -> Race:
        """Overwrite a race's results and return the updated race."""
        self._apply(state_machine.record_race_result(self._state, race_id, positions))
        return self._state.find_race(race_id)

    def start_semi_finals(self) -> Tuple[SemiFinalSession, SemiFinalSession]:
        self._apply(state_machine.start_semi_finals(self._state))
        return self.semi_finals

    def toggle_qualifier(self, session_id: str, player_id: str) -> List[str]:
        """Toggle a semi-final pick and return the session's selection."""
        self._apply(
            state_machine.toggle_qualifier(self._state, session_id, player_id)
        )
        return list(self._state.semi_finals[session_id].manual_qualifiers)

    def start_finals(self) -> List[Race]:
        self._apply(state_machine.start_finals(self._state))
        return self.final_races

    def complete(self) -> Optional[Standing]:
        """Finish the tournament and return the champion's final standing."""
        self._apply(state_machine.complete_tournament(self._state))
        return self.champion()

    def reset_all(self) -> None:
        self._apply(state_machine.reset_all(self._state))

    # ========== Standings ==========

    def get_standings(self) -> List[Player]:
        """Championship leaderboard, best first."""
        return rank_players(self._state.players)

    def get_session_standings(self, session_id: str) -> List[Standing]:
        return session_standings(self._state.semi_finals[session_id])

    def get_final_standings(self) -> List[Standing]:
        return final_standings(self._state.final_races)

    def champion(self) -> Optional[Standing]:
        return state_machine.champion(self._state)

    def get_player(self, player_id: str) -> Optional[Player]:
        return self._state.get_player(player_id)

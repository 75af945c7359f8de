"""Phase transitions for a Kart Cup tournament.

Registration -> Championship -> SemiFinals -> Finals -> Completed.

Each function takes the current ``TournamentState`` and returns the next one.
The input state is never modified: work happens on a deep copy that is only
returned once every guard has passed, so a rejected operation leaves the
caller's state exactly as it was. Championship standings are recomputed from
the full race list on every result change.
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
from collections import Counter
from typing import Any, Dict, Mapping, Optional, Tuple

from kartcup.constants import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    QUALIFIERS_PER_SESSION,
)
from kartcup.exceptions import (
    IncompleteRacesException,
    InvalidPositionException,
    QualifierSelectionException,
    RaceNotFoundException,
    RosterSizeException,
    SessionNotFoundException,
    TournamentStateException,
)
from kartcup.models import Phase, Player, Race, Standing, TournamentState
from kartcup.utils import setup_logger
from kartcup.utils.validation import validate_player_strict, validate_position_strict

from .qualifiers import (
    build_final_races,
    get_qualifiers,
    seed_semi_finals,
    select_finalists,
)
from .scheduler import generate_schedule
from .scoring import final_standings, recompute_player_standings

logger = setup_logger(__name__)


def _require_phase(state: TournamentState, phase: Phase, action: str) -> None:
    if state.phase is not phase:
        raise TournamentStateException(
            f"Cannot {action} during {state.phase.value}; "
            f"only allowed during {phase.value}"
        )


def new_tournament() -> TournamentState:
    """Empty tournament in the registration phase."""
    return TournamentState()


def reset_all(state: TournamentState) -> TournamentState:
    """Discard everything and start over with an empty tournament.

    Only a finished tournament can be reset: either ``COMPLETED`` or
    ``FINALS`` with every final race recorded.

    Raises:
        TournamentStateException: Before the finals are over
    """
    finals_over = state.phase is Phase.FINALS and bool(state.final_races) and all(
        r.is_completed for r in state.final_races
    )
    if state.phase is not Phase.COMPLETED and not finals_over:
        raise TournamentStateException(
            f"Cannot reset during {state.phase.value}; "
            "finish the grand final first"
        )

    logger.info("Tournament reset to an empty state")
    return new_tournament()


# ========== Registration ==========


def add_player(
    state: TournamentState, first_name: str, gamer_tag: str
) -> Tuple[TournamentState, Optional[Player]]:
    """Register a racer.

    Returns:
        Tuple of (new state, new player). When the roster is already full the
        original state and ``None`` are returned.

    Raises:
        TournamentStateException: Outside registration
        InvalidPlayerDataException: If name or tag is empty
    """
    _require_phase(state, Phase.REGISTRATION, "add players")
    first_name, gamer_tag = validate_player_strict(first_name, gamer_tag)

    if len(state.players) >= MAX_PLAYERS:
        logger.info(f"Roster full ({MAX_PLAYERS}); ignoring {gamer_tag}")
        return state, None

    player = Player(first_name=first_name, gamer_tag=gamer_tag)
    next_state = state.copy()
    next_state.players.append(player)
    logger.info(f"Added player: {player.gamer_tag} ({player.id})")
    return next_state, player


def remove_player(state: TournamentState, player_id: str) -> TournamentState:
    """Remove a racer from the roster. Unknown ids are ignored."""
    _require_phase(state, Phase.REGISTRATION, "remove players")

    if state.get_player(player_id) is None:
        logger.debug(f"Remove ignored, no player {player_id}")
        return state

    next_state = state.copy()
    next_state.players = [p for p in next_state.players if p.id != player_id]
    logger.info(f"Removed player {player_id}")
    return next_state


# ========== Championship ==========


def start_championship(
    state: TournamentState, rng: Optional[random.Random] = None
) -> TournamentState:
    """Close registration and schedule the championship races.

    Raises:
        RosterSizeException: With fewer than MIN_PLAYERS registered
    """
    _require_phase(state, Phase.REGISTRATION, "start the championship")
    if len(state.players) < MIN_PLAYERS:
        raise RosterSizeException(f"Need at least {MIN_PLAYERS} players to start.")

    next_state = state.copy()
    next_state.championship_races = generate_schedule(next_state.players, rng=rng)
    next_state.players = recompute_player_standings(
        next_state.players, next_state.championship_races
    )
    next_state.phase = Phase.CHAMPIONSHIP
    logger.info(
        f"Championship started: {len(next_state.players)} players, "
        f"{len(next_state.championship_races)} races"
    )
    return next_state


def _phase_of_race(state: TournamentState, race_id: str) -> Optional[Phase]:
    if any(r.id == race_id for r in state.championship_races):
        return Phase.CHAMPIONSHIP
    for session in state.semi_finals.values():
        if any(r.id == race_id for r in session.races):
            return Phase.SEMI_FINALS
    if any(r.id == race_id for r in state.final_races):
        return Phase.FINALS
    return None


def _validate_results(race: Race, positions: Mapping[str, Any]) -> Dict[str, int]:
    results = {}
    for player_id, position in positions.items():
        if player_id not in race.player_ids:
            raise InvalidPositionException(
                f"Player {player_id} is not racing in {race.name}"
            )
        results[player_id] = validate_position_strict(position)

    duplicates = [pos for pos, n in Counter(results.values()).items() if n > 1]
    if duplicates:
        logger.warning(f"{race.name}: duplicate positions recorded {sorted(duplicates)}")
    return results


def record_race_result(
    state: TournamentState, race_id: str, positions: Mapping[str, Any]
) -> TournamentState:
    """Replace a race's results and recompute standings.

    The previous results of the race are discarded entirely. The race is
    complete once every participant has a position.

    Args:
        state: Current state
        race_id: Race to update, from the current phase
        positions: Finish position per participant

    Raises:
        RaceNotFoundException: If no race has this id
        TournamentStateException: If the race belongs to another phase
        InvalidPositionException: For a non-participant or out-of-range position
    """
    race_phase = _phase_of_race(state, race_id)
    if race_phase is None:
        raise RaceNotFoundException(f"No race with id {race_id}")
    _require_phase(state, race_phase, f"record results for {race_id}")

    next_state = state.copy()
    race = next_state.find_race(race_id)
    race.results = _validate_results(race, positions)
    race.is_completed = race.has_all_results()

    next_state.players = recompute_player_standings(
        next_state.players, next_state.championship_races
    )
    logger.info(
        f"Recorded {len(race.results)}/{len(race.player_ids)} results for "
        f"{race.name} (completed: {race.is_completed})"
    )
    return next_state


# ========== Semi-finals ==========


def start_semi_finals(state: TournamentState) -> TournamentState:
    """Seed the top eight championship players into the semi-finals.

    Raises:
        IncompleteRacesException: While any championship race has no result
    """
    _require_phase(state, Phase.CHAMPIONSHIP, "start the semi-finals")
    pending = [r.name for r in state.championship_races if not r.is_completed]
    if pending:
        raise IncompleteRacesException(
            f"Complete all races to proceed ({len(pending)} remaining)"
        )

    next_state = state.copy()
    qualifiers = get_qualifiers(next_state.players)
    session_a, session_b = seed_semi_finals(qualifiers)
    next_state.semi_finals = {session_a.id: session_a, session_b.id: session_b}
    next_state.phase = Phase.SEMI_FINALS
    logger.info(f"Semi-finals started with {len(qualifiers)} qualifiers")
    return next_state


def toggle_qualifier(
    state: TournamentState, session_id: str, player_id: str
) -> TournamentState:
    """Select or deselect a player to advance from a semi-final session.

    Selecting a third player while two are already picked is ignored.

    Raises:
        SessionNotFoundException: For an unknown session id
        QualifierSelectionException: If the player is not in the session
    """
    _require_phase(state, Phase.SEMI_FINALS, "select qualifiers")
    session = state.semi_finals.get(session_id)
    if session is None:
        raise SessionNotFoundException(f"No semi-final session {session_id}")
    if player_id not in session.player_ids:
        raise QualifierSelectionException(
            f"Player {player_id} is not in {session.name}"
        )

    selected = player_id in session.manual_qualifiers
    if not selected and len(session.manual_qualifiers) >= QUALIFIERS_PER_SESSION:
        logger.debug(f"{session.name} already has {QUALIFIERS_PER_SESSION} qualifiers")
        return state

    next_state = state.copy()
    next_session = next_state.semi_finals[session_id]
    if selected:
        next_session.manual_qualifiers.remove(player_id)
    else:
        next_session.manual_qualifiers.append(player_id)
    logger.info(
        f"{session.name}: {'deselected' if selected else 'selected'} {player_id}"
    )
    return next_state


# ========== Finals ==========


def start_finals(state: TournamentState) -> TournamentState:
    """Move the four picked qualifiers into the grand final.

    Raises:
        QualifierSelectionException: Unless both sessions have exactly two picks
    """
    _require_phase(state, Phase.SEMI_FINALS, "start the finals")
    for session in state.semi_finals.values():
        if len(session.manual_qualifiers) != QUALIFIERS_PER_SESSION:
            raise QualifierSelectionException(
                f"Please select exactly {QUALIFIERS_PER_SESSION} qualifiers "
                "from each Semi-Final session."
            )

    next_state = state.copy()
    finalists = select_finalists(next_state.session_a, next_state.session_b)
    next_state.final_races = build_final_races(finalists)
    next_state.phase = Phase.FINALS
    logger.info(f"Finals started: {', '.join(finalists)}")
    return next_state


def champion(state: TournamentState) -> Optional[Standing]:
    """Winner of the grand final, once every final race is complete."""
    if not state.final_races or not all(r.is_completed for r in state.final_races):
        return None
    standings = final_standings(state.final_races)
    return standings[0] if standings else None


def complete_tournament(state: TournamentState) -> TournamentState:
    """Close the finals once all final races are complete.

    Raises:
        IncompleteRacesException: While any final race has no result
    """
    _require_phase(state, Phase.FINALS, "complete the tournament")
    if not all(r.is_completed for r in state.final_races):
        raise IncompleteRacesException("Complete all final races to finish")

    next_state = state.copy()
    next_state.phase = Phase.COMPLETED
    winner = champion(next_state)
    logger.info(f"Tournament completed, champion: {winner.player_id if winner else None}")
    return next_state

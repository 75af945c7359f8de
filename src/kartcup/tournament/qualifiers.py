"""Qualifier ranking and bracket seeding.

This module ranks the championship field, extracts the top eight and
cross-seeds them into the two semi-final sessions, then builds the grand
final from the organiser's picks.
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

import functools
from typing import List, Sequence, Tuple

from kartcup.constants import (
    FINAL_RACE_ID,
    FINAL_RACE_NAME,
    FINAL_RACES,
    QUALIFIER_COUNT,
    SEMI_FINAL_RACE_ID,
    SEMI_FINAL_RACE_NAME,
    SEMI_FINAL_RACES,
    SESSION_A_ID,
    SESSION_A_SEEDS,
    SESSION_B_ID,
    SESSION_B_SEEDS,
    SESSION_NAMES,
)
from kartcup.models import Player, Race, SemiFinalSession
from kartcup.type_hints import Seeding
from kartcup.utils import setup_logger

logger = setup_logger(__name__)


def _compare_players(entry1: Tuple[int, Player], entry2: Tuple[int, Player]) -> int:
    """Compare two (roster index, player) entries for ranking order.

    Returns:
        -1 if entry1 ranks higher, 1 if entry2 ranks higher, 0 if equal
    """
    index1, p1 = entry1
    index2, p2 = entry2

    # Compare scores
    if p1.score != p2.score:
        return -1 if p1.score > p2.score else 1

    # Best single finish; no races counts as the placeholder position
    if p1.best_position != p2.best_position:
        return -1 if p1.best_position < p2.best_position else 1

    # Registration order
    if index1 != index2:
        return -1 if index1 < index2 else 1

    return 0


def rank_players(players: Sequence[Player]) -> List[Player]:
    """Sort the roster by championship standing, best first.

    Order: score descending, then best (lowest) single position, then
    registration order.
    """
    ranked = sorted(
        enumerate(players), key=functools.cmp_to_key(_compare_players)
    )
    return [player for _, player in ranked]


def get_qualifiers(
    players: Sequence[Player], count: int = QUALIFIER_COUNT
) -> List[Player]:
    """Top ``count`` players of the ranking. Shorter rosters are not padded."""
    return rank_players(players)[:count]


def seed_sessions(qualifiers: Sequence[Player]) -> Seeding:
    """Cross-seed ranked qualifiers into the two sessions.

    Session A gets seeds 1, 8, 3, 6 and session B gets 2, 7, 4, 5. Seeds
    beyond the number of qualifiers are left out.

    Returns:
        Tuple of (session A player ids, session B player ids)
    """
    session_a = [qualifiers[i].id for i in SESSION_A_SEEDS if i < len(qualifiers)]
    session_b = [qualifiers[i].id for i in SESSION_B_SEEDS if i < len(qualifiers)]
    return session_a, session_b


def _create_semi_final_races(session_id: str, player_ids: List[str]) -> List[Race]:
    return [
        Race(
            id=SEMI_FINAL_RACE_ID.format(session_id=session_id, number=number),
            name=SEMI_FINAL_RACE_NAME.format(number=number),
            player_ids=list(player_ids),
        )
        for number in range(1, SEMI_FINAL_RACES + 1)
    ]


def seed_semi_finals(
    qualifiers: Sequence[Player],
) -> Tuple[SemiFinalSession, SemiFinalSession]:
    """Build both semi-final sessions, each with its two races.

    Args:
        qualifiers: Ranked qualifiers, best first

    Returns:
        Tuple of (Semi-Final A, Semi-Final B)
    """
    seeded_a, seeded_b = seed_sessions(qualifiers)
    sessions = tuple(
        SemiFinalSession(
            id=session_id,
            name=SESSION_NAMES[session_id],
            player_ids=player_ids,
            races=_create_semi_final_races(session_id, player_ids),
        )
        for session_id, player_ids in (
            (SESSION_A_ID, seeded_a),
            (SESSION_B_ID, seeded_b),
        )
    )
    logger.info(
        f"Seeded semi-finals: A={len(seeded_a)} players, B={len(seeded_b)} players"
    )
    return sessions


def select_finalists(
    session_a: SemiFinalSession, session_b: SemiFinalSession
) -> List[str]:
    """Session A's picks followed by session B's, in selection order."""
    return list(session_a.manual_qualifiers) + list(session_b.manual_qualifiers)


def build_final_races(finalists: Sequence[str]) -> List[Race]:
    """Create the grand final races, every finalist in each one."""
    return [
        Race(
            id=FINAL_RACE_ID.format(number=number),
            name=FINAL_RACE_NAME.format(number=number),
            player_ids=list(finalists),
        )
        for number in range(1, FINAL_RACES + 1)
    ]

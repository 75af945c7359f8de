"""Points and standings calculation.

Race results are the only source of truth. Every standing is a pure
aggregation over a set of races and is rebuilt from scratch whenever a result
changes, so editing a race replaces its previous contribution instead of
adding to it.
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

import dataclasses
import functools
from typing import Iterable, List, Sequence, Tuple

from kartcup.constants import POINTS_TABLE
from kartcup.models import Player, Race, SemiFinalSession, Standing
from kartcup.utils import setup_logger

logger = setup_logger(__name__)


def get_points(position: int) -> int:
    """Points awarded for a finish position.

    Positions below 1 or past the end of the points table score nothing.
    """
    if position < 1 or position > len(POINTS_TABLE):
        return 0
    return POINTS_TABLE[position - 1]


def compute_standing(player_id: str, races: Iterable[Race]) -> Standing:
    """Aggregate one player's results over ``races``.

    Args:
        player_id: Player to aggregate
        races: Races of a single phase, in schedule order

    Returns:
        Standing with total points, races played and positions in race order
    """
    score = 0
    positions: List[int] = []
    for race in races:
        position = race.results.get(player_id)
        if position is None:
            continue
        score += get_points(position)
        positions.append(position)

    return Standing(
        player_id=player_id,
        score=score,
        races_played=len(positions),
        positions=positions,
    )


def recompute_player_standings(
    players: Sequence[Player], races: Sequence[Race]
) -> List[Player]:
    """Rebuild championship score, races played and positions for every player.

    Returns new Player objects; the ones passed in are not modified.
    """
    updated = []
    for player in players:
        standing = compute_standing(player.id, races)
        updated.append(
            dataclasses.replace(
                player,
                score=standing.score,
                races_played=standing.races_played,
                positions=list(standing.positions),
            )
        )
    logger.debug(f"Recomputed standings for {len(updated)} players")
    return updated


def _compare_standings(s1: Standing, s2: Standing) -> int:
    """Compare two standings.

    Returns:
        -1 if s1 ranks higher, 1 if s2 ranks higher, 0 if equal
    """
    if s1.score != s2.score:
        return -1 if s1.score > s2.score else 1

    if s1.best_position != s2.best_position:
        return -1 if s1.best_position < s2.best_position else 1

    return 0


def rank_standings(
    player_ids: Sequence[str], races: Sequence[Race]
) -> List[Standing]:
    """Standings for ``player_ids`` over ``races``, best first.

    Ties on score are broken by best single position; anything still tied
    keeps the order of ``player_ids`` (the sort is stable).
    """
    standings = [compute_standing(pid, races) for pid in player_ids]
    return sorted(standings, key=functools.cmp_to_key(_compare_standings))


def session_standings(session: SemiFinalSession) -> List[Standing]:
    """Leaderboard of a semi-final session, counting only its own races."""
    return rank_standings(session.player_ids, session.races)


def final_standings(final_races: Sequence[Race]) -> List[Standing]:
    """Leaderboard of the grand final, counting only the final races."""
    if not final_races:
        return []
    return rank_standings(final_races[0].player_ids, final_races)


def progress(races: Sequence[Race]) -> Tuple[int, int]:
    """Completed race count and rounded completion percentage."""
    if not races:
        return 0, 0
    completed = sum(1 for r in races if r.is_completed)
    return completed, round(completed * 100 / len(races))

"""Championship schedule generation.

Every player races exactly ``RACES_PER_PLAYER`` times in races of up to
``RACE_SIZE``. Finding a perfect schedule exhaustively is expensive for
arbitrary rosters, so the generator shuffles and fills greedily, retrying a
bounded number of times. When every attempt collides it runs one last pass in
loose mode, which never fails but may put the same player twice in a race.
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

import itertools
import math
import random
from collections import Counter
from typing import List, Optional, Sequence

from kartcup.constants import (
    CHAMPIONSHIP_RACE_ID,
    CHAMPIONSHIP_RACE_NAME,
    MAX_SCHEDULE_ATTEMPTS,
    RACE_SIZE,
    RACES_PER_PLAYER,
)
from kartcup.exceptions import SchedulingException, ValidationException
from kartcup.models import Player, Race
from kartcup.utils import setup_logger

logger = setup_logger(__name__)


def race_count_for(num_players: int) -> int:
    """Number of championship races needed for ``num_players`` players."""
    return math.ceil(num_players * RACES_PER_PLAYER / RACE_SIZE)


def generate_schedule(
    players: Sequence[Player],
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_SCHEDULE_ATTEMPTS,
) -> List[Race]:
    """Generate the championship races for a roster.

    Args:
        players: Registered players
        rng: Random source; a fresh unseeded one when omitted
        max_attempts: Strict attempts before falling back to loose mode

    Returns:
        ceil(3N / 4) races, every player id in exactly three of them

    Raises:
        ValidationException: If the roster is empty
    """
    if not players:
        raise ValidationException("Cannot schedule races for an empty roster")

    rng = rng if rng is not None else random.Random()
    player_ids = [p.id for p in players]
    race_count = race_count_for(len(player_ids))

    for attempt in range(1, max_attempts + 1):
        try:
            races = _attempt_schedule(player_ids, race_count, rng)
        except SchedulingException as e:
            logger.debug(f"Schedule attempt {attempt} failed: {e}")
            continue

        logger.info(
            f"Generated {len(races)} championship races for {len(player_ids)} "
            f"players (attempt {attempt})"
        )
        logger.debug(f"Repeat pairings in schedule: {count_repeat_pairings(races)}")
        return races

    logger.warning(
        f"No collision-free schedule after {max_attempts} attempts; "
        "falling back to loose mode"
    )
    return _attempt_schedule(player_ids, race_count, rng, loose_mode=True)


def _attempt_schedule(
    player_ids: Sequence[str],
    race_count: int,
    rng: random.Random,
    loose_mode: bool = False,
) -> List[Race]:
    """Run one shuffle-and-fill pass.

    Raises:
        SchedulingException: On a forced collision, unless ``loose_mode``
    """
    pool = [pid for pid in player_ids for _ in range(RACES_PER_PLAYER)]
    rng.shuffle(pool)

    races = []
    for index in range(race_count):
        race_players: List[str] = []
        slot_count = min(RACE_SIZE, len(pool))

        for _ in range(slot_count):
            candidate = next(
                (i for i, pid in enumerate(pool) if pid not in race_players), None
            )
            if candidate is None:
                if not loose_mode:
                    raise SchedulingException(
                        f"Forced collision while filling race {index + 1}"
                    )
                # Every remaining entry is already in this race
                candidate = 0
                logger.warning(
                    f"Loose mode placed {pool[0]} twice in race {index + 1}"
                )
            race_players.append(pool.pop(candidate))

        number = index + 1
        races.append(
            Race(
                id=CHAMPIONSHIP_RACE_ID.format(number=number),
                name=CHAMPIONSHIP_RACE_NAME.format(number=number),
                player_ids=race_players,
            )
        )

    return races


def count_repeat_pairings(races: Sequence[Race]) -> int:
    """Count player pairs that meet in more than one race."""
    meetings: Counter = Counter()
    for race in races:
        for pair in itertools.combinations(sorted(set(race.player_ids)), 2):
            meetings[frozenset(pair)] += 1
    return sum(1 for count in meetings.values() if count > 1)

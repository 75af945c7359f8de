"""Shared helpers for the Kart Cup test suite."""

import random

import pytest

from kartcup.models import Phase, Player, TournamentState
from kartcup.tournament import state_machine


def make_players(count, prefix="P"):
    """Players with predictable ids P1, P2, ..."""
    return [
        Player(first_name=f"Racer{i}", gamer_tag=f"Tag{i}", id=f"{prefix}{i}")
        for i in range(1, count + 1)
    ]


def register(count):
    """Registration-phase state with ``count`` racers."""
    state = state_machine.new_tournament()
    for i in range(1, count + 1):
        state, _ = state_machine.add_player(state, f"Racer{i}", f"Tag{i}")
    return state


def finish_race(state, race):
    """Record positions 1..n in participant order."""
    positions = {pid: i for i, pid in enumerate(race.player_ids, 1)}
    return state_machine.record_race_result(state, race.id, positions)


def play_championship(count, seed=7):
    """State with a finished championship for ``count`` racers."""
    state = state_machine.start_championship(register(count), rng=random.Random(seed))
    for race in list(state.championship_races):
        state = finish_race(state, race)
    assert state.phase is Phase.CHAMPIONSHIP
    return state


@pytest.fixture
def rng():
    return random.Random(2025)


@pytest.fixture
def empty_state():
    return TournamentState()

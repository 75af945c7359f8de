import json
import random

import pytest

from kartcup.exceptions import (
    FileLoadException,
    RosterSizeException,
    TournamentStateException,
)
from kartcup.models import Phase, TournamentState
from kartcup.storage import load_state, save_state
from kartcup.tournament import Tournament

from conftest import play_championship


def _register(tournament, count):
    return [tournament.add_player(f"Racer{i}", f"Tag{i}") for i in range(count)]


def _finish(tournament, races):
    for race in races:
        tournament.record_race_result(
            race.id, {pid: i for i, pid in enumerate(race.player_ids, 1)}
        )


def test_full_tournament_through_facade():
    tournament = Tournament(rng=random.Random(8))
    _register(tournament, 8)

    races = tournament.start_championship()
    assert len(races) == 6
    _finish(tournament, races)

    leaderboard = tournament.get_standings()
    assert leaderboard[0].score >= leaderboard[-1].score
    assert sum(p.races_played for p in leaderboard) == 24

    session_a, session_b = tournament.start_semi_finals()
    assert len(session_a.player_ids) == len(session_b.player_ids) == 4
    for session in (session_a, session_b):
        _finish(tournament, session.races)
        for standing in tournament.get_session_standings(session.id)[:2]:
            tournament.toggle_qualifier(session.id, standing.player_id)

    final_races = tournament.start_finals()
    assert len(final_races) == 3
    _finish(tournament, final_races)

    winner = tournament.complete()
    assert tournament.phase is Phase.COMPLETED
    assert winner.player_id == final_races[0].player_ids[0]
    assert tournament.get_final_standings()[0] == winner

    tournament.reset_all()
    assert tournament.phase is Phase.REGISTRATION
    assert tournament.players == []


def test_failed_transition_keeps_state():
    tournament = Tournament()
    _register(tournament, 2)
    before = tournament.state

    with pytest.raises(RosterSizeException):
        tournament.start_championship()

    assert tournament.state is before


def test_reset_refused_during_championship():
    tournament = Tournament(state=play_championship(4))
    before = tournament.state

    with pytest.raises(TournamentStateException):
        tournament.reset_all()

    assert tournament.state is before
    assert tournament.phase is Phase.CHAMPIONSHIP


def test_toggle_qualifier_returns_selection():
    tournament = Tournament(state=_semi_final_state())
    player_ids = tournament.semi_finals[0].player_ids

    assert tournament.toggle_qualifier("s1", player_ids[0]) == [player_ids[0]]
    assert tournament.toggle_qualifier("s1", player_ids[1]) == player_ids[:2]
    assert tournament.toggle_qualifier("s1", player_ids[2]) == player_ids[:2]
    assert tournament.toggle_qualifier("s1", player_ids[0]) == [player_ids[1]]


def _semi_final_state():
    tournament = Tournament(state=play_championship(8))
    tournament.start_semi_finals()
    return tournament.state


# ========== Persistence ==========


def test_state_survives_json(tmp_path):
    state = _semi_final_state()
    path = tmp_path / "cup.json"

    save_state(state, path)
    loaded = load_state(path)

    assert loaded == state
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["phase"] == "SEMI_FINALS"
    assert set(data["semi_finals"]) == {"s1", "s2"}


def test_missing_file_gives_empty_state(tmp_path):
    assert load_state(tmp_path / "absent.json") == TournamentState()


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FileLoadException):
        load_state(path)


def test_facade_saves_after_every_change(tmp_path):
    path = tmp_path / "cup.json"
    tournament = Tournament(save_path=path)

    player = tournament.add_player("Yoshi", "GreenMachine")

    resumed = Tournament.load(path)
    assert [p.id for p in resumed.players] == [player.id]
    assert resumed.get_player(player.id).registered_at == player.registered_at

from datetime import timezone

from kartcup.constants import NO_POSITION_PLACEHOLDER
from kartcup.models import Phase, Player, Race, SemiFinalSession, TournamentState


def test_player_best_position():
    player = Player(first_name="Wario", gamer_tag="Garlic")
    assert player.best_position == NO_POSITION_PLACEHOLDER

    player.positions = [6, 2, 9]
    assert player.best_position == 2
    assert player.display_name == "Garlic (Wario)"


def test_player_from_dict_assumes_utc_for_naive_timestamps():
    player = Player.from_dict(
        {
            "id": "p1",
            "first_name": "Koopa",
            "gamer_tag": "Shell",
            "registered_at": "2025-03-01T09:30:00",
        }
    )

    assert player.registered_at.tzinfo is not None
    assert player.registered_at.utcoffset() == timezone.utc.utcoffset(None)
    assert player.registered_at.hour == 9
    assert player.score == 0 and player.positions == []


def test_race_completion_check():
    race = Race(id="gp-1", name="Grand Prix 1", player_ids=["a", "b"], results={"a": 1})
    assert not race.has_all_results()

    race.results["b"] = 2
    assert race.has_all_results()


def test_race_from_dict_normalises_positions():
    race = Race.from_dict(
        {"id": "gp-2", "player_ids": ["a"], "results": {"a": "3"}, "is_completed": True}
    )

    assert race.name == "gp-2"
    assert race.results == {"a": 3}


def test_new_state_is_empty_registration():
    state = TournamentState()

    assert state.phase is Phase.REGISTRATION
    assert state.session_a.name == "Semi-Final A"
    assert state.session_b.name == "Semi-Final B"
    assert state.all_races() == []
    assert state.find_race("gp-1") is None


def test_copy_is_independent():
    state = TournamentState(players=[Player(first_name="Toad", gamer_tag="Mushroom")])

    clone = state.copy()
    clone.players[0].positions.append(1)

    assert state.players[0].positions == []


def test_session_races_completed():
    session = SemiFinalSession.empty("s1")
    assert not session.races_completed

    session.races = [
        Race(id="s1-gp1", name="Semi GP 1", player_ids=["a"], is_completed=True),
        Race(id="s1-gp2", name="Semi GP 2", player_ids=["a"]),
    ]
    assert not session.races_completed

    session.races[1].is_completed = True
    assert session.races_completed

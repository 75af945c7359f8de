from kartcup.models import Player, SemiFinalSession
from kartcup.tournament.qualifiers import (
    build_final_races,
    get_qualifiers,
    rank_players,
    seed_semi_finals,
    seed_sessions,
    select_finalists,
)

from conftest import make_players


def _player(player_id, score, positions):
    return Player(
        first_name=player_id,
        gamer_tag=player_id,
        id=player_id,
        score=score,
        races_played=len(positions),
        positions=positions,
    )


def test_score_tie_goes_to_best_single_position():
    players = [
        _player("a", 50, [2]),
        _player("b", 50, [1]),
        _player("c", 30, [5]),
    ]

    assert [p.id for p in rank_players(players)] == ["b", "a", "c"]


def test_player_without_races_loses_position_tie_break():
    players = [
        _player("none", 0, []),
        _player("last", 0, [24]),
    ]

    assert [p.id for p in rank_players(players)] == ["last", "none"]


def test_full_tie_keeps_registration_order():
    players = [_player("x", 20, [3, 4]), _player("y", 20, [4, 3]), _player("z", 20, [3])]

    assert [p.id for p in rank_players(players)] == ["x", "y", "z"]
    assert [p.id for p in rank_players(list(reversed(players)))] == ["z", "y", "x"]


def test_rank_players_does_not_reorder_input():
    players = [_player("a", 1, [11]), _player("b", 15, [1])]
    rank_players(players)
    assert [p.id for p in players] == ["a", "b"]


def test_top_eight_extraction():
    players = [_player(f"p{i}", i, [12]) for i in range(12)]

    qualifiers = get_qualifiers(players)

    assert [p.id for p in qualifiers] == [f"p{i}" for i in range(11, 3, -1)]


def test_small_roster_is_not_padded():
    assert len(get_qualifiers(make_players(5))) == 5


def test_cross_seeding_with_eight_qualifiers():
    session_a, session_b = seed_sessions(make_players(8))

    assert session_a == ["P1", "P8", "P3", "P6"]
    assert session_b == ["P2", "P7", "P4", "P5"]


def test_missing_seeds_are_omitted():
    assert seed_sessions(make_players(4)) == (["P1", "P3"], ["P2", "P4"])
    assert seed_sessions(make_players(6)) == (["P1", "P3", "P6"], ["P2", "P4", "P5"])


def test_semi_final_sessions_get_two_races():
    session_a, session_b = seed_semi_finals(make_players(8))

    assert (session_a.id, session_a.name) == ("s1", "Semi-Final A")
    assert (session_b.id, session_b.name) == ("s2", "Semi-Final B")
    assert [r.id for r in session_a.races] == ["s1-gp1", "s1-gp2"]
    assert [r.name for r in session_b.races] == ["Semi GP 1", "Semi GP 2"]
    for session in (session_a, session_b):
        assert session.manual_qualifiers == []
        assert all(r.player_ids == session.player_ids for r in session.races)


def test_finalists_keep_session_and_selection_order():
    session_a = SemiFinalSession(id="s1", name="A", manual_qualifiers=["P6", "P1"])
    session_b = SemiFinalSession(id="s2", name="B", manual_qualifiers=["P2", "P7"])

    assert select_finalists(session_a, session_b) == ["P6", "P1", "P2", "P7"]


def test_final_races():
    races = build_final_races(["a", "b", "c", "d"])

    assert [r.id for r in races] == ["f-gp1", "f-gp2", "f-gp3"]
    assert [r.name for r in races] == ["Final GP 1", "Final GP 2", "Final GP 3"]
    assert all(r.player_ids == ["a", "b", "c", "d"] for r in races)

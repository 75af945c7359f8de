from kartcup.models import Race, SemiFinalSession
from kartcup.tournament.scoring import (
    compute_standing,
    final_standings,
    get_points,
    progress,
    recompute_player_standings,
    session_standings,
)

from conftest import make_players


def test_points_table_is_exact():
    expected = {1: 15, 2: 12, 3: 10, 4: 8, 5: 7, 6: 6, 7: 5, 8: 4, 9: 3, 10: 2, 11: 1}
    for position, points in expected.items():
        assert get_points(position) == points
    assert get_points(12) == 0
    assert get_points(13) == 0
    assert get_points(24) == 0


def test_points_for_invalid_positions_are_zero():
    assert get_points(0) == 0
    assert get_points(-3) == 0


def test_points_are_idempotent():
    assert [get_points(3) for _ in range(3)] == [10, 10, 10]


def test_standing_follows_race_list_order():
    races = [
        Race(id="gp-1", name="GP 1", player_ids=["a", "b"], results={"a": 4}),
        Race(id="gp-2", name="GP 2", player_ids=["a", "c"]),
        Race(id="gp-3", name="GP 3", player_ids=["a", "b"], results={"a": 1, "b": 2}),
    ]

    standing = compute_standing("a", races)

    assert standing.score == 8 + 15
    assert standing.races_played == 2
    assert standing.positions == [4, 1]


def test_recompute_is_idempotent_and_does_not_touch_inputs():
    players = make_players(2)
    races = [
        Race(
            id="gp-1",
            name="GP 1",
            player_ids=["P1", "P2"],
            results={"P1": 2, "P2": 1},
            is_completed=True,
        )
    ]

    first = recompute_player_standings(players, races)
    second = recompute_player_standings(first, races)

    assert first == second
    assert [p.score for p in first] == [12, 15]
    assert players[0].score == 0
    assert players[0].positions == []


def test_recompute_replaces_edited_results():
    players = make_players(2)
    race = Race(id="gp-1", name="GP 1", player_ids=["P1", "P2"], results={"P1": 1})
    players = recompute_player_standings(players, [race])
    assert players[0].score == 15

    race.results = {"P1": 3}
    players = recompute_player_standings(players, [race])

    assert players[0].score == 10
    assert players[0].races_played == 1
    assert players[0].positions == [3]


def test_session_standings_only_count_session_races():
    session = SemiFinalSession(
        id="s1",
        name="Semi-Final A",
        player_ids=["P1", "P2", "P3"],
        races=[
            Race(id="s1-gp1", name="Semi GP 1", player_ids=["P1", "P2", "P3"],
                 results={"P1": 3, "P2": 1, "P3": 2}),
            Race(id="s1-gp2", name="Semi GP 2", player_ids=["P1", "P2", "P3"],
                 results={"P1": 1, "P2": 3, "P3": 2}),
        ],
    )

    standings = session_standings(session)

    # P1 and P2 tie on points and best finish; session order decides
    assert [(s.player_id, s.score) for s in standings] == [
        ("P1", 25),
        ("P2", 25),
        ("P3", 24),
    ]


def test_final_standings_break_ties_on_best_position():
    races = [
        Race(id="f-gp1", name="Final GP 1", player_ids=["b", "a"], results={"a": 1, "b": 2}),
        Race(id="f-gp2", name="Final GP 2", player_ids=["b", "a"], results={"a": 5, "b": 3}),
    ]

    standings = final_standings(races)

    # Both on 22 points; a has the better single finish
    assert [(s.player_id, s.score) for s in standings] == [("a", 22), ("b", 22)]
    assert final_standings([]) == []


def test_progress():
    races = [
        Race(id="gp-1", name="GP 1", is_completed=True),
        Race(id="gp-2", name="GP 2"),
        Race(id="gp-3", name="GP 3"),
    ]
    assert progress(races) == (1, 33)
    assert progress([]) == (0, 0)

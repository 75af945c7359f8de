"""Command-line interface for running a Kart Cup from a terminal.

Every command loads the state file, applies one operation and saves the
result back, so the tournament survives between invocations.
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

import argparse
import logging
import random
import sys
from typing import Dict, List, Optional, Sequence

from kartcup import storage
from kartcup.constants import MAX_PLAYERS, QUALIFIER_COUNT
from kartcup.exceptions import InvalidPositionException, KartCupException
from kartcup.models import Race, SemiFinalSession, Standing
from kartcup.tournament import Tournament
from kartcup.tournament.scoring import progress
from kartcup.utils import PACKAGE_LOGGER, setup_logger

logger = setup_logger(__name__)


def parse_result_pair(value: str) -> tuple:
    """Parse a ``PLAYER_ID=POSITION`` argument.

    Raises:
        argparse.ArgumentTypeError: If format is invalid

    Examples:
        >>> parse_result_pair("player_ab12=3")
        ('player_ab12', '3')
    """
    player_id, sep, position = value.partition("=")
    if not sep or not player_id.strip() or not position.strip():
        raise argparse.ArgumentTypeError(
            f"Invalid result '{value}'. Use PLAYER_ID=POSITION (e.g., 'player_ab12=3')"
        )
    return player_id.strip(), position.strip()


# ========== Output ==========


def _name(tournament: Tournament, player_id: str) -> str:
    player = tournament.get_player(player_id)
    return player.display_name if player else player_id


def print_race(tournament: Tournament, race: Race) -> None:
    status = "done" if race.is_completed else "pending"
    print(f"{race.id:<8} {race.name:<16} [{status}]")
    for player_id in race.player_ids:
        position = race.results.get(player_id, "-")
        print(f"    {_name(tournament, player_id):<20} {player_id:<20} {position}")


def print_standings(tournament: Tournament, standings: Sequence[Standing]) -> None:
    for rank, standing in enumerate(standings, 1):
        print(
            f"{rank:>3}. {_name(tournament, standing.player_id):<20} "
            f"{standing.score:>4} pts  ({standing.races_played} races)"
        )


def print_session(tournament: Tournament, session: SemiFinalSession) -> None:
    status = "races done" if session.races_completed else "racing"
    print(f"\n{session.name} ({session.id}) [{status}]")
    print("-" * 40)
    for race in session.races:
        print_race(tournament, race)
    print_standings(tournament, tournament.get_session_standings(session.id))
    picks = ", ".join(_name(tournament, pid) for pid in session.manual_qualifiers)
    print(f"Qualifiers: {picks or 'none selected'}")


# ========== Commands ==========


def cmd_add(tournament: Tournament, args: argparse.Namespace) -> int:
    player = tournament.add_player(args.first_name, args.gamer_tag)
    if player is None:
        print("Roster is full; player not added")
        return 0
    print(f"Added {player.gamer_tag} ({player.id})")
    return 0


def cmd_remove(tournament: Tournament, args: argparse.Namespace) -> int:
    tournament.remove_player(args.player_id)
    return 0


def cmd_players(tournament: Tournament, args: argparse.Namespace) -> int:
    print(f"Racers ({len(tournament.players)}/{MAX_PLAYERS})")
    for player in tournament.players:
        print(f"  {player.id:<20} {player.gamer_tag:<20} {player.first_name}")
    return 0


def cmd_start_championship(tournament: Tournament, args: argparse.Namespace) -> int:
    if args.seed is not None:
        tournament.rng = random.Random(args.seed)
    races = tournament.start_championship()
    print(f"Championship scheduled: {len(races)} races")
    return 0


def cmd_schedule(tournament: Tournament, args: argparse.Namespace) -> int:
    races = tournament.championship_races
    completed, percent = progress(races)
    print(f"Championship: {completed}/{len(races)} races complete ({percent}%)")
    for race in races:
        print_race(tournament, race)
    return 0


def cmd_record(tournament: Tournament, args: argparse.Namespace) -> int:
    positions: Dict[str, str] = dict(args.results)
    try:
        race = tournament.record_race_result(args.race_id, positions)
    except InvalidPositionException as e:
        logger.error(f"Please enter valid positions: {e}")
        return 1
    print_race(tournament, race)
    return 0


def cmd_standings(tournament: Tournament, args: argparse.Namespace) -> int:
    for rank, player in enumerate(tournament.get_standings(), 1):
        mark = "Q" if rank <= QUALIFIER_COUNT else " "
        print(
            f"{mark} {rank:>3}. {player.gamer_tag:<20} {player.score:>4} pts  "
            f"({player.races_played} races, positions {player.positions})"
        )
    print(f"Q = qualifying for the semi-finals (top {QUALIFIER_COUNT})")
    return 0


def cmd_start_semis(tournament: Tournament, args: argparse.Namespace) -> int:
    for session in tournament.start_semi_finals():
        print_session(tournament, session)
    return 0


def cmd_semis(tournament: Tournament, args: argparse.Namespace) -> int:
    for session in tournament.semi_finals:
        print_session(tournament, session)
    return 0


def cmd_toggle(tournament: Tournament, args: argparse.Namespace) -> int:
    picks = tournament.toggle_qualifier(args.session_id, args.player_id)
    print(f"{args.session_id} qualifiers: {', '.join(picks) or 'none'}")
    return 0


def cmd_start_finals(tournament: Tournament, args: argparse.Namespace) -> int:
    races = tournament.start_finals()
    print(f"Grand final: {len(races)} races")
    return cmd_finals(tournament, args)


def cmd_finals(tournament: Tournament, args: argparse.Namespace) -> int:
    for race in tournament.final_races:
        print_race(tournament, race)
    print_standings(tournament, tournament.get_final_standings())
    winner = tournament.champion()
    if winner is not None:
        print(f"\nThe winner is {_name(tournament, winner.player_id)} "
              f"with {winner.score} pts")
    return 0


def cmd_complete(tournament: Tournament, args: argparse.Namespace) -> int:
    winner = tournament.complete()
    if winner is not None:
        print(f"Champion: {_name(tournament, winner.player_id)} ({winner.score} pts)")
    return 0


def cmd_reset(tournament: Tournament, args: argparse.Namespace) -> int:
    if not args.yes:
        logger.error("Reset discards all data; pass --yes to confirm")
        return 1
    tournament.reset_all()
    print("Tournament reset")
    return 0


def cmd_status(tournament: Tournament, args: argparse.Namespace) -> int:
    state = tournament.state
    completed, percent = progress(state.all_races())
    print(f"Phase: {state.phase.value}")
    print(f"Players: {len(state.players)}")
    print(f"Races complete: {completed}/{len(state.all_races())} ({percent}%)")
    return 0


# ========== Parser ==========


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="kartcup",
        description="Run an office Mario Kart tournament",
    )
    parser.add_argument(
        "--state",
        default=None,
        help="Tournament state file (default: $KARTCUP_STATE_FILE or kartcup.json)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("add", help="Register a racer")
    p.add_argument("first_name")
    p.add_argument("gamer_tag")
    p.set_defaults(func=cmd_add)

    p = sub.add_parser("remove", help="Remove a racer during registration")
    p.add_argument("player_id")
    p.set_defaults(func=cmd_remove)

    sub.add_parser("players", help="List registered racers").set_defaults(
        func=cmd_players
    )

    p = sub.add_parser("start-championship", help="Schedule the championship")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.set_defaults(func=cmd_start_championship)

    sub.add_parser("schedule", help="Show championship races").set_defaults(
        func=cmd_schedule
    )

    p = sub.add_parser("record", help="Record finish positions for a race")
    p.add_argument("race_id")
    p.add_argument("results", nargs="+", type=parse_result_pair,
                   metavar="PLAYER_ID=POSITION")
    p.set_defaults(func=cmd_record)

    sub.add_parser("standings", help="Championship leaderboard").set_defaults(
        func=cmd_standings
    )
    sub.add_parser("start-semis", help="Seed the semi-finals").set_defaults(
        func=cmd_start_semis
    )
    sub.add_parser("semis", help="Show semi-final sessions").set_defaults(
        func=cmd_semis
    )

    p = sub.add_parser("toggle", help="Select or deselect a semi-final qualifier")
    p.add_argument("session_id", choices=["s1", "s2"])
    p.add_argument("player_id")
    p.set_defaults(func=cmd_toggle)

    sub.add_parser("start-finals", help="Start the grand final").set_defaults(
        func=cmd_start_finals
    )
    sub.add_parser("finals", help="Show the grand final").set_defaults(
        func=cmd_finals
    )
    sub.add_parser("complete", help="Close the tournament").set_defaults(
        func=cmd_complete
    )

    p = sub.add_parser("reset", help="Discard all tournament data")
    p.add_argument("--yes", action="store_true", help="Confirm the reset")
    p.set_defaults(func=cmd_reset)

    sub.add_parser("status", help="Show the current phase").set_defaults(
        func=cmd_status
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

    path = args.state if args.state is not None else storage.default_state_path()

    try:
        tournament = Tournament.load(path)
        return args.func(tournament, args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except KartCupException as e:
        logger.error(f"{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

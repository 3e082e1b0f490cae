#!/usr/bin/env python3
"""
Golf Cup Leaderboard CLI

Scores every match of a tournament file and prints team standings, the elimination
state and the status of each match.

Usage:
    python leaderboard.py --tournament data/tournament.json
    python leaderboard.py -t data/tournament.json --day 2 --output web/leaderboard.json
    python leaderboard.py -t data/tournament.json --excel leaderboard.xlsx
"""

import argparse
import logging
import sys
from pathlib import Path

from golfcup import (
    build_leaderboard,
    export_leaderboard_workbook,
    match_status_text,
    save_leaderboard,
    score_tournament,
    validate_tournament,
)
from golfcup.config import get_course, get_default_tee, get_points_config, get_tees
from golfcup.game_status import format_points
from golfcup.logging_config import setup_logging
from golfcup.tournament import load_tournament


def print_team_standings(title: str, standings) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)
    ranked = sorted(standings, key=lambda s: s.total_points, reverse=True)
    for rank, standing in enumerate(ranked, 1):
        record = f"{standing.matches_won}-{standing.matches_lost}-{standing.matches_tied}"
        print(
            f"  {rank}. {standing.team_name}: {format_points(standing.total_points)} pts "
            f"({record}, {format_points(standing.potential_remaining_points)} still available)"
        )


def main():
    parser = argparse.ArgumentParser(description="Golf Cup match scoring and leaderboard")
    parser.add_argument(
        "--tournament", "-t",
        required=True,
        help="Path to tournament JSON file",
    )
    parser.add_argument(
        "--day", "-d",
        type=int,
        default=None,
        help="Only show this fixture day (day number)",
    )
    parser.add_argument(
        "--tee",
        default=None,
        help="Tee for every match (defaults to each match's tee, then the configured default)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output path for leaderboard JSON",
    )
    parser.add_argument(
        "--excel",
        default=None,
        help="Output path for an Excel workbook",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress detailed output",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    setup_logging(level=level, log_to_file=False)

    tournament_path = Path(args.tournament)
    if not tournament_path.exists():
        print(f"❌ Tournament file not found: {tournament_path}")
        sys.exit(1)

    try:
        tournament = load_tournament(tournament_path, default_course=get_course())
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    tees = get_tees()
    errors = validate_tournament(
        tournament.players,
        tournament.teams,
        tournament.fixture_days,
        tournament.score_sheets,
        tees,
    )
    if errors:
        print(f"⚠️  {len(errors)} problem(s) in {tournament_path}:")
        for error in errors:
            print(f"   - {error}")
        sys.exit(1)

    default_tee = get_default_tee()
    for name in filter(None, (args.tee, default_tee)):
        if name not in tees:
            print(f"❌ Unknown tee: {name} (expected one of {', '.join(tees)})")
            sys.exit(1)

    config = get_points_config()
    scorecards = score_tournament(tournament, config, args.tee, tees, default_tee)
    overall = build_leaderboard(tournament, config, scorecards=scorecards)

    if args.day is not None:
        boards = [b for b in overall.day_leaderboards if b.day_number == args.day]
        if not boards:
            print(f"❌ No fixture day {args.day} in {tournament_path}")
            sys.exit(1)
    else:
        boards = overall.day_leaderboards

    if not args.quiet:
        for board in boards:
            print_team_standings(
                f"DAY {board.day_number} - {board.course_name} ({board.game_format})",
                board.team_standings,
            )
            day = tournament.fixture_day(board.day_number)
            for match in day.matches:
                scorecard = scorecards.get(match.id)
                status = match_status_text(scorecard) if scorecard else "Not started"
                sides = f"{' & '.join(match.team_a_players)} v {' & '.join(match.team_b_players)}"
                print(f"     {match.id}: {sides} - {status}")

    print_team_standings("OVERALL STANDINGS", overall.team_standings)
    print(
        f"\n  Matches played: {overall.total_matches_played}, "
        f"remaining: {overall.total_matches_remaining}"
    )
    if overall.is_winner_determined:
        print(f"  🏆 {overall.winning_team} has won the cup")

    if args.output:
        save_leaderboard(args.output, overall, scorecards)
        print(f"Leaderboard saved: {args.output}")

    if args.excel:
        names = {player_id: player.name for player_id, player in tournament.players.items()}
        export_leaderboard_workbook(args.excel, overall, scorecards, names)
        print(f"Workbook saved: {args.excel}")


if __name__ == "__main__":
    main()

"""Day and tournament leaderboards.

Leaderboards are never stored: they are rebuilt from match scorecards every time they
are asked for. Sparse data is normal here (matches not started, players without a
team), so nothing in this module raises for missing entries; a match without a
scorecard simply has not been played yet.
"""

import logging
from typing import Mapping, Optional, Sequence

from .constants import TEAM_A, TEAM_B, TIE
from .models import (
    DEFAULT_POINTS_CONFIG,
    DayLeaderboard,
    FixtureDay,
    FlightLeaderboard,
    IndividualStanding,
    Match,
    MatchResult,
    MatchScorecard,
    OverallLeaderboard,
    Player,
    PointsConfig,
    Team,
    TeamStanding,
)
from .scoring import day_points_available

logger = logging.getLogger('golfcup.standings')


def team_side(match: Match, team: Team) -> Optional[str]:
    """Which side of a match ('team-a' or 'team-b') a team's players are on, if any."""
    members = set(team.players)
    if members.intersection(match.team_a_players):
        return TEAM_A
    if members.intersection(match.team_b_players):
        return TEAM_B
    return None


def player_side(match: Match, player_id: str) -> Optional[str]:
    if player_id in match.team_a_players:
        return TEAM_A
    if player_id in match.team_b_players:
        return TEAM_B
    return None


def _result(match: Match, scorecards: Mapping[str, MatchScorecard]) -> Optional[MatchResult]:
    scorecard = scorecards.get(match.id)
    return scorecard.result if scorecard is not None else None


def _outcome(result: Optional[MatchResult], side: str) -> Optional[str]:
    """'won', 'lost' or 'tied' for a side of a complete match, None otherwise."""
    if result is None or not result.is_complete:
        return None
    if result.winning_team == TIE:
        return 'tied'
    return 'won' if result.winning_team == side else 'lost'


def _side_points(result: MatchResult, side: str) -> float:
    return result.team_a_points if side == TEAM_A else result.team_b_points


def individual_standings(
    fixture_day: FixtureDay,
    players: Mapping[str, Player],
    teams: Sequence[Team],
    scorecards: Mapping[str, MatchScorecard],
) -> list[IndividualStanding]:
    """
    Per-player totals for a day, best net score first.

    Only rostered players appear. Totals cover validated holes; players who have not
    validated a hole yet are listed last.
    """
    team_of = {player_id: team.id for team in teams for player_id in team.players}
    standings = []

    for player_id, team_id in team_of.items():
        player = players.get(player_id)
        entry = IndividualStanding(
            player_id=player_id,
            player_name=player.name if player else player_id,
            team_id=team_id,
        )

        for match in fixture_day.matches:
            side = player_side(match, player_id)
            if side is None:
                continue
            scorecard = scorecards.get(match.id)
            if scorecard is None:
                continue

            card = scorecard.player_cards.get(player_id)
            if card is not None:
                entry.gross_score += card.gross_total
                entry.net_score += card.net_total
                entry.stableford_points += card.stableford_total
            entry.thru_hole = max(entry.thru_hole, scorecard.validated_count)

            outcome = _outcome(scorecard.result, side)
            if outcome == 'won':
                entry.matches_won += 1
            elif outcome == 'lost':
                entry.matches_lost += 1
            elif outcome == 'tied':
                entry.matches_tied += 1
            elif scorecard.validated_count > 0:
                entry.is_currently_playing = True

        standings.append(entry)

    standings.sort(key=lambda e: (e.thru_hole == 0, e.net_score))
    return standings


def team_day_standing(
    fixture_day: FixtureDay,
    team: Team,
    scorecards: Mapping[str, MatchScorecard],
    config: PointsConfig = DEFAULT_POINTS_CONFIG,
) -> TeamStanding:
    """Points, record and remaining potential of one team on one day."""
    standing = TeamStanding(team_id=team.id, team_name=team.name, team_color=team.color)
    unresolved = 0

    for match in fixture_day.matches:
        side = team_side(match, team)
        if side is None:
            continue

        result = _result(match, scorecards)
        if result is None or not result.is_complete:
            unresolved += 1
            continue

        standing.total_points += _side_points(result, side)
        outcome = _outcome(result, side)
        if outcome == 'won':
            standing.matches_won += 1
        elif outcome == 'lost':
            standing.matches_lost += 1
        else:
            standing.matches_tied += 1

    standing.current_day_points = standing.total_points
    standing.potential_remaining_points = unresolved * config.points_per_match
    return standing


def day_leaderboard(
    fixture_day: FixtureDay,
    players: Mapping[str, Player],
    teams: Sequence[Team],
    scorecards: Mapping[str, MatchScorecard],
    config: PointsConfig = DEFAULT_POINTS_CONFIG,
) -> DayLeaderboard:
    """
    Build the leaderboard for a single fixture day.

    Args:
        fixture_day: The day, with its matches and flights
        players: Player lookup by id
        teams: The competing teams
        scorecards: Match scorecards by match id (missing = not started)
        config: Points per match and tie points

    Returns:
        DayLeaderboard with team standings, individual standings and flights
    """
    individuals = individual_standings(fixture_day, players, teams, scorecards)
    team_standings = [team_day_standing(fixture_day, team, scorecards, config) for team in teams]

    flights = []
    for number, flight in enumerate(fixture_day.flights, 1):
        flight_results = []
        for match_id in flight.match_ids:
            scorecard = scorecards.get(match_id)
            if scorecard is not None:
                flight_results.append(scorecard.result)
            else:
                flight_results.append(
                    MatchResult(match_id=match_id, fixture_day_id=fixture_day.id)
                )
        flights.append(
            FlightLeaderboard(
                flight_id=flight.id,
                flight_number=number,
                fixture_day_id=fixture_day.id,
                players=[e for e in individuals if e.player_id in flight.players],
                match_results=flight_results,
            )
        )

    return DayLeaderboard(
        fixture_day_id=fixture_day.id,
        day_number=fixture_day.day_number,
        course_name=fixture_day.course_name or f'Day {fixture_day.day_number}',
        date=fixture_day.date,
        game_format=fixture_day.game_format,
        flights=flights,
        team_standings=team_standings,
        individual_standings=individuals,
        points_available=day_points_available(len(fixture_day.matches), config),
    )


def winner_determined(
    team_a: TeamStanding, team_b: TeamStanding
) -> Optional[str]:
    """
    The team that can no longer be caught, if any.

    A team is out of reach once its points exceed the other team's points plus
    everything the other team could still win.
    """
    if team_a.total_points > team_b.total_points + team_b.potential_remaining_points:
        return team_a.team_id
    if team_b.total_points > team_a.total_points + team_a.potential_remaining_points:
        return team_b.team_id
    return None


def overall_leaderboard(
    fixture_days: Sequence[FixtureDay],
    players: Mapping[str, Player],
    teams: Sequence[Team],
    scorecards: Mapping[str, MatchScorecard],
    config: PointsConfig = DEFAULT_POINTS_CONFIG,
) -> OverallLeaderboard:
    """
    Build tournament-wide standings across all fixture days.

    Args:
        fixture_days: Every fixture day of the tournament
        players: Player lookup by id
        teams: The competing teams
        scorecards: Match scorecards by match id (missing = not started)
        config: Points per match and tie points

    Returns:
        OverallLeaderboard with per-day breakdown and elimination analysis
    """
    day_boards = [
        day_leaderboard(day, players, teams, scorecards, config)
        for day in sorted(fixture_days, key=lambda d: d.day_number)
    ]

    completed_days = {
        board.fixture_day_id
        for board in day_boards
        if all(ts.potential_remaining_points == 0 for ts in board.team_standings)
    }

    team_standings = []
    for team in teams:
        standing = TeamStanding(team_id=team.id, team_name=team.name, team_color=team.color)
        for board in day_boards:
            for day_standing in board.team_standings:
                if day_standing.team_id != team.id:
                    continue
                standing.total_points += day_standing.total_points
                standing.matches_won += day_standing.matches_won
                standing.matches_lost += day_standing.matches_lost
                standing.matches_tied += day_standing.matches_tied
                standing.potential_remaining_points += day_standing.potential_remaining_points
                if board.fixture_day_id in completed_days:
                    standing.previous_days_points += day_standing.total_points
        standing.current_day_points = standing.total_points - standing.previous_days_points
        team_standings.append(standing)

    by_id = {standing.team_id: standing for standing in team_standings}
    winning_team = None
    if TEAM_A in by_id and TEAM_B in by_id:
        winning_team = winner_determined(by_id[TEAM_A], by_id[TEAM_B])
        if winning_team is not None:
            loser = TEAM_B if winning_team == TEAM_A else TEAM_A
            by_id[loser].is_winning_possible = False
            logger.info(f'{winning_team} can no longer be caught')

    all_matches = [match for day in fixture_days for match in day.matches]
    played = 0
    for match in all_matches:
        result = _result(match, scorecards)
        if result is not None and result.is_complete:
            played += 1

    return OverallLeaderboard(
        team_standings=team_standings,
        day_leaderboards=day_boards,
        total_matches_played=played,
        total_matches_remaining=len(all_matches) - played,
        is_winner_determined=winning_team is not None,
        winning_team=winning_team,
    )

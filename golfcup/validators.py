"""Validation functions for teams, match pairings, and score sheets."""

from typing import Collection, Mapping, Optional, Sequence

from .constants import GAME_FORMATS, HOLES_PER_ROUND, SCORING_TYPES, SIDE_SIZES, TEAM_IDS
from .formats import get_format_rule
from .models import FixtureDay, HoleScoreSheet, Match, Player, Team
from .stroke_table import TEES


def validate_teams(teams: Sequence[Team], players: Mapping[str, Player]) -> list[str]:
    """
    Validate the two competing teams.

    Checks:
    - Exactly two teams, one per team id
    - No player on both teams
    - Every rostered player is known

    Args:
        teams: Teams to validate
        players: Player lookup by id

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if len(teams) != 2:
        errors.append(f'Expected 2 teams, got {len(teams)}')

    team_ids = sorted(team.id for team in teams)
    if len(teams) == 2 and team_ids != sorted(TEAM_IDS):
        errors.append(f'Team ids must be {" and ".join(TEAM_IDS)}, got {", ".join(team_ids)}')

    seen = {}
    for team in teams:
        for player_id in team.players:
            if player_id not in players:
                errors.append(f'{team.name} has unknown player {player_id}')
            if player_id in seen and seen[player_id] != team.id:
                errors.append(f'{player_id} is on both {seen[player_id]} and {team.id}')
            seen[player_id] = team.id

        if team.captain_id and team.captain_id not in team.players:
            errors.append(f'{team.name} captain {team.captain_id} is not on the team')

    return errors


def validate_match(
    match: Match, teams: Sequence[Team], tees: Optional[Collection[str]] = None
) -> list[str]:
    """
    Validate a match pairing.

    Checks:
    - Known format and scoring type
    - Side sizes allowed by the format
    - No player on both sides
    - Each side is drawn from a single team, and the two sides from different teams
    - The match tee, if set, is one of tees (default: the built-in tees)

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if match.game_format not in GAME_FORMATS:
        errors.append(f'Match {match.id} has unknown format {match.game_format!r}')
    if match.scoring_type not in SCORING_TYPES:
        errors.append(f'Match {match.id} has unknown scoring type {match.scoring_type!r}')
    known_tees = TEES if tees is None else tees
    if match.tee is not None and match.tee not in known_tees:
        errors.append(f'Match {match.id} has unknown tee {match.tee!r}')

    low, high = SIDE_SIZES.get(match.game_format, (1, 2))
    for label, side in (('team A', match.team_a_players), ('team B', match.team_b_players)):
        if not low <= len(side) <= high:
            allowed = str(low) if low == high else f'{low}-{high}'
            errors.append(
                f'Match {match.id} {label} has {len(side)} players '
                f'({match.game_format} needs {allowed})'
            )

    both = set(match.team_a_players) & set(match.team_b_players)
    if both:
        errors.append(f'Match {match.id} has players on both sides: {", ".join(sorted(both))}')

    team_of = {player_id: team.id for team in teams for player_id in team.players}
    side_teams = []
    for label, side in (('team A', match.team_a_players), ('team B', match.team_b_players)):
        unrostered = [p for p in side if p not in team_of]
        if unrostered:
            errors.append(
                f'Match {match.id} {label} has players not on a team: {", ".join(unrostered)}'
            )
        side_team_ids = {team_of[p] for p in side if p in team_of}
        if len(side_team_ids) > 1:
            errors.append(f'Match {match.id} {label} mixes players from both teams')
        side_teams.append(side_team_ids)

    if side_teams[0] and side_teams[0] == side_teams[1]:
        errors.append(f'Match {match.id} has both sides drawn from the same team')

    return errors


def validate_score_sheet(match: Match, sheet: HoleScoreSheet) -> list[str]:
    """
    Validate a match's score sheet.

    Checks:
    - Sheet belongs to the match and only holds the match's players
    - 18 non-negative scores per card and 18 validated flags
    - Every validated hole has the scores its format needs

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if sheet.match_id != match.id:
        errors.append(f'Score sheet {sheet.match_id} does not belong to match {match.id}')

    if len(sheet.validated_holes) != HOLES_PER_ROUND:
        errors.append(
            f'Match {match.id} has {len(sheet.validated_holes)} validated flags '
            f'(expected {HOLES_PER_ROUND})'
        )

    for player_id, scores in sheet.scores.items():
        if player_id not in match.player_ids:
            errors.append(f'Match {match.id} has scores for {player_id} who is not playing')
        if len(scores) != HOLES_PER_ROUND:
            errors.append(
                f'Match {match.id} has {len(scores)} scores for {player_id} '
                f'(expected {HOLES_PER_ROUND})'
            )
        if any(score < 0 for score in scores):
            errors.append(f'Match {match.id} has a negative score for {player_id}')

    if errors or match.game_format not in GAME_FORMATS:
        return errors

    rule = get_format_rule(match.game_format)
    for hole, validated in enumerate(sheet.validated_holes, 1):
        if not validated:
            continue
        for label, side in (('team A', match.team_a_players), ('team B', match.team_b_players)):
            entered = sum(1 for p in side if p in sheet.scores and sheet.scores[p][hole - 1] > 0)
            needed = rule.entries_required(len(side))
            if entered < needed:
                errors.append(
                    f'Match {match.id} hole {hole} is validated but {label} '
                    f'has {entered} of {needed} scores'
                )

    return errors


def validate_tournament(
    players: Mapping[str, Player],
    teams: Sequence[Team],
    fixture_days: Sequence[FixtureDay],
    score_sheets: Mapping[str, HoleScoreSheet],
    tees: Optional[Collection[str]] = None,
) -> list[str]:
    """
    Validate a whole tournament.

    Runs every check above, plus:
    - Unique match ids and day numbers
    - Flights only reference matches of their own day
    - Score sheets only exist for scheduled matches

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = validate_teams(teams, players)

    match_ids = set()
    day_numbers = set()
    for day in fixture_days:
        if day.day_number in day_numbers:
            errors.append(f'Day number {day.day_number} is used more than once')
        day_numbers.add(day.day_number)

        day_match_ids = {match.id for match in day.matches}
        for match in day.matches:
            if match.id in match_ids:
                errors.append(f'Match id {match.id} is used more than once')
            match_ids.add(match.id)
            errors.extend(validate_match(match, teams, tees))

            sheet = score_sheets.get(match.id)
            if sheet is not None:
                errors.extend(validate_score_sheet(match, sheet))

        for flight in day.flights:
            for match_id in flight.match_ids:
                if match_id not in day_match_ids:
                    errors.append(
                        f'Flight {flight.id} references {match_id} outside day {day.day_number}'
                    )

    for match_id in score_sheets:
        if match_id not in match_ids:
            errors.append(f'Score sheet for unscheduled match {match_id}')

    return errors

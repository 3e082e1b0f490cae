"""Tournament file loading, scoring, and leaderboard output.

Tournament JSON file structure:
{
    "name": "Ryder Cup 2026",
    "players": [{"id": "p1", "name": "Anna", "handicap": 12.4}, ...],
    "teams": [{"id": "team-a", "name": "Blue", "players": ["p1", ...]}, ...],
    "fixture_days": [
        {
            "id": "day-1", "day_number": 1, "game_format": "singles",
            "scoring_type": "stableford",
            "matches": [{"id": "m1", "team_a_players": ["p1"], "team_b_players": ["p5"]}],
            "flights": [{"id": "f1", "match_ids": ["m1"], "players": ["p1", "p5"]}]
        }
    ],
    "score_sheets": [{"match_id": "m1", "scores": {"p1": [4, 5, ...]}, "validated_holes": [...]}]
}
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

from .constants import DEFAULT_TEE, HOLES_PER_ROUND, TIE
from .exceptions import UnknownTeeError
from .models import (
    DEFAULT_COURSE,
    DEFAULT_POINTS_CONFIG,
    Course,
    FixtureDay,
    Flight,
    HoleScoreSheet,
    Match,
    MatchScorecard,
    OverallLeaderboard,
    Player,
    PointsConfig,
    Team,
)
from .match_result import score_match
from .schemas import FixtureDaySchema, TournamentFile
from .standings import overall_leaderboard
from .stroke_table import Tee
from .utils import load_json, save_json

logger = logging.getLogger('golfcup.tournament')


@dataclass
class Tournament:
    """Everything entered for a tournament: roster, fixtures and score sheets."""
    name: str = ''
    players: dict[str, Player] = field(default_factory=dict)
    teams: list[Team] = field(default_factory=list)
    fixture_days: list[FixtureDay] = field(default_factory=list)
    score_sheets: dict[str, HoleScoreSheet] = field(default_factory=dict)
    course: Course = DEFAULT_COURSE

    @property
    def matches(self) -> list[Match]:
        return [match for day in self.fixture_days for match in day.matches]

    def fixture_day(self, day_number: int) -> Optional[FixtureDay]:
        for day in self.fixture_days:
            if day.day_number == day_number:
                return day
        return None


def _fixture_day(day: FixtureDaySchema) -> FixtureDay:
    matches = tuple(
        Match(
            id=m.id,
            fixture_day_id=day.id,
            team_a_players=tuple(m.team_a_players),
            team_b_players=tuple(m.team_b_players),
            game_format=m.game_format or day.game_format,
            scoring_type=m.scoring_type or day.scoring_type,
            flight_id=m.flight_id,
            tee=m.tee,
        )
        for m in day.matches
    )
    flights = tuple(
        Flight(id=f.id, match_ids=tuple(f.match_ids), players=tuple(f.players))
        for f in day.flights
    )
    return FixtureDay(
        id=day.id,
        day_number=day.day_number,
        date=day.date,
        game_format=day.game_format,
        scoring_type=day.scoring_type,
        course_name=day.course_name,
        matches=matches,
        flights=flights,
        is_finalized=day.is_finalized,
    )


def tournament_from_file(
    data: TournamentFile,
    course: Optional[Course] = None,
    default_course: Course = DEFAULT_COURSE,
) -> Tournament:
    """Convert a validated tournament file into engine models."""
    if course is None:
        if data.course is not None:
            course = Course(
                name=data.course.name,
                pars=tuple(data.course.pars),
                stroke_index=tuple(data.course.stroke_index),
            )
        else:
            course = default_course

    return Tournament(
        name=data.name,
        players={
            p.id: Player(id=p.id, name=p.name, handicap=p.handicap, email=p.email)
            for p in data.players
        },
        teams=[
            Team(
                id=t.id,
                name=t.name,
                players=tuple(t.players),
                color=t.color,
                captain_id=t.captain_id,
            )
            for t in data.teams
        ],
        fixture_days=[_fixture_day(day) for day in data.fixture_days],
        score_sheets={
            s.match_id: HoleScoreSheet(
                match_id=s.match_id,
                scores={player_id: tuple(scores) for player_id, scores in s.scores.items()},
                validated_holes=tuple(s.validated_holes),
            )
            for s in data.score_sheets
        },
        course=course,
    )


def load_tournament(
    path: str | Path,
    course: Optional[Course] = None,
    default_course: Course = DEFAULT_COURSE,
) -> Tournament:
    """
    Load and validate a tournament JSON file.

    Args:
        path: Path to tournament JSON file
        course: Course to play, overriding the file's course
        default_course: Course used when the file does not define one

    Returns:
        Tournament

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file fails schema validation
    """
    data = load_json(path, schema=TournamentFile)
    tournament = tournament_from_file(data, course, default_course)
    logger.info(
        f'Loaded {tournament.name or path}: {len(tournament.players)} players, '
        f'{len(tournament.fixture_days)} days, {len(tournament.matches)} matches'
    )
    return tournament


def match_tee(
    match: Match,
    tee: str | Tee | None = None,
    tees: Optional[Mapping[str, Tee]] = None,
    default_tee: str = DEFAULT_TEE,
) -> str | Tee:
    """
    Pick the tee a match is scored from.

    An explicit tee wins, then the match's own tee, then default_tee. Names are
    looked up in tees when given, so configured ratings and config-only tees apply.

    Raises:
        UnknownTeeError: If the name is not in tees
    """
    if tee is None:
        tee = match.tee or default_tee
    if isinstance(tee, Tee) or tees is None:
        return tee
    if tee not in tees:
        raise UnknownTeeError(
            f'Match {match.id}: unknown tee {tee!r} (expected one of {", ".join(sorted(tees))})'
        )
    return tees[tee]


def score_tournament(
    tournament: Tournament,
    config: PointsConfig = DEFAULT_POINTS_CONFIG,
    tee: str | Tee | None = None,
    tees: Optional[Mapping[str, Tee]] = None,
    default_tee: str = DEFAULT_TEE,
) -> dict[str, MatchScorecard]:
    """
    Score every match that has a score sheet.

    Matches without a sheet have not started and are left out.

    Args:
        tournament: Tournament to score
        config: Points per match and tie points
        tee: Tee for every match, overriding each match's own tee
        tees: Tee definitions by name (e.g. config.get_tees()); built-in tees if None
        default_tee: Tee name for matches that do not name one

    Returns:
        Dict of match id -> MatchScorecard
    """
    scorecards = {}
    for match in tournament.matches:
        sheet = tournament.score_sheets.get(match.id)
        if sheet is None:
            continue
        scorecards[match.id] = score_match(
            match,
            sheet,
            tournament.players,
            tournament.course,
            match_tee(match, tee, tees, default_tee),
            config,
        )
    logger.debug(f'Scored {len(scorecards)} of {len(tournament.matches)} matches')
    return scorecards


def build_leaderboard(
    tournament: Tournament,
    config: PointsConfig = DEFAULT_POINTS_CONFIG,
    tee: str | Tee | None = None,
    scorecards: Optional[dict[str, MatchScorecard]] = None,
    tees: Optional[Mapping[str, Tee]] = None,
    default_tee: str = DEFAULT_TEE,
) -> OverallLeaderboard:
    """Score the tournament and build its overall leaderboard."""
    if scorecards is None:
        scorecards = score_tournament(tournament, config, tee, tees, default_tee)
    return overall_leaderboard(
        tournament.fixture_days, tournament.players, tournament.teams, scorecards, config
    )


def match_status_text(scorecard: MatchScorecard) -> str:
    """Short status for a match: final result, clinch text, or holes played."""
    result = scorecard.result
    if scorecard.game_won.is_won:
        return scorecard.game_won.display_text
    if result.is_complete:
        return 'Halved' if result.winning_team == TIE else 'Final'
    if scorecard.validated_count == 0:
        return 'Not started'
    return f'Thru {scorecard.validated_count}/{HOLES_PER_ROUND}'


def save_leaderboard(
    path: str | Path,
    overall: OverallLeaderboard,
    scorecards: Optional[dict[str, MatchScorecard]] = None,
) -> None:
    """
    Save the overall leaderboard (and optionally match scorecards) to JSON.

    Args:
        path: Output JSON path
        overall: Leaderboard to save
        scorecards: Optional scorecards to include under "matches"
    """
    data = {
        'generated_at': datetime.now().isoformat(timespec='seconds'),
        'leaderboard': overall,
    }
    if scorecards is not None:
        data['matches'] = [
            {
                'match_id': match_id,
                'status': match_status_text(scorecard),
                'result': scorecard.result,
                'game_won': scorecard.game_won,
                'team_a_total': scorecard.team_a_total,
                'team_b_total': scorecard.team_b_total,
                'validated_count': scorecard.validated_count,
            }
            for match_id, scorecard in scorecards.items()
        ]

    save_json(path, data)
    logger.info(f'Leaderboard saved to {path}')

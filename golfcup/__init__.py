from .exceptions import DataIntegrityError, GolfCupError, UnknownFormatError, UnknownTeeError
from .models import (
    Player,
    Team,
    Course,
    Match,
    Flight,
    FixtureDay,
    HoleScoreSheet,
    PointsConfig,
    MatchResult,
    HoleStatus,
    GameWonStatus,
    PlayerCard,
    MatchScorecard,
    IndividualStanding,
    TeamStanding,
    FlightLeaderboard,
    DayLeaderboard,
    OverallLeaderboard,
)
from .stroke_table import Tee, get_tee, playing_handicap, strokes_per_hole, course_info
from .scoring import (
    net_score,
    stableford_points,
    front_nine,
    back_nine,
    total_score,
    day_points_available,
)
from .formats import FormatRule, get_format_rule
from .game_status import hole_by_hole_status, check_game_won, hole_status_display
from .match_result import resolve, score_match
from .scoresheet import (
    new_score_sheet,
    record_score,
    set_hole_validated,
    toggle_hole_validation,
    validated_count,
    thru_hole,
)
from .standings import day_leaderboard, overall_leaderboard, winner_determined
from .validators import validate_teams, validate_match, validate_score_sheet, validate_tournament
from .tournament import (
    Tournament,
    load_tournament,
    score_tournament,
    build_leaderboard,
    save_leaderboard,
    match_status_text,
    match_tee,
)
from .export import export_leaderboard_workbook

__all__ = [
    # Errors
    'GolfCupError',
    'DataIntegrityError',
    'UnknownFormatError',
    'UnknownTeeError',
    # Models
    'Player',
    'Team',
    'Course',
    'Match',
    'Flight',
    'FixtureDay',
    'HoleScoreSheet',
    'PointsConfig',
    'MatchResult',
    'HoleStatus',
    'GameWonStatus',
    'PlayerCard',
    'MatchScorecard',
    'IndividualStanding',
    'TeamStanding',
    'FlightLeaderboard',
    'DayLeaderboard',
    'OverallLeaderboard',
    # Handicaps
    'Tee',
    'get_tee',
    'playing_handicap',
    'strokes_per_hole',
    'course_info',
    # Hole scoring
    'net_score',
    'stableford_points',
    'front_nine',
    'back_nine',
    'total_score',
    'day_points_available',
    # Formats and match status
    'FormatRule',
    'get_format_rule',
    'hole_by_hole_status',
    'check_game_won',
    'hole_status_display',
    'resolve',
    'score_match',
    # Score entry
    'new_score_sheet',
    'record_score',
    'set_hole_validated',
    'toggle_hole_validation',
    'validated_count',
    'thru_hole',
    # Standings
    'day_leaderboard',
    'overall_leaderboard',
    'winner_determined',
    # Validation
    'validate_teams',
    'validate_match',
    'validate_score_sheet',
    'validate_tournament',
    # Tournament files
    'Tournament',
    'load_tournament',
    'score_tournament',
    'build_leaderboard',
    'save_leaderboard',
    'match_status_text',
    'match_tee',
    'export_leaderboard_workbook',
]

"""Data models for the golfcup scoring engine."""

from dataclasses import dataclass, field
from typing import Optional

from .constants import (
    DEFAULT_POINTS_PER_MATCH,
    DEFAULT_TIE_POINTS,
    HOLE_PARS,
    HOLES_PER_ROUND,
    STROKE_INDEX,
)
from .exceptions import DataIntegrityError


@dataclass(frozen=True)
class Player:
    """A rostered player."""
    id: str
    name: str
    handicap: float = 0.0  # Handicap index, typically -5..54
    email: str = ''


@dataclass(frozen=True)
class Team:
    """One of the two competing teams."""
    id: str  # 'team-a' or 'team-b'
    name: str
    players: tuple[str, ...] = ()
    color: str = ''
    captain_id: Optional[str] = None


@dataclass(frozen=True)
class Course:
    """Fixed 18-hole layout shared by every match of a fixture day."""
    name: str = ''
    pars: tuple[int, ...] = tuple(HOLE_PARS)
    stroke_index: tuple[int, ...] = tuple(STROKE_INDEX)

    def __post_init__(self):
        if len(self.pars) != HOLES_PER_ROUND or len(self.stroke_index) != HOLES_PER_ROUND:
            raise DataIntegrityError(
                f'Course {self.name!r} needs {HOLES_PER_ROUND} pars and stroke indices, '
                f'got {len(self.pars)} and {len(self.stroke_index)}'
            )
        if sorted(self.stroke_index) != list(range(1, HOLES_PER_ROUND + 1)):
            raise DataIntegrityError(
                f'Course {self.name!r} stroke indices must rank holes 1-{HOLES_PER_ROUND} exactly once'
            )

    @property
    def total_par(self) -> int:
        return sum(self.pars)


DEFAULT_COURSE = Course()


@dataclass(frozen=True)
class Match:
    """A single contest: one or two players per side."""
    id: str
    fixture_day_id: str
    team_a_players: tuple[str, ...]
    team_b_players: tuple[str, ...]
    game_format: str = 'singles'
    scoring_type: str = 'stableford'
    flight_id: Optional[str] = None
    tee: Optional[str] = None

    @property
    def player_ids(self) -> tuple[str, ...]:
        return self.team_a_players + self.team_b_players


@dataclass(frozen=True)
class Flight:
    """A group of up to four players on the course together."""
    id: str
    match_ids: tuple[str, ...] = ()
    players: tuple[str, ...] = ()


@dataclass(frozen=True)
class FixtureDay:
    """One day of competition under a single format and scoring basis."""
    id: str
    day_number: int
    date: str = ''
    game_format: str = 'singles'
    scoring_type: str = 'stableford'
    course_name: str = ''
    matches: tuple[Match, ...] = ()
    flights: tuple[Flight, ...] = ()
    is_finalized: bool = False


@dataclass(frozen=True)
class HoleScoreSheet:
    """Gross strokes per player per hole (0 = not entered) plus validated-hole flags."""
    match_id: str
    scores: dict[str, tuple[int, ...]] = field(default_factory=dict)
    validated_holes: tuple[bool, ...] = (False,) * HOLES_PER_ROUND


@dataclass(frozen=True)
class PointsConfig:
    """Competition points awarded per match."""
    points_per_match: float = DEFAULT_POINTS_PER_MATCH
    tie_points: float = DEFAULT_TIE_POINTS


DEFAULT_POINTS_CONFIG = PointsConfig()


@dataclass(frozen=True)
class MatchResult:
    """Derived outcome of a match.

    winning_team is 'team-a', 'team-b', 'tie', or None while the match is incomplete.
    leading_team is the provisional leader from partial scores and never awards points.
    """
    match_id: str
    fixture_day_id: str
    winning_team: Optional[str] = None
    team_a_points: float = 0.0
    team_b_points: float = 0.0
    is_complete: bool = False
    leading_team: Optional[str] = None


@dataclass(frozen=True)
class HoleStatus:
    """Running match state after one hole."""
    hole_number: int
    team_a_points: float
    team_b_points: float
    cumulative_team_a_points: float
    cumulative_team_b_points: float
    leading_team: str  # 'team-a', 'team-b' or 'tied'
    lead_amount: float


@dataclass(frozen=True)
class GameWonStatus:
    """Whether a match is mathematically decided, and how it is displayed."""
    is_won: bool = False
    winning_team: Optional[str] = None
    margin: float = 0
    holes_remaining: int = HOLES_PER_ROUND
    decision_hole: int = 0
    display_text: str = ''


@dataclass(frozen=True)
class PlayerHoleScore:
    """One player's result on one hole."""
    hole_number: int
    gross: int
    strokes: int
    net: Optional[int]
    stableford_points: int
    validated: bool


@dataclass(frozen=True)
class PlayerCard:
    """A player's scorecard within a match. Totals cover validated holes only."""
    player_id: str
    playing_handicap: int
    strokes: tuple[int, ...]
    holes: tuple[PlayerHoleScore, ...]
    gross_total: int = 0
    net_total: int = 0
    stableford_total: int = 0
    front_nine_net: int = 0
    back_nine_net: int = 0
    holes_entered: int = 0


@dataclass(frozen=True)
class MatchScorecard:
    """Everything derived from one HoleScoreSheet."""
    match_id: str
    fixture_day_id: str
    game_format: str
    scoring_type: str
    player_cards: dict[str, PlayerCard]
    hole_points: tuple[Optional[tuple[float, float]], ...]
    hole_statuses: tuple[HoleStatus, ...]
    game_won: GameWonStatus
    team_a_total: Optional[float]
    team_b_total: Optional[float]
    validated_count: int
    result: MatchResult


@dataclass
class IndividualStanding:
    """Leaderboard entry for one player."""
    player_id: str
    player_name: str
    team_id: str
    gross_score: int = 0
    net_score: int = 0
    stableford_points: int = 0
    thru_hole: int = 0
    matches_won: int = 0
    matches_lost: int = 0
    matches_tied: int = 0
    is_currently_playing: bool = False


@dataclass
class TeamStanding:
    """Leaderboard entry for one team."""
    team_id: str
    team_name: str
    team_color: str = ''
    total_points: float = 0.0
    previous_days_points: float = 0.0
    current_day_points: float = 0.0
    potential_remaining_points: float = 0.0
    matches_won: int = 0
    matches_lost: int = 0
    matches_tied: int = 0
    is_winning_possible: bool = True


@dataclass
class FlightLeaderboard:
    """Players and match results of one flight."""
    flight_id: str
    flight_number: int
    fixture_day_id: str
    players: list[IndividualStanding] = field(default_factory=list)
    match_results: list[MatchResult] = field(default_factory=list)


@dataclass
class DayLeaderboard:
    """Standings for a single fixture day."""
    fixture_day_id: str
    day_number: int
    course_name: str
    date: str
    game_format: str
    flights: list[FlightLeaderboard] = field(default_factory=list)
    team_standings: list[TeamStanding] = field(default_factory=list)
    individual_standings: list[IndividualStanding] = field(default_factory=list)
    points_available: float = 0.0


@dataclass
class OverallLeaderboard:
    """Tournament-wide standings with elimination analysis."""
    team_standings: list[TeamStanding] = field(default_factory=list)
    day_leaderboards: list[DayLeaderboard] = field(default_factory=list)
    total_matches_played: int = 0
    total_matches_remaining: int = 0
    is_winner_determined: bool = False
    winning_team: Optional[str] = None

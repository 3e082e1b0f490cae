"""Pydantic schemas for JSON data validation."""

from pydantic import BaseModel, Field, field_validator, model_validator

FORMAT_PATTERN = r'^(singles|texas-scramble|high-low|foursomes|fourball|chapman)$'
SCORING_PATTERN = r'^(stableford|strokeplay|matchplay)$'
TEAM_PATTERN = r'^team-(a|b)$'


class PlayerSchema(BaseModel):
    """Rostered player."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    handicap: float = Field(..., ge=-10, le=54)
    email: str = ''

    class Config:
        extra = 'forbid'


class TeamSchema(BaseModel):
    """One of the two teams."""

    id: str = Field(..., pattern=TEAM_PATTERN)
    name: str = Field(..., min_length=1)
    players: list[str] = Field(default_factory=list)
    color: str = ''
    captain_id: str | None = None

    class Config:
        extra = 'forbid'


class MatchSchema(BaseModel):
    """Match pairing. Format and scoring default to the fixture day's."""

    id: str = Field(..., min_length=1)
    team_a_players: list[str] = Field(..., min_length=1, max_length=2)
    team_b_players: list[str] = Field(..., min_length=1, max_length=2)
    game_format: str | None = Field(None, pattern=FORMAT_PATTERN)
    scoring_type: str | None = Field(None, pattern=SCORING_PATTERN)
    flight_id: str | None = None
    tee: str | None = None

    class Config:
        extra = 'forbid'


class FlightSchema(BaseModel):
    """Group of players out on the course together."""

    id: str = Field(..., min_length=1)
    match_ids: list[str] = Field(default_factory=list)
    players: list[str] = Field(default_factory=list, max_length=4)

    class Config:
        extra = 'forbid'


class FixtureDaySchema(BaseModel):
    """One day of competition."""

    id: str = Field(..., min_length=1)
    day_number: int = Field(..., ge=1)
    date: str = ''
    game_format: str = Field(..., pattern=FORMAT_PATTERN)
    scoring_type: str = Field(..., pattern=SCORING_PATTERN)
    course_name: str = ''
    matches: list[MatchSchema] = Field(default_factory=list)
    flights: list[FlightSchema] = Field(default_factory=list)
    is_finalized: bool = False

    class Config:
        extra = 'forbid'


class ScoreSheetSchema(BaseModel):
    """Gross scores per player for one match, plus validated holes."""

    match_id: str = Field(..., min_length=1)
    scores: dict[str, list[int]] = Field(default_factory=dict)
    validated_holes: list[bool] = Field(default_factory=lambda: [False] * 18)

    @field_validator('scores')
    @classmethod
    def validate_scores(cls, v):
        """Ensure every card has 18 non-negative entries."""
        for player_id, scores in v.items():
            if len(scores) != 18:
                raise ValueError(f'{player_id} has {len(scores)} hole scores (expected 18)')
            if any(s < 0 for s in scores):
                raise ValueError(f'{player_id} has a negative hole score')
        return v

    @field_validator('validated_holes')
    @classmethod
    def validate_flags(cls, v):
        """Ensure there is one flag per hole."""
        if len(v) != 18:
            raise ValueError(f'validated_holes has {len(v)} entries (expected 18)')
        return v

    class Config:
        extra = 'forbid'


class CourseSchema(BaseModel):
    """18-hole course layout."""

    name: str = ''
    pars: list[int] = Field(..., min_length=18, max_length=18)
    stroke_index: list[int] = Field(..., min_length=18, max_length=18)

    @field_validator('stroke_index')
    @classmethod
    def validate_stroke_index(cls, v):
        """Ensure each rank 1-18 appears exactly once."""
        if sorted(v) != list(range(1, 19)):
            raise ValueError('stroke_index must rank holes 1-18 exactly once')
        return v

    class Config:
        extra = 'forbid'


class TeeSchema(BaseModel):
    """Tee rating constants (stroke tables for built-in tees live in code)."""

    course_rating: float = Field(..., gt=50, lt=90)
    slope_rating: int = Field(..., ge=55, le=155)
    par: int = Field(72, ge=60, le=80)
    length: str = ''

    class Config:
        extra = 'forbid'


class CompetitionConfig(BaseModel):
    """Competition configuration settings."""

    points_per_match: float = Field(1.0, gt=0)
    tie_points: float = Field(0.5, ge=0)
    default_tee: str = 'yellow'
    course: CourseSchema | None = None
    tees: dict[str, TeeSchema] = Field(default_factory=dict)

    @model_validator(mode='after')
    def validate_tie_points(self):
        """A tie cannot be worth more than a win."""
        if self.tie_points > self.points_per_match:
            raise ValueError(
                f'tie_points ({self.tie_points}) exceeds points_per_match ({self.points_per_match})'
            )
        return self

    class Config:
        extra = 'forbid'


class TournamentFile(BaseModel):
    """Complete tournament.json file structure."""

    name: str = ''
    players: list[PlayerSchema] = Field(default_factory=list)
    teams: list[TeamSchema] = Field(default_factory=list, max_length=2)
    fixture_days: list[FixtureDaySchema] = Field(default_factory=list)
    score_sheets: list[ScoreSheetSchema] = Field(default_factory=list)
    course: CourseSchema | None = None

    class Config:
        extra = 'forbid'

"""Unit tests for day and overall leaderboards."""

import pytest

from golfcup.constants import HOLE_PARS
from golfcup.match_result import score_match
from golfcup.models import (
    FixtureDay,
    Flight,
    HoleScoreSheet,
    Match,
    Player,
    PointsConfig,
    Team,
    TeamStanding,
)
from golfcup.standings import (
    day_leaderboard,
    overall_leaderboard,
    team_side,
    winner_determined,
)
from golfcup.stroke_table import Tee

FLAT_TEE = Tee('flat', course_rating=72.0, slope_rating=113, par=72)

PARS = list(HOLE_PARS)
BOGEYS = [p + 1 for p in HOLE_PARS]

PLAYERS = {
    player_id: Player(player_id, name, handicap=0.0)
    for player_id, name in [
        ('p1', 'Anna'),
        ('p2', 'Ben'),
        ('p3', 'Cleo'),
        ('p5', 'Eve'),
        ('p6', 'Finn'),
        ('p7', 'Gus'),
    ]
}

TEAMS = [
    Team('team-a', 'Blue', players=('p1', 'p2', 'p3'), color='#2563eb'),
    Team('team-b', 'Red', players=('p5', 'p6', 'p7'), color='#dc2626'),
]


def singles(match_id, day_id, player_a, player_b):
    return Match(
        id=match_id,
        fixture_day_id=day_id,
        team_a_players=(player_a,),
        team_b_players=(player_b,),
    )


def scorecard(match, a_scores, b_scores, validated=18):
    sheet = HoleScoreSheet(
        match_id=match.id,
        scores={
            match.team_a_players[0]: tuple(a_scores),
            match.team_b_players[0]: tuple(b_scores),
        },
        validated_holes=tuple(i < validated for i in range(18)),
    )
    return score_match(match, sheet, PLAYERS, tee=FLAT_TEE)


@pytest.fixture
def day_one():
    matches = (
        singles('m1', 'day-1', 'p1', 'p5'),
        singles('m2', 'day-1', 'p2', 'p6'),
    )
    return FixtureDay(
        id='day-1',
        day_number=1,
        date='2026-05-01',
        course_name='Home Course',
        matches=matches,
        flights=(Flight('f1', match_ids=('m1', 'm2'), players=('p1', 'p5', 'p2', 'p6')),),
    )


@pytest.fixture
def day_two():
    matches = (
        singles('m3', 'day-2', 'p1', 'p6'),
        singles('m4', 'day-2', 'p3', 'p7'),
    )
    return FixtureDay(id='day-2', day_number=2, matches=matches)


@pytest.fixture
def scorecards(day_one, day_two):
    m1, m2 = day_one.matches
    m3, _m4 = day_two.matches
    return {
        'm1': scorecard(m1, PARS, BOGEYS),  # Blue wins
        'm2': scorecard(m2, PARS, PARS),  # Halved
        'm3': scorecard(m3, BOGEYS, PARS, validated=9),  # Red leading
    }


class TestTeamSide:
    """Tests for working out which side a team is on."""

    def test_team_side(self, day_one):
        match = day_one.matches[0]
        assert team_side(match, TEAMS[0]) == 'team-a'
        assert team_side(match, TEAMS[1]) == 'team-b'

    def test_team_not_in_match(self, day_one):
        assert team_side(day_one.matches[0], Team('team-c', 'Green', players=('p9',))) is None


class TestDayLeaderboard:
    """Tests for a single day's standings."""

    def test_team_points(self, day_one, scorecards):
        board = day_leaderboard(day_one, PLAYERS, TEAMS, scorecards)
        blue, red = board.team_standings

        assert blue.total_points == 1.5
        assert red.total_points == 0.5
        assert (blue.matches_won, blue.matches_lost, blue.matches_tied) == (1, 0, 1)
        assert (red.matches_won, red.matches_lost, red.matches_tied) == (0, 1, 1)
        assert blue.potential_remaining_points == 0
        assert board.points_available == 2

    def test_individual_standings(self, day_one, scorecards):
        """Test players sort by net score with idle players last."""
        board = day_leaderboard(day_one, PLAYERS, TEAMS, scorecards)
        names = [entry.player_name for entry in board.individual_standings]

        # Equal net scores keep roster order
        assert names[:4] == ['Anna', 'Ben', 'Finn', 'Eve']
        assert set(names[4:]) == {'Cleo', 'Gus'}

        anna = board.individual_standings[0]
        assert anna.net_score == 72
        assert anna.stableford_points == 36
        assert anna.thru_hole == 18
        assert anna.matches_won == 1

    def test_flights(self, day_one, scorecards):
        board = day_leaderboard(day_one, PLAYERS, TEAMS, scorecards)
        flight = board.flights[0]
        assert flight.flight_number == 1
        assert [r.match_id for r in flight.match_results] == ['m1', 'm2']
        assert {p.player_id for p in flight.players} == {'p1', 'p2', 'p5', 'p6'}

    def test_day_in_progress(self, day_two, scorecards):
        """Test unfinished and unstarted matches count towards potential points."""
        board = day_leaderboard(day_two, PLAYERS, TEAMS, scorecards)
        blue, red = board.team_standings
        assert blue.total_points == 0
        assert blue.potential_remaining_points == 2
        assert red.potential_remaining_points == 2

        gus = next(e for e in board.individual_standings if e.player_id == 'p7')
        assert gus.thru_hole == 0
        finn = next(e for e in board.individual_standings if e.player_id == 'p6')
        assert finn.is_currently_playing is True

    def test_no_scorecards(self, day_one):
        """Test a day with nothing played is all zeros."""
        board = day_leaderboard(day_one, PLAYERS, TEAMS, {})
        assert all(ts.total_points == 0 for ts in board.team_standings)
        assert all(not r.is_complete for r in board.flights[0].match_results)


class TestWinnerDetermined:
    """Tests for mathematical elimination."""

    def test_not_yet_determined(self):
        """Test 7 points against 5 with 2 still available is not decided."""
        team_a = TeamStanding('team-a', 'Blue', total_points=7, potential_remaining_points=1)
        team_b = TeamStanding('team-b', 'Red', total_points=5, potential_remaining_points=2)
        assert winner_determined(team_a, team_b) is None

    def test_determined(self):
        team_a = TeamStanding('team-a', 'Blue', total_points=7, potential_remaining_points=0)
        team_b = TeamStanding('team-b', 'Red', total_points=5, potential_remaining_points=1)
        assert winner_determined(team_a, team_b) == 'team-a'

    def test_team_b_determined(self):
        team_a = TeamStanding('team-a', 'Blue', total_points=2, potential_remaining_points=1)
        team_b = TeamStanding('team-b', 'Red', total_points=4, potential_remaining_points=0)
        assert winner_determined(team_a, team_b) == 'team-b'


class TestOverallLeaderboard:
    """Tests for tournament-wide standings."""

    def test_totals_across_days(self, day_one, day_two, scorecards):
        overall = overall_leaderboard([day_two, day_one], PLAYERS, TEAMS, scorecards)
        blue, red = overall.team_standings

        assert [b.day_number for b in overall.day_leaderboards] == [1, 2]
        assert blue.total_points == 1.5
        assert red.total_points == 0.5
        assert blue.previous_days_points == 1.5
        assert blue.current_day_points == 0
        assert blue.potential_remaining_points == 2
        assert overall.total_matches_played == 2
        assert overall.total_matches_remaining == 2
        assert overall.is_winner_determined is False
        assert blue.is_winning_possible and red.is_winning_possible

    def test_elimination(self, day_one, day_two, scorecards):
        """Test the overall winner is locked in once the other team cannot catch up."""
        m3, m4 = day_two.matches
        finished = dict(scorecards)
        finished['m3'] = scorecard(m3, PARS, BOGEYS)
        finished['m4'] = scorecard(m4, PARS, BOGEYS)

        overall = overall_leaderboard([day_one, day_two], PLAYERS, TEAMS, finished)
        blue, red = overall.team_standings

        assert blue.total_points == 3.5
        assert overall.is_winner_determined is True
        assert overall.winning_team == 'team-a'
        assert red.is_winning_possible is False
        assert overall.total_matches_remaining == 0

    def test_points_config(self, day_one, day_two, scorecards):
        """Test potential points use the configured match value."""
        config = PointsConfig(points_per_match=2.0, tie_points=1.0)
        overall = overall_leaderboard([day_one, day_two], PLAYERS, TEAMS, scorecards, config)
        blue, _red = overall.team_standings
        assert blue.potential_remaining_points == 4.0

    def test_empty_tournament(self):
        overall = overall_leaderboard([], PLAYERS, TEAMS, {})
        assert [ts.total_points for ts in overall.team_standings] == [0, 0]
        assert overall.total_matches_played == 0
        assert overall.is_winner_determined is False

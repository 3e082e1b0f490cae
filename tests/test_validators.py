"""Unit tests for validation functions."""

from golfcup.models import FixtureDay, Flight, HoleScoreSheet, Match, Player, Team
from golfcup.validators import (
    validate_match,
    validate_score_sheet,
    validate_teams,
    validate_tournament,
)

PLAYERS = {
    player_id: Player(player_id, player_id.upper(), handicap=10.0)
    for player_id in ['p1', 'p2', 'p5', 'p6']
}

TEAMS = [
    Team('team-a', 'Blue', players=('p1', 'p2')),
    Team('team-b', 'Red', players=('p5', 'p6')),
]


def singles(**overrides):
    fields = {
        'id': 'm1',
        'fixture_day_id': 'day-1',
        'team_a_players': ('p1',),
        'team_b_players': ('p5',),
    }
    fields.update(overrides)
    return Match(**fields)


class TestTeamValidation:
    """Tests for team validation."""

    def test_valid_teams(self):
        """Test that two disjoint teams of known players pass."""
        assert validate_teams(TEAMS, PLAYERS) == []

    def test_wrong_team_count(self):
        errors = validate_teams(TEAMS[:1], PLAYERS)
        assert errors == ['Expected 2 teams, got 1']

    def test_player_on_both_teams(self):
        teams = [TEAMS[0], Team('team-b', 'Red', players=('p1', 'p5'))]
        errors = validate_teams(teams, PLAYERS)
        assert 'p1 is on both team-a and team-b' in errors

    def test_unknown_player(self):
        teams = [TEAMS[0], Team('team-b', 'Red', players=('p5', 'p9'))]
        errors = validate_teams(teams, PLAYERS)
        assert errors == ['Red has unknown player p9']

    def test_bad_team_ids(self):
        teams = [TEAMS[0], Team('team-c', 'Green', players=('p5',))]
        errors = validate_teams(teams, PLAYERS)
        assert len(errors) == 1
        assert 'Team ids must be team-a and team-b' in errors[0]

    def test_captain_not_on_team(self):
        teams = [Team('team-a', 'Blue', players=('p1', 'p2'), captain_id='p5'), TEAMS[1]]
        errors = validate_teams(teams, PLAYERS)
        assert errors == ['Blue captain p5 is not on the team']


class TestMatchValidation:
    """Tests for match pairing validation."""

    def test_valid_singles(self):
        assert validate_match(singles(), TEAMS) == []

    def test_valid_fourball(self):
        match = singles(
            team_a_players=('p1', 'p2'), team_b_players=('p5', 'p6'), game_format='fourball'
        )
        assert validate_match(match, TEAMS) == []

    def test_singles_with_pairs(self):
        """Test singles allows one player per side."""
        errors = validate_match(singles(team_a_players=('p1', 'p2')), TEAMS)
        assert errors == ['Match m1 team A has 2 players (singles needs 1)']

    def test_high_low_needs_pairs(self):
        errors = validate_match(singles(game_format='high-low'), TEAMS)
        assert len(errors) == 2
        assert 'high-low needs 2' in errors[0]

    def test_scramble_allows_one_or_two(self):
        match = singles(team_a_players=('p1', 'p2'), game_format='texas-scramble')
        assert validate_match(match, TEAMS) == []

    def test_unknown_format(self):
        errors = validate_match(singles(game_format='skins'), TEAMS)
        assert "Match m1 has unknown format 'skins'" in errors

    def test_sides_from_same_team(self):
        errors = validate_match(singles(team_b_players=('p2',)), TEAMS)
        assert errors == ['Match m1 has both sides drawn from the same team']

    def test_side_mixes_teams(self):
        match = singles(
            team_a_players=('p1', 'p5'), team_b_players=('p6', 'p2'), game_format='fourball'
        )
        errors = validate_match(match, TEAMS)
        assert 'Match m1 team A mixes players from both teams' in errors
        assert 'Match m1 team B mixes players from both teams' in errors

    def test_player_on_both_sides(self):
        errors = validate_match(singles(team_b_players=('p1',)), TEAMS)
        assert 'Match m1 has players on both sides: p1' in errors

    def test_unknown_tee(self):
        errors = validate_match(singles(tee='red'), TEAMS)
        assert errors == ["Match m1 has unknown tee 'red'"]

    def test_configured_tee(self):
        """Test a tee is accepted when it is one of the configured tees."""
        assert validate_match(singles(tee='red'), TEAMS, tees={'red', 'yellow'}) == []
        assert validate_match(singles(tee='white'), TEAMS) == []


class TestScoreSheetValidation:
    """Tests for score sheet validation."""

    def test_valid_sheet(self):
        sheet = HoleScoreSheet(
            'm1',
            scores={'p1': (4,) + (0,) * 17, 'p5': (5,) + (0,) * 17},
            validated_holes=(True,) + (False,) * 17,
        )
        assert validate_score_sheet(singles(), sheet) == []

    def test_validated_hole_missing_score(self):
        sheet = HoleScoreSheet(
            'm1',
            scores={'p1': (4,) + (0,) * 17, 'p5': (0,) * 18},
            validated_holes=(True,) + (False,) * 17,
        )
        errors = validate_score_sheet(singles(), sheet)
        assert errors == ['Match m1 hole 1 is validated but team B has 0 of 1 scores']

    def test_short_card(self):
        sheet = HoleScoreSheet('m1', scores={'p1': (4,) * 17})
        errors = validate_score_sheet(singles(), sheet)
        assert errors == ['Match m1 has 17 scores for p1 (expected 18)']

    def test_player_not_in_match(self):
        sheet = HoleScoreSheet('m1', scores={'p2': (0,) * 18})
        errors = validate_score_sheet(singles(), sheet)
        assert errors == ['Match m1 has scores for p2 who is not playing']

    def test_wrong_match(self):
        errors = validate_score_sheet(singles(), HoleScoreSheet('m7'))
        assert errors == ['Score sheet m7 does not belong to match m1']


class TestTournamentValidation:
    """Tests for whole-tournament validation."""

    def test_valid_tournament(self):
        day = FixtureDay('day-1', 1, matches=(singles(),), flights=(Flight('f1', ('m1',)),))
        assert validate_tournament(PLAYERS, TEAMS, [day], {}) == []

    def test_duplicate_ids(self):
        day_one = FixtureDay('day-1', 1, matches=(singles(),))
        day_two = FixtureDay('day-2', 1, matches=(singles(fixture_day_id='day-2'),))
        errors = validate_tournament(PLAYERS, TEAMS, [day_one, day_two], {})
        assert 'Day number 1 is used more than once' in errors
        assert 'Match id m1 is used more than once' in errors

    def test_flight_outside_day(self):
        day = FixtureDay('day-1', 1, matches=(singles(),), flights=(Flight('f1', ('m9',)),))
        errors = validate_tournament(PLAYERS, TEAMS, [day], {})
        assert errors == ['Flight f1 references m9 outside day 1']

    def test_match_tee_checked_against_tees(self):
        day = FixtureDay('day-1', 1, matches=(singles(tee='red'),))
        errors = validate_tournament(PLAYERS, TEAMS, [day], {}, tees=['white', 'yellow'])
        assert errors == ["Match m1 has unknown tee 'red'"]

    def test_sheet_for_unscheduled_match(self):
        day = FixtureDay('day-1', 1, matches=(singles(),))
        errors = validate_tournament(PLAYERS, TEAMS, [day], {'m9': HoleScoreSheet('m9')})
        assert errors == ['Score sheet for unscheduled match m9']

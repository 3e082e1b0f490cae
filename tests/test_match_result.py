"""Unit tests for match scoring and result resolution."""

import pytest

from golfcup.constants import HOLE_PARS
from golfcup.exceptions import DataIntegrityError
from golfcup.match_result import resolve, score_match
from golfcup.models import HoleScoreSheet, Match, Player, PointsConfig
from golfcup.stroke_table import Tee
from golfcup.tournament import match_status_text

# Slope 113 and rating equal to par: playing handicap is the rounded index
FLAT_TEE = Tee('flat', course_rating=72.0, slope_rating=113, par=72)

PARS = list(HOLE_PARS)
BOGEYS = [p + 1 for p in HOLE_PARS]
DOUBLES = [p + 2 for p in HOLE_PARS]

PLAYERS = {
    'p1': Player('p1', 'Anna', handicap=0.0),
    'p2': Player('p2', 'Ben', handicap=0.0),
    'p5': Player('p5', 'Eve', handicap=0.0),
    'p6': Player('p6', 'Finn', handicap=0.0),
    'p7': Player('p7', 'Gus', handicap=18.0),
}


def make_sheet(match, scores, validated=18):
    """Score sheet with the first `validated` holes validated."""
    return HoleScoreSheet(
        match_id=match.id,
        scores={player_id: tuple(card) for player_id, card in scores.items()},
        validated_holes=tuple(i < validated for i in range(18)),
    )


def singles(scoring_type='stableford', player_b='p5'):
    return Match(
        id='m1',
        fixture_day_id='day-1',
        team_a_players=('p1',),
        team_b_players=(player_b,),
        game_format='singles',
        scoring_type=scoring_type,
    )


def pairs(game_format, scoring_type='stableford'):
    return Match(
        id='m2',
        fixture_day_id='day-1',
        team_a_players=('p1', 'p2'),
        team_b_players=('p5', 'p6'),
        game_format=game_format,
        scoring_type=scoring_type,
    )


class TestResolve:
    """Tests for turning totals into a result."""

    def test_no_totals(self):
        """Test a match with nothing entered has no result."""
        result = resolve('singles', 'stableford', None, None, False)
        assert result.winning_team is None
        assert result.leading_team is None
        assert result.is_complete is False

    def test_incomplete_reports_leader_only(self):
        """Test a partial match shows a leader but awards nothing."""
        result = resolve('singles', 'stableford', 20, 15, False)
        assert result.leading_team == 'team-a'
        assert result.winning_team is None
        assert result.team_a_points == 0

    def test_stableford_higher_wins(self):
        result = resolve('singles', 'stableford', 36, 30, True)
        assert result.winning_team == 'team-a'
        assert (result.team_a_points, result.team_b_points) == (1.0, 0.0)

    def test_strokeplay_lower_wins(self):
        result = resolve('singles', 'strokeplay', 72, 70, True)
        assert result.winning_team == 'team-b'
        assert (result.team_a_points, result.team_b_points) == (0.0, 1.0)

    def test_tie(self):
        result = resolve('fourball', 'stableford', 36, 36, True)
        assert result.winning_team == 'tie'
        assert (result.team_a_points, result.team_b_points) == (0.5, 0.5)

    def test_custom_points(self):
        config = PointsConfig(points_per_match=2.0, tie_points=1.0)
        result = resolve('singles', 'stableford', 30, 30, True, config)
        assert result.team_a_points == 1.0
        result = resolve('singles', 'stableford', 31, 30, True, config)
        assert result.team_a_points == 2.0


class TestScoreMatch:
    """Tests for the full per-match pipeline."""

    def test_singles_stableford_complete(self):
        """Test pars beat bogeys off scratch."""
        match = singles()
        sheet = make_sheet(match, {'p1': PARS, 'p5': BOGEYS})
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

        assert scorecard.team_a_total == 36
        assert scorecard.team_b_total == 18
        assert scorecard.result.is_complete
        assert scorecard.result.winning_team == 'team-a'
        assert scorecard.result.team_a_points == 1.0
        assert scorecard.validated_count == 18

    def test_handicap_strokes_level_the_match(self):
        """Test a stroke a hole turns bogeys into net pars."""
        match = singles(player_b='p7')
        sheet = make_sheet(match, {'p1': PARS, 'p7': BOGEYS})
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

        card = scorecard.player_cards['p7']
        assert card.playing_handicap == 18
        assert card.net_total == 72
        assert card.stableford_total == 36
        assert scorecard.result.winning_team == 'tie'
        assert scorecard.result.team_b_points == 0.5

    def test_partial_round(self):
        """Test a match part way through only has a provisional leader."""
        match = singles()
        sheet = make_sheet(match, {'p1': PARS, 'p5': BOGEYS}, validated=9)
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

        assert scorecard.team_a_total == 18
        assert scorecard.team_b_total == 9
        assert scorecard.result.is_complete is False
        assert scorecard.result.winning_team is None
        assert scorecard.result.leading_team == 'team-a'
        assert scorecard.player_cards['p1'].gross_total == 36
        assert scorecard.player_cards['p1'].front_nine_net == 36
        assert scorecard.player_cards['p1'].back_nine_net == 0

    def test_unvalidated_scores_ignored(self):
        """Test entered but unvalidated holes change nothing."""
        match = singles()
        entered = make_sheet(match, {'p1': PARS, 'p5': [1] * 18}, validated=0)
        scorecard = score_match(match, entered, PLAYERS, tee=FLAT_TEE)

        assert scorecard.team_a_total is None
        assert scorecard.result.leading_team is None
        assert scorecard.game_won.is_won is False
        assert all(points is None for points in scorecard.hole_points)
        assert scorecard.player_cards['p5'].holes_entered == 18

    def test_strokeplay(self):
        match = singles('strokeplay')
        sheet = make_sheet(match, {'p1': BOGEYS, 'p5': PARS})
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)
        assert scorecard.team_a_total == 90
        assert scorecard.team_b_total == 72
        assert scorecard.result.winning_team == 'team-b'

    def test_strokeplay_not_decided_by_holes_won(self):
        """Test winning most holes does not win a stroke play match on totals."""
        match = singles('strokeplay')
        a_scores = PARS[:]
        b_scores = BOGEYS[:]
        a_scores[17] = 40
        b_scores[17] = 4
        sheet = make_sheet(match, {'p1': a_scores, 'p5': b_scores})
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

        assert scorecard.team_a_total > scorecard.team_b_total
        assert scorecard.result.winning_team == 'team-b'
        assert scorecard.game_won.is_won is False
        assert scorecard.game_won.winning_team is None
        assert scorecard.game_won.holes_remaining == 0
        assert match_status_text(scorecard) == 'Final'

    def test_fourball_stableford_never_clinched(self):
        """Test a big best-ball lead part way through is only a provisional lead."""
        match = pairs('fourball')
        sheet = make_sheet(
            match, {'p1': PARS, 'p2': PARS, 'p5': DOUBLES, 'p6': DOUBLES}, validated=12
        )
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

        assert scorecard.game_won.is_won is False
        assert scorecard.game_won.holes_remaining == 6
        assert scorecard.result.is_complete is False
        assert match_status_text(scorecard) == 'Thru 12/18'

    def test_fourball_best_ball(self):
        """Test only the better ball of each pair counts."""
        match = pairs('fourball')
        sheet = make_sheet(match, {'p1': PARS, 'p2': DOUBLES, 'p5': BOGEYS, 'p6': BOGEYS})
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)
        assert scorecard.team_a_total == 36
        assert scorecard.team_b_total == 18
        assert scorecard.result.winning_team == 'team-a'

    def test_high_low_clinch(self):
        """Test High-Low is decided as soon as the lead cannot be caught."""
        match = pairs('high-low')
        sheet = make_sheet(
            match, {'p1': PARS, 'p2': PARS, 'p5': BOGEYS, 'p6': BOGEYS}, validated=10
        )
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

        assert scorecard.hole_points[0] == (3, 0)
        assert scorecard.game_won.is_won is True
        assert scorecard.game_won.decision_hole == 10
        assert scorecard.game_won.display_text == '30&8'
        assert scorecard.result.is_complete is True
        assert scorecard.result.winning_team == 'team-a'

    def test_high_low_not_clinched(self):
        """Test 27 points up with 27 left is still live."""
        match = pairs('high-low')
        sheet = make_sheet(
            match, {'p1': PARS, 'p2': PARS, 'p5': BOGEYS, 'p6': BOGEYS}, validated=9
        )
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)
        assert scorecard.game_won.is_won is False
        assert scorecard.result.is_complete is False
        assert scorecard.result.leading_team == 'team-a'

    def test_matchplay_singles(self):
        """Test match play counts holes won, not strokes."""
        match = singles('matchplay')
        # B wins one hole by a lot, A wins the other 17 by one
        a_scores = PARS[:]
        b_scores = BOGEYS[:]
        a_scores[0] = 9
        sheet = make_sheet(match, {'p1': a_scores, 'p5': b_scores})
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

        assert scorecard.team_a_total == 17
        assert scorecard.team_b_total == 1
        assert scorecard.result.winning_team == 'team-a'

    def test_scramble_one_ball(self):
        """Test a scramble side needs a single score per hole."""
        match = pairs('texas-scramble', 'strokeplay')
        sheet = make_sheet(match, {'p1': PARS, 'p5': BOGEYS})
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)
        assert scorecard.team_a_total == 72
        assert scorecard.team_b_total == 90
        assert scorecard.result.winning_team == 'team-a'

    def test_idempotent(self):
        """Test scoring the same sheet twice gives equal results."""
        match = singles()
        sheet = make_sheet(match, {'p1': PARS, 'p5': BOGEYS}, validated=12)
        first = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)
        second = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)
        assert first == second

    def test_unknown_player_plays_off_scratch(self):
        match = singles(player_b='p9')
        sheet = make_sheet(match, {'p1': PARS, 'p9': PARS})
        scorecard = score_match(match, sheet, PLAYERS, tee=FLAT_TEE)
        assert scorecard.player_cards['p9'].playing_handicap == 0
        assert scorecard.result.winning_team == 'tie'

    def test_validated_hole_missing_score(self):
        """Test a validated hole without every required score is rejected."""
        match = singles()
        b_scores = BOGEYS[:]
        b_scores[4] = 0
        sheet = make_sheet(match, {'p1': PARS, 'p5': b_scores})
        with pytest.raises(DataIntegrityError):
            score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

    def test_short_card(self):
        match = singles()
        sheet = make_sheet(match, {'p1': PARS[:17], 'p5': BOGEYS})
        with pytest.raises(DataIntegrityError):
            score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

    def test_short_validated_flags(self):
        match = singles()
        sheet = HoleScoreSheet(
            match_id='m1', scores={'p1': tuple(PARS)}, validated_holes=(False,) * 17
        )
        with pytest.raises(DataIntegrityError):
            score_match(match, sheet, PLAYERS, tee=FLAT_TEE)

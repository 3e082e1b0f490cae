"""Match result resolution and the per-match scoring pipeline.

score_match() is the single entry point called after every score mutation: it
recomputes the whole scorecard of a match from its HoleScoreSheet. Nothing is patched
in place, so calling it twice on the same sheet returns equal results.
"""

import logging
from typing import Mapping, Optional

from .constants import HOLES_PER_ROUND, TEAM_A, TEAM_B, TIE
from .exceptions import DataIntegrityError
from .formats import FormatRule, HoleEntry, check_scoring_type, get_format_rule
from .game_status import check_game_won, hole_by_hole_status
from .models import (
    DEFAULT_COURSE,
    DEFAULT_POINTS_CONFIG,
    Course,
    GameWonStatus,
    HoleScoreSheet,
    Match,
    MatchResult,
    MatchScorecard,
    Player,
    PlayerCard,
    PlayerHoleScore,
    PointsConfig,
)
from .scoring import back_nine, front_nine, net_score, stableford_points, total_score
from .stroke_table import Tee, playing_handicap, strokes_per_hole

logger = logging.getLogger('golfcup.match_result')


def resolve(
    game_format: str,
    scoring_type: str,
    team_a_total: Optional[float],
    team_b_total: Optional[float],
    all_players_complete: bool,
    config: PointsConfig = DEFAULT_POINTS_CONFIG,
    match_id: str = '',
    fixture_day_id: str = '',
) -> MatchResult:
    """
    Decide a match from the two sides' totals.

    Stableford points and hole points: higher total wins. Stroke totals: lower wins.
    Points are only awarded once every player is complete; before that the better
    side is reported as leading_team and winning_team stays None.

    Args:
        game_format: Competition format tag (e.g. 'fourball', 'high-low')
        scoring_type: 'stableford', 'strokeplay' or 'matchplay'
        team_a_total: Team A's total (None if nothing entered yet)
        team_b_total: Team B's total (None if nothing entered yet)
        all_players_complete: Whether every required score is in
        config: Points per match and tie points
        match_id: Match identifier carried into the result
        fixture_day_id: Fixture day identifier carried into the result

    Returns:
        MatchResult
    """
    rule = get_format_rule(game_format)
    check_scoring_type(scoring_type)

    if team_a_total is None or team_b_total is None:
        return MatchResult(match_id=match_id, fixture_day_id=fixture_day_id)

    if rule.higher_wins(scoring_type):
        a_better = team_a_total > team_b_total
        b_better = team_b_total > team_a_total
    else:
        a_better = team_a_total < team_b_total
        b_better = team_b_total < team_a_total

    leader = TEAM_A if a_better else TEAM_B if b_better else None

    if not all_players_complete:
        return MatchResult(
            match_id=match_id,
            fixture_day_id=fixture_day_id,
            leading_team=leader,
        )

    if leader == TEAM_A:
        a_points, b_points = config.points_per_match, 0.0
    elif leader == TEAM_B:
        a_points, b_points = 0.0, config.points_per_match
    else:
        a_points = b_points = config.tie_points

    return MatchResult(
        match_id=match_id,
        fixture_day_id=fixture_day_id,
        winning_team=leader or TIE,
        team_a_points=a_points,
        team_b_points=b_points,
        is_complete=True,
        leading_team=leader,
    )


def _check_sheet(match: Match, sheet: HoleScoreSheet, rule: FormatRule) -> None:
    if len(sheet.validated_holes) != HOLES_PER_ROUND:
        raise DataIntegrityError(
            f'Match {match.id}: expected {HOLES_PER_ROUND} validation flags, '
            f'got {len(sheet.validated_holes)}'
        )
    for player_id, scores in sheet.scores.items():
        if len(scores) != HOLES_PER_ROUND:
            raise DataIntegrityError(
                f'Match {match.id}: player {player_id} has {len(scores)} hole scores, '
                f'expected {HOLES_PER_ROUND}'
            )

    for hole, validated in enumerate(sheet.validated_holes):
        if not validated:
            continue
        for side in (match.team_a_players, match.team_b_players):
            entered = sum(1 for p in side if sheet.scores.get(p, (0,) * HOLES_PER_ROUND)[hole] > 0)
            if entered < rule.entries_required(len(side)):
                raise DataIntegrityError(
                    f'Match {match.id}: hole {hole + 1} is validated but is missing scores'
                )


def build_player_card(
    player_id: str,
    gross_scores: tuple[int, ...],
    handicap: int,
    validated_holes: tuple[bool, ...],
    course: Course,
) -> PlayerCard:
    """Strokes, per-hole results and validated-only totals for one player."""
    strokes = strokes_per_hole(handicap, course.stroke_index)

    holes = []
    for i, (gross, hole_strokes, par) in enumerate(zip(gross_scores, strokes, course.pars)):
        holes.append(
            PlayerHoleScore(
                hole_number=i + 1,
                gross=gross,
                strokes=hole_strokes,
                net=net_score(gross, hole_strokes),
                stableford_points=stableford_points(gross, par, hole_strokes),
                validated=validated_holes[i],
            )
        )

    return PlayerCard(
        player_id=player_id,
        playing_handicap=handicap,
        strokes=tuple(strokes),
        holes=tuple(holes),
        gross_total=total_score(gross_scores, strokes, 'gross', validated_holes, course.pars),
        net_total=total_score(gross_scores, strokes, 'net', validated_holes, course.pars),
        stableford_total=total_score(
            gross_scores, strokes, 'stableford', validated_holes, course.pars
        ),
        front_nine_net=front_nine(gross_scores, strokes, 'net', validated_holes, course.pars),
        back_nine_net=back_nine(gross_scores, strokes, 'net', validated_holes, course.pars),
        holes_entered=sum(1 for g in gross_scores if g > 0),
    )


def _entries(cards: Mapping[str, PlayerCard], side: tuple[str, ...], hole: int) -> list[HoleEntry]:
    entries = []
    for player_id in side:
        card = cards.get(player_id)
        if card is None:
            continue
        hole_score = card.holes[hole]
        if hole_score.gross > 0:
            entries.append(HoleEntry(hole_score.gross, hole_score.strokes))
    return entries


def score_match(
    match: Match,
    sheet: HoleScoreSheet,
    players: Mapping[str, Player],
    course: Course = DEFAULT_COURSE,
    tee: str | Tee | None = None,
    config: PointsConfig = DEFAULT_POINTS_CONFIG,
) -> MatchScorecard:
    """
    Recompute everything derived from a match's score sheet.

    Per-hole formats (High-Low, or any format under match play) are decided on
    cumulative hole points and complete as soon as the match is clinched or all 18
    holes are validated. Aggregate formats compare side totals over validated holes
    and complete once all 18 holes are validated.

    Args:
        match: Match definition
        sheet: The match's HoleScoreSheet
        players: Player lookup by id (for handicap indices)
        course: Pars and stroke indices
        tee: Tee for playing handicaps (default: match tee, then yellow)
        config: Points per match and tie points

    Returns:
        MatchScorecard

    Raises:
        DataIntegrityError: If the sheet is malformed
    """
    rule = get_format_rule(match.game_format)
    check_scoring_type(match.scoring_type)
    _check_sheet(match, sheet, rule)

    validated = tuple(bool(v) for v in sheet.validated_holes)
    tee = tee if tee is not None else match.tee

    cards: dict[str, PlayerCard] = {}
    for player_id in match.player_ids:
        player = players.get(player_id)
        if player is None:
            logger.warning(f'Match {match.id}: unknown player {player_id}, scoring off scratch')
            handicap = 0
        else:
            handicap = playing_handicap(player.handicap, tee)
        gross_scores = tuple(sheet.scores.get(player_id, (0,) * HOLES_PER_ROUND))
        cards[player_id] = build_player_card(player_id, gross_scores, handicap, validated, course)

    hole_points = []
    for hole in range(HOLES_PER_ROUND):
        if not validated[hole]:
            hole_points.append(None)
            continue
        points = rule.hole_points(
            _entries(cards, match.team_a_players, hole),
            _entries(cards, match.team_b_players, hole),
            course.pars[hole],
        )
        hole_points.append(points if points is not None else (0, 0))

    statuses = hole_by_hole_status(hole_points, validated)
    validated_count = sum(validated)

    if rule.decided_by_holes(match.scoring_type):
        game_won = check_game_won(statuses, validated, rule.points_per_hole)
        if validated_count:
            team_a_total = statuses[-1].cumulative_team_a_points
            team_b_total = statuses[-1].cumulative_team_b_points
        else:
            team_a_total = team_b_total = None
        complete = game_won.is_won or validated_count == HOLES_PER_ROUND
    else:
        # Totals decide aggregate formats, so hole wins never clinch them
        game_won = GameWonStatus(holes_remaining=HOLES_PER_ROUND - validated_count)
        team_a_total = _side_total(
            rule, cards, match.team_a_players, validated, course, match.scoring_type
        )
        team_b_total = _side_total(
            rule, cards, match.team_b_players, validated, course, match.scoring_type
        )
        complete = validated_count == HOLES_PER_ROUND

    result = resolve(
        match.game_format,
        match.scoring_type,
        team_a_total,
        team_b_total,
        complete,
        config,
        match_id=match.id,
        fixture_day_id=match.fixture_day_id,
    )
    logger.debug(
        f'Match {match.id}: {validated_count}/18 validated, '
        f'totals {team_a_total}-{team_b_total}, winner {result.winning_team}'
    )

    return MatchScorecard(
        match_id=match.id,
        fixture_day_id=match.fixture_day_id,
        game_format=match.game_format,
        scoring_type=match.scoring_type,
        player_cards=cards,
        hole_points=tuple(hole_points),
        hole_statuses=tuple(statuses),
        game_won=game_won,
        team_a_total=team_a_total,
        team_b_total=team_b_total,
        validated_count=validated_count,
        result=result,
    )


def _side_total(
    rule: FormatRule,
    cards: Mapping[str, PlayerCard],
    side: tuple[str, ...],
    validated: tuple[bool, ...],
    course: Course,
    scoring_type: str,
) -> Optional[float]:
    """Aggregate a side's validated holes, None if nothing has been validated."""
    total = None
    for hole in range(HOLES_PER_ROUND):
        if not validated[hole]:
            continue
        score = rule.side_hole_score(_entries(cards, side, hole), course.pars[hole], scoring_type)
        if score is not None:
            total = (total or 0) + score
    return total

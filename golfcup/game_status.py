"""Running match status and early-decision ("clinch") detection.

A match is won once the leader's advantage is larger than the points still available:

    |team A points - team B points| > holes remaining * points per hole

High-Low offers 3 points per hole (2 for best ball, 1 for worst ball); formats that
award a single point per hole offer 1.
"""

import logging
from typing import Optional, Sequence

from .constants import HOLES_PER_ROUND, TEAM_A, TEAM_B, TIED
from .exceptions import DataIntegrityError
from .models import GameWonStatus, HoleStatus

logger = logging.getLogger('golfcup.game_status')


def _check_shape(hole_points: Sequence, validated_holes: Sequence[bool]) -> None:
    if len(hole_points) != HOLES_PER_ROUND:
        raise DataIntegrityError(
            f'Expected {HOLES_PER_ROUND} hole results, got {len(hole_points)}'
        )
    if len(validated_holes) != HOLES_PER_ROUND:
        raise DataIntegrityError(
            f'Expected {HOLES_PER_ROUND} validation flags, got {len(validated_holes)}'
        )


def format_points(value: float) -> str:
    """Render a points value without a trailing '.0' (13.0 -> '13', 2.5 -> '2.5')."""
    return f'{value:g}'


def hole_by_hole_status(
    hole_points: Sequence[Optional[tuple[float, float]]],
    validated_holes: Sequence[bool],
) -> list[HoleStatus]:
    """
    Calculate the cumulative standing after each hole.

    Only validated holes add to the running totals. Unvalidated holes still get a
    status (carrying the totals forward) so hole numbers stay 1:1 with the output.

    Args:
        hole_points: 18 entries of (team A points, team B points), None if the hole
            has no result yet
        validated_holes: 18 validation flags

    Returns:
        List of 18 HoleStatus objects

    Raises:
        DataIntegrityError: On wrong lengths or a validated hole without a result
    """
    _check_shape(hole_points, validated_holes)

    statuses = []
    cumulative_a = 0
    cumulative_b = 0

    for i in range(HOLES_PER_ROUND):
        points = hole_points[i]
        if validated_holes[i]:
            if points is None:
                raise DataIntegrityError(f'Hole {i + 1} is validated but has no result')
            cumulative_a += points[0]
            cumulative_b += points[1]

        team_a_points, team_b_points = points if points is not None else (0, 0)
        diff = cumulative_a - cumulative_b
        if diff > 0:
            leading = TEAM_A
        elif diff < 0:
            leading = TEAM_B
        else:
            leading = TIED

        statuses.append(
            HoleStatus(
                hole_number=i + 1,
                team_a_points=team_a_points,
                team_b_points=team_b_points,
                cumulative_team_a_points=cumulative_a,
                cumulative_team_b_points=cumulative_b,
                leading_team=leading,
                lead_amount=abs(diff),
            )
        )

    return statuses


def _diff(status: HoleStatus) -> float:
    return status.cumulative_team_a_points - status.cumulative_team_b_points


def check_game_won(
    hole_statuses: Sequence[HoleStatus],
    validated_holes: Sequence[bool],
    points_per_hole: int = 3,
) -> GameWonStatus:
    """
    Determine whether the match is decided.

    Args:
        hole_statuses: Output of hole_by_hole_status
        validated_holes: 18 validation flags
        points_per_hole: Maximum points a hole can swing (3 for High-Low, 1 otherwise)

    Returns:
        GameWonStatus. Clinched matches display as "{margin}&{holes remaining}"
        (e.g. "3&2"), matches decided over all 18 holes as "{margin} UP".
    """
    _check_shape(hole_statuses, validated_holes)

    validated_count = sum(1 for v in validated_holes if v)
    holes_remaining = HOLES_PER_ROUND - validated_count

    if validated_count == 0:
        return GameWonStatus(holes_remaining=holes_remaining)

    last_validated = max(i for i, v in enumerate(validated_holes) if v)
    current_diff = _diff(hole_statuses[last_validated])
    margin = abs(current_diff)
    winning_team = TEAM_A if current_diff > 0 else TEAM_B

    # Round complete
    if holes_remaining == 0:
        if current_diff == 0:
            return GameWonStatus(margin=0, holes_remaining=0)
        return GameWonStatus(
            is_won=True,
            winning_team=winning_team,
            margin=margin,
            holes_remaining=0,
            decision_hole=HOLES_PER_ROUND,
            display_text=f'{format_points(margin)} UP',
        )

    max_remaining_points = holes_remaining * points_per_hole
    if margin <= max_remaining_points:
        return GameWonStatus(margin=margin, holes_remaining=holes_remaining)

    # Walk back to the last hole where the trailing side could still catch up;
    # the match was decided on the hole after it.
    decision_hole = last_validated + 1
    for i in range(last_validated, -1, -1):
        if not validated_holes[i]:
            continue
        remaining_at_hole = HOLES_PER_ROUND - (i + 1)
        if abs(_diff(hole_statuses[i])) <= remaining_at_hole * points_per_hole:
            decision_hole = i + 2
            break
        decision_hole = i + 1

    logger.debug(
        f'{winning_team} clinched on hole {decision_hole}: '
        f'{format_points(margin)} up with {holes_remaining} to play'
    )
    return GameWonStatus(
        is_won=True,
        winning_team=winning_team,
        margin=margin,
        holes_remaining=holes_remaining,
        decision_hole=decision_hole,
        display_text=f'{format_points(margin)}&{holes_remaining}',
    )


def hole_status_display(status: HoleStatus) -> tuple[str, Optional[str]]:
    """Short status text for a hole: ('AS', None) when all square, else ('3UP', team)."""
    if status.leading_team == TIED or status.lead_amount == 0:
        return 'AS', None
    return f'{format_points(status.lead_amount)}UP', status.leading_team

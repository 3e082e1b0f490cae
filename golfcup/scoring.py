"""Hole-level scoring: net scores, Stableford points and nine/eighteen-hole totals."""

from typing import Optional, Sequence

from .constants import (
    ALL_HOLES,
    BACK_NINE,
    FRONT_NINE,
    HOLE_PARS,
    HOLES_PER_ROUND,
    SCORE_TO_PAR_LABELS,
    STABLEFORD_POINTS,
)
from .exceptions import DataIntegrityError
from .models import DEFAULT_POINTS_CONFIG, PointsConfig

SCORE_KINDS = ('gross', 'net', 'stableford')


def net_score(gross: int, strokes: int) -> Optional[int]:
    """
    Net score for a hole (gross - strokes).

    A gross score of 0 means the hole has not been played and yields None,
    never a negative net score.
    """
    if gross < 0:
        raise DataIntegrityError(f'Gross score cannot be negative, got {gross}')
    if gross == 0:
        return None
    return gross - strokes


def stableford_points(gross: int, par: int, strokes: int) -> int:
    """
    Score a hole under Stableford.

    Scoring (net score relative to par):
        - Albatross or better (-3): 5 pts
        - Eagle (-2): 4 pts
        - Birdie (-1): 3 pts
        - Par: 2 pts
        - Bogey (+1): 1 pt
        - Double bogey or worse (+2): 0 pts

    An unplayed hole (gross 0) scores 0.
    """
    net = net_score(gross, strokes)
    if net is None:
        return 0
    to_par = min(max(net - par, -3), 2)
    return STABLEFORD_POINTS[to_par]


def score_to_par_label(net: int, par: int) -> str:
    """Name of a net result relative to par (e.g. 'birdie')."""
    to_par = min(max(net - par, -3), 2)
    return SCORE_TO_PAR_LABELS[to_par]


def _check_round(values: Sequence, name: str) -> None:
    if len(values) != HOLES_PER_ROUND:
        raise DataIntegrityError(f'{name} must have {HOLES_PER_ROUND} holes, got {len(values)}')


def hole_values(
    gross_scores: Sequence[int],
    strokes: Sequence[int],
    kind: str = 'net',
    pars: Sequence[int] = HOLE_PARS,
) -> list[Optional[int]]:
    """
    Per-hole gross, net or Stableford values for one player.

    Unplayed holes (gross 0) are None.
    """
    if kind not in SCORE_KINDS:
        raise ValueError(f'Unknown score kind: {kind} (expected one of {SCORE_KINDS})')
    _check_round(gross_scores, 'Gross scores')
    _check_round(strokes, 'Strokes')
    _check_round(pars, 'Pars')

    values: list[Optional[int]] = []
    for gross, hole_strokes, par in zip(gross_scores, strokes, pars):
        net = net_score(gross, hole_strokes)
        if net is None:
            values.append(None)
        elif kind == 'gross':
            values.append(gross)
        elif kind == 'net':
            values.append(net)
        else:
            values.append(stableford_points(gross, par, hole_strokes))
    return values


def sum_holes(
    gross_scores: Sequence[int],
    strokes: Sequence[int],
    kind: str = 'net',
    holes: Sequence[int] = ALL_HOLES,
    validated_holes: Optional[Sequence[bool]] = None,
    pars: Sequence[int] = HOLE_PARS,
) -> int:
    """
    Sum a player's scores over a set of holes.

    Args:
        gross_scores: 18 gross scores (0 = not played)
        strokes: 18 handicap stroke counts
        kind: 'gross', 'net' or 'stableford'
        holes: 0-based hole indices to include (default: all 18)
        validated_holes: If given, unvalidated holes are left out of the sum entirely
        pars: 18 par values

    Returns:
        Total over the played (and, if filtered, validated) holes
    """
    if validated_holes is not None:
        _check_round(validated_holes, 'Validated holes')

    values = hole_values(gross_scores, strokes, kind, pars)
    total = 0
    for hole in holes:
        if validated_holes is not None and not validated_holes[hole]:
            continue
        if values[hole] is not None:
            total += values[hole]
    return total


def front_nine(gross_scores, strokes, kind='net', validated_holes=None, pars=HOLE_PARS) -> int:
    """Total over holes 1-9."""
    return sum_holes(gross_scores, strokes, kind, FRONT_NINE, validated_holes, pars)


def back_nine(gross_scores, strokes, kind='net', validated_holes=None, pars=HOLE_PARS) -> int:
    """Total over holes 10-18."""
    return sum_holes(gross_scores, strokes, kind, BACK_NINE, validated_holes, pars)


def total_score(gross_scores, strokes, kind='net', validated_holes=None, pars=HOLE_PARS) -> int:
    """Total over all 18 holes."""
    return sum_holes(gross_scores, strokes, kind, ALL_HOLES, validated_holes, pars)


def day_points_available(match_count: int, config: PointsConfig = DEFAULT_POINTS_CONFIG) -> float:
    """
    Competition points on offer for a day.

    Singles (6v6): 6 matches x 1 point = 6 points available
    Pairs (6v6): 3 matches x 1 point = 3 points available
    """
    return match_count * config.points_per_match

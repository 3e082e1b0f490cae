"""Playing handicap lookup and per-hole stroke allocation.

Playing handicaps come from the per-tee course handicap tables published for the
course (World Handicap System). An index outside every band of a table falls back to
the slope formula:

    playing handicap = index * (slope rating / 113) + (course rating - par)
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import DEFAULT_TEE, HOLES_PER_ROUND, STROKE_INDEX
from .exceptions import DataIntegrityError, UnknownTeeError

logger = logging.getLogger('golfcup.stroke_table')

STANDARD_SLOPE = 113


@dataclass(frozen=True)
class StrokeBand:
    """Handicap indices from low to high (both inclusive) play off course_handicap."""
    low: float
    high: float
    course_handicap: int


@dataclass(frozen=True)
class Tee:
    """Rating constants and course handicap table for one set of tees."""
    name: str
    course_rating: float
    slope_rating: int
    par: int = 72
    length: str = ''
    bands: tuple[StrokeBand, ...] = ()


# White tees: Course Rating 71.7, Slope Rating 129
WHITE_TEE_TABLE = (
    StrokeBand(-3.6, -2.9, -3),
    StrokeBand(-2.8, -2.0, -2),
    StrokeBand(-1.9, -1.1, -1),
    StrokeBand(-1.0, -0.2, 0),
    StrokeBand(-0.1, 0.7, 1),
    StrokeBand(0.8, 1.5, 2),
    StrokeBand(1.6, 2.4, 3),
    StrokeBand(2.5, 3.3, 4),
    StrokeBand(3.4, 4.2, 5),
    StrokeBand(4.3, 5.0, 6),
    StrokeBand(5.1, 5.9, 7),
    StrokeBand(6.0, 6.8, 8),
    StrokeBand(6.9, 7.7, 9),
    StrokeBand(7.8, 8.5, 10),
    StrokeBand(8.6, 9.4, 11),
    StrokeBand(9.5, 10.3, 12),
    StrokeBand(10.4, 11.2, 13),
    StrokeBand(11.3, 12.0, 14),
    StrokeBand(12.1, 12.9, 15),
    StrokeBand(13.0, 13.8, 16),
    StrokeBand(13.9, 14.7, 17),
    StrokeBand(14.8, 15.5, 18),
    StrokeBand(15.6, 16.4, 19),
    StrokeBand(16.5, 17.3, 20),
    StrokeBand(17.4, 18.2, 21),
    StrokeBand(18.3, 19.0, 22),
    StrokeBand(19.1, 19.9, 23),
    StrokeBand(20.0, 20.8, 24),
    StrokeBand(20.9, 21.7, 25),
    StrokeBand(21.8, 22.5, 26),
    StrokeBand(22.6, 23.4, 27),
    StrokeBand(23.5, 24.3, 28),
    StrokeBand(24.4, 25.2, 29),
    StrokeBand(25.3, 26.1, 30),
    StrokeBand(26.2, 26.9, 31),
    StrokeBand(27.0, 27.8, 32),
    StrokeBand(27.9, 28.7, 33),
    StrokeBand(28.8, 29.6, 34),
    StrokeBand(29.7, 30.4, 35),
    StrokeBand(30.5, 31.3, 36),
    StrokeBand(31.4, 32.2, 37),
    StrokeBand(32.3, 33.1, 38),
    StrokeBand(33.2, 33.9, 39),
    StrokeBand(34.0, 34.8, 40),
    StrokeBand(34.9, 35.7, 41),
    StrokeBand(35.8, 36.6, 42),
    StrokeBand(36.7, 37.4, 43),
    StrokeBand(37.5, 38.3, 44),
    StrokeBand(38.4, 39.2, 45),
    StrokeBand(39.3, 40.1, 46),
    StrokeBand(40.2, 40.9, 47),
    StrokeBand(41.0, 41.8, 48),
    StrokeBand(41.9, 42.7, 49),
    StrokeBand(42.8, 43.6, 50),
    StrokeBand(43.7, 44.4, 51),
    StrokeBand(44.5, 45.3, 52),
    StrokeBand(45.4, 46.2, 53),
    StrokeBand(46.3, 47.1, 54),
    StrokeBand(47.2, 48.0, 55),
    StrokeBand(48.1, 48.8, 56),
    StrokeBand(48.9, 49.7, 57),
    StrokeBand(49.8, 50.6, 58),
    StrokeBand(50.7, 51.5, 59),
    StrokeBand(51.6, 52.3, 60),
    StrokeBand(52.4, 53.2, 61),
    StrokeBand(53.3, 54.0, 62),
)

# Yellow tees: Course Rating 68.7, Slope Rating 120
YELLOW_TEE_TABLE = (
    StrokeBand(-3.0, -2.1, -5),
    StrokeBand(-2.0, -1.2, -4),
    StrokeBand(-1.1, -0.2, -3),
    StrokeBand(-0.1, 0.7, -2),
    StrokeBand(0.8, 1.6, -1),
    StrokeBand(1.7, 2.6, 0),
    StrokeBand(2.7, 3.5, 1),
    StrokeBand(3.6, 4.5, 2),
    StrokeBand(4.6, 5.4, 3),
    StrokeBand(5.5, 6.4, 4),
    StrokeBand(6.5, 7.3, 5),
    StrokeBand(7.4, 8.2, 6),
    StrokeBand(8.3, 9.2, 7),
    StrokeBand(9.3, 10.1, 8),
    StrokeBand(10.2, 11.1, 9),
    StrokeBand(11.2, 12.0, 10),
    StrokeBand(12.1, 12.9, 11),
    StrokeBand(13.0, 13.9, 12),
    StrokeBand(14.0, 14.8, 13),
    StrokeBand(14.9, 15.8, 14),
    StrokeBand(15.9, 16.7, 15),
    StrokeBand(16.8, 17.7, 16),
    StrokeBand(17.8, 18.6, 17),
    StrokeBand(18.7, 19.5, 18),
    StrokeBand(19.6, 20.5, 19),
    StrokeBand(20.6, 21.4, 20),
    StrokeBand(21.5, 22.4, 21),
    StrokeBand(22.5, 23.3, 22),
    StrokeBand(23.4, 24.2, 23),
    StrokeBand(24.3, 25.2, 24),
    StrokeBand(25.3, 26.1, 25),
    StrokeBand(26.2, 27.1, 26),
    StrokeBand(27.2, 28.0, 27),
    StrokeBand(28.1, 29.0, 28),
    StrokeBand(29.1, 29.9, 29),
    StrokeBand(30.0, 30.8, 30),
    StrokeBand(30.9, 31.8, 31),
    StrokeBand(31.9, 32.7, 32),
    StrokeBand(32.8, 33.7, 33),
    StrokeBand(33.8, 34.6, 34),
    StrokeBand(34.7, 35.5, 35),
    StrokeBand(35.6, 36.5, 36),
    StrokeBand(36.6, 37.4, 37),
    StrokeBand(37.5, 38.4, 38),
    StrokeBand(38.5, 39.3, 39),
    StrokeBand(39.4, 40.3, 40),
    StrokeBand(40.4, 41.2, 41),
    StrokeBand(41.3, 42.1, 42),
    StrokeBand(42.2, 43.1, 43),
    StrokeBand(43.2, 44.0, 44),
    StrokeBand(44.1, 45.0, 45),
    StrokeBand(45.1, 45.9, 46),
    StrokeBand(46.0, 46.8, 47),
    StrokeBand(46.9, 47.8, 48),
    StrokeBand(47.9, 48.7, 49),
    StrokeBand(48.8, 49.7, 50),
    StrokeBand(49.8, 50.6, 51),
    StrokeBand(50.7, 51.6, 52),
    StrokeBand(51.7, 52.5, 53),
    StrokeBand(52.6, 53.4, 54),
    StrokeBand(53.5, 54.0, 55),
)

WHITE_TEE = Tee(
    'white', course_rating=71.7, slope_rating=129, par=72, length='5886m', bands=WHITE_TEE_TABLE
)
YELLOW_TEE = Tee(
    'yellow', course_rating=68.7, slope_rating=120, par=72, length='5418m', bands=YELLOW_TEE_TABLE
)

TEES = {
    'white': WHITE_TEE,
    'yellow': YELLOW_TEE,
}


def get_tee(tee: str | Tee | None = None) -> Tee:
    """
    Resolve a tee name to its Tee definition.

    Args:
        tee: Tee object, tee name ('white', 'yellow'), or None for the default tee

    Returns:
        Tee with rating constants and stroke table

    Raises:
        UnknownTeeError: If the name is not a configured tee
    """
    if isinstance(tee, Tee):
        return tee
    name = (tee or DEFAULT_TEE).lower()
    if name not in TEES:
        raise UnknownTeeError(f'Unknown tee: {tee!r} (expected one of {", ".join(sorted(TEES))})')
    return TEES[name]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def slope_formula_handicap(handicap_index: float, tee: str | Tee | None = None) -> int:
    """Playing handicap from the slope formula, without consulting the table."""
    tee = get_tee(tee)
    return _round_half_up(
        handicap_index * (tee.slope_rating / STANDARD_SLOPE) + (tee.course_rating - tee.par)
    )


def playing_handicap(handicap_index: float, tee: str | Tee | None = None) -> int:
    """
    Look up the playing handicap for a handicap index on the given tee.

    Bands are inclusive on both ends. Indices outside every band use the slope formula,
    bounded by the neighbouring bands so the result never decreases as the index grows.

    Args:
        handicap_index: Player's handicap index (e.g. 14.2, -1.5)
        tee: Tee name or Tee object (default: yellow)

    Returns:
        Whole-number playing handicap

    Example:
        >>> playing_handicap(15.0, 'white')
        18
    """
    tee = get_tee(tee)

    for band in tee.bands:
        if band.low <= handicap_index <= band.high:
            return band.course_handicap

    result = slope_formula_handicap(handicap_index, tee)

    below: Optional[int] = max(
        (b.course_handicap for b in tee.bands if b.high < handicap_index), default=None
    )
    above: Optional[int] = min(
        (b.course_handicap for b in tee.bands if b.low > handicap_index), default=None
    )
    if below is not None:
        result = max(result, below)
    if above is not None:
        result = min(result, above)

    logger.debug(
        f'Index {handicap_index} outside {tee.name} table, slope formula gives {result}'
    )
    return result


def strokes_per_hole(
    playing_handicap: int,
    stroke_index: Sequence[int] = STROKE_INDEX,
) -> list[int]:
    """
    Allocate handicap strokes to each of the 18 holes.

    A hole with stroke index si gets one stroke when the handicap is at least si, a
    second when it is at least 18 + si, and so on. The allocation always sums to the
    playing handicap. Zero and plus (negative) handicaps receive no strokes.

    Args:
        playing_handicap: Whole-number playing handicap
        stroke_index: Stroke index rank of each hole (1 = hardest)

    Returns:
        List of 18 stroke counts, in hole order
    """
    if len(stroke_index) != HOLES_PER_ROUND:
        raise DataIntegrityError(
            f'Stroke index must have {HOLES_PER_ROUND} entries, got {len(stroke_index)}'
        )

    strokes = []
    for si in stroke_index:
        if playing_handicap >= si:
            strokes.append((playing_handicap - si) // HOLES_PER_ROUND + 1)
        else:
            strokes.append(0)
    return strokes


def course_info(tee: str | Tee | None = None) -> dict:
    """Course length and ratings for display."""
    tee = get_tee(tee)
    return {
        'tee': tee.name,
        'length': tee.length,
        'course_rating': tee.course_rating,
        'slope_rating': tee.slope_rating,
        'par': tee.par,
    }

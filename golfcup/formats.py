"""Competition formats.

Each format is a FormatRule carrying its own per-hole and per-total comparison, so the
match pipeline never branches on format names. Adding a format means adding a rule to
FORMAT_RULES.

Per-hole points (feed the running match status):
    - High-Low: best net of each pair compared for 2 pts, worst net for 1 pt,
      ties split (1/1 and 0.5/0.5). Needs two scores per side.
    - Everything else: best net of each side compared for 1 pt, 0.5 each on a tie.

Side totals (aggregate formats, compared once the round is complete):
    - Singles, Foursomes, Chapman: sum of each player's net score (or Stableford points)
    - Fourball: best ball of the side on every hole
    - Texas Scramble: the side's single ball, no handicap strokes
"""

from typing import NamedTuple, Optional, Sequence

from .constants import (
    CHAPMAN,
    FOURBALL,
    FOURSOMES,
    HIGH_LOW,
    MATCHPLAY,
    SCORING_TYPES,
    SINGLES,
    STABLEFORD,
    TEXAS_SCRAMBLE,
)
from .exceptions import UnknownFormatError
from .scoring import stableford_points


class HoleEntry(NamedTuple):
    """One player's entered gross score and handicap strokes on a hole."""
    gross: int
    strokes: int

    @property
    def net(self) -> int:
        return self.gross - self.strokes


HolePoints = tuple[float, float]


def compare_low(a: float, b: float, points: float) -> HolePoints:
    """Award points to the lower value, splitting them evenly on a tie."""
    if a < b:
        return points, 0
    if b < a:
        return 0, points
    return points / 2, points / 2


class FormatRule:
    """Base rule: best-ball hole comparison and summed individual totals."""

    name = ''
    points_per_hole = 1
    min_hole_entries = 1

    def entries_required(self, side_size: int) -> int:
        """Scores a side must enter before a hole can be validated."""
        return side_size

    def decided_by_holes(self, scoring_type: str) -> bool:
        """Whether the match result comes from cumulative hole points."""
        return scoring_type == MATCHPLAY

    def higher_wins(self, scoring_type: str) -> bool:
        """Whether the higher total wins (points) or the lower total (strokes)."""
        return self.decided_by_holes(scoring_type) or scoring_type == STABLEFORD

    def hole_points(
        self, side_a: Sequence[HoleEntry], side_b: Sequence[HoleEntry], par: int
    ) -> Optional[HolePoints]:
        """Points each side takes from a hole, or None if it cannot be compared yet."""
        if len(side_a) < self.min_hole_entries or len(side_b) < self.min_hole_entries:
            return None
        best_a = min(e.net for e in side_a)
        best_b = min(e.net for e in side_b)
        return compare_low(best_a, best_b, self.points_per_hole)

    def side_hole_score(
        self, entries: Sequence[HoleEntry], par: int, scoring_type: str
    ) -> Optional[float]:
        """A side's contribution to its aggregate total on one hole."""
        if not entries:
            return None
        if scoring_type == STABLEFORD:
            return sum(stableford_points(e.gross, par, e.strokes) for e in entries)
        return sum(e.net for e in entries)

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r})'


class SinglesRule(FormatRule):
    name = SINGLES


class FoursomesRule(FormatRule):
    name = FOURSOMES


class ChapmanRule(FormatRule):
    name = CHAPMAN


class FourballRule(FormatRule):
    """Each player plays their own ball; the side's best net counts."""

    name = FOURBALL

    def side_hole_score(self, entries, par, scoring_type):
        if not entries:
            return None
        if scoring_type == STABLEFORD:
            return max(stableford_points(e.gross, par, e.strokes) for e in entries)
        return min(e.net for e in entries)


class TexasScrambleRule(FormatRule):
    """One ball per side, played off scratch."""

    name = TEXAS_SCRAMBLE

    def entries_required(self, side_size):
        return min(side_size, 1)

    def hole_points(self, side_a, side_b, par):
        if not side_a or not side_b:
            return None
        return compare_low(
            min(e.gross for e in side_a), min(e.gross for e in side_b), self.points_per_hole
        )

    def side_hole_score(self, entries, par, scoring_type):
        if not entries:
            return None
        team_gross = min(e.gross for e in entries)
        if scoring_type == STABLEFORD:
            return stableford_points(team_gross, par, 0)
        return team_gross


class HighLowRule(FormatRule):
    """Best score = 2 points, worst score = 1 point per hole."""

    name = HIGH_LOW
    points_per_hole = 3
    min_hole_entries = 2

    def decided_by_holes(self, scoring_type):
        return True

    def hole_points(self, side_a, side_b, par):
        if len(side_a) < self.min_hole_entries or len(side_b) < self.min_hole_entries:
            return None

        nets_a = [e.net for e in side_a]
        nets_b = [e.net for e in side_b]

        best_a, best_b = compare_low(min(nets_a), min(nets_b), 2)
        worst_a, worst_b = compare_low(max(nets_a), max(nets_b), 1)
        return best_a + worst_a, best_b + worst_b


FORMAT_RULES: dict[str, FormatRule] = {
    rule.name: rule
    for rule in (
        SinglesRule(),
        TexasScrambleRule(),
        HighLowRule(),
        FoursomesRule(),
        FourballRule(),
        ChapmanRule(),
    )
}


def get_format_rule(game_format: str) -> FormatRule:
    """
    Look up the rule for a competition format.

    Raises:
        UnknownFormatError: If the format has no rule
    """
    try:
        return FORMAT_RULES[game_format]
    except KeyError:
        raise UnknownFormatError(
            f'Unknown game format: {game_format!r} (expected one of {", ".join(FORMAT_RULES)})'
        ) from None


def check_scoring_type(scoring_type: str) -> str:
    """Return the scoring type, raising UnknownFormatError if it is not supported."""
    if scoring_type not in SCORING_TYPES:
        raise UnknownFormatError(
            f'Unknown scoring type: {scoring_type!r} (expected one of {", ".join(SCORING_TYPES)})'
        )
    return scoring_type

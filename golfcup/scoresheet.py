"""Score entry on a HoleScoreSheet.

Every operation returns a new sheet; the one passed in is never modified. Hole numbers
are 1-based here, matching what players see on the card.
"""

import logging
from dataclasses import replace

from .constants import HOLES_PER_ROUND
from .exceptions import DataIntegrityError
from .formats import get_format_rule
from .models import HoleScoreSheet, Match

logger = logging.getLogger('golfcup.scoresheet')


def new_score_sheet(match: Match) -> HoleScoreSheet:
    """Blank sheet with a zeroed card for every player in the match."""
    return HoleScoreSheet(
        match_id=match.id,
        scores={player_id: (0,) * HOLES_PER_ROUND for player_id in match.player_ids},
        validated_holes=(False,) * HOLES_PER_ROUND,
    )


def _hole_index(hole: int) -> int:
    if not 1 <= hole <= HOLES_PER_ROUND:
        raise DataIntegrityError(f'Hole must be 1-{HOLES_PER_ROUND}, got {hole}')
    return hole - 1


def hole_complete(match: Match, sheet: HoleScoreSheet, hole: int) -> bool:
    """Whether every side has entered the scores its format needs on a hole."""
    index = _hole_index(hole)
    rule = get_format_rule(match.game_format)
    for side in (match.team_a_players, match.team_b_players):
        entered = sum(1 for p in side if sheet.scores.get(p, (0,) * HOLES_PER_ROUND)[index] > 0)
        if entered < rule.entries_required(len(side)):
            return False
    return True


def record_score(
    match: Match,
    sheet: HoleScoreSheet,
    player_id: str,
    hole: int,
    gross: int,
    auto_validate: bool = True,
) -> HoleScoreSheet:
    """
    Enter one player's gross score on one hole.

    Args:
        match: Match the sheet belongs to
        sheet: Current sheet
        player_id: Player entering the score
        hole: Hole number (1-18)
        gross: Gross strokes (0 clears the entry)
        auto_validate: Validate the hole once every required score is in

    Returns:
        New HoleScoreSheet

    Raises:
        DataIntegrityError: Unknown player, hole out of range or negative score
    """
    index = _hole_index(hole)
    if player_id not in match.player_ids:
        raise DataIntegrityError(f'Player {player_id} is not in match {match.id}')
    if gross < 0:
        raise DataIntegrityError(f'Gross score cannot be negative, got {gross}')

    card = list(sheet.scores.get(player_id, (0,) * HOLES_PER_ROUND))
    card[index] = gross
    scores = dict(sheet.scores)
    scores[player_id] = tuple(card)
    updated = replace(sheet, scores=scores)

    if gross == 0 and updated.validated_holes[index] and not hole_complete(match, updated, hole):
        # A cleared score can no longer support a validated hole
        updated = set_hole_validated(updated, hole, False)
    elif auto_validate and gross > 0 and not updated.validated_holes[index]:
        if hole_complete(match, updated, hole):
            logger.debug(f'Match {match.id}: hole {hole} auto-validated')
            updated = set_hole_validated(updated, hole, True)

    return updated


def set_hole_validated(sheet: HoleScoreSheet, hole: int, validated: bool) -> HoleScoreSheet:
    """Set a hole's validation flag."""
    index = _hole_index(hole)
    flags = list(sheet.validated_holes)
    flags[index] = bool(validated)
    return replace(sheet, validated_holes=tuple(flags))


def toggle_hole_validation(sheet: HoleScoreSheet, hole: int) -> HoleScoreSheet:
    """Flip a hole's validation flag."""
    return set_hole_validated(sheet, hole, not sheet.validated_holes[_hole_index(hole)])


def validated_count(sheet: HoleScoreSheet) -> int:
    return sum(1 for v in sheet.validated_holes if v)


def thru_hole(sheet: HoleScoreSheet) -> int:
    """Last validated hole number, 0 if none."""
    validated = [i + 1 for i, v in enumerate(sheet.validated_holes) if v]
    return max(validated, default=0)

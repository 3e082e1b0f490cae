"""Excel export of leaderboards and match scorecards."""

import logging
import re
from pathlib import Path
from typing import Mapping, Optional

import openpyxl
from openpyxl.styles import Font

from .constants import HOLES_PER_ROUND, TEAM_A, TEAM_B
from .formats import get_format_rule
from .game_status import format_points, hole_status_display
from .models import DayLeaderboard, MatchScorecard, OverallLeaderboard, TeamStanding

logger = logging.getLogger('golfcup.export')

BOLD = Font(bold=True)

TEAM_HEADERS = ['Team', 'Points', 'Won', 'Lost', 'Tied', 'Remaining', 'Can Win']
PLAYER_HEADERS = ['Player', 'Team', 'Gross', 'Net', 'Stableford', 'Thru', 'W-L-T']

# Characters openpyxl refuses in sheet titles
INVALID_TITLE_CHARS = re.compile(r'[:\\/?*\[\]]')


def _write_header(ws, row: int, headers: list[str]) -> None:
    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=row, column=col, value=header)
        cell.font = BOLD


def _team_row(standing: TeamStanding) -> list:
    return [
        standing.team_name,
        standing.total_points,
        standing.matches_won,
        standing.matches_lost,
        standing.matches_tied,
        standing.potential_remaining_points,
        'Yes' if standing.is_winning_possible else 'No',
    ]


def _write_overall(ws, overall: OverallLeaderboard) -> None:
    ws.cell(row=1, column=1, value='Overall Standings').font = BOLD
    _write_header(ws, 3, TEAM_HEADERS)
    row = 4
    for standing in overall.team_standings:
        for col, value in enumerate(_team_row(standing), 1):
            ws.cell(row=row, column=col, value=value)
        row += 1

    row += 1
    ws.cell(row=row, column=1, value='Matches played')
    ws.cell(row=row, column=2, value=overall.total_matches_played)
    ws.cell(row=row + 1, column=1, value='Matches remaining')
    ws.cell(row=row + 1, column=2, value=overall.total_matches_remaining)
    ws.cell(row=row + 2, column=1, value='Winner')
    ws.cell(row=row + 2, column=2, value=overall.winning_team or 'Undecided')


def _write_day(ws, board: DayLeaderboard) -> None:
    ws.cell(row=1, column=1, value=f'Day {board.day_number}: {board.course_name}').font = BOLD
    ws.cell(row=2, column=1, value=f'{board.game_format} {board.date}'.strip())
    ws.cell(row=2, column=4, value='Points available')
    ws.cell(row=2, column=5, value=board.points_available)

    _write_header(ws, 4, TEAM_HEADERS)
    row = 5
    for standing in board.team_standings:
        for col, value in enumerate(_team_row(standing), 1):
            ws.cell(row=row, column=col, value=value)
        row += 1

    row += 1
    _write_header(ws, row, PLAYER_HEADERS)
    row += 1
    for entry in board.individual_standings:
        values = [
            entry.player_name,
            entry.team_id,
            entry.gross_score,
            entry.net_score,
            entry.stableford_points,
            entry.thru_hole,
            f'{entry.matches_won}-{entry.matches_lost}-{entry.matches_tied}',
        ]
        for col, value in enumerate(values, 1):
            ws.cell(row=row, column=col, value=value)
        row += 1


def _write_scorecard(ws, scorecard: MatchScorecard, player_names: Mapping[str, str]) -> None:
    ws.cell(row=1, column=1, value=f'Match {scorecard.match_id}').font = BOLD
    ws.cell(row=2, column=1, value=f'{scorecard.game_format} / {scorecard.scoring_type}')
    if scorecard.game_won.is_won:
        ws.cell(row=2, column=4, value=scorecard.game_won.display_text)

    _write_header(ws, 4, ['Hole'] + [str(h) for h in range(1, HOLES_PER_ROUND + 1)] + ['Total'])
    row = 5
    for player_id, card in scorecard.player_cards.items():
        name = player_names.get(player_id, player_id)
        ws.cell(row=row, column=1, value=f'{name} gross')
        ws.cell(row=row + 1, column=1, value=f'{name} net')
        ws.cell(row=row + 2, column=1, value=f'{name} pts')
        for hole in card.holes:
            col = hole.hole_number + 1
            if hole.gross:
                ws.cell(row=row, column=col, value=hole.gross)
                ws.cell(row=row + 1, column=col, value=hole.net)
                ws.cell(row=row + 2, column=col, value=hole.stableford_points)
        total_col = HOLES_PER_ROUND + 2
        ws.cell(row=row, column=total_col, value=card.gross_total)
        ws.cell(row=row + 1, column=total_col, value=card.net_total)
        ws.cell(row=row + 2, column=total_col, value=card.stableford_total)
        row += 3

    # Running match status on validated holes, for formats decided hole by hole
    rule = get_format_rule(scorecard.game_format)
    if rule.decided_by_holes(scorecard.scoring_type):
        ws.cell(row=row, column=1, value='Status').font = BOLD
        for status, points in zip(scorecard.hole_statuses, scorecard.hole_points):
            if points is None:
                continue
            text, team = hole_status_display(status)
            if team is not None:
                text = f'{text} {"A" if team == TEAM_A else "B"}'
            ws.cell(row=row, column=status.hole_number + 1, value=text)

    result = scorecard.result
    row += 2
    ws.cell(row=row, column=1, value='Result')
    if result.is_complete:
        ws.cell(row=row, column=2, value=result.winning_team)
        ws.cell(
            row=row,
            column=3,
            value=f'{format_points(result.team_a_points)}-{format_points(result.team_b_points)}',
        )
    else:
        leader = {TEAM_A: 'team-a leads', TEAM_B: 'team-b leads'}.get(result.leading_team, '')
        ws.cell(row=row, column=2, value=leader or 'In progress')


def sheet_title(title: str) -> str:
    """Make a string safe to use as a worksheet title (max 31 characters)."""
    return INVALID_TITLE_CHARS.sub('-', title)[:31]


def export_leaderboard_workbook(
    path: str | Path,
    overall: OverallLeaderboard,
    scorecards: Optional[Mapping[str, MatchScorecard]] = None,
    player_names: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Write leaderboards and scorecards to an Excel workbook.

    Sheets: "Overall", one "Day N" sheet per fixture day, and one sheet per scored match.

    Args:
        path: Output .xlsx path
        overall: Overall leaderboard
        scorecards: Optional match scorecards by match id
        player_names: Optional player id -> display name

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    player_names = player_names or {}

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = 'Overall'
    _write_overall(ws, overall)

    for board in overall.day_leaderboards:
        _write_day(wb.create_sheet(f'Day {board.day_number}'), board)

    for match_id, scorecard in (scorecards or {}).items():
        ws = wb.create_sheet(sheet_title(f'Match {match_id}'))
        _write_scorecard(ws, scorecard, player_names)

    wb.save(path)
    wb.close()
    logger.info(f'Workbook saved to {path}')
    return path

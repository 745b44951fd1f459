"""How the computer chooses its move."""

from __future__ import annotations

from alumgame.board import Board


def endgame_take(matches: int) -> int:
    """Matches to take when only one row is left, aiming to leave 4k+1."""
    if matches % 4 == 1:
        return 1
    if matches > 5 and matches % 4 > 1:
        return matches % 4 - 1
    if matches > 5 and matches % 4 == 0:
        return 3
    if 1 < matches < 5:
        return matches - 1
    return 1


def bot_take(board: Board) -> int:
    """Matches the computer takes from the last row of ``board``."""
    matches = board.last_row()
    if len(board) == 1:
        return endgame_take(matches)
    if matches > 5:
        return 3
    if matches == 5:
        return 1
    if matches == 2:
        return 1
    if matches == 3:
        return 2
    if matches == 4:
        return 3
    return 1
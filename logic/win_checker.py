"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

from .config import GameConfig
from .game_state import Board, GameResult, Player


# All possible winning lines, never recomputed
WINNING_LINES = GameConfig.WINNING_LINES


def _check_line(board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
    """
    Check if a single line has a winner.

    Returns:
        The Player holding all 3 cells, None otherwise.
    """
    a, b, c = line
    cell = board[a]
    if cell is not None and cell == board[b] == board[c]:
        return cell
    return None


def check_winner(board: Board) -> Optional[Player]:
    """
    Check if there's a winner.

    On a board reached through alternating legal moves at most one player
    can hold a complete line, so the first match is returned.
    """
    for line in WINNING_LINES:
        winner = _check_line(board, line)
        if winner is not None:
            return winner
    return None


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """Get the first complete line as an index triple, or None."""
    for line in WINNING_LINES:
        if _check_line(board, line) is not None:
            return line
    return None


def is_board_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def check_draw(board: Board) -> bool:
    """
    Check if the game is a draw.

    A draw is a full board with no winner. A full board that completes a
    line is a win, never a draw.
    """
    # First check if there's a winner - if so, not a draw
    if check_winner(board) is not None:
        return False
    return is_board_full(board)


def get_game_status(board: Board) -> GameResult:
    """Derive the round result from the board content alone."""
    winner = check_winner(board)
    if winner == Player.X:
        return GameResult.WIN_X
    if winner == Player.O:
        return GameResult.WIN_O
    if is_board_full(board):
        return GameResult.DRAW
    return GameResult.PLAYING

"""
Board model for TicTacToe.

A board is a tuple of 9 cells in row-major order. Tuples cannot change,
so every move builds a new board and the old one stays as it was.
"""

from typing import List

from .game_state import Board, Player, EMPTY_BOARD
from .move_validator import validate_move


def create_board() -> Board:
    """Create a fresh board with all 9 cells empty."""
    return EMPTY_BOARD


def make_move(board: Board, index: int, player: Player) -> Board:
    """
    Place a player's mark on a copy of the board.

    Args:
        board: The board to start from (left untouched).
        index: Cell index (0-8).
        player: Whose mark to place.

    Returns:
        The new board.

    Raises:
        OutOfRangeError: index is not 0-8.
        CellOccupiedError: the cell is not empty.
    """
    validate_move(board, index).raise_for_error()
    cells = tuple(board)
    return cells[:index] + (player,) + cells[index + 1:]


def get_available_moves(board: Board) -> List[int]:
    """Indices of the empty cells, ascending."""
    return [i for i, cell in enumerate(board) if cell is None]


def get_next_player(player: Player) -> Player:
    """The player who moves after `player`."""
    return player.opposite()


def parse_board(text: str) -> Board:
    """
    Build a board from 9 characters, row-major.

    'X' and 'O' are marks, '.' is an empty cell. Whitespace is ignored,
    so "XO. .X. ..O" works too.
    """
    chars = [c for c in text if not c.isspace()]
    if len(chars) != 9:
        raise ValueError(f"Expected 9 cells, got {len(chars)}: {text!r}")
    return tuple(None if c == '.' else Player(c.upper()) for c in chars)


def format_board(board: Board) -> str:
    """
    Render the board as text.

    Empty cells show their 1-9 number so console players know what to type.
    """
    rows = []
    for row in range(3):
        cells = []
        for col in range(3):
            index = row * 3 + col
            cell = board[index]
            cells.append(f" {cell.value if cell else index + 1} ")
        rows.append("|".join(cells))
    return "\n---+---+---\n".join(rows)

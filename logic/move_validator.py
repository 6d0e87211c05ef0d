"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board


class InvalidMoveError(ValueError):
    """A move that breaks the board rules. Callers are expected to check first."""


class OutOfRangeError(InvalidMoveError):
    """The index is not one of the 9 cells."""


class CellOccupiedError(InvalidMoveError):
    """The target cell already holds a mark."""


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error_type: Optional[type] = None

    def raise_for_error(self):
        """Raise the matching InvalidMoveError if the move was rejected."""
        if not self.is_valid:
            raise self.error_type(self.error_message)


def validate_move(board: Board, index: int) -> ValidationResult:
    """
    Validate a move.

    Rules:
    1. Index must be an int in 0-8
    2. Can only place on empty cells

    Args:
        board: Current board.
        index: Cell to place a mark in.

    Returns:
        ValidationResult with is_valid and error_message.
    """
    # bool is an int subclass but never a cell index
    if (not isinstance(index, int) or isinstance(index, bool)
            or not 0 <= index < GameConfig.NUM_CELLS):
        return ValidationResult(
            is_valid=False,
            error_message=f"Index {index!r} is out of bounds. Must be 0-8.",
            error_type=OutOfRangeError,
        )

    if board[index] is not None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Cell {index} is already occupied by {board[index].value}.",
            error_type=CellOccupiedError,
        )

    return ValidationResult(is_valid=True)


def is_valid_move(board: Board, index: int) -> bool:
    """True if index is in range and the cell is empty. Never raises."""
    return validate_move(board, index).is_valid

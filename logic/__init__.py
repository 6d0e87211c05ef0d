"""
Logic module for TicTacToe.
Handles the board rules, the AI opponent, and the game state machine.
"""

from .config import GameConfig
from .game_state import (
    GameState,
    Player,
    Screen,
    GameMode,
    Difficulty,
    GameResult,
    Scores,
    INITIAL_STATE,
)
from .move_validator import (
    ValidationResult,
    InvalidMoveError,
    OutOfRangeError,
    CellOccupiedError,
    is_valid_move,
)
from .board import create_board, make_move, get_available_moves, get_next_player
from .win_checker import check_winner, get_winning_line, check_draw, get_game_status
from .ai_player import AIPlayer, NO_MOVE, minimax, get_best_move, get_random_move, get_ai_move
from .reducer import reduce
from .store import Store

__version__ = "1.0.0"

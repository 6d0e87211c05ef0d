"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import random
from functools import lru_cache
from typing import Optional

from .board import get_available_moves, make_move
from .config import GameConfig
from .game_state import Board, Difficulty, Player
from .win_checker import check_winner, check_draw


NO_MOVE = GameConfig.NO_MOVE


def minimax(board: Board, depth: int, maximizing: bool, ai_symbol: Player) -> int:
    """
    Minimax over the whole remaining game tree (no pruning).

    Args:
        board: Position to evaluate.
        depth: Plies played since the search root.
        maximizing: True if it's the AI's turn to move.
        ai_symbol: The symbol the AI plays.

    Returns:
        The score of the position from the AI's point of view:
        10 - depth for an AI win (faster is better), -10 + depth for a
        loss (later is better, the opponent gets more chances to slip),
        0 for a draw.
    """
    return _minimax(tuple(board), depth, maximizing, ai_symbol)


# Boards are tuples and the search is pure, so positions reached through
# different move orders are scored once.
@lru_cache(maxsize=None)
def _minimax(board: Board, depth: int, maximizing: bool, ai_symbol: Player) -> int:
    winner = check_winner(board)
    if winner == ai_symbol:
        return GameConfig.WIN_SCORE - depth
    elif winner is not None:
        return -GameConfig.WIN_SCORE + depth
    elif check_draw(board):
        return 0

    if maximizing:
        best = float('-inf')
        for index in get_available_moves(board):
            score = _minimax(make_move(board, index, ai_symbol), depth + 1, False, ai_symbol)
            best = max(best, score)
        return best
    else:
        opponent = ai_symbol.opposite()
        best = float('inf')
        for index in get_available_moves(board):
            score = _minimax(make_move(board, index, opponent), depth + 1, True, ai_symbol)
            best = min(best, score)
        return best


def get_best_move(board: Board, ai_symbol: Player) -> int:
    """
    Get the best move for ai_symbol.

    Moves are tried in ascending index order and only a strictly higher
    score replaces the current pick, so ties go to the lowest index.

    Returns:
        Cell index of the best move, or NO_MOVE if the board is full.
    """
    best_score = float('-inf')
    best_move = NO_MOVE

    for index in get_available_moves(board):
        score = _minimax(make_move(board, index, ai_symbol), 0, False, ai_symbol)
        if score > best_score:
            best_score = score
            best_move = index

    return best_move


def get_random_move(board: Board, rng: Optional[random.Random] = None) -> int:
    """Get a random empty cell, or NO_MOVE if there is none."""
    moves = get_available_moves(board)
    if not moves:
        return NO_MOVE
    return (rng or random).choice(moves)


def get_ai_move(
    board: Board,
    difficulty: Difficulty,
    ai_symbol: Player,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Get the AI's move for a difficulty level.

    EASY always plays randomly, HARD always plays minimax. MEDIUM draws
    a fresh sample on every call and plays minimax with probability
    MEDIUM_OPTIMAL_PROBABILITY.
    """
    rng = rng or random
    if difficulty == Difficulty.EASY:
        return get_random_move(board, rng)
    elif difficulty == Difficulty.MEDIUM:
        if rng.random() < GameConfig.MEDIUM_OPTIMAL_PROBABILITY:
            return get_best_move(board, ai_symbol)
        return get_random_move(board, rng)
    elif difficulty == Difficulty.HARD:
        return get_best_move(board, ai_symbol)
    raise ValueError(f"Unknown difficulty: {difficulty!r}")


class AIPlayer:
    """
    An AI that plays one symbol at one difficulty.

    Owns its randomness source, so seeding it makes games repeatable.
    """

    def __init__(
        self,
        player: Player = Player.O,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the AI player.

        Args:
            player: Which symbol the AI plays (default: O)
            difficulty: Move selection policy.
            rng: Random source (a fresh unseeded one if not given).
        """
        self.player = player
        self.difficulty = difficulty
        self.rng = rng or random.Random()

    def choose_move(self, board: Board) -> int:
        """Pick a move on board, or NO_MOVE if it is full."""
        return get_ai_move(board, self.difficulty, self.player, self.rng)

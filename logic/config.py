"""
Game configuration for TicTacToe.
Board layout and AI tuning values.
"""


class GameConfig:
    """
    Configuration for the game rules and the AI.

    Board layout (indices):

         0 | 1 | 2
        -----------
         3 | 4 | 5
        -----------
         6 | 7 | 8
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # All possible winning lines (as index triples)
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    # ==================== AI SETTINGS ====================
    # Score for a won position (before the depth penalty)
    WIN_SCORE = 10

    # Chance that MEDIUM plays the minimax move instead of a random one.
    # Sampled again on every move request.
    MEDIUM_OPTIMAL_PROBABILITY = 0.5

    # Returned by the move selectors when the board has no empty cell
    NO_MOVE = -1

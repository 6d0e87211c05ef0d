"""
Game state for TicTacToe.
Holds the players, the board type, and the single application state value.
"""

from enum import Enum
from typing import Optional, Tuple, Any
from dataclasses import dataclass, field


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class Screen(Enum):
    """Navigation phase of the app."""
    MENU = "menu"
    SETUP = "setup"
    GAME = "game"


class GameMode(Enum):
    """Who the human plays against."""
    AI = "ai"
    MULTIPLAYER = "multiplayer"


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Coin flip between random and minimax, per move
    HARD = "hard"        # Full minimax


class GameResult(Enum):
    """Terminal status of a round. PLAYING is the only non-terminal value."""
    PLAYING = "playing"
    WIN_X = "win-x"
    WIN_O = "win-o"
    DRAW = "draw"


# A cell is Player.X, Player.O, or None (empty)
Cell = Optional[Player]

# Always 9 cells, row-major
Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (None,) * 9


@dataclass(frozen=True)
class Scores:
    """Win/draw counters for the current session."""
    x: int = 0
    o: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        """Number of finished rounds counted in these scores."""
        return self.x + self.o + self.draws


@dataclass(frozen=True)
class GameState:
    """
    The complete state of the app.

    Never modified in place: the reducer builds a new value for every
    transition, so older snapshots stay valid for whoever still holds them.

    Tracks:
    - Which screen is showing, and the chosen mode / difficulty / symbol
    - The board, whose turn it is, and the round result
    - Whether the AI is due to move (and the timer handle waiting for it)
    - Session scores and the round counter
    """

    # Screen navigation
    screen: Screen = Screen.MENU

    # Game settings
    mode: GameMode = GameMode.AI
    difficulty: Difficulty = Difficulty.MEDIUM
    human_symbol: Player = Player.X  # AI always takes the other one

    # Board state
    board: Board = EMPTY_BOARD
    current_player: Player = Player.X
    result: GameResult = GameResult.PLAYING
    winning_line: Optional[Tuple[int, int, int]] = None

    # AI state
    is_ai_turn: bool = False
    ai_timer_id: Any = None  # Opaque handle owned by the scheduler

    # Score tracking
    scores: Scores = field(default_factory=Scores)

    # Decides who opens a multiplayer round
    round_number: int = 0

    @property
    def ai_symbol(self) -> Player:
        """The symbol played by the AI in AI mode."""
        return self.human_symbol.opposite()

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.PLAYING


INITIAL_STATE = GameState()

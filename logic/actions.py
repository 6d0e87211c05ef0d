"""
Actions for TicTacToe.

Every change to the game state is described by one of these values and
applied by the reducer. The set is closed: ACTION_TYPES lists all of
them, and the reducer rejects anything else.
"""

from dataclasses import dataclass
from typing import Any, Union

from .game_state import Difficulty, GameMode, Player


@dataclass(frozen=True)
class SelectMode:
    """Pick AI or multiplayer from the menu."""
    mode: GameMode


@dataclass(frozen=True)
class SelectDifficulty:
    difficulty: Difficulty


@dataclass(frozen=True)
class SelectSymbol:
    """Pick which symbol the human plays against the AI."""
    symbol: Player


@dataclass(frozen=True)
class StartGame:
    """Leave the setup screen and begin an AI game."""


@dataclass(frozen=True)
class MakeMove:
    """A human places a mark for the current player."""
    index: int


@dataclass(frozen=True)
class AIMove:
    """The scheduler places the AI's mark."""
    index: int


@dataclass(frozen=True)
class SetAITimer:
    """Record the scheduler's pending timer handle. No game effect."""
    timer_id: Any


@dataclass(frozen=True)
class NewGame:
    """Next round of the match: scores kept, round counter advances."""


@dataclass(frozen=True)
class RestartGame:
    """Abandon the current round: no score or round change."""


@dataclass(frozen=True)
class BackToMenu:
    """Full reset to the initial state."""


Action = Union[
    SelectMode,
    SelectDifficulty,
    SelectSymbol,
    StartGame,
    MakeMove,
    AIMove,
    SetAITimer,
    NewGame,
    RestartGame,
    BackToMenu,
]

ACTION_TYPES = (
    SelectMode,
    SelectDifficulty,
    SelectSymbol,
    StartGame,
    MakeMove,
    AIMove,
    SetAITimer,
    NewGame,
    RestartGame,
    BackToMenu,
)

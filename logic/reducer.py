"""
Reducer for TicTacToe.

reduce(state, action) is the only way the game state changes. It never
modifies its argument and never raises for a known action: a move that
can't be played (finished round, taken cell, bad index) just returns the
same state object.
"""

from dataclasses import replace

from .actions import (
    Action,
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
from .board import create_board, make_move, get_next_player
from .game_state import (
    GameState,
    GameMode,
    GameResult,
    Player,
    Scores,
    Screen,
    INITIAL_STATE,
)
from .move_validator import is_valid_move
from .win_checker import get_game_status, get_winning_line


def _score_result(scores: Scores, result: GameResult) -> Scores:
    """Count a finished round. PLAYING leaves the scores alone."""
    if result == GameResult.WIN_X:
        return replace(scores, x=scores.x + 1)
    elif result == GameResult.WIN_O:
        return replace(scores, o=scores.o + 1)
    elif result == GameResult.DRAW:
        return replace(scores, draws=scores.draws + 1)
    return scores


def _apply_move(state: GameState, index: int) -> GameState:
    """
    Place the current player's mark and derive everything that follows.

    Caller has already checked the move is legal and the round is live.
    """
    board = make_move(state.board, index, state.current_player)
    result = get_game_status(board)
    next_player = get_next_player(state.current_player)
    is_ai_turn = (
        result == GameResult.PLAYING
        and state.mode == GameMode.AI
        and next_player == state.ai_symbol
    )
    return replace(
        state,
        board=board,
        current_player=next_player,
        result=result,
        winning_line=get_winning_line(board),
        scores=_score_result(state.scores, result),
        is_ai_turn=is_ai_turn,
    )


def _fresh_round(state: GameState, first_player: Player, **changes) -> GameState:
    """Empty board with first_player to move; AI flag set if that's the AI."""
    return replace(
        state,
        board=create_board(),
        current_player=first_player,
        result=GameResult.PLAYING,
        winning_line=None,
        is_ai_turn=state.mode == GameMode.AI and first_player == state.ai_symbol,
        ai_timer_id=None,
        **changes,
    )


def reduce(state: GameState, action: Action) -> GameState:
    """
    Apply one action to the state.

    Args:
        state: Current state (left untouched).
        action: One of the actions in logic.actions.

    Returns:
        The new state, or `state` itself when the action is ignored.

    Raises:
        TypeError: action is not one of the known action types.
    """
    if isinstance(action, SelectMode):
        # AI mode goes to setup first; multiplayer goes straight to the board
        screen = Screen.SETUP if action.mode == GameMode.AI else Screen.GAME
        return replace(
            state,
            mode=action.mode,
            screen=screen,
            board=create_board(),
            current_player=Player.X,
            result=GameResult.PLAYING,
            winning_line=None,
            is_ai_turn=False,
            ai_timer_id=None,
        )

    elif isinstance(action, SelectDifficulty):
        return replace(state, difficulty=action.difficulty)

    elif isinstance(action, SelectSymbol):
        return replace(state, human_symbol=action.symbol)

    elif isinstance(action, StartGame):
        # X always moves first
        return _fresh_round(state, Player.X, screen=Screen.GAME)

    elif isinstance(action, MakeMove):
        if state.result != GameResult.PLAYING:
            return state
        if not is_valid_move(state.board, action.index):
            return state
        return _apply_move(state, action.index)

    elif isinstance(action, AIMove):
        if state.result != GameResult.PLAYING:
            return state
        if not is_valid_move(state.board, action.index):
            return state
        return replace(_apply_move(state, action.index), is_ai_turn=False, ai_timer_id=None)

    elif isinstance(action, SetAITimer):
        return replace(state, ai_timer_id=action.timer_id)

    elif isinstance(action, NewGame):
        round_number = state.round_number + 1
        first_player = Player.X
        if state.mode == GameMode.MULTIPLAYER:
            # Alternate the opener so neither player always starts
            first_player = Player.X if round_number % 2 == 0 else Player.O
        return _fresh_round(state, first_player, round_number=round_number)

    elif isinstance(action, RestartGame):
        return _fresh_round(state, Player.X)

    elif isinstance(action, BackToMenu):
        return INITIAL_STATE

    raise TypeError(f"Unhandled action: {action!r}")

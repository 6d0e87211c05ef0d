"""
User-facing text for TicTacToe.
Kept in one place so the UI and console mode say the same things.
"""

from logic.game_state import GameState, GameMode, GameResult, Player, Difficulty


APP_TITLE = "Tic Tac Toe"
APP_SUBTITLE = "A clean, minimal game."

# Menu
MENU_VS_COMPUTER = "vs Computer"
MENU_VS_COMPUTER_DESC = "Challenge the AI"
MENU_VS_PLAYER = "vs Player"
MENU_VS_PLAYER_DESC = "Play with a friend"

# Setup
SETUP_HEADING = "Choose Difficulty"
SETUP_PLAY_AS = "Play as"
DIFFICULTY_LABELS = {
    Difficulty.EASY: ("Easy", "AI makes random moves"),
    Difficulty.MEDIUM: ("Medium", "A decent challenge"),
    Difficulty.HARD: ("Hard", "Unbeatable AI"),
}

# Game
AI_THINKING = "AI is thinking..."
RESULT_TEXT = {
    GameResult.WIN_X: "X Wins!",
    GameResult.WIN_O: "O Wins!",
    GameResult.DRAW: "It's a Draw!",
}

# Buttons
BTN_START = "▶ Start Game"
BTN_PLAY_AGAIN = "Play Again"
BTN_RESTART = "Restart"
BTN_MENU = "Menu"
BTN_BACK = "Back"

SCORE_DRAW = "DRAW"


def status_text(state: GameState) -> str:
    """One-line status for the game screen."""
    if state.result in RESULT_TEXT:
        return RESULT_TEXT[state.result]

    symbol = state.current_player.value
    if state.mode == GameMode.AI:
        if state.is_ai_turn:
            return AI_THINKING
        return f"{symbol}'s Turn"

    return f"Player {symbol}'s Turn"


def score_labels(state: GameState) -> dict:
    """Labels for the X and O score counters."""
    if state.mode == GameMode.AI:
        human_is_x = state.human_symbol == Player.X
        return {
            Player.X: "YOU (X)" if human_is_x else "AI (X)",
            Player.O: "AI (O)" if human_is_x else "YOU (O)",
        }
    return {Player.X: "PLAYER X", Player.O: "PLAYER O"}


def score_line(state: GameState) -> str:
    """Score bar as a single line of text."""
    labels = score_labels(state)
    scores = state.scores
    return (
        f"{labels[Player.X]}: {scores.x}   "
        f"{SCORE_DRAW}: {scores.draws}   "
        f"{labels[Player.O]}: {scores.o}"
    )

"""
Main entry point for TicTacToe.

This script ties together:
- Logic (board rules, AI, reducer, store)
- Scheduler (AI thinking delay on the UI event loop)
- Presentation (Tkinter UI, or a console game with --no-ui)

Run this script to play TicTacToe against the computer or a friend!
"""

import random
import time
from typing import Callable, Optional

import strings
from logic.actions import (
    SelectMode,
    SelectDifficulty,
    SelectSymbol,
    StartGame,
    MakeMove,
    AIMove,
    NewGame,
    RestartGame,
)
from logic.ai_player import AIPlayer, NO_MOVE
from logic.board import format_board
from logic.config import GameConfig
from logic.game_state import GameState, GameMode, GameResult, Difficulty, Player
from logic.move_validator import validate_move
from logic.store import Store
from scheduler.config import SchedulerConfig


HELP_TEXT = "Enter a cell (1-9), 'r' to restart, 'n' for a new round, 'q' to quit."


class ConsoleGame:
    """
    Text-mode game driven by the same store as the UI.

    Game flow:
    1. Current player types a cell number
    2. The move is dispatched and the new state printed
    3. In AI mode the AI answers after its thinking delay
    4. After a result, 'n' starts the next round (scores are kept)
    """

    def __init__(
        self,
        store: Store,
        input_fn: Callable[[str], str] = input,
        scheduler_config: Optional[SchedulerConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the console game.

        Args:
            store: Store already on the game screen.
            input_fn: Where commands are read from.
            scheduler_config: Timing for the AI's thinking delay.
            rng: Random source for the delay and the AI's moves.
        """
        self.store = store
        self.input_fn = input_fn
        self.config = scheduler_config or SchedulerConfig()
        self.rng = rng or random.Random()
        self.is_running = False

        self._unsubscribe = self.store.subscribe(self._print_state)

    def start(self):
        """Start the game loop."""
        print(HELP_TEXT)
        self._print_state(self.store.get_state())

        self.is_running = True
        try:
            self._game_loop()
        finally:
            self._unsubscribe()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            state = self.store.get_state()

            if state.is_ai_turn and state.result == GameResult.PLAYING:
                self._ai_move(state)
                continue

            try:
                command = self.input_fn("> ").strip().lower()
            except EOFError:
                command = "q"

            self._handle_command(command, state)

    def _handle_command(self, command: str, state: GameState):
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self.store.dispatch(RestartGame())
        elif command == "n":
            self.store.dispatch(NewGame())
        elif command.isascii() and command.isdecimal():
            self._human_move(int(command), state)
        else:
            print(HELP_TEXT)

    def _human_move(self, cell: int, state: GameState):
        """
        Check and dispatch a human move.

        cell is the number the player typed (1-9). The reducer would
        ignore a bad move silently; here the player gets told why.
        """
        if state.is_game_over:
            print("Round is over. Press 'n' for a new round.")
            return

        if not 1 <= cell <= GameConfig.NUM_CELLS:
            print(f"Invalid move: choose a cell from 1 to {GameConfig.NUM_CELLS}.")
            return

        index = cell - 1
        validation = validate_move(state.board, index)
        if not validation.is_valid:
            print(f"Invalid move: {validation.error_message}")
            return

        self.store.dispatch(MakeMove(index))

    def _ai_move(self, state: GameState):
        """Wait the thinking delay, then play the AI's move."""
        print(f"\n>>> {strings.AI_THINKING}")
        delay = self.rng.randint(self.config.AI_DELAY_MIN_MS, self.config.AI_DELAY_MAX_MS)
        time.sleep(delay / 1000)

        ai = AIPlayer(state.ai_symbol, state.difficulty, self.rng)
        index = ai.choose_move(state.board)
        if index == NO_MOVE:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        self.store.dispatch(AIMove(index))

    def _print_state(self, state: GameState):
        """Subscriber: print the board, status, and scores."""
        print()
        print(format_board(state.board))
        print()
        print(strings.status_text(state))
        print(strings.score_line(state))


def prepare_store(
    mode: Optional[str] = None,
    difficulty: str = Difficulty.MEDIUM.value,
    symbol: str = Player.X.value,
) -> Store:
    """
    Create a store with the AI settings preset, optionally past the menu.

    Difficulty and symbol are applied even when the store starts on the
    menu, so the setup screen opens with them selected. Going back to the
    menu later resets them to the defaults.

    Args:
        mode: "ai" or "multiplayer" to skip the menu, None to start on it.
        difficulty: AI difficulty.
        symbol: Human's symbol against the AI.
    """
    store = Store()
    store.dispatch(SelectDifficulty(Difficulty(difficulty)))
    store.dispatch(SelectSymbol(Player(symbol)))
    if mode is None:
        return store

    game_mode = GameMode(mode)
    store.dispatch(SelectMode(game_mode))
    if game_mode == GameMode.AI:
        store.dispatch(StartGame())
    return store


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=None,
        help="Skip the menu and start this mode (console mode defaults to ai)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="AI difficulty (preselected on the setup screen without --mode)"
    )
    parser.add_argument(
        "--symbol",
        choices=[p.value for p in Player],
        default=Player.X.value,
        help="Symbol you play against the AI (X moves first)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the AI's randomness for repeatable games"
    )

    args = parser.parse_args()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print(f"   {strings.APP_TITLE}")
        print("="*60 + "\n")
        store = prepare_store(args.mode, args.difficulty, args.symbol)
        ui = TicTacToeUI(store=store, seed=args.seed)
        ui.run()
        return

    # Console mode (--no-ui)
    store = prepare_store(args.mode or GameMode.AI.value, args.difficulty, args.symbol)
    game = ConsoleGame(store, rng=random.Random(args.seed))

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()

"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Menu: play against the computer or against a friend
- Setup: difficulty level and symbol selection
- Game: the board, status line, scores, and round controls

The UI only renders the store's state and dispatches actions. The AI
opponent is driven by an AIScheduler running on the Tk event loop.
"""

import random
import tkinter as tk
from tkinter import ttk
from typing import Optional

import strings
from logic.actions import (
    SelectMode,
    SelectDifficulty,
    SelectSymbol,
    StartGame,
    MakeMove,
    NewGame,
    RestartGame,
    BackToMenu,
)
from logic.game_state import GameState, GameMode, Difficulty, Player, Screen
from logic.store import Store
from scheduler.ai_scheduler import AIScheduler
from scheduler.config import SchedulerConfig


BG_COLOR = '#1a1a2e'
CELL_COLOR = '#16213e'
ACCENT_COLOR = '#00d4ff'
INACTIVE_COLOR = '#2d3748'
MARK_COLORS = {
    Player.X: '#f87171',
    Player.O: '#10b981',
}
WIN_CELL_COLOR = '#7c6f1d'

DIFFICULTY_COLORS = {
    Difficulty.EASY: '#4ade80',
    Difficulty.MEDIUM: '#fbbf24',
    Difficulty.HARD: '#f87171',
}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        store: Optional[Store] = None,
        scheduler_config: Optional[SchedulerConfig] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the UI.

        Args:
            store: Store to render. A fresh one if not provided.
            scheduler_config: Timing for the AI's thinking delay.
            seed: Seed for the AI's randomness (None for unseeded).
        """
        self.store = store or Store()

        # Create UI
        self._create_ui()

        # The Tk root provides after()/after_cancel() for the scheduler
        self.scheduler = AIScheduler(
            self.store,
            self.root,
            config=scheduler_config,
            rng=random.Random(seed),
        )

        self._unsubscribe = self.store.subscribe(self._render)
        self.scheduler.attach()
        self._render(self.store.get_state())

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(strings.APP_TITLE)
        self.root.configure(bg=BG_COLOR)
        self.root.geometry("420x560")
        self.root.minsize(380, 520)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG_COLOR)
        style.configure('TLabel', background=BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 20, 'bold'), foreground=ACCENT_COLOR)
        style.configure('Heading.TLabel', font=('Segoe UI', 14, 'bold'), foreground=ACCENT_COLOR)
        style.configure('Status.TLabel', font=('Segoe UI', 13), foreground='#ffd700')
        style.configure('Score.TLabel', font=('Segoe UI', 11, 'bold'))

        container = ttk.Frame(self.root)
        container.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        self.frames = {
            Screen.MENU: self._create_menu(container),
            Screen.SETUP: self._create_setup(container),
            Screen.GAME: self._create_game(container),
        }
        self.current_screen: Optional[Screen] = None

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _create_menu(self, parent) -> ttk.Frame:
        frame = ttk.Frame(parent)

        ttk.Label(frame, text=strings.APP_TITLE, style='Title.TLabel').pack(pady=(40, 5))
        ttk.Label(frame, text=strings.APP_SUBTITLE).pack(pady=(0, 30))

        menu_buttons = [
            (strings.MENU_VS_COMPUTER, strings.MENU_VS_COMPUTER_DESC, GameMode.AI),
            (strings.MENU_VS_PLAYER, strings.MENU_VS_PLAYER_DESC, GameMode.MULTIPLAYER),
        ]
        for text, desc, mode in menu_buttons:
            tk.Button(
                frame,
                text=f"{text}\n{desc}",
                font=('Segoe UI', 12, 'bold'),
                width=22,
                bg='#6366f1',
                fg='white',
                command=lambda m=mode: self._dispatch(SelectMode(m))
            ).pack(pady=8)

        return frame

    def _create_setup(self, parent) -> ttk.Frame:
        frame = ttk.Frame(parent)

        ttk.Label(frame, text=strings.MENU_VS_COMPUTER, style='Title.TLabel').pack(pady=(20, 10))

        # Difficulty section
        ttk.Label(frame, text=strings.SETUP_HEADING, style='Heading.TLabel').pack(pady=(10, 5))
        self.difficulty_buttons = {}
        for difficulty, (text, desc) in strings.DIFFICULTY_LABELS.items():
            btn = tk.Button(
                frame,
                text=f"{text} - {desc}",
                font=('Segoe UI', 10, 'bold'),
                width=28,
                bg=INACTIVE_COLOR,
                fg='white',
                activebackground=DIFFICULTY_COLORS[difficulty],
                command=lambda d=difficulty: self._set_difficulty(d)
            )
            btn.pack(pady=3)
            self.difficulty_buttons[difficulty] = btn

        # Symbol section
        ttk.Separator(frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(frame, text=strings.SETUP_PLAY_AS, style='Heading.TLabel').pack()

        symbol_frame = ttk.Frame(frame)
        symbol_frame.pack(pady=10)
        self.symbol_buttons = {}
        for player in Player:
            btn = tk.Button(
                symbol_frame,
                text=player.value,
                font=('Segoe UI', 16, 'bold'),
                width=4,
                bg=INACTIVE_COLOR,
                fg='white',
                command=lambda p=player: self._dispatch(SelectSymbol(p))
            )
            btn.pack(side=tk.LEFT, padx=10)
            self.symbol_buttons[player] = btn

        # Control buttons
        control_frame = ttk.Frame(frame)
        control_frame.pack(pady=20)

        tk.Button(
            control_frame,
            text=strings.BTN_START,
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=lambda: self._dispatch(StartGame())
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text=strings.BTN_BACK,
            font=('Segoe UI', 11),
            bg=INACTIVE_COLOR,
            fg='white',
            width=12,
            command=lambda: self._dispatch(BackToMenu())
        ).pack(side=tk.LEFT, padx=5)

        return frame

    def _create_game(self, parent) -> ttk.Frame:
        frame = ttk.Frame(parent)

        # Score bar
        score_frame = ttk.Frame(frame)
        score_frame.pack(fill=tk.X, pady=(0, 10))
        self.score_labels = {}
        for key in (Player.X, 'draws', Player.O):
            label = ttk.Label(score_frame, text="", style='Score.TLabel', anchor='center')
            label.pack(side=tk.LEFT, expand=True, fill=tk.X)
            self.score_labels[key] = label

        self.status_label = ttk.Label(frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        # Board (3x3 grid of buttons, index = row * 3 + col)
        board_frame = ttk.Frame(frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=3,
                height=1,
                bg=CELL_COLOR,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._dispatch(MakeMove(i))
            )
            cell.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            self.board_cells.append(cell)

        # Round controls
        control_frame = ttk.Frame(frame)
        control_frame.pack(pady=15)

        self.round_btn = tk.Button(
            control_frame,
            text=strings.BTN_RESTART,
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._round_button_pressed
        )
        self.round_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text=strings.BTN_MENU,
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=12,
            command=lambda: self._dispatch(BackToMenu())
        ).pack(side=tk.LEFT, padx=5)

        return frame

    def _dispatch(self, action):
        """Send a user action to the store."""
        self.store.dispatch(action)

    def _set_difficulty(self, difficulty: Difficulty):
        """Set the AI difficulty level."""
        self._dispatch(SelectDifficulty(difficulty))
        print(f"Difficulty set to: {difficulty.value}")

    def _round_button_pressed(self):
        """Play Again after a result, Restart while a round is going."""
        if self.store.get_state().is_game_over:
            self._dispatch(NewGame())
        else:
            self._dispatch(RestartGame())

    def _render(self, state: GameState):
        """Subscriber: bring every widget in line with the state."""
        if state.screen != self.current_screen:
            if self.current_screen is not None:
                self.frames[self.current_screen].pack_forget()
            self.frames[state.screen].pack(fill=tk.BOTH, expand=True)
            self.current_screen = state.screen

        if state.screen == Screen.SETUP:
            self._update_setup(state)
        elif state.screen == Screen.GAME:
            self._update_game(state)

    def _update_setup(self, state: GameState):
        for difficulty, btn in self.difficulty_buttons.items():
            if difficulty == state.difficulty:
                btn.configure(bg=DIFFICULTY_COLORS[difficulty], fg='black')
            else:
                btn.configure(bg=INACTIVE_COLOR, fg='white')

        for player, btn in self.symbol_buttons.items():
            if player == state.human_symbol:
                btn.configure(bg=MARK_COLORS[player], fg='black')
            else:
                btn.configure(bg=INACTIVE_COLOR, fg='white')

    def _update_game(self, state: GameState):
        # Scores
        labels = strings.score_labels(state)
        self.score_labels[Player.X].configure(text=f"{labels[Player.X]}\n{state.scores.x}")
        self.score_labels['draws'].configure(text=f"{strings.SCORE_DRAW}\n{state.scores.draws}")
        self.score_labels[Player.O].configure(text=f"{labels[Player.O]}\n{state.scores.o}")

        self.status_label.configure(text=strings.status_text(state))

        # Board is locked after a result and while the AI is thinking
        locked = state.is_game_over or state.is_ai_turn
        winning = state.winning_line or ()

        for index, cell in enumerate(self.board_cells):
            mark = state.board[index]
            bg = WIN_CELL_COLOR if index in winning else CELL_COLOR
            if mark is None:
                cell.configure(
                    text="",
                    bg=bg,
                    state='disabled' if locked else 'normal'
                )
            else:
                cell.configure(
                    text=mark.value,
                    bg=bg,
                    fg=MARK_COLORS[mark],
                    disabledforeground=MARK_COLORS[mark],
                    state='disabled'
                )

        if state.is_game_over:
            self.round_btn.configure(text=strings.BTN_PLAY_AGAIN, bg='#10b981')
        else:
            self.round_btn.configure(text=strings.BTN_RESTART, bg='#6366f1')

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.scheduler.detach()
        self._unsubscribe()

        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the AI's randomness for repeatable games"
    )

    args = parser.parse_args()

    ui = TicTacToeUI(seed=args.seed)
    ui.run()


if __name__ == "__main__":
    main()

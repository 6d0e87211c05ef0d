"""
AI move scheduler for TicTacToe.

Watches the store and, when it is the AI's turn, waits a short
"thinking" delay before dispatching the AI's move. Runs on an event
loop that provides tkinter's after()/after_cancel() interface, so the
move is dispatched from a timer callback and never from inside a
subscriber.
"""

import random
from typing import Any, Optional

from logic.actions import AIMove, SetAITimer
from logic.ai_player import AIPlayer, NO_MOVE
from logic.game_state import GameState, GameResult
from logic.store import Store
from .config import SchedulerConfig


class AIScheduler:
    """
    Keeps at most one pending AI timer.

    - A published state with an AI turn pending starts a timer (if none is)
    - Any other published state cancels the pending timer
    - When the timer fires, the state is checked again before moving,
      in case a restart or mode switch happened in the meantime
    """

    def __init__(
        self,
        store: Store,
        timer,
        config: Optional[SchedulerConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the scheduler.

        Args:
            store: The store to watch and dispatch to.
            timer: Object with after(ms, callback) -> handle and
                after_cancel(handle), e.g. a tkinter root window.
            config: Scheduler configuration. Uses defaults if not provided.
            rng: Random source for the delay and the AI's moves.
        """
        self.store = store
        self.timer = timer
        self.config = config or SchedulerConfig()
        self.rng = rng or random.Random()

        self._pending: Any = None
        self._unsubscribe = None

    @property
    def is_pending(self) -> bool:
        """True while an AI move timer is waiting to fire."""
        return self._pending is not None

    def attach(self):
        """Start watching the store."""
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self.on_state)
        self.on_state(self.store.get_state())

    def detach(self):
        """Stop watching the store and drop any pending move."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.cancel()

    def on_state(self, state: GameState):
        """Subscriber: schedule or cancel depending on the new state."""
        if not self._should_move(state):
            self.cancel()
            return

        self.schedule()
        # A restart keeps the pending timer but clears its handle from the
        # state, so the handle is recorded again whenever the two differ.
        # Recording it is a dispatch, which must not happen inside the
        # notification pass that got us here.
        handle = self._pending
        if handle is not None and state.ai_timer_id != handle:
            self.timer.after(0, lambda: self._publish_handle(handle))

    def schedule(self):
        """Start the thinking timer. Does nothing if one is already pending."""
        if self._pending is not None:
            return

        delay = self.rng.randint(self.config.AI_DELAY_MIN_MS, self.config.AI_DELAY_MAX_MS)
        self._pending = self.timer.after(delay, self._fire)

        if self.config.DEBUG_MODE:
            print(f"AI is thinking... ({delay} ms)")

    def cancel(self):
        """Cancel the pending timer, if any. Safe to call repeatedly."""
        if self._pending is None:
            return
        handle = self._pending
        self._pending = None
        self.timer.after_cancel(handle)

    def _publish_handle(self, handle):
        if self._pending != handle:
            return  # Fired or cancelled before we got here
        if self.store.get_state().ai_timer_id == handle:
            return
        self.store.dispatch(SetAITimer(handle))

    def _fire(self):
        """Timer callback: compute and dispatch the AI's move."""
        self._pending = None

        state = self.store.get_state()
        if not self._should_move(state):
            return

        ai = AIPlayer(state.ai_symbol, state.difficulty, self.rng)
        index = ai.choose_move(state.board)
        if index == NO_MOVE:
            print("ERROR: AI could not find a move!")
            return

        if self.config.DEBUG_MODE:
            print(f"AI ({ai.player.value}, {ai.difficulty.value}) plays cell {index}")

        self.store.dispatch(AIMove(index))

    @staticmethod
    def _should_move(state: GameState) -> bool:
        return state.is_ai_turn and state.result == GameResult.PLAYING

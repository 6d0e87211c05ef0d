"""
Store for TicTacToe.
Holds the current state and tells subscribers when it changes.
"""

from typing import Callable, List

from .actions import Action
from .game_state import GameState, INITIAL_STATE
from .reducer import reduce


Subscriber = Callable[[GameState], None]
Reducer = Callable[[GameState, Action], GameState]


class Store:
    """
    Wraps the reducer with subscriber notification.

    Each store owns its own subscriber list. Notification is synchronous,
    in registration order, on a snapshot of the list taken when the pass
    starts: unsubscribing during a pass only affects later dispatches.
    """

    def __init__(
        self,
        reducer: Reducer = reduce,
        initial_state: GameState = INITIAL_STATE,
    ):
        self._reducer = reducer
        self._state = initial_state
        self._subscribers: List[Subscriber] = []
        self._dispatching = False

    def get_state(self) -> GameState:
        """Get the current state snapshot."""
        return self._state

    def dispatch(self, action: Action) -> GameState:
        """
        Apply an action and notify every subscriber.

        Returns:
            The new state.

        Raises:
            RuntimeError: called from inside a subscriber.
        """
        if self._dispatching:
            raise RuntimeError(
                f"Cannot dispatch {action!r} while subscribers are being notified"
            )

        self._dispatching = True
        try:
            self._state = self._reducer(self._state, action)
            for fn in list(self._subscribers):
                fn(self._state)
        finally:
            self._dispatching = False

        return self._state

    def subscribe(self, fn: Subscriber) -> Callable[[], None]:
        """
        Register a subscriber.

        A function that is already subscribed is not added a second time,
        so it is still called once per dispatch and one unsubscribe
        removes it.

        Returns:
            A function that removes it again. Calling it twice is harmless.
        """
        if fn not in self._subscribers:
            self._subscribers.append(fn)

        def unsubscribe():
            if fn in self._subscribers:
                self._subscribers.remove(fn)

        return unsubscribe

"""One-shot welcome state, injected by whoever owns the UI session."""

import threading

from routing.messages import WELCOME_MESSAGE


class WelcomeState:
    """
    Tracks whether the welcome message has been spoken for a session.

    The flag is set once and checked once: the first claim() returns True,
    every later call returns False. Safe to share between threads.
    """

    def __init__(self, already_welcomed: bool = False) -> None:
        self._welcomed = already_welcomed
        self._lock = threading.Lock()

    @property
    def welcomed(self) -> bool:
        return self._welcomed

    def claim(self) -> bool:
        """Return True exactly once, marking the welcome as delivered."""
        with self._lock:
            if self._welcomed:
                return False
            self._welcomed = True
            return True

    def welcome_message(self) -> str | None:
        """The welcome text on the first call, None afterwards."""
        return WELCOME_MESSAGE if self.claim() else None

"""Shared controller plumbing: state ownership, dispatch and mount lifecycle."""

import threading
from typing import Callable, Generic, TypeVar

from loguru import logger

from ..actions import Action

S = TypeVar("S")

# Destructive-action guard: receives the prompt, returns True to proceed
ConfirmFn = Callable[[str], bool]


class ViewController(Generic[S]):
    """Owns one immutable view state and transitions it through a reducer.

    Transitions are serialized with a lock, so work started from several
    threads (e.g. conversions of different playlists) cannot lose updates.
    Once unmounted, late results are discarded instead of applied.
    """

    name = "view"

    def __init__(self, initial_state: S, reducer: Callable[[S, Action], S]) -> None:
        self._state = initial_state
        self._reducer = reducer
        self._lock = threading.Lock()
        self._unmounted = False

    @property
    def state(self) -> S:
        return self._state

    @property
    def unmounted(self) -> bool:
        return self._unmounted

    def mount(self) -> None:
        """Enter the view and run its one-time fetch."""
        self._unmounted = False
        logger.debug(f"Mounting {self.name}")
        self.on_mount()

    def unmount(self) -> None:
        """Leave the view. In-flight calls still finish; their results are dropped."""
        logger.debug(f"Unmounting {self.name}")
        self._unmounted = True

    def on_mount(self) -> None:
        """Hook for the mount-time fetch."""

    def dispatch(self, action: Action) -> S:
        """Apply an action and return the new state."""
        return self.dispatch_if(lambda _state: True, action)[0]

    def dispatch_if(self, predicate: Callable[[S], bool], action: Action) -> tuple[S, bool]:
        """Apply an action only if predicate(current state) holds.

        The check and the transition happen under one lock acquisition.

        Returns:
            (state, applied)
        """
        with self._lock:
            if self._unmounted:
                logger.debug(
                    f"{self.name} unmounted; discarding {type(action).__name__}"
                )
                return self._state, False
            if not predicate(self._state):
                return self._state, False
            self._state = self._reducer(self._state, action)
            return self._state, True

# circussync/stores/base.py
"""
Observable state containers.

A store owns one immutable pydantic state object. Actions replace it
through `set` / `patch`, and every subscriber is called with the new
state. Subscribing calls the subscriber once right away with the
current state.
"""

from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel

StateT = TypeVar("StateT", bound=BaseModel)

Subscriber = Callable[[Any], None]


class Store(Generic[StateT]):
    def __init__(self, initial: StateT):
        self._state = initial
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> StateT:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register `callback`; returns a callable that unsubscribes it."""
        self._subscribers.append(callback)
        callback(self._state)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set(self, state: StateT) -> None:
        self._state = state
        for callback in list(self._subscribers):
            callback(state)

    def patch(self, **changes: Any) -> None:
        """Replace the listed fields, keep the rest."""
        self.set(self._state.model_copy(update=changes))

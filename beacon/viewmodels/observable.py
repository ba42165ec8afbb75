"""Observable value holders bridging view models and screens.

Call context:
    View models own a ``MutableStateFlow`` and hand screens the read-only
    ``StateFlow`` view, so only the owner can write.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeVar

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
Subscriber = Callable[[T], None]


class StateFlow(Generic[T]):
    """Read-only view over a ``MutableStateFlow``."""

    def __init__(self, source: "MutableStateFlow[T]") -> None:
        self._source = source

    @property
    def value(self) -> T:
        return self._source.value

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        return self._source.subscribe(callback)


class MutableStateFlow(Generic[T]):
    """Holds the current value and notifies subscribers when it changes.

    Assigning a value equal to the current one is ignored: subscribers are
    not called and the stored reference is kept.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: List[Subscriber] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        for callback in list(self._subscribers):
            self._deliver(callback, new_value)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``, call it with the current value, return an unsubscribe hook."""
        self._subscribers.append(callback)
        self._deliver(callback, self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def as_state_flow(self) -> StateFlow[T]:
        return StateFlow(self)

    @staticmethod
    def _deliver(callback: Subscriber, value: T) -> None:
        try:
            callback(value)
        except Exception:
            LOGGER.exception("State subscriber %r failed", callback)


__all__ = ["MutableStateFlow", "StateFlow"]

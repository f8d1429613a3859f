"""
State Channels

Synchronous publish/subscribe used by the draft entities to push state to
whoever holds them. Subscribers are called inline, in registration order,
before ``publish`` returns.
"""

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')

Subscriber = Callable[[T], None]
Unsubscribe = Callable[[], None]


class StateChannel(Generic[T]):
    """Holds the latest published value and replays it to new subscribers"""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscribers: List[Subscriber] = []
        self._has_value = False
        self._value: Optional[T] = None

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def value(self) -> Optional[T]:
        """Latest published value (None before the first publish)"""
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Subscriber, *, replay: bool = True) -> Unsubscribe:
        """Register a callback; it receives the latest value right away when one exists

        Returns:
            Unsubscribe: call it to stop receiving values
        """
        self._subscribers.append(callback)
        if replay and self._has_value:
            callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, value: T) -> None:
        self._value = value
        self._has_value = True
        # Copy so a callback may unsubscribe itself
        for callback in list(self._subscribers):
            callback(value)

    def clear_subscribers(self) -> None:
        self._subscribers.clear()

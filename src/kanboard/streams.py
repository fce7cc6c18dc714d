"""Synchronous publish/subscribe primitives.

A Subject pushes each published value to every registered observer. A
BehaviorSubject additionally holds a current value and hands it to new
observers the moment they subscribe. Observable wraps either one as a
read-only handle so consumers can subscribe but never publish.
"""

import logging
from collections import deque
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Observer = Callable[[T], None]


class Subscription:
    """Handle returned by subscribe(); call unsubscribe() to stop receiving values."""

    def __init__(self, subject: "Subject", observer: Observer, since: int = 0):
        self._subject = subject
        self._observer = observer
        # Sequence number of the last value published before subscribing
        self._since = since
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._subject._remove(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc) -> None:
        self.unsubscribe()


class Subject(Generic[T]):
    """
    Fire-only channel: observers get values published after they subscribe.

    Values published while a dispatch is running (an observer publishing
    from its callback) are queued, so every observer sees values in the
    order they were produced. An observer added mid-dispatch only gets
    values published after it subscribed.
    """

    def __init__(self, name: str = ""):
        self.name = name or type(self).__name__
        self._subscriptions: list[Subscription] = []
        self._pending: deque = deque()
        self._dispatching = False
        self._seq = 0

    @property
    def observer_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, observer: Observer) -> Subscription:
        """Register an observer for every later publish."""
        subscription = Subscription(self, observer, since=self._seq)
        self._subscriptions.append(subscription)
        logger.debug(f"{self.name}: subscribed ({self.observer_count} observers)")
        return subscription

    def publish(self, value: T) -> None:
        """Push a value to all current observers."""
        self._seq += 1
        self._pending.append((self._seq, value))
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._pending:
                seq, pending = self._pending.popleft()
                self._dispatch(seq, pending)
        finally:
            self._dispatching = False

    def as_observable(self) -> "Observable[T]":
        return Observable(self)

    def _dispatch(self, seq: int, value: T) -> None:
        for subscription in list(self._subscriptions):
            if not subscription.closed and subscription._since < seq:
                self._deliver(subscription._observer, value)

    def _deliver(self, observer: Observer, value: T) -> None:
        try:
            observer(value)
        except Exception:
            logger.exception(f"{self.name}: observer {observer!r} failed")

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logger.debug(f"{self.name}: unsubscribed ({self.observer_count} observers)")


class BehaviorSubject(Subject[T]):
    """Channel holding a current value, replayed to each new observer on subscribe."""

    def __init__(self, initial: T, name: str = ""):
        super().__init__(name)
        self._value = initial

    @property
    def value(self) -> T:
        """Last value published (or the initial one)."""
        return self._value

    def subscribe(self, observer: Observer) -> Subscription:
        subscription = super().subscribe(observer)
        self._deliver(observer, self._value)
        return subscription

    def publish(self, value: T) -> None:
        self._value = value
        super().publish(value)


class Observable(Generic[T]):
    """Read-only view of a subject: subscribe, never publish."""

    def __init__(self, source: Subject[T]):
        self._source = source

    def subscribe(self, observer: Observer) -> Subscription:
        return self._source.subscribe(observer)

    @property
    def value(self) -> T:
        """Current value of the underlying BehaviorSubject."""
        if not isinstance(self._source, BehaviorSubject):
            raise AttributeError(f"{self._source.name} holds no current value")
        return self._source.value

    def __repr__(self) -> str:
        return f"Observable({self._source.name})"

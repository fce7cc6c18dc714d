"""Live view of urgent cards across the board."""

import logging

from .core.board import URGENT_PRIORITY, Board, Card, collect_priority_cards
from .streams import BehaviorSubject, Observable, Observer, Subscription

logger = logging.getLogger(__name__)


class PriorityStream:
    """
    Derived stream of every urgent card on the board.

    recompute() rescans the whole board each time. New subscribers
    receive the current value immediately.
    """

    def __init__(self, board: Board, urgent_priority: int = URGENT_PRIORITY):
        self.urgent_priority = urgent_priority
        self._subject: BehaviorSubject[tuple[Card, ...]] = BehaviorSubject(
            collect_priority_cards(board, urgent_priority), name="priority-cards"
        )

    @property
    def value(self) -> tuple[Card, ...]:
        return self._subject.value

    def recompute(self, board: Board) -> tuple[Card, ...]:
        """Rescan the board and publish the urgent cards to every subscriber."""
        cards = collect_priority_cards(board, self.urgent_priority)
        logger.debug(f"Publishing {len(cards)} priority cards")
        self._subject.publish(cards)
        return cards

    def subscribe(self, observer: Observer) -> Subscription:
        return self._subject.subscribe(observer)

    def as_observable(self) -> Observable[tuple[Card, ...]]:
        return self._subject.as_observable()

"""Open/close notifications for the card detail view."""

import logging
from dataclasses import dataclass

from .core.board import Card
from .streams import Observable, Observer, Subject, Subscription

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModalState:
    """Intent to open (with a card) or close the card detail view."""

    open: bool
    card: Card | None = None


class ModalSignal:
    """Notification bus for modal intent. Keeps no history; late subscribers miss past events."""

    def __init__(self):
        self._subject: Subject[ModalState] = Subject(name="modal-state")

    def publish(self, open: bool, card: Card | None = None) -> ModalState:
        state = ModalState(open=open, card=card)
        card_label = card.id if card is not None else "-"
        logger.debug(f"Modal {'open' if open else 'close'} (card {card_label})")
        self._subject.publish(state)
        return state

    def subscribe(self, observer: Observer) -> Subscription:
        return self._subject.subscribe(observer)

    def as_observable(self) -> Observable[ModalState]:
        return self._subject.as_observable()

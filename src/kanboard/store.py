"""Board store - the single source of truth for lists and cards.

Every mutation goes through BoardStore so the priority view is always
recomputed from the canonical data. Lists and cards are immutable values;
a mutation swaps in new values and get_board() hands out the resulting
tuple, so readers cannot change store state behind its back.
"""

import logging
from typing import Iterable

from .adapters.clock_ids import MonotonicIdGenerator
from .core.board import (
    DEFAULT_PRIORITY,
    URGENT_PRIORITY,
    Board,
    Card,
    CardList,
    all_ids,
    build_board,
    check_position,
    check_replacement_id,
    find_card_index,
    find_list_index,
    locate_card,
)
from .modal import ModalSignal, ModalState
from .ports.id_generator import IdGenerator
from .priority import PriorityStream
from .streams import Observable

logger = logging.getLogger(__name__)


class BoardStore:
    """In-memory board with reactive priority and modal channels."""

    def __init__(
        self,
        lists: Iterable[CardList | dict] = (),
        id_generator: IdGenerator | None = None,
        default_priority: int = DEFAULT_PRIORITY,
        urgent_priority: int = URGENT_PRIORITY,
    ):
        self._board: Board = build_board(list(lists))
        self.default_priority = default_priority
        self._ids = id_generator or MonotonicIdGenerator()
        self._ids.reserve(all_ids(self._board))
        self._priority = PriorityStream(self._board, urgent_priority)
        self._modal = ModalSignal()
        logger.debug(f"Board store ready with {len(self._board)} lists")

    # ============== Queries ==============

    def get_board(self) -> Board:
        """Immutable snapshot of the board."""
        return self._board

    def find_card(self, card_id: int) -> tuple[CardList, Card]:
        """The list holding a card, and the card. Raises CardNotFoundError."""
        list_index, card_index = locate_card(self._board, card_id)
        lst = self._board[list_index]
        return lst, lst.cards[card_index]

    @property
    def priority_cards(self) -> tuple[Card, ...]:
        return self._priority.value

    # ============== Card mutations ==============

    def add_card(self, list_id: int, title: str) -> Card:
        """Insert a new card at the front of a list."""
        index = find_list_index(self._board, list_id)
        lst = self._board[index]
        card = Card(id=self._ids.next_id(), title=title, content="", priority=self.default_priority)
        self._replace_list(index, lst.with_cards((card, *lst.cards)))
        logger.debug(f"Added card {card.id} to list {list_id}")
        self._recompute()
        return card

    def delete_card(self, list_id: int, card_id: int) -> Card:
        """Remove a card from a list; returns the removed card."""
        index = find_list_index(self._board, list_id)
        lst = self._board[index]
        card_index = find_card_index(lst, card_id)
        removed = lst.cards[card_index]
        cards = list(lst.cards)
        del cards[card_index]
        self._replace_list(index, lst.with_cards(cards))
        logger.debug(f"Deleted card {card_id} from list {list_id}")
        self._recompute()
        return removed

    def update_card(self, list_index: int, card_index: int, new_card: Card) -> Card:
        """
        Replace the card at a board position wholesale; returns the old card.

        Positions shift after inserts and deletes, so callers must hold
        indices taken from the current board. update_card_by_id() avoids that.
        """
        check_position(self._board, list_index, card_index)
        lst = self._board[list_index]
        old = lst.cards[card_index]
        check_replacement_id(self._board, new_card, old)
        self._ids.reserve([new_card.id])
        cards = list(lst.cards)
        cards[card_index] = new_card
        self._replace_list(list_index, lst.with_cards(cards))
        logger.debug(f"Updated card at [{list_index}][{card_index}] ({old.id} -> {new_card.id})")
        self._recompute()
        return old

    def update_card_by_id(self, list_id: int, card_id: int, new_card: Card) -> Card:
        """Replace a card identified by list id and card id; returns the old card."""
        list_index = find_list_index(self._board, list_id)
        card_index = find_card_index(self._board[list_index], card_id)
        return self.update_card(list_index, card_index, new_card)

    def move_card(self, card_id: int, to_list_id: int, index: int = 0) -> Card:
        """Move a card to a position in a list (clamped to the list length)."""
        from_index, card_index = locate_card(self._board, card_id)
        to_index = find_list_index(self._board, to_list_id)
        card = self._board[from_index].cards[card_index]

        source = list(self._board[from_index].cards)
        del source[card_index]
        self._replace_list(from_index, self._board[from_index].with_cards(source))

        target = list(self._board[to_index].cards)
        position = max(0, min(index, len(target)))
        target.insert(position, card)
        self._replace_list(to_index, self._board[to_index].with_cards(target))

        logger.debug(f"Moved card {card_id} to list {to_list_id} at {position}")
        self._recompute()
        return card

    # ============== List mutations ==============

    def add_list(self, name: str) -> CardList:
        """Append an empty list to the board."""
        lst = CardList(id=self._ids.next_id(), name=name)
        self._board = (*self._board, lst)
        logger.debug(f"Added list {lst.id} ({name})")
        return lst

    def delete_list(self, list_id: int) -> CardList:
        """Remove a list and all its cards; returns the removed list."""
        index = find_list_index(self._board, list_id)
        removed = self._board[index]
        self._board = self._board[:index] + self._board[index + 1 :]
        logger.debug(f"Deleted list {list_id} with {len(removed.cards)} cards")
        self._recompute()
        return removed

    # ============== Streams ==============

    def get_priority_cards(self) -> Observable[tuple[Card, ...]]:
        """Read-only stream of urgent cards; replays the current value on subscribe."""
        return self._priority.as_observable()

    def set_modal_state(self, open: bool, card: Card | None = None) -> ModalState:
        """Broadcast intent to open (for a card) or close the detail view."""
        return self._modal.publish(open, card)

    def get_modal_state(self) -> Observable[ModalState]:
        """Read-only modal notifications; no replay of past events."""
        return self._modal.as_observable()

    # ============== Internals ==============

    def _replace_list(self, index: int, lst: CardList) -> None:
        self._board = self._board[:index] + (lst,) + self._board[index + 1 :]

    def _recompute(self) -> None:
        self._priority.recompute(self._board)

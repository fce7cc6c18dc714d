"""Pure board domain logic - no I/O dependencies."""

from dataclasses import dataclass, field, replace

from .errors import CardNotFoundError, DuplicateIdError, ListNotFoundError, PositionNotFoundError

URGENT_PRIORITY = 1
DEFAULT_PRIORITY = 3


@dataclass(frozen=True)
class Card:
    """A single work item on the board."""

    id: int
    title: str
    content: str = ""
    priority: int = DEFAULT_PRIORITY

    def is_urgent(self, urgent_priority: int = URGENT_PRIORITY) -> bool:
        return self.priority == urgent_priority

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "priority": self.priority,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Card":
        """Create Card from seed data."""
        return cls(
            id=int(data["id"]),
            title=data["title"],
            content=data.get("content", "") or "",
            priority=int(data.get("priority", DEFAULT_PRIORITY)),
        )


@dataclass(frozen=True)
class CardList:
    """A named, ordered column of cards."""

    id: int
    name: str
    cards: tuple[Card, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "cards": [c.to_dict() for c in self.cards],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CardList":
        """Create CardList from seed data."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            cards=tuple(Card.from_dict(c) for c in data.get("cards", [])),
        )

    def with_cards(self, cards: list[Card] | tuple[Card, ...]) -> "CardList":
        """Copy of this list holding the given cards."""
        return replace(self, cards=tuple(cards))


Board = tuple[CardList, ...]


def build_board(lists: list) -> Board:
    """
    Build a board from CardList values or seed dicts.

    Raises DuplicateIdError if any list id or card id repeats.
    """
    board = tuple(lst if isinstance(lst, CardList) else CardList.from_dict(lst) for lst in lists)
    check_unique_ids(board)
    return board


def check_unique_ids(board: Board) -> None:
    """Raise DuplicateIdError if the board repeats a list id or a card id."""
    seen_lists: set[int] = set()
    seen_cards: set[int] = set()
    for lst in board:
        if lst.id in seen_lists:
            raise DuplicateIdError(f"Duplicate list id {lst.id}")
        seen_lists.add(lst.id)
        for card in lst.cards:
            if card.id in seen_cards:
                raise DuplicateIdError(f"Duplicate card id {card.id}")
            seen_cards.add(card.id)


def all_ids(board: Board) -> list[int]:
    """Every list id and card id on the board."""
    ids = []
    for lst in board:
        ids.append(lst.id)
        ids.extend(c.id for c in lst.cards)
    return ids


def find_list_index(board: Board, list_id: int) -> int:
    """Position of the list with the given id. Raises ListNotFoundError."""
    for i, lst in enumerate(board):
        if lst.id == list_id:
            return i
    raise ListNotFoundError(list_id)


def find_card_index(lst: CardList, card_id: int) -> int:
    """Position of the card within a list. Raises CardNotFoundError."""
    for i, card in enumerate(lst.cards):
        if card.id == card_id:
            return i
    raise CardNotFoundError(card_id, lst.id)


def locate_card(board: Board, card_id: int) -> tuple[int, int]:
    """(list index, card index) of a card anywhere on the board."""
    for list_index, lst in enumerate(board):
        for card_index, card in enumerate(lst.cards):
            if card.id == card_id:
                return list_index, card_index
    raise CardNotFoundError(card_id)


def check_position(board: Board, list_index: int, card_index: int) -> None:
    """Raise PositionNotFoundError unless both indices point at a card."""
    if list_index < 0 or list_index >= len(board):
        raise PositionNotFoundError(list_index, card_index)
    if card_index < 0 or card_index >= len(board[list_index].cards):
        raise PositionNotFoundError(list_index, card_index)


def check_replacement_id(board: Board, new_card: Card, replaced: Card) -> None:
    """Raise DuplicateIdError if new_card reuses the id of a card other than the one it replaces."""
    if new_card.id == replaced.id:
        return
    for lst in board:
        for card in lst.cards:
            if card.id == new_card.id:
                raise DuplicateIdError(f"Card id {new_card.id} already used in list {lst.id}")


def collect_priority_cards(board: Board, urgent_priority: int = URGENT_PRIORITY) -> tuple[Card, ...]:
    """
    All urgent cards on the board.

    Order: list order, then card order within each list.
    Pure function - no I/O.
    """
    return tuple(card for lst in board for card in lst.cards if card.is_urgent(urgent_priority))

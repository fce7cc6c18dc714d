"""Errors raised by board operations."""


class BoardError(Exception):
    """Base class for board store errors."""

    pass


class NotFoundError(BoardError, LookupError):
    """Raised when a mutation refers to a list or card that does not exist."""

    pass


class ListNotFoundError(NotFoundError):
    """No list with the given id exists on the board."""

    def __init__(self, list_id: int):
        self.list_id = list_id
        super().__init__(f"List {list_id} not found")


class CardNotFoundError(NotFoundError):
    """No card with the given id exists (in the given list, if any)."""

    def __init__(self, card_id: int, list_id: int | None = None):
        self.card_id = card_id
        self.list_id = list_id
        if list_id is None:
            message = f"Card {card_id} not found"
        else:
            message = f"Card {card_id} not found in list {list_id}"
        super().__init__(message)


class PositionNotFoundError(NotFoundError):
    """A positional reference does not point at an existing card."""

    def __init__(self, list_index: int, card_index: int):
        self.list_index = list_index
        self.card_index = card_index
        super().__init__(f"No card at position [{list_index}][{card_index}]")


class DuplicateIdError(BoardError):
    """Raised when an operation would break list or card id uniqueness."""

    pass


class SeedError(BoardError):
    """Raised when seed data cannot be read or parsed."""

    pass

"""Functional core - pure board logic with no I/O."""

from .board import (
    Board,
    Card,
    CardList,
    DEFAULT_PRIORITY,
    URGENT_PRIORITY,
    build_board,
    collect_priority_cards,
)
from .errors import (
    BoardError,
    CardNotFoundError,
    DuplicateIdError,
    ListNotFoundError,
    NotFoundError,
    PositionNotFoundError,
    SeedError,
)

__all__ = [
    # Board
    "Board",
    "Card",
    "CardList",
    "DEFAULT_PRIORITY",
    "URGENT_PRIORITY",
    "build_board",
    "collect_priority_cards",
    # Errors
    "BoardError",
    "NotFoundError",
    "ListNotFoundError",
    "CardNotFoundError",
    "PositionNotFoundError",
    "DuplicateIdError",
    "SeedError",
]

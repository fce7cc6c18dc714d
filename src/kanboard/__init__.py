"""Kanboard - in-memory reactive Kanban board store."""

from .core.board import Board, Card, CardList
from .core.errors import (
    BoardError,
    CardNotFoundError,
    DuplicateIdError,
    ListNotFoundError,
    NotFoundError,
    PositionNotFoundError,
)
from .modal import ModalState
from .store import BoardStore
from .streams import Observable, Subscription

__all__ = [
    "Board",
    "BoardStore",
    "Card",
    "CardList",
    "ModalState",
    "Observable",
    "Subscription",
    "BoardError",
    "NotFoundError",
    "ListNotFoundError",
    "CardNotFoundError",
    "PositionNotFoundError",
    "DuplicateIdError",
]

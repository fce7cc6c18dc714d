"""Seed data interface."""

from typing import Protocol

from kanboard.core.board import CardList


class SeedSource(Protocol):
    """Interface for loading the initial board."""

    def load(self) -> list[CardList]:
        """Load the initial lists, in board order."""
        ...

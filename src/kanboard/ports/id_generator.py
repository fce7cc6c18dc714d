"""Id generator interface."""

from typing import Iterable, Protocol


class IdGenerator(Protocol):
    """Interface for handing out list and card ids."""

    def next_id(self) -> int:
        """Return an id never returned before by this generator."""
        ...

    def reserve(self, ids: Iterable[int]) -> None:
        """Mark ids already in use so they are never handed out."""
        ...

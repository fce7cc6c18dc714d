"""JSON file seed adapter."""

import json
import logging
from pathlib import Path

from kanboard.core.board import CardList
from kanboard.core.errors import SeedError

logger = logging.getLogger(__name__)


class JsonSeedSource:
    """
    Seed board read from a JSON file.

    Implements SeedSource protocol. The file holds an array of lists:
    [{"id": 1, "name": "To do", "cards": [{"id": 10, "title": "...", ...}]}]
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> list[CardList]:
        if not self.path.exists():
            raise SeedError(f"Seed file not found: {self.path}")
        try:
            text = self.path.read_text()
        except (OSError, UnicodeDecodeError) as e:
            raise SeedError(f"Cannot read seed file {self.path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SeedError(f"Invalid JSON in {self.path}: {e}") from e

        if not isinstance(data, list):
            raise SeedError(f"Seed file {self.path} must hold a list of lists")

        try:
            lists = [CardList.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise SeedError(f"Malformed seed entry in {self.path}: {e}") from e

        logger.debug(f"Loaded {len(lists)} lists from {self.path}")
        return lists

"""Built-in sample board."""

from kanboard.core.board import CardList

DEFAULT_SEED: list[dict] = [
    {
        "id": 1,
        "name": "To do",
        "cards": [
            {"id": 11, "title": "Write release notes", "content": "", "priority": 2},
            {"id": 12, "title": "Fix login redirect", "content": "Users land on a blank page", "priority": 1},
            {"id": 13, "title": "Tidy up the backlog", "content": "", "priority": 3},
        ],
    },
    {
        "id": 2,
        "name": "In progress",
        "cards": [
            {"id": 21, "title": "Card detail modal", "content": "Open from the priority panel", "priority": 2},
            {"id": 22, "title": "Broken image upload", "content": "", "priority": 1},
        ],
    },
    {
        "id": 3,
        "name": "Done",
        "cards": [
            {"id": 31, "title": "Set up the board", "content": "", "priority": 3},
        ],
    },
]


class StaticSeedSource:
    """
    Seed board held in memory.

    Implements SeedSource protocol. Defaults to DEFAULT_SEED.
    """

    def __init__(self, lists: list[dict] | None = None):
        self.lists = DEFAULT_SEED if lists is None else lists

    def load(self) -> list[CardList]:
        return [CardList.from_dict(item) for item in self.lists]

"""Tests for core board logic."""

import pytest

from kanboard.core.board import (
    Card,
    CardList,
    build_board,
    check_position,
    collect_priority_cards,
    find_card_index,
    find_list_index,
    locate_card,
)
from kanboard.core.errors import (
    CardNotFoundError,
    DuplicateIdError,
    ListNotFoundError,
    PositionNotFoundError,
)


@pytest.fixture
def board():
    return (
        CardList(
            id=1,
            name="Backlog",
            cards=(
                Card(id=10, title="Low", priority=3),
                Card(id=11, title="Urgent A", priority=1),
            ),
        ),
        CardList(id=2, name="Empty"),
        CardList(
            id=3,
            name="Doing",
            cards=(
                Card(id=30, title="Urgent B", priority=1),
                Card(id=31, title="Medium", priority=2),
            ),
        ),
    )


class TestCard:
    def test_defaults(self):
        card = Card(id=1, title="Test")
        assert card.content == ""
        assert card.priority == 3
        assert card.is_urgent() is False

    def test_is_urgent(self):
        assert Card(id=1, title="Test", priority=1).is_urgent() is True

    def test_from_dict_fills_defaults(self):
        card = Card.from_dict({"id": 5, "title": "Seeded"})
        assert card == Card(id=5, title="Seeded", content="", priority=3)

    def test_from_dict_null_content(self):
        assert Card.from_dict({"id": 5, "title": "x", "content": None}).content == ""

    def test_from_dict_coerces_numbers(self):
        card = Card.from_dict({"id": "5", "title": "x", "priority": "1"})
        assert card.id == 5
        assert card.priority == 1
        assert card.is_urgent()

    def test_from_dict_rejects_non_numeric_priority(self):
        with pytest.raises(ValueError):
            Card.from_dict({"id": 5, "title": "x", "priority": "urgent"})

    def test_from_dict_missing_title(self):
        with pytest.raises(KeyError):
            Card.from_dict({"id": 5})

    def test_to_dict(self):
        card = Card(id=7, title="T", content="body", priority=1)
        assert card.to_dict() == {"id": 7, "title": "T", "content": "body", "priority": 1}


class TestCardList:
    def test_from_dict(self):
        lst = CardList.from_dict({"id": 1, "name": "A", "cards": [{"id": 2, "title": "x"}]})
        assert lst.id == 1
        assert lst.cards == (Card(id=2, title="x"),)

    def test_from_dict_without_cards(self):
        assert CardList.from_dict({"id": 1, "name": "A"}).cards == ()

    def test_with_cards_returns_copy(self):
        lst = CardList(id=1, name="A")
        updated = lst.with_cards([Card(id=2, title="x")])
        assert lst.cards == ()
        assert updated.cards == (Card(id=2, title="x"),)
        assert updated.name == "A"


class TestBuildBoard:
    def test_mixes_dicts_and_lists(self):
        board = build_board([{"id": 1, "name": "A"}, CardList(id=2, name="B")])
        assert [lst.name for lst in board] == ["A", "B"]

    def test_list_and_card_may_share_an_id(self):
        board = build_board([{"id": 1, "name": "A", "cards": [{"id": 1, "title": "x"}]}])
        assert board[0].cards[0].id == 1

    def test_duplicate_card_in_same_list(self):
        with pytest.raises(DuplicateIdError):
            build_board([{"id": 1, "name": "A", "cards": [{"id": 2, "title": "x"}, {"id": 2, "title": "y"}]}])


class TestLookups:
    def test_find_list_index(self, board):
        assert find_list_index(board, 3) == 2

    def test_find_list_index_missing(self, board):
        with pytest.raises(ListNotFoundError, match="List 9 not found"):
            find_list_index(board, 9)

    def test_find_card_index(self, board):
        assert find_card_index(board[2], 31) == 1

    def test_find_card_index_missing(self, board):
        with pytest.raises(CardNotFoundError, match="Card 30 not found in list 1"):
            find_card_index(board[0], 30)

    def test_locate_card(self, board):
        assert locate_card(board, 30) == (2, 0)

    def test_locate_card_missing(self, board):
        with pytest.raises(CardNotFoundError, match="Card 99 not found$"):
            locate_card(board, 99)

    def test_check_position_valid(self, board):
        check_position(board, 2, 1)

    @pytest.mark.parametrize("list_index,card_index", [(1, 0), (3, 0), (0, 2), (-1, 0)])
    def test_check_position_invalid(self, board, list_index, card_index):
        with pytest.raises(PositionNotFoundError):
            check_position(board, list_index, card_index)


class TestCollectPriorityCards:
    def test_list_then_card_order(self, board):
        assert [c.id for c in collect_priority_cards(board)] == [11, 30]

    def test_empty_board(self):
        assert collect_priority_cards(()) == ()

    def test_no_urgent_cards(self):
        board = (CardList(id=1, name="A", cards=(Card(id=2, title="x", priority=2),)),)
        assert collect_priority_cards(board) == ()

    def test_other_priority_level(self, board):
        assert [c.id for c in collect_priority_cards(board, urgent_priority=2)] == [31]

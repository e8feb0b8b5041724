"""
tests/test_board.py

Тесты для Card и Board: правила последовательности, метрики, ходы.
"""

import itertools

import pytest

from core.board import Board
from core.card import Card, Suit
from deal_io.parser import build_board, parse_column


def test_parity_sequence():
    """Красные чётные и чёрные нечётные — одна последовательность."""
    assert Card(10, Suit.HEART).is_in_same_sequence(Card(9, Suit.CLUB))
    assert Card(9, Suit.SPADE).is_in_same_sequence(Card(8, Suit.DIAMOND))
    assert not Card(10, Suit.HEART).is_in_same_sequence(Card(9, Suit.HEART))


def test_can_be_stacked_on():
    assert Card(9, Suit.CLUB).can_be_stacked_on(Card(10, Suit.HEART))
    assert Card(5, Suit.HEART).can_be_stacked_on(Card(6, Suit.SPADE))
    # Тот же класс, но не на единицу меньше
    assert not Card(8, Suit.HEART).can_be_stacked_on(Card(10, Suit.HEART))
    # Другой класс чётности
    assert not Card(9, Suit.HEART).can_be_stacked_on(Card(10, Suit.HEART))
    assert not Card(10, Suit.HEART).can_be_stacked_on(Card(9, Suit.CLUB))


def test_card_equality_and_immutability():
    card = Card(1, Suit.SPADE)
    assert card == Card(1, Suit.SPADE)
    assert card != Card(1, Suit.CLUB)
    assert len({card, Card(1, Suit.SPADE)}) == 1
    assert str(card) == "1♠"
    with pytest.raises(AttributeError):
        card.rank = 2


def test_stack_size():
    board = Board([
        parse_column("10h 9c 8h"),
        parse_column("3c 1c 1h"),
        [],
        parse_column("6s 5h 4c"),
    ])
    assert board.stack_size(0) == 3
    assert board.stack_size(1) == 1
    assert board.stack_size(2) == 0
    assert board.stack_size(3) == 3


def test_max_movable_stack_formula():
    """Непустая цель: пустые ячейки + пустые колонки; пустая цель — на 1 меньше."""
    for cells_used, empty_cols in itertools.product(range(5), range(3)):
        free_cells = [Card(13, Suit.HEART)] * cells_used + [None] * (4 - cells_used)
        columns = [parse_column("5s"), parse_column("7c")] + [[]] * empty_cols
        board = Board(columns, free_cells)
        spaces = (4 - cells_used) + empty_cols
        assert board.empty_spaces == spaces
        assert board.max_movable_stack(0) == spaces
        for i in range(2, 2 + empty_cols):
            assert board.max_movable_stack(i) == spaces - 1


def test_move_stack_returns_new_board():
    board = Board([parse_column("10h 9c 8h"), parse_column("11s")])
    moved = board.move_stack(0, 1, 3)

    assert moved is not None
    assert moved.columns[0] == ()
    assert [str(c) for c in moved.columns[1]] == ["11♠", "10♡", "9♣", "8♡"]
    # Исходная доска не изменилась
    assert [str(c) for c in board.columns[0]] == ["10♡", "9♣", "8♡"]
    assert len(board.columns[1]) == 1


def test_move_stack_rejections():
    board = Board([parse_column("10h 9c 8h"), parse_column("11h"), parse_column("2s")])
    # Нижняя карта блока не ложится на цель
    assert board.move_stack(0, 1, 3) is None
    # Больше связки источника
    assert board.move_stack(2, 1, 2) is None
    # Та же колонка
    assert board.move_stack(0, 0, 1) is None

    full_cells = [Card(13, Suit.CLUB)] * 4
    crowded = Board([parse_column("10h 9c 8h"), parse_column("11s")], full_cells)
    # Нет пустых мест, переносить нельзя
    assert crowded.max_movable_stack(1) == 0
    assert crowded.move_stack(0, 1, 1) is None


def test_free_cell_and_column_transitions():
    board = Board([parse_column("2c 7h")])
    card = board.top_card(0)
    step = board.remove_last_from_column(0).set_free_cell(card, 2)

    assert step.free_cells[2] == card
    assert step.first_empty_free_cell_index == 0
    assert board.free_cells == (None, None, None, None)

    back = step.clear_free_cell(2).append_to_column(card, 0)
    assert back == board
    assert hash(back) == hash(board)


def test_foundation_rules():
    board = Board([], foundations={Suit.CLUB: 1})
    assert board.can_add_to_foundation(Card(2, Suit.CLUB))
    assert not board.can_add_to_foundation(Card(3, Suit.CLUB))
    # Двойка всегда уходит в базу автоматически
    assert board.should_automove_to_foundation(Card(2, Suit.CLUB))
    assert board.should_automove_to_foundation(Card(1, Suit.HEART))

    board = Board([], foundations={Suit.CLUB: 2, Suit.HEART: 1, Suit.DIAMOND: 1, Suit.SPADE: 1})
    assert board.minimum_foundation_value == 1
    assert board.can_add_to_foundation(Card(3, Suit.CLUB))
    assert not board.should_automove_to_foundation(Card(3, Suit.CLUB))

    added = board.add_to_foundation(Card(2, Suit.HEART))
    assert added.foundations[Suit.HEART] == 2
    assert board.foundations[Suit.HEART] == 1


def test_is_solved():
    assert Board([[], []]).is_solved
    assert not Board([[], parse_column("1h")]).is_solved
    assert not Board([[]], [None, Card(1, Suit.HEART), None, None]).is_solved

    full = {suit: 13 for suit in Suit}
    board = Board([[] for _ in range(8)], foundations=full)
    assert board.is_solved
    assert board.foundations_complete


def test_board_description():
    board = build_board("2h\n3s 3h 2s 1h\n1s")
    assert str(board) == (
        "Free Cells: - - - -\n"
        "Foundations: 0♣ 0♢ 0♡ 0♠\n"
        "Columns:\n"
        "<0> 2♡\n"
        "<1> 3♠ 3♡ 2♠ 1♡\n"
        "<2> 1♠"
    )

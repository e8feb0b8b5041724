"""
tests/test_heuristics.py

Тесты оценки позиции для Beam Search.
"""

from core.board import Board
from core.card import Suit
from deal_io.parser import parse_column
from heuristics import (
    evaluate_board, heuristic_blocked_cards,
    heuristic_buried_low_cards, heuristic_foundation_progress, heuristic_mobility
)


def test_components():
    # Туз под девяткой (глубина 1), двойка сверху (глубина 0)
    board = Board([parse_column("1h 9s"), parse_column("2c"), []])

    assert heuristic_foundation_progress(board) == 0
    assert heuristic_mobility(board) == 5 * 5
    assert heuristic_buried_low_cards(board) == 2 * 2 + 1 * 1
    assert heuristic_blocked_cards(board) == 1
    assert evaluate_board(board) == 25 - 5 - 1


def test_foundation_progress():
    board = Board([], foundations={Suit.CLUB: 2, Suit.HEART: 1})
    assert evaluate_board(board) == 10 * 3 + 5 * 4


def test_progress_beats_stuck_position():
    """Карта в базе лучше той же карты, закопанной в колонке."""
    stuck = Board([parse_column("1h 13s")])
    progressed = Board([parse_column("13s")], foundations={Suit.HEART: 1})
    assert evaluate_board(progressed) > evaluate_board(stuck)

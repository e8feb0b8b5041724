"""
heuristics/basic.py

Оценка позиции для Beam Search (больше = лучше).
"""

from core.board import Board
from core.utils import ACE

FOUNDATION_WEIGHT = 10
EMPTY_SPACE_WEIGHT = 5
BURIED_ACE_WEIGHT = 2
BURIED_TWO_WEIGHT = 1


def heuristic_foundation_progress(board: Board) -> int:
    """Награда за карты, уже убранные в базу."""
    return FOUNDATION_WEIGHT * sum(board.foundations.values())


def heuristic_mobility(board: Board) -> int:
    """Награда за пустые ячейки и колонки."""
    return EMPTY_SPACE_WEIGHT * board.empty_spaces


def heuristic_buried_low_cards(board: Board) -> int:
    """
    Штраф за тузы и двойки под другими картами.
    Глубина считается от верха колонки (верхняя карта — 0).
    """
    penalty = 0
    for column in board.columns:
        for depth, card in enumerate(reversed(column)):
            if card.rank == ACE:
                penalty += BURIED_ACE_WEIGHT * (depth + 1)
            elif card.rank == 2:
                penalty += BURIED_TWO_WEIGHT * (depth + 1)
    return penalty


def heuristic_blocked_cards(board: Board) -> int:
    """Карты под верхней связкой, которые нельзя перенести вместе с ней."""
    return sum(len(column) - board.stack_size(i)
               for i, column in enumerate(board.columns))


def evaluate_board(board: Board) -> int:
    """
    Итоговая оценка для приоритета узла.

    Ничьи не разрешаются: порядок определяется порядком генерации.
    """
    return (heuristic_foundation_progress(board)
            + heuristic_mobility(board)
            - heuristic_buried_low_cards(board)
            - heuristic_blocked_cards(board))

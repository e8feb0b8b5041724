"""
utils/error_handling.py

Исключения и проверка входных данных.
"""

from typing import Any, Set

from core.board import Board
from core.card import ALL_SUITS, Card
from core.utils import FREE_CELL_COUNT, KING, RANKS

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной раздачи."""
    pass


def safe_solve(solver, board, updated_columns=None, default: Any = None):
    """
    Безопасное выполнение solve с обработкой ошибок.

    Args:
        solver: решатель
        board: доска
        updated_columns: изменённые колонки (None — все)
        default: значение по умолчанию при ошибке

    Returns:
        Решение или default
    """
    try:
        return solver.solve(board, updated_columns)
    except SolverError as e:
        logger = get_logger()
        logger.error(f"Ошибка решателя {solver.__class__.__name__}: {str(e)}")
        return default


def _insert(seen: Set[Card], card: Card, where: str):
    if card in seen:
        raise InvalidBoardError(f"Повторяющаяся карта {card} ({where})")
    seen.add(card)


def validate_board(board: Board, is_full_deck: bool = False) -> bool:
    """
    Валидирует раздачу один раз при построении.

    Args:
        board: доска для валидации
        is_full_deck: требовать полную колоду из 52 карт

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if board is None:
        raise InvalidBoardError("Доска не может быть None")

    if len(board.free_cells) != FREE_CELL_COUNT:
        raise InvalidBoardError(
            f"Должно быть {FREE_CELL_COUNT} свободные ячейки, получено {len(board.free_cells)}"
        )

    seen: Set[Card] = set()
    for suit, value in board.foundations.items():
        if not 0 <= value <= KING:
            raise InvalidBoardError(f"Недопустимое значение базы {suit.symbol}: {value}")
        for rank in range(1, value + 1):
            _insert(seen, Card(rank, suit), "база")

    for column in board.columns:
        for card in column:
            _insert(seen, card, "колонка")

    for card in board.free_cells:
        if card is not None:
            _insert(seen, card, "свободная ячейка")

    if is_full_deck:
        for suit in ALL_SUITS:
            for rank in RANKS:
                card = Card(rank, suit)
                if card not in seen:
                    raise InvalidBoardError(f"Не хватает карты {card}")

    return True

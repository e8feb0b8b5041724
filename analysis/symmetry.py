"""
analysis/symmetry.py

Каноническая форма доски для visited set.

Одинаковыми считаются доски:
- с теми же колонками в другом порядке;
- с теми же картами в свободных ячейках в другом порядке;
- где карта в свободной ячейке заменена картой того же ранга и цвета,
  лежащей сверху какой-либо колонки (для сборки в последовательность
  важен только класс чётности, масть нужна лишь базе).
"""

from typing import List, Optional, Tuple

from core.board import Board
from core.card import Suit
from core.utils import EMPTY_MARK

# Пара (что заменить, на что заменить)
Substitution = Tuple[str, str]

COLUMN_SEPARATOR = "\n"


def column_tokens(board: Board) -> List[str]:
    """Колонки в виде строк, отсортированные лексикографически."""
    return sorted(" ".join(str(card) for card in column) for column in board.columns)


def free_cell_tokens(board: Board) -> List[str]:
    """Свободные ячейки (карта или '-'), отсортированные независимо от слота."""
    return sorted(str(cell) if cell is not None else EMPTY_MARK
                  for cell in board.free_cells)


def color_substitution(board: Board) -> Optional[Substitution]:
    """
    Замена метки масти для карты в свободной ячейке, чей двойник
    (тот же ранг, другая масть того же цвета) лежит сверху колонки.

    Пара нормализуется к одной метке: бубны -> червы, трефы -> пики.
    Учитывается только одна ячейка — последняя подходящая в отсортированном
    порядке, чтобы результат не зависел от слотов.
    """
    tops = {column[-1] for column in board.columns if column}
    substitution = None
    held = sorted((card for card in board.free_cells if card is not None), key=str)
    for card in held:
        if card.counterpart() not in tops:
            continue
        if card.is_red:
            substitution = (f"{card.rank}{Suit.DIAMOND.symbol}", f"{card.rank}{Suit.HEART.symbol}")
        else:
            substitution = (f"{card.rank}{Suit.CLUB.symbol}", f"{card.rank}{Suit.SPADE.symbol}")
    return substitution


def _relabel(text: str, substitution: Optional[Substitution]) -> str:
    """Заменяет целые токены карт, не затрагивая другие ранги."""
    if substitution is None:
        return text
    old, new = substitution
    return " ".join(new if token == old else token for token in text.split(" "))


def get_symmetry_canonical(board: Board, use_color_symmetry: bool = True) -> str:
    """
    Каноническая строка доски.

    Args:
        board: доска
        use_color_symmetry: объединять карты одного цвета в ячейке и на колонке

    Returns:
        Строка вида "Free Cells: ...\\nColumns:\\n..."
    """
    substitution = color_substitution(board) if use_color_symmetry else None
    cells = _relabel(" ".join(free_cell_tokens(board)), substitution)
    columns = COLUMN_SEPARATOR.join(
        _relabel(column, substitution) for column in column_tokens(board)
    )
    return f"Free Cells: {cells}{COLUMN_SEPARATOR}Columns:{COLUMN_SEPARATOR}{columns}"

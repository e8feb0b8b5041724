"""
deal_io - Ввод/вывод раздач

Экспортирует:
- Парсинг нотации и построение доски
- Вывод доски и решений
"""

from .parser import (
    parse_card, parse_column, parse_columns,
    parse_free_cells, parse_foundations, build_board
)
from .visualizer import display_board, format_moves, format_solution

__all__ = [
    'parse_card',
    'parse_column',
    'parse_columns',
    'parse_free_cells',
    'parse_foundations',
    'build_board',
    'display_board',
    'format_moves',
    'format_solution'
]

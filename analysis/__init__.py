"""
analysis - Анализ позиций и pruning

Экспортирует:
- Каноническую форму доски (симметрии)
"""

from .symmetry import (
    get_symmetry_canonical,
    color_substitution,
    column_tokens,
    free_cell_tokens
)

__all__ = [
    'get_symmetry_canonical',
    'color_substitution',
    'column_tokens',
    'free_cell_tokens'
]

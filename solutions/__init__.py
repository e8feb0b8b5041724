"""
solutions - Проверка найденных решений.
"""

from .verify import apply_move, verify_solution

__all__ = [
    'apply_move',
    'verify_solution',
]

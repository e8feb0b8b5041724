"""
heuristics - Эвристические функции

Экспортирует:
- Составляющие оценки (база, мобильность, закопанные карты)
- Итоговую оценку позиции для Beam Search
"""

from .basic import (
    heuristic_foundation_progress,
    heuristic_mobility,
    heuristic_buried_low_cards,
    heuristic_blocked_cards,
    evaluate_board
)

__all__ = [
    'heuristic_foundation_progress',
    'heuristic_mobility',
    'heuristic_buried_low_cards',
    'heuristic_blocked_cards',
    'evaluate_board'
]

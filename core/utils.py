"""
core/utils.py

Общие константы и утилиты для пасьянса.
"""

from typing import Dict, Optional

# Количество свободных ячеек
FREE_CELL_COUNT = 4

# Ранги
ACE = 1
KING = 13
RANKS = range(ACE, KING + 1)

# Буквенные обозначения рангов в нотации раздачи
RANK_LETTERS: Dict[str, int] = {
    'a': 1,
    'j': 11,
    'q': 12,
    'k': 13,
}

# Символы для отображения
EMPTY_MARK = '-'        # Пустая свободная ячейка / пустая колонка
EMPTY_TARGET = 'Empty'  # Пустая колонка как цель хода


def parse_rank(token: str) -> Optional[int]:
    """
    Ранг из токена нотации: цифры или a/j/q/k.

    Returns:
        Ранг 1..13 или None, если токен не распознан
    """
    token = token.lower()
    if token.isdigit():
        rank = int(token)
    else:
        rank = RANK_LETTERS.get(token)
    if rank is None or rank not in RANKS:
        return None
    return rank

"""
core - Ядро пасьянса

Базовые структуры данных и утилиты.
"""

from .card import Card, Suit, ALL_SUITS
from .board import Board
from .moves import Move, MoveKind
from .utils import (
    FREE_CELL_COUNT, ACE, KING, RANKS,
    EMPTY_MARK, EMPTY_TARGET, parse_rank
)

__all__ = [
    'Card', 'Suit', 'ALL_SUITS',
    'Board',
    'Move', 'MoveKind',
    'FREE_CELL_COUNT', 'ACE', 'KING', 'RANKS',
    'EMPTY_MARK', 'EMPTY_TARGET', 'parse_rank'
]

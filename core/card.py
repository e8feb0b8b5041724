"""
core/card.py

Карта и масть.
"""

from enum import Enum
from typing import Optional


class Suit(Enum):
    """Масть: значение — буква в нотации раздачи."""
    HEART = 'h'
    DIAMOND = 'd'
    CLUB = 'c'
    SPADE = 's'

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEART, Suit.DIAMOND)

    @property
    def opposite(self) -> 'Suit':
        """Вторая масть того же цвета."""
        return _OPPOSITES[self]

    @classmethod
    def from_token(cls, token: str) -> Optional['Suit']:
        """Масть по букве (h/d/c/s) или символу (♡♢♣♠)."""
        token = token.lower()
        for suit in cls:
            if token == suit.value or token == suit.symbol:
                return suit
        return None

    def __str__(self) -> str:
        return self.symbol


_SYMBOLS = {
    Suit.HEART: '♡',
    Suit.DIAMOND: '♢',
    Suit.CLUB: '♣',
    Suit.SPADE: '♠',
}

_OPPOSITES = {
    Suit.HEART: Suit.DIAMOND,
    Suit.DIAMOND: Suit.HEART,
    Suit.CLUB: Suit.SPADE,
    Suit.SPADE: Suit.CLUB,
}

# Порядок обхода мастей
ALL_SUITS = (Suit.HEART, Suit.DIAMOND, Suit.CLUB, Suit.SPADE)


class Card:
    """
    Иммутабельная карта.

    Последовательность определяется классом чётности: красные чётные
    и чёрные нечётные карты образуют одну последовательность,
    остальные — другую. Масть важна только для базы.
    """
    __slots__ = ('rank', 'suit', '_red_even', '_hash')

    def __init__(self, rank: int, suit: Suit):
        self.rank = rank
        self.suit = suit
        if suit.is_red:
            self._red_even = rank % 2 == 0
        else:
            self._red_even = rank % 2 != 0
        self._hash = hash((rank, suit))

    @property
    def is_red(self) -> bool:
        return self.suit.is_red

    @property
    def in_red_even_sequence(self) -> bool:
        return self._red_even

    def can_be_stacked_on(self, other: 'Card') -> bool:
        """Можно ли положить эту карту поверх other."""
        return self._red_even == other._red_even and self.rank == other.rank - 1

    def is_in_same_sequence(self, other: 'Card') -> bool:
        return self._red_even == other._red_even

    def counterpart(self) -> 'Card':
        """Карта того же ранга и цвета, но другой масти."""
        return Card(self.rank, self.suit.opposite)

    def __setattr__(self, name, value):
        if hasattr(self, '_hash'):
            raise AttributeError("Card is immutable")
        object.__setattr__(self, name, value)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit is other.suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank}, {self.suit.name})"

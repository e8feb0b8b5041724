"""
tests/conftest.py

Общие фикстуры и раздачи для тестов.
"""

import os
import sys

# Добавляем корень проекта в путь
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.card import Card, Suit


@pytest.fixture
def small_deck_columns() -> str:
    return (
        "5h 7s 6h\n"
        "13h 12c 11h\n"
        "6s\n"
        "12s 8h\n"
        "9h 8s 7h\n"
        "13s 12h 11c 10h\n"
        "13c\n"
        "9s"
    )


@pytest.fixture
def small_deck_free_cells():
    return [Card(10, Suit.SPADE), Card(11, Suit.SPADE), None, None]


@pytest.fixture
def small_deck_foundations():
    return {Suit.CLUB: 10, Suit.DIAMOND: 13, Suit.HEART: 4, Suit.SPADE: 5}


@pytest.fixture
def full_deck_columns() -> str:
    return (
        "5h 7s 3d ks 6s kh 10d\n"
        "3h 8c qs 8s kc kd 6c\n"
        "7h 9d 10s 3c 9c 2d 7c\n"
        "9s 4d jc 7d js 6d qc\n"
        "jh 4h 6h 5c 4c 5d\n"
        "2c qd ah 8d 4s jd\n"
        "ad 5s 10c qh 9h 3s\n"
        "8h 2s 10h as ac 2h"
    )

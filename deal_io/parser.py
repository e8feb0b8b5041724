"""
deal_io/parser.py

Парсинг текстовой нотации раздачи и построение доски.

Нотация карты: ранг (цифры или a/j/q/k) + масть (h/d/c/s или ♡♢♣♠),
например "10h", "qs", "7♣". Колонки разделяются переводом строки,
карты в колонке — пробелами (первая карта — нижняя).
"""

import re
from typing import Dict, List, Optional, Sequence

from core.board import Board
from core.card import Card, Suit
from core.utils import EMPTY_MARK, FREE_CELL_COUNT, parse_rank
from utils.error_handling import InvalidBoardError, validate_board


def parse_card(token: str) -> Card:
    """
    Парсит одну карту.

    Raises:
        InvalidBoardError: если ранг или масть не распознаны
    """
    token = token.strip()
    if len(token) < 2:
        raise InvalidBoardError(f"Неверная карта: '{token}'")

    suit = Suit.from_token(token[-1])
    rank = parse_rank(token[:-1])
    if suit is None or rank is None:
        raise InvalidBoardError(f"Неверная карта: '{token}'")
    return Card(rank, suit)


def parse_column(line: str) -> List[Card]:
    """Одна колонка; пустая строка — пустая колонка."""
    return [parse_card(token) for token in line.split()]


def parse_columns(text: str) -> List[List[Card]]:
    """
    Парсит колонки, по одной на строку.

    Пустой текст — доска без колонок.
    """
    if not text.strip():
        return []
    # Снимаем только завершающий перевод строки: пустые строки по краям тоже колонки
    if text.endswith('\n'):
        text = text[:-1]
    return [parse_column(line) for line in text.split('\n')]


def parse_free_cells(text: str) -> List[Optional[Card]]:
    """
    Парсит свободные ячейки: "3s - - -".

    Недостающие ячейки считаются пустыми.
    """
    tokens = text.split()
    if len(tokens) > FREE_CELL_COUNT:
        raise InvalidBoardError(
            f"Слишком много свободных ячеек: {len(tokens)} (максимум {FREE_CELL_COUNT})"
        )
    cells: List[Optional[Card]] = [
        None if token == EMPTY_MARK else parse_card(token) for token in tokens
    ]
    return cells + [None] * (FREE_CELL_COUNT - len(cells))


def parse_foundations(text: str) -> Dict[Suit, int]:
    """
    Парсит базу: "c=1 d=2 h=0 s=1". Не указанные масти — 0.
    """
    foundations: Dict[Suit, int] = {}
    for suit_token, value in re.findall(r'(\S)\s*=\s*(\d+)', text):
        suit = Suit.from_token(suit_token)
        if suit is None:
            raise InvalidBoardError(f"Неизвестная масть в базе: '{suit_token}'")
        foundations[suit] = int(value)
    return foundations


def build_board(columns, free_cells: Optional[Sequence[Optional[Card]]] = None,
                foundations: Optional[Dict[Suit, int]] = None,
                is_full_deck: bool = False) -> Board:
    """
    Строит и валидирует доску.

    Args:
        columns: текст колонок или уже готовые списки карт
        free_cells: 4 ячейки (None — пустая); по умолчанию все пустые
        foundations: масть -> число карт в базе; по умолчанию все 0
        is_full_deck: требовать все 52 карты

    Raises:
        InvalidBoardError: повтор карты, нехватка карт, неверная нотация
    """
    if isinstance(columns, str):
        columns = parse_columns(columns)
    if free_cells is None:
        free_cells = [None] * FREE_CELL_COUNT

    board = Board(columns, free_cells, foundations)
    validate_board(board, is_full_deck=is_full_deck)
    return board

"""
core/board.py

Иммутабельное представление раскладки: колонки, свободные ячейки, база.
"""

from typing import Dict, Iterator, Optional, Sequence, Tuple

from .card import ALL_SUITS, Card, Suit
from .utils import EMPTY_MARK, FREE_CELL_COUNT, KING

Column = Tuple[Card, ...]
FreeCells = Tuple[Optional[Card], ...]


def _stack_size(column: Column) -> int:
    """Длина связки сверху колонки; 0 для пустой колонки."""
    if not column:
        return 0
    i = len(column) - 1
    while i > 0 and column[i].can_be_stacked_on(column[i - 1]):
        i -= 1
    return len(column) - i


class Board:
    """
    Иммутабельная раскладка.

    Каждый ход возвращает новую доску, исходная не меняется — поиск
    может отбросить любую ветку без побочных эффектов.
    Производные метрики считаются один раз в конструкторе.
    """
    __slots__ = (
        'columns', 'free_cells', 'foundations',
        '_stack_sizes', '_max_movable', 'empty_spaces',
        'minimum_foundation_value', '_hash',
    )

    def __init__(self, columns: Sequence[Sequence[Card]],
                 free_cells: Optional[Sequence[Optional[Card]]] = None,
                 foundations: Optional[Dict[Suit, int]] = None):
        self.columns: Tuple[Column, ...] = tuple(tuple(col) for col in columns)
        if free_cells is None:
            free_cells = (None,) * FREE_CELL_COUNT
        self.free_cells: FreeCells = tuple(free_cells)
        foundations = foundations or {}
        # Словарь никогда не изменяется после создания
        self.foundations: Dict[Suit, int] = {
            suit: foundations.get(suit, 0) for suit in ALL_SUITS
        }

        self._stack_sizes = tuple(_stack_size(col) for col in self.columns)
        empty_columns = sum(1 for col in self.columns if not col)
        empty_cells = sum(1 for cell in self.free_cells if cell is None)
        self.empty_spaces = empty_cells + empty_columns
        self._max_movable = tuple(
            self.empty_spaces - 1 if not col else self.empty_spaces
            for col in self.columns
        )
        self.minimum_foundation_value = min(self.foundations.values())
        self._hash = hash((
            self.columns, self.free_cells,
            tuple(self.foundations[suit] for suit in ALL_SUITS),
        ))

    # =====================================================
    # Состояние
    # =====================================================

    @property
    def is_solved(self) -> bool:
        return (all(cell is None for cell in self.free_cells)
                and all(not col for col in self.columns))

    @property
    def first_empty_free_cell_index(self) -> Optional[int]:
        for i, cell in enumerate(self.free_cells):
            if cell is None:
                return i
        return None

    def top_card(self, index: int) -> Optional[Card]:
        column = self.columns[index]
        return column[-1] if column else None

    def cards(self) -> Iterator[Card]:
        """Все карты в игре (колонки, затем свободные ячейки)."""
        for column in self.columns:
            yield from column
        for cell in self.free_cells:
            if cell is not None:
                yield cell

    def card_count(self) -> int:
        return sum(len(col) for col in self.columns) + sum(
            1 for cell in self.free_cells if cell is not None)

    # =====================================================
    # Колонки
    # =====================================================

    def stack_size(self, index: int) -> int:
        return self._stack_sizes[index]

    def max_movable_stack(self, to: int) -> int:
        """Сколько карт можно перенести одним блоком в колонку to."""
        return self._max_movable[to]

    @property
    def max_movable_stack_to_non_empty_column(self) -> int:
        return self.empty_spaces

    def append_to_column(self, card: Card, index: int) -> 'Board':
        columns = list(self.columns)
        columns[index] = columns[index] + (card,)
        return Board(columns, self.free_cells, self.foundations)

    def remove_last_from_column(self, index: int) -> 'Board':
        columns = list(self.columns)
        columns[index] = columns[index][:-1]
        return Board(columns, self.free_cells, self.foundations)

    def move_stack(self, from_col: int, to_col: int, k: int) -> Optional['Board']:
        """
        Переносит k верхних карт колонки from_col на колонку to_col.

        Блок проверяется целиком: k не больше связки источника и
        допустимого размера переноса, нижняя карта блока ложится на
        верхнюю карту цели.

        Returns:
            Новая доска или None, если ход недопустим
        """
        if from_col == to_col or k <= 0:
            return None
        if k > self.max_movable_stack(to_col) or k > self._stack_sizes[from_col]:
            return None

        source = self.columns[from_col]
        target = self.columns[to_col]
        if target and not source[-k].can_be_stacked_on(target[-1]):
            return None

        columns = list(self.columns)
        columns[from_col] = source[:-k]
        columns[to_col] = target + source[-k:]
        return Board(columns, self.free_cells, self.foundations)

    # =====================================================
    # Свободные ячейки
    # =====================================================

    def set_free_cell(self, card: Card, index: int) -> 'Board':
        cells = list(self.free_cells)
        cells[index] = card
        return Board(self.columns, cells, self.foundations)

    def clear_free_cell(self, index: int) -> 'Board':
        cells = list(self.free_cells)
        cells[index] = None
        return Board(self.columns, cells, self.foundations)

    # =====================================================
    # База
    # =====================================================

    def can_add_to_foundation(self, card: Card) -> bool:
        return self.foundations[card.suit] == card.rank - 1

    def should_automove_to_foundation(self, card: Card) -> bool:
        """
        Правило доминирования: такую карту никогда не выгодно
        придерживать вне базы.
        """
        return ((card.rank == 2 or card.rank == self.minimum_foundation_value + 1)
                and self.can_add_to_foundation(card))

    def add_to_foundation(self, card: Card) -> 'Board':
        foundations = dict(self.foundations)
        foundations[card.suit] += 1
        return Board(self.columns, self.free_cells, foundations)

    @property
    def foundations_complete(self) -> bool:
        return all(value == KING for value in self.foundations.values())

    # =====================================================

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return (self.columns == other.columns
                and self.free_cells == other.free_cells
                and self.foundations == other.foundations)

    def __str__(self) -> str:
        cells = " ".join(str(cell) if cell is not None else EMPTY_MARK
                         for cell in self.free_cells)
        foundations = " ".join(
            f"{self.foundations[suit]}{suit.symbol}"
            for suit in sorted(ALL_SUITS, key=lambda s: s.value)
        )
        columns = "\n".join(
            f"<{i}> " + (" ".join(str(card) for card in col) if col else EMPTY_MARK)
            for i, col in enumerate(self.columns)
        )
        return f"Free Cells: {cells}\nFoundations: {foundations}\nColumns:\n{columns}"

    def __repr__(self) -> str:
        return f"Board({len(self.columns)} columns, {self.card_count()} cards)"

"""
core/moves.py

Структурированная запись хода для журнала решения.
"""

from enum import Enum
from typing import NamedTuple, Optional

from .card import Card
from .utils import EMPTY_TARGET


class MoveKind(Enum):
    FREE_CELL_TO_FOUNDATION = 'free_cell_to_foundation'
    COLUMN_TO_FOUNDATION = 'column_to_foundation'
    FREE_CELL_TO_COLUMN = 'free_cell_to_column'
    COLUMN_TO_COLUMN = 'column_to_column'
    COLUMN_TO_FREE_CELL = 'column_to_free_cell'


class Move(NamedTuple):
    """
    Ход в журнале.

    source/target — индексы колонки или свободной ячейки в зависимости
    от kind; для базы индекс не нужен (None).
    """
    kind: MoveKind
    card: Card
    source: Optional[int] = None
    target: Optional[int] = None
    count: int = 1
    target_card: Optional[Card] = None
    automove: bool = False

    @property
    def to_foundation(self) -> bool:
        return self.kind in (MoveKind.FREE_CELL_TO_FOUNDATION, MoveKind.COLUMN_TO_FOUNDATION)

    def __str__(self) -> str:
        verb = "Automove" if self.automove else "Move"
        kind = self.kind
        if kind is MoveKind.FREE_CELL_TO_FOUNDATION:
            return f"{verb} FreeCell {self.card} => Foundation"
        if kind is MoveKind.COLUMN_TO_FOUNDATION:
            return f"{verb} Column{self.source} {self.card} => Foundation"
        if kind is MoveKind.FREE_CELL_TO_COLUMN:
            return f"{verb} FreeCell {self.card} => Column{self.target}"
        if kind is MoveKind.COLUMN_TO_FREE_CELL:
            return f"{verb} Column{self.source} {self.card} => FreeCell"
        target_card = str(self.target_card) if self.target_card is not None else EMPTY_TARGET
        return (f"{verb} Column{self.source} {self.card} onto "
                f"Column{self.target} {target_card} : {self.count} cards")

"""
solutions/verify.py

Проверка решения повторным применением ходов к исходной доске.
"""

from typing import Optional, Sequence

from core.board import Board
from core.moves import Move, MoveKind


def apply_move(board: Board, move: Move) -> Optional[Board]:
    """
    Применяет ход по правилам доски.

    Правила:
    - в базу карта кладётся только поверх ранга на единицу меньше;
    - источник должен содержать именно ту карту, что записана в ходе;
    - в колонку карта из ячейки ложится на пустую колонку или по
      правилу последовательности;
    - перенос блока проверяется Board.move_stack.

    Returns:
        Новая доска или None, если ход недопустим
    """
    kind = move.kind
    card = move.card

    if kind in (MoveKind.FREE_CELL_TO_FOUNDATION, MoveKind.FREE_CELL_TO_COLUMN):
        if not 0 <= move.source < len(board.free_cells):
            return None
        if board.free_cells[move.source] != card:
            return None
        if kind is MoveKind.FREE_CELL_TO_FOUNDATION:
            if not board.can_add_to_foundation(card):
                return None
            return board.clear_free_cell(move.source).add_to_foundation(card)
        if not 0 <= move.target < len(board.columns):
            return None
        top = board.top_card(move.target)
        if top is not None and not card.can_be_stacked_on(top):
            return None
        return board.clear_free_cell(move.source).append_to_column(card, move.target)

    if not 0 <= move.source < len(board.columns):
        return None
    source = board.columns[move.source]

    if kind is MoveKind.COLUMN_TO_FOUNDATION:
        if not source or source[-1] != card or not board.can_add_to_foundation(card):
            return None
        return board.remove_last_from_column(move.source).add_to_foundation(card)

    if kind is MoveKind.COLUMN_TO_FREE_CELL:
        if not source or source[-1] != card:
            return None
        if not 0 <= move.target < len(board.free_cells) or board.free_cells[move.target] is not None:
            return None
        return board.remove_last_from_column(move.source).set_free_cell(card, move.target)

    # COLUMN_TO_COLUMN
    if not 0 <= move.target < len(board.columns):
        return None
    if move.count <= 0 or len(source) < move.count or source[-move.count] != card:
        return None
    return board.move_stack(move.source, move.target, move.count)


def verify_solution(board: Board, moves: Sequence[Move]) -> bool:
    """
    Проверяет корректность решения.

    - каждый ход допустим;
    - база растёт по одной карте и никогда не уменьшается;
    - после всех ходов доска решена.
    """
    current = board
    for move in moves:
        before = dict(current.foundations)
        current = apply_move(current, move)
        if current is None:
            return False
        for suit, value in current.foundations.items():
            expected = before[suit] + (1 if move.to_foundation and suit is move.card.suit else 0)
            if value != expected:
                return False
    return current.is_solved

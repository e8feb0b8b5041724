"""
solvers/base.py

Базовый класс для всех решателей: узел поиска, автоходы в базу,
генерация ходов и visited set.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Optional, Set, Tuple

from analysis.symmetry import get_symmetry_canonical
from core.board import Board
from core.moves import Move, MoveKind
from utils.logging import SolverLogger, get_logger

# Больше двух колонок одновременно «ждать» не могут
MAX_MUST_USE_COLUMNS = 2


@dataclass(frozen=True)
class Step:
    """
    Узел поиска. Не изменяется после создания.

    updated_columns: колонки, изменённые после последнего хода в свободную ячейку.
    must_use_columns: колонки, где открылась новая верхняя карта (ход в ячейку
        или на пустую колонку), которую ещё не использовали.
    Порядок в кортежах колонок определяет порядок перебора ходов.
    """
    board: Board
    moves: Tuple[Move, ...] = ()
    updated_columns: Tuple[int, ...] = ()
    must_use_columns: Tuple[int, ...] = ()
    priority: int = 0


class Solution(NamedTuple):
    """Решённая доска и журнал ходов."""
    board: Board
    moves: List[Move]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


def _without(columns: Tuple[int, ...], index: int) -> Tuple[int, ...]:
    return tuple(c for c in columns if c != index)


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Все решатели наследуют от него и реализуют метод _search().
    Visited set принадлежит одному вызову solve() и сбрасывается в начале.
    """

    def __init__(self, use_symmetry: bool = True, verbose: bool = False,
                 logger: Optional[SolverLogger] = None):
        self.use_symmetry = use_symmetry
        self.verbose = verbose
        self.logger = logger or get_logger()
        self.stats = SolverStats()
        self.visited: Set[str] = set()

    def solve(self, board: Board,
              updated_columns: Optional[Iterable[int]] = None) -> Optional[Solution]:
        """
        Решает раскладку.

        Args:
            board: начальная позиция
            updated_columns: колонки, изменённые с прошлого решённого состояния
                (пусто или None — все колонки)

        Returns:
            Solution(board, moves) или None, если решение не найдено
            в исследованном пространстве
        """
        self.stats = SolverStats()
        self.visited = set()
        start = time.time()

        updated = tuple(updated_columns or ())
        if not updated:
            updated = tuple(range(len(board.columns)))

        self._log(f"Starting {self.__class__.__name__} ({board.card_count()} cards)")
        self._log(f"Start board:\n{board}")
        result = self._search(Step(board, (), updated, ()))
        self.stats.time_elapsed = time.time() - start

        if result is None:
            self._log(f"No solution. {self.stats}")
            return None

        self.stats.solution_length = len(result.moves)
        self._log(f"Solution found: {len(result.moves)} moves. {self.stats}")
        return Solution(result.board, list(result.moves))

    @abstractmethod
    def _search(self, root: Step) -> Optional[Step]:
        """Возвращает решённый узел или None."""
        pass

    # =====================================================
    # Логирование
    # =====================================================

    def _log(self, message: str) -> None:
        """Выводит сообщение если verbose=True."""
        if self.verbose:
            self.logger.info(f"[{self.__class__.__name__}] {message}")

    def _trace(self, step: Step) -> None:
        """Подробный вывод узла (только на уровне DEBUG)."""
        if not (self.verbose and step.moves and self.logger.is_enabled_for(logging.DEBUG)):
            return
        self.logger.debug(
            f"====== Move {len(step.moves) - 1} ======\n> {step.moves[-1]}\n"
            f"UpdatedCols: {list(step.updated_columns)}\n"
            f"MustUseCols: {list(step.must_use_columns)}\n{step.board}"
        )

    # =====================================================
    # Visited set
    # =====================================================

    def _get_key(self, board: Board) -> str:
        """Возвращает ключ для visited set."""
        return get_symmetry_canonical(board, use_color_symmetry=self.use_symmetry)

    def _visit(self, step: Step) -> bool:
        """Отмечает узел; False если такая позиция уже встречалась."""
        key = self._get_key(step.board)
        if key in self.visited:
            self.stats.nodes_pruned += 1
            return False
        self.visited.add(key)
        return True

    # =====================================================
    # Автоходы в базу
    # =====================================================

    @staticmethod
    def _automove_to_foundation(board: Board) -> Optional[Tuple[Board, Move]]:
        """Первая карта (ячейки, затем колонки), которую можно убрать без потерь."""
        for i, card in enumerate(board.free_cells):
            if card is not None and board.should_automove_to_foundation(card):
                move = Move(MoveKind.FREE_CELL_TO_FOUNDATION, card, source=i, automove=True)
                return board.clear_free_cell(i).add_to_foundation(card), move

        for i, column in enumerate(board.columns):
            if column and board.should_automove_to_foundation(column[-1]):
                card = column[-1]
                move = Move(MoveKind.COLUMN_TO_FOUNDATION, card, source=i, automove=True)
                return board.remove_last_from_column(i).add_to_foundation(card), move

        return None

    def apply_automoves(self, step: Step) -> Step:
        """Применяет автоходы до неподвижной точки."""
        board = step.board
        moves = step.moves
        updated = step.updated_columns
        must_use = step.must_use_columns
        changed = False

        while True:
            found = self._automove_to_foundation(board)
            if found is None:
                break
            board, move = found
            changed = True
            if move.kind is MoveKind.COLUMN_TO_FOUNDATION:
                if move.source not in updated:
                    updated = updated + (move.source,)
                must_use = _without(must_use, move.source)
            moves = moves + (move,)

        if not changed:
            return step
        return Step(board, moves, updated, must_use, step.priority)

    # =====================================================
    # Генерация ходов
    # =====================================================

    def successors(self, step: Step) -> Iterator[Step]:
        """
        Дочерние узлы в порядке перебора:
        ячейка -> база, колонка -> база, ячейка -> колонка,
        колонка -> непустая колонка, колонка -> пустая колонка,
        колонка -> ячейка.
        """
        board = step.board
        moves = step.moves
        updated = step.updated_columns
        must_use = step.must_use_columns
        assert len(must_use) <= MAX_MUST_USE_COLUMNS

        # FreeCell -> Foundation
        for i, card in enumerate(board.free_cells):
            if card is not None and board.can_add_to_foundation(card):
                move = Move(MoveKind.FREE_CELL_TO_FOUNDATION, card, source=i)
                yield Step(board.clear_free_cell(i).add_to_foundation(card),
                           moves + (move,), updated, must_use)

        # Column -> Foundation
        for src in updated:
            card = board.top_card(src)
            if card is not None and board.can_add_to_foundation(card):
                move = Move(MoveKind.COLUMN_TO_FOUNDATION, card, source=src)
                yield Step(board.remove_last_from_column(src).add_to_foundation(card),
                           moves + (move,), updated, _without(must_use, src))

        # FreeCell -> Column
        for i, card in enumerate(board.free_cells):
            if card is None:
                continue
            for to in updated:
                # Не возвращаем карту в колонку, открытую карту которой ещё не использовали
                if to in must_use:
                    continue
                top = board.top_card(to)
                if top is None or card.can_be_stacked_on(top):
                    move = Move(MoveKind.FREE_CELL_TO_COLUMN, card, source=i, target=to)
                    yield Step(board.clear_free_cell(i).append_to_column(card, to),
                               moves + (move,), updated, _without(must_use, to))

        # Column -> Non-Empty Column
        for src, to in self._column_pairs(board, must_use):
            if board.columns[src] and board.columns[to]:
                child = self._move_stack(step, src, to)
                if child is not None:
                    yield child

        if len(must_use) == MAX_MUST_USE_COLUMNS:
            self.stats.nodes_pruned += 1
            if self.verbose:
                self.logger.debug(f">>> Undo. Revealed columns {list(must_use)} but didn't use them.")
            return

        # Column -> Empty Column
        empty = [i for i, column in enumerate(board.columns) if not column]
        for src in updated:
            for to in empty:
                child = self._move_stack(step, src, to)
                if child is not None:
                    yield child

        # Column -> FreeCell
        cell = board.first_empty_free_cell_index
        if cell is None:
            return
        for src, column in enumerate(board.columns):
            if not column:
                continue
            size = board.stack_size(src)
            # Разбиваем связку, только если её нельзя перенести целиком
            if size == 1 or size > board.max_movable_stack_to_non_empty_column:
                card = column[-1]
                move = Move(MoveKind.COLUMN_TO_FREE_CELL, card, source=src, target=cell)
                pending = must_use if src in must_use else must_use + (src,)
                yield Step(board.remove_last_from_column(src).set_free_cell(card, cell),
                           moves + (move,), pending, pending)

    @staticmethod
    def _column_pairs(board: Board, must_use: Tuple[int, ...]) -> List[Tuple[int, int]]:
        """
        Пары (откуда, куда) для переноса между колонками.

        Две ожидающие колонки — только ход между ними;
        одна — сначала ходы с её участием, затем остальные.
        """
        if len(must_use) == MAX_MUST_USE_COLUMNS:
            return [(src, to) for src in must_use for to in must_use]

        indices = range(len(board.columns))
        pairs = [(src, to) for src in indices for to in indices]
        if must_use:
            pending = must_use[0]
            involved = [p for p in pairs if pending in p]
            return involved + [p for p in pairs if pending not in p]
        return pairs

    @staticmethod
    def _move_stack(step: Step, src: int, to: int) -> Optional[Step]:
        """Переносит всю верхнюю связку src на колонку to."""
        updated = step.updated_columns
        if src not in updated and to not in updated:
            return None

        board = step.board
        source = board.columns[src]
        k = board.stack_size(src)
        to_empty = not board.columns[to]
        # Перенос целой колонки на пустую ничего не меняет
        if src == to or (to_empty and k == len(source)):
            return None

        new_board = board.move_stack(src, to, k)
        if new_board is None:
            return None

        move = Move(MoveKind.COLUMN_TO_COLUMN, source[-k], source=src, target=to,
                    count=k, target_card=board.top_card(to))
        if src not in updated:
            updated = (src,) + updated
        if to not in updated:
            updated = (to,) + updated
        must_use = _without(step.must_use_columns, to)
        if to_empty and src not in must_use:
            must_use = (src,) + must_use
        return Step(new_board, step.moves + (move,), updated, must_use)

"""
solvers/dfs.py

DFS (Depth-First Search) с возвратом и visited set.
"""

from typing import Iterator, List, Optional

from .base import BaseSolver, Step
from utils.logging import SolverLogger


class DFSSolver(BaseSolver):
    """
    Исчерпывающий поиск в глубину.

    Особенности:
    - Автоходы в базу перед каждым ветвлением
    - Пропуск уже встреченных позиций (каноническая форма)
    - Явный стек точек выбора вместо рекурсии: глубина пути
      заранее не ограничена
    - Возвращает первое найденное решение, не кратчайшее
    """

    def __init__(self, use_symmetry: bool = True, max_depth: Optional[int] = None,
                 verbose: bool = False, logger: Optional[SolverLogger] = None):
        """
        Args:
            use_symmetry: объединять позиции с картами одного цвета
            max_depth: предел числа точек выбора на пути (None — без предела)
            verbose: выводить отладочную информацию
        """
        super().__init__(use_symmetry=use_symmetry, verbose=verbose, logger=logger)
        self.max_depth = max_depth

    def _search(self, root: Step) -> Optional[Step]:
        # Стек генераторов дочерних узлов, по одному на уровень пути
        stack: List[Iterator[Step]] = []
        step: Optional[Step] = root

        while step is not None:
            self.stats.nodes_visited += 1
            step = self.apply_automoves(step)
            self._trace(step)

            if step.board.is_solved:
                return step

            self.stats.max_depth = max(self.stats.max_depth, len(stack))
            if self._visit(step):
                if self.max_depth is None or len(stack) < self.max_depth:
                    stack.append(self.successors(step))
                else:
                    self.stats.nodes_pruned += 1

            step = self._next_choice(stack)

        return None

    @staticmethod
    def _next_choice(stack: List[Iterator[Step]]) -> Optional[Step]:
        """Следующий непросмотренный узел; исчерпанные уровни снимаются со стека."""
        while stack:
            child = next(stack[-1], None)
            if child is not None:
                return child
            stack.pop()
        return None

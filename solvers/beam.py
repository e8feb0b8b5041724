"""
solvers/beam.py

Beam Search — поуровневый поиск с отсечением по приоритету.
"""

from dataclasses import replace
from typing import List, Optional

from .base import BaseSolver, Step
from heuristics import evaluate_board
from utils.logging import SolverLogger

# Пороги подобраны эмпирически для полной колоды
PRUNE_START_LEVEL = 9
PRUNE_THRESHOLD = 20000
PRUNE_RETAIN = 10000


class BeamSolver(BaseSolver):
    """
    Beam Search решатель.

    Уровень = число ходов. Все узлы уровня раскрываются до перехода
    к следующему; когда фронт становится слишком большим, остаются
    только узлы с лучшей оценкой.

    Плюсы:
    - Контролируемый расход памяти
    - Решает полные раздачи, где DFS не укладывается во время

    Минусы:
    - Может пропустить решение (неполный алгоритм): None не доказывает,
      что решения нет
    """

    def __init__(self, prune_start_level: int = PRUNE_START_LEVEL,
                 prune_threshold: int = PRUNE_THRESHOLD,
                 prune_retain: int = PRUNE_RETAIN,
                 max_levels: Optional[int] = None,
                 use_symmetry: bool = True, verbose: bool = False,
                 logger: Optional[SolverLogger] = None):
        super().__init__(use_symmetry=use_symmetry, verbose=verbose, logger=logger)
        self.prune_start_level = prune_start_level
        self.prune_threshold = prune_threshold
        self.prune_retain = prune_retain
        self.max_levels = max_levels

    def _search(self, root: Step) -> Optional[Step]:
        root = self.apply_automoves(root)
        self.stats.nodes_visited += 1
        if root.board.is_solved:
            return root
        self._visit(root)

        frontier = [replace(root, priority=evaluate_board(root.board))]
        level = 0

        while frontier:
            if self.max_levels is not None and level >= self.max_levels:
                self._log(f"Level limit {self.max_levels} reached, frontier: {len(frontier)}")
                return None

            candidates: List[Step] = []
            for step in frontier:
                for child in self.successors(step):
                    self.stats.nodes_visited += 1
                    child = self.apply_automoves(child)
                    self._trace(child)
                    if child.board.is_solved:
                        self.stats.max_depth = level + 1
                        return child
                    if not self._visit(child):
                        continue
                    candidates.append(replace(child, priority=evaluate_board(child.board)))

            if self._should_prune(level, len(candidates)):
                candidates = self._prune(candidates)

            level += 1
            self.stats.max_depth = level
            if level % 5 == 0:
                self._log(f"Level {level}, frontier: {len(candidates)}")
            frontier = candidates

        return None

    def _should_prune(self, level: int, size: int) -> bool:
        """Отсечение включается с prune_start_level, когда фронт больше prune_threshold."""
        return level >= self.prune_start_level and size > self.prune_threshold

    def _prune(self, frontier: List[Step]) -> List[Step]:
        """
        Оставляет узлы с приоритетом не ниже порога.

        Порог берётся из диапазона оценок фронта так, чтобы при
        равномерном распределении осталось около prune_retain узлов.
        """
        priorities = [step.priority for step in frontier]
        low, high = min(priorities), max(priorities)
        if low == high:
            kept = frontier[:self.prune_retain]
        else:
            cutoff = high - (high - low) * self.prune_retain / len(frontier)
            kept = [step for step in frontier if step.priority >= cutoff]

        self.stats.nodes_pruned += len(frontier) - len(kept)
        self._log(f"Pruned frontier {len(frontier)} -> {len(kept)} (priority {low}..{high})")
        return kept

"""
solvers - Решатели пасьянса

Экспортирует:
- DFSSolver: исчерпывающий поиск в глубину
- BeamSolver: Beam Search (быстрый, неполный)
- solve(): выбор стратегии по имени
"""

from typing import Iterable, Optional

from .base import BaseSolver, SolverStats, Solution, Step
from .dfs import DFSSolver
from .beam import BeamSolver
from core.board import Board

SOLVERS = {
    'dfs': DFSSolver,
    'beam': BeamSolver,
}


def solve(board: Board, updated_columns: Optional[Iterable[int]] = None,
          strategy: str = 'dfs', **kwargs) -> Optional[Solution]:
    """
    Решает доску выбранной стратегией.

    Args:
        board: начальная позиция
        updated_columns: подсказка об изменённых колонках (None — все)
        strategy: 'dfs' или 'beam'
        **kwargs: параметры конструктора решателя

    Returns:
        Solution(board, moves) или None
    """
    solver_class = SOLVERS.get(strategy)
    if solver_class is None:
        raise ValueError(f"Неизвестная стратегия: {strategy} (доступны: {', '.join(SOLVERS)})")
    return solver_class(**kwargs).solve(board, updated_columns)


__all__ = [
    'BaseSolver',
    'SolverStats',
    'Solution',
    'Step',
    'DFSSolver',
    'BeamSolver',
    'SOLVERS',
    'solve',
]

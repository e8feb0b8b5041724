"""
deal_io/visualizer.py

Вывод доски и решений для человека.
"""

from typing import Optional, Sequence

from core.board import Board
from core.moves import Move


def display_board(board: Board) -> str:
    """
    Текстовое представление доски.

    Returns:
        Строка для вывода
    """
    return str(board)


def format_moves(moves: Optional[Sequence[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if moves is None:
        return "❌ Решение не найдено"

    return "\n".join(f">>> {i}) {move}" for i, move in enumerate(moves))


def format_solution(board: Board, solved_board: Board, moves: Sequence[Move]) -> str:
    """Исходная доска, итоговая доска и журнал ходов."""
    return (
        f"+++++++ Solution has {len(moves)} moves +++++++\n"
        f"--- Original Board ---\n{display_board(board)}\n\n"
        f"--- Final Board ---\n{display_board(solved_board)}\n\n"
        f"--- Moves ---\n{format_moves(moves)}\n"
        f"+++++++ {len(moves)} moves +++++++"
    )

#!/usr/bin/env python3
"""
main.py

Точка входа для решателя пасьянса.

Использование:
    python main.py deal.txt                          # DFS
    python main.py deal.txt --solver beam            # Beam Search
    cat deal.txt | python main.py - --free-cells "3s - - -" --foundations "c=1 d=2"
"""

import argparse
import logging
import sys
import time

from deal_io import (
    build_board, display_board, format_solution,
    parse_free_cells, parse_foundations
)
from solutions.verify import verify_solution
from solvers import SOLVERS
from utils.error_handling import InvalidBoardError
from utils.logging import get_logger, setup_file_logging


def parse_updated_columns(text: str):
    """'0,6' -> [0, 6]."""
    if not text:
        return None
    try:
        return [int(part) for part in text.split(',') if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Ожидается список индексов колонок: {text}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py deal.txt                    # DFS
  python main.py deal.txt --solver beam      # Beam Search (полная колода)
  python main.py deal.txt --full-deck        # проверить, что все 52 карты на месте
        """
    )
    parser.add_argument(
        'input', nargs='?', default='-',
        help='Файл с колонками (по одной на строку), "-" — stdin'
    )
    parser.add_argument(
        '--solver', '-s', choices=list(SOLVERS.keys()),
        default='dfs', help='Выбор решателя (default: dfs)'
    )
    parser.add_argument('--free-cells', default='', help='Свободные ячейки: "3s - - -"')
    parser.add_argument('--foundations', default='', help='База: "c=1 d=2 h=0 s=1"')
    parser.add_argument(
        '--updated', type=parse_updated_columns, default=None,
        help='Изменённые колонки: "0,6" (default: все)'
    )
    parser.add_argument('--full-deck', action='store_true', help='Требовать все 52 карты')
    parser.add_argument('--no-symmetry', action='store_true',
                        help='Не объединять карты одного цвета в visited set')
    parser.add_argument('--max-depth', type=int, default=None,
                        help='Предел глубины DFS / числа уровней Beam Search')
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный вывод')
    parser.add_argument('--debug', action='store_true', help='Трассировка каждого хода')
    parser.add_argument('--log-file', default=None, help='Дублировать лог в файл')
    return parser


def read_columns(path: str) -> str:
    if path == '-':
        return sys.stdin.read()
    with open(path, encoding='utf-8') as f:
        return f.read()


def make_solver(args):
    solver_class = SOLVERS[args.solver]
    kwargs = {
        'use_symmetry': not args.no_symmetry,
        'verbose': args.verbose or args.debug,
    }
    if args.max_depth is not None:
        kwargs['max_depth' if args.solver == 'dfs' else 'max_levels'] = args.max_depth
    return solver_class(**kwargs)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    logger.set_level(logging.DEBUG if args.debug else logging.INFO)
    file_handler = setup_file_logging(args.log_file) if args.log_file else None
    try:
        return run(args)
    finally:
        if file_handler is not None:
            logger.logger.removeHandler(file_handler)
            file_handler.close()


def run(args) -> int:
    """Решает раздачу и печатает результат. Возвращает код выхода."""
    try:
        board = build_board(
            read_columns(args.input),
            free_cells=parse_free_cells(args.free_cells),
            foundations=parse_foundations(args.foundations),
            is_full_deck=args.full_deck,
        )
    except (InvalidBoardError, OSError) as e:
        print(f"❌ Ошибка: {e}")
        return 1

    print("=" * 50)
    print("🃏 Solitaire Solver")
    print("=" * 50)
    print(display_board(board))
    print(f"\n🔧 Решатель: {args.solver}")
    print("-" * 50)

    solver = make_solver(args)
    start = time.time()
    result = solver.solve(board, args.updated)
    elapsed = time.time() - start

    if result is None:
        print("\n❌ Решение не найдено")
        print(f"⏱ Время: {elapsed:.3f}с")
        print(f"📊 Статистика: {solver.stats}")
        return 2

    solved_board, moves = result
    if not verify_solution(board, moves):
        print("\n❌ Найдено некорректное решение (валидация не пройдена)")
        return 3

    print(format_solution(board, solved_board, moves))
    print(f"\n⏱ Время: {elapsed:.3f}с")
    print(f"📊 Статистика: {solver.stats}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

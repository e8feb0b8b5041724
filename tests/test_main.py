"""
tests/test_main.py

Дымовые тесты командной строки.
"""

import pytest

from main import main, parse_updated_columns


def _deal(tmp_path, text):
    path = tmp_path / "deal.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


@pytest.mark.parametrize("solver", ["dfs", "beam"])
def test_main_solves(tmp_path, capsys, solver):
    assert main([_deal(tmp_path, "2c\n3c 1c 1h"), "--solver", solver]) == 0
    out = capsys.readouterr().out
    assert "Solution has" in out
    assert "Move Column1 3♣ => Foundation" in out


def test_main_with_free_cells_and_foundations(tmp_path, capsys):
    code = main([_deal(tmp_path, "3c\n2h"), "--free-cells", "2c - - -",
                 "--foundations", "c=1 h=1"])
    assert code == 0


def test_main_no_solution(tmp_path, capsys):
    assert main([_deal(tmp_path, "6c\n6s 5h 4c")]) == 2
    assert "Решение не найдено" in capsys.readouterr().out


def test_main_max_depth(tmp_path):
    assert main([_deal(tmp_path, "2h\n3s 3h 2s 1h\n1s"), "--max-depth", "0"]) == 2


@pytest.mark.parametrize("text", ["1h\n2c 1h", "2c 1x"])
def test_main_invalid_deal(tmp_path, capsys, text):
    assert main([_deal(tmp_path, text)]) == 1
    assert "Ошибка" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_main_log_file(tmp_path):
    log_file = tmp_path / "solver.log"
    assert main([_deal(tmp_path, "2c\n3c 1c 1h"), "--verbose", "--log-file", str(log_file)]) == 0
    assert log_file.exists()


def test_parse_updated_columns():
    assert parse_updated_columns("0,6") == [0, 6]
    assert parse_updated_columns("") is None

# tests/test_puzzle_io.py
from pathlib import Path

import pytest

from solver.puzzle_io import (
    MalformedCellError, PuzzleError, PuzzleNotFoundError, PuzzleReadError, is_puzzle_file, parse_puzzle,
    read_all_in_directory, read_puzzle, scan_directory, solution_path, write_solution,
)
from solver.solver_core import Grid


def test_parse_placeholder_text(puzzle_text, puzzle_rows):
    grid = parse_puzzle(puzzle_text, "classic.txt")
    assert grid == Grid.from_rows("x", puzzle_rows)
    assert grid.name == "classic.txt"


def test_parse_zero_and_custom_placeholder(puzzle_rows):
    zeros = "\n".join("".join(str(v) for v in row) for row in puzzle_rows)
    dots = zeros.replace("0", ".")
    assert parse_puzzle(zeros, "z") == parse_puzzle(dots, "d", placeholder=".")


def test_parse_short_lines_leave_cells_empty():
    grid = parse_puzzle("5\n\n3X9\r\n", "short")
    assert grid.value_at(0, 0) == 5
    assert grid.value_at(0, 1) == 0
    assert grid.value_at(2, 0) == 3
    assert grid.value_at(2, 2) == 9
    assert len(grid.empty_positions()) == 78


def test_parse_malformed_cell():
    with pytest.raises(MalformedCellError) as exc:
        parse_puzzle("53X\n12a", "bad.txt")
    err = exc.value
    assert (err.row, err.col, err.char) == (1, 2, "a")
    assert "bad.txt" in str(err)
    assert isinstance(err, ValueError)
    assert isinstance(err, PuzzleError)


def test_read_puzzle_uses_file_name(tmp_path, puzzle_text, puzzle_rows):
    p = tmp_path / "easy.txt"
    p.write_text(puzzle_text, encoding="utf-8")
    grid = read_puzzle(p)
    assert grid.name == "easy.txt"
    assert grid.rows() == puzzle_rows


def test_read_puzzle_missing_file(tmp_path):
    with pytest.raises(PuzzleNotFoundError) as exc:
        read_puzzle(tmp_path / "nope.txt")
    assert isinstance(exc.value, FileNotFoundError)
    assert exc.value.path == tmp_path / "nope.txt"


def test_malformed_error_carries_path(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_text("1?3", encoding="utf-8")
    with pytest.raises(MalformedCellError) as exc:
        read_puzzle(p)
    assert exc.value.path == p


@pytest.mark.parametrize("name,expected", [
    ("a.txt", True),
    ("a.sln.txt", False),
    ("a.md", False),
    ("dir/b.txt", True),
])
def test_is_puzzle_file(name, expected):
    assert is_puzzle_file(name) is expected


def test_scan_directory_filters_and_sorts(tmp_path):
    for name in ["b.txt", "a.txt", "a.sln.txt", "notes.md"]:
        (tmp_path / name).write_text("", encoding="utf-8")
    (tmp_path / "sub.txt").mkdir()
    assert [p.name for p in scan_directory(tmp_path)] == ["a.txt", "b.txt"]


def test_scan_missing_directory(tmp_path):
    with pytest.raises(PuzzleNotFoundError):
        scan_directory(tmp_path / "missing")


def test_read_all_isolates_bad_files(tmp_path, puzzle_text):
    (tmp_path / "bad.txt").write_text("12#", encoding="utf-8")
    (tmp_path / "good.txt").write_text(puzzle_text, encoding="utf-8")
    loads = read_all_in_directory(tmp_path)
    assert [load.path.name for load in loads] == ["bad.txt", "good.txt"]
    bad, good = loads
    assert not bad.ok and isinstance(bad.error, MalformedCellError)
    assert bad.grid is None
    assert good.ok and good.grid.name == "good.txt"


def test_solution_path():
    assert solution_path(Path("puzzles/easy.txt")) == Path("puzzles/easy.sln.txt")
    assert solution_path("x/a.b.txt").name == "a.b.sln.txt"


def test_write_solution(tmp_path, solution_rows):
    puzzle = tmp_path / "easy.txt"
    grid = Grid.from_rows("easy.txt", solution_rows)
    out = write_solution(puzzle, grid)
    assert out == tmp_path / "easy.sln.txt"
    assert out.read_text(encoding="utf-8") == str(grid) + "\n"
    # solution files are not picked up as puzzles
    assert scan_directory(tmp_path) == []


def test_undecodable_file_does_not_stop_the_batch(tmp_path, puzzle_text):
    bad = tmp_path / "a_bad.txt"
    bad.write_bytes(b"53\xff\n")
    (tmp_path / "good.txt").write_text(puzzle_text, encoding="utf-8")
    loads = read_all_in_directory(tmp_path)
    assert len(loads) == 2
    assert isinstance(loads[0].error, PuzzleReadError)
    assert loads[0].error.path == bad
    assert loads[1].ok


def test_read_puzzle_strips_bom(tmp_path, puzzle_text, puzzle_rows):
    p = tmp_path / "bom.txt"
    p.write_text(puzzle_text, encoding="utf-8-sig")
    assert p.read_bytes().startswith(b"\xef\xbb\xbf")
    assert read_puzzle(p).rows() == puzzle_rows

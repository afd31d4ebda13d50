"""Puzzle text files: parse one grid per file, scan a directory for puzzles, and write '<name>.sln.txt' solutions next to them."""

# puzzle_io.py
# Format: one line per row; digits 1..9 are givens, the placeholder ('X' by
# default) or '0' is an empty cell. Short lines leave trailing cells empty.

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .solver_core import GRID_SIZE, Grid

PUZZLE_SUFFIX = ".txt"
SOLUTION_SUFFIX = ".sln.txt"
DEFAULT_PLACEHOLDER = "X"


class PuzzleError(Exception):
    """Base class for problems reading a single puzzle file."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class PuzzleNotFoundError(PuzzleError, FileNotFoundError):
    pass


class PuzzleReadError(PuzzleError):
    """The file exists but could not be read or decoded."""


class MalformedCellError(PuzzleError, ValueError):
    def __init__(self, name: str, row: int, col: int, char: str, path: Optional[Path] = None):
        super().__init__(
            f"{name}: unexpected character {char!r} at row {row + 1}, column {col + 1}", path
        )
        self.name = name
        self.row = row
        self.col = col
        self.char = char


@dataclass
class PuzzleLoad:
    """Outcome of reading one puzzle file: a grid or the error it raised."""

    path: Path
    grid: Optional[Grid] = None
    error: Optional[PuzzleError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_puzzle(text: str, name: str, placeholder: str = DEFAULT_PLACEHOLDER, path: Optional[Path] = None) -> Grid:
    filled = {}
    for r, line in enumerate(text.splitlines()[:GRID_SIZE]):
        for c, ch in enumerate(line.rstrip("\r")):
            if ch == placeholder or ch == "0":
                continue
            if not ("1" <= ch <= str(GRID_SIZE)):
                raise MalformedCellError(name, r, c, ch, path)
            filled[(r, c)] = int(ch)
    return Grid.from_cells(name, filled)


def read_puzzle(path: str | Path, placeholder: str = DEFAULT_PLACEHOLDER) -> Grid:
    p = Path(path)
    if not p.is_file():
        raise PuzzleNotFoundError(f"Could not open puzzle file: {p}", p)
    try:
        # utf-8-sig drops a leading BOM
        text = p.read_text(encoding="utf-8-sig")
    except (UnicodeDecodeError, OSError) as e:
        raise PuzzleReadError(f"Could not read puzzle file {p}: {e}", p) from e
    return parse_puzzle(text, p.name, placeholder, p)


def is_puzzle_file(path: str | Path) -> bool:
    name = Path(path).name
    return name.endswith(PUZZLE_SUFFIX) and not name.endswith(SOLUTION_SUFFIX)


def scan_directory(path: str | Path) -> List[Path]:
    root = Path(path)
    if not root.is_dir():
        raise PuzzleNotFoundError(f"Could not access directory: {root}", root)
    return sorted(p for p in root.iterdir() if p.is_file() and is_puzzle_file(p))


def read_all_in_directory(path: str | Path, placeholder: str = DEFAULT_PLACEHOLDER) -> List[PuzzleLoad]:
    """Load every puzzle in a directory. A bad file is recorded, not raised."""
    loads = []
    for p in scan_directory(path):
        try:
            loads.append(PuzzleLoad(p, grid=read_puzzle(p, placeholder)))
        except PuzzleError as e:
            loads.append(PuzzleLoad(p, error=e))
    return loads


def solution_path(puzzle_path: str | Path) -> Path:
    p = Path(puzzle_path)
    return p.with_name(p.stem + SOLUTION_SUFFIX)


def write_solution(puzzle_path: str | Path, grid: Grid) -> Path:
    out = solution_path(puzzle_path)
    out.write_text(grid.serialize() + "\n", encoding="utf-8")
    return out

# types_sudoku.py
from __future__ import annotations

from typing import Any, Optional, TypedDict

Cell = tuple[int, int]
"""A (row, col) position, 0-based, row-major."""

Rows = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class SanityIssue(TypedDict, total=False):
    """A single problem found by sanity_check."""

    type: str  # 'duplicate' or 'given_overwritten'
    unit: str  # for duplicates: 'r4', 'c7' or 'b2'
    digits: list[int]  # duplicated digits within the unit
    cells: list[str]  # cells holding a duplicated digit
    cell: str  # for overwritten givens
    given: int
    found: int


class SolveReport(TypedDict):
    """Result of solve_tool, shaped for the CLI / API layers."""

    name: str
    solved: bool
    solution: Optional[Rows]  # None when no solution exists
    stats: dict[str, Any]

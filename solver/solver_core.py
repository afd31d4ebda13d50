"""Core Sudoku grid: an immutable 9x9 value matrix plus the constraint queries derived from it (missing values per row/column/box, per-cell candidates, empty-cell enumeration)."""

# solver_core.py
# - Grid is never mutated; with_value() copies the whole matrix
# - cells are 0-based (row, col); rc_to_key() gives 1-based 'r1c1' labels for reports
# - 0 = empty

from __future__ import annotations

from typing import Iterable, Mapping

from types_sudoku import Cell, Rows

GRID_SIZE = 9
BOX_SIZE = 3
BOXES_PER_SIDE = GRID_SIZE // BOX_SIZE
DIGITS = tuple(range(1, GRID_SIZE + 1))


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < GRID_SIZE and 0 <= c < GRID_SIZE


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def which_box(r: int, c: int) -> Cell:
    return (r // BOX_SIZE, c // BOX_SIZE)


def unit_cells_row(r: int) -> list[Cell]:
    return [(r, c) for c in range(GRID_SIZE)]


def unit_cells_col(c: int) -> list[Cell]:
    return [(r, c) for r in range(GRID_SIZE)]


def unit_cells_box(br: int, bc: int) -> list[Cell]:
    r0 = BOX_SIZE * br
    c0 = BOX_SIZE * bc
    return [(r0 + i, c0 + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)]


def all_units() -> list[list[Cell]]:
    """Rows, then columns, then boxes (box order is row-major)."""
    units = [unit_cells_row(r) for r in range(GRID_SIZE)]
    units += [unit_cells_col(c) for c in range(GRID_SIZE)]
    units += [unit_cells_box(br, bc) for br in range(BOXES_PER_SIDE) for bc in range(BOXES_PER_SIDE)]
    return units


def _check_value(value: int) -> int:
    if not 0 <= value <= GRID_SIZE:
        raise ValueError(f"cell value must be in 0..{GRID_SIZE}, got {value!r}")
    return value


class Grid:
    """Immutable 9x9 Sudoku grid with a name carried through for reporting.

    Equality and hashing use the cell values only, so a solved grid compares
    equal to the expected answer regardless of its label.
    """

    __slots__ = ("_cells", "_name")

    def __init__(self, name: str, cells: Iterable[Iterable[int]]):
        # private tuple copy; the caller keeps no handle on the storage
        data = tuple(tuple(_check_value(v) for v in row) for row in cells)
        if len(data) != GRID_SIZE or any(len(row) != GRID_SIZE for row in data):
            raise ValueError(f"grid must be {GRID_SIZE}x{GRID_SIZE}")
        self._name = name
        self._cells = data

    # ---------------------------- construction ----------------------------

    @classmethod
    def from_cells(cls, name: str, filled: Mapping[Cell, int]) -> "Grid":
        """Build a grid from {(row, col): value}; unspecified cells are 0.

        Conflicting givens are accepted as-is. Positions outside the grid are
        dropped.
        """
        data = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
        for (r, c), value in filled.items():
            if in_bounds(r, c):
                data[r][c] = _check_value(value)
        return cls(name, data)

    @classmethod
    def from_rows(cls, name: str, rows: Iterable[Iterable[int]]) -> "Grid":
        filled = {}
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value:
                    filled[(r, c)] = value
        return cls.from_cells(name, filled)

    @classmethod
    def empty(cls, name: str = "") -> "Grid":
        return cls.from_cells(name, {})

    def with_value(self, cell: Cell, value: int) -> "Grid":
        """Copy of this grid with one cell replaced. Legality is not checked."""
        r, c = cell
        if not in_bounds(r, c):
            raise IndexError(f"cell {cell!r} is outside the grid")
        data = [list(row) for row in self._cells]
        data[r][c] = _check_value(value)
        return Grid(self._name, data)

    # ------------------------------- access -------------------------------

    @property
    def name(self) -> str:
        return self._name

    def value_at(self, r: int, c: int) -> int:
        if in_bounds(r, c):
            return self._cells[r][c]
        return 0

    def __getitem__(self, cell: Cell) -> int:
        return self.value_at(*cell)

    def rows(self) -> Rows:
        return [list(row) for row in self._cells]

    def is_complete(self) -> bool:
        return all(v != 0 for row in self._cells for v in row)

    def serialize(self) -> str:
        return "\n".join("".join(str(v) for v in row) for row in self._cells)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Grid(name={self._name!r}, empty={len(self.empty_positions())})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    # ---------------------------- verification ----------------------------

    def verify(self) -> bool:
        """True iff no row, column or box holds the same non-zero digit twice.

        Empty cells are ignored, so a partial but consistent grid verifies.
        """
        for unit in all_units():
            seen = set()
            for r, c in unit:
                v = self._cells[r][c]
                if v == 0:
                    continue
                if v in seen:
                    return False
                seen.add(v)
        return True

    # -------------------------- constraint queries --------------------------

    def missing_in_row(self, r: int) -> set[int]:
        missing = set(DIGITS)
        if not 0 <= r < GRID_SIZE:
            return missing
        return missing - set(self._cells[r])

    def missing_in_column(self, c: int) -> set[int]:
        missing = set(DIGITS)
        if not 0 <= c < GRID_SIZE:
            return missing
        return missing - {self._cells[r][c] for r in range(GRID_SIZE)}

    def missing_in_box(self, br: int, bc: int) -> set[int]:
        missing = set(DIGITS)
        if not (0 <= br < BOXES_PER_SIDE and 0 <= bc < BOXES_PER_SIDE):
            return missing
        return missing - {self._cells[r][c] for r, c in unit_cells_box(br, bc)}

    def is_row_complete(self, r: int) -> bool:
        return not self.missing_in_row(r)

    def is_column_complete(self, c: int) -> bool:
        return not self.missing_in_column(c)

    def is_box_complete(self, br: int, bc: int) -> bool:
        return not self.missing_in_box(br, bc)

    def candidates_for(self, r: int, c: int) -> list[int]:
        """Ascending digits legal at (r, c); [] for a position off the grid."""
        if not in_bounds(r, c):
            return []
        opts = self.missing_in_row(r) & self.missing_in_column(c) & self.missing_in_box(*which_box(r, c))
        return sorted(opts)

    def empty_positions(self) -> list[Cell]:
        # row-major; the solver's tie-breaks depend on this order
        return [(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE) if self._cells[r][c] == 0]

    def empty_position_candidates(self) -> dict[Cell, list[int]]:
        return {cell: self.candidates_for(*cell) for cell in self.empty_positions()}


def derive(grid: Grid, cell: Cell, value: int) -> Grid:
    return grid.with_value(cell, value)

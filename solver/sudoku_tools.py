"""Solving entry points: naked-single propagation plus minimum-remaining-candidates backtracking, and the dict-returning tool wrappers used by the CLI and the API."""

# sudoku_tools.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from types_sudoku import Candidates, Cell, Rows, SanityIssue, SolveReport

from .solver_core import (
    GRID_SIZE, Grid, all_units, rc_to_key, which_box,
)


@dataclass
class SearchStats:
    """Counters filled in by solve(); they never influence the search."""

    forced: int = 0  # naked singles placed during propagation
    branches: int = 0  # guesses tried
    dead_ends: int = 0  # states with an empty candidate set
    max_depth: int = 0
    first_branch: Optional[Tuple[Cell, int]] = None  # (cell, value) of the first guess

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _min_candidate_cell(possible: Dict[Cell, List[int]]) -> Optional[Tuple[Cell, List[int]]]:
    """First cell (row-major) with the fewest candidates, or None if nothing is empty."""
    best = None
    for cell, opts in possible.items():
        if best is None or len(opts) < len(best[1]):
            best = (cell, opts)
    return best


def _propagate(grid: Grid, stats: SearchStats) -> Tuple[Grid, Optional[Tuple[Cell, List[int]]]]:
    """Place naked singles until none remain.

    Returns the updated grid and its minimum-candidate cell (None when the
    grid is full).
    """
    cur = grid
    while True:
        possible = cur.empty_position_candidates()
        best = _min_candidate_cell(possible)
        if best is None or len(best[1]) != 1:
            return cur, best
        for (r, c), opts in possible.items():
            if len(opts) != 1:
                continue
            # earlier placements in this pass may have removed the value
            if opts[0] in cur.candidates_for(r, c):
                cur = cur.with_value((r, c), opts[0])
                stats.forced += 1
            else:
                break


def _search(grid: Grid, stats: SearchStats, depth: int) -> Optional[Grid]:
    stats.max_depth = max(stats.max_depth, depth)
    cur, best = _propagate(grid, stats)
    if best is None:
        return cur
    cell, opts = best
    if not opts:
        stats.dead_ends += 1
        return None
    for val in opts:
        stats.branches += 1
        if stats.first_branch is None:
            stats.first_branch = (cell, val)
        attempt = _search(cur.with_value(cell, val), stats, depth + 1)
        if attempt is not None and attempt.verify():
            return attempt
    return None


def solve(grid: Grid, stats: Optional[SearchStats] = None) -> Optional[Grid]:
    """Return the completed grid, or None when the puzzle has no solution.

    Deterministic: ties between equally constrained cells go to the first one
    in row-major order, and guesses are tried in ascending order. The final
    grid is re-verified, so an input that is already full but inconsistent
    also yields None.
    """
    if stats is None:
        stats = SearchStats()
    result = _search(grid, stats, 0)
    if result is None or not result.verify():
        return None
    return result


# ------------------------- tool-friendly wrappers -------------------------

def sanity_check(original: Rows, current: Rows) -> Dict:
    issues: List[SanityIssue] = []
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            given = original[r][c]
            if given != 0 and current[r][c] not in (0, given):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": given, "found": current[r][c]})

    for i, unit in enumerate(all_units()):
        seen = set(); dups = set()
        for r, c in unit:
            v = current[r][c]
            if v == 0: continue
            if v in seen: dups.add(v)
            seen.add(v)
        if not dups:
            continue
        if i < GRID_SIZE:
            label = f"r{i + 1}"
        elif i < 2 * GRID_SIZE:
            label = f"c{i - GRID_SIZE + 1}"
        else:
            br, bc = which_box(*unit[0])
            label = f"b{3 * br + bc + 1}"
        cells = [rc_to_key(r, c) for r, c in unit if current[r][c] in dups]
        issues.append({"type": "duplicate", "unit": label, "digits": sorted(dups), "cells": cells})
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Rows) -> Dict[str, Candidates]:
    """Candidate digits for each empty cell, keyed like {'r1c2': [1, 2, 5], ...}."""
    grid = Grid.from_rows("current", current)
    return {"candidates": {rc_to_key(r, c): opts for (r, c), opts in grid.empty_position_candidates().items()}}


def solve_tool(current: Rows, name: str = "puzzle") -> SolveReport:
    stats = SearchStats()
    solved = solve(Grid.from_rows(name, current), stats)
    return {
        "name": name,
        "solved": solved is not None,
        "solution": solved.rows() if solved is not None else None,
        "stats": stats.as_dict(),
    }

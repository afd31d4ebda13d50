# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI
from pydantic import BaseModel, field_validator
from typing import List, Optional

from solver.solver_core import GRID_SIZE
from solver.sudoku_tools import sanity_check, compute_candidates_tool, solve_tool

app = FastAPI(title="Sudoku Solver Tool API")


def _check_rows(rows: List[List[int]]) -> List[List[int]]:
    if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
        raise ValueError(f"grid must be {GRID_SIZE} rows of {GRID_SIZE} cells")
    if any(not 0 <= v <= GRID_SIZE for row in rows for v in row):
        raise ValueError(f"cell values must be in 0..{GRID_SIZE}")
    return rows


class GridModel(BaseModel):
    grid: List[List[int]]
    name: str = "puzzle"

    @field_validator("grid")
    @classmethod
    def grid_shape(cls, v):
        return _check_rows(v)


class VerifyRequest(BaseModel):
    current: List[List[int]]
    original: Optional[List[List[int]]] = None

    @field_validator("current", "original")
    @classmethod
    def grid_shape(cls, v):
        return v if v is None else _check_rows(v)


@app.post("/solve")
def api_solve(payload: GridModel):
    return solve_tool(payload.grid, payload.name)

@app.post("/verify")
def api_verify(req: VerifyRequest):
    original = req.original if req.original is not None else [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    return sanity_check(original, req.current)

@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)

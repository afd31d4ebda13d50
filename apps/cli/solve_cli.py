"""Batch console solver: asks for (or is given) a directory of puzzle files, solves each one, prints the result and writes '<name>.sln.txt' beside every solved puzzle."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli                       # prompts for the directory
#   python -m apps.cli.solve_cli --dir puzzles --no-pause --stats
#   python -m apps.cli.solve_cli --dir puzzles --config configs/solve.yaml
import argparse
from pathlib import Path

from tqdm import tqdm

from solver.puzzle_io import PuzzleNotFoundError, read_all_in_directory, write_solution
from solver.sudoku_tools import SearchStats, solve
from .config import SolveCfg, resolve_cfg

PROMPT_DIR = "Please enter the directory with puzzle files: "
PROMPT_EXIT = "Solver done, press Enter to continue..."


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve every .txt Sudoku puzzle in a directory.")
    ap.add_argument("--dir", type=str, default=None, help="Puzzle directory (prompted for when omitted)")
    ap.add_argument("--config", type=str, default=None, help="YAML file with SolveCfg keys")
    ap.add_argument("--placeholder", type=str, default=None, help="Character marking an empty cell")
    ap.add_argument("--no-write", dest="write_solutions", action="store_const", const=False, default=None,
                    help="Do not write .sln.txt files")
    ap.add_argument("--no-pause", dest="pause_on_exit", action="store_const", const=False, default=None,
                    help="Skip the final prompt")
    ap.add_argument("--stats", dest="show_stats", action="store_const", const=True, default=None,
                    help="Print search counters per puzzle")
    ap.add_argument("--progress", action="store_const", const=True, default=None,
                    help="Show a progress bar over the batch")
    return ap


def _prompt(text: str) -> str:
    try:
        return input(text)
    except EOFError:
        return ""


def run_batch(puzzle_dir: Path, cfg: SolveCfg) -> dict:
    """Solve every puzzle in puzzle_dir. Per-file problems are reported and skipped."""
    loads = read_all_in_directory(puzzle_dir, cfg.placeholder)
    summary = {"solved": 0, "unsolved": 0, "errors": 0}
    for load in tqdm(loads, desc="puzzles", disable=not cfg.progress, leave=False):
        if not load.ok:
            tqdm.write(f"[error] {load.error}")
            summary["errors"] += 1
            continue

        grid = load.grid
        stats = SearchStats()
        solved = solve(grid, stats)
        if solved is None:
            tqdm.write(f"Could not solve puzzle {grid.name}")
            summary["unsolved"] += 1
        else:
            tqdm.write(f"Solution for puzzle {grid.name}")
            tqdm.write(str(solved))
            tqdm.write("")
            summary["solved"] += 1
            if cfg.write_solutions:
                out = write_solution(load.path, solved)
                tqdm.write(f"[write] {out}")
        if cfg.show_stats:
            s = stats.as_dict()
            tqdm.write("[solve] " + " ".join(f"{k}={v}" for k, v in s.items()))
    return summary


def main(args=None) -> int:
    if args is None:
        args = build_parser().parse_args()

    cfg = resolve_cfg(
        args.config,
        placeholder=args.placeholder,
        write_solutions=args.write_solutions,
        pause_on_exit=args.pause_on_exit,
        show_stats=args.show_stats,
        progress=args.progress,
    )

    puzzle_dir = args.dir if args.dir is not None else _prompt(PROMPT_DIR)
    puzzle_dir = puzzle_dir.strip()
    # Path("") would silently mean the working directory
    if not puzzle_dir:
        print("[error] No puzzle directory given")
        return 1
    try:
        summary = run_batch(Path(puzzle_dir), cfg)
    except PuzzleNotFoundError as e:
        print(f"[error] {e}")
        return 1

    print(f"[done] solved={summary['solved']} unsolved={summary['unsolved']} errors={summary['errors']}")
    if cfg.pause_on_exit:
        _prompt(PROMPT_EXIT)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .board import Board
from .errors import SearchDepthError, SudokuError
from .puzzles import BUILTIN, DEFAULT_PUZZLE, builtin
from .render import board_to_csv, format_board
from .solver import DEFAULT_STRATEGY, STRATEGIES, solve
from .storage import PUZZLE_ENV, load_board, resolve_puzzle_path, save_board

log = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2
EXIT_BAD_OUTPUT = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gensudoku",
        description="Solve a Sudoku-style board (N x N, N a perfect square) by naive backtracking.",
    )
    parser.add_argument(
        "puzzle", nargs="?",
        help=f"Puzzle file (.json, .csv, or digits with 0/. for blanks). "
             f"Defaults to ${PUZZLE_ENV}, then the built-in '{DEFAULT_PUZZLE}' puzzle.",
    )
    parser.add_argument(
        "--builtin", choices=sorted(BUILTIN), default=None,
        help="Solve one of the built-in puzzles instead of a file.",
    )
    parser.add_argument(
        "--strategy", choices=STRATEGIES, default=DEFAULT_STRATEGY,
        help="'backtrack' undoes moves in place; 'copy' builds a new board per step (slow).",
    )
    parser.add_argument("--format", choices=["text", "csv"], default="text", help="Output format.")
    parser.add_argument("--output", "-o", help="Also write the result board to this file.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_problem(args: argparse.Namespace) -> Board:
    if args.puzzle is None and args.builtin is not None:
        log.info("Using built-in puzzle %r", args.builtin)
        return builtin(args.builtin)
    path = resolve_puzzle_path(args.puzzle)
    if path is None:
        log.info("Using built-in puzzle %r", DEFAULT_PUZZLE)
        return builtin(DEFAULT_PUZZLE)
    log.info("Reading %s", path)
    return load_board(path)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        problem = load_problem(args)
    except (SudokuError, OSError) as e:
        log.error("Cannot load puzzle: %s", e)
        return EXIT_BAD_INPUT

    log.info("Solving %dx%d board (%d cells given)", problem.n, problem.n, problem.filled_count())
    try:
        result = solve(problem, strategy=args.strategy)
    except SearchDepthError as e:
        log.error("Cannot search: %s", e)
        return EXIT_BAD_INPUT

    if args.format == "csv":
        sys.stdout.write(board_to_csv(result).decode("utf-8"))
    else:
        sys.stdout.write(format_board(result) + "\n")

    if args.output:
        try:
            save_board(result, args.output)
        except OSError as e:
            log.error("Cannot write %s: %s", args.output, e)
            return EXIT_BAD_OUTPUT
        log.info("Wrote %s", args.output)

    if result.is_solved():
        log.info("Solved")
        return EXIT_SOLVED
    if not result.is_valid():
        for c in result.conflicts():
            log.error("Invalid puzzle: %s", c.describe())
    else:
        log.error("Unable to solve!")
    return EXIT_UNSOLVED

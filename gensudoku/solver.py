from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import List

from .board import Board
from .errors import SearchDepthError

log = logging.getLogger(__name__)

STRATEGIES = ("backtrack", "copy")
DEFAULT_STRATEGY = "backtrack"

# stack frames left for whoever calls solve_copying()
COPY_HEADROOM = 200


@dataclass
class SearchStats:
    placements: int = 0  # digits written into an empty cell
    backtracks: int = 0  # cells where every digit failed


def solve(board: Board, strategy: str = DEFAULT_STRATEGY) -> Board:
    """
    Naive backtracking: always the first empty cell in row-major order,
    digits tried in ascending order, first solution wins.

    Returns the solved board, or the input board unchanged when it is invalid
    or no completion exists. Check result.is_solved() to tell the two apart.
    Both strategies return identical boards for every input.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"strategy must be one of {', '.join(repr(s) for s in STRATEGIES)}")
    if strategy == "copy":
        return solve_copying(board)
    return solve_backtracking(board)


# -----------------------------
# Value-semantics recursion
# -----------------------------

def solve_copying(board: Board) -> Board:
    """
    Every step works on a fresh board from put(); nothing is mutated.

    Recurses once per empty cell, so a valid board whose empty cells (plus
    COPY_HEADROOM frames for the caller) exceed sys.getrecursionlimit()
    raises SearchDepthError up front. Use solve_backtracking() for those.
    """
    if board.is_valid():
        empty = board.n * board.n - board.filled_count()
        limit = sys.getrecursionlimit()
        if empty + COPY_HEADROOM > limit:
            raise SearchDepthError(
                f"{empty} empty cells is too deep for the copy strategy "
                f"(recursion limit {limit}); use 'backtrack'."
            )
    stats = SearchStats()
    result = _solve_copying(board, stats)
    log.debug(
        "copy search: %d placements, %d backtracks, solved=%s",
        stats.placements, stats.backtracks, result.is_solved(),
    )
    return result


def _solve_copying(board: Board, stats: SearchStats) -> Board:
    if not board.is_valid():
        return board

    pos = board.next_empty()
    if pos is None:
        return board

    x, y = pos
    for digit in range(1, board.n + 1):
        stats.placements += 1
        res = _solve_copying(board.put(x, y, digit), stats)
        if res.is_complete() and res.is_valid():
            return res

    stats.backtracks += 1
    return board


# -----------------------------
# In-place search with undo
# -----------------------------

def solve_backtracking(board: Board) -> Board:
    """
    Same search as solve_copying() on a single mutable cell list, driven by
    a loop over the empty positions instead of recursion, so the board size
    is not bounded by the interpreter's recursion limit.
    Only the placed cell's row, column and block are checked, since the
    rest of the grid is already known to be valid.
    """
    if not board.is_valid() or board.is_complete():
        return board

    n = board.n
    side = board.side
    grid: List[int] = list(board.cells)
    # the search fills cells in row-major order, so this is the visiting order
    empties = [p for p, v in enumerate(grid) if v == 0]
    stats = SearchStats()

    def fits(p: int) -> bool:
        r, c = divmod(p, n)
        v = grid[p]
        for i in range(n):
            if i != c and grid[r * n + i] == v:
                return False
            if i != r and grid[i * n + c] == v:
                return False
        br = r - r % side
        bc = c - c % side
        for i in range(br, br + side):
            for j in range(bc, bc + side):
                if (i != r or j != c) and grid[i * n + j] == v:
                    return False
        return True

    k = 0
    while 0 <= k < len(empties):
        p = empties[k]
        # resume after the digit this cell held when we last left it
        digit = grid[p] + 1
        placed = False
        while digit <= n:
            grid[p] = digit
            stats.placements += 1
            if fits(p):
                placed = True
                break
            digit += 1

        if placed:
            k += 1
        else:
            # undo
            grid[p] = 0
            stats.backtracks += 1
            k -= 1

    solved = k == len(empties)
    log.debug(
        "backtrack search: %d placements, %d backtracks, solved=%s",
        stats.placements, stats.backtracks, solved,
    )
    return Board(n, tuple(grid)) if solved else board

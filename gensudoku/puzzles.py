from __future__ import annotations

from typing import Dict, List

from .board import Board
from .errors import UnknownPuzzleError

Rows = List[List[int]]

# Expert-level puzzle from http://www.extremesudoku.info/sudoku.html
EXPERT: Rows = [
    [5, 0, 0, 9, 0, 0, 8, 0, 0],
    [0, 0, 7, 0, 0, 2, 0, 0, 0],
    [0, 4, 0, 0, 7, 0, 0, 0, 3],
    [9, 0, 0, 1, 0, 0, 0, 7, 0],
    [0, 0, 4, 0, 6, 0, 3, 0, 0],
    [0, 8, 0, 0, 0, 7, 0, 0, 9],
    [1, 0, 0, 0, 4, 0, 0, 9, 0],
    [0, 0, 0, 5, 0, 0, 7, 0, 0],
    [0, 0, 6, 0, 0, 3, 0, 0, 2],
]

SMALL: Rows = [
    [0, 0, 3, 0],
    [3, 0, 0, 2],
    [0, 1, 0, 0],
    [0, 0, 2, 0],
]

BUILTIN: Dict[str, Rows] = {
    "expert": EXPERT,
    "small": SMALL,
}

DEFAULT_PUZZLE = "expert"


def builtin(name: str = DEFAULT_PUZZLE) -> Board:
    try:
        rows = BUILTIN[name]
    except KeyError:
        raise UnknownPuzzleError(
            f"Unknown puzzle {name!r} (available: {', '.join(sorted(BUILTIN))})."
        ) from None
    return Board.from_rows(rows)

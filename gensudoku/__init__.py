from .board import Board, Conflict
from .errors import (
    InvalidBoardError,
    InvalidCellError,
    InvalidDimensionError,
    PuzzleFormatError,
    SearchDepthError,
    SudokuError,
    UnknownPuzzleError,
)
from .mathutil import isqrt
from .solver import STRATEGIES, solve

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Conflict",
    "InvalidBoardError",
    "InvalidCellError",
    "InvalidDimensionError",
    "PuzzleFormatError",
    "SearchDepthError",
    "STRATEGIES",
    "SudokuError",
    "UnknownPuzzleError",
    "isqrt",
    "solve",
]

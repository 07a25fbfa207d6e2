from __future__ import annotations


class SudokuError(ValueError):
    """Base class for everything gensudoku raises on bad input."""


class InvalidDimensionError(SudokuError):
    def __init__(self, n: int):
        super().__init__(f"Invalid size: {n}. Only perfect squares are supported (4, 9, 16, ...).")
        self.n = n


class InvalidBoardError(SudokuError):
    pass


class InvalidCellError(SudokuError):
    def __init__(self, row: int, col: int, value: object, n: int):
        super().__init__(f"Invalid value at ({row+1},{col+1}): {value!r} (allowed: 0..{n}).")
        self.row = row
        self.col = col
        self.value = value


class PuzzleFormatError(SudokuError):
    pass


class UnknownPuzzleError(SudokuError, KeyError):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class SearchDepthError(SudokuError):
    pass

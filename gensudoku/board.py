from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidBoardError, InvalidCellError, InvalidDimensionError
from .mathutil import isqrt

Section = Tuple[int, ...]  # N values of a row, column or block; 0 = empty

SECTION_KINDS = ("row", "col", "block")


@dataclass(frozen=True)
class Conflict:
    kind: str   # "row" | "col" | "block"
    index: int  # row/col number, or block number counted row-major
    value: int  # the duplicated digit

    def describe(self) -> str:
        return f"value {self.value} appears more than once in {self.kind} {self.index + 1}"


@dataclass(frozen=True)
class Board:
    """
    An N x N Latin-square-style board, stored row-major.
    0 marks an empty cell, 1..N an assigned digit.

    Boards are values: put() returns a new board and never touches the
    receiver, so a board can be shared freely between searches.
    """

    n: int
    cells: Tuple[int, ...]
    side: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        side = isqrt(self.n) if self.n > 0 else 0
        if side == 0:
            raise InvalidDimensionError(self.n)
        cells = tuple(self.cells)
        if len(cells) != self.n * self.n:
            raise InvalidBoardError(
                f"Expected {self.n * self.n} cells for a {self.n}x{self.n} board, got {len(cells)}."
            )
        for i, v in enumerate(cells):
            if isinstance(v, bool) or not isinstance(v, int) or v < 0 or v > self.n:
                raise InvalidCellError(i // self.n, i % self.n, v, self.n)
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "side", side)

    # -----------------------------
    # Construction
    # -----------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        n = len(rows)
        if n == 0:
            raise InvalidDimensionError(0)
        if any(len(row) != n for row in rows):
            raise InvalidBoardError("Board must be square (N x N).")
        return cls(n, tuple(v for row in rows for v in row))

    @classmethod
    def from_flat(cls, cells: Iterable[int], n: Optional[int] = None) -> "Board":
        flat = tuple(cells)
        if n is None:
            n = isqrt(len(flat))
            if n * n != len(flat):
                raise InvalidBoardError(f"{len(flat)} cells do not form a square grid.")
        return cls(n, flat)

    @classmethod
    def empty(cls, n: int) -> "Board":
        return cls(n, (0,) * (n * n))

    def rows(self) -> List[List[int]]:
        return [list(self.row(i)) for i in range(self.n)]

    # -----------------------------
    # Cell access
    # -----------------------------

    def get(self, row: int, col: int) -> int:
        # Indices past the end of the grid read as empty.
        idx = row * self.n + col
        if idx < 0 or idx >= self.n * self.n:
            return 0
        return self.cells[idx]

    def __call__(self, row: int, col: int) -> int:
        return self.get(row, col)

    def put(self, row: int, col: int, value: int) -> "Board":
        """Return a copy of this board with (row, col) set to value."""
        if not (0 <= row < self.n and 0 <= col < self.n):
            raise IndexError(f"Cell ({row},{col}) is outside a {self.n}x{self.n} board.")
        cells = list(self.cells)
        cells[row * self.n + col] = value
        return replace(self, cells=tuple(cells))

    def filled_count(self) -> int:
        return sum(1 for v in self.cells if v != 0)

    # -----------------------------
    # Sections
    # -----------------------------

    def row(self, x: int) -> Section:
        return tuple(self.get(x, y) for y in range(self.n))

    def col(self, y: int) -> Section:
        return tuple(self.get(x, y) for x in range(self.n))

    def block(self, bx: int, by: int) -> Section:
        s = self.side
        return tuple(self.get(bx * s + i, by * s + j) for i in range(s) for j in range(s))

    def section(self, kind: str, index: int) -> Section:
        """Section by kind; blocks are numbered row-major (index = bx * side + by)."""
        if kind == "row":
            return self.row(index)
        if kind == "col":
            return self.col(index)
        if kind == "block":
            return self.block(*divmod(index, self.side))
        raise ValueError(f"Unknown section kind: {kind!r}")

    def section_valid(self, section: Section) -> bool:
        seen = [False] * (self.n + 1)
        for v in section:
            if not v:
                continue
            if seen[v]:
                return False
            seen[v] = True
        return True

    @staticmethod
    def section_complete(section: Section) -> bool:
        return 0 not in section

    def row_valid(self, x: int) -> bool:
        return self.section_valid(self.row(x))

    def col_valid(self, y: int) -> bool:
        return self.section_valid(self.col(y))

    def block_valid(self, bx: int, by: int) -> bool:
        return self.section_valid(self.block(bx, by))

    def row_complete(self, x: int) -> bool:
        return self.section_complete(self.row(x))

    def col_complete(self, y: int) -> bool:
        return self.section_complete(self.col(y))

    def block_complete(self, bx: int, by: int) -> bool:
        return self.section_complete(self.block(bx, by))

    # -----------------------------
    # Board-level predicates
    # -----------------------------

    def is_valid(self) -> bool:
        """True if no row, column or block repeats a non-zero value."""
        for x in range(self.n):
            if not self.row_valid(x):
                return False
        for y in range(self.n):
            if not self.col_valid(y):
                return False
        for bx in range(self.side):
            for by in range(self.side):
                if not self.block_valid(bx, by):
                    return False
        return True

    def is_complete(self) -> bool:
        return 0 not in self.cells

    def is_solved(self) -> bool:
        return self.is_valid() and self.is_complete()

    def next_empty(self) -> Optional[Tuple[int, int]]:
        """First empty cell in row-major order, or None if the board is complete."""
        for x in range(self.n):
            for y in range(self.n):
                if self.get(x, y) == 0:
                    return x, y
        return None

    def conflicts(self) -> List[Conflict]:
        """
        Every duplicated digit, per section. Ordered rows, columns, blocks,
        then by value. Empty exactly when the board is valid.
        """
        out: List[Conflict] = []
        for kind in SECTION_KINDS:
            for index in range(self.n):
                counts = [0] * (self.n + 1)
                for v in self.section(kind, index):
                    counts[v] += 1
                for v in range(1, self.n + 1):
                    if counts[v] > 1:
                        out.append(Conflict(kind=kind, index=index, value=v))
        return out

    def __str__(self) -> str:
        from .render import format_board  # render imports Board

        return format_board(self)

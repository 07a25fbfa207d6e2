from __future__ import annotations

import json
import os
from typing import List, Optional

from .board import Board
from .errors import InvalidBoardError, PuzzleFormatError
from .render import board_to_csv, format_board

PUZZLE_ENV = "GENSUDOKU_PUZZLE"

FORMATS = ("json", "csv", "line")


def resolve_puzzle_path(path: Optional[str] = None) -> Optional[str]:
    """Explicit path, else $GENSUDOKU_PUZZLE, else None (use the built-in puzzle)."""
    return path or os.environ.get(PUZZLE_ENV) or None


def format_for(path: str) -> str:
    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        return "json"
    if ext == ".csv":
        return "csv"
    return "line"


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


# -----------------------------
# Parsing
# -----------------------------

def _to_int(raw: str, where: str) -> int:
    raw = raw.strip()
    if raw in ("", "."):
        return 0
    if not raw.isdecimal():
        raise PuzzleFormatError(f"{where}: not a number: {raw!r}")
    return int(raw)


def _parse_json(text: str) -> Board:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise PuzzleFormatError(f"Invalid JSON: {e}") from e
    if isinstance(raw, dict):
        raw = raw.get("rows")
    if not isinstance(raw, list) or not all(isinstance(row, list) for row in raw):
        raise PuzzleFormatError("JSON puzzle must be a list of rows (or {\"rows\": [...]}).")
    return Board.from_rows(raw)


def _parse_csv(text: str) -> Board:
    rows: List[List[int]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        rows.append([_to_int(v, f"line {lineno}") for v in line.split(",")])
    return Board.from_rows(rows)


def _cell(token: str) -> int:
    if token == ".":
        return 0
    if not token.isdecimal():
        raise PuzzleFormatError(f"Unexpected token {token!r} in puzzle.")
    return int(token)


def _parse_line(text: str) -> Board:
    """
    Either one character per cell ("53..7....", whitespace ignored) or,
    when any line holds several whitespace-separated tokens, one token per
    cell ("5 3 0 0 7 ..."), which also covers boards larger than 9x9.
    '0' or '.' mark empty cells.
    """
    lines = [line.split() for line in text.splitlines()]
    if any(len(tokens) > 1 for tokens in lines):
        cells = [_cell(t) for tokens in lines for t in tokens]
    else:
        cells = [_cell(ch) for tokens in lines for token in tokens for ch in token]
    try:
        return Board.from_flat(cells)
    except InvalidBoardError as e:
        raise PuzzleFormatError(str(e)) from e


def parse_board(text: str, fmt: str = "line") -> Board:
    if fmt not in FORMATS:
        raise ValueError(f"fmt must be one of {', '.join(FORMATS)}")
    if fmt == "json":
        return _parse_json(text)
    if fmt == "csv":
        return _parse_csv(text)
    return _parse_line(text)


# -----------------------------
# Files
# -----------------------------

def load_board(path: str, fmt: Optional[str] = None) -> Board:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise PuzzleFormatError(f"{path}: not UTF-8 text ({e.reason} at byte {e.start})") from e
    try:
        return parse_board(text, fmt or format_for(path))
    except PuzzleFormatError as e:
        raise PuzzleFormatError(f"{path}: {e}") from e


def dump_board(board: Board, fmt: str = "line") -> str:
    if fmt not in FORMATS:
        raise ValueError(f"fmt must be one of {', '.join(FORMATS)}")
    if fmt == "json":
        return json.dumps({"rows": board.rows()}, indent=2)
    if fmt == "csv":
        return board_to_csv(board).decode("utf-8")
    return format_board(board) + "\n"


def save_board(board: Board, path: str, fmt: Optional[str] = None) -> None:
    ensure_parent_dir(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_board(board, fmt or format_for(path)))

from __future__ import annotations

import html as _html

from .board import Board


def format_board(board: Board) -> str:
    """One row per line, digits separated by single spaces."""
    return "\n".join(" ".join(str(v) for v in board.row(x)) for x in range(board.n))


def board_to_csv(board: Board) -> bytes:
    lines = [",".join(str(v) for v in board.row(x)) for x in range(board.n)]
    return ("\n".join(lines) + "\n").encode("utf-8")


def board_to_html(board: Board, title: str) -> str:
    """
    Render the grid as an HTML table with thick block borders.
    Empty cells are left blank. Styling lives in the page CSS (table.sudoku).
    """
    n = board.n
    base = board.side

    out = [f"<div class='sudoku-wrap'><div class='sudoku-title'>{_html.escape(title)}</div>"]
    out.append("<table class='sudoku'>")
    for r in range(n):
        out.append("<tr>")
        for c in range(n):
            v = board.get(r, c)
            cls = []
            if r % base == 0:
                cls.append("top")
            if c % base == 0:
                cls.append("left")
            if (r + 1) % base == 0:
                cls.append("bottom")
            if (c + 1) % base == 0:
                cls.append("right")
            cls_attr = f" class='{' '.join(cls)}'" if cls else ""
            disp = "" if v == 0 else str(v)
            out.append(f"<td{cls_attr}>{disp}</td>")
        out.append("</tr>")
    out.append("</table></div>")
    return "".join(out)

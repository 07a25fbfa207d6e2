from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import streamlit as st

from gensudoku.board import Board
from gensudoku.errors import SudokuError
from gensudoku.puzzles import BUILTIN
from gensudoku.render import board_to_csv, board_to_html
from gensudoku.report import invalid_sections, section_report, summary
from gensudoku.solver import DEFAULT_STRATEGY, STRATEGIES, solve

log = logging.getLogger(__name__)

SUPPORTED_SIZES = [4, 9, 16]
DEFAULT_SIZE = 9
COPY_MAX_SIZE = 4


def cell_key(n: int, r: int, c: int) -> str:
    # include N so changing size doesn't collide with old widget state
    return f"cell_{n}_{r}_{c}"


def reset_board(n: int) -> None:
    for r in range(n):
        for c in range(n):
            st.session_state[cell_key(n, r, c)] = ""


def load_example(rows: List[List[int]]) -> None:
    n = len(rows)
    for r in range(n):
        for c in range(n):
            v = rows[r][c]
            st.session_state[cell_key(n, r, c)] = "" if v == 0 else str(v)


def parse_board(n: int) -> Tuple[Optional[Board], List[str]]:
    """
    Read cell widget values from session_state and build a Board.
    Returns (board, errors); board is None when any cell is unusable.
    Empty string or '0' => 0.
    """
    errors: List[str] = []
    rows: List[List[int]] = [[0] * n for _ in range(n)]

    for r in range(n):
        for c in range(n):
            raw = str(st.session_state.get(cell_key(n, r, c), "")).strip()
            if raw == "":
                continue

            if not raw.isdecimal():
                errors.append(f"Cell ({r+1},{c+1}) is not a number: '{raw}'")
                continue

            v = int(raw)
            if v <= n:
                rows[r][c] = v
            else:
                errors.append(f"Cell ({r+1},{c+1}) out of range: {v} (allowed 1..{n}, or blank/0).")

    if errors:
        return None, errors
    try:
        return Board.from_rows(rows), []
    except SudokuError as e:
        return None, [str(e)]


def show_board(board: Board, title: str) -> None:
    st.markdown(board_to_html(board, title), unsafe_allow_html=True)


def input_grid(n: int) -> None:
    """One text input per cell, with a narrow spacer column and row between blocks."""
    base = Board.empty(n).side
    widths = ([1.0] * base + [0.18]) * base
    widths.pop()

    for r in range(n):
        cols = st.columns(widths, gap="small")
        for c in range(n):
            key = cell_key(n, r, c)
            if key not in st.session_state:
                st.session_state[key] = ""
            cols[c + c // base].text_input(f"r{r+1}c{c+1}", key=key, label_visibility="collapsed")
        if (r + 1) % base == 0 and r + 1 != n:
            st.markdown("<div class='sudoku-spacer'></div>", unsafe_allow_html=True)


st.set_page_config(page_title="Sudoku Solver", layout="wide")

st.markdown(
    """
<style>
div[data-testid="stTextInput"] input {
    text-align: center;
    font-size: 22px !important;
    height: 2.8rem;
    padding: 0.25rem 0.25rem;
}
div[data-testid="stTextInput"] { margin-bottom: 0rem; }

.sudoku-wrap { margin-top: 0.5rem; }
.sudoku-title { font-size: 1.05rem; font-weight: 600; margin: 0.5rem 0 0.35rem 0; }
table.sudoku { border-collapse: collapse; }
table.sudoku td {
    width: 2.8rem;
    height: 2.8rem;
    text-align: center;
    vertical-align: middle;
    font-size: 22px;
    border: 1px solid rgba(49, 51, 63, 0.25);
}
table.sudoku td.top { border-top: 3px solid rgba(49, 51, 63, 0.65); }
table.sudoku td.left { border-left: 3px solid rgba(49, 51, 63, 0.65); }
table.sudoku td.bottom { border-bottom: 3px solid rgba(49, 51, 63, 0.65); }
table.sudoku td.right { border-right: 3px solid rgba(49, 51, 63, 0.65); }

.sudoku-spacer { height: 0.25rem; }
</style>
""",
    unsafe_allow_html=True,
)

st.title("Sudoku Solver")
st.caption(
    "Leave cells blank (or enter 0). Allowed values: 1..N. "
    "The solver is plain backtracking (first empty cell, digits in order), so large sparse boards can take a while."
)

with st.sidebar:
    st.header("Settings")
    if "size" not in st.session_state:
        st.session_state.size = DEFAULT_SIZE

    size = st.selectbox("Grid size", SUPPORTED_SIZES, index=SUPPORTED_SIZES.index(st.session_state.size))

    if size != st.session_state.size:
        st.session_state.size = size
        reset_board(size)

    # the copy strategy takes minutes on anything bigger than 4x4
    strategies = list(STRATEGIES) if st.session_state.size <= COPY_MAX_SIZE else [DEFAULT_STRATEGY]
    strategy = st.selectbox(
        "Strategy",
        strategies,
        index=strategies.index(DEFAULT_STRATEGY),
        help=f"'copy' builds a new board per step and is only offered up to {COPY_MAX_SIZE}x{COPY_MAX_SIZE}.",
    )

    st.divider()
    if st.button("Reset board", use_container_width=True):
        reset_board(st.session_state.size)

    examples = [name for name, rows in BUILTIN.items() if len(rows) == st.session_state.size]
    if examples:
        example = st.selectbox("Example", examples)
        if st.button("Load example", use_container_width=True):
            load_example(BUILTIN[example])

n = int(st.session_state.size)

st.subheader("Input")
with st.form("sudoku_form", clear_on_submit=False):
    input_grid(n)
    colA, colB, _ = st.columns([1, 1, 2])
    validate_clicked = colA.form_submit_button("Validate", use_container_width=True)
    solve_clicked = colB.form_submit_button("Solve", use_container_width=True)

if validate_clicked or solve_clicked:
    board, parse_errors = parse_board(n)
    if board is None:
        st.error("Please fix these input issues:")
        st.write("\n".join([f"- {e}" for e in parse_errors]))
    elif not board.is_valid():
        st.error("Conflicts found:")
        st.write("\n".join([f"- {c.describe()}" for c in board.conflicts()]))
        st.dataframe(invalid_sections(board), use_container_width=True, hide_index=True)
        show_board(board, "Current board (preview)")
    else:
        st.success("Board looks valid.")
        show_board(board, "Current board (preview)")

        if validate_clicked:
            st.json(summary(board))
            st.dataframe(section_report(board), use_container_width=True, hide_index=True)

        if solve_clicked:
            with st.spinner("Searching..."):
                solution = solve(board, strategy=strategy)
            log.info("Solve %dx%d with %s: solved=%s", n, n, strategy, solution.is_solved())
            if not solution.is_solved():
                st.error("No solution found (the puzzle may be unsolvable).")
            else:
                st.success("Solution found ✅")
                show_board(solution, "Solution")

                st.download_button(
                    "Download solution as CSV",
                    data=board_to_csv(solution),
                    file_name=f"sudoku_solution_{n}x{n}.csv",
                    mime="text/csv",
                    use_container_width=False,
                )
else:
    board, _ = parse_board(n)
    if board is not None:
        show_board(board, "Current board (preview)")

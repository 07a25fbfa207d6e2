from __future__ import annotations

from typing import Dict, Union

import pandas as pd

from .board import SECTION_KINDS, Board

REPORT_COLUMNS = ["section", "index", "values", "valid", "complete"]


def section_report(board: Board) -> pd.DataFrame:
    """
    One row per section: rows, then columns, then blocks (row-major).
    `index` is 0-based; `values` is the section as a space-joined string.
    """
    rows = []
    for kind in SECTION_KINDS:
        for index in range(board.n):
            sec = board.section(kind, index)
            rows.append(
                {
                    "section": kind,
                    "index": index,
                    "values": " ".join(str(v) for v in sec),
                    "valid": board.section_valid(sec),
                    "complete": board.section_complete(sec),
                }
            )
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def invalid_sections(board: Board) -> pd.DataFrame:
    df = section_report(board)
    return df[~df["valid"]].reset_index(drop=True)


def summary(board: Board) -> Dict[str, Union[int, bool]]:
    valid = board.is_valid()
    complete = board.is_complete()
    return {
        "n": board.n,
        "side": board.side,
        "filled": board.filled_count(),
        "valid": valid,
        "complete": complete,
        "solved": valid and complete,
    }

import pytest

from gensudoku.board import Board
from gensudoku.puzzles import EXPERT, SMALL
from tests.boards import DEAD_END_4x4, EXPERT_SOLUTION, SMALL_SOLUTION


@pytest.fixture
def expert():
    return Board.from_rows(EXPERT)


@pytest.fixture
def expert_solution():
    return Board.from_rows(EXPERT_SOLUTION)


@pytest.fixture
def small():
    return Board.from_rows(SMALL)


@pytest.fixture
def small_solution():
    return Board.from_rows(SMALL_SOLUTION)


@pytest.fixture
def dead_end():
    return Board.from_rows(DEAD_END_4x4)


@pytest.fixture
def contradictory():
    """Two 5s in the first row of an otherwise empty 9x9 board."""
    return Board.empty(9).put(0, 0, 5).put(0, 4, 5)

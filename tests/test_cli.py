import json

import pytest

from gensudoku.cli import EXIT_BAD_INPUT, EXIT_BAD_OUTPUT, EXIT_SOLVED, EXIT_UNSOLVED, main
from gensudoku.storage import PUZZLE_ENV, load_board
from tests.boards import DEAD_END_4x4, EXPERT_SOLUTION, pattern_rows


@pytest.fixture(autouse=True)
def no_puzzle_env(monkeypatch):
    monkeypatch.delenv(PUZZLE_ENV, raising=False)


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_builtin_small(capsys):
    assert main(["--builtin", "small"]) == EXIT_SOLVED
    assert capsys.readouterr().out == "1 2 3 4\n3 4 1 2\n2 1 4 3\n4 3 2 1\n"


def test_default_is_expert_puzzle(capsys):
    assert main([]) == EXIT_SOLVED
    out = capsys.readouterr().out
    assert out.splitlines()[0] == " ".join(str(v) for v in EXPERT_SOLUTION[0])
    assert len(out.splitlines()) == 9


def test_puzzle_from_env(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv(PUZZLE_ENV, write(tmp_path, "p.txt", "0030\n3002\n0100\n0020\n"))
    assert main([]) == EXIT_SOLVED
    assert capsys.readouterr().out.startswith("1 2 3 4\n")


def test_file_argument_wins_over_builtin(tmp_path, capsys):
    path = write(tmp_path, "p.csv", "1,2,3,4\n3,4,1,2\n2,1,4,3\n4,3,2,0\n")
    assert main([path, "--builtin", "expert"]) == EXIT_SOLVED
    assert capsys.readouterr().out.endswith("4 3 2 1\n")


def test_csv_output_and_output_file(tmp_path, capsys):
    out_path = tmp_path / "out" / "solution.json"
    assert main(["--builtin", "small", "--format", "csv", "-o", str(out_path)]) == EXIT_SOLVED
    assert capsys.readouterr().out == "1,2,3,4\n3,4,1,2\n2,1,4,3\n4,3,2,1\n"
    assert load_board(str(out_path)).is_solved()


def test_copy_strategy(capsys):
    assert main(["--builtin", "small", "--strategy", "copy"]) == EXIT_SOLVED
    assert capsys.readouterr().out.startswith("1 2 3 4\n")


def test_unsolvable_board(tmp_path, capsys):
    text = "\n".join("".join(str(v) for v in row) for row in DEAD_END_4x4)
    assert main([write(tmp_path, "dead.txt", text)]) == EXIT_UNSOLVED
    # the unchanged board is still printed
    assert capsys.readouterr().out == "0 1 0 0\n0 3 0 0\n2 0 0 0\n4 0 0 0\n"


def test_contradictory_board(tmp_path, caplog):
    path = write(tmp_path, "bad.txt", "5" + "0" * 3 + "5" + "0" * 76)
    assert main([path]) == EXIT_UNSOLVED
    assert "appears more than once in row 1" in caplog.text


@pytest.mark.parametrize(
    "name, text",
    [
        ("wrong.txt", "1" * 15),
        ("three.json", "[[1, 2, 3], [0, 0, 0], [0, 0, 0]]"),
        ("range.txt", "5000" * 4),
        ("super.csv", "\u00b2,0,0,0\n0,0,0,0\n0,0,0,0\n0,0,0,0\n"),
    ],
)
def test_bad_input(tmp_path, name, text):
    assert main([write(tmp_path, name, text)]) == EXIT_BAD_INPUT


def test_missing_file(tmp_path, caplog):
    assert main([str(tmp_path / "missing.txt")]) == EXIT_BAD_INPUT
    assert "Cannot load puzzle" in caplog.text


def test_non_utf8_file(tmp_path, caplog):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"\xff\xfe" + b"0" * 79)
    assert main([str(path)]) == EXIT_BAD_INPUT
    assert "not UTF-8" in caplog.text


def test_unwritable_output(tmp_path, capsys, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    out_path = blocker / "solution.txt"
    assert main(["--builtin", "small", "-o", str(out_path)]) == EXIT_BAD_OUTPUT
    # the board is printed before the write is attempted
    assert capsys.readouterr().out == "1 2 3 4\n3 4 1 2\n2 1 4 3\n4 3 2 1\n"
    assert "Cannot write" in caplog.text
    assert not out_path.exists()


def test_large_board(tmp_path, capsys):
    path = write(tmp_path, "big.json", json.dumps(pattern_rows(8, blank_every=4)))
    assert main([path]) == EXIT_SOLVED
    assert len(capsys.readouterr().out.splitlines()) == 64


def test_copy_strategy_too_deep(tmp_path, caplog):
    path = write(tmp_path, "big.json", json.dumps(pattern_rows(8, blank_every=4)))
    assert main([path, "--strategy", "copy"]) == EXIT_BAD_INPUT
    assert "too deep for the copy strategy" in caplog.text

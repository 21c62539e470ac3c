import sys

from inline_snapshot import snapshot

from boggle import solve
from boggle.test_utils import CATS_BOARD, TEST_WORDS


def run_solve(monkeypatch, capsys, *args):
    monkeypatch.setattr(sys, "argv", ["solve", "--dictionary", TEST_WORDS, *args])
    solve.main()
    return capsys.readouterr()


def test_scores(tmp_path, monkeypatch, capsys):
    boards = tmp_path / "boards.txt"
    boards.write_text(f"{CATS_BOARD}\n\nXXXXXXXXXXXXXXXX\ntooshort\n")
    captured = run_solve(monkeypatch, capsys, str(boards))
    assert captured.out == snapshot("CATSORENXXXXXXXX: 19\nXXXXXXXXXXXXXXXX: 0\n")
    assert "Skipping 'tooshort'" in captured.err
    assert "2 boards in" in captured.err


def test_print_words(tmp_path, monkeypatch, capsys):
    boards = tmp_path / "boards.txt"
    boards.write_text("QITXESXXX\n")
    captured = run_solve(
        monkeypatch, capsys, "--size", "55", "--print_words", str(boards)
    )
    # Too short for a 5x5 board.
    assert captured.out == ""

    boards.write_text("QITXXXESXXXXXXXXXXXXXXXXX\n")
    captured = run_solve(
        monkeypatch, capsys, "--size", "55", "--print_words", str(boards)
    )
    assert captured.out == snapshot(
        "QITXXXESXXXXXXXXXXXXXXXXX: 7\nQUIET\nQUIT\nQUITE\nQUITS\n"
    )


def test_print_paths(tmp_path, monkeypatch, capsys):
    boards = tmp_path / "boards.txt"
    boards.write_text("QITXXXESXXXXXXXXXXXXXXXXX\n")
    captured = run_solve(
        monkeypatch,
        capsys,
        "--size",
        "55",
        "--print_words",
        "--print_paths",
        str(boards),
    )
    lines = captured.out.splitlines()
    assert lines[2] == snapshot("QUIT\t(0,0) (0,1) (0,2)")

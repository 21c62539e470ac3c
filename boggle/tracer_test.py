from inline_snapshot import snapshot

from boggle.board import Board
from boggle.neighbors import Cell, is_adjacent
from boggle.test_utils import cats_board
from boggle.tracer import find_path, iter_paths, trace


def assert_valid_path(board: Board, word: str, path):
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert is_adjacent(a, b)
    assert board.spell(path) == word


def test_trace_cats():
    bd = cats_board()
    assert trace(bd, "CATS") == [(Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(0, 3))]
    assert find_path(bd, "cats") == ((0, 0), (0, 1), (0, 2), (0, 3))


def test_trace_winding():
    bd = cats_board()
    path = find_path(bd, "SEAT")
    assert path == snapshot((Cell(0, 3), Cell(1, 2), Cell(0, 1), Cell(0, 2)))
    assert_valid_path(bd, "SEAT", path)


def test_not_traceable():
    bd = cats_board()
    # E-A-S: A and S don't touch.
    assert trace(bd, "EAST") == []
    assert find_path(bd, "EAST") is None
    # Only one E.
    assert trace(bd, "TREE") == []
    # No Z anywhere.
    assert trace(bd, "ZEBRA") == []
    assert trace(bd, "C4TS") == []


def test_all_paths():
    bd = Board([["A", "A"], ["A", "A"]])
    paths = trace(bd, "AA")
    assert len(paths) == 12
    assert len(set(paths)) == 12
    paths = trace(bd, "aaaa")
    assert len(paths) == 24
    for path in paths:
        assert_valid_path(bd, "AAAA", path)
    assert trace(bd, "AAAAA") == []


def test_path_order_is_row_major():
    bd = Board([["A", "B"], ["B", "A"]])
    assert trace(bd, "AB") == [
        (Cell(0, 0), Cell(0, 1)),
        (Cell(0, 0), Cell(1, 0)),
        (Cell(1, 1), Cell(0, 1)),
        (Cell(1, 1), Cell(1, 0)),
    ]


def test_multi_letter_tokens():
    # Qu I T
    # X  E S
    # X  X X
    bd = Board.from_config("QITXESXXX", (3, 3))
    assert find_path(bd, "QUIT") == (Cell(0, 0), Cell(0, 1), Cell(0, 2))
    for word in ("QUITE", "QUIET", "QUITS"):
        for path in trace(bd, word):
            assert_valid_path(bd, word, path)
        assert trace(bd, word)
    # The Qu cube can't be used as a bare Q.
    assert trace(bd, "QIT") == []
    assert trace(bd, "Q") == []
    assert trace(bd, "U") == []


def test_empty_word():
    bd = cats_board()
    assert trace(bd, "") == [()]


def test_buffer_restored():
    bd = cats_board()
    buf = [Cell(3, 3)]
    paths = iter_paths(bd, "ORE", None, buf)
    first = next(paths)
    assert first == (Cell(3, 3), Cell(1, 0), Cell(1, 1), Cell(1, 2))
    paths.close()
    assert buf == [Cell(3, 3)]

    # The buffer's cells are off limits.
    assert [*iter_paths(bd, "CAT", None, [Cell(0, 1)])] == []

"""Trace a single word through adjacent, unused cells of a Boggle board."""

from typing import Iterator

from boggle.board import Board
from boggle.neighbors import Cell, is_adjacent

Path = tuple[Cell, ...]


def iter_paths(
    board: Board, word: str, prev: Cell | None = None, path: list[Cell] | None = None
) -> Iterator[Path]:
    """Yield every sequence of cells spelling word, in row-major search order.

    path is the buffer of cells used so far. It is left as it was found, even
    if the caller stops iterating early.
    """
    if path is None:
        path = []
    if word == "":
        yield tuple(path)
        return
    for cell in board.cells():
        token = board[cell]
        if word.startswith(token) and is_adjacent(prev, cell) and cell not in path:
            path.append(cell)
            try:
                yield from iter_paths(board, word[len(token) :], cell, path)
            finally:
                path.pop()


def trace(board: Board, word: str) -> list[Path]:
    """All the distinct paths that spell word on the board."""
    return [*iter_paths(board, word.upper())]


def find_path(board: Board, word: str) -> Path | None:
    """The first path that spells word, or None if it can't be found."""
    return next(iter_paths(board, word.upper()), None)

from typing import Callable

from boggle.board import Board
from boggle.neighbors import Cell
from boggle.trie import Lexicon

MIN_WORD_LENGTH = 4

OnWord = Callable[[str, tuple[Cell, ...]], None]


def word_score(word: str) -> int:
    """A 4-letter word is worth 1 point, 5 letters earn 2, and so on."""
    return max(0, len(word) - MIN_WORD_LENGTH + 1)


class Boggler:
    """Find every word on a board with a prefix-pruned depth-first search."""

    _lexicon: Lexicon
    _board: Board

    def __init__(self, lexicon: Lexicon, board: Board, prune: bool = True):
        self._lexicon = lexicon
        self._board = board
        # Turning this off doesn't change the results, it just makes things slow.
        self.prune = prune

    def find_words(self, claimed: set[str], on_word: OnWord | None = None) -> list[str]:
        """Find all the words not already in claimed, and claim them.

        Words come back in the order they're found, starting from each cell
        in row-major order. on_word is called with each word and its path.
        """
        out: list[str] = []
        for cell in self._board.cells():
            self.enumerate_from(cell, claimed, "", [], out, on_word)
        return out

    def enumerate_from(
        self,
        cell: Cell,
        claimed: set[str],
        so_far: str,
        visited: list[Cell],
        out: list[str],
        on_word: OnWord | None = None,
    ):
        visited.append(cell)
        so_far += self._board[cell]
        try:
            if self.prune and not self._lexicon.contains_prefix(so_far):
                return
            if (
                len(so_far) >= MIN_WORD_LENGTH
                and so_far not in claimed
                and self._lexicon.contains_word(so_far)
            ):
                claimed.add(so_far)
                out.append(so_far)
                if on_word:
                    on_word(so_far, tuple(visited))

            for n in self._board.neighbors(cell):
                if n not in visited:
                    self.enumerate_from(n, claimed, so_far, visited, out, on_word)
        finally:
            visited.pop()

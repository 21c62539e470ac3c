import functools
from pathlib import Path

from boggle.board import Board
from boggle.trie import PyTrie

TEST_WORDS = str(Path(__file__).parent.parent / "testdata" / "words.txt")

# C A T S
# O R E N
# X X X X
# X X X X
CATS_BOARD = "CATSORENXXXXXXXX"


class WordSet:
    """A lexicon backed by plain sets, to test against something other than a trie."""

    def __init__(self, words):
        self.words = {w.upper() for w in words}
        self.prefixes = {w[:i] for w in self.words for i in range(len(w) + 1)}

    def contains_word(self, word: str) -> bool:
        return word.upper() in self.words

    def contains_prefix(self, prefix: str) -> bool:
        return prefix.upper() in self.prefixes


@functools.cache
def get_trie() -> PyTrie:
    return PyTrie.create_from_file(TEST_WORDS)


def get_word_set() -> WordSet:
    with open(TEST_WORDS) as f:
        return WordSet(line.strip() for line in f if line.strip().isalpha())


LEXICONS = [get_trie, get_word_set]


def cats_board() -> Board:
    return Board.from_config(CATS_BOARD, (4, 4))

"""Decide whether a word entered by the player counts."""

import enum
from dataclasses import dataclass

from boggle.board import Board
from boggle.boggler import MIN_WORD_LENGTH
from boggle.tracer import Path, find_path
from boggle.trie import Lexicon


class Rejection(enum.Enum):
    TOO_SHORT = "too short"
    ALREADY_CLAIMED = "already found"
    NOT_A_WORD = "not in the dictionary"
    NOT_ON_BOARD = "not on the board"


@dataclass(frozen=True)
class Verdict:
    word: str
    rejection: Rejection | None = None
    path: Path | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    def __bool__(self):
        return self.accepted


def check_word(word: str, board: Board, lexicon: Lexicon, claimed: set[str]) -> Verdict:
    """Apply the rules in order, cheapest first.

    The word must be at least four letters long, not already claimed, in the
    dictionary and traceable on the board. An accepted verdict carries one
    path that spells the word. claimed is not modified.
    """
    word = word.upper()
    if len(word) < MIN_WORD_LENGTH:
        return Verdict(word, Rejection.TOO_SHORT)
    if word in claimed:
        return Verdict(word, Rejection.ALREADY_CLAIMED)
    if not lexicon.contains_word(word):
        return Verdict(word, Rejection.NOT_A_WORD)
    path = find_path(board, word)
    if path is None:
        return Verdict(word, Rejection.NOT_ON_BOARD)
    return Verdict(word, path=path)


def is_valid(word: str, board: Board, lexicon: Lexicon, claimed: set[str]) -> bool:
    return check_word(word, board, lexicon, claimed).accepted

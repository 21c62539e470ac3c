"""One game of Boggle: the board, the words claimed so far and whose they are.

A round moves through the phases

  AWAITING_BOARD_SETUP -> HUMAN_TURN -> COMPUTER_TURN -> ROUND_COMPLETE

and new_game() takes a completed round back to the start.
"""

import enum
from dataclasses import dataclass
from typing import Protocol

from boggle.board import Board
from boggle.boggler import Boggler, word_score
from boggle.tracer import Path
from boggle.trie import Lexicon
from boggle.validity import Verdict, check_word


class Player(enum.Enum):
    HUMAN = "human"
    COMPUTER = "computer"


class Phase(enum.Enum):
    AWAITING_BOARD_SETUP = enum.auto()
    HUMAN_TURN = enum.auto()
    COMPUTER_TURN = enum.auto()
    ROUND_COMPLETE = enum.auto()


class PhaseError(RuntimeError):
    pass


@dataclass(frozen=True)
class FoundWord:
    word: str
    player: Player
    path: Path

    @property
    def score(self) -> int:
        return word_score(self.word)


class Display(Protocol):
    def highlight(self, board: Board, path: Path): ...

    def record_word(self, found: FoundWord): ...


class Round:
    lexicon: Lexicon
    board: Board | None
    claimed: set[str]
    found: list[FoundWord]

    def __init__(self, lexicon: Lexicon, display: Display | None = None):
        self.lexicon = lexicon
        self.display = display
        self.phase = Phase.AWAITING_BOARD_SETUP
        self.board = None
        self.claimed = set()
        self.found = []

    def _expect(self, phase: Phase):
        if self.phase != phase:
            raise PhaseError(f"Can't do that during {self.phase.name}")

    def _record(self, found: FoundWord):
        self.claimed.add(found.word)
        self.found.append(found)
        if self.display:
            self.display.record_word(found)

    def set_board(self, board: Board):
        self._expect(Phase.AWAITING_BOARD_SETUP)
        self.board = board
        self.claimed = set()
        self.found = []
        self.phase = Phase.HUMAN_TURN

    def submit(self, word: str) -> Verdict:
        """Check a word from the human player, and claim it if it's valid."""
        self._expect(Phase.HUMAN_TURN)
        assert self.board
        verdict = check_word(word, self.board, self.lexicon, self.claimed)
        if verdict.accepted:
            assert verdict.path is not None
            if self.display:
                self.display.highlight(self.board, verdict.path)
            self._record(FoundWord(verdict.word, Player.HUMAN, verdict.path))
        return verdict

    def computer_turn(self) -> list[str]:
        """Find every word on the board the human didn't."""
        self._expect(Phase.HUMAN_TURN)
        assert self.board
        self.phase = Phase.COMPUTER_TURN
        boggler = Boggler(self.lexicon, self.board)
        words = boggler.find_words(
            self.claimed,
            lambda word, path: self._record(FoundWord(word, Player.COMPUTER, path)),
        )
        self.phase = Phase.ROUND_COMPLETE
        return words

    def new_game(self):
        self._expect(Phase.ROUND_COMPLETE)
        self.phase = Phase.AWAITING_BOARD_SETUP
        self.board = None
        self.claimed = set()
        self.found = []

    def words(self, player: Player) -> list[str]:
        return [f.word for f in self.found if f.player == player]

    def score(self, player: Player) -> int:
        return sum(f.score for f in self.found if f.player == player)

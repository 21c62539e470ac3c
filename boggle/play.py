#!/usr/bin/env python
"""Play Boggle against the computer in the terminal.

You go first, typing in every word you can find. Then the computer finds all
the words you missed.
"""

import argparse
import random
import sys
import time
from typing import Callable, TextIO

from boggle.args import add_standard_args, get_dims_from_args, get_rng_from_args
from boggle.board import Board
from boggle.dice import roll_board
from boggle.game import FoundWord, Player, Round
from boggle.neighbors import Cell
from boggle.tracer import Path
from boggle.trie import Lexicon, PyTrie

WELCOME = (
    "Welcome! You're about to play an intense game of Boggle against a "
    "dictionary-toting hunk of silicon. The good news is that you might "
    "improve your vocabulary a bit."
)

INSTRUCTIONS = (
    "The boggle board is a grid of letter cubes. You go first, entering all "
    "the words you can find by tracing adjoining letters. Two letters adjoin "
    "if they are next to each other horizontally, vertically, or diagonally. "
    "A cube can only be used once in a word. Words must be at least 4 letters "
    "long and can only be counted once. A 4-letter word is worth 1 point, "
    "5 letters earn 2 points, and so on. When you're out of ideas, the "
    "computer will find all the remaining words."
)

Ask = Callable[[str], str | None]


def render_board(board: Board, path: Path = ()) -> str:
    """Draw the board, with the cells on path in [brackets]."""
    on_path = set(path)
    lines = []
    for row in range(board.num_rows):
        cells = []
        for col in range(board.num_cols):
            cell = Cell(row, col)
            token = board[cell].capitalize()
            if cell in on_path:
                cells.append(f"[{token}]".ljust(4))
            else:
                cells.append(f" {token} ".ljust(4))
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


class TerminalDisplay:
    def __init__(self, out: TextIO | None = None, pause_s: float = 0.5):
        self.out = out or sys.stdout
        self.pause_s = pause_s

    def show(self, board: Board):
        print(render_board(board), file=self.out)

    def highlight(self, board: Board, path: Path):
        print(render_board(board, path), file=self.out)
        if self.pause_s:
            time.sleep(self.pause_s)

    def record_word(self, found: FoundWord):
        who = "You" if found.player == Player.HUMAN else "Computer"
        plural = "s" if found.score != 1 else ""
        print(f"{who}: {found.word} ({found.score} point{plural})", file=self.out)


def input_ask(prompt: str) -> str | None:
    """Prompt on stdin; None at end of input."""
    try:
        return input(prompt)
    except EOFError:
        return None


def is_yes(response: str | None) -> bool:
    return response is not None and response.strip().upper() in ("Y", "YES")


def load_lexicon(path: str, ask: Ask) -> PyTrie | None:
    """Load the dictionary, asking for another file if it can't be read."""
    while True:
        try:
            return PyTrie.create_from_file(path)
        except OSError as e:
            print(f"Unable to load dictionary {path}: {e}")
            response = ask("Enter the path to a dictionary file (ENTER to quit): ")
            if not response:
                return None
            path = response.strip()


def configure_board(dims: tuple[int, int], ask: Ask) -> Board | None:
    n = dims[0] * dims[1]
    while True:
        config = ask(f"Please enter your configuration. It must be {n} letters: ")
        if config is None:
            return None
        try:
            return Board.from_config(config, dims)
        except ValueError as e:
            print(f"{e}. Enter another string.")


def setup_board(dims: tuple[int, int], rng: random.Random, ask: Ask) -> Board | None:
    if is_yes(ask("Would you like to configure the board? ")):
        return configure_board(dims, ask)
    return roll_board(dims, rng)


def human_turn(game: Round, ask: Ask):
    while True:
        word = ask("Please enter a word found in the puzzle (ENTER to finish): ")
        if not word or not word.strip():
            return
        verdict = game.submit(word.strip())
        if not verdict:
            assert verdict.rejection
            print(f"Sorry, {verdict.word} is invalid: {verdict.rejection.value}.")


def print_summary(game: Round):
    for player, name in ((Player.HUMAN, "You"), (Player.COMPUTER, "Computer")):
        words = game.words(player)
        print(f"{name}: {len(words)} words, {game.score(player)} points")


def play(
    lexicon: Lexicon,
    dims: tuple[int, int],
    rng: random.Random,
    ask: Ask = input_ask,
    display: TerminalDisplay | None = None,
    board_config: str | None = None,
):
    display = display or TerminalDisplay()
    game = Round(lexicon, display)
    while True:
        if board_config:
            board = Board.from_config(board_config, dims)
        else:
            board = setup_board(dims, rng, ask)
        if board is None:
            return
        game.set_board(board)
        display.show(board)

        human_turn(game, ask)
        print("My turn!")
        game.computer_turn()
        print_summary(game)

        if not is_yes(ask("Would you like to play again? ")):
            return
        board_config = None
        game.new_game()


def main():
    parser = argparse.ArgumentParser(description="Play Boggle against the computer.")
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "--board",
        type=str,
        default=None,
        help="Letters for the first board, row by row. Skips the setup prompt.",
    )
    parser.add_argument(
        "--skip_instructions",
        action="store_true",
        help="Don't print the welcome message and instructions.",
    )
    args = parser.parse_args()
    dims = get_dims_from_args(args)
    rng = get_rng_from_args(args)

    if args.board:
        try:
            Board.from_config(args.board, dims)
        except ValueError as e:
            parser.error(str(e))

    lexicon = load_lexicon(args.dictionary, input_ask)
    if lexicon is None:
        sys.exit(1)

    if not args.skip_instructions:
        print(WELCOME)
        print()
        print(INSTRUCTIONS)
        input_ask("\nHit return when you're ready...")

    play(lexicon, dims, rng, board_config=args.board)


if __name__ == "__main__":
    main()

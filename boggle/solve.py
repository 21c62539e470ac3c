#!/usr/bin/env python
"""Find all the words on Boggle boards and print their scores."""

import argparse
import fileinput
import sys
import time

from tqdm import tqdm

from boggle.args import add_standard_args, get_dims_from_args, get_trie_from_args
from boggle.board import Board
from boggle.boggler import Boggler, word_score
from boggle.tracer import find_path
from boggle.trie import Lexicon


def format_path(path) -> str:
    return " ".join(f"({row},{col})" for row, col in path)


def print_board(t: Lexicon, board: Board, config: str, words: bool, paths: bool):
    found = Boggler(t, board).find_words(set())
    score = sum(word_score(word) for word in found)
    print(f"{config}: {score}")
    if not words:
        return
    for word in sorted(found):
        if paths:
            print(f"{word}\t{format_path(find_path(board, word))}")
        else:
            print(word)


def main():
    parser = argparse.ArgumentParser(description="Find all the words on boggle boards")
    add_standard_args(parser)
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing boards, or stdin"
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print all the words that can be found on each board.",
    )
    parser.add_argument(
        "--print_paths",
        action="store_true",
        help="With --print_words, also print the cells that spell each word.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr.",
    )

    args = parser.parse_args()
    dims = get_dims_from_args(args)
    t = get_trie_from_args(args)

    start_s = time.time()
    n = 0
    with fileinput.input(files=args.files) as lines:
        for line in tqdm(lines, disable=not args.progress, unit=" boards"):
            config = line.strip()
            if not config:
                continue
            try:
                board = Board.from_config(config, dims)
            except ValueError as e:
                sys.stderr.write(f"Skipping {config!r}: {e}\n")
                continue
            print_board(t, board, config, args.print_words, args.print_paths)
            n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s else 0
    sys.stderr.write(f"{n} boards in {elapsed_s:.2f}s = {rate:.2f} boards/s\n")


if __name__ == "__main__":
    main()
